# quadkit

quadkit is a set of building blocks for small 2D games. None of them needs a
window or a GPU, so you can use them on their own, in tests, or inside any
render loop.

- `quadkit.color` has the frozen `Color` type (`from_rgba`, `from_hex`,
  `from_bytes`, `to_bytes`, `to_tuple`), named colors such as `RED`, `WHITE`
  and `BLANK`, `color_u8`, and HSL conversion with `hsl_to_rgb` and
  `rgb_to_hsl`.
- `quadkit.geometry` has `Vec2`, `Rect`, `RectOffset` and `Circle`, plus
  `polar_to_cartesian`, `cartesian_to_polar` and `clamp`.
- `quadkit.generational` has `GenerationalStorage`, a slot storage. Its
  `GenerationalId` handles stop resolving once their slot is freed or reused.
- `quadkit.storage` has `Storage`, which holds one value per exact type. The
  module-level `store`, `get` and `try_get` work on a shared instance.
- `quadkit.animation` has `Animation`, `AnimationFrame` and `AnimatedSprite`.
  An `AnimatedSprite` plays sprite-sheet rows, one row per animation.
- `quadkit.mouse_camera` has `MouseCamera`, a camera whose offset and zoom
  follow mouse drags and wheel turns.
- `quadkit.shaders` has `preprocess_shader`, which expands `#include "name"`
  directives from a `PreprocessorConfig`.
- `quadkit.coroutines` has `CoroutinesContext` and `Coroutine`, which run
  generator-based coroutines once per frame, and `wait_seconds`.
- `quadkit.state_machine` has `State` and `StateMachine`. A state can have an
  update callback, an entry coroutine and an exit callback.
- `quadkit.input` has `InputState`, which tracks keys, mouse buttons, the
  wheel, touches and typed characters. It also has `TouchPhase`,
  `MouseButton`, `Touch` and `InputEvent`. Subscribers can replay the queued
  events.
- `quadkit.events` has `Stage`. It turns raw window events into `InputState`
  updates and resets the per-frame input in `end_frame`.

## Installing

```
pip install quadkit
```

quadkit needs nothing outside the Python standard library.

## Examples

### Colors and geometry

```python
from quadkit.color import Color, hsl_to_rgb, rgb_to_hsl
from quadkit.geometry import Circle, Rect, Vec2

sky = Color.from_hex(0x3CA7D5)
h, s, l = rgb_to_hsl(sky)
again = hsl_to_rgb(h, s, l)

area = Rect(0.0, 0.0, 100.0, 50.0)
area.contains(Vec2(10.0, 10.0))                  # True
Circle(120.0, 25.0, 30.0).overlaps_rect(area)    # True
```

### Coroutines

A coroutine is a generator. Each bare `yield` waits for the next frame, and
the value the generator returns becomes the coroutine's result. Every call to
`update` advances all automatically polled coroutines by one frame:

```python
from quadkit.coroutines import CoroutinesContext, wait_seconds

ctx = CoroutinesContext()

def intro():
    yield from wait_seconds(ctx, 1.5)
    return "done"

task = ctx.start(intro(), has_value=True)
while not task.is_done():
    ctx.update(1 / 60)
print(task.retrieve())   # "done"
```

After `set_manual_poll()`, `update` skips a coroutine. It then advances only
through `poll(delta_time)`, and `wait_seconds` counts time on the
coroutine's own timeline.

### State machine

```python
from quadkit.state_machine import State, StateMachine

machine = StateMachine()
machine.add_state(0, State().with_update(lambda target, dt: None))
machine.add_state(1, State().with_on_end(lambda target: print("leaving 1")))
machine.set_state(1)
machine.update(target=None, frame_time=1 / 60)
machine.state()   # 1
```

A state change requested with `set_state` takes effect at the next `update`.
State ids range from 0 to 31.

### Input

```python
from quadkit.events import Stage
from quadkit.input import InputState, MouseButton

state = InputState()
stage = Stage(state)
stage.mouse_button_down_event(MouseButton.LEFT, 10.0, 20.0)
state.is_mouse_button_pressed(MouseButton.LEFT)  # True
stage.end_frame()
state.is_mouse_button_pressed(MouseButton.LEFT)  # False
state.is_mouse_button_down(MouseButton.LEFT)     # still True
```

By default, touches also act as left mouse button input. Turn this off with
`state.simulate_mouse_with_touch(False)`.

## What quadkit does not do

quadkit opens no window and renders nothing. It plays no sound, loads no
files or assets, and has no error types of its own. Whatever host loop you
use must feed window events into `Stage` and call `end_frame` once per
frame. It must also pass the frame time to `CoroutinesContext.update`,
`AnimatedSprite.update` and `StateMachine.update`.

## Running the tests

```
pip install quadkit[test]
pytest
```