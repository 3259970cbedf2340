"""Mouse, keyboard and touch state, queried once per frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Hashable, List, Optional, Set, Tuple

from quadkit.geometry import Vec2

__all__ = ["TouchPhase", "MouseButton", "Touch", "InputEvent", "InputState"]


class TouchPhase(enum.Enum):
    """Lifecycle stage of a touch point."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    """Buttons a mouse event can refer to."""

    RIGHT = "right"
    LEFT = "left"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass
class Touch:
    """A touch point with its id, phase and position."""

    id: int
    phase: TouchPhase
    position: Vec2


_EVENT_ARITY: Dict[str, int] = {
    "mouse_motion_event": 2,
    "mouse_wheel_event": 2,
    "mouse_button_down_event": 3,
    "mouse_button_up_event": 3,
    "char_event": 3,
    "key_down_event": 3,
    "key_up_event": 2,
    "touch_event": 4,
}


@dataclass(frozen=True)
class InputEvent:
    """A recorded input event.

    ``kind`` is the name of the handler method that receives it and ``args``
    are the positional arguments passed to that method when it is replayed.
    """

    kind: str
    args: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        arity = _EVENT_ARITY.get(self.kind)
        if arity is None:
            raise ValueError(f"unknown input event kind: {self.kind!r}")
        if len(self.args) != arity:
            raise ValueError(
                f"{self.kind} takes {arity} arguments, got {len(self.args)}"
            )

    def _replay(self, handler: Any) -> None:
        getattr(handler, self.kind)(*self.args)


@dataclass
class InputState:
    """Input gathered from window events and read by game code."""

    screen_width: float = 800.0
    screen_height: float = 600.0
    dpi_scale: float = 1.0

    simulating_mouse_with_touch: bool = True

    keys_down: Set[Hashable] = field(default_factory=set)
    keys_pressed: Set[Hashable] = field(default_factory=set)
    keys_released: Set[Hashable] = field(default_factory=set)
    mouse_down: Set[MouseButton] = field(default_factory=set)
    mouse_pressed: Set[MouseButton] = field(default_factory=set)
    mouse_released: Set[MouseButton] = field(default_factory=set)
    touch_points: Dict[int, Touch] = field(default_factory=dict)
    chars_pressed_queue: List[str] = field(default_factory=list)
    chars_pressed_ui_queue: List[str] = field(default_factory=list)
    raw_mouse_position: Vec2 = Vec2(0.0, 0.0)
    last_mouse_position: Optional[Vec2] = None
    wheel: Vec2 = Vec2(0.0, 0.0)

    prevent_quit_event: bool = False
    quit_requested: bool = False

    cursor_grabbed: bool = False

    input_events: List[List[InputEvent]] = field(default_factory=list)

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window, or release it."""
        self.cursor_grabbed = grab

    def mouse_position(self) -> Tuple[float, float]:
        """Mouse position in logical pixels."""
        return (
            self.raw_mouse_position.x / self.dpi_scale,
            self.raw_mouse_position.y / self.dpi_scale,
        )

    def _to_local(self, pixel_pos: Vec2) -> Vec2:
        scaled = Vec2(pixel_pos.x / self.screen_width, pixel_pos.y / self.screen_height)
        return scaled * 2.0 - Vec2(1.0, 1.0)

    def mouse_position_local(self) -> Vec2:
        """Mouse position mapped to the range [-1, 1] on both axes."""
        x, y = self.mouse_position()
        return self._to_local(Vec2(x, y))

    def mouse_delta_position(self) -> Vec2:
        """Previous local mouse position minus the current one; records the current one."""
        current = self.mouse_position_local()
        last = self.last_mouse_position if self.last_mouse_position is not None else current
        self.last_mouse_position = current
        return last - current

    def mouse_wheel(self) -> Tuple[float, float]:
        """Wheel movement received this frame."""
        return (self.wheel.x, self.wheel.y)

    def simulate_mouse_with_touch(self, option: bool) -> None:
        """Choose whether touches also raise mouse events (on by default)."""
        self.simulating_mouse_with_touch = option

    def touches(self) -> List[Touch]:
        """Current touches with positions in pixels."""
        return [replace(touch) for touch in self.touch_points.values()]

    def touches_local(self) -> List[Touch]:
        """Current touches with positions mapped to [-1, 1]."""
        return [
            replace(touch, position=self._to_local(touch.position))
            for touch in self.touch_points.values()
        ]

    def is_key_pressed(self, key_code: Hashable) -> bool:
        """Whether the key went down this frame."""
        return key_code in self.keys_pressed

    def is_key_down(self, key_code: Hashable) -> bool:
        """Whether the key is held."""
        return key_code in self.keys_down

    def is_key_released(self, key_code: Hashable) -> bool:
        """Whether the key was released this frame."""
        return key_code in self.keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recently typed character off the queue, or None."""
        return self.chars_pressed_queue.pop() if self.chars_pressed_queue else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """One of the keys pressed this frame, or None."""
        return next(iter(self.keys_pressed), None)

    def clear_input_queue(self) -> None:
        """Drop every queued character."""
        self.chars_pressed_queue.clear()
        self.chars_pressed_ui_queue.clear()

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the button is held."""
        return button in self.mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the button went down this frame."""
        return button in self.mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        """Whether the button was released this frame."""
        return button in self.mouse_released

    def prevent_quit(self) -> None:
        """Turn window close requests into ``is_quit_requested`` flags."""
        self.prevent_quit_event = True

    def is_quit_requested(self) -> bool:
        """Whether closing the window was requested this frame."""
        return self.quit_requested

    def register_input_subscriber(self) -> int:
        """Add an event subscriber and return its id."""
        self.input_events.append([])
        return len(self.input_events) - 1

    def broadcast(self, event: InputEvent) -> None:
        """Queue ``event`` for every subscriber."""
        for queue in self.input_events:
            queue.append(event)

    def repeat_all_input(self, subscriber: int, handler: Any) -> None:
        """Replay the subscriber's queued events on ``handler``, then empty the queue."""
        queue = self.input_events[subscriber]
        for event in queue:
            event._replay(handler)
        queue.clear()