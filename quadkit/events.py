"""Window event handling that feeds an ``InputState``."""

from __future__ import annotations

from typing import Any, Hashable, Optional

from quadkit.geometry import Vec2
from quadkit.input import InputEvent, InputState, MouseButton, Touch, TouchPhase

__all__ = ["Stage"]


class Stage:
    """Receives raw window events and records them for game code and subscribers."""

    def __init__(self, state: Optional[InputState] = None) -> None:
        self.state = state if state is not None else InputState()

    def __repr__(self) -> str:
        return f"Stage(state={self.state!r})"

    def resize_event(self, width: float, height: float) -> None:
        """Record the new window size."""
        self.state.screen_width = width
        self.state.screen_height = height

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse motion; moves the cursor only while it is grabbed."""
        state = self.state
        if state.cursor_grabbed:
            state.raw_mouse_position = state.raw_mouse_position + Vec2(x, y)
            position = state.raw_mouse_position
            state.broadcast(InputEvent("mouse_motion_event", (position.x, position.y)))

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Absolute mouse motion; ignored while the cursor is grabbed."""
        state = self.state
        if not state.cursor_grabbed:
            state.raw_mouse_position = Vec2(x, y)
            state.broadcast(InputEvent("mouse_motion_event", (x, y)))

    def mouse_wheel_event(self, x: float, y: float) -> None:
        """Record the wheel movement of this frame."""
        self.state.wheel = Vec2(x, y)
        self.state.broadcast(InputEvent("mouse_wheel_event", (x, y)))

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went down at (x, y)."""
        state = self.state
        state.mouse_down.add(button)
        state.mouse_pressed.add(button)
        state.broadcast(InputEvent("mouse_button_down_event", (button, x, y)))
        if not state.cursor_grabbed:
            state.raw_mouse_position = Vec2(x, y)

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button was released at (x, y)."""
        state = self.state
        state.mouse_down.discard(button)
        state.mouse_released.add(button)
        state.broadcast(InputEvent("mouse_button_up_event", (button, x, y)))
        if not state.cursor_grabbed:
            state.raw_mouse_position = Vec2(x, y)

    def touch_event(self, phase: TouchPhase, id_: int, x: float, y: float) -> None:
        """Record a touch; optionally mirror it as left-button mouse input."""
        state = self.state
        state.touch_points[id_] = Touch(id_, phase, Vec2(x, y))

        if state.simulating_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)

        state.broadcast(InputEvent("touch_event", (phase, id_, x, y)))

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        """Queue a typed character."""
        state = self.state
        state.chars_pressed_queue.append(character)
        state.chars_pressed_ui_queue.append(character)
        state.broadcast(InputEvent("char_event", (character, modifiers, repeat)))

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        """A key went down; auto-repeats do not count as new presses."""
        state = self.state
        state.keys_down.add(keycode)
        if not repeat:
            state.keys_pressed.add(keycode)
        state.broadcast(InputEvent("key_down_event", (keycode, modifiers, repeat)))

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        """A key was released."""
        state = self.state
        state.keys_down.discard(keycode)
        state.keys_released.add(keycode)
        state.broadcast(InputEvent("key_up_event", (keycode, modifiers)))

    def quit_requested_event(self) -> bool:
        """Handle a close request; returns True when the quit is cancelled."""
        state = self.state
        if state.prevent_quit_event:
            state.quit_requested = True
            return True
        return False

    def end_frame(self) -> None:
        """Reset per-frame input and age the touch points."""
        state = self.state
        state.wheel = Vec2(0.0, 0.0)
        state.keys_pressed.clear()
        state.keys_released.clear()
        state.mouse_pressed.clear()
        state.mouse_released.clear()
        state.quit_requested = False

        finished = (TouchPhase.ENDED, TouchPhase.CANCELLED)
        state.touch_points = {
            key: touch
            for key, touch in state.touch_points.items()
            if touch.phase not in finished
        }
        for touch in state.touch_points.values():
            if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED):
                touch.phase = TouchPhase.STATIONARY