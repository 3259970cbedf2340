"""A small state machine with per-state update, entry coroutine and exit hooks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional

from quadkit.coroutines import Coroutine

__all__ = ["State", "StateMachine", "MAX_STATE"]

MAX_STATE = 32

UpdateFn = Callable[[Any, float], None]
CoroutineFn = Callable[[Any], Coroutine]
OnEndFn = Callable[[Any], None]


@dataclass(frozen=True)
class State:
    """Callbacks of one state; build with the ``with_*`` methods."""

    update: Optional[UpdateFn] = None
    coroutine: Optional[CoroutineFn] = None
    on_end: Optional[OnEndFn] = None

    def with_update(self, update: UpdateFn) -> State:
        """A copy that calls ``update(target, dt)`` every frame in this state."""
        return replace(self, update=update)

    def with_coroutine(self, coroutine: CoroutineFn) -> State:
        """A copy that starts ``coroutine(target)`` when the state is entered."""
        return replace(self, coroutine=coroutine)

    def with_on_end(self, on_end: OnEndFn) -> State:
        """A copy that calls ``on_end(target)`` when the state is left."""
        return replace(self, on_end=on_end)


def _check_id(id_: int) -> None:
    if not 0 <= id_ < MAX_STATE:
        raise IndexError(f"state id {id_} out of range 0..{MAX_STATE - 1}")


class StateMachine:
    """Up to ``MAX_STATE`` states; transitions take effect on the next update."""

    def __init__(self) -> None:
        self._states: List[State] = [State() for _ in range(MAX_STATE)]
        self._active_coroutine: Optional[Coroutine] = None
        self._next_state: Optional[int] = None
        self._current_state = 0

    @property
    def active_coroutine(self) -> Optional[Coroutine]:
        """The coroutine started by the most recent state entry, if any."""
        return self._active_coroutine

    def add_state(self, id_: int, state: State) -> None:
        """Install ``state`` under ``id_``."""
        _check_id(id_)
        self._states[id_] = state

    def set_state(self, state: int) -> None:
        """Request a transition; it happens at the next ``update``."""
        _check_id(state)
        self._next_state = state

    def state(self) -> int:
        """The current state id."""
        return self._current_state

    def update(self, target: Any, frame_time: float) -> None:
        """Apply a pending transition, then run the current state's update."""
        next_state = self._next_state
        if next_state is not None:
            if next_state != self._current_state:
                on_end = self._states[self._current_state].on_end
                if on_end is not None:
                    on_end(target)
                start = self._states[next_state].coroutine
                if start is not None:
                    coroutine = start(target)
                    coroutine.set_manual_poll()
                    self._active_coroutine = coroutine
            self._current_state = next_state
            self._next_state = None

        update = self._states[self._current_state].update
        if update is not None:
            update(target, frame_time)

    def poll_coroutine(self, delta_time: float) -> None:
        """Advance the state's entry coroutine by ``delta_time``."""
        if self._active_coroutine is not None:
            self._active_coroutine.poll(delta_time)