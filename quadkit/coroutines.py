"""Frame-driven coroutines built on generators.

A coroutine is a generator: every bare ``yield`` waits for the next frame,
and the generator's return value is the coroutine's result. Timers are
awaited with ``yield from wait_seconds(context, seconds)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator, Optional

from quadkit.generational import GenerationalId, GenerationalStorage

__all__ = ["Coroutine", "CoroutinesContext", "wait_seconds", "DEFAULT_FRAME_TIME"]

DEFAULT_FRAME_TIME = 1.0 / 60.0

Frames = Generator[None, None, Any]


@dataclass
class _Task:
    generator: Optional[Frames]
    has_value: bool
    manual_poll: bool = False
    manual_time: Optional[float] = None
    value: Any = None

    @property
    def running(self) -> bool:
        return self.generator is not None

    def resume(self) -> bool:
        """Run the generator up to its next yield; True once it has finished."""
        assert self.generator is not None
        try:
            self.generator.send(None)
        except StopIteration as stop:
            self.generator = None
            self.value = stop.value
            return True
        except BaseException:
            self.generator = None
            raise
        return False

    def close(self) -> None:
        if self.generator is not None:
            self.generator.close()
            self.generator = None


class CoroutinesContext:
    """Owns every running coroutine and polls them once per frame."""

    def __init__(self) -> None:
        self._tasks: GenerationalStorage[_Task] = GenerationalStorage()
        self._frame_time = DEFAULT_FRAME_TIME
        self._active_delta: Optional[float] = None
        self._active_now: Optional[float] = None

    def start(self, generator: Frames, has_value: bool = True) -> Coroutine:
        """Register ``generator``; it is first polled by the next ``update``.

        With ``has_value`` false the coroutine is discarded as soon as it
        finishes, and its result is never kept.
        """
        id_ = self._tasks.push(_Task(generator, has_value))
        return Coroutine(self, id_, has_value)

    def update(self, frame_time: float) -> None:
        """Poll every coroutine that is not in manual mode once."""
        self._frame_time = frame_time

        def keep(task: _Task) -> bool:
            if task.running and not task.manual_poll and task.resume():
                return task.has_value
            return True

        self._tasks.retain(keep)

    def stop(self, coroutine: Coroutine) -> None:
        """Stop a coroutine and forget it; stale handles are ignored."""
        task = self._tasks.get(coroutine.id)
        if task is not None:
            task.close()
        self._tasks.free(coroutine.id)

    def stop_all(self) -> None:
        """Stop and forget every coroutine."""

        def close(task: _Task) -> bool:
            task.close()
            return False

        self._tasks.retain(close)
        self._tasks.clear()

    def active_count(self) -> int:
        """Number of coroutines that are running or hold an unretrieved result."""
        return self._tasks.count()

    def current_delta(self) -> float:
        """Time step of the coroutine being polled: its manual delta or the frame time."""
        if self._active_delta is not None:
            return self._active_delta
        return self._frame_time

    def _task(self, id_: GenerationalId) -> Optional[_Task]:
        return self._tasks.get(id_)

    def _free(self, id_: GenerationalId) -> None:
        self._tasks.free(id_)


class Coroutine:
    """Handle to a coroutine registered in a ``CoroutinesContext``."""

    __slots__ = ("_context", "id", "has_value")

    def __init__(self, context: CoroutinesContext, id_: GenerationalId, has_value: bool) -> None:
        self._context = context
        self.id = id_
        self.has_value = has_value

    def __repr__(self) -> str:
        return f"Coroutine(id={self.id.id}, generation={self.id.generation})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Coroutine)
            and other._context is self._context
            and other.id == self.id
        )

    def __hash__(self) -> int:
        return hash((id(self._context), self.id))

    def is_done(self) -> bool:
        """Whether the coroutine has finished or was stopped."""
        task = self._context._task(self.id)
        return task is None or not task.running

    def retrieve(self) -> Any:
        """Take the result of a finished coroutine, or None if there is none.

        The result can be taken once; afterwards the coroutine is forgotten.
        """
        if not self.has_value:
            return None
        task = self._context._task(self.id)
        if task is None or task.running:
            return None
        value = task.value
        self._context._free(self.id)
        return value

    def set_manual_poll(self) -> None:
        """Exclude the coroutine from ``update``; it then advances only via ``poll``."""
        task = self._context._task(self.id)
        if task is not None and task.running:
            task.manual_time = 0.0
            task.manual_poll = True

    def poll(self, delta_time: float) -> None:
        """Poll once, advancing the coroutine's own timeline by ``delta_time``."""
        context = self._context
        task = context._task(self.id)
        if task is None or not task.running:
            return
        if not task.manual_poll or task.manual_time is None:
            raise RuntimeError("coroutine is not in manual poll mode")

        context._active_now = task.manual_time
        context._active_delta = delta_time
        task.manual_time += delta_time
        try:
            finished = task.resume()
        finally:
            context._active_now = None
            context._active_delta = None

        if finished and not task.has_value:
            context._free(self.id)


def wait_seconds(context: CoroutinesContext, time: float) -> Generator[None, None, None]:
    """Wait until ``time`` seconds of the polling timeline have passed."""
    remaining = time
    while True:
        remaining -= context.current_delta()
        if remaining <= 0.0:
            return
        yield