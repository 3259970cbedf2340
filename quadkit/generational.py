"""Slot storage addressed by ids that carry a generation counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

__all__ = ["GenerationalId", "GenerationalStorage"]

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """Index of a slot plus the generation the slot had when it was filled."""

    id: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """A vector of reusable slots; stale ids never reach newer data."""

    def __init__(self) -> None:
        self._cells: List[Optional[_Cell[T]]] = []
        self._free: List[Tuple[int, int]] = []

    def push(self, data: T) -> GenerationalId:
        """Store ``data`` in a free slot (or a new one) and return its id."""
        if self._free:
            index, old_generation = self._free.pop()
            if self._cells[index] is not None:
                raise RuntimeError(f"free slot {index} is still occupied")
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            generation = 0
            self._cells.append(_Cell(generation, data))
            index = len(self._cells) - 1
        return GenerationalId(index, generation)

    def _cell(self, id_: GenerationalId) -> Optional[_Cell[T]]:
        if not 0 <= id_.id < len(self._cells):
            return None
        cell = self._cells[id_.id]
        if cell is None or cell.generation != id_.generation:
            return None
        return cell

    def get(self, id_: GenerationalId) -> Optional[T]:
        """The value stored under ``id_``, or None if it is gone or stale."""
        cell = self._cell(id_)
        return None if cell is None else cell.state

    def set(self, id_: GenerationalId, value: T) -> None:
        """Replace the value stored under a live ``id_``."""
        cell = self._cell(id_)
        if cell is None:
            raise KeyError(id_)
        cell.state = value

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Keep only the values for which ``predicate`` is true, in slot order."""
        for index, cell in enumerate(self._cells):
            if cell is None:
                continue
            if not predicate(cell.state):
                self._free.append((index, cell.generation))
                self._cells[index] = None

    def count(self) -> int:
        """Number of occupied slots."""
        return sum(1 for cell in self._cells if cell is not None)

    def clear(self) -> None:
        """Drop every slot and every free index."""
        self._cells.clear()
        self._free.clear()

    def free(self, id_: GenerationalId) -> None:
        """Release the slot of ``id_``; outdated or unknown ids are ignored."""
        if not 0 <= id_.id < len(self._cells):
            return
        cell = self._cells[id_.id]
        if cell is None or cell.generation != id_.generation:
            return
        self._free.append((id_.id, id_.generation))
        self._cells[id_.id] = None

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, id_: object) -> bool:
        return isinstance(id_, GenerationalId) and self._cell(id_) is not None