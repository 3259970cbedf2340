"""Storage of one shared value per type."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

__all__ = ["Storage", "store", "get", "try_get"]

T = TypeVar("T")


class Storage:
    """Holds at most one value of each exact type."""

    def __init__(self) -> None:
        self._values: Dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store ``data`` under its type, replacing any earlier value."""
        self._values[type(data)] = data

    def try_get(self, kind: Type[T]) -> Optional[T]:
        """The value stored for ``kind``, or None."""
        return self._values.get(kind)

    def get(self, kind: Type[T]) -> T:
        """The value stored for ``kind``; raises KeyError when there is none."""
        try:
            return self._values[kind]
        except KeyError:
            raise KeyError(f"no value of type {kind.__name__} in storage") from None


_default = Storage()


def store(data: Any) -> None:
    """Store ``data`` in the shared storage."""
    _default.store(data)


def get(kind: Type[T]) -> T:
    """Fetch the value of ``kind`` from the shared storage or raise KeyError."""
    return _default.get(kind)


def try_get(kind: Type[T]) -> Optional[T]:
    """Fetch the value of ``kind`` from the shared storage, or None."""
    return _default.try_get(kind)