"""Capacity-bounded containers and a sparse descriptor table."""

from __future__ import annotations

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_MAX_FDS = 65536


class FixedArray(Generic[T]):
    """A sequence that never grows past its capacity; extra pushes are dropped."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: List[T] = []

    def push(self, value: T) -> bool:
        """Append ``value`` if there is room; returns whether it was stored."""
        if len(self._items) >= self._capacity:
            return False
        self._items.append(value)
        return True

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r}, capacity={self._capacity})"


class FixedString:
    """Text limited to ``capacity - 1`` characters, leaving room for a terminator."""

    def __init__(self, capacity: int, text: str = "") -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._text = text[:capacity - 1]

    @property
    def capacity(self) -> int:
        return self._capacity

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index):
        return self._text[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"FixedString({self._capacity}, {self._text!r})"


class FdTable(Generic[T]):
    """Maps file descriptors in ``[0, max_fds)`` to objects.

    Descriptors outside the range are ignored on ``set`` and absent on ``get``.
    Setting ``None`` removes the entry.
    """

    def __init__(self, max_fds: int = DEFAULT_MAX_FDS) -> None:
        if max_fds < 0:
            raise ValueError("max_fds must not be negative")
        self.max_fds = max_fds
        self._entries: Dict[int, T] = {}

    def _in_range(self, fd: int) -> bool:
        return 0 <= fd < self.max_fds

    def set(self, fd: int, value: Optional[T]) -> None:
        if not self._in_range(fd):
            return
        if value is None:
            self._entries.pop(fd, None)
        else:
            self._entries[fd] = value

    def get(self, fd: int) -> Optional[T]:
        if not self._in_range(fd):
            return None
        return self._entries.get(fd)

    def remove(self, fd: int) -> None:
        self.set(fd, None)

    def __contains__(self, fd: object) -> bool:
        return isinstance(fd, int) and self.get(fd) is not None

    def count(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FdTable(count={len(self._entries)}, max_fds={self.max_fds})"