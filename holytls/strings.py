"""Immutable string slices and a list that joins its parts once."""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

_StrLike = Union["String8", str]


def _text(value: _StrLike) -> str:
    if isinstance(value, String8):
        return value.to_string()
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or String8, got {type(value).__name__}")


class String8:
    """An immutable string with explicit, clamping slice operations."""

    __slots__ = ("_data",)

    def __init__(self, data: _StrLike = "") -> None:
        self._data = _text(data)

    def substr(self, pos: int, length: Optional[int] = None) -> "String8":
        """Up to ``length`` characters from ``pos``; empty if ``pos`` is past the end."""
        if pos < 0 or (length is not None and length < 0):
            raise ValueError("position and length must not be negative")
        if pos >= len(self._data):
            return String8()
        end = len(self._data) if length is None else pos + length
        return String8(self._data[pos:end])

    def prefix(self, n: int) -> "String8":
        if n < 0:
            raise ValueError("n must not be negative")
        return String8(self._data[:n])

    def suffix(self, n: int) -> "String8":
        if n < 0:
            raise ValueError("n must not be negative")
        if n < len(self._data):
            return String8(self._data[len(self._data) - n:])
        return self

    def to_string(self) -> str:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, String8):
            return self._data == other._data
        if isinstance(other, str):
            return self._data == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __getitem__(self, index: int) -> str:
        return self._data[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"String8({self._data!r})"


class String8List:
    """Accumulates string parts and joins them in a single pass."""

    def __init__(self) -> None:
        self._parts: List[String8] = []
        self._total_size = 0

    def push(self, string: _StrLike) -> None:
        part = string if isinstance(string, String8) else String8(string)
        self._parts.append(part)
        self._total_size += len(part)

    def join(self) -> String8:
        return String8("".join(p.to_string() for p in self._parts))

    def join_sep(self, sep: _StrLike) -> String8:
        return String8(_text(sep).join(p.to_string() for p in self._parts))

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[String8]:
        return iter(self._parts)

    def total_size(self) -> int:
        """Combined length of all parts, without separators."""
        return self._total_size