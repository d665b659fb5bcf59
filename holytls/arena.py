"""Bump allocator over growing byte blocks, with scoped rollback."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

DEFAULT_BLOCK_SIZE = 64 * 1024
CACHE_LINE_SIZE = 64
_ALIGNMENT = 8


def _align8(size: int) -> int:
    return (size + _ALIGNMENT - 1) & ~(_ALIGNMENT - 1)


class Arena:
    """Hands out regions of byte blocks, freed together.

    Every allocation is rounded up to 8 bytes. When the current block is
    full a new block twice as large (or large enough for the request)
    becomes current; earlier blocks stay alive until ``clear()``.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.block_size = block_size
        self._block = bytearray(block_size)
        self._pos = 0
        self._previous: List[bytearray] = []

    def _reserve(self, size: int) -> Tuple[bytearray, int]:
        if size < 0:
            raise ValueError("size must not be negative")
        aligned = _align8(size)
        if self._pos + aligned <= len(self._block):
            start = self._pos
            self._pos += aligned
            return self._block, start
        new_size = max(self.block_size * 2, aligned)
        self._previous.append(self._block)
        self._block = bytearray(new_size)
        self.block_size = new_size
        self._pos = aligned
        return self._block, 0

    def push(self, size: int) -> memoryview:
        """A writable view of ``size`` bytes from the arena."""
        block, start = self._reserve(size)
        return memoryview(block)[start:start + size]

    def push_zero(self, size: int) -> memoryview:
        """Like ``push``, with the region zero-filled."""
        view = self.push(size)
        view[:] = bytes(size)
        return view

    def push_aligned(self, size: int, alignment: int = CACHE_LINE_SIZE) -> memoryview:
        """A view of ``size`` bytes whose offset in its block is a multiple of ``alignment``."""
        if alignment <= 0 or alignment & (alignment - 1):
            raise ValueError("alignment must be a positive power of two")
        if size < 0:
            raise ValueError("size must not be negative")
        padding = (-self._pos) % alignment
        current = self._block
        block, start = self._reserve(size + padding)
        offset = start + padding if block is current else start
        return memoryview(block)[offset:offset + size]

    def pos(self) -> int:
        """Offset of the next allocation within the current block."""
        return self._pos

    def pop_to(self, pos: int) -> None:
        """Roll the current block back to ``pos``."""
        if not 0 <= pos <= len(self._block):
            raise ValueError("position outside the current block")
        self._pos = pos

    def clear(self) -> None:
        """Drop earlier blocks and empty the current one."""
        self._previous.clear()
        self._pos = 0

    @contextmanager
    def temp(self) -> Iterator["Arena"]:
        """Scope whose allocations are released when it exits."""
        saved = self._pos
        try:
            yield self
        finally:
            self.pop_to(min(saved, len(self._block)))

    def block_count(self) -> int:
        return 1 + len(self._previous)

    def __repr__(self) -> str:
        return (
            f"Arena(block_size={self.block_size}, pos={self._pos}, "
            f"blocks={self.block_count()})"
        )


_scratch_local = threading.local()


def _scratch_arenas() -> Tuple[Arena, Arena]:
    arenas = getattr(_scratch_local, "arenas", None)
    if arenas is None:
        arenas = (Arena(), Arena())
        _scratch_local.arenas = arenas
    return arenas


@contextmanager
def scratch(conflict: Optional[Arena] = None) -> Iterator[Arena]:
    """Borrow one of this thread's two scratch arenas for a scope.

    Pass the arena a caller is already using as ``conflict`` so the other
    one is handed out. Allocations are released when the scope exits.
    """
    first, second = _scratch_arenas()
    arena = second if first is conflict else first
    with arena.temp():
        yield arena