"""Fixed, arena-backed and ring byte buffers."""

from __future__ import annotations

from typing import List, Union

from holytls.arena import Arena

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


class Buf:
    """A buffer of fixed capacity; appends beyond it are truncated."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data = bytearray(capacity)
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def remaining(self) -> int:
        return self.capacity - self._len

    def append(self, data: BytesLike) -> int:
        """Append as much of ``data`` as fits; returns the bytes written."""
        raw = _as_bytes(data)
        count = min(len(raw), self.remaining())
        self._data[self._len:self._len + count] = raw[:count]
        self._len += count
        return count

    def clear(self) -> None:
        self._len = 0

    def getvalue(self) -> bytes:
        return bytes(self._data[:self._len])

    def __len__(self) -> int:
        return self._len

    def __bytes__(self) -> bytes:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"Buf(len={self._len}, capacity={self.capacity})"


class ArenaBuf:
    """A growable buffer whose storage comes from an arena.

    Growth doubles the capacity, or grows to fit; old storage stays in the
    arena until the arena is cleared.
    """

    def __init__(self, arena: Arena, initial_capacity: int = 4096) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must not be negative")
        self.arena = arena
        self._data = arena.push(initial_capacity)
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def remaining(self) -> int:
        return self.capacity - self._len

    def ensure_capacity(self, additional: int) -> None:
        """Make room for at least ``additional`` more bytes."""
        if additional < 0:
            raise ValueError("additional must not be negative")
        needed = self._len + additional
        if needed <= self.capacity:
            return
        new_capacity = max(self.capacity * 2, needed)
        new_data = self.arena.push(new_capacity)
        new_data[:self._len] = self._data[:self._len]
        self._data = new_data

    def append(self, data: BytesLike) -> None:
        raw = _as_bytes(data)
        self.ensure_capacity(len(raw))
        self._data[self._len:self._len + len(raw)] = raw
        self._len += len(raw)

    def append_byte(self, byte: int) -> None:
        if not 0 <= byte <= 0xFF:
            raise ValueError("byte must be in range 0..255")
        self.ensure_capacity(1)
        self._data[self._len] = byte
        self._len += 1

    def clear(self) -> None:
        self._len = 0

    def to_buf(self) -> Buf:
        """A fixed buffer with the same contents and capacity."""
        buf = Buf(self.capacity)
        buf.append(self._data[:self._len])
        return buf

    def __len__(self) -> int:
        return self._len

    def __bytes__(self) -> bytes:
        return bytes(self._data[:self._len])

    def __repr__(self) -> str:
        return f"ArenaBuf(len={self._len}, capacity={self.capacity})"


class RingBuf:
    """A circular byte buffer for streaming reads and writes."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._data = bytearray(capacity)
        self._read = 0
        self._write = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return self._write - self._read

    def space(self) -> int:
        return self.capacity - self.size()

    def empty(self) -> bool:
        return self._read == self._write

    def full(self) -> bool:
        return self.size() == self.capacity

    def readable_region(self) -> memoryview:
        """The contiguous run of unread bytes starting at the read position."""
        start = self._read % self.capacity
        count = min(self.capacity - start, self.size())
        return memoryview(self._data)[start:start + count]

    def writable_region(self) -> memoryview:
        """The contiguous free run starting at the write position."""
        start = self._write % self.capacity
        count = min(self.capacity - start, self.space())
        return memoryview(self._data)[start:start + count]

    def consume(self, n: int) -> None:
        """Mark ``n`` bytes as read."""
        if not 0 <= n <= self.size():
            raise ValueError("cannot consume more than is buffered")
        self._read += n

    def commit(self, n: int) -> None:
        """Mark ``n`` bytes written into the writable region as buffered."""
        if not 0 <= n <= self.space():
            raise ValueError("cannot commit more than the free space")
        self._write += n

    def write(self, data: BytesLike) -> int:
        """Buffer as much of ``data`` as fits; returns the bytes written."""
        view = memoryview(_as_bytes(data))
        total = 0
        while view and not self.full():
            region = self.writable_region()
            count = min(len(view), len(region))
            region[:count] = view[:count]
            self.commit(count)
            view = view[count:]
            total += count
        return total

    def read(self, n: int) -> bytes:
        """Remove and return up to ``n`` buffered bytes."""
        chunks: List[bytes] = []
        while n > 0 and not self.empty():
            region = self.readable_region()
            count = min(n, len(region))
            chunks.append(bytes(region[:count]))
            self.consume(count)
            n -= count
        return b"".join(chunks)

    def clear(self) -> None:
        self._read = 0
        self._write = 0

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"RingBuf(size={self.size()}, capacity={self.capacity})"