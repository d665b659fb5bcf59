"""Intrusive doubly and singly linked lists.

Nodes carry their own link fields, so moving a node between positions never
allocates. Subclass a node type to attach data, or store it in ``value``.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

_D = TypeVar("_D", bound="DLLNode")
_S = TypeVar("_S", bound="SLLNode")


class DLLNode:
    """A node of a ``DoublyLinkedList``."""

    __slots__ = ("value", "next", "prev", "_owner")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[DLLNode] = None
        self.prev: Optional[DLLNode] = None
        self._owner: Optional[DoublyLinkedList] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class DoublyLinkedList(Generic[_D]):
    """A doubly linked list of ``DLLNode`` objects; a node is in at most one list."""

    def __init__(self) -> None:
        self._first: Optional[_D] = None
        self._last: Optional[_D] = None
        self._count = 0

    @property
    def first(self) -> Optional[_D]:
        return self._first

    @property
    def last(self) -> Optional[_D]:
        return self._last

    def _adopt(self, node: _D) -> None:
        if node._owner is not None:
            raise ValueError("node already belongs to a list")
        node._owner = self

    def _check_member(self, node: DLLNode) -> None:
        if node._owner is not self:
            raise ValueError("node is not in this list")

    def is_empty(self) -> bool:
        return self._first is None

    def push_back(self, node: _D) -> None:
        self._adopt(node)
        node.next = None
        node.prev = self._last
        if self._last is not None:
            self._last.next = node
        else:
            self._first = node
        self._last = node
        self._count += 1

    def push_front(self, node: _D) -> None:
        self._adopt(node)
        node.prev = None
        node.next = self._first
        if self._first is not None:
            self._first.prev = node
        else:
            self._last = node
        self._first = node
        self._count += 1

    def remove(self, node: _D) -> None:
        """Unlink ``node``; raises ``ValueError`` if it is not in this list."""
        self._check_member(node)
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._first = node.next  # type: ignore[assignment]
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._last = node.prev  # type: ignore[assignment]
        node.next = None
        node.prev = None
        node._owner = None
        self._count -= 1

    def pop_front(self) -> Optional[_D]:
        """Remove and return the first node, or ``None`` if the list is empty."""
        node = self._first
        if node is not None:
            self.remove(node)
        return node

    def pop_back(self) -> Optional[_D]:
        """Remove and return the last node, or ``None`` if the list is empty."""
        node = self._last
        if node is not None:
            self.remove(node)
        return node

    def insert_after(self, target: _D, node: _D) -> None:
        self._check_member(target)
        self._adopt(node)
        node.prev = target
        node.next = target.next
        if target.next is not None:
            target.next.prev = node
        else:
            self._last = node
        target.next = node
        self._count += 1

    def insert_before(self, target: _D, node: _D) -> None:
        self._check_member(target)
        self._adopt(node)
        node.next = target
        node.prev = target.prev
        if target.prev is not None:
            target.prev.next = node
        else:
            self._first = node
        target.prev = node
        self._count += 1

    def __iter__(self) -> Iterator[_D]:
        """Nodes front to back; the node just yielded may be removed safely."""
        node = self._first
        while node is not None:
            following = node.next
            yield node
            node = following  # type: ignore[assignment]

    def values(self) -> Iterator[Any]:
        for node in self:
            yield node.value

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self.values())!r})"


class SLLNode:
    """A node of a ``SinglyLinkedList``."""

    __slots__ = ("value", "next", "_owner")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[SLLNode] = None
        self._owner: Optional[SinglyLinkedList] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class SinglyLinkedList(Generic[_S]):
    """A singly linked list usable as a queue (push_back) or stack (push_front)."""

    def __init__(self) -> None:
        self._first: Optional[_S] = None
        self._last: Optional[_S] = None
        self._count = 0

    @property
    def first(self) -> Optional[_S]:
        return self._first

    @property
    def last(self) -> Optional[_S]:
        return self._last

    def _adopt(self, node: _S) -> None:
        if node._owner is not None:
            raise ValueError("node already belongs to a list")
        node._owner = self

    def is_empty(self) -> bool:
        return self._first is None

    def push_back(self, node: _S) -> None:
        self._adopt(node)
        node.next = None
        if self._last is not None:
            self._last.next = node
        else:
            self._first = node
        self._last = node
        self._count += 1

    def push_front(self, node: _S) -> None:
        self._adopt(node)
        node.next = self._first
        if self._last is None:
            self._last = node
        self._first = node
        self._count += 1

    def pop_front(self) -> Optional[_S]:
        """Remove and return the first node, or ``None`` if the list is empty."""
        node = self._first
        if node is not None:
            self._first = node.next  # type: ignore[assignment]
            if self._first is None:
                self._last = None
            node.next = None
            node._owner = None
            self._count -= 1
        return node

    def __iter__(self) -> Iterator[_S]:
        node = self._first
        while node is not None:
            following = node.next
            yield node
            node = following  # type: ignore[assignment]

    def values(self) -> Iterator[Any]:
        for node in self:
            yield node.value

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self.values())!r})"