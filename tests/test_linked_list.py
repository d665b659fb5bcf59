import pytest

from holytls.linked_list import (
    DLLNode,
    DoublyLinkedList,
    SinglyLinkedList,
    SLLNode,
)


class Item(DLLNode):
    __slots__ = ("number",)

    def __init__(self, number):
        super().__init__()
        self.number = number


def test_dll_basic():
    lst = DoublyLinkedList()
    assert lst.is_empty()

    items = [Item(i) for i in range(5)]
    for item in items:
        lst.push_back(item)

    assert len(lst) == 5
    assert not lst.is_empty()
    assert [n.number for n in lst] == [0, 1, 2, 3, 4]

    lst.remove(items[2])
    assert len(lst) == 4

    front = lst.pop_front()
    assert front.number == 0
    assert len(lst) == 3

    back = lst.pop_back()
    assert back.number == 4
    assert len(lst) == 2
    assert [n.number for n in lst] == [1, 3]


def test_dll_push_front_order():
    lst = DoublyLinkedList()
    for i in range(3):
        lst.push_front(DLLNode(i))
    assert list(lst.values()) == [2, 1, 0]
    assert lst.first.value == 2
    assert lst.last.value == 0


def test_dll_insert_after_and_before():
    lst = DoublyLinkedList()
    a, c = DLLNode("a"), DLLNode("c")
    lst.push_back(a)
    lst.push_back(c)
    lst.insert_after(a, DLLNode("b"))
    lst.insert_before(a, DLLNode("start"))
    lst.insert_after(c, DLLNode("end"))
    assert list(lst.values()) == ["start", "a", "b", "c", "end"]
    assert lst.first.value == "start"
    assert lst.last.value == "end"
    assert len(lst) == 5


def test_dll_links_are_consistent_backwards():
    lst = DoublyLinkedList()
    for i in range(4):
        lst.push_back(DLLNode(i))
    backwards = []
    node = lst.last
    while node is not None:
        backwards.append(node.value)
        node = node.prev
    assert backwards == [3, 2, 1, 0]


def test_dll_pop_empty_returns_none():
    lst = DoublyLinkedList()
    assert lst.pop_front() is None
    assert lst.pop_back() is None
    assert len(lst) == 0


def test_dll_remove_last_node_empties_list():
    lst = DoublyLinkedList()
    node = DLLNode(1)
    lst.push_back(node)
    lst.remove(node)
    assert lst.is_empty()
    assert lst.first is None and lst.last is None
    assert node.next is None and node.prev is None


def test_dll_remove_foreign_node_raises():
    lst = DoublyLinkedList()
    other = DoublyLinkedList()
    node = DLLNode(1)
    other.push_back(node)
    with pytest.raises(ValueError):
        lst.remove(node)


def test_dll_node_in_two_lists_raises():
    first, second = DoublyLinkedList(), DoublyLinkedList()
    node = DLLNode(1)
    first.push_back(node)
    with pytest.raises(ValueError):
        second.push_back(node)


def test_dll_removed_node_can_be_reused():
    lst = DoublyLinkedList()
    for i in range(3):
        lst.push_back(DLLNode(i))
    node = lst.pop_front()
    lst.push_back(node)
    assert list(lst.values()) == [1, 2, 0]


def test_dll_remove_while_iterating():
    lst = DoublyLinkedList()
    for i in range(6):
        lst.push_back(DLLNode(i))
    for node in lst:
        if node.value % 2:
            lst.remove(node)
    assert list(lst.values()) == [0, 2, 4]
    assert len(lst) == 3


def test_sll_queue():
    lst = SinglyLinkedList()
    assert lst.is_empty()
    for i in range(5):
        lst.push_back(SLLNode(i))
    assert len(lst) == 5
    for i in range(5):
        node = lst.pop_front()
        assert node is not None
        assert node.value == i
    assert lst.is_empty()
    assert lst.last is None


def test_sll_stack():
    stack = SinglyLinkedList()
    for i in range(5):
        stack.push_front(SLLNode(i))
    for i in range(4, -1, -1):
        node = stack.pop_front()
        assert node is not None
        assert node.value == i
    assert stack.pop_front() is None


def test_sll_iteration_and_double_insert():
    lst = SinglyLinkedList()
    node = SLLNode("x")
    lst.push_back(node)
    lst.push_back(SLLNode("y"))
    assert list(lst.values()) == ["x", "y"]
    with pytest.raises(ValueError):
        lst.push_front(node)