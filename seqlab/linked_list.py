"""A singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedList:
    """Singly linked list with O(1) append and prepend."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("index out of range")

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def append(self, item: Any) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, item: Any) -> None:
        node = _Node(item)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._size += 1

    def first(self) -> Any:
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.value

    def last(self) -> Any:
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.value

    def insert_at(self, item: Any, index: int) -> None:
        """Insert ``item`` so that it ends up at position ``index`` (0..len)."""
        if not 0 <= index <= self._size:
            raise IndexError("index out of range")
        if index == 0:
            self.prepend(item)
            return
        if index == self._size:
            self.append(item)
            return
        previous = self._node_at(index - 1)
        node = _Node(item)
        node.next = previous.next
        previous.next = node
        self._size += 1

    def sublist(self, start: int, end: int) -> LinkedList:
        """Return a new list with the elements from ``start`` to ``end`` inclusive."""
        if not (0 <= start < self._size and 0 <= end < self._size):
            raise IndexError("index out of range")
        if end < start:
            raise ValueError("startindex should be less or equal to endindex")
        result = type(self)()
        for position, value in enumerate(self):
            if position > end:
                break
            if position >= start:
                result.append(value)
        return result

    def concat(self, other: Iterable[Any]) -> LinkedList:
        """Return a new list holding this list's elements followed by ``other``'s."""
        result = self.copy()
        for value in other:
            result.append(value)
        return result

    def copy(self) -> LinkedList:
        return type(self)(self)