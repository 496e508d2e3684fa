"""Sequences backed by arrays or linked lists, in mutable and immutable flavours.

Mutable sequences change in place and return themselves from ``append``,
``prepend`` and ``insert_at``; immutable ones leave themselves untouched and
return a changed copy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from .dynamic_array import DynamicArray
from .linked_list import LinkedList

_S = TypeVar("_S", bound="Sequence")


class Sequence(ABC):
    """Common interface of all sequences."""

    mutable: bool = True
    _data: Any

    @classmethod
    def _wrap(cls: type[_S], data: Any) -> _S:
        seq = cls.__new__(cls)
        seq._data = data
        return seq

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def get(self, index: int) -> Any:
        return self._data[index]

    def first(self) -> Any:
        return self._data[0]

    def last(self) -> Any:
        return self._data[len(self._data) - 1]

    def _target(self: _S) -> _S:
        return self if self.mutable else self.copy()

    def append(self: _S, item: Any) -> _S:
        target = self._target()
        target._append_in_place(item)
        return target

    def prepend(self: _S, item: Any) -> _S:
        target = self._target()
        target._prepend_in_place(item)
        return target

    def insert_at(self: _S, item: Any, index: int) -> _S:
        target = self._target()
        target._insert_in_place(item, index)
        return target

    def concat(self: _S, other: Iterable[Any]) -> _S:
        """Return a new sequence of this one's elements followed by ``other``'s."""
        result = self.copy()
        for item in other:
            result._append_in_place(item)
        return result

    def copy(self: _S) -> _S:
        return self._wrap(self._data.copy())

    @abstractmethod
    def subsequence(self: _S, start: int, end: int) -> _S:
        """Return a new sequence of the elements from ``start`` to ``end`` inclusive."""

    @abstractmethod
    def _append_in_place(self, item: Any) -> None: ...

    @abstractmethod
    def _prepend_in_place(self, item: Any) -> None: ...

    @abstractmethod
    def _insert_in_place(self, item: Any, index: int) -> None: ...


class ArraySequence(Sequence):
    """Sequence stored in a :class:`DynamicArray`."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._data = DynamicArray.from_items(() if items is None else items)

    def _append_in_place(self, item: Any) -> None:
        size = len(self._data)
        self._data.resize(size + 1)
        self._data[size] = item

    def _prepend_in_place(self, item: Any) -> None:
        self._insert_in_place(item, 0)

    def _insert_in_place(self, item: Any, index: int) -> None:
        size = len(self._data)
        if not 0 <= index <= size:
            raise IndexError("index out of bounds")
        self._data.resize(size + 1)
        for position in range(size, index, -1):
            self._data[position] = self._data[position - 1]
        self._data[index] = item

    def subsequence(self, start: int, end: int) -> ArraySequence:
        """Elements ``start..end`` inclusive; empty when ``end < start``."""
        return self._wrap(
            DynamicArray.from_items(self._data[i] for i in range(start, end + 1))
        )


class ListSequence(Sequence):
    """Sequence stored in a :class:`LinkedList`."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._data = LinkedList(items)

    def first(self) -> Any:
        return self._data.first()

    def last(self) -> Any:
        return self._data.last()

    def _append_in_place(self, item: Any) -> None:
        self._data.append(item)

    def _prepend_in_place(self, item: Any) -> None:
        self._data.prepend(item)

    def _insert_in_place(self, item: Any, index: int) -> None:
        self._data.insert_at(item, index)

    def subsequence(self, start: int, end: int) -> ListSequence:
        return self._wrap(self._data.sublist(start, end))


class MutableArraySequence(ArraySequence):
    mutable = True


class ImmutableArraySequence(ArraySequence):
    mutable = False


class MutableListSequence(ListSequence):
    mutable = True


class ImmutableListSequence(ListSequence):
    mutable = False