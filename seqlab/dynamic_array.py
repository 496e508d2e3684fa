"""A fixed-size array that can be resized explicitly, with bounds-checked access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class DynamicArray:
    """Array of a given size whose slots start empty (``None``)."""

    __slots__ = ("_items",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be positive")
        self._items: list[Any] = [None] * size

    @classmethod
    def from_items(cls, items: Iterable[Any]) -> DynamicArray:
        """Build an array holding a copy of ``items``."""
        array = cls(0)
        array._items = list(items)
        return array

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def copy(self) -> DynamicArray:
        """Return an independent copy of this array."""
        return type(self).from_items(self._items)

    def resize(self, new_size: int) -> None:
        """Change the size, keeping the common prefix; new slots hold ``None``."""
        if new_size < 0:
            raise ValueError("size must be positive")
        current = len(self._items)
        if new_size <= current:
            del self._items[new_size:]
        else:
            self._items.extend([None] * (new_size - current))