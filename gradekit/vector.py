"""A growable array with an explicit capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Vector:
    """A sequence that tracks a capacity, doubling it when full and halving it when sparse."""

    DEFAULT_CAPACITY = 64
    MINIMUM_CAPACITY = 8

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("Capacity cannot be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of elements the vector can hold before it must grow."""
        return self._capacity

    @property
    def empty(self) -> bool:
        """True if the vector holds no elements, whatever its capacity."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    def _check_index(self, index: int, limit: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Vector indices must be integers")
        if index < 0 or index >= limit:
            raise IndexError("Index out of bounds")

    def _change_capacity(self, capacity: int) -> None:
        if capacity < len(self._items):
            raise ValueError("New capacity is less than the current number of elements.")
        self._capacity = capacity

    def at(self, index: int) -> Any:
        """Return the element at index; raise IndexError outside the size."""
        self._check_index(index, len(self._items))
        return self._items[index]

    def reserve(self, capacity: int) -> None:
        """Grow the capacity to at least the given value."""
        if self._capacity < capacity:
            self._change_capacity(capacity)

    def set(self, index: int, element: Any) -> Any:
        """Replace the element at index and return the new element."""
        self._check_index(index, len(self._items))
        self._items[index] = element
        return element

    def push_back(self, element: Any) -> Any:
        """Append an element and return it."""
        return self.insert(len(self._items), element)

    def pop_back(self) -> int:
        """Remove the last element and return the new size."""
        if not self._items:
            raise IndexError("Pop back should throw on an empty vector")
        size = len(self._items)
        if size <= self._capacity // 3 and self._capacity > self.MINIMUM_CAPACITY * 2:
            self._change_capacity(self._capacity // 2)
        self._items.pop()
        return len(self._items)

    def insert(self, index: int, element: Any) -> Any:
        """Insert an element before index (which may equal the size) and return it."""
        self._check_index(index, len(self._items) + 1)
        if len(self._items) >= self._capacity:
            self._change_capacity(max(1, self._capacity * 2))
        self._items.insert(index, element)
        return element

    def erase(self, index: int) -> int:
        """Remove the element at index and return the new size."""
        self._check_index(index, len(self._items))
        del self._items[index]
        return len(self._items)

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def copy(self) -> Vector:
        """Return an independent copy with the same elements and capacity."""
        other = Vector(self._capacity)
        other._items = list(self._items)
        return other