"""A growable sequence that tracks capacity in fixed steps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")

CAPACITY_STEP = 4


class Vector(Generic[T]):
    """A list-like container whose capacity grows in steps of ``CAPACITY_STEP``."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[Any] = []
        self._capacity = CAPACITY_STEP
        self.extend(items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        """Number of slots reserved for elements."""
        return self._capacity

    def _reserve(self, size: int) -> None:
        if size > self._capacity:
            self._capacity = size + CAPACITY_STEP - size % CAPACITY_STEP

    def append(self, item: T) -> None:
        """Add one element at the end."""
        self._reserve(len(self._items) + 1)
        self._items.append(item)

    def extend(self, items: Iterable[T]) -> None:
        """Add every element of ``items`` at the end, in order."""
        for item in items:
            self.append(item)

    def resize(self, size: int) -> None:
        """Set the length to ``size``, dropping elements or padding with None."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._reserve(size)
        current = len(self._items)
        if size < current:
            del self._items[size:]
        else:
            self._items.extend([None] * (size - current))

    def erase(self, start: int, count: int) -> None:
        """Remove ``count`` elements beginning at ``start``."""
        if start < 0 or count < 0 or start + count > len(self._items):
            raise IndexError(
                f"cannot erase {count} elements at {start} from {len(self._items)}"
            )
        del self._items[start : start + count]

    def clear(self) -> None:
        """Remove every element; capacity is kept."""
        self._items.clear()