"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 2


class Vector(Generic[T]):
    """Dynamic array with an explicit capacity that doubles on overflow."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._capacity = _INITIAL_CAPACITY

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity first if it is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"vector index {index} out of range")

    def at(self, index: int) -> T:
        """Return the element at ``index``."""
        self._check(index)
        return self._items[index]

    def set(self, index: int, value: T) -> None:
        """Replace the element at ``index``."""
        self._check(index)
        self._items[index] = value

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def capacity(self) -> int:
        """Number of elements the vector can hold before it grows."""
        return self._capacity

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"


def main(argv: list[str] | None = None) -> int:
    """Push 1 .. 30 and print them on one line."""
    vector: Vector[int] = Vector()
    for number in range(1, 31):
        vector.push_back(number)
    print("".join(f"{item} " for item in vector))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())