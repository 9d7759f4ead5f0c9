"""Fixed-capacity double-ended queue on a ring of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from dstructs.circular_queue import (
    CONTENT_PREFIX,
    EMPTY_MESSAGE,
    QueueEmptyError,
    QueueFullError,
)

T = TypeVar("T")


class CircularDeque(Generic[T]):
    """A ring-buffer deque holding at most ``size`` items."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError(f"deque size must be at least 1, got {size}")
        self._slots: list[T | None] = [None] * (size + 1)
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % len(self._slots) == self._front

    def add_rear(self, item: T) -> None:
        """Add ``item`` at the back."""
        if self.is_full():
            raise QueueFullError("큐가 가득 찼습니다.")
        self._rear = (self._rear + 1) % len(self._slots)
        self._slots[self._rear] = item

    def add_front(self, item: T) -> None:
        """Add ``item`` at the front."""
        if self.is_full():
            raise QueueFullError("큐가 가득 찼습니다.")
        self._slots[self._front] = item
        self._front = (self._front - 1) % len(self._slots)

    def delete_front(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("큐가 비어있습니다.")
        self._front = (self._front + 1) % len(self._slots)
        item = self._slots[self._front]
        self._slots[self._front] = None
        return item  # type: ignore[return-value]

    def delete_rear(self) -> T:
        """Remove and return the item at the back."""
        if self.is_empty():
            raise QueueEmptyError("큐가 비어있습니다.")
        item = self._slots[self._rear]
        self._slots[self._rear] = None
        self._rear = (self._rear - 1) % len(self._slots)
        return item  # type: ignore[return-value]

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._slots)

    def __iter__(self) -> Iterator[T]:
        slots = len(self._slots)
        for offset in range(1, len(self) + 1):
            yield self._slots[(self._front + offset) % slots]  # type: ignore[misc]

    def format(self) -> str:
        """Describe the contents from front to back."""
        if self.is_empty():
            return EMPTY_MESSAGE
        return CONTENT_PREFIX + "".join(f" {item}" for item in self)

    def __repr__(self) -> str:
        return f"CircularDeque({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Add even numbers at the front and odd ones at the back, then show."""
    deque: CircularDeque[int] = CircularDeque(10)
    for number in range(1, 11):
        if number % 2 == 0:
            deque.add_front(number)
        else:
            deque.add_rear(number)
    print(deque.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())