"""Fixed-capacity first-in, first-out queue on a ring of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

EMPTY_MESSAGE = "큐가 비어 있습니다."
CONTENT_PREFIX = "큐 내용: "


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class CircularQueue(Generic[T]):
    """A ring-buffer queue holding at most ``size`` items.

    One extra slot is kept free so that a full queue can be told apart
    from an empty one.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError(f"queue size must be at least 1, got {size}")
        self._slots: list[T | None] = [None] * (size + 1)
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % len(self._slots) == self._front

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back."""
        if self.is_full():
            raise QueueFullError("큐가 가득 찼습니다.")
        self._rear = (self._rear + 1) % len(self._slots)
        self._slots[self._rear] = item

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("큐가 비어있습니다.")
        self._front = (self._front + 1) % len(self._slots)
        item = self._slots[self._front]
        self._slots[self._front] = None
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
        return f"CircularQueue({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Enqueue 1 .. 10, show the queue, dequeue three and show it again."""
    queue: CircularQueue[int] = CircularQueue(99)
    for number in range(1, 11):
        queue.enqueue(number)
    print(queue.format())
    for _ in range(3):
        queue.dequeue()
    print(queue.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())