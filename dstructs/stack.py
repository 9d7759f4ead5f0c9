"""Bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

MAX_STACK_COUNT = 100


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(Exception):
    """Raised when popping from an empty stack."""


class Stack(Generic[T]):
    """A stack holding at most ``max_count`` items."""

    def __init__(self, max_count: int = MAX_STACK_COUNT) -> None:
        if max_count < 1:
            raise ValueError(f"stack size must be at least 1, got {max_count}")
        self._max_count = max_count
        self._items: list[T] = []

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._max_count

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError("스택이 가득차있어 추가가 불가능합니다.")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("스택이 비어있어 추출이 불가능합니다.")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, max_count={self._max_count})"


def main(argv: list[str] | None = None) -> int:
    """Push two numbers and pop them back in reverse order."""
    stack: Stack[float] = Stack()
    stack.push(15.0)
    stack.push(30.0)
    while not stack.is_empty():
        print(f"{stack.pop():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())