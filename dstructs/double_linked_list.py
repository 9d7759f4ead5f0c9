"""Doubly linked list with sentinel nodes at both ends."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

DEFAULT_INPUT = "../Test.txt"


class ListEmptyError(IndexError):
    """Raised when an operation needs an item but the list holds none."""


class _Node:
    __slots__ = ("data", "next", "previous")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.next: _Node | None = None
        self.previous: _Node | None = None


class DoublyLinkedList(Generic[T]):
    """A list that adds and removes at either end in constant time.

    ``on_empty`` is called, when given, every time an operation fails for
    lack of a matching item, just before the error is raised.
    """

    def __init__(self, on_empty: Callable[[], None] | None = None) -> None:
        self._on_empty = on_empty
        self._first = _Node()
        self._last = _Node()
        self._first.next = self._last
        self._last.previous = self._first
        self._count = 0

    def _raise_event(self) -> None:
        if self._on_empty is not None:
            self._on_empty()

    def _require_items(self) -> None:
        if self._count == 0:
            self._raise_event()
            raise ListEmptyError("리스트가 비어있습니다.")

    def _nodes(self) -> Iterator[_Node]:
        node = self._first.next
        while node is not self._last:
            assert node is not None
            yield node
            node = node.next

    def _nodes_reversed(self) -> Iterator[_Node]:
        node = self._last.previous
        while node is not self._first:
            assert node is not None
            yield node
            node = node.previous

    def _link_after(self, anchor: _Node, data: T) -> None:
        node = _Node(data)
        following = anchor.next
        assert following is not None
        node.previous = anchor
        node.next = following
        anchor.next = node
        following.previous = node
        self._count += 1

    def _unlink(self, node: _Node) -> T:
        assert node.previous is not None and node.next is not None
        node.previous.next = node.next
        node.next.previous = node.previous
        node.next = node.previous = None
        self._count -= 1
        return node.data

    def clear(self) -> None:
        """Remove every item."""
        self._first.next = self._last
        self._last.previous = self._first
        self._count = 0

    def push_first(self, data: T) -> None:
        """Add ``data`` in front of every other item."""
        self._link_after(self._first, data)

    def push_last(self, data: T) -> None:
        """Add ``data`` after every other item."""
        assert self._last.previous is not None
        self._link_after(self._last.previous, data)

    def delete(self, data: T) -> None:
        """Remove the first item equal to ``data``.

        Raises ``ListEmptyError`` on an empty list and ``ValueError`` when
        no item matches.
        """
        self._require_items()
        for node in self._nodes():
            if node.data == data:
                self._unlink(node)
                return
        self._raise_event()
        raise ValueError("삭제할 노드를 찾지 못했습니다.")

    def find(self, data: T) -> int | None:
        """Index of the first item equal to ``data``, searching forwards."""
        for index, node in enumerate(self._nodes()):
            if node.data == data:
                return index
        return None

    def find_reverse(self, data: T) -> int | None:
        """Index of the last item equal to ``data``, searching backwards."""
        for offset, node in enumerate(self._nodes_reversed()):
            if node.data == data:
                return self._count - 1 - offset
        return None

    def pop_first(self) -> T:
        """Remove and return the first item."""
        self._require_items()
        assert self._first.next is not None
        return self._unlink(self._first.next)

    def pop_last(self) -> T:
        """Remove and return the last item."""
        self._require_items()
        assert self._last.previous is not None
        return self._unlink(self._last.previous)

    def first(self) -> T:
        """The first item."""
        self._require_items()
        assert self._first.next is not None
        return self._first.next.data

    def last(self) -> T:
        """The last item."""
        self._require_items()
        assert self._last.previous is not None
        return self._last.previous.data

    def is_empty(self) -> bool:
        return self._count == 0

    def __getitem__(self, index: int) -> T:
        self._require_items()
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError(f"list index {index} out of range")
        if index <= self._count // 2:
            nodes = self._nodes()
            steps = index
        else:
            nodes = self._nodes_reversed()
            steps = self._count - 1 - index
        for _ in range(steps):
            next(nodes)
        return next(nodes).data

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        return (node.data for node in self._nodes_reversed())

    def __len__(self) -> int:
        return self._count

    def format(self) -> str:
        """One ``데이터: <item>`` line per item, front to back."""
        return "\n".join(f"데이터: {item}" for item in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _show(linked: DoublyLinkedList[Any]) -> None:
    text = linked.format()
    if text:
        print(text)


def main(argv: list[str] | None = None) -> int:
    """Load numbers from a file, then delete numbers read from standard input."""
    parser = argparse.ArgumentParser(
        description="Fill a list from a file and delete entries interactively."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            first_line = handle.readline()
    except OSError:
        print("파일을 찾지 못했습니다.")
        return 0

    linked: DoublyLinkedList[int] = DoublyLinkedList()
    for token in first_line.split(" "):
        if token:
            linked.push_last(_atoi(token))
    _show(linked)

    tokens = _tokens(sys.stdin)
    while True:
        print("삭제할 데이터를 입력해주세요(종료는 q)")
        token = next(tokens, None)
        if token is None or token in ("q", "Q"):
            break
        value = _atoi(token)
        if not value:
            print("숫자만 입력 가능합니다.")
            continue
        try:
            linked.delete(value)
        except ListEmptyError:
            print("리스트가 비어있어 노드를 삭제할 수 없습니다.")
        except ValueError as error:
            print(error)
        _show(linked)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())