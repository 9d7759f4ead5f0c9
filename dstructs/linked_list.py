"""Singly linked list of integers."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None

    def __str__(self) -> str:
        return f"Data: {self.data}"


class LinkedList:
    """A singly linked list that adds at the head or the tail."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._count = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def add_to_head(self, data: Any) -> None:
        """Put ``data`` in front of every other item."""
        node = _Node(data)
        node.next = self._head
        self._head = node
        self._count += 1

    def insert(self, data: Any) -> None:
        """Append ``data`` after the last item."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._count += 1

    def delete(self, data: Any) -> None:
        """Remove the first item equal to ``data``.

        Raises ``ValueError`` if the list is empty or holds no such item.
        """
        if self._head is None:
            raise ValueError("리스트가 비어 있어서 삭제가 불가능합니다.")
        previous: _Node | None = None
        for node in self._nodes():
            if node.data == data:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._count -= 1
                return
            previous = node
        raise ValueError(f"값: {data}를 찾지 못했습니다.")

    def sort(self) -> None:
        """Relink the nodes so the items run in ascending order."""
        nodes = sorted(self._nodes(), key=lambda node: node.data)
        if len(nodes) < 2:
            return
        for node, following in zip(nodes, nodes[1:]):
            node.next = following
        nodes[-1].next = None
        self._head = nodes[0]

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._count

    def format(self) -> str:
        """One ``Data: <item>`` line per item, front to back."""
        return "\n".join(str(node) for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read numbers from standard input until ``q``, then print them sorted."""
    linked = LinkedList()
    tokens = _tokens(sys.stdin)
    while True:
        print("추가할 데이터를 입력해주세요(종료는 q)")
        token = next(tokens, None)
        if token is None or token in ("q", "Q"):
            break
        value = _atoi(token)
        if not value:
            print("숫자만 입력 가능합니다.")
            continue
        linked.insert(value)
        print(linked.format())

    linked.sort()
    if len(linked):
        print(linked.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())