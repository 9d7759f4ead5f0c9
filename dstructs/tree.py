"""General tree whose nodes keep any number of ordered children."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

INDENT = "  "


class TreeNode:
    """A node holding ``data``, a link to its parent and its children."""

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.parent: TreeNode | None = None
        self.children: list[TreeNode] = []

    def add_child(self, child: Any) -> TreeNode:
        """Attach ``child`` (a node, or data to wrap in one) and return the node."""
        node = child if isinstance(child, TreeNode) else TreeNode(child)
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, child: TreeNode) -> None:
        """Detach ``child`` together with everything below it."""
        if not any(existing is child for existing in self.children):
            raise ValueError(f"{child.data!r} is not a child of {self.data!r}")
        self.children = [existing for existing in self.children if existing is not child]
        child._discard()

    def _discard(self) -> None:
        for grandchild in self.children:
            grandchild._discard()
        self.children = []
        self.parent = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r}, children={len(self.children)})"


class Tree:
    """A tree with a fixed root, addressed by the data its nodes hold."""

    def __init__(self, data: Any) -> None:
        self.root = TreeNode(data)

    def add_child(self, parent_data: Any, child_data: Any) -> TreeNode:
        """Add ``child_data`` under the first node holding ``parent_data``."""
        parent = self.find(parent_data)
        if parent is None:
            raise KeyError("해당 값을 갖는 부모 노드 검색에 실패했습니다.")
        return parent.add_child(child_data)

    def remove(self, data: Any) -> None:
        """Remove the first node holding ``data`` and all of its descendants.

        A missing node raises ``KeyError``; the root cannot be removed and
        raises ``ValueError``.
        """
        node = self.find(data)
        if node is None:
            raise KeyError("삭제할 노드를 찾지 못했습니다.")
        if node is self.root:
            raise ValueError("루트 노드는 삭제할 수 없습니다.")
        assert node.parent is not None
        node.parent.remove_child(node)

    def find(self, data: Any) -> TreeNode | None:
        """The first node in preorder whose data equals ``data``, or ``None``."""
        for node, _ in self._walk(self.root, 0):
            if node.data == data:
                return node
        return None

    def _walk(self, node: TreeNode, depth: int) -> Iterator[tuple[TreeNode, int]]:
        yield node, depth
        for child in node.children:
            yield from self._walk(child, depth + 1)

    def preorder(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(depth, data)`` for each node, parents before children."""
        for node, depth in self._walk(self.root, 0):
            yield depth, node.data

    def format(self) -> str:
        """One line per node in preorder, indented two spaces per level."""
        return "\n".join(f"{INDENT * depth}{data}" for depth, data in self.preorder())

    def __repr__(self) -> str:
        return f"Tree({[data for _, data in self.preorder()]!r})"


def main(argv: list[str] | None = None) -> int:
    """Build a small tree and print it in preorder."""
    tree = Tree("A")
    for parent, child in [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")]:
        tree.add_child(parent, child)
    print(tree.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())