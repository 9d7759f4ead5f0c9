"""Region quadtree that files rectangles into the smallest quadrant holding them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_DEPTH = 5


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle positioned by its top-left corner."""

    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0

    def max_x(self) -> float:
        return self.x + self.width

    def max_y(self) -> float:
        return self.y + self.height

    def intersects(self, other: Bounds) -> bool:
        """Whether the rectangles overlap; touching edges count."""
        return not (
            other.x > self.max_x()
            or other.max_x() < self.x
            or other.y > self.max_y()
            or other.max_y() < self.y
        )


class NodeIndex(enum.Enum):
    """Where a rectangle falls relative to a node's four quadrants."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3
    STRADDLING = 4
    OUT_OF_AREA = 5


class QuadNode:
    """A region of the tree, and also the kind of item stored in one."""

    def __init__(
        self, bounds: Bounds | None = None, depth: int = 0, max_depth: int = MAX_DEPTH
    ) -> None:
        self.bounds = bounds if bounds is not None else Bounds()
        self.depth = depth
        self.max_depth = max_depth
        self.points: list[QuadNode] = []
        self.top_left: QuadNode | None = None
        self.top_right: QuadNode | None = None
        self.bottom_left: QuadNode | None = None
        self.bottom_right: QuadNode | None = None

    def _child(self, index: NodeIndex) -> QuadNode:
        child = {
            NodeIndex.TOP_LEFT: self.top_left,
            NodeIndex.TOP_RIGHT: self.top_right,
            NodeIndex.BOTTOM_LEFT: self.bottom_left,
            NodeIndex.BOTTOM_RIGHT: self.bottom_right,
        }[index]
        assert child is not None
        return child

    def insert(self, node: QuadNode) -> bool:
        """Store ``node`` as deep as it fits; False if it lies outside this region."""
        result = self.test_region(node.bounds)
        if result is NodeIndex.OUT_OF_AREA:
            return False
        if result is NodeIndex.STRADDLING or not self.subdivide():
            self.points.append(node)
            return True
        return self._child(result).insert(node)

    def query(self, query_bounds: Bounds) -> list[QuadNode]:
        """Regions whose stored items might overlap ``query_bounds``."""
        possible: list[QuadNode] = [self]
        if self.is_divided():
            for index in self.get_quads(query_bounds):
                possible.extend(self._child(index).query(query_bounds))
        return possible

    def clear(self) -> None:
        """Drop every stored item and every sub-region."""
        self.points.clear()
        if self.is_divided():
            for index in (
                NodeIndex.TOP_LEFT,
                NodeIndex.TOP_RIGHT,
                NodeIndex.BOTTOM_LEFT,
                NodeIndex.BOTTOM_RIGHT,
            ):
                self._child(index).clear()
        self.top_left = self.top_right = None
        self.bottom_left = self.bottom_right = None

    def test_region(self, bounds: Bounds) -> NodeIndex:
        """The single quadrant holding ``bounds``, or straddling / out of area."""
        quads = self.get_quads(bounds)
        if not quads:
            return NodeIndex.OUT_OF_AREA
        if len(quads) == 1:
            return quads[0]
        return NodeIndex.STRADDLING

    def get_quads(self, bounds: Bounds) -> list[NodeIndex]:
        """Quadrants of this region that ``bounds`` overlaps, in fixed order."""
        own = self.bounds
        center_x = own.x + own.width / 2.0
        center_y = own.y + own.height / 2.0

        left = bounds.x < center_x and bounds.max_x() >= own.x
        right = bounds.max_x() > center_x and bounds.x < own.max_x()
        top = bounds.y < center_y and bounds.max_y() >= own.y
        bottom = bounds.max_y() > center_y and bounds.y < own.max_y()

        quads = []
        if top and left:
            quads.append(NodeIndex.TOP_LEFT)
        if top and right:
            quads.append(NodeIndex.TOP_RIGHT)
        if bottom and left:
            quads.append(NodeIndex.BOTTOM_LEFT)
        if bottom and right:
            quads.append(NodeIndex.BOTTOM_RIGHT)
        return quads

    def subdivide(self) -> bool:
        """Split into four quadrants if allowed; False at the maximum depth."""
        if self.depth >= self.max_depth:
            return False
        if not self.is_divided():
            x, y = self.bounds.x, self.bounds.y
            half_w = self.bounds.width / 2.0
            half_h = self.bounds.height / 2.0
            depth = self.depth + 1

            def make(cx: float, cy: float) -> QuadNode:
                return QuadNode(Bounds(cx, cy, half_w, half_h), depth, self.max_depth)

            self.top_left = make(x, y)
            self.top_right = make(x + half_w, y)
            self.bottom_left = make(x, y + half_h)
            self.bottom_right = make(x + half_w, y + half_h)
        return True

    def is_divided(self) -> bool:
        return self.top_left is not None

    def __repr__(self) -> str:
        return f"QuadNode({self.bounds!r}, depth={self.depth})"


class QuadTree:
    """A quadtree over a fixed area, answering overlap queries."""

    def __init__(self, bounds: Bounds, max_depth: int = MAX_DEPTH) -> None:
        self.max_depth = max_depth
        self.root = QuadNode(bounds, 0, max_depth)

    def insert(self, node: QuadNode) -> bool:
        """Add ``node``; False if it lies entirely outside the tree's area."""
        return self.root.insert(node)

    def query(self, query_node: QuadNode) -> list[QuadNode]:
        """Stored nodes whose bounds overlap those of ``query_node``."""
        target = query_node.bounds
        return [
            point
            for region in self.root.query(target)
            for point in region.points
            if point.bounds.intersects(target)
        ]


def main(argv: list[str] | None = None) -> int:
    """Insert two rectangles and count those overlapping a query rectangle."""
    tree = QuadTree(Bounds(0, 0, 100.0, 100.0))
    tree.insert(QuadNode(Bounds(40.0, 40.0, 20.0, 20.0)))
    tree.insert(QuadNode(Bounds(20.0, 20.0, 2.0, 2.0)))

    intersects = tree.query(QuadNode(Bounds(50, 50, 5, 5)))
    if not intersects:
        print("검색 실패 ")
    else:
        print(f"겹치는 노드들 {len(intersects)}개 찾았습니다.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())