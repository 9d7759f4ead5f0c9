"""Maze exploration with a bounded stack (depth first) or queue (breadth first).

A maze is a grid of characters indexed as ``grid[y][x]``: ``s`` marks the
start, ``g`` the goal, ``1`` a wall and ``0`` an open path.  Cells that have
been explored are overwritten with ``.``.
"""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from dstructs.circular_queue import CircularQueue, QueueFullError
from dstructs.stack import MAX_STACK_COUNT, Stack, StackFullError

START = "s"
GOAL = "g"
WALL = "1"
PATH = "0"
VISITED = "."
PLAYER = "p"

QUEUE_SIZE = 10

SUCCESS_MESSAGE = "미로 탐색 성공"

SMALL_MAZE = (
    "111111",
    "s01001",
    "100011",
    "101011",
    "10100g",
    "111111",
)

LARGE_MAZE = (
    "11111111111111111",
    "10000000000010001",
    "10111111101010101",
    "10100010001000101",
    "10101010111111101",
    "10001010000000101",
    "11111011111110101",
    "s0100000001000101",
    "10111111101011101",
    "10100000101010101",
    "10101110101010101",
    "10001010101010001",
    "11111010111011101",
    "10000010001000101",
    "10111111101110101",
    "1000000000000010g",
    "11111111111111111",
)

_MAZES = {"small": SMALL_MAZE, "large": LARGE_MAZE}

Grid = list[list[str]]


@dataclass(frozen=True)
class Position:
    """A cell of the maze, ``x`` being the column and ``y`` the row."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def parse_maze(rows: Iterable[str]) -> Grid:
    """Turn rows of text into a mutable grid of single characters."""
    grid = [list(row) for row in rows]
    if not grid:
        raise ValueError("a maze needs at least one row")
    return grid


def find_start(grid: Grid) -> Position:
    """Position of the start cell; the last one wins, ``(0, 0)`` if there is none."""
    start = Position(0, 0)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == START:
                start = Position(x, y)
    return start


def is_valid_location(grid: Grid, y: int, x: int) -> bool:
    """Whether the cell at row ``y``, column ``x`` lies inside and can be entered."""
    if not 0 <= y < len(grid) or not 0 <= x < len(grid[y]):
        return False
    return grid[y][x] in (PATH, GOAL)


def _neighbours(grid: Grid, here: Position) -> Iterator[Position]:
    # Up, down, left, right.
    for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
        if is_valid_location(grid, here.y + dy, here.x + dx):
            yield Position(here.x + dx, here.y + dy)


def _explore(
    grid: Grid,
    put: Callable[[Position], None],
    take: Callable[[], Position],
    is_empty: Callable[[], bool],
) -> Iterator[Position]:
    put(find_start(grid))
    while not is_empty():
        here = take()
        yield here
        if grid[here.y][here.x] == GOAL:
            return
        grid[here.y][here.x] = VISITED
        for neighbour in _neighbours(grid, here):
            put(neighbour)


def explore_with_stack(grid: Grid) -> Iterator[Position]:
    """Walk the maze depth first, yielding each position as it is taken.

    The grid is marked as the walk goes on; each position is yielded before
    its cell is marked.  The walk stops after the goal has been yielded.
    Positions that do not fit on the bounded stack are dropped.
    """
    stack: Stack[Position] = Stack(MAX_STACK_COUNT)

    def put(position: Position) -> None:
        try:
            stack.push(position)
        except StackFullError:
            pass

    return _explore(grid, put, stack.pop, stack.is_empty)


def explore_with_queue(grid: Grid) -> Iterator[Position]:
    """Walk the maze breadth first, yielding each position as it is taken.

    Behaves like :func:`explore_with_stack` but keeps pending positions in
    a queue of ``QUEUE_SIZE`` slots; positions that do not fit are dropped.
    """
    queue: CircularQueue[Position] = CircularQueue(QUEUE_SIZE)

    def put(position: Position) -> None:
        try:
            queue.enqueue(position)
        except QueueFullError:
            pass

    return _explore(grid, put, queue.dequeue, queue.is_empty)


def render(grid: Grid, player: Position | None = None) -> str:
    """Draw the grid, each cell followed by a space, ``p`` where the player stands."""
    lines = []
    for y, row in enumerate(grid):
        cells = (
            f"{PLAYER} " if player is not None and (x, y) == (player.x, player.y)
            else f"{cell} "
            for x, cell in enumerate(row)
        )
        lines.append("".join(cells))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Explore a built-in maze, drawing each step or tracing the positions."""
    parser = argparse.ArgumentParser(description="Find the way through a maze.")
    parser.add_argument("--maze", choices=sorted(_MAZES), default="large")
    parser.add_argument("--strategy", choices=("stack", "queue"), default="stack")
    parser.add_argument(
        "--delay", type=int, default=500, help="milliseconds between steps"
    )
    parser.add_argument(
        "--trace", action="store_true", help="print positions instead of drawing"
    )
    args = parser.parse_args(argv)

    grid = parse_maze(_MAZES[args.maze])
    print(render(grid))

    explore = explore_with_stack if args.strategy == "stack" else explore_with_queue
    reached = False
    for here in explore(grid):
        if args.trace:
            print(here, end=" ")
        else:
            if args.delay > 0:
                time.sleep(args.delay / 1000)
            print("\x1b[H\x1b[2J", end="")
            print(render(grid, here))
        if grid[here.y][here.x] == GOAL:
            reached = True

    if reached:
        print()
        print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())