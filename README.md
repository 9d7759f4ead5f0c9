# dstructs

A small collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

| Module | What it holds |
| --- | --- |
| `dstructs.array` | `FixedArray`: a fixed number of zero-filled slots; an out-of-range index reads and writes slot 0 instead of raising |
| `dstructs.vector` | `Vector`: a growable array starting at capacity 2 and doubling when full; `at`, `set`, indexing and iteration |
| `dstructs.linked_list` | `LinkedList`: singly linked; `add_to_head`, `insert` (at the tail), `delete`, `sort` (relinks in ascending order), `format` |
| `dstructs.double_linked_list` | `DoublyLinkedList`: sentinel nodes at both ends; push/pop at either end, `find`, `find_reverse`, `first`, `last`, indexing, `reversed()`, and an optional `on_empty` callback; raises `ListEmptyError` |
| `dstructs.stack` | `Stack`: bounded (100 items by default); raises `StackFullError` / `StackEmptyError` |
| `dstructs.circular_queue` | `CircularQueue`: bounded ring-buffer queue; raises `QueueFullError` / `QueueEmptyError` |
| `dstructs.circular_deque` | `CircularDeque`: bounded ring-buffer deque with `add_front`, `add_rear`, `delete_front`, `delete_rear` |
| `dstructs.hash_table` | `HashTable`: string keys to values over 19 buckets with separate chaining; `Pair`, `generate_key` (31-multiplier hash in 32-bit signed arithmetic) |
| `dstructs.tree` | `Tree` and `TreeNode`: a general tree addressed by node data, with preorder traversal and indented `format` |
| `dstructs.quadtree` | `QuadTree`, `QuadNode`, `Bounds`, `NodeIndex`: rectangles filed into the smallest quadrant that holds them, up to a maximum depth (5 by default), with overlap queries |
| `dstructs.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `quick_sort` (with `partition`), `merge_sort` (with `merge`), all in place; `format_array` |
| `dstructs.search` | `binary_search` over a sorted sequence, returning the index or -1 |
| `dstructs.maze` | depth-first (`explore_with_stack`) and breadth-first (`explore_with_queue`) maze walks, plus `parse_maze`, `find_start`, `is_valid_location`, `render` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from dstructs.vector import Vector

vector = Vector()
for value in range(1, 31):
    vector.push_back(value)

print(len(vector))        # 30
print(vector.capacity())  # 32
print(list(vector)[:5])   # [1, 2, 3, 4, 5]
```

Bounded containers raise an exception rather than silently dropping data:

```python
from dstructs.stack import Stack, StackEmptyError

stack = Stack(100)
stack.push(15.0)
stack.push(30.0)
while not stack.is_empty():
    print(stack.pop())   # 30.0, then 15.0

try:
    stack.pop()
except StackEmptyError:
    print("nothing left")
```

The hash table raises `KeyError` for a duplicate key on `add`, and for a
missing key on `find` and `delete`:

```python
from dstructs.hash_table import HashTable

table = HashTable()
table.add("Kevin", "number-3")
print(table.find("Kevin").value)  # number-3
table.delete("Kevin")
print(table.is_empty())           # True
```

Walking a maze yields each position as it is taken; the grid is marked
with `.` as the walk goes on:

```python
from dstructs.maze import SMALL_MAZE, explore_with_stack, parse_maze

grid = parse_maze(SMALL_MAZE)
steps = list(explore_with_stack(grid))
print(steps[-1])  # the goal position
```

Spatial queries with a quadtree:

```python
from dstructs.quadtree import Bounds, QuadNode, QuadTree

tree = QuadTree(Bounds(0, 0, 100, 100), 5)
tree.insert(QuadNode(Bounds(40, 40, 20, 20), 0, 5))
tree.insert(QuadNode(Bounds(20, 20, 2, 2), 0, 5))

hits = tree.query(QuadNode(Bounds(50, 50, 5, 5), 0, 5))
print(len(hits))  # 1
```

## Command-line demos

Each demo prints the structure or algorithm at work:

```
dstructs-vector
dstructs-stack
dstructs-queue
dstructs-deque
dstructs-search
dstructs-hash-table
dstructs-tree
dstructs-quadtree
```

`dstructs-sort` takes the algorithm to run as an optional argument
(`bubble`, `selection`, `insertion`, `quick` or `merge`; `quick` by
default) and sorts a built-in sample:

```
dstructs-sort merge
```

`dstructs-linked-list` reads numbers from standard input until `q`, printing
the list after each one, then prints it sorted:

```
dstructs-linked-list
```

`dstructs-double-linked-list` fills a list from the first line of a file
(`../Test.txt` by default), then deletes numbers read from standard input
until `q`:

```
dstructs-double-linked-list numbers.txt
```

`dstructs-maze` explores a built-in maze. Options: `--maze small|large`
(default `large`), `--strategy stack|queue` (default `stack`), `--delay`
in milliseconds between steps (default 500), and `--trace` to print the
positions instead of redrawing the maze:

```
dstructs-maze --maze small --trace
```

## Limitations

- The maze demo redraws the maze with ANSI escape codes, so it needs a
  terminal that understands them; use `--trace` otherwise.
- The maze walks keep pending positions in bounded containers (a stack of
  100, a queue of 10); positions that do not fit are dropped, so a walk can
  end without reaching the goal.