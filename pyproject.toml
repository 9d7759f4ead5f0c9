[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "Classic data structures and algorithms: arrays, vectors, linked lists, stacks, queues, deques, hash tables, trees, quadtrees, sorting, binary search and maze exploration."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "queue",
    "deque",
    "hash table",
    "tree",
    "quadtree",
    "sorting",
    "binary search",
    "maze",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dstructs-vector = "dstructs.vector:main"
dstructs-stack = "dstructs.stack:main"
dstructs-queue = "dstructs.circular_queue:main"
dstructs-deque = "dstructs.circular_deque:main"
dstructs-search = "dstructs.search:main"
dstructs-sort = "dstructs.sorting:main"
dstructs-linked-list = "dstructs.linked_list:main"
dstructs-double-linked-list = "dstructs.double_linked_list:main"
dstructs-hash-table = "dstructs.hash_table:main"
dstructs-maze = "dstructs.maze:main"
dstructs-tree = "dstructs.tree:main"
dstructs-quadtree = "dstructs.quadtree:main"

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
