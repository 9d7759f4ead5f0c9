"""Fixed-size array whose out-of-range accesses fall back to the first slot."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class FixedArray:
    """An array of a fixed number of slots, all starting at zero.

    An index outside ``0 .. size - 1`` (negative ones included) does not
    raise: both reads and writes are redirected to slot 0.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"array size must be at least 1, got {size}")
        self._data: list[Any] = [0] * size

    def _slot(self, index: int) -> int:
        return index if 0 <= index < len(self._data) else 0

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[self._slot(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._slot(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"FixedArray({self._data!r})"


def main(argv: list[str] | None = None) -> int:
    """Fill a twenty-slot array with 1 .. 20."""
    array = FixedArray(20)
    for position in range(len(array)):
        array[position] = position + 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())