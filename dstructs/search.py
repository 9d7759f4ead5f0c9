"""Binary search over a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(
    array: Sequence[Any],
    target: Any,
    low: int = 0,
    high: int | None = None,
) -> int:
    """Return the index of ``target`` within ``array[low:high + 1]``, or -1."""
    if high is None:
        high = len(array) - 1
    while low <= high:
        mid = (low + high) >> 1
        value = array[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def main(argv: list[str] | None = None) -> int:
    """Look up 7 in 1 .. 9 and report where it was found."""
    array = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    result = binary_search(array, 7, 0, len(array) - 1)
    if result < 0:
        print("검색 실패")
    else:
        print(f"검색 성공: {result}번 인덱스")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())