"""Classic in-place comparison sorts over mutable sequences of numbers."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

_SMALL_SAMPLE = [5, 2, 8, 4, 1]

_MEDIUM_SAMPLE = [5, 2, 8, 4, 1, 7, 3, 6, 9, 10, 15, 13, 14, 12, 17, 16]

_LARGE_SAMPLE = [
    1, 58, 10, 20, 56, 63, 73, 5, 28, 37,
    80, 61, 82, 45, 11, 66, 83, 59, 22, 64,
    52, 89, 94, 76, 44, 40, 75, 2, 23, 57,
    92, 8, 41, 96, 15, 84, 35, 69, 54, 47,
    90, 24, 43, 74, 34, 85, 72, 95, 18, 17,
    98, 9, 29, 53, 27, 79, 39, 51, 31, 16,
    6, 97, 26, 100, 21, 48, 33, 60, 91, 19,
    30, 13, 71, 78, 87, 25, 81, 4, 42, 93,
    49, 12, 14, 7, 62, 77, 38, 99, 88, 50,
    32, 46, 70, 3, 86, 68, 36, 67, 55, 65,
]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place by repeatedly swapping neighbours."""
    length = len(items)
    for done in range(length - 1):
        for j in range(length - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place by selecting the minimum each pass."""
    length = len(items)
    for i in range(length - 1):
        min_index = min(range(i, length), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place by inserting each key into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``items[left:right + 1]`` around ``items[left]``.

    Returns the final index of the pivot: everything before it is no greater,
    everything after it no smaller.
    """
    pivot = items[left]
    low = left + 1
    high = right
    while low <= high:
        while low <= right and items[low] <= pivot:
            low += 1
        while high > left and items[high] >= pivot:
            high -= 1
        if low > high:
            break
        items[low], items[high] = items[high], items[low]
    items[left], items[high] = items[high], items[left]
    return high


def quick_sort(
    items: MutableSequence[Any], left: int = 0, right: int | None = None
) -> None:
    """Sort ``items[left:right + 1]`` ascending in place with quicksort."""
    if right is None:
        right = len(items) - 1
    while left < right:
        pivot = partition(items, left, right)
        # Recurse into the smaller side so the stack depth stays logarithmic.
        if pivot - left < right - pivot:
            quick_sort(items, left, pivot - 1)
            left = pivot + 1
        else:
            quick_sort(items, pivot + 1, right)
            right = pivot - 1


def merge(
    items: MutableSequence[Any], left: Sequence[Any], right: Sequence[Any]
) -> None:
    """Merge the sorted ``left`` and ``right`` into the front of ``items``.

    On ties the element from ``left`` comes first.
    """
    total = len(left) + len(right)
    if len(items) < total:
        raise ValueError(
            f"destination holds {len(items)} items, {total} are needed"
        )
    items[:total] = list(heapq.merge(left, right))


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place with a stable merge sort."""
    length = len(items)
    if length <= 1:
        return
    mid = length >> 1
    left = list(items[:mid])
    right = list(items[mid:])
    merge_sort(left)
    merge_sort(right)
    merge(items, left, right)


def format_array(items: Iterable[Any]) -> str:
    """Join the items with ``", "``."""
    return ", ".join(str(item) for item in items)


_ALGORITHMS = {
    "bubble": (bubble_sort, _SMALL_SAMPLE, "정렬 전: ", "정렬 후: ", None),
    "selection": (
        selection_sort, _MEDIUM_SAMPLE, "정렬 전 배열: ", "정렬 후 배열: ", None,
    ),
    "insertion": (
        insertion_sort, _MEDIUM_SAMPLE, "정렬 전 배열: ", "정렬 후 배열: ", None,
    ),
    "quick": (
        quick_sort, _LARGE_SAMPLE, "정렬 전 배열: ", "정렬 후 배열: ",
        "퀵 정렬이 완료되었습니다.",
    ),
    "merge": (
        merge_sort, _LARGE_SAMPLE, "정렬 전 배열: ", "정렬 후 배열: ",
        "병합 정렬이 완료되었습니다.",
    ),
}


def main(argv: list[str] | None = None) -> int:
    """Sort a sample array with the chosen algorithm, printing before and after."""
    parser = argparse.ArgumentParser(description="Run one of the sorting algorithms.")
    parser.add_argument(
        "algorithm", nargs="?", default="quick", choices=sorted(_ALGORITHMS)
    )
    args = parser.parse_args(argv)

    sort, sample, before, after, done = _ALGORITHMS[args.algorithm]
    items = list(sample)
    print(before + format_array(items))
    sort(items)
    if done is not None:
        print()
    print(after + format_array(items))
    if done is not None:
        print(done)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())