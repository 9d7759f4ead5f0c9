"""String-to-string hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from dstructs.double_linked_list import DoublyLinkedList

BUCKET_COUNT = 19

_INT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def generate_key(key_string: str) -> int:
    """Hash ``key_string`` as ``h = h * 31 + byte`` in 32-bit signed arithmetic.

    Bytes are the UTF-8 encoding, read as signed chars; the result is made
    non-negative.
    """
    key = 0
    for byte in key_string.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        key = _to_int32(key * 31 + signed)
    return abs(key)


@dataclass
class Pair:
    """A key and its value; equal when both match, ordered by key."""

    key: Any = None
    value: Any = None

    def __lt__(self, other: Pair) -> bool:
        return self.key < other.key

    def __le__(self, other: Pair) -> bool:
        return self.key <= other.key

    def __gt__(self, other: Pair) -> bool:
        return self.key > other.key

    def __ge__(self, other: Pair) -> bool:
        return self.key >= other.key


class HashTable:
    """Maps unique string keys to string values over a fixed set of buckets."""

    def __init__(self) -> None:
        self._buckets: list[DoublyLinkedList[Pair]] = [
            DoublyLinkedList() for _ in range(BUCKET_COUNT)
        ]

    def _bucket(self, key: str) -> DoublyLinkedList[Pair]:
        return self._buckets[generate_key(key) % BUCKET_COUNT]

    def add(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``; a key already present raises ``KeyError``."""
        bucket = self._bucket(key)
        if any(entry.key == key for entry in bucket):
            raise KeyError(f"키가 중복되었습니다: {key}")
        bucket.push_last(Pair(key, value))

    def delete(self, key: str) -> None:
        """Remove the entry for ``key``; a missing key raises ``KeyError``."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                bucket.delete(entry)
                return
        raise KeyError(f"키를 찾을 수 없습니다: {key}")

    def find(self, key: str) -> Pair:
        """Return the entry for ``key``; a missing key raises ``KeyError``."""
        for entry in self._bucket(key):
            if entry.key == key:
                return entry
        raise KeyError("해당 키로 데이터를 검색하지 못했습니다.")

    def is_empty(self) -> bool:
        return all(bucket.is_empty() for bucket in self._buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Pair]:
        for bucket in self._buckets:
            yield from bucket

    def format(self) -> str:
        """One ``키: <key>, 값: <value>`` line per entry, bucket by bucket."""
        return "\n".join(f"키: {entry.key}, 값: {entry.value}" for entry in self)

    def __repr__(self) -> str:
        return f"HashTable({[(entry.key, entry.value) for entry in self]!r})"


def main(argv: list[str] | None = None) -> int:
    """Add, look up and delete a few entries, printing the table as it goes."""
    table = HashTable()
    for key, value in [
        ("Ronnie", "number-1"),
        ("Ronnie", "number-2"),
        ("Kevin", "number-3"),
        ("Baker", "number-4"),
        ("Taejun", "number-5"),
    ]:
        try:
            table.add(key, value)
        except KeyError as error:
            print(error.args[0])

    print(table.format())

    try:
        found = table.find("Ronnie")
    except KeyError as error:
        print(error.args[0])
    else:
        print(f"검색 결과: {found.key}, {found.value}")

    for key in ("Ronnie", "Baker", "Test"):
        try:
            table.delete(key)
        except KeyError as error:
            print(error.args[0])
        else:
            print(f"키가 삭제되었습니다: {key}")

    print(table.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())