from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from pymaps.containers.absent import ABSENT, AbsentType
from pymaps.containers.errors import InvalidBucketCountError, NullKeyError

logger = logging.getLogger(__name__)

HashableKeyType = TypeVar("HashableKeyType", bound=Hashable)
ValueType = TypeVar("ValueType")

DEFAULT_BUCKET_COUNT = 11
HASH_MASK = 0x7FFFFFFF


@dataclass(slots=True, eq=False)
class _Entry(Generic[HashableKeyType, ValueType]):
    key: HashableKeyType
    value: ValueType
    next: _Entry[HashableKeyType, ValueType] | None = None


class HashMap(Generic[HashableKeyType, ValueType]):
    """Separate-chaining hash table with a fixed number of buckets.

    The table never resizes, so chains grow with the load factor. New keys are
    pushed at the head of their bucket's chain.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count <= 0:
            raise InvalidBucketCountError(bucket_count)

        self._buckets: list[_Entry[HashableKeyType, ValueType] | None] = [None] * bucket_count
        self._size = 0
        logger.debug("created hash map with %d buckets", bucket_count)

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def size(self) -> int:
        return self._size

    @property
    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: HashableKeyType) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[HashableKeyType]:
        for entry in self._iterate_entries():
            yield entry.key

    def __repr__(self) -> str:
        items = ", ".join(f"{entry.key!r}: {entry.value!r}" for entry in self._iterate_entries())
        return f"{type(self).__name__}(bucket_count={self.bucket_count}, {{{items}}})"

    def bucket_index(self, key: HashableKeyType) -> int:
        if key is None:
            raise NullKeyError()
        return (hash(key) & HASH_MASK) % len(self._buckets)

    def _iterate_chain(self, index: int) -> Iterator[_Entry[HashableKeyType, ValueType]]:
        entry = self._buckets[index]
        while entry is not None:
            yield entry
            entry = entry.next

    def _iterate_entries(self) -> Iterator[_Entry[HashableKeyType, ValueType]]:
        for index in range(len(self._buckets)):
            yield from self._iterate_chain(index)

    def _find(self, key: HashableKeyType) -> _Entry[HashableKeyType, ValueType] | None:
        for entry in self._iterate_chain(self.bucket_index(key)):
            if entry.key == key:
                return entry
        return None

    def put(self, key: HashableKeyType, value: ValueType) -> None:
        index = self.bucket_index(key)
        for entry in self._iterate_chain(index):
            if entry.key == key:
                entry.value = value
                return

        self._buckets[index] = _Entry(key, value, self._buckets[index])
        self._size += 1

    def get(self, key: HashableKeyType) -> ValueType | AbsentType:
        entry = self._find(key)
        if entry is None:
            return ABSENT
        return entry.value

    def remove(self, key: HashableKeyType) -> ValueType | AbsentType:
        index = self.bucket_index(key)

        previous: _Entry[HashableKeyType, ValueType] | None = None
        current = self._buckets[index]
        while current is not None and current.key != key:
            previous = current
            current = current.next

        if current is None:
            return ABSENT

        if previous is None:
            self._buckets[index] = current.next
        else:
            previous.next = current.next
        self._size -= 1
        return current.value

    def contains(self, value: ValueType) -> bool:
        """Return True if any key maps to a value equal to ``value``. Scans the whole table."""
        return any(entry.value == value for entry in self._iterate_entries())

    def get_key(self, value: ValueType) -> HashableKeyType | AbsentType:
        """Return the first key, in bucket then chain order, whose value equals ``value``."""
        for entry in self._iterate_entries():
            if entry.value == value:
                return entry.key
        return ABSENT

    def bucket_sizes(self) -> list[int]:
        return [sum(1 for _ in self._iterate_chain(index)) for index in range(len(self._buckets))]
