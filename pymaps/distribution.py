from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from dataclasses import dataclass

from pymaps.containers.hash_map import HashMap
from pymaps.testing_key import TestingKey

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@dataclass
class BucketDistribution:
    bucket_sizes: list[int]

    @property
    def bucket_count(self) -> int:
        return len(self.bucket_sizes)

    @property
    def total(self) -> int:
        return sum(self.bucket_sizes)

    @property
    def longest_chain(self) -> int:
        return max(self.bucket_sizes, default=0)

    @property
    def empty_buckets(self) -> int:
        return self.bucket_sizes.count(0)

    def lines(self) -> Iterator[str]:
        yield "Bucket load distribution (bucket : count):"
        for index, count in enumerate(self.bucket_sizes):
            yield f" {index:2d} : {count:4d}"


def fill_random(table: HashMap[TestingKey, int], keys_count: int, rng: random.Random) -> None:
    for value in range(keys_count):
        table.put(TestingKey(rng.randint(INT32_MIN, INT32_MAX)), value)


def measure_distribution(bucket_count: int, keys_count: int, seed: int | str | None = None) -> BucketDistribution:
    """Insert ``keys_count`` random keys with sequential values and report how they spread over the buckets."""
    table: HashMap[TestingKey, int] = HashMap(bucket_count)

    logger.info("inserting %d random keys into %d buckets (seed=%r)", keys_count, bucket_count, seed)
    fill_random(table, keys_count, random.Random(seed))

    distribution = BucketDistribution(table.bucket_sizes())
    logger.debug(
        "inserted %d distinct keys, load factor %.2f, longest chain %d, %d empty buckets",
        table.size,
        table.load_factor,
        distribution.longest_chain,
        distribution.empty_buckets,
    )
    return distribution
