from pymaps.distribution import BucketDistribution, measure_distribution


def test_measure_distribution_counts_every_key():
    distribution = measure_distribution(37, 500, seed=3)
    assert distribution.bucket_count == 37
    assert distribution.total == 500


def test_measure_distribution_is_reproducible_with_seed():
    assert measure_distribution(7, 200, seed="s") == measure_distribution(7, 200, seed="s")


def test_measure_distribution_without_keys():
    distribution = measure_distribution(4, 0)
    assert distribution.bucket_sizes == [0, 0, 0, 0]
    assert distribution.empty_buckets == 4
    assert distribution.longest_chain == 0


def test_lines():
    distribution = BucketDistribution([3, 0, 12])
    assert list(distribution.lines()) == [
        "Bucket load distribution (bucket : count):",
        "  0 :    3",
        "  1 :    0",
        "  2 :   12",
    ]
    assert distribution.longest_chain == 12
    assert distribution.empty_buckets == 1
