from parametrization import Parametrization

from pymaps.containers import HashMap
from pymaps.testing_key import TestingKey


@Parametrization.autodetect_parameters()
@Parametrization.case(name="zero", identifier=0, expected_hash=0)
@Parametrization.case(name="low_bits_only", identifier=0x1234, expected_hash=0x1234)
@Parametrization.case(name="mixed", identifier=0x12345678, expected_hash=0x1234444C)
@Parametrization.case(name="negative", identifier=-1, expected_hash=0xFFFF0000)
def test_hash(identifier, expected_hash):
    assert hash(TestingKey(identifier)) == expected_hash


def test_equality_follows_identifier():
    assert TestingKey(5) == TestingKey(5)
    assert TestingKey(5) != TestingKey(6)
    assert TestingKey(5) != 5


def test_str():
    assert str(TestingKey(42)) == "Key{42}"
    assert str(TestingKey(-7)) == "Key{-7}"


def test_usable_as_hash_map_key():
    table = HashMap(37)
    table.put(TestingKey(1), "one")
    table.put(TestingKey(1), "uno")
    assert table.get(TestingKey(1)) == "uno"
    assert table.size == 1
