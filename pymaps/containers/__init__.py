from pymaps.containers.absent import ABSENT, Absent, AbsentType
from pymaps.containers.errors import ContainerError, InvalidBucketCountError, NullKeyError
from pymaps.containers.hash_map import HashMap
from pymaps.containers.ordered_map import OrderedMap

__all__ = [
    "ABSENT",
    "Absent",
    "AbsentType",
    "ContainerError",
    "HashMap",
    "InvalidBucketCountError",
    "NullKeyError",
    "OrderedMap",
]
