from __future__ import annotations

from enum import Enum
from typing import Final, Literal


class Absent(Enum):
    """Marker returned by lookups that found nothing.

    A distinct object rather than ``None`` so that a stored ``None`` value is
    never mistaken for a missing key.
    """

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.value


ABSENT: Final = Absent.ABSENT

AbsentType = Literal[Absent.ABSENT]
