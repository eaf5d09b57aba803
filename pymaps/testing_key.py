from __future__ import annotations

from dataclasses import dataclass

INT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class TestingKey:
    """Integer key whose hash mixes the high half of its low 32 bits into the low half."""

    __test__ = False

    identifier: int

    def __hash__(self) -> int:
        unsigned = self.identifier & INT32_MASK
        return unsigned ^ (unsigned >> 16)

    def __str__(self) -> str:
        return f"Key{{{self.identifier}}}"
