"""
Positional index of the name slots inside an ordered raw list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from namefully.types import NameOrder

ABSENT = -1


@dataclass(frozen=True, slots=True)
class NameIndex:
    """Where each slot sits in a raw list; ``-1`` marks an absent slot."""

    prefix: int
    first_name: int
    middle_name: int
    last_name: int
    suffix: int

    @classmethod
    def base(cls) -> "NameIndex":
        return cls(0, 1, 2, 3, 4)

    @classmethod
    def when(cls, order: NameOrder, count: int = 2) -> "NameIndex":
        """Resolve slot positions for ``count`` parts ordered by ``order``.

        Counts outside 2..5 give the base index; rejecting them is the
        list validator's job.
        """
        return _TABLE.get((order, count), _BASE)

    @property
    def positions(self) -> Dict[str, int]:
        return {
            "prefix": self.prefix,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "suffix": self.suffix,
        }


_BASE = NameIndex.base()

_TABLE: Dict[Tuple[NameOrder, int], NameIndex] = {
    # first + last
    (NameOrder.FIRST_NAME, 2): NameIndex(ABSENT, 0, ABSENT, 1, ABSENT),
    # first + middle + last
    (NameOrder.FIRST_NAME, 3): NameIndex(ABSENT, 0, 1, 2, ABSENT),
    # prefix + first + middle + last
    (NameOrder.FIRST_NAME, 4): NameIndex(0, 1, 2, 3, ABSENT),
    # prefix + first + middle + last + suffix
    (NameOrder.FIRST_NAME, 5): NameIndex(0, 1, 2, 3, 4),
    # last + first
    (NameOrder.LAST_NAME, 2): NameIndex(ABSENT, 1, ABSENT, 0, ABSENT),
    # last + first + middle
    (NameOrder.LAST_NAME, 3): NameIndex(ABSENT, 1, 2, 0, ABSENT),
    # prefix + last + first + middle
    (NameOrder.LAST_NAME, 4): NameIndex(0, 2, 3, 1, ABSENT),
    # prefix + last + first + middle + suffix
    (NameOrder.LAST_NAME, 5): NameIndex(0, 2, 3, 1, 4),
}
