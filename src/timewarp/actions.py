"""Per-cell action tags and local distance modes."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Union


class Action(IntEnum):
    """Which neighbouring cell produced the optimal value of a cost cell.

    ``UNKNOWN`` is the zero value so that a freshly zeroed action table reads
    back as "never computed".
    """

    UNKNOWN = 0
    # a sample of x is repeated to match y: move up one row
    INSERTED = 1
    # a sample of x is skipped: move left one column
    DELETED = 2
    # x and y advance together: move diagonally
    MATCHED = 3


class DistanceMode(Enum):
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"

    @classmethod
    def parse(cls, value: Union[str, "DistanceMode"]) -> "DistanceMode":
        """Accept a DistanceMode or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            for mode in cls:
                if mode.value == name:
                    return mode
        raise ValueError(f"unknown distance mode: {value!r}")

    def local_cost(self, a: float, b: float) -> float:
        difference = a - b
        if self is DistanceMode.MANHATTAN:
            return abs(difference)
        return difference * difference

    def finalize(self, total: float) -> float:
        """Turn the accumulated path cost into the reported distance."""
        if self is DistanceMode.MANHATTAN:
            return total
        # the cells hold squared differences, take the root once at the end
        return math.sqrt(total)
