"""angle module"""

from __future__ import annotations

import math
from typing import NamedTuple


class Angle(NamedTuple):
    """Planar angle, stored in radians"""
    radians: float

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @classmethod
    def from_radians(cls, value: float) -> Angle:
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value: float) -> Angle:
        return cls(math.radians(value))

    def __str__(self) -> str:
        return f'{self.degrees}°'
