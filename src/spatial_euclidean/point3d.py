"""point3d module"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .common import HASH_FACTOR, unordered
from .vectors import Vector3D


class Point3D(NamedTuple):
    """Location in 3 dimensional cartesian space"""
    x: float
    y: float
    z: float

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        # Point - Point = Vector
        if isinstance(other, Point3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3D):
            return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, other):
        return NotImplemented

    __rmul__ = __mul__

    def distance_to(self, other: Point3D) -> float:
        return (other - self).length

    def to_vector(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __eq__(self, other):
        if not isinstance(other, Point3D):
            return False
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return (((hash(self.x) * HASH_FACTOR) ^ hash(self.y)) * HASH_FACTOR) ^ hash(self.z)

    __lt__ = __le__ = __gt__ = __ge__ = unordered
