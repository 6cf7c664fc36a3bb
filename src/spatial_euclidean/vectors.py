"""Displacements in 2 and 3 dimensional cartesian space"""

from __future__ import annotations

import math
from typing import NamedTuple

from .common import HASH_FACTOR, unordered


class Vector2D(NamedTuple):
    """direction and magnitude in 2D"""
    x: float
    y: float

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other):
        if isinstance(other, Vector2D):
            return Vector2D(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector2D):
            return Vector2D(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Vector2D(self.x * scalar, self.y * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return False
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return (hash(self.x) * HASH_FACTOR) ^ hash(self.y)

    __lt__ = __le__ = __gt__ = __ge__ = unordered


class Vector3D(NamedTuple):
    """direction and magnitude in 3D"""
    x: float
    y: float
    z: float

    @property
    def length(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def normalize(self) -> Vector3D:
        _len = self.length
        if _len == 0.0:
            return Vector3D(0.0, 0.0, 0.0)
        return Vector3D(self.x / _len, self.y / _len, self.z / _len)

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Vector3D):
            return False
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return (((hash(self.x) * HASH_FACTOR) ^ hash(self.y)) * HASH_FACTOR) ^ hash(self.z)

    __lt__ = __le__ = __gt__ = __ge__ = unordered
