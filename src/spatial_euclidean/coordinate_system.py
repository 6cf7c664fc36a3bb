"""coordinate_system module"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .angle import Angle
from .common import InvalidArgumentError
from .point3d import Point3D
from .vectors import Vector3D


class CoordinateSystem:
    """Affine mapping between 3D frames,
    stored as homogeneous 4x4 matrix"""

    def __init__(self, matrix: Optional[np.ndarray] = None):
        if matrix is None:
            matrix = np.identity(4, dtype=np.float64)
        _matrix = np.array(matrix, dtype=np.float64)
        if _matrix.shape != (4, 4):
            raise InvalidArgumentError(f"expected 4x4 matrix, got shape {_matrix.shape}")
        _matrix.setflags(write=False)
        self.__matrix: np.ndarray = _matrix

    @property
    def matrix(self) -> np.ndarray:
        return self.__matrix

    @classmethod
    def translation(cls, offset: Vector3D) -> CoordinateSystem:
        _m = np.identity(4, dtype=np.float64)
        _m[:3, 3] = [offset.x, offset.y, offset.z]
        return cls(_m)

    @classmethod
    def rotation(cls, angle: Angle, axis: Vector3D = Vector3D(0.0, 0.0, 1.0)) -> CoordinateSystem:
        """Rotate counterclockwise around axis through origin (Rodrigues)"""
        _axis = axis.normalize()
        if _axis.length == 0.0:
            raise InvalidArgumentError("rotation axis must not be zero")
        ux, uy, uz = _axis
        c = math.cos(angle.radians)
        s = math.sin(angle.radians)
        t = 1.0 - c
        _m = np.identity(4, dtype=np.float64)
        _m[:3, :3] = [
            [t * ux * ux + c, t * ux * uy - s * uz, t * ux * uz + s * uy],
            [t * ux * uy + s * uz, t * uy * uy + c, t * uy * uz - s * ux],
            [t * ux * uz - s * uy, t * uy * uz + s * ux, t * uz * uz + c],
        ]
        return cls(_m)

    def compose(self, other: CoordinateSystem) -> CoordinateSystem:
        """Apply self first, other afterwards"""
        return CoordinateSystem(other.matrix @ self.__matrix)

    def transform(self, point: Point3D) -> Point3D:
        _h = self.__matrix @ np.array([point.x, point.y, point.z, 1.0])
        if _h[3] != 1.0:
            _h = _h / _h[3]
        return Point3D(float(_h[0]), float(_h[1]), float(_h[2]))

    def __eq__(self, other):
        if not isinstance(other, CoordinateSystem):
            return NotImplemented
        return bool(np.array_equal(self.__matrix, other.matrix))

    def __hash__(self) -> int:
        # -0.0 and 0.0 must hash alike
        return hash(tuple(self.__matrix.ravel().tolist()))

    def __repr__(self) -> str:
        return f"CoordinateSystem({self.__matrix.tolist()})"
