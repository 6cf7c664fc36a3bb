"""Point in 2 dimensional cartesian space"""

from __future__ import annotations

import math
import typing
from typing import Iterable, NamedTuple, Optional, Union
from xml.dom.minidom import Document, Element, getDOMImplementation

import numpy as np
from shapely.geometry import Point as ShapelyPoint

from .angle import Angle
from .common import (
    DEFAULT_TAG_NAME,
    HASH_FACTOR,
    INVARIANT,
    MEMBER_X,
    MEMBER_Y,
    InvalidArgumentError,
    NumberFormat,
    unordered,
)
from .coordinate_system import CoordinateSystem
from .parser import parse_item_2d
from .point3d import Point3D
from .vectors import Vector2D, Vector3D
from .xml_util import MinidomUtil, XmlSource


class Point2D(NamedTuple):
    """Immutable location (x, y)

    Equality via == is exact, use equals(other, tolerance)
    for comparison within a per-coordinate bound.
    """
    x: float
    y: float

    #############
    # factories #
    #############
    @classmethod
    def origin(cls) -> Point2D:
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, r: float, angle: Angle) -> Point2D:
        """Point r from origin, rotated counterclockwise from x-axis"""
        return cls(r * math.cos(angle.radians), r * math.sin(angle.radians))

    @classmethod
    def from_sequence(cls, coords: Iterable[float]) -> Point2D:
        """Create from pair of coordinates in order x, y"""
        _coords = list(coords)
        if len(_coords) != 2:
            raise InvalidArgumentError(f"expected 2 coordinates, got {len(_coords)}")
        try:
            return cls(float(_coords[0]), float(_coords[1]))
        except (TypeError, ValueError) as _err:
            raise InvalidArgumentError(f"non-numeric coordinates {_coords}") from _err

    @classmethod
    def from_vector(cls, vector: Union[np.ndarray, typing.Sequence[float]]) -> Point2D:
        """Create from dense numeric vector of length 2"""
        try:
            _vec = np.asarray(vector, dtype=np.float64)
        except (TypeError, ValueError) as _err:
            raise InvalidArgumentError(f"non-numeric vector {vector!r}") from _err
        if _vec.ndim != 1 or _vec.shape[0] != 2:
            raise InvalidArgumentError(
                f"The vector length must be 2 in order to convert it to a Point2D (got shape {_vec.shape})")
        return cls(float(_vec[0]), float(_vec[1]))

    @classmethod
    def from_shapely(cls, point: ShapelyPoint) -> Point2D:
        if point.is_empty:
            raise InvalidArgumentError("empty shapely point")
        return cls(float(point.x), float(point.y))

    @classmethod
    def parse(cls, text: str, number_format: NumberFormat = INVARIANT) -> Point2D:
        """Convert text like '(x, y)' or 'x,y' into a point"""
        x, y = parse_item_2d(text, number_format)
        return cls(x, y)

    @classmethod
    def centroid(cls, points: Iterable[Point2D]) -> Point2D:
        """Center of mass of any non-empty set of points"""
        _points = list(points)
        if not _points:
            raise InvalidArgumentError("centroid of empty point collection is undefined")
        n_points = len(_points)
        return cls(
            math.fsum(p.x for p in _points) / n_points,
            math.fsum(p.y for p in _points) / n_points,
        )

    @classmethod
    def midpoint(cls, point1: Point2D, point2: Point2D) -> Point2D:
        return cls.centroid([point1, point2])

    ##############
    # arithmetic #
    ##############
    def add_vector2d(self, vector: Vector2D) -> Point2D:
        return Point2D(self.x + vector.x, self.y + vector.y)

    def add_vector3d(self, vector: Vector3D) -> Point3D:
        return Point3D(self.x + vector.x, self.y + vector.y, vector.z)

    def subtract_vector2d(self, vector: Vector2D) -> Point2D:
        return Point2D(self.x - vector.x, self.y - vector.y)

    def subtract_vector3d(self, vector: Vector3D) -> Point3D:
        return Point3D(self.x - vector.x, self.y - vector.y, -1 * vector.z)

    def subtract_point(self, other: Point2D) -> Vector2D:
        """Displacement from other to self"""
        return Vector2D(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        if isinstance(other, Vector2D):
            return self.add_vector2d(other)
        if isinstance(other, Vector3D):
            return self.add_vector3d(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point2D):
            return self.subtract_point(other)
        if isinstance(other, Vector2D):
            return self.subtract_vector2d(other)
        if isinstance(other, Vector3D):
            return self.subtract_vector3d(other)
        return NotImplemented

    def __mul__(self, other):
        return NotImplemented

    __rmul__ = __mul__

    def vector_to(self, other: Point2D) -> Vector2D:
        return other - self

    def distance_to(self, other: Point2D) -> float:
        """Straight line distance to other point"""
        return self.vector_to(other).length

    ###############
    # conversions #
    ###############
    def to_vector2d(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def to_point3d(self) -> Point3D:
        return Point3D(self.x, self.y, 0.0)

    def to_vector(self) -> np.ndarray:
        """Dense numeric vector [x, y]"""
        return np.array([self.x, self.y], dtype=np.float64)

    def to_shapely(self) -> ShapelyPoint:
        return ShapelyPoint(self.x, self.y)

    def transform_by_matrix(self, matrix: np.ndarray) -> Point2D:
        try:
            _matrix = np.asarray(matrix, dtype=np.float64)
        except (TypeError, ValueError) as _err:
            raise InvalidArgumentError(f"non-numeric matrix {matrix!r}") from _err
        if _matrix.ndim != 2 or _matrix.shape[1] != 2:
            raise InvalidArgumentError(f"matrix of shape {_matrix.shape} not conformant to vector of length 2")
        return Point2D.from_vector(_matrix @ self.to_vector())

    def transform_by_coordinate_system(self, coordinate_system: CoordinateSystem) -> Point3D:
        return coordinate_system.transform(self.to_point3d())

    def transform_by(self, transformation):
        """Apply linear map (matrix) or coordinate system

        Matrices yield a Point2D, coordinate systems a Point3D.
        """
        if isinstance(transformation, CoordinateSystem):
            return self.transform_by_coordinate_system(transformation)
        return self.transform_by_matrix(transformation)

    ############
    # equality #
    ############
    def equals(self, other: Point2D, tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            return self.x == other.x and self.y == other.y
        if tolerance < 0:
            raise InvalidArgumentError(f"tolerance must not be negative (got {tolerance})")
        return abs(other.x - self.x) < tolerance and abs(other.y - self.y) < tolerance

    def __eq__(self, other):
        if not isinstance(other, Point2D):
            return False
        return self.equals(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return (hash(self.x) * HASH_FACTOR) ^ hash(self.y)

    __lt__ = __le__ = __gt__ = __ge__ = unordered

    ########
    # text #
    ########
    def to_string(self, fmt: Optional[str] = None, number_format: Optional[NumberFormat] = None) -> str:
        """Render as '(x, y)', switch to '(x; y)' if decimal separator is ','"""
        _nf = number_format if number_format is not None else INVARIANT
        _sep = _nf.coordinate_separator
        return f"({_nf.format_number(self.x, fmt)}{_sep} {_nf.format_number(self.y, fmt)})"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or None)

    #######
    # xml #
    #######
    @staticmethod
    def get_schema() -> None:
        """No schema published, members are validated on read"""
        return None

    def write_xml(self, element: Element) -> None:
        """Emit coordinates as attributes of given element"""
        MinidomUtil.set_attribute(element, MEMBER_X, MinidomUtil.to_xml_double(self.x))
        MinidomUtil.set_attribute(element, MEMBER_Y, MinidomUtil.to_xml_double(self.y))

    def to_element(self, document: Document, tag_name: str = DEFAULT_TAG_NAME) -> Element:
        element: Element = document.createElement(tag_name)
        self.write_xml(element)
        return element

    def to_xml(self, tag_name: str = DEFAULT_TAG_NAME) -> str:
        document: Document = getDOMImplementation().createDocument(None, tag_name, None)
        try:
            self.write_xml(document.documentElement)
            return document.documentElement.toxml()
        finally:
            document.unlink()

    @classmethod
    def read_from(cls, source: XmlSource) -> Point2D:
        """Read point with coordinates given as attributes or child elements"""
        element: Element = MinidomUtil.to_element(source)
        x = MinidomUtil.from_xml_double(MinidomUtil.read_attribute_or_element(element, MEMBER_X), MEMBER_X)
        y = MinidomUtil.from_xml_double(MinidomUtil.read_attribute_or_element(element, MEMBER_Y), MEMBER_Y)
        return cls(x, y)
