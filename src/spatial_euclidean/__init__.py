"""spatial euclidean main API"""
__version__ = '1.0.0'

from .angle import Angle
from .common import (
    INVARIANT,
    FormatError,
    InvalidArgumentError,
    NumberFormat,
    ParseError,
    SpatialException,
)
from .coordinate_system import CoordinateSystem
from .parser import parse_item_2d
from .point2d import Point2D
from .point3d import Point3D
from .vectors import (
    Vector2D,
    Vector3D,
)
