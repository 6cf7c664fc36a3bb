# -*- coding: utf-8 -*-
"""Point2D arithmetic and transformation Test Module"""

import math

import numpy as np
import pytest

from spatial_euclidean import (
    Angle,
    CoordinateSystem,
    InvalidArgumentError,
    Point2D,
    Point3D,
    Vector2D,
    Vector3D,
)


def test_add_vector2d():
    assert Point2D(1, 2) + Vector2D(0.5, -1) == Point2D(1.5, 1)
    assert Point2D(1, 2).add_vector2d(Vector2D(0.5, -1)) == Point2D(1.5, 1)


def test_subtract_vector2d():
    assert Point2D(1, 2) - Vector2D(1, 1) == Point2D(0, 1)
    assert Point2D(1, 2).subtract_vector2d(Vector2D(1, 1)) == Point2D(0, 1)


def test_add_vector3d_lifts_into_3d():
    result = Point2D(1, 2) + Vector3D(1, 1, 5)
    assert isinstance(result, Point3D)
    assert result == Point3D(2, 3, 5)


def test_subtract_vector3d_negates_z():
    result = Point2D(1, 2) - Vector3D(1, 1, 5)
    assert isinstance(result, Point3D)
    assert result == Point3D(0, 1, -5)
    assert Point2D(1, 2).subtract_vector3d(Vector3D(0, 0, -2)) == Point3D(1, 2, 2)


def test_point_minus_point():
    displacement = Point2D(5, 7) - Point2D(2, 3)
    assert isinstance(displacement, Vector2D)
    assert displacement == Vector2D(3, 4)


@pytest.mark.parametrize("a,b", [
    (Point2D(1, 2), Point2D(3, 5)),
    (Point2D(-0.5, 0.25), Point2D(8.0, -16.0)),
    (Point2D(0, 0), Point2D(0, 0)),
])
def test_displacement_roundtrip(a, b):
    assert b + (a - b) == a


def test_vector_to():
    assert Point2D(1, 1).vector_to(Point2D(4, 5)) == Vector2D(3, 4)


def test_distance_to():
    assert Point2D(3, 4).distance_to(Point2D(0, 0)) == 5.0
    assert Point2D(0, 0).distance_to(Point2D(3, 4)) == 5.0


def test_unsupported_operands():
    with pytest.raises(TypeError):
        _ = Point2D(1, 2) + 3
    with pytest.raises(TypeError):
        _ = Point2D(1, 2) - 3
    with pytest.raises(TypeError):
        _ = Point2D(1, 2) * 2
    with pytest.raises(TypeError):
        _ = 2 * Point2D(1, 2)
    with pytest.raises(TypeError):
        _ = Point3D(1, 2, 3) * 2


@pytest.mark.parametrize("other", [Point2D(2, 0), (2, 0)])
def test_points_are_not_ordered(other):
    """no lexicographic tuple order"""
    point = Point2D(1, 5)
    with pytest.raises(TypeError):
        _ = point < other
    with pytest.raises(TypeError):
        _ = point >= other
    with pytest.raises(TypeError):
        _ = other > point


def test_transform_by_non_numeric_matrix():
    with pytest.raises(InvalidArgumentError):
        Point2D(1, 1).transform_by("x")
    with pytest.raises(InvalidArgumentError):
        Point2D(1, 1).transform_by([["a", "b"], ["c", "d"]])


def test_conversions():
    point = Point2D(1.5, -2)
    assert point.to_vector2d() == Vector2D(1.5, -2)
    assert point.to_point3d() == Point3D(1.5, -2, 0)


def test_transform_by_rotation_matrix():
    # act
    rotation = np.array([[0.0, -1.0], [1.0, 0.0]])
    result = Point2D(1, 0).transform_by(rotation)

    # assert
    assert isinstance(result, Point2D)
    assert result == Point2D(0, 1)


def test_transform_by_scaling_matrix():
    assert Point2D(2, 3).transform_by_matrix(np.diag([2.0, -1.0])) == Point2D(4, -3)


@pytest.mark.parametrize("matrix", [np.identity(3), np.ones((3, 2)), np.ones(2)])
def test_transform_by_non_conformant_matrix(matrix):
    with pytest.raises(InvalidArgumentError):
        Point2D(1, 1).transform_by(matrix)


def test_transform_by_coordinate_system_translation():
    cs = CoordinateSystem.translation(Vector3D(1, 2, 3))
    result = Point2D(1, 1).transform_by(cs)
    assert isinstance(result, Point3D)
    assert result == Point3D(2, 3, 3)


def test_transform_by_coordinate_system_rotation():
    cs = CoordinateSystem.rotation(Angle.from_degrees(90))
    result = Point2D(1, 0).transform_by_coordinate_system(cs)
    assert result.x == pytest.approx(0.0, abs=1e-12)
    assert result.y == pytest.approx(1.0)
    assert result.z == 0.0


def test_arithmetic_with_nan_degrades():
    result = Point2D(math.nan, 1) + Vector2D(1, 1)
    assert math.isnan(result.x)
    assert result.y == 2
