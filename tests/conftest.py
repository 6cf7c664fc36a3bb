# -*- coding: utf-8 -*-
"""Shared test functionalities"""

from pathlib import Path

import pytest

from spatial_euclidean import Point2D

PROJECT_ROOT_DIR = Path(__file__).resolve().parents[1]
TEST_RES_DIR = Path(PROJECT_ROOT_DIR, 'tests', 'resources')


@pytest.fixture(name='triangle')
def _create_triangle_fixture():
    return [Point2D(0, 0), Point2D(2, 0), Point2D(1, 3)]
