"""Unit tests for freehand_lib.utils.geometry.

Tests the numpy-backed polygon helpers:
    - BBox and bounding_box
    - points_to_array
    - polygon_area
    - path_length
    - is_simple_polygon
"""

import unittest

import numpy as np

from freehand_lib.domain.geometry import Point
from freehand_lib.utils.geometry import (
    BBox,
    bounding_box,
    is_simple_polygon,
    path_length,
    points_to_array,
    polygon_area,
)

UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


class TestBBox(unittest.TestCase):
    """Tests for BBox and bounding_box."""

    def test_bounding_box(self):
        bbox = bounding_box([Point(1, 5), Point(-2, 3), Point(4, -1)])
        self.assertEqual(bbox.to_tuple(), (-2, -1, 4, 5))

    def test_dimensions(self):
        bbox = BBox(0, 0, 10, 4)
        self.assertEqual(bbox.width, 10)
        self.assertEqual(bbox.height, 4)
        self.assertEqual(bbox.center, Point(5, 2))

    def test_contains(self):
        bbox = BBox(0, 0, 10, 10)
        self.assertTrue(bbox.contains((5, 5)))
        self.assertTrue(bbox.contains(Point(10, 10)))
        self.assertFalse(bbox.contains((10.5, 5)))
        self.assertTrue(bbox.contains((10.5, 5), tol=1))

    def test_empty(self):
        self.assertEqual(bounding_box([]), BBox(0, 0, 0, 0))

    def test_returns_python_floats(self):
        bbox = bounding_box([(0, 0), (3, 4)])
        self.assertIsInstance(bbox.x_max, float)


class TestPointsToArray(unittest.TestCase):
    """Tests for points_to_array."""

    def test_shape(self):
        arr = points_to_array([Point(1, 2), (3, 4)])
        self.assertEqual(arr.shape, (2, 2))
        np.testing.assert_array_equal(arr, [[1, 2], [3, 4]])

    def test_with_pressure(self):
        arr = points_to_array([Point(1, 2, 0.25)], with_pressure=True)
        self.assertEqual(arr.shape, (1, 3))
        self.assertEqual(arr[0, 2], 0.25)

    def test_empty(self):
        self.assertEqual(points_to_array([]).shape, (0, 2))
        self.assertEqual(points_to_array([], with_pressure=True).shape, (0, 3))


class TestPolygonArea(unittest.TestCase):
    """Tests for the signed shoelace area."""

    def test_counter_clockwise_is_positive(self):
        self.assertAlmostEqual(polygon_area(UNIT_SQUARE), 1.0)

    def test_clockwise_is_negative(self):
        self.assertAlmostEqual(polygon_area(UNIT_SQUARE[::-1]), -1.0)

    def test_degenerate(self):
        self.assertEqual(polygon_area([(0, 0), (5, 5)]), 0.0)

    def test_triangle(self):
        self.assertAlmostEqual(abs(polygon_area([(0, 0), (4, 0), (0, 3)])), 6.0)


class TestPathLength(unittest.TestCase):
    """Tests for path_length."""

    def test_polyline(self):
        self.assertAlmostEqual(path_length([(0, 0), (3, 4), (3, 10)]), 11.0)

    def test_not_closed(self):
        self.assertAlmostEqual(path_length(UNIT_SQUARE), 3.0)

    def test_short_input(self):
        self.assertEqual(path_length([]), 0.0)
        self.assertEqual(path_length([(1, 1)]), 0.0)


class TestIsSimplePolygon(unittest.TestCase):
    """Tests for is_simple_polygon."""

    def test_square(self):
        self.assertTrue(is_simple_polygon(UNIT_SQUARE))

    def test_bowtie(self):
        self.assertFalse(is_simple_polygon([(0, 0), (2, 2), (2, 0), (0, 2)]))

    def test_triangle(self):
        self.assertTrue(is_simple_polygon([(0, 0), (1, 0), (0, 1)]))

    def test_repeated_vertex_tolerated(self):
        self.assertTrue(is_simple_polygon([(0, 0), (1, 0), (1, 0), (1, 1), (0, 1)]))

    def test_concave(self):
        self.assertTrue(is_simple_polygon([(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]))


if __name__ == '__main__':
    unittest.main()
