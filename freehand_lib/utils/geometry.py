"""Polygon utility functions.

This module provides numpy-backed helpers for inspecting outline polygons
and point sequences. They supplement the methods on Point with operations
over whole sequences.

The module provides the following:
    BBox: Immutable axis-aligned bounding box.
    points_to_array: Convert points to an (N, 2) or (N, 3) array.
    bounding_box: Bounding box of a point sequence.
    polygon_area: Signed shoelace area of a closed polygon.
    path_length: Length of an open polyline.
    is_simple_polygon: Check that no two edges of a polygon cross.

Example usage::

    from freehand_lib import get_stroke
    from freehand_lib.utils.geometry import bounding_box, is_simple_polygon

    outline = get_stroke([(0, 0), (50, 10)], cap_end=False)
    bbox = bounding_box(outline)
    print(bbox.width, bbox.height, is_simple_polygon(outline))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..domain.geometry import Point, PointLike, as_point


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    def contains(self, point: PointLike, tol: float = 0.0) -> bool:
        """Check if point is inside bounding box."""
        p = as_point(point)
        return (self.x_min - tol <= p.x <= self.x_max + tol and
                self.y_min - tol <= p.y <= self.y_max + tol)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)


def points_to_array(points: Sequence[PointLike], with_pressure: bool = False) -> np.ndarray:
    """Convert points to a float array.

    Args:
        points: Point objects or coordinate sequences.
        with_pressure: Include pressure as a third column.

    Returns:
        Array of shape (N, 2), or (N, 3) with pressure.
    """
    cols = 3 if with_pressure else 2
    if len(points) == 0:
        return np.zeros((0, cols), dtype=float)
    pts = [as_point(p) for p in points]
    if with_pressure:
        return np.array([[p.x, p.y, p.pressure] for p in pts], dtype=float)
    return np.array([[p.x, p.y] for p in pts], dtype=float)


def bounding_box(points: Sequence[PointLike]) -> BBox:
    """Create bounding box containing all points."""
    arr = points_to_array(points)
    if len(arr) == 0:
        return BBox(0, 0, 0, 0)
    x_min, y_min = arr.min(axis=0)
    x_max, y_max = arr.max(axis=0)
    return BBox(float(x_min), float(y_min), float(x_max), float(y_max))


def polygon_area(points: Sequence[PointLike]) -> float:
    """Signed polygon area via the shoelace formula.

    Positive for counter-clockwise vertices in a y-up frame. Take ``abs``
    for the unsigned area.
    """
    arr = points_to_array(points)
    if len(arr) < 3:
        return 0.0
    x = arr[:, 0]
    y = arr[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def path_length(points: Sequence[PointLike]) -> float:
    """Total length of an open polyline."""
    arr = points_to_array(points)
    if len(arr) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(arr, axis=0), axis=1)))


def _cross(o: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    return float((a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0]))


def _segments_cross(p1: np.ndarray, p2: np.ndarray,
                    q1: np.ndarray, q2: np.ndarray, tol: float) -> bool:
    """True if the segments cross at a single interior point."""
    d1 = _cross(q1, q2, p1)
    d2 = _cross(q1, q2, p2)
    d3 = _cross(p1, p2, q1)
    d4 = _cross(p1, p2, q2)
    return ((d1 > tol and d2 < -tol) or (d1 < -tol and d2 > tol)) and \
           ((d3 > tol and d4 < -tol) or (d3 < -tol and d4 > tol))


def is_simple_polygon(points: Sequence[PointLike], tol: float = 1e-9) -> bool:
    """Check that no two non-adjacent edges of a closed polygon cross.

    Edges that merely touch or overlap collinearly are not counted as
    crossings, so degenerate zero-length edges are tolerated. This is an
    O(n^2) check intended for tests and diagnostics.

    Args:
        points: Polygon vertices; the closing edge is implicit.
        tol: Orientation tolerance below which points count as collinear.

    Returns:
        True if no proper edge crossing exists.
    """
    arr = points_to_array(points)
    n = len(arr)
    if n < 4:
        return True
    for i in range(n):
        a1, a2 = arr[i], arr[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _segments_cross(a1, a2, arr[j], arr[(j + 1) % n], tol):
                return False
    return True
