"""Outline synthesis.

This module turns StrokePoints into the closed polygon that surrounds a
stroke. For every point it computes a radius (from thinning, real or
simulated pressure, and tapering), offsets the point to either side of
the centerline, rounds sharp corners, and finally adds caps at both
ends.

The returned polygon runs forward along the left edge, around the end
cap, back along the right edge and around the start cap. The closing
edge from the last vertex to the first is implicit.

Example usage::

    from freehand_lib.analysis.outliner import get_stroke_outline_points
    from freehand_lib.analysis.resampler import get_stroke_points

    stroke_points = get_stroke_points(raw_points, size=12)
    outline = get_stroke_outline_points(stroke_points, size=12, taper_end=40)
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..domain.geometry import Point
from ..domain.stroke import StrokeOptions, StrokePoint

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pressure and radius constants
# ---------------------------------------------------------------------------

# Rate of change for simulated pressure
RATE_OF_PRESSURE_CHANGE = 0.275

# Number of leading points averaged into the initial pressure
PRESSURE_SEED_POINTS = 10

# Points closer than this to the end of the line are treated as noise
END_NOISE_DISTANCE = 3

# Tapering never shrinks the radius below this
MIN_RADIUS = 0.01

# ---------------------------------------------------------------------------
# Arc step counts
# ---------------------------------------------------------------------------

# A corner bulge sweeps half a turn in CORNER_STEPS steps, both ends included
CORNER_STEPS = 13

# The round start cap sweeps half a turn in START_CAP_STEPS steps
START_CAP_STEPS = 13

# The round end cap sweeps a turn and a half in END_CAP_STEPS steps, so
# that sharp turns at the very end still get a full cap
END_CAP_STEPS = 29
END_CAP_TURNS = 3

# A dot is a full turn of DOT_STEPS steps of 1/13 of a half turn
DOT_STEPS = 26

# ---------------------------------------------------------------------------
# Flat cap offsets
# ---------------------------------------------------------------------------

FLAT_CAP_OUTER = 0.5
FLAT_CAP_INNER = 0.51
FLAT_END_CAP_INNER = 0.99


def get_stroke_radius(size: float, thinning: float, pressure: float) -> float:
    """Radius of the stroke for a given pressure."""
    return size * (0.5 - thinning * (0.5 - pressure))


def simulate_pressure(previous_pressure: float, distance: float, size: float) -> float:
    """Pressure derived from drawing speed.

    Fast movement (long distances relative to ``size``) pulls the pressure
    down, slow movement pulls it up.

    Args:
        previous_pressure: Pressure at the previous point.
        distance: Distance travelled since the previous point.
        size: Stroke diameter. With a size of zero any movement counts as
            full speed.

    Returns:
        The new pressure, never above 1.
    """
    if size > 0:
        speed = min(1.0, distance / size)
    else:
        speed = 1.0 if distance > 0 else 0.0
    rate = min(1.0, 1 - speed)
    return min(1.0, previous_pressure + (rate - previous_pressure) * speed * RATE_OF_PRESSURE_CHANGE)


def initial_pressure(points: Sequence[StrokePoint], size: float, simulate: bool) -> float:
    """Average of the leading pressures.

    Drawn lines almost always start slow; averaging the first few
    pressures keeps the start of the stroke from being too fat.
    """
    head = points[:PRESSURE_SEED_POINTS]
    acc = head[0].point.pressure
    for sp in head[1:]:
        pressure = sp.point.pressure
        if simulate:
            pressure = simulate_pressure(acc, sp.distance, size)
        acc = (acc + pressure) / 2
    return acc


def _half_turn_arc(start: Point, center: Point, steps: int,
                   first: int, last: int, turns: float = 1) -> List[Point]:
    """Rotate ``start`` around ``center`` by ``turns * pi * k / steps``."""
    return [start.rotate_around(center, math.pi * turns * k / steps)
            for k in range(first, last + 1)]


class StrokeOutliner:
    """Builds outline polygons from StrokePoints.

    The outliner holds no state between calls; ``outline`` may be called
    any number of times with the same result for the same input.

    Attributes:
        options: The StrokeOptions driving the outline. ``streamline`` is
            not read.
    """

    def __init__(self, options: Optional[StrokeOptions] = None):
        self.options = options or StrokeOptions()

    def outline(self, points: Sequence[StrokePoint]) -> List[Point]:
        """Compute the outline polygon for ``points``.

        Args:
            points: StrokePoints as produced by ``get_stroke_points``.

        Returns:
            Polygon vertices in order; empty if ``points`` is empty or the
            size is negative.
        """
        opts = self.options
        size = opts.size
        if len(points) == 0 or size < 0:
            return []

        thinning = opts.thinning
        taper_start = opts.taper_start
        taper_end = opts.taper_end
        simulate = opts.simulate_pressure

        total_length = points[-1].running_length
        min_distance_sqr = (size * opts.smoothing) ** 2
        last_index = len(points) - 1

        left_points: List[Point] = []
        right_points: List[Point] = []

        previous_pressure = initial_pressure(points, size, simulate)
        radius = get_stroke_radius(size, thinning, points[-1].point.pressure)
        first_radius: Optional[float] = None

        previous_vector = points[0].vector
        previous_left = points[0].point
        previous_right = previous_left

        # Set when the previous point started a corner, so one corner is
        # never rounded twice
        is_prev_point_sharp_corner = False

        for i, (point, vector, distance, running_length) in enumerate(points):
            pressure = point.pressure

            if i < last_index and total_length - running_length < END_NOISE_DISTANCE:
                continue

            if thinning != 0:
                if simulate:
                    pressure = simulate_pressure(previous_pressure, distance, size)
                radius = get_stroke_radius(size, thinning, pressure)
            else:
                radius = size / 2

            if first_radius is None:
                first_radius = radius

            tapering_start = 1.0
            if running_length < taper_start:
                tapering_start = running_length / taper_start
            tapering_end = 1.0
            if total_length - running_length < taper_end:
                tapering_end = (total_length - running_length) / taper_end
            radius = max(MIN_RADIUS, radius * min(tapering_start, tapering_end))

            if i < last_index:
                next_vector = points[i + 1].vector
                next_dot_product = vector.dot(next_vector)
            else:
                next_vector = vector
                next_dot_product = 1.0
            previous_dot_product = vector.dot(previous_vector)

            is_point_sharp_corner = previous_dot_product < 0 and not is_prev_point_sharp_corner
            is_next_point_sharp_corner = next_dot_product < 0

            if is_point_sharp_corner or is_next_point_sharp_corner:
                offset = previous_vector.perpendicular().scale_keeping_own_pressure(radius)
                minus = point.subtract_keeping_pressure_of(offset)
                plus = point.add_keeping_pressure_of(offset)
                bulge_left = _half_turn_arc(minus, point, CORNER_STEPS, 0, CORNER_STEPS)
                bulge_right = _half_turn_arc(plus, point, CORNER_STEPS, 0, CORNER_STEPS)
                left_points.extend(bulge_left)
                right_points.extend(bulge_right)
                previous_left = bulge_left[-1]
                previous_right = bulge_right[-1]
                if is_next_point_sharp_corner:
                    is_prev_point_sharp_corner = True
                continue

            is_prev_point_sharp_corner = False

            if i == last_index:
                offset = vector.perpendicular().scale_keeping_own_pressure(radius)
                left_points.append(point.subtract_keeping_pressure_of(offset))
                right_points.append(point.add_keeping_pressure_of(offset))
                continue

            # Blend towards the next direction on gentle curves
            offset = (next_vector.lerp(vector, next_dot_product)
                      .perpendicular()
                      .scale_keeping_own_pressure(radius))

            candidate_left = point.subtract_keeping_pressure_of(offset)
            if i <= 1 or previous_left.distance_squared_to(candidate_left) > min_distance_sqr:
                left_points.append(candidate_left)
                previous_left = candidate_left

            candidate_right = point.add_keeping_pressure_of(offset)
            if i <= 1 or previous_right.distance_squared_to(candidate_right) > min_distance_sqr:
                right_points.append(candidate_right)
                previous_right = candidate_right

            previous_pressure = pressure
            previous_vector = vector

        first_point = points[0].point
        if len(points) > 1:
            last_point = points[-1].point
        else:
            last_point = first_point.add_keeping_pressure_of(Point(1.0, 1.0))

        is_very_short = len(left_points) < 2 or len(right_points) < 2
        is_tapered = taper_start > 0 or taper_end > 0

        if is_very_short and (not is_tapered or opts.is_complete):
            dot_radius = first_radius if first_radius is not None else radius
            _logger.debug("Stroke too short for an outline, drawing a dot of radius %.3f",
                          dot_radius)
            return self._dot(first_point, last_point, dot_radius)

        start_cap = self._start_cap(first_point, left_points, right_points, is_very_short)
        end_cap = self._end_cap(last_point, points[-1].vector, radius, is_very_short)

        outline = left_points + end_cap + right_points[::-1] + start_cap
        _logger.debug("Outline: %d left, %d right, %d start cap, %d end cap points",
                      len(left_points), len(right_points), len(start_cap), len(end_cap))
        return outline

    def _dot(self, first_point: Point, last_point: Point, radius: float) -> List[Point]:
        direction = first_point.subtract_keeping_pressure_of(last_point).perpendicular().unit()
        start = first_point.project(direction, -radius)
        return _half_turn_arc(start, first_point, DOT_STEPS // 2, 1, DOT_STEPS)

    def _start_cap(self, first_point: Point, left_points: List[Point],
                   right_points: List[Point], is_very_short: bool) -> List[Point]:
        opts = self.options
        if opts.taper_start > 0 or (opts.taper_end > 0 and is_very_short):
            return []
        if opts.cap_start:
            return _half_turn_arc(right_points[0], first_point,
                                  START_CAP_STEPS, 1, START_CAP_STEPS)
        corners = left_points[0].subtract_keeping_pressure_of(right_points[0])
        outer = corners.scale_keeping_own_pressure(FLAT_CAP_OUTER)
        inner = corners.scale_keeping_own_pressure(FLAT_CAP_INNER)
        return [
            first_point.subtract_keeping_pressure_of(outer),
            first_point.subtract_keeping_pressure_of(inner),
            first_point.add_keeping_pressure_of(inner),
            first_point.add_keeping_pressure_of(outer),
        ]

    def _end_cap(self, last_point: Point, last_vector: Point, radius: float,
                 is_very_short: bool) -> List[Point]:
        opts = self.options
        direction = last_vector.negated().perpendicular()
        if opts.taper_end > 0 or (opts.taper_start > 0 and is_very_short):
            return [last_point]
        if opts.cap_end:
            start = last_point.project(direction, radius)
            return _half_turn_arc(start, last_point, END_CAP_STEPS,
                                  1, END_CAP_STEPS - 1, turns=END_CAP_TURNS)
        outer = direction.scale_keeping_own_pressure(radius)
        inner = direction.scale_keeping_own_pressure(radius * FLAT_END_CAP_INNER)
        return [
            last_point.add_keeping_pressure_of(outer),
            last_point.add_keeping_pressure_of(inner),
            last_point.subtract_keeping_pressure_of(inner),
            last_point.subtract_keeping_pressure_of(outer),
        ]


def get_stroke_outline_points(points: Sequence[StrokePoint],
                              options: Optional[StrokeOptions] = None,
                              **overrides) -> List[Point]:
    """Compute the outline polygon of already resampled StrokePoints.

    Args:
        points: StrokePoints from ``get_stroke_points``.
        options: Stroke options; defaults to ``StrokeOptions()``.
        **overrides: Individual option overrides, e.g. ``taper_end=30``.

    Returns:
        List of polygon vertices.
    """
    opts = (options or StrokeOptions()).replace(**overrides)
    return StrokeOutliner(opts).outline(points)
