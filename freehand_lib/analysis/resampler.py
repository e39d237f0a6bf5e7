"""Input resampling ("streamlining").

This module turns raw pointer samples into StrokePoints: each accepted
point is pulled towards the previous one by an interpolation factor
derived from ``streamline``, and annotated with the vector back to the
previous point, the distance to it and the running length of the stroke.

Example usage::

    from freehand_lib.analysis.resampler import get_stroke_points

    stroke_points = get_stroke_points([(0, 0), (4, 2), (9, 3)], size=8)
    stroke_points[-1].running_length
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..domain.geometry import Point, PointLike, as_point
from ..domain.stroke import StrokeOptions, StrokePoint

_logger = logging.getLogger(__name__)

# Vector given to the seed point; replaced by the second point's vector.
SEED_VECTOR = Point(1.0, 1.0)

# Offset of the twin point synthesized for single-point input
SINGLE_POINT_OFFSET = Point(1.0, 1.0)


def interpolation_factor(streamline: float) -> float:
    """Fraction of the way each new point moves towards its raw sample."""
    return 0.15 + (1 - streamline) * 0.85


class StrokeResampler:
    """Produces StrokePoints from raw input points.

    Attributes:
        options: The StrokeOptions driving the resampling. Only ``size``,
            ``streamline``, ``simulate_pressure`` and ``is_complete`` are
            read.
    """

    def __init__(self, options: Optional[StrokeOptions] = None):
        self.options = options or StrokeOptions()

    def resample(self, points: Sequence[PointLike]) -> List[StrokePoint]:
        """Streamline ``points`` and annotate them.

        Args:
            points: Raw input points, as Point objects or ``(x, y)`` /
                ``(x, y, pressure)`` sequences.

        Returns:
            List of StrokePoints. Empty for empty input. Consecutive points
            never share the same ``(x, y)`` and running lengths never
            decrease.
        """
        if len(points) == 0:
            return []

        opts = self.options
        pts = [as_point(p) for p in points]
        if len(pts) == 1:
            only = pts[0]
            pts.append(Point(only.x + SINGLE_POINT_OFFSET.x,
                             only.y + SINGLE_POINT_OFFSET.y,
                             only.pressure))

        t = interpolation_factor(opts.streamline)
        last_index = len(pts) - 1

        previous = StrokePoint(pts[0], SEED_VECTOR, 0.0, 0.0)
        result = [previous]
        running_length = 0.0
        reached_minimum_length = False

        for i in range(1, len(pts)):
            raw = pts[i]
            if opts.is_complete and i == last_index:
                point = raw
            else:
                point = previous.point.lerp(raw, t)
                if not opts.simulate_pressure:
                    point = Point(point.x, point.y, raw.pressure)

            if point == previous.point:
                continue

            distance = point.distance_to(previous.point)
            running_length += distance

            # Hold back the start of the line until it has moved ``size``
            if i < last_index and not reached_minimum_length:
                if running_length < opts.size:
                    continue
                reached_minimum_length = True

            previous = StrokePoint(
                point,
                previous.point.subtract_keeping_pressure_of(point).unit(),
                distance,
                running_length,
            )
            result.append(previous)

        if len(result) > 1:
            result[0].vector = result[1].vector

        _logger.debug("Resampled %d input points to %d stroke points",
                      len(points), len(result))
        return result


def get_stroke_points(points: Sequence[PointLike],
                      options: Optional[StrokeOptions] = None,
                      **overrides) -> List[StrokePoint]:
    """Resample raw points into StrokePoints.

    Args:
        points: Raw input points.
        options: Stroke options; defaults to ``StrokeOptions()``.
        **overrides: Individual option overrides, e.g. ``streamline=0.8``.

    Returns:
        List of StrokePoints suitable for ``get_stroke_outline_points``.
    """
    opts = (options or StrokeOptions()).replace(**overrides)
    return StrokeResampler(opts).resample(points)
