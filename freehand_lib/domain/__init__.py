"""Domain objects for freehand strokes.

This module provides the value objects shared by both pipeline stages:

Geometry:
    Point: Immutable 2D point with pressure and vector operations.

Stroke data:
    StrokePoint: A resampled point annotated with its backward vector,
        distance and running length.
    StrokeOptions: Immutable bundle of stroke parameters.

Example usage::

    from freehand_lib.domain import Point, StrokeOptions

    a = Point(0, 0, 0.2)
    b = Point(10, 0, 0.8)
    (a + b).pressure                       # 0.8, taken from b
    a.scale_keeping_own_pressure(2).pressure  # 0.2

    options = StrokeOptions(size=8, thinning=0.5)
    tapered = options.replace(taper_start=20)
"""

from .geometry import DEFAULT_PRESSURE, Point, as_point
from .stroke import StrokeOptions, StrokeOptionsError, StrokePoint

__all__ = [
    'Point', 'DEFAULT_PRESSURE', 'as_point',
    'StrokePoint', 'StrokeOptions', 'StrokeOptionsError',
]
