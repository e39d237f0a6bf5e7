"""Stroke pipeline stages.

The two stages run strictly in sequence:
    StrokeResampler: streamlines raw input points and annotates them as
        StrokePoints (vector, distance, running length).
    StrokeOutliner: turns StrokePoints into a closed outline polygon with
        pressure-dependent width, rounded corners and caps.

Example usage::

    from freehand_lib.analysis import get_stroke_points, get_stroke_outline_points

    stroke_points = get_stroke_points(raw_points, size=10, streamline=0.6)
    outline = get_stroke_outline_points(stroke_points, size=10)
"""

from .outliner import (
    StrokeOutliner,
    get_stroke_outline_points,
    get_stroke_radius,
    simulate_pressure,
)
from .resampler import StrokeResampler, get_stroke_points

__all__ = [
    'StrokeResampler', 'get_stroke_points',
    'StrokeOutliner', 'get_stroke_outline_points',
    'get_stroke_radius', 'simulate_pressure',
]
