"""API layer for freehand strokes.

The module exports:
    get_stroke: Raw points in, outline polygon out.
    StrokeService: A pen with fixed StrokeOptions, for outlining many
        strokes the same way.

Example usage::

    from freehand_lib.api import get_stroke

    outline = get_stroke(points, size=12, thinning=0.5, is_complete=True)
"""

from .services import StrokeService, get_stroke

__all__ = ['get_stroke', 'StrokeService']
