"""Freehand stroke outlines.

Turns the raw pointer samples of a freehand drawing, ``(x, y, pressure)``,
into a closed polygon that can be filled to render a pressure-sensitive
stroke.

Architecture Overview:
    The pipeline has two stages with no shared state:

    - analysis.resampler streamlines the raw input and annotates each
      accepted point with its backward vector, distance and running length.
    - analysis.outliner computes a radius per point from thinning, pressure
      and tapering, offsets both edges, rounds sharp corners and adds caps.

    api.get_stroke composes the two in one call.

The package is organized into the following modules:
    domain: Point and the stroke data structures (StrokePoint, StrokeOptions).
    analysis: The resampling and outlining stages.
    api: The get_stroke facade and StrokeService.
    utils: Polygon helpers, SVG/raster rendering and logging setup.
    cli: The ``freehand`` command.

Example usage:
    Outline a stroke::

        from freehand_lib import get_stroke

        outline = get_stroke(
            [(10, 10, 0.3), (30, 18, 0.5), (60, 20, 0.6)],
            size=12, thinning=0.6, taper_end=20, is_complete=True,
        )

    Run the stages separately::

        from freehand_lib import get_stroke_points, get_stroke_outline_points

        stroke_points = get_stroke_points(points, size=12)
        outline = get_stroke_outline_points(stroke_points, size=12)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import (
    StrokeOutliner,
    StrokeResampler,
    get_stroke_outline_points,
    get_stroke_points,
    get_stroke_radius,
)
from .api import StrokeService, get_stroke
from .domain import Point, StrokeOptions, StrokeOptionsError, StrokePoint

__all__ = [
    # Domain objects
    'Point', 'StrokePoint', 'StrokeOptions', 'StrokeOptionsError',
    # Pipeline
    'StrokeResampler', 'StrokeOutliner',
    'get_stroke_points', 'get_stroke_outline_points', 'get_stroke_radius',
    # Services
    'get_stroke', 'StrokeService',
]

__version__ = '1.0.0'
