"""Service layer for freehand strokes.

This module provides the one-call facade over the two pipeline stages
and a small service class that carries a fixed set of stroke options,
for applications that draw many strokes with the same pen.

Example usage:
    One-off outline::

        from freehand_lib.api.services import get_stroke

        outline = get_stroke([(0, 0), (20, 5), (40, 0)], size=12, taper_end=30)

    Reusing a configured pen::

        from freehand_lib.api.services import StrokeService
        from freehand_lib.domain import StrokeOptions

        service = StrokeService(StrokeOptions(size=8, thinning=0.4))
        outlines = service.outline_many([stroke_a, stroke_b])
        d = service.svg_path(stroke_a)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..analysis.outliner import StrokeOutliner
from ..analysis.resampler import StrokeResampler
from ..domain.geometry import Point, PointLike
from ..domain.stroke import StrokeOptions, StrokePoint
from ..utils.rendering import outline_to_svg_path

# Logger for service diagnostics
_logger = logging.getLogger(__name__)


def get_stroke(points: Sequence[PointLike],
               options: Optional[StrokeOptions] = None,
               **overrides) -> List[Point]:
    """Get the outline polygon of a stroke drawn through ``points``.

    Resamples the input and outlines the result with the same options.

    Args:
        points: Raw input points, as Point objects or ``(x, y)`` /
            ``(x, y, pressure)`` sequences.
        options: Stroke options; defaults to ``StrokeOptions()``.
        **overrides: Individual option overrides, e.g. ``size=8``. The
            camelCase names (``taperStart``, ``isComplete``...) are
            accepted too.

    Returns:
        Outline polygon vertices. Empty for empty input or negative size.

    Example:
        >>> outline = get_stroke([(0, 0), (10, 0), (20, 0)], is_complete=True)
        >>> len(outline) > 0
        True
    """
    opts = (options or StrokeOptions()).replace(**overrides)
    stroke_points = StrokeResampler(opts).resample(points)
    return StrokeOutliner(opts).outline(stroke_points)


@dataclass
class StrokeService:
    """A configured pen.

    Attributes:
        options: StrokeOptions applied to every stroke.

    Example:
        >>> service = StrokeService(StrokeOptions(size=4))
        >>> len(service.outline([(0, 0)]))  # a single point becomes a dot
        26
    """
    options: StrokeOptions = field(default_factory=StrokeOptions)

    def stroke_points(self, points: Sequence[PointLike]) -> List[StrokePoint]:
        """Resampled, annotated points for ``points``."""
        return StrokeResampler(self.options).resample(points)

    def outline(self, points: Sequence[PointLike]) -> List[Point]:
        """Outline polygon for one stroke."""
        stroke_points = self.stroke_points(points)
        outline = StrokeOutliner(self.options).outline(stroke_points)
        _logger.debug("Stroke of %d points -> %d stroke points -> %d outline points",
                      len(points), len(stroke_points), len(outline))
        return outline

    def outline_many(self, strokes: Iterable[Sequence[PointLike]]) -> List[List[Point]]:
        """Outline polygons for independent strokes, in order.

        Each stroke is outlined on its own; strokes are not merged.
        """
        outlines = [self.outline(points) for points in strokes]
        _logger.debug("Outlined %d strokes", len(outlines))
        return outlines

    def svg_path(self, points: Sequence[PointLike]) -> str:
        """SVG path data for the outline of one stroke."""
        return outline_to_svg_path(self.outline(points))
