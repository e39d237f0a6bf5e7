"""Utility functions for freehand strokes.

Geometry utilities:
    BBox, bounding_box, points_to_array, polygon_area, path_length,
    is_simple_polygon

Rendering utilities:
    outline_to_svg_path, outline_to_svg, render_outline_image,
    render_outline_mask

Logging:
    configure_logging

Example usage::

    from freehand_lib.utils import bounding_box, outline_to_svg_path

    bbox = bounding_box(outline)
    d = outline_to_svg_path(outline)
"""

from .geometry import (
    BBox,
    bounding_box,
    is_simple_polygon,
    path_length,
    points_to_array,
    polygon_area,
)
from .log_setup import configure_logging
from .rendering import (
    outline_to_svg,
    outline_to_svg_path,
    outlines_to_lists,
    render_outline_image,
    render_outline_mask,
)

__all__ = [
    'BBox', 'bounding_box', 'points_to_array', 'polygon_area', 'path_length',
    'is_simple_polygon',
    'outline_to_svg_path', 'outline_to_svg', 'render_outline_image',
    'render_outline_mask', 'outlines_to_lists',
    'configure_logging',
]
