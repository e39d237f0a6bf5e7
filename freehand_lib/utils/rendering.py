"""Outline rendering utilities.

This module converts outline polygons into drawable forms. It stays out
of the geometry pipeline: the pipeline produces polygons, and these
helpers hand them to a rendering surface.

The module provides the following functions:
    outline_to_svg_path: SVG path data with midpoint quadratic smoothing.
    outline_to_svg: Complete SVG document for a set of outlines.
    render_outline_image: Fill outlines (nonzero rule) onto a Pillow grayscale image.
    render_outline_mask: Fill outlines into a binary numpy mask.

Example usage::

    from freehand_lib import get_stroke
    from freehand_lib.utils.rendering import outline_to_svg_path, render_outline_mask

    outline = get_stroke(points, size=12)
    d = outline_to_svg_path(outline)
    mask = render_outline_mask(outline, 200, 200)
    print(f"Stroke covers {mask.sum()} pixels")
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from ..domain.geometry import Point
from .geometry import points_to_array

# Radius of the circle drawn for a single-vertex outline
SINGLE_POINT_RADIUS = 0.5


def _fmt(v: float) -> str:
    """Format a coordinate with at most 2 decimals."""
    s = f"{v:.2f}".rstrip('0').rstrip('.')
    return '0' if s in ('', '-0') else s


def outline_to_svg_path(outline: Sequence[Point], closed: bool = True) -> str:
    """Convert an outline polygon to SVG path data.

    Consecutive vertices are joined with quadratic curves whose control
    point is a vertex and whose end point is the midpoint to the next
    vertex, which smooths the polygon's corners.

    Args:
        outline: Outline vertices from ``get_stroke``.
        closed: Close the path with ``Z``.

    Returns:
        Path data string. Empty for an empty outline; a small circle for
        a single vertex.

    Example:
        >>> outline_to_svg_path([Point(0, 0), Point(10, 0), Point(10, 10)])
        'M0,0 Q10,0 10,5 Z'
    """
    if not outline:
        return ''
    if len(outline) == 1:
        p = outline[0]
        r = SINGLE_POINT_RADIUS
        left = f"{_fmt(p.x - r)},{_fmt(p.y)}"
        right = f"{_fmt(p.x + r)},{_fmt(p.y)}"
        return (f"M{left} A{_fmt(r)},{_fmt(r)} 0 1 0 {right} "
                f"A{_fmt(r)},{_fmt(r)} 0 1 0 {left} Z")

    parts = [f"M{_fmt(outline[0].x)},{_fmt(outline[0].y)}"]
    for i in range(1, len(outline) - 1):
        p0 = outline[i]
        p1 = outline[i + 1]
        mid = p0.midpoint(p1)
        parts.append(f"Q{_fmt(p0.x)},{_fmt(p0.y)} {_fmt(mid.x)},{_fmt(mid.y)}")
    if closed:
        parts.append('Z')
    return ' '.join(parts)


def outline_to_svg(outlines: Iterable[Sequence[Point]], width: int, height: int,
                   fill: str = 'black', background: str | None = None) -> str:
    """Build an SVG document containing one filled path per outline.

    Args:
        outlines: Outline polygons.
        width: Document width in user units.
        height: Document height in user units.
        fill: Fill color of the strokes.
        background: Optional background color.

    Returns:
        SVG document text.
    """
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    if background:
        lines.append(f'  <rect width="100%" height="100%" fill="{background}"/>')
    for outline in outlines:
        d = outline_to_svg_path(outline)
        if d:
            lines.append(f'  <path d="{d}" fill="{fill}"/>')
    lines.append('</svg>')
    return '\n'.join(lines) + '\n'


def _winding_window(outline: Sequence[Point], width: int,
                    height: int) -> Optional[Tuple[np.ndarray, int, int]]:
    """Winding numbers of the pixel centres inside an outline's bounding box.

    Outlines overlap themselves (the round end cap sweeps past a full
    turn), so filling uses the nonzero rule, as SVG does, rather than
    Pillow's even-odd polygon fill. Each edge only touches the pixel rows
    its y-span crosses.

    Returns:
        (winding, x0, y0) with the window's top-left corner on the canvas,
        or None if the outline lies entirely off the canvas.
    """
    arr = points_to_array(outline)
    x0 = max(0, int(np.floor(arr[:, 0].min())))
    y0 = max(0, int(np.floor(arr[:, 1].min())))
    x1 = min(width, int(np.ceil(arr[:, 0].max())) + 1)
    y1 = min(height, int(np.ceil(arr[:, 1].max())) + 1)
    if x0 >= x1 or y0 >= y1:
        return None

    xs = np.arange(x0, x1) + 0.5
    ys = np.arange(y0, y1) + 0.5
    winding = np.zeros((len(ys), len(xs)), dtype=int)
    for (ax, ay), (bx, by) in zip(arr, np.roll(arr, -1, axis=0)):
        upward = ay <= by
        lo, hi = (ay, by) if upward else (by, ay)
        r0 = int(np.searchsorted(ys, lo, side='left'))
        r1 = int(np.searchsorted(ys, hi, side='left'))
        if r0 >= r1:
            continue
        side = (bx - ax) * (ys[r0:r1, None] - ay) - (xs[None, :] - ax) * (by - ay)
        if upward:
            winding[r0:r1] += side > 0
        else:
            winding[r0:r1] -= side < 0
    return winding, x0, y0


def render_outline_image(outlines: Iterable[Sequence[Point]], width: int, height: int) -> Image.Image:
    """Fill outlines onto a black grayscale image.

    Pixels are sampled at their centres. Outlines with fewer than three
    vertices enclose no area and are skipped.

    Returns:
        Pillow image in mode 'L', strokes drawn in white.
    """
    filled = np.zeros((height, width), dtype=bool)
    for outline in outlines:
        if len(outline) < 3:
            continue
        window = _winding_window(outline, width, height)
        if window is None:
            continue
        winding, x0, y0 = window
        h, w = winding.shape
        filled[y0:y0 + h, x0:x0 + w] |= winding != 0
    return Image.fromarray(np.where(filled, 255, 0).astype(np.uint8))


def render_outline_mask(outline: Sequence[Point], width: int, height: int) -> np.ndarray:
    """Render one outline as a binary mask.

    Returns:
        Boolean array of shape (height, width), True inside the stroke.
    """
    img = render_outline_image([outline], width, height)
    return np.array(img) > 0


def outlines_to_lists(outlines: Iterable[Sequence[Point]]) -> List[List[List[float]]]:
    """Convert outlines to nested ``[x, y]`` lists for JSON serialization."""
    return [[[float(p.x), float(p.y)] for p in outline] for outline in outlines]
