#!/usr/bin/env python3
"""Command-line interface for freehand stroke outlines.

Reads recorded strokes from a JSON file, outlines them and writes an SVG
document, the outline polygons as JSON, or a PNG mask.

Input JSON is either a single stroke (a list of ``[x, y]`` or
``[x, y, pressure]`` points), a list of strokes, or an object::

    {"strokes": [[[0, 0, 0.5], [10, 4, 0.6]], ...],
     "options": {"size": 12, "taperEnd": 20}}

Options given on the command line override those in the file.

Usage:
    freehand strokes.json --output strokes.svg
    freehand strokes.json --format json --size 8 --thinning 0.4
    freehand strokes.json --format png --output strokes.png --width 400 --height 300

Or run via the main module:
    python -m freehand_lib.cli strokes.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .api.services import StrokeService
from .domain.geometry import Point
from .domain.stroke import StrokeOptions
from .utils.geometry import bounding_box
from .utils.log_setup import configure_logging
from .utils.rendering import outline_to_svg, outlines_to_lists, render_outline_image

_logger = logging.getLogger(__name__)

# Margin around the strokes when the canvas size is derived from them
AUTO_CANVAS_MARGIN = 10


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='freehand',
        description='Outline freehand strokes recorded as (x, y, pressure) points'
    )
    parser.add_argument('input', type=str,
                        help='JSON file with recorded strokes')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output file (default: stdout; required for png)')
    parser.add_argument('--format', '-f', choices=('svg', 'json', 'png'), default='svg',
                        help='Output format (default: svg)')
    parser.add_argument('--width', type=int, default=None,
                        help='Canvas width (default: fit the strokes)')
    parser.add_argument('--height', type=int, default=None,
                        help='Canvas height (default: fit the strokes)')
    parser.add_argument('--size', type=float, default=None,
                        help='Stroke diameter')
    parser.add_argument('--thinning', type=float, default=None,
                        help='Effect of pressure on the stroke size')
    parser.add_argument('--smoothing', type=float, default=None,
                        help='Density of outline points')
    parser.add_argument('--streamline', type=float, default=None,
                        help='Input variation removal, 0..1')
    parser.add_argument('--taper-start', type=float, default=None,
                        help='Taper distance at the start')
    parser.add_argument('--taper-end', type=float, default=None,
                        help='Taper distance at the end')
    parser.add_argument('--no-cap-start', dest='cap_start', action='store_false', default=None,
                        help='Flat start cap')
    parser.add_argument('--no-cap-end', dest='cap_end', action='store_false', default=None,
                        help='Flat end cap')
    parser.add_argument('--real-pressure', dest='simulate_pressure', action='store_false',
                        default=None, help='Use recorded pressures instead of simulating')
    parser.add_argument('--complete', dest='is_complete', action='store_true', default=None,
                        help='Treat strokes as finished')
    parser.add_argument('--log-level', type=str.upper, default='WARNING',
                        choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'),
                        help='Log level (default: WARNING)')
    return parser


def _is_point(value: Any) -> bool:
    return (isinstance(value, list) and 2 <= len(value) <= 3
            and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value))


def parse_strokes(data: Any) -> Tuple[List[List[Point]], Dict[str, Any]]:
    """Extract strokes and file options from decoded input JSON.

    Args:
        data: Decoded JSON: a stroke, a list of strokes, or an object with
            ``strokes`` and optional ``options``.

    Returns:
        (strokes, options) where options is the raw options mapping.

    Raises:
        ValueError: If the structure is not recognised.
    """
    options: Dict[str, Any] = {}
    if isinstance(data, dict):
        options = data.get('options') or {}
        if not isinstance(options, dict):
            raise ValueError("'options' must be an object")
        data = data.get('strokes')
    if not isinstance(data, list):
        raise ValueError("expected a list of strokes")
    if not data:
        return [], options
    if _is_point(data[0]):
        data = [data]

    strokes = []
    for n, stroke in enumerate(data):
        if not isinstance(stroke, list) or not all(_is_point(p) for p in stroke):
            raise ValueError(f"stroke {n} is not a list of [x, y] or [x, y, pressure] points")
        strokes.append([Point.from_list(p) for p in stroke])
    return strokes, options


def _resolve_options(args: argparse.Namespace, file_options: Dict[str, Any]) -> StrokeOptions:
    options = StrokeOptions.from_dict(file_options)
    overrides = {
        name: getattr(args, name)
        for name in ('size', 'thinning', 'smoothing', 'streamline', 'taper_start',
                     'taper_end', 'cap_start', 'cap_end', 'simulate_pressure', 'is_complete')
        if getattr(args, name) is not None
    }
    return options.replace(**overrides)


def _canvas_size(outlines: List[List[Point]], width: Optional[int],
                 height: Optional[int]) -> Tuple[int, int]:
    if width is not None and height is not None:
        return width, height
    bbox = bounding_box([p for outline in outlines for p in outline])
    auto_w = max(1, int(bbox.x_max + AUTO_CANVAS_MARGIN))
    auto_h = max(1, int(bbox.y_max + AUTO_CANVAS_MARGIN))
    return width or auto_w, height or auto_h


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line interface for freehand stroke outlines.

    Returns:
        Process exit code (0 on success). Argument and input errors exit
        through ``parser.error``.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        data = json.loads(Path(args.input).read_text(encoding='utf-8'))
    except OSError as e:
        parser.error(f"cannot read {args.input}: {e}")
    except json.JSONDecodeError as e:
        parser.error(f"{args.input} is not valid JSON: {e}")

    try:
        strokes, file_options = parse_strokes(data)
        options = _resolve_options(args, file_options)
    except ValueError as e:
        parser.error(str(e))

    if args.format == 'png' and not args.output:
        parser.error("--output is required for png output")

    service = StrokeService(options)
    outlines = service.outline_many(strokes)
    _logger.info("Outlined %d strokes from %s", len(outlines), args.input)

    if args.format == 'json':
        text = json.dumps({'options': options.to_dict(),
                           'outlines': outlines_to_lists(outlines)}, indent=2) + '\n'
    elif args.format == 'svg':
        width, height = _canvas_size(outlines, args.width, args.height)
        text = outline_to_svg(outlines, width, height)
    else:
        width, height = _canvas_size(outlines, args.width, args.height)
        render_outline_image(outlines, width, height).save(args.output)
        _logger.info("Saved %dx%d mask to %s", width, height, args.output)
        return 0

    if args.output:
        Path(args.output).write_text(text, encoding='utf-8')
        _logger.info("Saved %s output to %s", args.format, args.output)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
