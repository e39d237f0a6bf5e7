"""Unit tests for freehand_lib.utils.rendering."""

import math

import numpy as np
import pytest
from PIL import Image

from freehand_lib import get_stroke
from freehand_lib.domain import Point
from freehand_lib.utils.rendering import (
    outline_to_svg,
    outline_to_svg_path,
    outlines_to_lists,
    render_outline_image,
    render_outline_mask,
)


@pytest.fixture
def square():
    return [Point(10, 10), Point(30, 10), Point(30, 30), Point(10, 30)]


class TestSvgPath:

    def test_empty(self):
        assert outline_to_svg_path([]) == ''

    def test_midpoint_quadratics(self):
        d = outline_to_svg_path([Point(0, 0), Point(10, 0), Point(10, 10)])
        assert d == 'M0,0 Q10,0 10,5 Z'

    def test_open_path(self):
        d = outline_to_svg_path([Point(0, 0), Point(10, 0), Point(10, 10)], closed=False)
        assert d == 'M0,0 Q10,0 10,5'

    def test_one_curve_per_inner_vertex(self, square):
        d = outline_to_svg_path(square)
        assert d.count('Q') == len(square) - 2

    def test_single_point_is_circle(self):
        d = outline_to_svg_path([Point(1, 2)])
        assert d == 'M0.5,2 A0.5,0.5 0 1 0 1.5,2 A0.5,0.5 0 1 0 0.5,2 Z'

    def test_number_formatting(self):
        d = outline_to_svg_path([Point(0.123456, -0.001), Point(1.5, 2.25), Point(3, 4)])
        assert d.startswith('M0.12,0 ')
        assert 'Q1.5,2.25 ' in d


class TestSvgDocument:

    def test_paths_for_non_empty_outlines(self, square):
        svg = outline_to_svg([square, [], square], 40, 40)
        assert svg.startswith('<svg')
        assert svg.rstrip().endswith('</svg>')
        assert svg.count('<path') == 2

    def test_dimensions(self, square):
        svg = outline_to_svg([square], 64, 48)
        assert 'width="64"' in svg
        assert 'height="48"' in svg
        assert 'viewBox="0 0 64 48"' in svg

    def test_background_and_fill(self, square):
        svg = outline_to_svg([square], 40, 40, fill='red', background='white')
        assert '<rect width="100%" height="100%" fill="white"/>' in svg
        assert 'fill="red"' in svg

    def test_no_background_by_default(self, square):
        assert '<rect' not in outline_to_svg([square], 40, 40)


class TestRasterRendering:

    def test_image_mode_and_size(self, square):
        img = render_outline_image([square], 40, 30)
        assert isinstance(img, Image.Image)
        assert img.mode == 'L'
        assert img.size == (40, 30)

    def test_mask(self, square):
        mask = render_outline_mask(square, 40, 40)
        assert mask.shape == (40, 40)
        assert mask.dtype == bool
        assert mask[20, 20]
        assert not mask[5, 5]
        assert not mask[35, 35]

    def test_degenerate_outlines_skipped(self):
        img = render_outline_image([[], [Point(5, 5)], [Point(1, 1), Point(8, 8)]], 10, 10)
        assert np.array(img).max() == 0

    def test_stroke_mask_covers_centerline(self):
        """The self-overlapping round end cap fills without a hole."""
        outline = get_stroke([(10, 20), (30, 20), (50, 20)], size=8, thinning=0,
                             is_complete=True)
        mask = render_outline_mask(outline, 60, 40)
        assert mask[20, 10:51].all()
        assert not mask[5, 30]

    def test_pixel_centres_sampled(self):
        mask = render_outline_mask([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)], 4, 4)
        assert mask[0:2, 0:2].all()
        assert mask.sum() == 4

    def test_outline_partly_off_canvas(self):
        mask = render_outline_mask([Point(-10, -10), Point(10, -10), Point(10, 10),
                                    Point(-10, 10)], 20, 20)
        assert mask[0:10, 0:10].all()
        assert not mask[10:, :].any()
        assert not mask[:, 10:].any()

    def test_outline_entirely_off_canvas(self):
        img = render_outline_image([[Point(50, 50), Point(60, 50), Point(60, 60)]], 20, 20)
        assert np.array(img).max() == 0

    def test_strokes_do_not_leak_outside_their_bounds(self):
        left = get_stroke([(10, 10), (20, 10)], size=4, is_complete=True)
        right = get_stroke([(70, 10), (80, 10)], size=4, is_complete=True)
        img = np.array(render_outline_image([left, right], 100, 20)) > 0
        assert img[10, 15] and img[10, 75]
        assert not img[:, 30:60].any()

    @pytest.mark.slow
    def test_long_stroke_on_large_canvas(self):
        points = [(100 + 2 * i, 400 + 150 * math.sin(i / 25.0)) for i in range(400)]
        outline = get_stroke(points, size=12, is_complete=True)
        assert len(outline) > 300
        mask = render_outline_mask(outline, 1000, 800)
        assert mask.shape == (800, 1000)
        assert mask[400, 100:106].any()
        assert not mask[:200, :].any()


class TestOutlinesToLists:

    def test_nested_lists(self):
        assert outlines_to_lists([[Point(1, 2, 0.9)], []]) == [[[1.0, 2.0]], []]
