"""Shared pytest fixtures for the freehand_lib test suite.

Fixtures:
    default_options: StrokeOptions with library defaults
    straight_points: Three collinear points along the x axis
    verbatim_options: Options that keep input points unchanged (no
        streamlining, no start threshold, finished stroke)
    reversal_points: A line that turns back on itself, producing a sharp corner
    wavy_points: A gently curving polyline with varying pressure

Markers (registered in pyproject.toml):
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from freehand_lib.domain import Point, StrokeOptions


@pytest.fixture
def default_options():
    """StrokeOptions with library defaults."""
    return StrokeOptions()


@pytest.fixture
def verbatim_options():
    """Options under which the resampler keeps every input point as is."""
    return StrokeOptions(size=4, thinning=0.0, streamline=0.0, is_complete=True)


@pytest.fixture
def straight_points():
    """Three points on the x axis, 10 units apart."""
    return [Point(0, 0), Point(10, 0), Point(20, 0)]


@pytest.fixture
def reversal_points():
    """Right along the x axis, then sharply back to the left."""
    return [Point(0, 0), Point(20, 0), Point(40, 0), Point(20, 1), Point(0, 2)]


@pytest.fixture
def wavy_points():
    """A sine-like polyline of 40 points with rising pressure."""
    return [
        Point(i * 5.0, 20.0 * math.sin(i / 6.0), 0.3 + 0.4 * i / 39)
        for i in range(40)
    ]
