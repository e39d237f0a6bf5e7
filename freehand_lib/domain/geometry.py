"""Geometric value objects for freehand strokes.

The Point type doubles as a 2D vector. Every arithmetic operation returns
a new Point, and the pressure of the result follows a fixed rule:

    - point-point operations (add, subtract, multiply, divide) take the
      pressure of the *second* operand;
    - scalar operations (scale, divide by a number) keep the pressure of
      the *first* operand;
    - negation, perpendicular and rotation keep the point's own pressure.

The named methods spell the rule out at the call site. The operators
(``+ - * /`` and unary ``-``) are aliases with identical semantics.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

DEFAULT_PRESSURE = 0.5


@dataclass(frozen=True)
class Point:
    """Immutable 2D point with pressure.

    Equality and hashing use ``(x, y)`` only; two samples at the same
    position with different pressures compare equal.
    """
    x: float
    y: float
    pressure: float = field(default=DEFAULT_PRESSURE, compare=False)

    # --- point-point operations: pressure of ``other`` ---

    def add_keeping_pressure_of(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, other.pressure)

    def subtract_keeping_pressure_of(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, other.pressure)

    def multiply_keeping_pressure_of(self, other: Point) -> Point:
        """Elementwise product."""
        return Point(self.x * other.x, self.y * other.y, other.pressure)

    def divide_keeping_pressure_of(self, other: Point) -> Point:
        """Elementwise quotient."""
        return Point(self.x / other.x, self.y / other.y, other.pressure)

    # --- scalar operations: own pressure ---

    def scale_keeping_own_pressure(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor, self.pressure)

    def divide_keeping_own_pressure(self, factor: float) -> Point:
        return Point(self.x / factor, self.y / factor, self.pressure)

    def negated(self) -> Point:
        return Point(-self.x, -self.y, self.pressure)

    # --- operator aliases ---

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.add_keeping_pressure_of(other)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.subtract_keeping_pressure_of(other)

    def __mul__(self, other: Union[Point, float]) -> Point:
        if isinstance(other, Point):
            return self.multiply_keeping_pressure_of(other)
        if isinstance(other, (int, float)):
            return self.scale_keeping_own_pressure(other)
        return NotImplemented

    def __rmul__(self, factor: float) -> Point:
        if isinstance(factor, (int, float)):
            return self.scale_keeping_own_pressure(factor)
        return NotImplemented

    def __truediv__(self, other: Union[Point, float]) -> Point:
        if isinstance(other, Point):
            return self.divide_keeping_pressure_of(other)
        if isinstance(other, (int, float)):
            return self.divide_keeping_own_pressure(other)
        return NotImplemented

    def __neg__(self) -> Point:
        return self.negated()

    # --- vector operations ---

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.length_squared())

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def unit(self) -> Point:
        """Unit vector in the same direction.

        The zero vector has no direction and maps to itself.
        """
        length = self.length()
        if length == 0:
            return Point(0.0, 0.0, self.pressure)
        return self.divide_keeping_own_pressure(length)

    def perpendicular(self) -> Point:
        """The vector rotated a quarter turn: ``(y, -x)``."""
        return Point(self.y, -self.x, self.pressure)

    def rotate_around(self, center: Point, radians: float) -> Point:
        """Rotate this point around ``center`` by ``radians``."""
        s = math.sin(radians)
        c = math.cos(radians)
        px = self.x - center.x
        py = self.y - center.y
        return Point(px * c - py * s + center.x,
                     px * s + py * c + center.y,
                     self.pressure)

    def project(self, direction: Point, distance: float) -> Point:
        """Move ``distance`` along ``direction`` from this point."""
        return self.add_keeping_pressure_of(direction.scale_keeping_own_pressure(distance))

    def lerp(self, other: Point, t: float) -> Point:
        """Linear interpolation towards ``other``.

        The result keeps this point's pressure: ``other - self`` carries
        it, and the final addition takes the second operand's.
        """
        delta = other.subtract_keeping_pressure_of(self).scale_keeping_own_pressure(t)
        return self.add_keeping_pressure_of(delta)

    def midpoint(self, other: Point) -> Point:
        return self.lerp(other, 0.5)

    # --- conversions ---

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y), float(self.pressure)]

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Point:
        """Create from an ``(x, y)`` or ``(x, y, pressure)`` tuple."""
        if len(t) >= 3:
            return cls(float(t[0]), float(t[1]), float(t[2]))
        return cls(float(t[0]), float(t[1]))

    @classmethod
    def from_list(cls, lst: Sequence[float]) -> Point:
        """Create from list."""
        return cls.from_tuple(lst)


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce a Point or an ``(x, y[, pressure])`` sequence to a Point."""
    if isinstance(value, Point):
        return value
    return Point.from_tuple(value)
