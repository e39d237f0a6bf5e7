"""Stroke data structures: annotated points and the options bundle."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping

from .geometry import Point


class StrokeOptionsError(ValueError):
    """Raised for unknown or malformed stroke option values."""


@dataclass
class StrokePoint:
    """A resampled input point, annotated for outlining.

    Attributes:
        point: The adjusted point, with pressure.
        vector: Unit vector from this point back towards the previous one.
            Only the x and y components are meaningful.
        distance: Distance to the previous stroke point.
        running_length: Length of the stroke up to this point.
    """
    point: Point
    vector: Point
    distance: float
    running_length: float

    def __iter__(self) -> Iterator[Any]:
        return iter((self.point, self.vector, self.distance, self.running_length))


# camelCase option names used by other freehand implementations
_OPTION_ALIASES = {
    'taperStart': 'taper_start',
    'taperEnd': 'taper_end',
    'capStart': 'cap_start',
    'capEnd': 'cap_end',
    'simulatePressure': 'simulate_pressure',
    'isComplete': 'is_complete',
}


@dataclass(frozen=True)
class StrokeOptions:
    """Parameters shared by the resampling and outlining stages.

    Attributes:
        size: Base diameter of the stroke. A negative size produces no
            outline.
        thinning: Effect of pressure on the stroke's size. Negative values
            make the stroke thicker where pressure is low.
        smoothing: Density of points along the outline's edges. Edge
            points closer than ``size * smoothing`` are dropped.
        streamline: How much variation to remove from the input, 0..1.
        taper_start: Distance over which the start of the stroke tapers.
        taper_end: Distance over which the end of the stroke tapers.
        cap_start: Round (True) or flat (False) start cap.
        cap_end: Round (True) or flat (False) end cap.
        simulate_pressure: Derive pressure from drawing speed instead of
            using the points' own pressures.
        is_complete: The stroke is finished; its last input point is used
            verbatim.
    """
    size: float = 16.0
    thinning: float = 0.7
    smoothing: float = 0.5
    streamline: float = 0.5
    taper_start: float = 0.0
    taper_end: float = 0.0
    cap_start: bool = True
    cap_end: bool = True
    simulate_pressure: bool = True
    is_complete: bool = False

    def replace(self, **changes: Any) -> StrokeOptions:
        """Return a copy with ``changes`` applied (camelCase names accepted)."""
        if not changes:
            return self
        return dataclasses.replace(self, **_normalize(changes))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> StrokeOptions:
        """Create from dictionary; missing keys keep their defaults."""
        return cls(**_normalize(d))


def _normalize(d: Mapping[str, Any]) -> Dict[str, Any]:
    fields = {f.name: f for f in dataclasses.fields(StrokeOptions)}
    result: Dict[str, Any] = {}
    for key, value in d.items():
        name = _OPTION_ALIASES.get(key, key)
        if name not in fields:
            raise StrokeOptionsError(f"Unknown stroke option: {key!r}")
        if fields[name].type in ('bool', bool):
            if not isinstance(value, bool):
                raise StrokeOptionsError(f"Option {key!r} must be a bool, got {value!r}")
            result[name] = value
            continue
        if isinstance(value, bool):
            raise StrokeOptionsError(f"Option {key!r} must be a number, got {value!r}")
        try:
            result[name] = float(value)
        except (TypeError, ValueError) as e:
            raise StrokeOptionsError(f"Option {key!r} must be a number, got {value!r}") from e
    return result
