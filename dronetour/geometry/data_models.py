# dronetour/geometry/data_models.py
"""
Core value types of the geometry kernel. Everything here is immutable so it
can be shared freely between the real drone and any number of trial drones.
"""
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

class Orientation(Enum):
    """Orientation of an ordered triplet of points."""
    CLOCKWISE = auto()
    COUNTERCLOCKWISE = auto()
    COLINEAR = auto()

@dataclass(frozen=True)
class Point:
    """A position in the flat (longitude, latitude) plane."""
    lon: float
    lat: float

    def as_lat_lon(self) -> Tuple[float, float]:
        return (self.lat, self.lon)

@dataclass(frozen=True)
class Segment:
    """
    A directed line segment from start to end. The heading is measured from
    the east axis, counter-clockwise positive, in [0, 360).
    """
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end.lon - self.start.lon, self.end.lat - self.start.lat)

    @property
    def heading_deg(self) -> float:
        # A vertical segment has no finite slope, so it is handled first.
        if self.start.lon == self.end.lon:
            return 90.0 if self.start.lat <= self.end.lat else 270.0
        angle = math.degrees(math.atan2(self.end.lat - self.start.lat, self.end.lon - self.start.lon))
        angle %= 360.0
        # Tiny negative angles can wrap to exactly 360.0 in floating point.
        return 0.0 if angle >= 360.0 else angle

    def is_degenerate(self) -> bool:
        return self.length == 0.0

# A closed polygon ring: first and last points are identical.
Ring = Tuple[Point, ...]
