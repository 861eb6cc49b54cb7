# dronetour/airspace/data_models.py
"""
Defines the immutable map objects a drone has to respect: named obstacles
(the confinement area and the no-fly zones) and the targets it has to read.
"""
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..geometry import Point
from .constants import AirspaceConstants

@dataclass(frozen=True)
class Obstacle:
    """
    A named closed polygon. The confinement area is an obstacle too: its
    interior is the legal region, but its boundary may not be crossed in
    either direction, exactly like a no-fly zone.
    """
    name: str
    ring: Tuple[Point, ...]
    fill: Optional[str] = None

    @classmethod
    def from_coordinates(cls, name: str, coords: Sequence[Sequence[float]], fill: Optional[str] = None) -> 'Obstacle':
        """Builds an obstacle from (lon, lat) pairs, as found in GeoJSON."""
        return cls(name=name, ring=tuple(Point(lon=float(c[0]), lat=float(c[1])) for c in coords), fill=fill)

    @classmethod
    def rectangle(cls, name: str, min_lon: float, min_lat: float, max_lon: float, max_lat: float) -> 'Obstacle':
        upper_left = Point(min_lon, max_lat)
        ring = (upper_left, Point(max_lon, max_lat), Point(max_lon, min_lat), Point(min_lon, min_lat), upper_left)
        return cls(name=name, ring=ring)

@dataclass(frozen=True)
class Target:
    """
    A sensor the drone has to read. 'location' is its stable identity (a
    what3words address in the sensor data) and is opaque to the planner.
    """
    location: str
    position: Point
    reading: Optional[float] = None
    battery: Optional[float] = None

    def output_reading(self) -> float:
        """The official reading, NaN if the battery is too low to trust it."""
        if self.reading is None or math.isnan(self.reading):
            return float('nan')
        if self.battery is not None and self.battery < AirspaceConstants.READING_TRUST_THRESHOLD:
            return float('nan')
        return self.reading
