# dronetour/airspace/core.py
"""
The obstacle map: the confinement boundary plus the no-fly zones. It is
validated once at construction and never mutated afterwards, so every drone
and trial drone may share the same instance.
"""
import logging
from typing import Iterable, Optional, Sequence, Tuple

from shapely.geometry import LinearRing

from ..geometry import Point, Segment, point_in_polygon, segment_intersects_polygon
from .constants import AirspaceConstants
from .data_models import Obstacle, Target
from .exceptions import InvalidPolygonError, InvalidTargetError

CONFINEMENT_INDEX = 0

class ObstacleMap:
    """Immutable collection of the polygons a drone may never cross."""

    def __init__(self, confinement: Obstacle, no_fly_zones: Iterable[Obstacle] = ()):
        no_fly_zones = tuple(no_fly_zones)
        for obstacle in (confinement,) + no_fly_zones:
            self._validate_obstacle(obstacle)
        # Confinement first: its index is what a blocked move reports first.
        self._obstacles: Tuple[Obstacle, ...] = (confinement,) + no_fly_zones
        logging.info(f"ObstacleMap initialized with {len(no_fly_zones)} no-fly zones.")

    @classmethod
    def default(cls, no_fly_zones: Iterable[Obstacle] = ()) -> 'ObstacleMap':
        """An obstacle map over the default rectangular confinement area."""
        bounds = AirspaceConstants.CONFINEMENT
        confinement = Obstacle.rectangle(bounds['NAME'], bounds['MIN_LON'], bounds['MIN_LAT'],
                                         bounds['MAX_LON'], bounds['MAX_LAT'])
        return cls(confinement, no_fly_zones)

    @property
    def confinement(self) -> Obstacle:
        return self._obstacles[CONFINEMENT_INDEX]

    @property
    def no_fly_zones(self) -> Tuple[Obstacle, ...]:
        return self._obstacles[CONFINEMENT_INDEX + 1:]

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return self._obstacles

    def __getitem__(self, index: int) -> Obstacle:
        return self._obstacles[index]

    def __len__(self) -> int:
        return len(self._obstacles)

    def first_blocking(self, segment: Segment) -> Optional[int]:
        """Index of the first obstacle whose boundary the segment touches, if any."""
        for index, obstacle in enumerate(self._obstacles):
            if segment_intersects_polygon(segment, obstacle.ring):
                return index
        return None

    def blocks(self, segment: Segment, index: int) -> bool:
        """Whether one specific obstacle is in the way of the segment."""
        return segment_intersects_polygon(segment, self._obstacles[index].ring)

    def is_legal_position(self, point: Point) -> bool:
        if not point_in_polygon(point, self.confinement.ring):
            return False
        return not any(point_in_polygon(point, zone.ring) for zone in self.no_fly_zones)

    def validate_start(self, start: Point) -> None:
        if not self.is_legal_position(start):
            raise InvalidTargetError(f"start ({start.lon}, {start.lat})",
                                     message="Start point outside the legal flying region")

    def validate_targets(self, targets: Sequence[Target]) -> None:
        for target in targets:
            if not point_in_polygon(target.position, self.confinement.ring):
                raise InvalidTargetError(target.location, message="Target outside the confinement area")

    @staticmethod
    def _validate_obstacle(obstacle: Obstacle) -> None:
        ring = obstacle.ring
        if len(ring) < 4:
            raise InvalidPolygonError(obstacle.name, message="Polygon ring needs at least 4 points")
        if ring[0] != ring[-1]:
            raise InvalidPolygonError(obstacle.name, message="Polygon ring is not closed")
        if any(ring[i] == ring[i + 1] for i in range(len(ring) - 1)):
            raise InvalidPolygonError(obstacle.name, message="Polygon ring has a zero-length edge")
        if not LinearRing([(p.lon, p.lat) for p in ring]).is_simple:
            raise InvalidPolygonError(obstacle.name, message="Polygon ring intersects itself")
