"""
dronetour.airspace - The confinement area, no-fly zones and sensors a drone
has to deal with.
"""

from .core import ObstacleMap, CONFINEMENT_INDEX
from .data_models import Obstacle, Target
from .constants import AirspaceConstants
from .exceptions import AirspaceError, InvalidPolygonError, InvalidTargetError, DataLoadError

__all__ = [
    'ObstacleMap',
    'CONFINEMENT_INDEX',
    'Obstacle',
    'Target',
    'AirspaceConstants',
    'AirspaceError',
    'InvalidPolygonError',
    'InvalidTargetError',
    'DataLoadError'
]
