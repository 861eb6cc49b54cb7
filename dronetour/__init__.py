# dronetour/__init__.py
"""
Plans and simulates sensor-reading tours of a drone confined to an area with
no-fly zones.

Typical use: build an ObstacleMap, then call plan_and_fly with a start point
and the targets. The FlightResult tells whether the drone landed or crashed.
"""
from .core import MissionPlanner, plan_and_fly
from .airspace import ObstacleMap, Obstacle, Target
from .drone import Drone, MissionFlight, FlightConfig, FlightStatus, FlightResult
from .geometry import Point, Segment
from .tour_planner import TourPlanner

__all__ = [
    'MissionPlanner',
    'plan_and_fly',
    'ObstacleMap',
    'Obstacle',
    'Target',
    'Drone',
    'MissionFlight',
    'FlightConfig',
    'FlightStatus',
    'FlightResult',
    'Point',
    'Segment',
    'TourPlanner'
]
