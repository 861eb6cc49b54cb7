# dronetour/drone/__init__.py
"""
Initializes the drone module, defining its public API.

The Drone class carries both the real drone and its trial ("shadow") drones;
MissionFlight flies the real drone over a full tour.
"""
from .core import Drone
from .mission import MissionFlight
from .config import FlightConfig
from .constants import DroneConstants
from .data_models import FlightStatus, MoveRecord, FlightResult
from .policies import RealCommitPolicy, TrialCommitPolicy
from .avoidance import avoid_obstacle, cost_of_avoiding_obstacle, clears_obstacle, INFEASIBLE
from .exceptions import DroneError, ConfigurationError, IllegalMoveError

__all__ = [
    'Drone',
    'MissionFlight',
    'FlightConfig',
    'DroneConstants',
    'FlightStatus',
    'MoveRecord',
    'FlightResult',
    'RealCommitPolicy',
    'TrialCommitPolicy',
    'avoid_obstacle',
    'cost_of_avoiding_obstacle',
    'clears_obstacle',
    'INFEASIBLE',
    'DroneError',
    'ConfigurationError',
    'IllegalMoveError'
]
