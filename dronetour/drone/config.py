# dronetour/drone/config.py
from dataclasses import dataclass

from .constants import DroneConstants
from .exceptions import ConfigurationError

@dataclass(frozen=True)
class FlightConfig:
    """
    Movement parameters shared by the real drone, its trial drones and the
    tour planner. Passed explicitly to every component that needs it.
    """
    move_distance: float = DroneConstants.MOVE_DISTANCE
    angle_granularity_deg: int = DroneConstants.ANGLE_GRANULARITY_DEG
    read_tolerance: float = DroneConstants.MAX_READ_DISTANCE
    landing_tolerance: float = DroneConstants.MAX_LANDING_DISTANCE
    max_moves_per_flight: int = DroneConstants.MAX_MOVES
    max_moves_per_avoidance_attempt: int = DroneConstants.MAX_MOVES_TO_AVOID_OBSTACLE
    max_moves_per_trial: int = DroneConstants.MAX_TRIAL_MOVES
    remaining_distance_weight: float = DroneConstants.REMAINING_DISTANCE_WEIGHT
    max_two_opt_passes: int = DroneConstants.MAX_TWO_OPT_PASSES

    def __post_init__(self):
        for name in ('move_distance', 'read_tolerance', 'landing_tolerance', 'remaining_distance_weight'):
            if not getattr(self, name) > 0:
                raise ConfigurationError(name, getattr(self, name), message="Must be positive")
        granularity = self.angle_granularity_deg
        if not isinstance(granularity, int) or granularity <= 0 or 360 % granularity != 0:
            raise ConfigurationError('angle_granularity_deg', granularity,
                                     message="Must be a positive integer dividing 360")
        for name in ('max_moves_per_flight', 'max_moves_per_avoidance_attempt',
                     'max_moves_per_trial', 'max_two_opt_passes'):
            if getattr(self, name) <= 0:
                raise ConfigurationError(name, getattr(self, name), message="Budget must be positive")
        # A trial drone spends at most one move more than the avoidance cap.
        if self.max_moves_per_avoidance_attempt >= self.max_moves_per_trial:
            raise ConfigurationError('max_moves_per_avoidance_attempt', self.max_moves_per_avoidance_attempt,
                                     message="Must be smaller than max_moves_per_trial")

    @property
    def num_headings(self) -> int:
        return 360 // self.angle_granularity_deg
