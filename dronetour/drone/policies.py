# dronetour/drone/policies.py
"""
Commit policies decide what happens when a drone is asked to make a move it
is not allowed to make. The real drone crashes in a controlled way and keeps
its log; a trial drone only ever fails on a logic error, so it raises.
"""
import logging
from typing import Optional

from .config import FlightConfig
from .exceptions import IllegalMoveError

class RealCommitPolicy:
    """Moves of the real drone have real consequences."""
    is_trial = False

    def move_budget(self, config: FlightConfig) -> int:
        return config.max_moves_per_flight

    def reject(self, drone, heading_deg: float, reason: str, obstacle_index: Optional[int] = None) -> bool:
        if drone.has_crashed:
            logging.error(f"The drone has crashed and can no longer move (asked for {heading_deg} degrees).")
            return False
        drone.crash(reason, obstacle_index)
        return False

class TrialCommitPolicy:
    """Moves of a trial (shadow) drone are throwaway simulations."""
    is_trial = True

    def move_budget(self, config: FlightConfig) -> int:
        return config.max_moves_per_trial

    def reject(self, drone, heading_deg: float, reason: str, obstacle_index: Optional[int] = None) -> bool:
        raise IllegalMoveError(heading_deg, reason)
