# dronetour/drone/data_models.py
"""
Defines the flight states and the records a real flight hands back to its
caller, whether it landed or crashed.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from ..geometry import Point

class FlightStatus(Enum):
    """States of the real drone over one full tour"""
    FLYING = auto()
    AVOIDING = auto()
    PARKING = auto()
    READING = auto()
    RETURNING = auto()
    LANDED = auto()     # Terminal success
    CRASHED = auto()    # Terminal failure, the move log up to here stays valid

    @property
    def is_terminal(self) -> bool:
        return self in (FlightStatus.LANDED, FlightStatus.CRASHED)

@dataclass
class MoveRecord:
    """A single committed move. read_location is set if a target was read on it."""
    step: int
    heading_deg: int
    start: Point
    end: Point
    read_location: Optional[str] = None

@dataclass
class FlightResult:
    """The final output of a real flight."""
    status: FlightStatus
    steps_made: int
    moves: List[MoveRecord]
    start: Point
    tour: List[int] = field(default_factory=list)
    visited: List[bool] = field(default_factory=list)
    readings: List[float] = field(default_factory=list)
    crash_reason: Optional[str] = None
    blocking_obstacle: Optional[str] = None

    @property
    def landed(self) -> bool:
        return self.status == FlightStatus.LANDED

    @property
    def positions(self) -> List[Point]:
        """All positions of the drone, starting point included."""
        return [self.start] + [move.end for move in self.moves]
