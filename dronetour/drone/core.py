# dronetour/drone/core.py
"""
The Drone class holds the state of one simulated unit (position, move log,
destination, action range) together with the move primitives every drone
shares: legality checks, single moves, parking and flying to a destination.

Whether a drone is the real one or a throwaway trial ("shadow") drone is
decided only by its commit policy.
"""
import logging
import math
from typing import List, Optional, Tuple

from ..airspace import ObstacleMap
from ..geometry import Point, Segment, distance, translate
from .avoidance import avoid_obstacle
from .config import FlightConfig
from .data_models import FlightStatus, MoveRecord
from .policies import RealCommitPolicy, TrialCommitPolicy

class Drone:
    """A movable simulated drone bound to an obstacle map and a flight config."""

    def __init__(self, airspace: ObstacleMap, config: FlightConfig, position: Point,
                 destination: Optional[Point] = None, action_range: Optional[float] = None,
                 policy=None, verbose: bool = True):
        self.airspace = airspace
        self.config = config
        self.position = position
        self.destination = destination if destination is not None else position
        self.action_range = action_range if action_range is not None else config.read_tolerance
        self.policy = policy if policy is not None else RealCommitPolicy()
        self.verbose = verbose

        self.steps_made = 0
        self.moves: List[MoveRecord] = []
        self.last_heading: Optional[int] = None
        self.obstacle_in_way: Optional[int] = None  # Index into the obstacle map

        self.status = FlightStatus.FLYING
        self.crash_reason: Optional[str] = None
        self.crash_obstacle: Optional[int] = None

    # --- State ---

    @property
    def is_trial(self) -> bool:
        return self.policy.is_trial

    @property
    def has_crashed(self) -> bool:
        return self.status == FlightStatus.CRASHED

    @property
    def move_history(self) -> List[int]:
        return [move.heading_deg for move in self.moves]

    def set_destination(self, destination: Point, action_range: float) -> None:
        self.destination = destination
        self.action_range = action_range

    def spawn_trial(self, position: Optional[Point] = None) -> 'Drone':
        """
        An independent copy of this drone's situation for throwaway simulation.
        Points are immutable and the obstacle map is never mutated, so sharing
        them keeps the copy fully independent.
        """
        trial = Drone(self.airspace, self.config,
                      position if position is not None else self.position,
                      destination=self.destination, action_range=self.action_range,
                      policy=TrialCommitPolicy())
        trial.last_heading = self.last_heading
        return trial

    def crash(self, reason: str, obstacle_index: Optional[int] = None) -> None:
        if not self.is_trial and self.verbose:
            logging.warning(f"The drone crashed after {self.steps_made} moves: {reason}")
        self.status = FlightStatus.CRASHED
        self.crash_reason = reason
        self.crash_obstacle = obstacle_index

    def report(self, message: str) -> None:
        # Trial drones simulate a lot; only a verbose real drone reports at INFO.
        if self.is_trial or not self.verbose:
            logging.debug(message)
        else:
            logging.info(message)

    # --- Geometry of the next move ---

    def next_position(self, heading_deg: float) -> Point:
        return translate(self.position, heading_deg, self.config.move_distance)

    def distance_to_destination(self) -> float:
        return distance(self.position, self.destination)

    def is_at_destination(self) -> bool:
        return self.distance_to_destination() <= self.action_range

    def is_within_one_move(self) -> bool:
        return self.distance_to_destination() <= self.config.move_distance

    def heading_to_destination(self) -> int:
        """Angle of the line to the destination, rounded half-up to the granularity."""
        granularity = self.config.angle_granularity_deg
        angle = Segment(self.position, self.destination).heading_deg
        return (int(math.floor(angle / granularity + 0.5)) * granularity) % 360

    def can_move(self, heading_deg: float) -> bool:
        """
        Assuming the drone is inside the confinement area and outside every
        no-fly zone, a move is legal iff it crosses none of their boundaries.
        """
        blocking = self.airspace.first_blocking(Segment(self.position, self.next_position(heading_deg)))
        if blocking is not None:
            self.obstacle_in_way = blocking
            return False
        return True

    # --- Committing moves ---

    def _illegal_move_reason(self, heading_deg: float) -> Tuple[Optional[str], Optional[int]]:
        if self.has_crashed:
            return "the drone has already crashed", None
        if heading_deg % self.config.angle_granularity_deg != 0:
            return f"heading {heading_deg} is not a multiple of {self.config.angle_granularity_deg} degrees", None
        if not self.can_move(heading_deg):
            name = self.airspace[self.obstacle_in_way].name
            return f"moving at {heading_deg} degrees would cross '{name}'", self.obstacle_in_way
        if self.steps_made >= self.policy.move_budget(self.config):
            return "the drone has run out of battery", None
        return None, None

    def make_move(self, heading_deg: float) -> bool:
        """The only way a drone moves. Illegal requests go to the commit policy."""
        reason, obstacle_index = self._illegal_move_reason(heading_deg)
        if reason is not None:
            return self.policy.reject(self, heading_deg, reason, obstacle_index)

        heading = int(heading_deg) % 360
        start, end = self.position, self.next_position(heading)
        self.position = end
        self.steps_made += 1
        self.last_heading = heading
        self.moves.append(MoveRecord(step=self.steps_made, heading_deg=heading, start=start, end=end))
        return True

    def make_move_towards_destination(self) -> bool:
        return self.make_move(self.heading_to_destination())

    def park(self) -> bool:
        """
        Enters the action range when the destination is closer than one move
        but flying straight at it would overshoot, or when a waiting move is
        needed because only one target can be read per move.

        Tries every heading: a legal hop that ends in range is taken at once.
        Otherwise the first hop followed by a legal straight move into range
        is remembered and flown after all headings have been tried.
        """
        chosen_hop: Optional[int] = None
        chosen_parking_move: Optional[int] = None

        for i in range(self.config.num_headings):
            hop = i * self.config.angle_granularity_deg
            if not self.can_move(hop):
                continue

            shadow = self.spawn_trial(position=self.next_position(hop))
            if shadow.is_at_destination():
                self.report(f"Successful parking attempt in 1 move (heading {hop})")
                return self.make_move(hop)

            if chosen_hop is None:
                parking_heading = shadow.heading_to_destination()
                lands_in_range = distance(shadow.next_position(parking_heading), self.destination) <= self.action_range
                if lands_in_range and shadow.can_move(parking_heading):
                    chosen_hop, chosen_parking_move = hop, parking_heading

        if chosen_hop is None:
            self.report("The parking attempt was not successful.")
            return False

        self.report(f"Successful parking attempt in 2 moves (headings {chosen_hop}, {chosen_parking_move})")
        return self.make_move(chosen_hop) and self.make_move(chosen_parking_move)

    def fly_to_destination(self) -> int:
        """
        Guides the drone into the action range of its destination, returning
        the number of moves this took. Ends early if the drone crashes.
        """
        steps_at_start = self.steps_made
        travel_status = self.status if self.status == FlightStatus.RETURNING else FlightStatus.FLYING

        while not self.is_at_destination() and not self.has_crashed:
            if self.is_within_one_move():
                self.status = FlightStatus.PARKING
                if not self.park() and not self.has_crashed:
                    self.crash("no parking maneuver reaches the destination")
            elif self.can_move(self.heading_to_destination()):
                self.make_move_towards_destination()
            else:
                self.status = FlightStatus.AVOIDING
                avoid_obstacle(self)

            if not self.has_crashed:
                self.status = travel_status

        return self.steps_made - steps_at_start
