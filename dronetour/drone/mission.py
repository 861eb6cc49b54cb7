# dronetour/drone/mission.py
"""
The real flight over one full tour: visit every target in the given order,
read it, and return to the starting point. Whatever happens, the caller gets
a FlightResult back; a crash is a status, never an exception.
"""
import logging
from typing import List, Optional, Sequence

from ..airspace import ObstacleMap, Target
from ..geometry import Point, distance
from .config import FlightConfig
from .core import Drone
from .data_models import FlightResult, FlightStatus
from .policies import RealCommitPolicy

class MissionFlight:
    """Flies the real drone along a fixed visiting order."""

    def __init__(self, airspace: ObstacleMap, start: Point, targets: Sequence[Target],
                 tour: Optional[Sequence[int]] = None, config: Optional[FlightConfig] = None):
        self.airspace = airspace
        self.config = config or FlightConfig()
        self.start = start
        self.targets = list(targets)
        self.tour = list(tour) if tour is not None else list(range(len(self.targets)))
        if sorted(self.tour) != list(range(len(self.targets))):
            raise ValueError(f"Tour {self.tour} is not a permutation of the {len(self.targets)} targets")

        self.drone = Drone(airspace, self.config, start, policy=RealCommitPolicy())
        self.visited: List[bool] = [False] * len(self.targets)
        self.readings: List[float] = [float('nan')] * len(self.targets)

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    @property
    def status(self) -> FlightStatus:
        return self.drone.status

    def fly(self) -> FlightResult:
        """Completes the tour (or crashes trying) and returns the flight result."""
        drone = self.drone
        logging.info(f"The drone embarks on a tour of {len(self.tour)} targets.")

        for target_index in self.tour:
            target = self.targets[target_index]
            drone.status = FlightStatus.FLYING
            drone.set_destination(target.position, self.config.read_tolerance)
            steps = drone.fly_to_destination()
            if drone.has_crashed:
                break

            # Only one target can be read per move: if we were already in
            # range, a waiting maneuver is needed first.
            if steps == 0:
                drone.status = FlightStatus.PARKING
                if not drone.park():
                    if not drone.has_crashed:
                        drone.crash(f"no waiting maneuver keeps '{target.location}' in range")
                    break

            if not self._read_target(target_index, target):
                break

        if not drone.has_crashed:
            drone.status = FlightStatus.RETURNING
            drone.set_destination(self.start, self.config.landing_tolerance)
            drone.fly_to_destination()

        if not drone.has_crashed:
            drone.status = FlightStatus.LANDED
            logging.info(f"Successfully finished the tour after {drone.steps_made} moves!")
        else:
            logging.warning(f"Sadly, the drone crashed after {drone.steps_made} moves.")

        return self._build_result()

    def _read_target(self, target_index: int, target: Target) -> bool:
        drone = self.drone
        drone.status = FlightStatus.READING
        if distance(drone.position, target.position) > self.config.read_tolerance:
            drone.crash(f"asked to read '{target.location}' out of range")
            return False

        self.visited[target_index] = True
        self.readings[target_index] = target.output_reading()
        drone.moves[-1].read_location = target.location
        logging.info(f"Read sensor '{target.location}' on move {drone.steps_made}.")
        return True

    def _build_result(self) -> FlightResult:
        drone = self.drone
        blocking = self.airspace[drone.crash_obstacle].name if drone.crash_obstacle is not None else None
        return FlightResult(
            status=drone.status,
            steps_made=drone.steps_made,
            moves=list(drone.moves),
            start=self.start,
            tour=list(self.tour),
            visited=list(self.visited),
            readings=list(self.readings),
            crash_reason=drone.crash_reason,
            blocking_obstacle=blocking
        )
