# dronetour/core.py
"""
The MissionPlanner ties the modules together: validate the inputs against the
obstacle map, order the targets with the tour planner, then fly the tour with
the real drone.
"""
import logging
from typing import List, Optional, Sequence

from .airspace import ObstacleMap, Target
from .drone import FlightConfig, FlightResult, MissionFlight
from .geometry import Point
from .tour_planner import TourPlanner

class MissionPlanner:
    def __init__(self, airspace: ObstacleMap, config: Optional[FlightConfig] = None):
        self.airspace = airspace
        self.config = config or FlightConfig()
        self.last_planner: Optional[TourPlanner] = None

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.info("MissionPlanner initialized.")

    def plan_tour(self, start: Point, targets: Sequence[Target]) -> List[int]:
        """Visiting order of the targets, as indices into the given sequence."""
        self.airspace.validate_start(start)
        self.airspace.validate_targets(targets)
        if not targets:
            return []

        planner = TourPlanner.from_points(self.airspace, [t.position for t in targets], start, self.config)
        tour = planner.find_shortest_tour()
        self.last_planner = planner
        logging.info(f"Planned a tour over {len(tour)} targets with simulated cost {planner.tour_cost()} moves.")
        return tour

    def plan_and_fly(self, start: Point, targets: Sequence[Target]) -> FlightResult:
        tour = self.plan_tour(start, targets)
        return MissionFlight(self.airspace, start, targets, tour=tour, config=self.config).fly()

def plan_and_fly(airspace: ObstacleMap, start: Point, targets: Sequence[Target],
                 config: Optional[FlightConfig] = None) -> FlightResult:
    """Plans the visiting order of the targets and flies it."""
    return MissionPlanner(airspace, config).plan_and_fly(start, targets)
