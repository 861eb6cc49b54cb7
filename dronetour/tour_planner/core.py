# dronetour/tour_planner/core.py
"""
Solves the travelling salesman problem induced by the targets of one tour.
The edge weights are not distances but the number of moves a simulated drone
actually needs between two points, obstacles and parking included.
"""
import logging
from typing import List, Optional, Sequence

import numpy as np

from ..airspace import ObstacleMap
from ..drone import Drone, FlightConfig, RealCommitPolicy
from ..geometry import Point

def simulate_steps(airspace: ObstacleMap, config: FlightConfig, origin: Point, destination: Point,
                   action_range: float, waiting_move: bool = True) -> int:
    """
    Number of moves a fresh drone needs from origin into the action range of
    destination. A point already in range still costs a waiting maneuver,
    because two targets cannot be read on the same move. A flight that
    crashes costs the whole move budget. waiting_move is False only when
    origin and destination are the same node.
    """
    drone = Drone(airspace, config, origin, destination=destination, action_range=action_range,
                  policy=RealCommitPolicy(), verbose=False)
    steps = drone.fly_to_destination()
    if steps == 0 and waiting_move and not drone.has_crashed:
        if not drone.park():
            drone.crash("no waiting maneuver available")

    if drone.has_crashed:
        logging.warning(f"Simulated flight from ({origin.lon:.6f}, {origin.lat:.6f}) to "
                        f"({destination.lon:.6f}, {destination.lat:.6f}) crashed: {drone.crash_reason}")
        return config.max_moves_per_flight
    return drone.steps_made

def compute_distance_matrix(airspace: ObstacleMap, nodes: Sequence[Point], config: FlightConfig) -> np.ndarray:
    """
    Simulates a flight for every ordered pair of nodes. The last node is the
    starting/landing point, so flights towards it use the landing tolerance.
    The matrix is not symmetric in general.
    """
    num_points = len(nodes)
    matrix = np.zeros((num_points, num_points), dtype=int)
    for i in range(num_points):
        for j in range(num_points):
            if i == j:
                continue
            action_range = config.landing_tolerance if j == num_points - 1 else config.read_tolerance
            matrix[i, j] = simulate_steps(airspace, config, nodes[i], nodes[j], action_range, waiting_move=i != j)
    return matrix

class TourPlanner:
    """
    Finds a short visiting order over a distance matrix whose last row and
    column belong to the starting/landing point (the anchor).
    """

    def __init__(self, distance_matrix, config: Optional[FlightConfig] = None):
        self.config = config or FlightConfig()
        self.distance_matrix = np.asarray(distance_matrix, dtype=int)
        if self.distance_matrix.ndim != 2 or self.distance_matrix.shape[0] != self.distance_matrix.shape[1]:
            raise ValueError(f"Distance matrix must be square, got shape {self.distance_matrix.shape}")
        self.num_points = self.distance_matrix.shape[0]
        self.anchor_index = self.num_points - 1

        # Entry k is the node visited k-th; the anchor sits at the wrap boundary.
        self.permutation: List[int] = list(range(self.num_points))
        self.pass_costs: List[int] = []

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    @classmethod
    def from_points(cls, airspace: ObstacleMap, points: Sequence[Point], anchor: Point,
                    config: Optional[FlightConfig] = None) -> 'TourPlanner':
        """Builds the planner by simulating flights between all points and the anchor."""
        config = config or FlightConfig()
        nodes = list(points) + [anchor]
        logging.info(f"Simulating {len(nodes) * (len(nodes) - 1)} flights for the distance matrix...")
        return cls(compute_distance_matrix(airspace, nodes, config), config)

    def tour_cost(self, permutation: Optional[Sequence[int]] = None) -> int:
        """Total cost of the closed tour through the permutation."""
        permutation = self.permutation if permutation is None else permutation
        n = len(permutation)
        return int(sum(self.distance_matrix[permutation[k], permutation[(k + 1) % n]] for k in range(n)))

    def find_shortest_tour(self) -> List[int]:
        """
        The visiting order of the targets, without the anchor, whose place as
        first and last point of the flight is implied. Not guaranteed to be
        the shortest tour: 2-opt only finds a local optimum.
        """
        self.apply_two_opt()
        return [node for node in self.permutation if node != self.anchor_index]

    def apply_two_opt(self) -> None:
        """
        Tries to reverse the tour between every pair of positions and keeps
        every reversal that lowers the cost, until a full pass finds none.
        """
        self.pass_costs = [self.tour_cost()]
        if self.num_points < 3:
            return

        improved = True
        passes = 0
        while improved:
            if passes >= self.config.max_two_opt_passes:
                logging.warning(f"2-opt stopped after {passes} passes without converging.")
                break
            improved = False
            for j in range(self.num_points - 1):
                for i in range(j):
                    if self._try_reverse(i, j):
                        improved = True
            passes += 1
            self.pass_costs.append(self.tour_cost())

        logging.info(f"2-opt finished after {passes} passes with tour cost {self.pass_costs[-1]}.")

    def _try_reverse(self, i: int, j: int) -> bool:
        """
        Replaces the edges (i-1 -> i) and (j -> j+1) by (i-1 -> j) and
        (i -> j+1) if that is strictly cheaper. Only these four matrix entries
        are compared; the edges inside the segment are assumed unchanged.
        """
        n = self.num_points
        perm = self.permutation
        last_of_start = perm[(i - 1) % n]
        first_of_segment = perm[i]
        last_of_segment = perm[j]
        first_of_end = perm[(j + 1) % n]

        m = self.distance_matrix
        old_cost = m[last_of_start, first_of_segment] + m[last_of_segment, first_of_end]
        new_cost = m[last_of_start, last_of_segment] + m[first_of_segment, first_of_end]

        if new_cost < old_cost:
            perm[i:j + 1] = perm[i:j + 1][::-1]
            return True
        return False
