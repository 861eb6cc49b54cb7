#!/usr/bin/env python3
# dronetour/tour_planner/tests/test_tour_planner.py

import sys
from pathlib import Path
import unittest

import numpy as np

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from dronetour.airspace import ObstacleMap, Obstacle
from dronetour.drone import FlightConfig
from dronetour.geometry import Point
from dronetour.tour_planner import TourPlanner, compute_distance_matrix, simulate_steps

def line_matrix(xs):
    xs = np.asarray(xs)
    return np.abs(xs[:, None] - xs[None, :])

class TestTwoOpt(unittest.TestCase):
    def test_colinear_targets_in_order_are_kept(self):
        # Targets at 1, 2, 3 on a line; the anchor (last) at 0.
        planner = TourPlanner(line_matrix([1, 2, 3, 0]))
        self.assertEqual(planner.find_shortest_tour(), [0, 1, 2])
        self.assertEqual(planner.pass_costs, [6, 6])

    def test_uncrosses_square(self):
        # Nodes A(0,0), C(10,10), B(0,10) and the anchor D(10,0): the initial tour crosses itself.
        matrix = np.array([
            [0, 14, 10, 10],
            [14, 0, 10, 10],
            [10, 10, 0, 14],
            [10, 10, 14, 0],
        ])
        planner = TourPlanner(matrix)
        self.assertEqual(planner.tour_cost(), 48)
        self.assertEqual(planner.find_shortest_tour(), [0, 2, 1])
        self.assertEqual(planner.tour_cost(), 40)

    def test_pass_costs_never_increase(self):
        rng = np.random.default_rng(7)
        coords = rng.integers(0, 1000, size=(12, 2))
        matrix = np.rint(np.hypot(*(coords[:, None, :] - coords[None, :, :]).transpose(2, 0, 1))).astype(int)
        planner = TourPlanner(matrix)
        tour = planner.find_shortest_tour()

        self.assertEqual(sorted(tour), list(range(11)))
        self.assertEqual(planner.permutation[-1], 11)
        for before, after in zip(planner.pass_costs, planner.pass_costs[1:]):
            self.assertLessEqual(after, before)
        self.assertEqual(planner.pass_costs[-1], planner.tour_cost())

    def test_pass_cap_terminates(self):
        matrix = np.array([
            [0, 14, 10, 10],
            [14, 0, 10, 10],
            [10, 10, 0, 14],
            [10, 10, 14, 0],
        ])
        planner = TourPlanner(matrix, FlightConfig(max_two_opt_passes=1))
        planner.apply_two_opt()
        self.assertEqual(len(planner.pass_costs), 2)

    def test_trivial_tours(self):
        self.assertEqual(TourPlanner(np.zeros((1, 1), dtype=int)).find_shortest_tour(), [])
        self.assertEqual(TourPlanner(np.array([[0, 3], [4, 0]])).find_shortest_tour(), [0])

    def test_rejects_non_square_matrix(self):
        with self.assertRaises(ValueError):
            TourPlanner(np.zeros((2, 3), dtype=int))

class TestDistanceMatrix(unittest.TestCase):
    def setUp(self):
        self.airspace = ObstacleMap(Obstacle.rectangle("Field", 0.0, 0.0, 0.01, 0.01))
        self.config = FlightConfig()

    def test_matrix_shape_and_entries(self):
        nodes = [Point(0.003, 0.005), Point(0.005, 0.005), Point(0.007, 0.005), Point(0.001, 0.005)]
        matrix = compute_distance_matrix(self.airspace, nodes, self.config)

        self.assertEqual(matrix.shape, (4, 4))
        self.assertTrue(np.issubdtype(matrix.dtype, np.integer))
        self.assertTrue((np.diag(matrix) == 0).all())
        self.assertTrue((matrix >= 0).all())
        off_diagonal = matrix[~np.eye(4, dtype=bool)]
        self.assertTrue((off_diagonal > 0).all())
        self.assertLess(matrix[0, 1], matrix[0, 2])

    def test_coincident_points_cost_a_waiting_move(self):
        p = Point(0.005, 0.005)
        self.assertEqual(simulate_steps(self.airspace, self.config, p, Point(0.00501, 0.005),
                                        self.config.read_tolerance), 2)

    def test_targets_sharing_a_position_are_not_free(self):
        shared = Point(0.005, 0.005)
        matrix = compute_distance_matrix(self.airspace, [shared, shared, Point(0.002, 0.002)], self.config)
        self.assertEqual(matrix[0, 1], 2)
        self.assertEqual(matrix[1, 0], 2)
        self.assertEqual(matrix[0, 0], 0)
        self.assertEqual(simulate_steps(self.airspace, self.config, shared, shared,
                                        self.config.read_tolerance, waiting_move=False), 0)

    def test_crashed_simulation_costs_the_flight_budget(self):
        box = Obstacle.rectangle("Box", 0.0049, 0.0049, 0.0051, 0.0051)
        airspace = ObstacleMap(Obstacle.rectangle("Field", 0.0, 0.0, 0.01, 0.01), [box])
        steps = simulate_steps(airspace, self.config, Point(0.005, 0.005), Point(0.008, 0.005),
                               self.config.read_tolerance)
        self.assertEqual(steps, self.config.max_moves_per_flight)

    def test_from_points(self):
        targets = [Point(0.007, 0.005), Point(0.003, 0.005), Point(0.005, 0.005)]
        planner = TourPlanner.from_points(self.airspace, targets, Point(0.001, 0.005), self.config)
        self.assertEqual(planner.distance_matrix.shape, (4, 4))
        tour = planner.find_shortest_tour()
        self.assertEqual(sorted(tour), [0, 1, 2])
        self.assertLessEqual(planner.tour_cost(), planner.pass_costs[0])

if __name__ == '__main__':
    unittest.main()
