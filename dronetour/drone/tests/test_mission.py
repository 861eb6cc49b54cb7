#!/usr/bin/env python3
# dronetour/drone/tests/test_mission.py

import math
import sys
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from dronetour.airspace import ObstacleMap, Obstacle, Target
from dronetour.drone import FlightConfig, FlightStatus, MissionFlight
from dronetour.geometry import Point, Segment, distance

def open_field(no_fly_zones=()):
    return ObstacleMap(Obstacle.rectangle("Field", 0.0, 0.0, 0.01, 0.01), no_fly_zones)

class TestMissionFlight(unittest.TestCase):
    def setUp(self):
        self.config = FlightConfig()
        self.start = Point(0.005, 0.005)
        self.targets = [
            Target("one.two.three", Point(0.006, 0.005), reading=40.0, battery=90.0),
            Target("four.five.six", Point(0.006, 0.006), reading=200.0, battery=0.05),
            Target("seven.eight.nine", Point(0.005, 0.006), reading=10.0, battery=60.0),
        ]

    def test_open_field_lands(self):
        airspace = open_field()
        result = MissionFlight(airspace, self.start, self.targets, tour=[0, 1, 2], config=self.config).fly()

        self.assertEqual(result.status, FlightStatus.LANDED)
        self.assertTrue(result.landed)
        self.assertEqual(result.visited, [True, True, True])
        self.assertEqual(result.readings[0], 40.0)
        self.assertTrue(math.isnan(result.readings[1]))
        self.assertLessEqual(result.steps_made, self.config.max_moves_per_flight)
        self.assertLessEqual(distance(result.positions[-1], self.start), self.config.landing_tolerance)

        read_moves = [m for m in result.moves if m.read_location is not None]
        self.assertEqual([m.read_location for m in read_moves], [t.location for t in self.targets])
        for move, target in zip(read_moves, self.targets):
            self.assertLessEqual(distance(move.end, target.position), self.config.read_tolerance)
        for move in result.moves:
            self.assertIsNone(airspace.first_blocking(Segment(move.start, move.end)))

    def test_corner_to_corner(self):
        start, far = Point(0.0005, 0.0005), Point(0.0095, 0.0095)
        target = Target("far.away.corner", far, reading=12.0, battery=99.0)
        result = MissionFlight(open_field(), start, [target], config=self.config).fly()

        self.assertTrue(result.landed)
        moves_one_way = distance(start, far) / self.config.move_distance
        self.assertGreaterEqual(result.steps_made, 2 * int(moves_one_way) - 2)
        self.assertLessEqual(result.steps_made, 2 * (int(moves_one_way) + 1) + 8)

    def test_tour_order_is_respected(self):
        result = MissionFlight(open_field(), self.start, self.targets, tour=[2, 0, 1], config=self.config).fly()
        read_order = [m.read_location for m in result.moves if m.read_location is not None]
        self.assertEqual(read_order, ["seven.eight.nine", "one.two.three", "four.five.six"])
        self.assertEqual(result.tour, [2, 0, 1])

    def test_target_at_start_needs_waiting_move(self):
        target = Target("right.here.now", self.start, reading=5.0, battery=50.0)
        result = MissionFlight(open_field(), self.start, [target], config=self.config).fly()
        self.assertTrue(result.landed)
        self.assertEqual(result.steps_made, 2)
        self.assertEqual(result.moves[-1].read_location, "right.here.now")

    def test_boxed_in_start_crashes(self):
        box = Obstacle.rectangle("Box", 0.0049, 0.0049, 0.0051, 0.0051)
        result = MissionFlight(open_field([box]), self.start, self.targets, config=self.config).fly()

        self.assertEqual(result.status, FlightStatus.CRASHED)
        self.assertEqual(result.steps_made, 0)
        self.assertEqual(result.moves, [])
        self.assertEqual(result.visited, [False, False, False])
        self.assertEqual(result.blocking_obstacle, "Box")
        self.assertIsNotNone(result.crash_reason)

    def test_wall_longer_than_avoidance_cap_crashes(self):
        wall = Obstacle.rectangle("Wall", 0.0049, 0.0003, 0.0051, 0.0097)
        target = Target("far.side.wall", Point(0.008, 0.005), reading=20.0, battery=70.0)
        result = MissionFlight(open_field([wall]), Point(0.0045, 0.005), [target], config=self.config).fly()

        self.assertEqual(result.status, FlightStatus.CRASHED)
        self.assertEqual(result.blocking_obstacle, "Wall")
        self.assertEqual(result.visited, [False])
        self.assertLess(result.steps_made, self.config.max_moves_per_flight)

    def test_crash_keeps_partial_log(self):
        config = FlightConfig(max_moves_per_flight=5)
        result = MissionFlight(open_field(), self.start, self.targets, config=config).fly()
        self.assertEqual(result.status, FlightStatus.CRASHED)
        self.assertEqual(result.steps_made, 5)
        self.assertEqual(len(result.moves), 5)
        self.assertTrue(result.visited[0])

    def test_invalid_tour(self):
        with self.assertRaises(ValueError):
            MissionFlight(open_field(), self.start, self.targets, tour=[0, 0, 1])

if __name__ == '__main__':
    unittest.main()
