#!/usr/bin/env python3
# dronetour/geometry/tests/test_geometry.py

import math
import sys
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from dronetour.geometry import (
    Orientation, Point, Segment, distance, translate, orientation,
    segments_intersect, segment_intersects_polygon, point_in_polygon
)

def cross_sign(a, b, c):
    cross = (b.lon - a.lon) * (c.lat - a.lat) - (b.lat - a.lat) * (c.lon - a.lon)
    if cross > 0:
        return Orientation.COUNTERCLOCKWISE
    if cross < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLINEAR

SQUARE = (Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0))

class TestOrientation(unittest.TestCase):
    def test_matches_cross_product(self):
        points = [Point(x, y) for x in (-1, 0, 2) for y in (-1, 0, 3)]
        for a in points:
            for b in points:
                for c in points:
                    self.assertEqual(orientation(a, b, c), cross_sign(a, b, c), msg=f"{a} {b} {c}")

    def test_vertical_first_leg(self):
        self.assertEqual(orientation(Point(0, 0), Point(0, 1), Point(-1, 1)), Orientation.COUNTERCLOCKWISE)
        self.assertEqual(orientation(Point(0, 0), Point(0, 1), Point(1, 1)), Orientation.CLOCKWISE)

class TestSegmentIntersection(unittest.TestCase):
    def test_crossing(self):
        self.assertTrue(segments_intersect(Segment(Point(0, 0), Point(2, 2)), Segment(Point(0, 2), Point(2, 0))))

    def test_symmetric(self):
        segments = [
            Segment(Point(0, 0), Point(2, 2)),
            Segment(Point(0, 2), Point(2, 0)),
            Segment(Point(2, 2), Point(3, 5)),
            Segment(Point(3, 0), Point(5, 0)),
            Segment(Point(0, 0), Point(0, 4)),
            Segment(Point(-1, 1), Point(4, 1)),
        ]
        for s1 in segments:
            for s2 in segments:
                self.assertEqual(segments_intersect(s1, s2), segments_intersect(s2, s1))

    def test_shared_endpoint_counts(self):
        self.assertTrue(segments_intersect(Segment(Point(0, 0), Point(1, 1)), Segment(Point(1, 1), Point(2, 0))))

    def test_touching_in_the_middle_counts(self):
        self.assertTrue(segments_intersect(Segment(Point(0, 0), Point(2, 0)), Segment(Point(1, 0), Point(1, 3))))

    def test_disjoint_colinear(self):
        self.assertFalse(segments_intersect(Segment(Point(0, 0), Point(1, 0)), Segment(Point(2, 0), Point(3, 0))))
        self.assertFalse(segments_intersect(Segment(Point(0, 0), Point(0, 1)), Segment(Point(0, 2), Point(0, 3))))

    def test_overlapping_colinear(self):
        self.assertTrue(segments_intersect(Segment(Point(0, 0), Point(2, 0)), Segment(Point(1, 0), Point(3, 0))))

    def test_parallel_apart(self):
        self.assertFalse(segments_intersect(Segment(Point(0, 0), Point(2, 0)), Segment(Point(0, 1), Point(2, 1))))

    def test_zero_length_never_intersects(self):
        self.assertFalse(segments_intersect(Segment(Point(1, 0), Point(1, 0)), Segment(Point(0, 0), Point(2, 0))))

    def test_polygon(self):
        self.assertTrue(segment_intersects_polygon(Segment(Point(0.5, 0.5), Point(2, 0.5)), SQUARE))
        self.assertFalse(segment_intersects_polygon(Segment(Point(0.2, 0.2), Point(0.8, 0.8)), SQUARE))

class TestMeasurements(unittest.TestCase):
    def test_translate_keeps_distance(self):
        origin = Point(-3.19, 55.944)
        for heading in range(0, 360, 10):
            moved = translate(origin, heading, 0.0003)
            self.assertAlmostEqual(distance(origin, moved), 0.0003, places=12)

    def test_translate_east_and_north(self):
        east = translate(Point(0, 0), 0, 1)
        north = translate(Point(0, 0), 90, 1)
        self.assertAlmostEqual(east.lon, 1)
        self.assertAlmostEqual(north.lat, 1)

    def test_heading_range(self):
        self.assertEqual(Segment(Point(0, 0), Point(0, 1)).heading_deg, 90.0)
        self.assertEqual(Segment(Point(0, 0), Point(0, -1)).heading_deg, 270.0)
        self.assertAlmostEqual(Segment(Point(0, 0), Point(-1, -1)).heading_deg, 225.0)
        self.assertTrue(0 <= Segment(Point(0, 0), Point(1, -1e-18)).heading_deg < 360)

    def test_distance(self):
        self.assertTrue(math.isclose(distance(Point(0, 0), Point(3, 4)), 5.0))

class TestPolygons(unittest.TestCase):
    def test_point_in_polygon(self):
        self.assertTrue(point_in_polygon(Point(0.5, 0.5), SQUARE))
        self.assertFalse(point_in_polygon(Point(1.5, 0.5), SQUARE))

if __name__ == '__main__':
    unittest.main()
