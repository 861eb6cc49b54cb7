# dronetour/geometry/core.py
"""
Exact 2D predicates over points, segments and simple polygons. Logging is
omitted here as these are high-frequency, low-level functions called for
every candidate move of every real and trial drone.
"""
import math
from typing import List, Sequence

from .data_models import Orientation, Point, Segment

def distance(a: Point, b: Point) -> float:
    """Euclidean distance in the plane."""
    return math.hypot(a.lon - b.lon, a.lat - b.lat)

def translate(p: Point, heading_deg: float, dist: float) -> Point:
    # East increases longitude (our x), north increases latitude (our y).
    heading_rad = math.radians(heading_deg)
    return Point(lon=p.lon + dist * math.cos(heading_rad), lat=p.lat + dist * math.sin(heading_rad))

def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """
    Orientation of the triangle A, B, C (in this order). Vertical AB and AC
    are handled before the slopes are compared, so there is no division and
    the result matches the sign of the cross product (B - A) x (C - A).
    """
    if b.lon == a.lon:
        if b.lat == a.lat or c.lon == b.lon:
            return Orientation.COLINEAR
        if (b.lat > a.lat) != (c.lon > b.lon):
            return Orientation.COUNTERCLOCKWISE
        return Orientation.CLOCKWISE

    if c.lon == a.lon:
        if c.lat == a.lat:
            return Orientation.COLINEAR
        if (c.lat > a.lat) != (b.lon > c.lon):
            return Orientation.CLOCKWISE
        return Orientation.COUNTERCLOCKWISE

    dy_ab, dy_ac = b.lat - a.lat, c.lat - a.lat
    dx_ab, dx_ac = b.lon - a.lon, c.lon - a.lon
    if dy_ac * dx_ab > dy_ab * dx_ac:
        return Orientation.COUNTERCLOCKWISE
    if dy_ac * dx_ab < dy_ab * dx_ac:
        return Orientation.CLOCKWISE
    return Orientation.COLINEAR

def point_on_colinear_segment(p: Point, segment: Segment) -> bool:
    """
    Given P colinear with the segment, checks whether P lies within the
    segment's bounds. The range is compared along x, or along y when the
    segment is vertical.
    """
    start, end = segment.start, segment.end
    if start.lon != end.lon:
        return min(start.lon, end.lon) <= p.lon <= max(start.lon, end.lon)
    return min(start.lat, end.lat) <= p.lat <= max(start.lat, end.lat)

def segments_intersect(first: Segment, second: Segment) -> bool:
    """
    Whether two segments intersect. Touching in any way counts, otherwise a
    drone could enter a wall on one move and leave it on the next.

    With A, B the ends of the first segment and C, D those of the second: a
    colinear triplet means the segments touch iff the odd point lies within
    the other segment. If colinear triplets occur but none of them touch, the
    segments are disjoint. Otherwise they intersect iff A and B lie on
    different sides of CD and C and D lie on different sides of AB.
    """
    if first.is_degenerate() or second.is_degenerate():
        return False

    a, b = first.start, first.end
    c, d = second.start, second.end

    triplets = (
        (orientation(a, c, d), a, second),
        (orientation(b, c, d), b, second),
        (orientation(c, a, b), c, first),
        (orientation(d, a, b), d, first),
    )

    observed_colinear_triplet = False
    for orient, point, other in triplets:
        if orient == Orientation.COLINEAR:
            if point_on_colinear_segment(point, other):
                return True
            observed_colinear_triplet = True

    if observed_colinear_triplet:
        return False

    orient_acd, orient_bcd, orient_cab, orient_dab = (t[0] for t in triplets)
    return orient_acd != orient_bcd and orient_cab != orient_dab

def polygon_edges(ring: Sequence[Point]) -> List[Segment]:
    """The consecutive edges of a closed ring."""
    return [Segment(ring[i], ring[i + 1]) for i in range(len(ring) - 1)]

def segment_intersects_polygon(segment: Segment, ring: Sequence[Point]) -> bool:
    for i in range(len(ring) - 1):
        if segments_intersect(segment, Segment(ring[i], ring[i + 1])):
            return True
    return False

def point_in_polygon(p: Point, ring: Sequence[Point]) -> bool:
    """Determines if a point is strictly inside a ring using ray casting."""
    n = len(ring)
    if n == 0:
        return False
    inside = False
    p1 = ring[0]
    for i in range(1, n + 1):
        p2 = ring[i % n]
        if min(p1.lat, p2.lat) < p.lat <= max(p1.lat, p2.lat) and p.lon <= max(p1.lon, p2.lon):
            if p1.lon == p2.lon:
                inside = not inside
            else:
                x_intersection = (p.lat - p1.lat) * (p2.lon - p1.lon) / (p2.lat - p1.lat) + p1.lon
                if p.lon <= x_intersection:
                    inside = not inside
        p1 = p2
    return inside
