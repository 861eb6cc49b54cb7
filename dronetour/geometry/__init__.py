# dronetour/geometry/__init__.py
"""
Initializes the geometry module, defining its public API.

Exact predicates over points, segments and simple polygons, shared by the
obstacle map, every drone and the tour planner.
"""
from .data_models import Orientation, Point, Segment, Ring
from .core import (
    distance,
    translate,
    orientation,
    point_on_colinear_segment,
    segments_intersect,
    segment_intersects_polygon,
    polygon_edges,
    point_in_polygon,
)

__all__ = [
    'Orientation',
    'Point',
    'Segment',
    'Ring',
    'distance',
    'translate',
    'orientation',
    'point_on_colinear_segment',
    'segments_intersect',
    'segment_intersects_polygon',
    'polygon_edges',
    'point_in_polygon',
]
