"""
dronetour.visualization - Flight path files, readings GeoJSON and
interactive maps of a finished flight.
"""

from .flight_log import (
    pollution_tier,
    marker_properties,
    flight_path_lines,
    write_flight_path,
    readings_feature_collection,
    write_readings_geojson
)
from .plotter import FlightMapVisualizer
from .constants import PollutionTiers, OutputConstants

__all__ = [
    "pollution_tier",
    "marker_properties",
    "flight_path_lines",
    "write_flight_path",
    "readings_feature_collection",
    "write_readings_geojson",
    "FlightMapVisualizer",
    "PollutionTiers",
    "OutputConstants"
]
