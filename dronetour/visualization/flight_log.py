# dronetour/visualization/flight_log.py
"""
File outputs of a flight: the move-by-move flight path as text, and a GeoJSON
FeatureCollection with the flown line and one coloured marker per sensor.
"""
import json
import logging
import math
from typing import Any, Dict, List, Sequence

from ..airspace import Target
from ..drone import FlightResult
from .constants import PollutionTiers

def pollution_tier(reading: float, visited: bool = True) -> int:
    if not visited:
        return PollutionTiers.NOT_VISITED
    if reading is None or math.isnan(reading):
        return PollutionTiers.LOW_BATTERY
    tier = max(0, int(reading // PollutionTiers.TIER_WIDTH))
    # Readings beyond the legal maximum are shown like missing ones.
    return tier if tier < PollutionTiers.NUM_READING_TIERS else PollutionTiers.NOT_VISITED

def marker_properties(location: str, reading: float, visited: bool) -> Dict[str, str]:
    tier = pollution_tier(reading, visited)
    color = PollutionTiers.COLORS[tier]
    return {
        'location': location,
        'rgb-string': color,
        'marker-symbol': PollutionTiers.SYMBOLS[tier],
        'marker-color': color,
    }

def flight_path_lines(result: FlightResult) -> List[str]:
    """One line per move: step,lon_before,lat_before,heading,lon_after,lat_after,location."""
    lines = []
    for move in result.moves:
        read = move.read_location if move.read_location is not None else 'null'
        lines.append(f"{move.step},{move.start.lon},{move.start.lat},{move.heading_deg},"
                     f"{move.end.lon},{move.end.lat},{read}")
    return lines

def write_flight_path(result: FlightResult, path: str) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        for line in flight_path_lines(result):
            f.write(line + '\n')
    logging.info(f"Flight path with {len(result.moves)} moves written to '{path}'.")

def readings_feature_collection(result: FlightResult, targets: Sequence[Target]) -> Dict[str, Any]:
    # The flown line comes first, the sensor markers follow.
    features: List[Dict[str, Any]] = [{
        'type': 'Feature',
        'geometry': {'type': 'LineString', 'coordinates': [[p.lon, p.lat] for p in result.positions]},
        'properties': {'status': result.status.name, 'moves': result.steps_made},
    }]
    for i, target in enumerate(targets):
        visited = result.visited[i] if i < len(result.visited) else False
        reading = result.readings[i] if i < len(result.readings) else float('nan')
        features.append({
            'type': 'Feature',
            'geometry': {'type': 'Point', 'coordinates': [target.position.lon, target.position.lat]},
            'properties': marker_properties(target.location, reading, visited),
        })
    return {'type': 'FeatureCollection', 'features': features}

def write_readings_geojson(result: FlightResult, targets: Sequence[Target], path: str) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(readings_feature_collection(result, targets), f, indent=2)
    logging.info(f"Readings map for {len(targets)} sensors written to '{path}'.")
