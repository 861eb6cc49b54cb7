# dronetour/airspace/loader.py
"""
Reads no-fly zones and the sensors of a given day from a local copy of the
air-quality data directory:

    buildings/no-fly-zones.geojson
    maps/YYYY/MM/DD/air-quality-data.json
    words/<w1>/<w2>/<w3>/details.json
"""
import json
import logging
import os
from typing import Any, Dict, List

from ..geometry import Point
from .constants import AirspaceConstants
from .data_models import Obstacle, Target
from .exceptions import DataLoadError

def _read_json(path: str) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(path, message="Data file not found") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(path, message=f"Malformed JSON ({e.msg})") from e

def _parse_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float('nan')

def load_no_fly_zones(path: str) -> List[Obstacle]:
    """Loads a GeoJSON FeatureCollection of solid polygons as obstacles."""
    collection = _read_json(path)
    zones = []
    for i, feature in enumerate(collection.get('features', [])):
        geometry = feature.get('geometry') or {}
        properties = feature.get('properties') or {}
        name = properties.get('name', f"No-Fly-Zone #{i+1}")
        coordinates = geometry.get('coordinates') or []
        if geometry.get('type') != 'Polygon' or len(coordinates) != 1:
            raise DataLoadError(path, message=f"'{name}' is not a solid polygon")
        zones.append(Obstacle.from_coordinates(name, coordinates[0], fill=properties.get('fill')))
    logging.info(f"Loaded {len(zones)} no-fly zones from '{path}'.")
    return zones

def load_location(data_dir: str, words: str) -> Point:
    """Resolves a what3words address through its details.json file."""
    parts = words.split('.')
    if len(parts) != 3:
        raise DataLoadError(words, message="Location is not a what3words address")
    files = AirspaceConstants.FILES
    path = os.path.join(data_dir, files['WORDS_DIR'], *parts, files['WORDS_FILE'])
    details: Dict[str, Any] = _read_json(path)
    try:
        coordinates = details['coordinates']
        return Point(lon=float(coordinates['lng']), lat=float(coordinates['lat']))
    except (KeyError, TypeError, ValueError) as e:
        raise DataLoadError(path, message="Missing coordinates") from e

def load_targets(data_dir: str, day: int, month: int, year: int) -> List[Target]:
    """Loads the sensors scheduled for the given date."""
    files = AirspaceConstants.FILES
    path = os.path.join(data_dir, files['SENSOR_MAP_DIR'], f"{year:04d}", f"{month:02d}", f"{day:02d}",
                        files['SENSOR_MAP_FILE'])
    entries = _read_json(path)
    targets = []
    for entry in entries:
        location = entry.get('location')
        if not location:
            raise DataLoadError(path, message="Sensor without a location")
        targets.append(Target(
            location=location,
            position=load_location(data_dir, location),
            reading=_parse_float(entry.get('reading')),
            battery=_parse_float(entry.get('battery'))
        ))
    logging.info(f"Loaded {len(targets)} sensors for {day:02d}-{month:02d}-{year:04d}.")
    return targets

def load_no_fly_zones_from_dir(data_dir: str) -> List[Obstacle]:
    folder, filename = AirspaceConstants.FILES['NO_FLY_ZONES']
    return load_no_fly_zones(os.path.join(data_dir, folder, filename))
