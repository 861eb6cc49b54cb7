# dronetour/airspace/constants.py
"""
Static constants describing the default flying area and the sensors found in it.
"""

class AirspaceConstants:
    """Constants for the default confinement area and sensor readings"""

    # ===== CONFINEMENT AREA (George Square, Edinburgh) =====
    CONFINEMENT = {
        'MIN_LON': -3.192473,
        'MAX_LON': -3.184319,
        'MIN_LAT': 55.942617,
        'MAX_LAT': 55.946233,
        'NAME': 'Confinement Area'
    }

    # ===== SENSORS =====
    READING_TRUST_THRESHOLD = 0.1   # Battery level (percent) below which a reading is not trusted
    MAX_READING = 256.0             # Largest legal air pollution reading

    # ===== INPUT FILES =====
    FILES = {
        'NO_FLY_ZONES': ('buildings', 'no-fly-zones.geojson'),
        'SENSOR_MAP_DIR': 'maps',
        'SENSOR_MAP_FILE': 'air-quality-data.json',
        'WORDS_DIR': 'words',
        'WORDS_FILE': 'details.json'
    }
