# dronetour/visualization/constants.py
"""
Rendering constants for flight outputs: how a sensor reading maps to a colour
and a marker symbol.
"""

from ..airspace import AirspaceConstants

class PollutionTiers:
    """Eight equal tiers over [0, MAX_READING), plus two special markers."""
    NUM_READING_TIERS = 8
    TIER_WIDTH = AirspaceConstants.MAX_READING / NUM_READING_TIERS
    LOW_BATTERY = -1    # Reading missing or not trusted
    NOT_VISITED = 404   # Also used for readings above the legal maximum

    COLORS = {
        0: '#00ff00',
        1: '#40ff00',
        2: '#80ff00',
        3: '#c0ff00',
        4: '#ffc000',
        5: '#ff8000',
        6: '#ff4000',
        7: '#ff0000',
        LOW_BATTERY: '#000000',
        NOT_VISITED: '#aaaaaa',
    }

    SYMBOLS = {
        0: 'lighthouse',
        1: 'lighthouse',
        2: 'lighthouse',
        3: 'lighthouse',
        4: 'danger',
        5: 'danger',
        6: 'danger',
        7: 'danger',
        LOW_BATTERY: 'cross',
        NOT_VISITED: '',
    }

class OutputConstants:
    FLIGHT_PATH_TEMPLATE = "flightpath-{day:02d}-{month:02d}-{year:04d}.txt"
    READINGS_TEMPLATE = "readings-{day:02d}-{month:02d}-{year:04d}.geojson"
    MAP_TEMPLATE = "flightmap-{day:02d}-{month:02d}-{year:04d}.html"
    PLOT_TEMPLATE = "flightplot-{day:02d}-{month:02d}-{year:04d}.html"

    PATH_COLOR = '#3366cc'
    NO_FLY_ZONE_COLOR = '#ff0000'
    CONFINEMENT_COLOR = '#555555'
