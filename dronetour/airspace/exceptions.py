# dronetour/airspace/exceptions.py
"""
Airspace Exceptions
Construction-time errors for obstacle maps, targets and their input files
"""

class AirspaceError(Exception):
    """Base class for all airspace construction errors"""
    pass

class InvalidPolygonError(AirspaceError):
    """An obstacle ring is not a closed, simple polygon"""
    def __init__(self, obstacle_name, message="Invalid polygon"):
        self.obstacle_name = obstacle_name
        super().__init__(f"{message}: {obstacle_name}")

class InvalidTargetError(AirspaceError):
    """A target or start point lies outside the legal flying region"""
    def __init__(self, location, message="Invalid target position"):
        self.location = location
        super().__init__(f"{message}: {location}")

class DataLoadError(AirspaceError):
    """An input file is missing or malformed"""
    def __init__(self, path, message="Could not load data file"):
        self.path = path
        super().__init__(f"{message} [Path: {path}]")
