# dronetour/drone/exceptions.py
"""
Drone Exceptions
Only raised for invalid configuration or for logic errors in trial drones.
A real flight never raises: it ends in the CRASHED status instead.
"""

class DroneError(Exception):
    """Base class for all drone errors"""
    pass

class ConfigurationError(DroneError):
    """Invalid flight configuration detected"""
    def __init__(self, config_name, value, message="Invalid configuration value"):
        self.config_name = config_name
        self.value = value
        super().__init__(f"{message}: {config_name}={value}")

class IllegalMoveError(DroneError):
    """A trial drone was told to make an impossible move"""
    def __init__(self, heading_deg, reason):
        self.heading_deg = heading_deg
        self.reason = reason
        super().__init__(f"Trial drone cannot move at {heading_deg} degrees: {reason}")
