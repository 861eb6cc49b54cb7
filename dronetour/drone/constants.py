# dronetour/drone/constants.py

class DroneConstants:
    """Default movement parameters of the sensor-reading drone"""

    # ===== MOVEMENT =====
    MOVE_DISTANCE = 0.0003          # Every move has exactly this length (degrees)
    ANGLE_GRANULARITY_DEG = 10      # Headings 0, 10, 20, ... but not e.g. 26

    # ===== ACTION RANGES =====
    MAX_READ_DISTANCE = 0.0002      # Radius around a sensor in which it can be read
    MAX_LANDING_DISTANCE = 0.0003   # Radius around the start in which the drone can land

    # ===== BUDGETS =====
    MAX_MOVES = 350                 # Battery of the real drone
    MAX_MOVES_TO_AVOID_OBSTACLE = 15
    MAX_TRIAL_MOVES = 150           # A trial drone reaching this indicates a logic error

    # ===== HEURISTICS =====
    # Remaining distance is overestimated to account for the coarse angle
    # selection and for obstacles further along the way.
    REMAINING_DISTANCE_WEIGHT = 1.1
    MAX_TWO_OPT_PASSES = 1000
