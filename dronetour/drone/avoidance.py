# dronetour/drone/avoidance.py
"""
Obstacle avoidance with shadow drones. When the straight move towards the
destination is blocked, two trial drones hug the obstacle, one rotating
clockwise and one counter-clockwise. The real drone then replays the moves
of the trial whose way around looks cheaper.

The functions here only use the public surface of a Drone, so they work on
real and trial drones alike.
"""
import logging

from ..geometry import Segment, distance

INFEASIBLE = float('inf')

def clears_obstacle(trial, obstacle_index: int) -> bool:
    """
    Whether the trial drone could fly straight to its destination without
    touching this one obstacle. Other obstacles are ignored: they are the
    concern of later decisions of the real drone.

    The straight approach is only simulated, nothing is committed, and the
    trial drone's position is restored afterwards.
    """
    start = trial.position
    try:
        while not trial.is_at_destination():
            if trial.is_within_one_move():
                # Edge cases close to the destination are left to a parking attempt.
                return trial.spawn_trial().park()

            next_pos = trial.next_position(trial.heading_to_destination())
            if trial.airspace.blocks(Segment(trial.position, next_pos), obstacle_index):
                return False
            trial.position = next_pos
        return True
    finally:
        trial.position = start

def cost_of_avoiding_obstacle(trial, obstacle_index: int, clockwise: bool) -> float:
    """
    Rotates the trial drone around the obstacle in the given direction and
    returns the estimated number of moves to the destination along that way,
    or infinity if the rotation does not work out.

    On each step the heading to the destination is altered by the smallest
    offset (at most 180 degrees) that gives a legal move, so the trial hugs
    the obstacle. Going straight back along the previous move is never an
    option.
    """
    config = trial.config
    granularity = config.angle_granularity_deg
    direction = -1 if clockwise else 1
    label = "Clockwise" if clockwise else "Counter-clockwise"

    moves_spent = 0
    while not clears_obstacle(trial, obstacle_index):
        base_heading = trial.heading_to_destination()
        made_move = False

        for i in range(180 // granularity + 1):
            candidate = (base_heading + direction * i * granularity) % 360
            if trial.last_heading is not None:
                reverse = (trial.last_heading + 180) % 360
                if candidate == reverse and candidate != trial.last_heading:
                    continue
            if trial.can_move(candidate):
                trial.make_move(candidate)
                moves_spent += 1
                made_move = True
                break

        if not made_move or moves_spent > config.max_moves_per_avoidance_attempt:
            logging.debug(f"{label} rotation does not work.")
            return INFEASIBLE

    remaining_moves = distance(trial.position, trial.destination) / config.move_distance
    return moves_spent + config.remaining_distance_weight * remaining_moves

def avoid_obstacle(drone) -> bool:
    """
    Lets the drone dodge the obstacle that last blocked it. Crashes the drone
    if neither rotation direction works.
    """
    obstacle_index = drone.obstacle_in_way
    name = drone.airspace[obstacle_index].name
    drone.report(f"The drone tries to avoid '{name}'")

    clockwise_trial = drone.spawn_trial()
    clockwise_cost = cost_of_avoiding_obstacle(clockwise_trial, obstacle_index, clockwise=True)
    counter_clockwise_trial = drone.spawn_trial()
    counter_clockwise_cost = cost_of_avoiding_obstacle(counter_clockwise_trial, obstacle_index, clockwise=False)
    drone.report(f"Estimated cost around '{name}': clockwise {clockwise_cost:.2f}, "
                 f"counter-clockwise {counter_clockwise_cost:.2f}")

    if clockwise_cost == INFEASIBLE and counter_clockwise_cost == INFEASIBLE:
        drone.crash(f"cannot find a way around '{name}'", obstacle_index)
        return False

    if counter_clockwise_cost < clockwise_cost:
        chosen = counter_clockwise_trial
        drone.report(f"Chose counter-clockwise rotation to avoid '{name}'")
    else:
        chosen = clockwise_trial
        drone.report(f"Chose clockwise rotation to avoid '{name}'")

    for heading in chosen.move_history:
        if not drone.make_move(heading):
            return False
    return True
