# run_mission.py
import os
import sys
import logging

# --- Setup Python Path ---
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from dronetour.core import MissionPlanner
from dronetour.airspace import ObstacleMap, Obstacle, Target, DataLoadError
from dronetour.airspace.loader import load_no_fly_zones_from_dir, load_targets
from dronetour.geometry import Point
from dronetour.visualization import (
    FlightMapVisualizer, OutputConstants, write_flight_path, write_readings_geojson
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

def demo_scenario():
    """A few buildings and sensors inside the default confinement area."""
    no_fly_zones = [
        Obstacle.rectangle("Library", -3.1900, 55.9428, -3.1885, 55.9436),
        Obstacle.rectangle("Lecture Hall", -3.1880, 55.9445, -3.1870, 55.9455),
    ]
    targets = [
        Target("alpha.bravo.charlie", Point(-3.1915, 55.9440), reading=45.3, battery=88.0),
        Target("delta.echo.foxtrot", Point(-3.1862, 55.9432), reading=170.2, battery=51.0),
        Target("golf.hotel.india", Point(-3.1875, 55.9460), reading=220.9, battery=0.05),
        Target("juliet.kilo.lima", Point(-3.1895, 55.9452), reading=12.0, battery=73.4),
        Target("mike.november.oscar", Point(-3.1908, 55.9430), reading=98.6, battery=64.2),
    ]
    return ObstacleMap.default(no_fly_zones), targets

def main():
    """
    Plans the tour of one day, flies it and writes the flight path, the
    readings map and an interactive map next to this script.
    """
    # --- Configuration ---
    DAY, MONTH, YEAR = 15, 6, 2020
    START = Point(-3.1878, 55.9444)
    DATA_DIR = os.path.join(project_root, "data")

    print("--- Starting Drone Tour ---")
    print(f"Date: {DAY:02d}-{MONTH:02d}-{YEAR:04d}, Start: ({START.lon}, {START.lat})")
    print("-" * 40)

    # --- Step 1: Load the map and the sensors of the day ---
    try:
        airspace = ObstacleMap.default(load_no_fly_zones_from_dir(DATA_DIR))
        targets = load_targets(DATA_DIR, DAY, MONTH, YEAR)
    except DataLoadError as e:
        print(f"\n[!] Could not load the data directory. Error: {e}")
        print("    Falling back to the built-in demo scenario.")
        airspace, targets = demo_scenario()

    # --- Step 2: Plan and fly ---
    planner = MissionPlanner(airspace)
    result = planner.plan_and_fly(START, targets)

    print(f"\nStatus: {result.status.name} after {result.steps_made} moves")
    print(f"Visiting order: {[targets[i].location for i in result.tour]}")
    if result.crash_reason:
        print(f"Crash reason: {result.crash_reason} (obstacle: {result.blocking_obstacle})")

    # --- Step 3: Write outputs ---
    names = dict(day=DAY, month=MONTH, year=YEAR)
    write_flight_path(result, os.path.join(project_root, OutputConstants.FLIGHT_PATH_TEMPLATE.format(**names)))
    write_readings_geojson(result, targets, os.path.join(project_root, OutputConstants.READINGS_TEMPLATE.format(**names)))

    visualizer = FlightMapVisualizer()
    flight_map = visualizer.create_flight_map(airspace, targets, result)
    visualizer.save_map(flight_map, os.path.join(project_root, OutputConstants.MAP_TEMPLATE.format(**names)))
    fig = visualizer.create_2d_plot(airspace, targets, result)
    visualizer.save_plot(fig, os.path.join(project_root, OutputConstants.PLOT_TEMPLATE.format(**names)))

    print("\n--- Tour Complete ---")

if __name__ == "__main__":
    main()
