# dronetour/tour_planner/__init__.py
"""
Initializes the tour_planner module: the simulated-cost distance matrix and
the 2-opt local search over it.
"""
from .core import TourPlanner, compute_distance_matrix, simulate_steps

__all__ = ['TourPlanner', 'compute_distance_matrix', 'simulate_steps']
