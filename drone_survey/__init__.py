"""Drone fly-distance over a tree field scanned in a snake pattern."""

from drone_survey.distance import fly_distance, flight_profile, horizontal_distance
from drone_survey.grid import next_plot, scan_plots
from drone_survey.models import Field, Tree, TreeMap, tree_key

__all__ = [
    "Field",
    "Tree",
    "TreeMap",
    "tree_key",
    "next_plot",
    "scan_plots",
    "horizontal_distance",
    "flight_profile",
    "fly_distance",
]
