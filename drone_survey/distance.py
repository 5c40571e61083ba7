# region Imports
import logging
from typing import Iterator
from drone_survey.config import (
    GROUND_ALTITUDE,
    HORIZONTAL_UNIT,
    LANDING_DISTANCE,
    TAKEOFF_DISTANCE,
    TREE_CLEARANCE,
)
from drone_survey.grid import next_plot
from drone_survey.models import Field, FlightStep, TreeMap
# endregion

logger = logging.getLogger(__name__)

# region Horizontal Distance
def horizontal_distance(length: int, width: int) -> int:
    """
    Ground distance of the full snake scan, from the south-west plot to the
    last plot, in plot units.
    """
    # a single row is one straight pass
    if width == 1:
        return length - 1

    # every row is crossed once, plus one north step per pair of rows
    # (rounded up for an odd final row)
    north_steps = width // 2
    if width % 2 != 0:
        north_steps += 1

    return (length - 1) * width + north_steps
# endregion

# region Altitude Profile
def flight_profile(field: Field, trees: TreeMap) -> Iterator[FlightStep]:
    """
    Walk the scan and yield the altitude kept on arrival at every plot.

    The drone holds GROUND_ALTITUDE over empty plots and clears each tree by
    TREE_CLEARANCE. Climbs and descents are both charged as absolute distance.
    The take-off plot (1, 1) is never checked; the final step leaves the field.
    """
    x, y = 1, 1
    altitude = GROUND_ALTITUDE
    while x <= field.length and y <= field.width:
        x, y = next_plot(field.length, x, y)

        tree_height = trees.height_at(x, y)
        if tree_height is None:
            climb = abs(altitude - GROUND_ALTITUDE)
            altitude = GROUND_ALTITUDE
        else:
            required = tree_height + TREE_CLEARANCE
            climb = abs(required - altitude)
            altitude = required

        yield FlightStep(x, y, altitude, climb)
# endregion

# region Total Fly Distance
def base_distance(field: Field) -> int:
    return (
        TAKEOFF_DISTANCE
        + horizontal_distance(field.length, field.width) * HORIZONTAL_UNIT
        + LANDING_DISTANCE
    )


def fly_distance(field: Field, trees: TreeMap) -> int:
    distance = base_distance(field)
    vertical = sum(step.climb for step in flight_profile(field, trees))
    logger.debug(
        "field %dx%d, %d trees: base=%d vertical=%d",
        field.length, field.width, len(trees), distance, vertical,
    )
    return distance + vertical
# endregion
