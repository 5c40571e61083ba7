# region Imports
from typing import Iterator, Tuple
import numpy as np
from drone_survey.models import Coord, Field, TreeMap
# endregion

# region Boustrophedon Stepping
def next_plot(length: int, x: int, y: int) -> Tuple[int, int]:
    """
    Next plot of the snake scan. Odd rows run east, even rows run west,
    and the drone steps north once at the end of each row.
    """
    # west edge: north on even rows, east on odd rows
    if x == 1:
        if y % 2 == 0:
            return x, y + 1
        return x + 1, y

    # east edge: west on even rows, north on odd rows
    if x == length:
        if y % 2 == 0:
            return x - 1, y
        return x, y + 1

    if y % 2 == 0:
        return x - 1, y
    return x + 1, y


def scan_plots(field: Field) -> Iterator[Coord]:
    """Yield plots in visiting order, starting at (1, 1)."""
    x, y = 1, 1
    while field.contains(x, y):
        yield (x, y)
        x, y = next_plot(field.length, x, y)
# endregion

# region Array Helpers
def scan_order(field: Field) -> np.ndarray:
    """(N, 2) int array of (x, y) in visiting order."""
    pts = list(scan_plots(field))
    return np.array(pts, dtype=np.int64).reshape(-1, 2)


def height_grid(field: Field, trees: TreeMap) -> np.ndarray:
    """(width, length) grid of tree heights, row y-1 / column x-1, 0 = empty."""
    grid = np.zeros((field.width, field.length), dtype=np.int32)
    for t in trees:
        if field.contains(t.x, t.y):
            grid[t.y - 1, t.x - 1] = t.height
    return grid
# endregion
