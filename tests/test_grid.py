import numpy as np
import pytest

from drone_survey.grid import height_grid, next_plot, scan_order, scan_plots
from drone_survey.models import Field, Tree, TreeMap, tree_key


@pytest.mark.parametrize(
    "length, x, y, expected",
    [
        (4, 1, 1, (2, 1)),   # west edge, odd row -> east
        (4, 1, 2, (1, 3)),   # west edge, even row -> north
        (4, 4, 1, (4, 2)),   # east edge, odd row -> north
        (4, 4, 2, (3, 2)),   # east edge, even row -> west
        (4, 2, 2, (1, 2)),   # interior, even row -> west
        (4, 2, 1, (3, 1)),   # interior, odd row -> east
    ],
)
def test_next_plot(length, x, y, expected):
    assert next_plot(length, x, y) == expected


@pytest.mark.parametrize("length, width", [(2, 1), (2, 2), (4, 3), (5, 4), (7, 7)])
def test_stepping_visits_every_plot_once(length, width):
    x, y = 1, 1
    visited = [(x, y)]
    for _ in range(length * width - 1):
        x, y = next_plot(length, x, y)
        visited.append((x, y))

    expected = {(i, j) for i in range(1, length + 1) for j in range(1, width + 1)}
    assert len(visited) == len(set(visited))
    assert set(visited) == expected


def test_scan_plots_snake_order():
    assert list(scan_plots(Field(3, 3))) == [
        (1, 1), (2, 1), (3, 1),
        (3, 2), (2, 2), (1, 2),
        (1, 3), (2, 3), (3, 3),
    ]


def test_scan_plots_single_column_stops_after_takeoff_plot():
    # west-edge rule wins when length == 1, so the drone leaves the field at once
    assert list(scan_plots(Field(1, 4))) == [(1, 1)]


def test_scan_order_array_shape():
    order = scan_order(Field(4, 2))
    assert order.shape == (8, 2)
    assert order[0].tolist() == [1, 1]
    assert order[-1].tolist() == [1, 2]


def test_tree_key_is_distinct_per_coordinate():
    keys = {tree_key(x, y) for x in range(1, 12) for y in range(1, 12)}
    assert len(keys) == 121
    assert tree_key(1, 11) != tree_key(11, 1)


def test_height_grid():
    trees = TreeMap.from_trees([Tree(2, 1, 5), Tree(3, 2, 7)])
    grid = height_grid(Field(3, 2), trees)
    np.testing.assert_array_equal(grid, np.array([[0, 5, 0], [0, 0, 7]]))
