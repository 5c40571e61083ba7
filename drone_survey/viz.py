# region Imports
from typing import List
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from drone_survey.config import MAX_PLOT_PLOTS
from drone_survey.distance import flight_profile
from drone_survey.grid import height_grid, scan_order
from drone_survey.models import Field, FlightStep, TreeMap
# endregion

# region Visualization Function
def show_flight(
    field: Field,
    trees: TreeMap,
    title: str = "Drone scan",
    show: bool = True,
):
    """
    Render tree heights with the snake scan path on top, and the altitude
    held on every step underneath.
    """
    if field.n_plots > MAX_PLOT_PLOTS:
        raise ValueError(
            f"field {field.length}x{field.width} too large to plot "
            f"(limit {MAX_PLOT_PLOTS} plots)"
        )

    heights = height_grid(field, trees)
    steps: List[FlightStep] = [
        s for s in flight_profile(field, trees) if field.contains(s.x, s.y)
    ]

    fig, (ax, ax_alt) = plt.subplots(
        2, 1, figsize=(8, 9), gridspec_kw={"height_ratios": [3, 1]}
    )

    # region Base Image
    extent = (0.5, field.length + 0.5, 0.5, field.width + 0.5)
    img = ax.imshow(heights, origin="lower", cmap="Greens", extent=extent)
    cbar = fig.colorbar(img, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("tree height")
    # endregion

    # region Path Overlay
    order = scan_order(field)
    if len(order):
        ax.plot(order[:, 0], order[:, 1], color="tab:blue", linewidth=1.5)
        ax.scatter([order[0, 0]], [order[0, 1]], s=60, c="lime", edgecolors="k", zorder=3)
        ax.scatter([order[-1, 0]], [order[-1, 1]], s=60, c="red", edgecolors="k", zorder=3)

    ax.set_xlabel("x (east)")
    ax.set_ylabel("y (north)")
    ax.set_title(title)
    handles = [
        Line2D([0], [0], color="tab:blue", lw=1.5, label="scan path"),
        Line2D([0], [0], marker="o", color="w", markerfacecolor="lime", markeredgecolor="k", label="take-off"),
        Line2D([0], [0], marker="o", color="w", markerfacecolor="red", markeredgecolor="k", label="landing"),
    ]
    ax.legend(handles=handles, loc="upper right")
    # endregion

    # region Altitude Profile
    alt = np.array([s.altitude for s in steps], dtype=np.int32)
    ax_alt.step(np.arange(1, len(alt) + 1), alt, where="post", color="tab:orange")
    ax_alt.set_xlabel("step")
    ax_alt.set_ylabel("altitude")
    # endregion

    fig.tight_layout()
    if show:
        plt.show()
    return fig
# endregion
