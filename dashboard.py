# dashboard.py
"""Matplotlib view of a finished mission: grid, scents, and where each robot ended up."""
import matplotlib.patches as patches
import matplotlib.pyplot as plt
import numpy as np

from mars_mission.mission.models import MissionVisualizationData

# Heading -> arrow drawing params (ox, oy, adx, ady) relative to cell origin
HEADING_ARROW = {
    "N": (0.5, 0.35, 0, 0.3),
    "E": (0.35, 0.5, 0.3, 0),
    "S": (0.5, 0.65, 0, -0.3),
    "W": (0.65, 0.5, -0.3, 0),
}

SCENT_COLOR = "khaki"
ACTIVE_COLOR = "steelblue"
LOST_COLOR = "firebrick"


def plot_mission(data: MissionVisualizationData, ax=None):
    """
    Draw the mission snapshot onto `ax` (a new figure if None).
    Each grid point (x, y) is drawn as the unit cell [x, x+1] x [y, y+1].

    Returns:
        The matplotlib Figure that owns the axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    width = data.bounds.max_x + 1
    height = data.bounds.max_y + 1

    ax.clear()
    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.set_xticks(np.arange(width + 1))
    ax.set_yticks(np.arange(height + 1))
    ax.set_aspect("equal")
    ax.grid(True, linestyle=":", alpha=0.6)

    lost = sum(r.is_lost for r in data.robots)
    ax.set_title(
        f"Grid {data.bounds.max_x}x{data.bounds.max_y} | Robots: {len(data.robots)} "
        f"| Lost: {lost} | Scents: {len(data.scented_positions)}",
        fontsize=9,
    )

    # ---- Scents ----
    for p in data.scented_positions:
        ax.add_patch(patches.Rectangle(
            (p.x, p.y), 1, 1, color=SCENT_COLOR, alpha=0.6, zorder=1
        ))

    # ---- Robots ----
    for robot in data.robots:
        x, y = robot.final_position.x, robot.final_position.y
        color = LOST_COLOR if robot.is_lost else ACTIVE_COLOR

        ax.add_patch(patches.Circle(
            (x + 0.5, y + 0.5), 0.3, color=color, alpha=0.5, ec="black", zorder=2
        ))
        if robot.heading in HEADING_ARROW:
            ox, oy, adx, ady = HEADING_ARROW[robot.heading]
            ax.arrow(
                x + ox, y + oy, adx, ady,
                color="black", width=0.04, head_width=0.15, zorder=3
            )
        label = robot.id.replace("robot-", "R")
        if robot.is_lost:
            label += " LOST"
        ax.text(
            x + 0.5, y + 0.05, label,
            ha="center", va="bottom", fontsize=7, color=color, fontweight="bold", zorder=4
        )

    return fig
