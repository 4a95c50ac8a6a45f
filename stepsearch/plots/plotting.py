# stepsearch/plots/plotting.py
# Renders a session snapshot: the sample graph coloured by node status, or the
# 8-puzzle board coloured by tile status. Pure readers of the session.
from __future__ import annotations
import numpy as np
import matplotlib.pyplot as plt

from ..core.session import NodeStatus
from ..algorithms.puzzle_search import TileStatus

NODE_COLORS = {
    NodeStatus.DEFAULT: "#e5e7eb",
    NodeStatus.FRONTIER: "#fde68a",
    NodeStatus.CURRENT: "#f97316",
    NodeStatus.VISITED: "#93c5fd",
    NodeStatus.GOAL: "#22c55e",
}

TILE_COLORS = {
    TileStatus.BLANK: (0.9, 0.9, 0.9),
    TileStatus.MOVED: (0.98, 0.45, 0.09),
    TileStatus.DEFAULT: (0.99, 0.9, 0.54),
}


def draw_graph(session, title="", show_costs=False):
    """One circle per node at its display position; y grows downward as on screen."""
    data = session.problem.data
    fig, ax = plt.subplots(figsize=(3.5, 6))

    for u, v, cost in data.edges():
        (x1, y1), (x2, y2) = data.coords[u], data.coords[v]
        ax.plot([x1, x2], [y1, y2], color="#9ca3af", linewidth=1.5, zorder=1)
        if show_costs:
            ax.text((x1 + x2) / 2, (y1 + y2) / 2, str(cost), fontsize=9, fontweight="bold",
                    ha="center", va="center", backgroundcolor="white", zorder=2)

    start = session.problem.start
    for node_id in data.node_ids:
        x, y = data.coords[node_id]
        status = session.node_status(node_id)
        edge = "#16a34a" if node_id == start else "#374151"
        ax.add_patch(plt.Circle((x, y), 18, facecolor=NODE_COLORS[status], edgecolor=edge,
                                linewidth=2.5 if node_id == start else 1.0, zorder=3))
        ax.text(x, y, node_id, ha="center", va="center", fontsize=11, fontweight="bold", zorder=4)
        costs = getattr(session, "costs", None)
        if costs is not None and node_id in costs:
            ax.text(x, y + 28, f"g={costs[node_id]}", ha="center", va="center", fontsize=8, zorder=4)

    ax.set_xlim(0, 200)
    ax.set_ylim(400, 0)
    ax.set_aspect("equal")
    ax.set_xticks([]); ax.set_yticks([])
    ax.set_title(title)
    fig.tight_layout()
    return fig


def board_image(session) -> np.ndarray:
    """3x3 RGB image, one pixel per tile."""
    img = np.zeros((3, 3, 3), dtype=float)
    for i in range(9):
        r, c = divmod(i, 3)
        img[r, c] = TILE_COLORS[session.tile_status(i)]
    return img


def draw_board(session, title=""):
    fig, ax = plt.subplots(figsize=(3, 3))
    ax.imshow(board_image(session), interpolation="nearest")
    for i, tile in enumerate(session.board):
        if tile != 0:
            r, c = divmod(i, 3)
            ax.text(c, r, str(tile), ha="center", va="center", fontsize=20, fontweight="bold")
    # grid lines between tiles
    for k in (0.5, 1.5):
        ax.axhline(k, color="white", linewidth=3)
        ax.axvline(k, color="white", linewidth=3)
    ax.set_xticks([]); ax.set_yticks([])
    ax.set_title(title)
    fig.tight_layout()
    return fig
