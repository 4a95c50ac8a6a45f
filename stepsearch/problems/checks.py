# stepsearch/problems/checks.py
# Validation for the static inputs: graphs and puzzle boards.
from __future__ import annotations
from typing import Mapping, Sequence

from ..core.errors import ConfigurationError


def check_graph(graph: Mapping[str, Mapping[str, int]], start: str, goal: str) -> None:
    """Every neighbour must be a node, every cost a non-negative int."""
    if start not in graph:
        raise ConfigurationError(f"start node {start!r} is not in the graph")
    if goal not in graph:
        raise ConfigurationError(f"goal node {goal!r} is not in the graph")
    for u, nbrs in graph.items():
        for v, cost in nbrs.items():
            if v not in graph:
                raise ConfigurationError(f"edge {u}->{v}: unknown node {v!r}")
            if not isinstance(cost, int) or isinstance(cost, bool) or cost < 0:
                raise ConfigurationError(f"edge {u}->{v}: cost must be a non-negative int, got {cost!r}")


def check_board(board: Sequence[int]) -> None:
    if len(board) != 9 or sorted(board) != list(range(9)):
        raise ConfigurationError(f"board must be a permutation of 0..8, got {list(board)!r}")
