# stepsearch/core/session.py
# Flags and node colouring shared by every step session.
from __future__ import annotations
from enum import Enum
from typing import Hashable


class NodeStatus(str, Enum):
    DEFAULT = "default"
    FRONTIER = "frontier"
    CURRENT = "current"
    VISITED = "visited"
    GOAL = "goal"


class SessionFlags:
    """
    Mixin for the frozen session dataclasses.

    Expects `frontier`, `steps` and `complete` fields. A session that emptied
    its frontier without reaching the goal has *failed*; an idle session (no
    step taken yet, nothing queued) has not.
    """

    @property
    def can_step(self) -> bool:
        return not self.complete and len(self.frontier) > 0

    @property
    def failed(self) -> bool:
        return not self.complete and len(self.frontier) == 0 and self.steps > 0

    @property
    def is_terminal(self) -> bool:
        return self.complete or self.failed


def graph_node_status(session, node_id: Hashable) -> NodeStatus:
    """Colour of a graph node; goal beats current beats visited beats frontier."""
    if session.complete and node_id == session.problem.goal:
        return NodeStatus.GOAL
    if session.current_state == node_id:
        return NodeStatus.CURRENT
    if node_id in session.visited:
        return NodeStatus.VISITED
    if node_id in session.frontier_states:
        return NodeStatus.FRONTIER
    return NodeStatus.DEFAULT
