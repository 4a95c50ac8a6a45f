# stepsearch/algorithms/depth_limited.py
# Depth-Limited Search as a steppable stack. Every stack entry carries its own
# depth and path, since branches of the stack diverge.
from __future__ import annotations
import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..core.frontiers import LIFOStack
from ..core.records import StateRecord, root_record
from ..core.session import NodeStatus, SessionFlags, graph_node_status
from ..problems.sample_graph import GraphProblem, sample_problem

logger = logging.getLogger(__name__)

NAME = "DLS"
MIN_DEPTH_LIMIT = 0
MAX_DEPTH_LIMIT = 10
DEFAULT_DEPTH_LIMIT = 3
_POLICY = LIFOStack()
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clamp_depth_limit(raw) -> int:
    """
    Read a depth limit the way the input box does: leading integer, else 0,
    then clamp into [0, 10]. Never raises.
    """
    if isinstance(raw, bool):
        value = 0
    elif isinstance(raw, (int, float)):
        value = int(raw) if math.isfinite(raw) else 0
    else:
        m = _LEADING_INT.match(str(raw)) if raw is not None else None
        value = int(m.group(1)) if m else 0
    return max(MIN_DEPTH_LIMIT, min(MAX_DEPTH_LIMIT, value))


@dataclass(frozen=True)
class DLSSession(SessionFlags):
    problem: GraphProblem
    frontier: Tuple[StateRecord, ...]
    depth_limit: int = DEFAULT_DEPTH_LIMIT
    visited: Tuple[str, ...] = ()
    current: Optional[StateRecord] = None
    steps: int = 0
    complete: bool = False
    # sticky until reset
    cutoff_reached: bool = False

    @property
    def current_state(self) -> Optional[str]:
        return self.current.state if self.current else None

    @property
    def current_depth(self) -> int:
        return self.current.depth if self.current else 0

    @property
    def current_path(self) -> Tuple[str, ...]:
        return self.current.path if self.current else ()

    @property
    def frontier_states(self) -> Tuple[str, ...]:
        return tuple(r.state for r in self.frontier)

    @property
    def outcome(self) -> str:
        if self.complete:
            return "found"
        if self.failed:
            return "cutoff" if self.cutoff_reached else "failure"
        return "running"

    def node_status(self, node_id: str) -> NodeStatus:
        return graph_node_status(self, node_id)


def new_session(problem: Optional[GraphProblem] = None, depth_limit=DEFAULT_DEPTH_LIMIT) -> DLSSession:
    problem = problem or sample_problem()
    return DLSSession(
        problem=problem,
        frontier=(root_record(problem, path=(problem.initial_state(),)),),
        depth_limit=clamp_depth_limit(depth_limit),
    )


def reset(session: DLSSession) -> DLSSession:
    return new_session(session.problem, session.depth_limit)


def with_depth_limit(session: DLSSession, raw) -> DLSSession:
    """Change the limit in place; it applies from the next step on."""
    return replace(session, depth_limit=clamp_depth_limit(raw))


def step(session: DLSSession) -> DLSSession:
    if not session.can_step:
        return session

    record, stack = _POLICY.select_next(session.frontier)
    visited = session.visited + (record.state,)
    queued = {r.state for r in stack}
    cutoff = session.cutoff_reached

    if record.depth < session.depth_limit:
        children = [
            child for child in record.expand(session.problem)
            if child.state not in visited and child.state not in queued
        ]
        stack = stack + tuple(reversed(children))
        logger.debug("%s step %d: expand %s@%d, push %s",
                     NAME, session.steps + 1, record.state, record.depth, [c.state for c in children])
    elif any(n not in visited for n in session.problem.actions(record.state)):
        cutoff = True
        logger.debug("%s step %d: %s@%d hit the depth limit %d with unexplored neighbours",
                     NAME, session.steps + 1, record.state, record.depth, session.depth_limit)

    complete = session.problem.is_goal(record.state)
    if complete:
        logger.info("%s reached goal %s at depth %d", NAME, record.state, record.depth)
    elif not stack:
        logger.info("%s stack empty: %s", NAME, "cutoff" if cutoff else "failure")

    return replace(
        session,
        frontier=stack,
        visited=visited,
        current=record,
        steps=session.steps + 1,
        complete=complete,
        cutoff_reached=cutoff,
    )


def snapshot(session: DLSSession) -> dict:
    return {
        "algorithm": NAME,
        "depth_limit": session.depth_limit,
        "stack": [{"node": r.state, "depth": r.depth, "path": list(r.path)} for r in session.frontier],
        "visited": list(session.visited),
        "current": session.current_state,
        "current_depth": session.current_depth,
        "current_path": list(session.current_path),
        "step": session.steps,
        "complete": session.complete,
        "failed": session.failed,
        "cutoff_reached": session.cutoff_reached,
        "outcome": session.outcome,
    }
