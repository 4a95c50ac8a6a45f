# stepsearch/algorithms/ucs.py
# Uniform Cost Search, one expansion per call. The frontier is re-sorted by
# cumulative cost on every selection; stale entries are replaced on relaxation.
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from ..core.frontiers import PriorityQueue
from ..core.records import StateRecord, root_record
from ..core.session import NodeStatus, SessionFlags, graph_node_status
from ..problems.sample_graph import GraphProblem, sample_problem

logger = logging.getLogger(__name__)

NAME = "UCS"
_POLICY = PriorityQueue(key=lambda r: r.cost)


@dataclass(frozen=True)
class UCSSession(SessionFlags):
    problem: GraphProblem
    frontier: Tuple[StateRecord, ...]
    # best known g(n) per node; never mutated, step() builds a new dict
    costs: Dict[str, int] = field(default_factory=dict)
    visited: Tuple[str, ...] = ()
    current: Optional[StateRecord] = None
    steps: int = 0
    complete: bool = False

    @property
    def current_state(self) -> Optional[str]:
        return self.current.state if self.current else None

    @property
    def current_cost(self) -> int:
        return self.current.cost if self.current else 0

    @property
    def current_path(self) -> Tuple[str, ...]:
        return self.current.path if self.current else ()

    @property
    def frontier_states(self) -> Tuple[str, ...]:
        return tuple(r.state for r in self.frontier)

    def node_status(self, node_id: str) -> NodeStatus:
        return graph_node_status(self, node_id)


def new_session(problem: Optional[GraphProblem] = None) -> UCSSession:
    problem = problem or sample_problem()
    start = problem.initial_state()
    return UCSSession(
        problem=problem,
        frontier=(root_record(problem, path=(start,)),),
        costs={start: 0},
    )


def reset(session: UCSSession) -> UCSSession:
    return new_session(session.problem)


def step(session: UCSSession) -> UCSSession:
    if not session.can_step:
        return session

    record, queue = _POLICY.select_next(session.frontier)
    visited = session.visited + (record.state,)
    costs = dict(session.costs)

    for child in record.expand(session.problem):
        if child.state in visited:
            continue
        best = costs.get(child.state)
        if best is None or child.cost < best:
            costs[child.state] = child.cost
            # drop the stale entry, then queue the cheaper one at the back
            queue = tuple(r for r in queue if r.state != child.state) + (child,)
            logger.debug("%s relax %s: g=%d via %s", NAME, child.state, child.cost, "-".join(child.path))

    complete = session.problem.is_goal(record.state)
    logger.debug("%s step %d: expand %s (g=%d), queue=%s",
                 NAME, session.steps + 1, record.state, record.cost, [(r.state, r.cost) for r in queue])
    if complete:
        logger.info("%s reached goal %s with cost %d via %s", NAME, record.state, record.cost, "-".join(record.path))
    elif not queue:
        logger.info("%s exhausted the queue without reaching %s", NAME, session.problem.goal)

    return replace(
        session,
        frontier=queue,
        costs=costs,
        visited=visited,
        current=record,
        steps=session.steps + 1,
        complete=complete,
    )


def ordered_frontier(session: UCSSession) -> Tuple[StateRecord, ...]:
    """The queue as the next selection would see it (cheapest first)."""
    return tuple(sorted(session.frontier, key=_POLICY.key))


def snapshot(session: UCSSession) -> dict:
    return {
        "algorithm": NAME,
        "queue": [{"node": r.state, "cost": r.cost, "path": list(r.path)} for r in ordered_frontier(session)],
        "costs": dict(session.costs),
        "visited": list(session.visited),
        "current": session.current_state,
        "current_cost": session.current_cost,
        "current_path": list(session.current_path),
        "step": session.steps,
        "complete": session.complete,
        "failed": session.failed,
    }
