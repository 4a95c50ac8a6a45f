# stepsearch/algorithms/dfs.py
# Depth-First Search, one expansion per call, over a LIFO stack of node ids.
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..core.frontiers import LIFOStack
from ..core.session import NodeStatus, SessionFlags, graph_node_status
from ..problems.sample_graph import GraphProblem, sample_problem

logger = logging.getLogger(__name__)

NAME = "DFS"
_POLICY = LIFOStack()


@dataclass(frozen=True)
class DFSSession(SessionFlags):
    problem: GraphProblem
    frontier: Tuple[str, ...]
    visited: Tuple[str, ...] = ()
    current: Optional[str] = None
    # expansion order, append-only (not a recursion-stack path)
    path: Tuple[str, ...] = ()
    steps: int = 0
    complete: bool = False

    @property
    def current_state(self) -> Optional[str]:
        return self.current

    @property
    def frontier_states(self) -> Tuple[str, ...]:
        return self.frontier

    def node_status(self, node_id: str) -> NodeStatus:
        return graph_node_status(self, node_id)


def new_session(problem: Optional[GraphProblem] = None) -> DFSSession:
    problem = problem or sample_problem()
    return DFSSession(problem=problem, frontier=(problem.initial_state(),))


def reset(session: DFSSession) -> DFSSession:
    return new_session(session.problem)


def step(session: DFSSession) -> DFSSession:
    if not session.can_step:
        return session

    node, stack = _POLICY.select_next(session.frontier)
    visited = session.visited + (node,)

    # reversed so the LIFO pop visits neighbours in declared order
    fresh = [n for n in session.problem.actions(node) if n not in visited and n not in stack]
    stack = stack + tuple(reversed(fresh))

    complete = session.problem.is_goal(node)
    logger.debug("%s step %d: expand %s, push %s, stack=%s", NAME, session.steps + 1, node, fresh, list(stack))
    if complete:
        logger.info("%s reached goal %s after %d steps", NAME, node, session.steps + 1)
    elif not stack:
        logger.info("%s exhausted the stack without reaching %s", NAME, session.problem.goal)

    return replace(
        session,
        frontier=stack,
        visited=visited,
        current=node,
        path=session.path + (node,),
        steps=session.steps + 1,
        complete=complete,
    )


def snapshot(session: DFSSession) -> dict:
    return {
        "algorithm": NAME,
        "stack": list(session.frontier),
        "visited": list(session.visited),
        "current": session.current,
        "path": list(session.path),
        "step": session.steps,
        "complete": session.complete,
        "failed": session.failed,
    }
