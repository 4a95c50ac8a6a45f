# stepsearch/problems/sample_graph.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from ..core.problem import Problem
from .checks import check_graph


# --- Data --------------------------------------------------------------------

# Seven-node teaching graph. Neighbour order is significant: DFS/DLS visit
# neighbours in this order; UCS reads the edge costs.
_GRAPH: Dict[str, Dict[str, int]] = {
    "A": {"B": 4, "C": 2},
    "B": {"A": 4, "D": 5, "E": 1},
    "C": {"A": 2, "F": 3},
    "D": {"B": 5},
    "E": {"B": 1, "G": 2},
    "F": {"C": 3, "G": 4},
    "G": {"E": 2, "F": 4},
}

# Display positions (x right, y down), only used for drawing
_COORDS: Dict[str, Tuple[float, float]] = {
    "A": (100, 50),
    "B": (50, 150),
    "C": (150, 150),
    "D": (25, 250),
    "E": (75, 250),
    "F": (175, 250),
    "G": (125, 350),
}


@dataclass(frozen=True)
class GraphMap:
    graph: Mapping[str, Mapping[str, int]]
    coords: Mapping[str, Tuple[float, float]]

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return tuple(self.graph.keys())

    def neighbors(self, node_id: str) -> Tuple[str, ...]:
        return tuple(self.graph[node_id].keys())

    def edges(self) -> Iterable[Tuple[str, str, int]]:
        """Each undirected edge once, as (u, v, cost)."""
        seen = set()
        for u, nbrs in self.graph.items():
            for v, cost in nbrs.items():
                key = frozenset((u, v))
                if key in seen:
                    continue
                seen.add(key)
                yield u, v, cost


SAMPLE_GRAPH = GraphMap(graph=_GRAPH, coords=_COORDS)


# --- Problem definition -------------------------------------------------------

class GraphProblem(Problem):
    """
    Walk on a fixed graph.
    States are node ids; ACTIONS(s) are the neighbour ids in declared order;
    RESULT(s,a) = a; step_cost is the edge cost.
    """

    def __init__(self, start: str = "A", goal: str = "G", data: GraphMap = SAMPLE_GRAPH):
        check_graph(data.graph, start, goal)
        self.start = start
        self.goal = goal
        self.data = data

    def initial_state(self) -> str:
        return self.start

    def is_goal(self, state) -> bool:
        return state == self.goal

    def actions(self, state) -> Iterable[str]:
        return self.data.graph[state].keys()

    def result(self, state, action) -> str:
        # Action is the next node id
        return action

    def step_cost(self, state, action, next_state) -> int:
        return self.data.graph[state][next_state]

    def __eq__(self, other):
        if not isinstance(other, GraphProblem):
            return NotImplemented
        return (self.start, self.goal, self.data) == (other.start, other.goal, other.data)

    def __hash__(self):
        return hash((self.start, self.goal))

    def __repr__(self):
        return f"GraphProblem(start={self.start!r}, goal={self.goal!r})"


def sample_problem(start: str = "A", goal: str = "G") -> GraphProblem:
    """
    Factory for the seven-node teaching graph (start A, goal G by default).
    """
    return GraphProblem(start=start, goal=goal, data=SAMPLE_GRAPH)
