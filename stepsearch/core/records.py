# stepsearch/core/records.py
# StateRecord is the unit held in a frontier: a state plus the bookkeeping a
# visualisation needs (path so far, accumulated cost, depth, heuristic).
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .problem import Action, Problem, State


@dataclass(frozen=True)
class StateRecord:
    """
    One frontier entry.

    `path` is a tuple of actions. For graph problems the action *is* the next
    node id, so a root record built with path=(start,) yields node-id paths;
    puzzle roots start from an empty path and collect move labels.
    """
    state: State
    path: Tuple[Action, ...] = ()
    cost: int = 0
    depth: int = 0
    heuristic: int = 0

    @property
    def f(self) -> int:
        return self.cost + self.heuristic

    def expand(self, problem: Problem) -> Iterator["StateRecord"]:
        """Generate child records by applying ACTIONS(s), using RESULT and step_cost."""
        s = self.state
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(
                    f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Check the problem's ACTIONS/RESULT/cost mapping."
                )
            yield StateRecord(
                state=s2,
                path=self.path + (a,),
                cost=self.cost + cost,
                depth=self.depth + 1,
                heuristic=problem.heuristic(s2),
            )


def root_record(problem: Problem, path: Tuple[Action, ...] = ()) -> StateRecord:
    s = problem.initial_state()
    return StateRecord(state=s, path=path, heuristic=problem.heuristic(s))
