# The interface every steppable state space implements (graph walk or sliding puzzle).
# stepsearch/core/problem.py
from __future__ import annotations
from typing import Iterable, Protocol, Hashable

Action = Hashable
State = Hashable


class Problem(Protocol):
    """
    Atomic state-space view shared by the step engines.

    - GraphProblem: states are node ids, an action is the neighbour id to move to
    - EightPuzzleProblem: states are 9-tuples, actions are blank moves ('UP', 'DOWN', ...)
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    # order matters: engines push/queue successors in this order
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> int: ...
    # Uninformed problems keep the default
    def heuristic(self, s: State) -> int: return 0
