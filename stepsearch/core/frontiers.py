# stepsearch/core/frontiers.py
# Selection policies over an immutable frontier (a tuple). Each policy answers
# one question: which entry is expanded next, and what is left behind.
from __future__ import annotations
from typing import Any, Callable, Tuple

Frontier = Tuple[Any, ...]


class FIFOQueue:
    name = "fifo"
    def select_next(self, frontier: Frontier) -> Tuple[Any, Frontier]:
        return frontier[0], frontier[1:]
    def __repr__(self): return "FIFOQueue()"


class LIFOStack:
    name = "lifo"
    def select_next(self, frontier: Frontier) -> Tuple[Any, Frontier]:
        return frontier[-1], frontier[:-1]
    def __repr__(self): return "LIFOStack()"


class PriorityQueue:
    """
    Lowest key(x) first.

    The whole frontier is stable-sorted on every selection, so entries with
    equal keys keep their insertion order, and the remainder comes back in
    sorted order (later insertions are appended after it).
    """
    name = "priority"

    def __init__(self, key: Callable[[Any], float]):
        self.key = key

    def select_next(self, frontier: Frontier) -> Tuple[Any, Frontier]:
        ordered = sorted(frontier, key=self.key)
        return ordered[0], tuple(ordered[1:])

    def __repr__(self): return f"PriorityQueue(key={self.key!r})"
