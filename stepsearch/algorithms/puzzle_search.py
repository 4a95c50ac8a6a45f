# stepsearch/algorithms/puzzle_search.py
# 8-puzzle solver stepped one expansion at a time. BFS, DFS and A* differ only
# in the frontier policy picked when the session is created.
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Optional, Sequence, Tuple, Union

from ..core.errors import ConfigurationError, SessionStateError
from ..core.frontiers import FIFOQueue, LIFOStack, PriorityQueue
from ..core.records import StateRecord, root_record
from ..core.session import SessionFlags
from ..problems.eight_puzzle import (
    DEFAULT_START, Board, EightPuzzleProblem, as_board, is_goal, manhattan_distance,
)

logger = logging.getLogger(__name__)


class PuzzleAlgorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"

    @classmethod
    def parse(cls, value: Union[str, "PuzzleAlgorithm"]) -> "PuzzleAlgorithm":
        try:
            return cls(str(value.value if isinstance(value, cls) else value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"unknown puzzle algorithm {value!r}; expected one of {[a.value for a in cls]}"
            ) from None

    @property
    def label(self) -> str:
        return "A*" if self is PuzzleAlgorithm.ASTAR else self.value.upper()


# A*: f = g + h, ties keep insertion order
_POLICIES = {
    PuzzleAlgorithm.BFS: FIFOQueue(),
    PuzzleAlgorithm.DFS: LIFOStack(),
    PuzzleAlgorithm.ASTAR: PriorityQueue(key=lambda r: r.f),
}


class TileStatus(str, Enum):
    BLANK = "blank"
    MOVED = "moved"
    DEFAULT = "default"


@dataclass(frozen=True)
class PuzzleSession(SessionFlags):
    start_board: Board = DEFAULT_START
    algorithm: PuzzleAlgorithm = PuzzleAlgorithm.BFS
    frontier: Tuple[StateRecord, ...] = ()
    closed: Tuple[StateRecord, ...] = ()
    current: Optional[StateRecord] = None
    steps: int = 0
    complete: bool = False
    # true between start() and reset(); board and algorithm are locked meanwhile
    solving: bool = False
    # every board ever queued (open or closed), for O(1) duplicate checks
    seen: FrozenSet[Board] = field(default=frozenset(), repr=False, compare=False)

    @property
    def board(self) -> Board:
        """The board on display: the state being expanded, else the start board."""
        return self.current.state if self.current else self.start_board

    @property
    def open_boards(self) -> Tuple[Board, ...]:
        return tuple(r.state for r in self.frontier)

    def tile_status(self, index: int) -> TileStatus:
        if self.board[index] == 0:
            return TileStatus.BLANK
        if self.current is not None and self.current.state[index] != self.start_board[index]:
            return TileStatus.MOVED
        return TileStatus.DEFAULT


def new_session(board: Sequence[int] = DEFAULT_START,
                algorithm: Union[str, PuzzleAlgorithm] = PuzzleAlgorithm.BFS) -> PuzzleSession:
    """Idle session: nothing queued until start()."""
    return PuzzleSession(start_board=as_board(board), algorithm=PuzzleAlgorithm.parse(algorithm))


def reset(session: PuzzleSession) -> PuzzleSession:
    return new_session(session.start_board, session.algorithm)


def start(session: PuzzleSession) -> PuzzleSession:
    """Seed the open list with the start board; a solved board has nothing to do."""
    if session.solving or is_goal(session.start_board):
        return session
    problem = EightPuzzleProblem(session.start_board)
    logger.info("Puzzle %s started from %s (h=%d)",
                session.algorithm.label, session.start_board, manhattan_distance(session.start_board))
    return replace(reset(session), frontier=(root_record(problem),), solving=True,
                   seen=frozenset((session.start_board,)))


def with_algorithm(session: PuzzleSession, algorithm: Union[str, PuzzleAlgorithm]) -> PuzzleSession:
    if session.solving:
        raise SessionStateError("cannot change the algorithm while a search is running; reset first")
    return replace(session, algorithm=PuzzleAlgorithm.parse(algorithm))


def with_board(session: PuzzleSession, board: Sequence[int]) -> PuzzleSession:
    if session.solving:
        raise SessionStateError("cannot change the board while a search is running; reset first")
    return new_session(board, session.algorithm)


def step(session: PuzzleSession) -> PuzzleSession:
    if not session.can_step:
        return session

    policy = _POLICIES[session.algorithm]
    record, open_list = policy.select_next(session.frontier)
    closed = session.closed + (record,)
    steps = session.steps + 1

    if is_goal(record.state):
        logger.info("Puzzle %s solved in %d moves after %d steps: %s",
                    session.algorithm.label, record.depth, steps, " ".join(record.path))
        return replace(session, frontier=open_list, closed=closed, current=record, steps=steps, complete=True)

    # first seen wins: nothing already open or closed is queued again
    seen = set(session.seen)
    problem = EightPuzzleProblem(session.start_board)
    added = []
    for child in record.expand(problem):
        if child.state in seen:
            continue
        seen.add(child.state)
        added.append(child)
    open_list = open_list + tuple(added)

    logger.debug("Puzzle %s step %d: expand depth=%d g=%d h=%d, +%d successors, open=%d closed=%d",
                 session.algorithm.label, steps, record.depth, record.cost, record.heuristic,
                 len(added), len(open_list), len(closed))
    if not open_list:
        logger.info("Puzzle %s exhausted the open list after %d steps", session.algorithm.label, steps)

    return replace(session, frontier=open_list, closed=closed, current=record, steps=steps,
                   seen=frozenset(seen))


def _entry(r: StateRecord) -> dict:
    return {"board": list(r.state), "cost": r.cost, "heuristic": r.heuristic, "depth": r.depth, "path": list(r.path)}


def snapshot(session: PuzzleSession) -> dict:
    cur = session.current
    return {
        "algorithm": session.algorithm.value,
        "start_board": list(session.start_board),
        "board": list(session.board),
        "heuristic": manhattan_distance(session.board),
        "solving": session.solving,
        "open": [_entry(r) for r in session.frontier],
        "closed": [_entry(r) for r in session.closed],
        "open_size": len(session.frontier),
        "closed_size": len(session.closed),
        "current": None if cur is None else dict(_entry(cur), f=cur.f),
        "step": session.steps,
        "complete": session.complete,
        "failed": session.failed,
    }
