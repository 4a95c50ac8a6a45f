# stepsearch/problems/eight_puzzle.py
from __future__ import annotations
import random
from typing import Iterable, Optional, Sequence, Tuple

from ..core.problem import Problem
from .checks import check_board

Board = Tuple[int, ...]

SIZE = 3
GOAL: Board = (1, 2, 3, 4, 5, 6, 7, 8, 0)
DEFAULT_START: Board = (1, 2, 3, 4, 0, 5, 7, 8, 6)

# Moves of the blank, in successor order
_MOVES = {
    "UP": (-1, 0),
    "DOWN": (1, 0),
    "LEFT": (0, -1),
    "RIGHT": (0, 1),
}

_GOAL_POS = {tile: divmod(i, SIZE) for i, tile in enumerate(GOAL)}


def as_board(tiles: Sequence[int]) -> Board:
    board = tuple(int(t) for t in tiles)
    check_board(board)
    return board


def blank_index(board: Board) -> int:
    return board.index(0)


def manhattan_distance(board: Board) -> int:
    """Sum over tiles 1..8 of |row - goal_row| + |col - goal_col|."""
    total = 0
    for i, tile in enumerate(board):
        if tile == 0:
            continue
        r, c = divmod(i, SIZE)
        gr, gc = _GOAL_POS[tile]
        total += abs(r - gr) + abs(c - gc)
    return total


def is_goal(board: Board) -> bool:
    return tuple(board) == GOAL


def legal_moves(board: Board) -> Iterable[str]:
    r, c = divmod(blank_index(board), SIZE)
    for name, (dr, dc) in _MOVES.items():
        nr, nc = r + dr, c + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            yield name


def apply_move(board: Board, move: str) -> Board:
    """Swap the blank with the tile it moves onto."""
    e = blank_index(board)
    r, c = divmod(e, SIZE)
    dr, dc = _MOVES[move]
    t = (r + dr) * SIZE + (c + dc)
    tiles = list(board)
    tiles[e], tiles[t] = tiles[t], tiles[e]
    return tuple(tiles)


def is_solvable(board: Board) -> bool:
    # 3x3: solvable iff the number of inversions among tiles 1..8 is even
    tiles = [t for t in board if t != 0]
    inversions = sum(1 for i in range(len(tiles)) for j in range(i + 1, len(tiles)) if tiles[i] > tiles[j])
    return inversions % 2 == 0


def shuffle(rng: Optional[random.Random] = None, moves: int = 50) -> Board:
    """Random walk of the blank starting from the goal, so the result is always solvable."""
    rng = rng or random.Random()
    board = GOAL
    for _ in range(moves):
        board = apply_move(board, rng.choice(list(legal_moves(board))))
    return board


class EightPuzzleProblem(Problem):
    """
    3x3 sliding puzzle with unit move costs.

    - State: 9-tuple, row-major, 0 is the blank
    - ACTIONS(s): subset of {'UP','DOWN','LEFT','RIGHT'} (blank moves) that stay on the board
    - RESULT(s,a): board with blank and neighbour swapped
    - IS-GOAL(s): s == (1,2,3,4,5,6,7,8,0)
    - c(s,a,s'): 1
    - heuristic(s): Manhattan distance (admissible)
    """
    def __init__(self, start: Sequence[int] = DEFAULT_START):
        self._start = as_board(start)

    def initial_state(self) -> Board:
        return self._start

    def is_goal(self, state: Board) -> bool:
        return is_goal(state)

    def actions(self, state: Board) -> Iterable[str]:
        return legal_moves(state)

    def result(self, state: Board, action: str) -> Board:
        return apply_move(state, action)

    def step_cost(self, state: Board, action: str, next_state: Board) -> int:
        return 1

    def heuristic(self, state: Board) -> int:
        return manhattan_distance(state)
