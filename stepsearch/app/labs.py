# stepsearch/app/labs.py
# Presenter-side controllers: map the UI inputs (step, play/pause, reset,
# depth limit, algorithm, shuffle, start solve) onto sessions and an AutoPlayer.
from __future__ import annotations
import logging
import random
import time
from typing import Callable, Optional

from ..algorithms import depth_limited, dfs, puzzle_search, ucs
from ..core.autoplay import AutoPlayer
from ..core.config import LabConfig
from ..core.errors import ConfigurationError
from ..problems.eight_puzzle import is_goal, shuffle as shuffle_board

logger = logging.getLogger(__name__)

VARIANTS = ("dfs", "dls", "ucs", "puzzle")


class GraphLab:
    """DFS / UCS page: one session, step/play/pause/reset."""

    def __init__(self, module, session, interval_s: float, clock: Callable[[], float] = time.monotonic):
        self.module = module
        self.player = AutoPlayer(session, module.step, interval_s, clock=clock)

    @property
    def session(self):
        return self.player.session

    @property
    def playing(self) -> bool:
        return self.player.playing

    def step(self):
        return self.player.step_once()

    def toggle_play(self) -> bool:
        return self.player.toggle()

    def tick(self, now: Optional[float] = None) -> bool:
        return self.player.tick(now)

    def reset(self):
        self.player.replace_session(self.module.reset(self.session))
        return self.session

    def snapshot(self) -> dict:
        return self.module.snapshot(self.session)


class DepthLimitedLab(GraphLab):
    def __init__(self, depth_limit=depth_limited.DEFAULT_DEPTH_LIMIT, interval_s: float = 1.0,
                 clock: Callable[[], float] = time.monotonic):
        super().__init__(depth_limited, depth_limited.new_session(depth_limit=depth_limit), interval_s, clock)

    def set_depth_limit(self, raw) -> int:
        # the running session keeps going with the new bound
        self.player.session = depth_limited.with_depth_limit(self.session, raw)
        return self.session.depth_limit


class PuzzleLab(GraphLab):
    """8-puzzle page: adds shuffle, algorithm choice and an explicit start."""

    def __init__(self, algorithm="bfs", interval_s: float = 0.5, shuffle_moves: int = 50,
                 rng: Optional[random.Random] = None, clock: Callable[[], float] = time.monotonic):
        super().__init__(puzzle_search, puzzle_search.new_session(algorithm=algorithm), interval_s, clock)
        self.shuffle_moves = shuffle_moves
        self.rng = rng or random.Random()

    def select_algorithm(self, algorithm) -> None:
        self.player.replace_session(puzzle_search.with_algorithm(self.session, algorithm))

    def shuffle(self):
        """New random solvable board; ignored while a search runs."""
        if self.session.solving:
            return self.session
        board = shuffle_board(self.rng, self.shuffle_moves)
        logger.info("Shuffled board: %s", board)
        self.player.replace_session(puzzle_search.with_board(self.session, board))
        return self.session

    def start(self):
        self.player.replace_session(puzzle_search.start(self.session))
        return self.session

    def solved_summary(self) -> Optional[dict]:
        """What the solved panel shows, or None while the displayed board is not the goal."""
        s = self.session
        if not is_goal(s.board):
            return None
        return {
            "moves": s.current.depth if s.complete else 0,
            "explored": len(s.closed),
        }


def make_lab(variant: str, config: Optional[LabConfig] = None,
             clock: Callable[[], float] = time.monotonic) -> GraphLab:
    config = config or LabConfig()
    variant = variant.lower()
    if variant == "dfs":
        return GraphLab(dfs, dfs.new_session(), config.dfs_interval_s, clock)
    if variant == "ucs":
        return GraphLab(ucs, ucs.new_session(), config.ucs_interval_s, clock)
    if variant == "dls":
        return DepthLimitedLab(config.depth_limit, config.dls_interval_s, clock)
    if variant == "puzzle":
        return PuzzleLab(config.puzzle_algorithm, config.puzzle_interval_s, config.shuffle_moves,
                         random.Random(config.seed), clock)
    raise ConfigurationError(f"unknown variant {variant!r}; expected one of {VARIANTS}")
