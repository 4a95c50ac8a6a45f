# stepsearch/benchmarks/run_all.py
# Headless runner: steps each variant to completion (or a step cap) and
# prints a JSON report. Console entry point: `stepsearch-lab`.
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
import time
from dataclasses import asdict, replace
from pathlib import Path
from typing import List, Optional

from ..algorithms import depth_limited, dfs, puzzle_search, ucs
from ..core.autoplay import AutoPlayer
from ..core.config import LabConfig
from ..core.errors import ConfigurationError
from ..core.metrics import MeasuredRun, RunSummary
from ..logging_config import setup_logging
from ..problems.eight_puzzle import DEFAULT_START, is_goal, is_solvable, shuffle

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 5000


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    return f"{float(x):.4f}"


def _play(session, step, max_steps: int):
    """Drive the session through an AutoPlayer with no delay between ticks."""
    player = AutoPlayer(session, step, interval_s=0.0)
    player.run(sleep=lambda s: None, max_ticks=max_steps)
    return player.session


def _outcome(session) -> str:
    if session.complete:
        return "found"
    if session.failed:
        return "failure"
    return "stopped"


def parse_board(text: str):
    try:
        return tuple(int(t) for t in text.replace(" ", "").split(","))
    except ValueError:
        raise ConfigurationError(f"board must be 9 comma-separated integers, got {text!r}") from None


# ---- Runners ----------------------------------------------------------------
def run_dfs(config: LabConfig, max_steps: int = DEFAULT_MAX_STEPS) -> RunSummary:
    with MeasuredRun() as meter:
        s = _play(dfs.new_session(), dfs.step, max_steps)
    return RunSummary(dfs.NAME, _outcome(s), list(s.path), None, s.steps, len(s.visited),
                      meter.elapsed, meter.peak_kb, {"stack": list(s.frontier)})


def run_dls(config: LabConfig, max_steps: int = DEFAULT_MAX_STEPS) -> RunSummary:
    with MeasuredRun() as meter:
        s = _play(depth_limited.new_session(depth_limit=config.depth_limit), depth_limited.step, max_steps)
    outcome = s.outcome if s.is_terminal else "stopped"
    return RunSummary(f"DLS(l={s.depth_limit})", outcome, list(s.current_path) if s.complete else [],
                      None, s.steps, len(s.visited), meter.elapsed, meter.peak_kb,
                      {"depth_limit": s.depth_limit, "cutoff_reached": s.cutoff_reached,
                       "visited": list(s.visited)})


def run_ucs(config: LabConfig, max_steps: int = DEFAULT_MAX_STEPS) -> RunSummary:
    with MeasuredRun() as meter:
        s = _play(ucs.new_session(), ucs.step, max_steps)
    return RunSummary(ucs.NAME, _outcome(s), list(s.current_path) if s.complete else [],
                      s.current_cost if s.complete else None, s.steps, len(s.visited),
                      meter.elapsed, meter.peak_kb, {"costs": dict(s.costs)})


def run_puzzle(config: LabConfig, board=None, max_steps: int = DEFAULT_MAX_STEPS) -> RunSummary:
    session = puzzle_search.new_session(board or DEFAULT_START, config.puzzle_algorithm)
    if not is_solvable(session.start_board):
        logger.warning("Board %s is not solvable; the search will exhaust its open list", session.start_board)
    with MeasuredRun() as meter:
        s = _play(puzzle_search.start(session), puzzle_search.step, max_steps)
    label = f"8-Puzzle {s.algorithm.label}"
    extras = {"start_board": list(s.start_board), "open_size": len(s.frontier), "closed_size": len(s.closed)}
    if is_goal(s.start_board):
        return RunSummary(label, "found", [], 0, 0, 0, meter.elapsed, meter.peak_kb, extras)
    moves = list(s.current.path) if s.complete else []
    return RunSummary(label, _outcome(s), moves, s.current.depth if s.complete else None,
                      s.steps, len(s.closed), meter.elapsed, meter.peak_kb, extras)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stepsearch-lab",
        description="Step DFS, DLS, UCS and the 8-puzzle solver to completion and report the results.",
    )
    p.add_argument("--variant", choices=["all", "dfs", "dls", "ucs", "puzzle"], default="all")
    p.add_argument("--depth-limit", default=None, help="DLS depth limit, clamped to [0, 10]")
    p.add_argument("--algorithm", choices=[a.value for a in puzzle_search.PuzzleAlgorithm], default=None,
                   help="8-puzzle search algorithm")
    p.add_argument("--board", default=None, help="8-puzzle start board, e.g. 1,2,3,4,0,5,7,8,6")
    p.add_argument("--shuffle", action="store_true", help="start the 8-puzzle from a random solvable board")
    p.add_argument("--seed", type=int, default=None, help="seed for --shuffle")
    p.add_argument("--max-steps", type=int, default=DEFAULT_MAX_STEPS)
    p.add_argument("--log-level", default=None, help="DEBUG shows every expansion")
    p.add_argument("--plain-logs", action="store_true", help="plain log lines instead of Rich output")
    p.add_argument("--out", type=Path, default=None, help="also write the JSON report here")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = LabConfig.from_env()
        overrides = {}
        if args.depth_limit is not None:
            overrides["depth_limit"] = depth_limited.clamp_depth_limit(args.depth_limit)
        if args.algorithm is not None:
            overrides["puzzle_algorithm"] = args.algorithm
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.log_level is not None:
            overrides["log_level"] = args.log_level.upper()
        config = replace(config, **overrides)

        setup_logging(config.log_level, use_rich=not args.plain_logs)

        board = None
        if args.board:
            board = parse_board(args.board)
        elif args.shuffle:
            board = shuffle(random.Random(config.seed), config.shuffle_moves)

        runners = {
            "dfs": lambda: run_dfs(config, args.max_steps),
            "dls": lambda: run_dls(config, args.max_steps),
            "ucs": lambda: run_ucs(config, args.max_steps),
            "puzzle": lambda: run_puzzle(config, board, args.max_steps),
        }
        names = list(runners) if args.variant == "all" else [args.variant]

        rows = []
        for name in names:
            print(f"→ Running {name} ...")
            r = runners[name]()
            print(
                f"  {r.algo}: {r.outcome.upper()} "
                f"path={'-'.join(map(str, r.path)) or '-'} "
                f"cost={r.cost} steps={r.steps} expanded={r.expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            rows.append(asdict(r))
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    out = {"results": rows, "ts": time.time()}
    text = json.dumps(out, indent=2)
    print(text)
    if args.out is not None:
        args.out.write_text(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
