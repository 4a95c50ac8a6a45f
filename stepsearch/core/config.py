# stepsearch/core/config.py
# Tunables, overridable via environment variables (STEPSEARCH_*). CLI flags win over both.
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class LabConfig:
    dfs_interval_s: float = 1.0
    dls_interval_s: float = 1.0
    ucs_interval_s: float = 1.5
    puzzle_interval_s: float = 0.5
    depth_limit: int = 3
    shuffle_moves: int = 50
    puzzle_algorithm: str = "bfs"
    seed: Optional[int] = None
    log_level: str = "INFO"

    def interval_for(self, variant: str) -> float:
        try:
            return getattr(self, f"{variant}_interval_s")
        except AttributeError:
            raise ConfigurationError(f"unknown variant {variant!r}") from None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LabConfig":
        # imported here: algorithms depend on core, not the other way round
        from ..algorithms.depth_limited import clamp_depth_limit
        from ..algorithms.puzzle_search import PuzzleAlgorithm

        env = os.environ if environ is None else environ
        d = cls()
        seed = env.get("STEPSEARCH_SEED")
        return cls(
            dfs_interval_s=_float(env, "STEPSEARCH_DFS_INTERVAL", d.dfs_interval_s),
            dls_interval_s=_float(env, "STEPSEARCH_DLS_INTERVAL", d.dls_interval_s),
            ucs_interval_s=_float(env, "STEPSEARCH_UCS_INTERVAL", d.ucs_interval_s),
            puzzle_interval_s=_float(env, "STEPSEARCH_PUZZLE_INTERVAL", d.puzzle_interval_s),
            # same reading as the depth-limit input box: clamped, never rejected
            depth_limit=clamp_depth_limit(env.get("STEPSEARCH_DEPTH_LIMIT", d.depth_limit)),
            shuffle_moves=_int(env, "STEPSEARCH_SHUFFLE_MOVES", d.shuffle_moves),
            puzzle_algorithm=PuzzleAlgorithm.parse(env.get("STEPSEARCH_PUZZLE_ALGO", d.puzzle_algorithm)).value,
            seed=None if seed in (None, "") else _int(env, "STEPSEARCH_SEED", 0),
            log_level=env.get("STEPSEARCH_LOG_LEVEL", d.log_level).upper(),
        )


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value < 0:
        raise ConfigurationError(f"{name} must be >= 0, got {raw!r}")
    return value


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigurationError(f"{name} must be >= 0, got {raw!r}")
    return value
