"""
Pytest configuration and shared fixtures.
"""

import logging

import matplotlib
import pytest

matplotlib.use("Agg")  # no display in CI

from stepsearch.algorithms import depth_limited, dfs, puzzle_search, ucs

logging.basicConfig(level=logging.INFO)


class FakeClock:
    """Manual clock; sleep() advances it instead of blocking."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


def run_to_end(module, session, limit=10_000):
    """Step until the engine reports it cannot step any more."""
    for _ in range(limit):
        if not session.can_step:
            break
        session = module.step(session)
    return session


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def dfs_session():
    return dfs.new_session()


@pytest.fixture
def ucs_session():
    return ucs.new_session()


@pytest.fixture
def dls_session():
    return depth_limited.new_session(depth_limit=3)


@pytest.fixture
def puzzle_session():
    """Default start board (1,2,3,4,0,5,7,8,6), A*, already started."""
    return puzzle_search.start(puzzle_search.new_session(algorithm="astar"))
