import pytest

from stepsearch.core.config import LabConfig
from stepsearch.core.errors import ConfigurationError


def test_defaults():
    cfg = LabConfig.from_env({})
    assert cfg == LabConfig()
    assert cfg.interval_for("ucs") == 1.5
    assert cfg.interval_for("puzzle") == 0.5


def test_env_overrides():
    cfg = LabConfig.from_env({
        "STEPSEARCH_DFS_INTERVAL": "0.25",
        "STEPSEARCH_DEPTH_LIMIT": "42",
        "STEPSEARCH_SHUFFLE_MOVES": "10",
        "STEPSEARCH_PUZZLE_ALGO": "AStar",
        "STEPSEARCH_SEED": "9",
        "STEPSEARCH_LOG_LEVEL": "debug",
    })
    assert cfg.dfs_interval_s == 0.25
    assert cfg.depth_limit == 10
    assert cfg.shuffle_moves == 10
    assert cfg.puzzle_algorithm == "astar"
    assert cfg.seed == 9
    assert cfg.log_level == "DEBUG"


def test_non_numeric_depth_limit_reads_as_zero():
    assert LabConfig.from_env({"STEPSEARCH_DEPTH_LIMIT": "deep"}).depth_limit == 0


@pytest.mark.parametrize("env", [
    {"STEPSEARCH_UCS_INTERVAL": "slow"},
    {"STEPSEARCH_PUZZLE_INTERVAL": "-1"},
    {"STEPSEARCH_SHUFFLE_MOVES": "many"},
    {"STEPSEARCH_PUZZLE_ALGO": "greedy"},
])
def test_bad_values_raise(env):
    with pytest.raises(ConfigurationError):
        LabConfig.from_env(env)


def test_unknown_variant_interval():
    with pytest.raises(ConfigurationError):
        LabConfig().interval_for("bogus")
