import pytest

from stepsearch.algorithms import dfs
from stepsearch.core.session import NodeStatus
from stepsearch.problems.sample_graph import GraphMap, GraphProblem

from conftest import run_to_end


class TestDepthFirstSearch:
    def test_initial_session(self, dfs_session):
        assert dfs_session.frontier == ("A",)
        assert dfs_session.visited == ()
        assert dfs_session.current is None
        assert dfs_session.steps == 0
        assert not dfs_session.complete
        assert dfs_session.can_step and not dfs_session.failed

    def test_first_step_pushes_neighbours_reversed(self, dfs_session):
        s = dfs.step(dfs_session)
        assert s.current == "A"
        assert s.frontier == ("C", "B")
        assert s.visited == ("A",)

    def test_expansion_order_reaches_goal(self, dfs_session):
        s = run_to_end(dfs, dfs_session)
        assert s.path == ("A", "B", "D", "E", "G")
        assert s.steps == 5
        assert s.complete and not s.failed
        assert s.frontier == ("C",)

    def test_visited_grows_by_one_per_step(self, dfs_session):
        s = dfs_session
        while s.can_step:
            nxt = dfs.step(s)
            assert len(nxt.visited) == len(s.visited) + 1
            assert set(s.visited) <= set(nxt.visited)
            s = nxt

    def test_step_after_completion_is_noop(self, dfs_session):
        done = run_to_end(dfs, dfs_session)
        assert dfs.step(done) is done

    def test_queued_node_is_not_pushed_twice(self, dfs_session):
        s = dfs_session
        for _ in range(4):
            s = dfs.step(s)
            assert len(set(s.frontier)) == len(s.frontier)
            assert not set(s.frontier) & set(s.visited)

    def test_exhaustion_is_reported_as_failure(self):
        data = GraphMap(graph={"A": {"B": 1}, "B": {"A": 1}, "Z": {}}, coords={})
        s = run_to_end(dfs, dfs.new_session(GraphProblem("A", "Z", data)))
        assert s.failed and s.is_terminal and not s.complete
        assert s.path == ("A", "B")
        assert dfs.step(s) is s

    def test_determinism(self):
        a, b = dfs.new_session(), dfs.new_session()
        for _ in range(3):
            a, b = dfs.step(a), dfs.step(b)
        assert a == b
        assert dfs.snapshot(a) == dfs.snapshot(b)

    @pytest.mark.parametrize("steps", [0, 2, 5])
    def test_reset_is_idempotent(self, dfs_session, steps):
        s = dfs_session
        for _ in range(steps):
            s = dfs.step(s)
        once = dfs.reset(s)
        assert once == dfs_session
        assert dfs.reset(dfs.reset(once)) == dfs_session

    def test_node_status(self, dfs_session):
        s = dfs.step(dfs.step(dfs_session))  # expanded A then B
        assert s.node_status("B") is NodeStatus.CURRENT
        assert s.node_status("A") is NodeStatus.VISITED
        assert s.node_status("D") is NodeStatus.FRONTIER
        assert s.node_status("G") is NodeStatus.DEFAULT
        done = run_to_end(dfs, s)
        assert done.node_status("G") is NodeStatus.GOAL

    def test_snapshot(self, dfs_session):
        snap = dfs.snapshot(dfs.step(dfs_session))
        assert snap == {
            "algorithm": "DFS",
            "stack": ["C", "B"],
            "visited": ["A"],
            "current": "A",
            "path": ["A"],
            "step": 1,
            "complete": False,
            "failed": False,
        }
