from stepsearch.algorithms import ucs
from stepsearch.core.session import NodeStatus
from stepsearch.problems.sample_graph import GraphMap, GraphProblem

from conftest import run_to_end


def _cheapest_cost(data, start, goal):
    """Brute force over simple paths; the graph is tiny."""
    best = None
    stack = [(start, 0, {start})]
    while stack:
        node, cost, seen = stack.pop()
        if node == goal:
            best = cost if best is None else min(best, cost)
            continue
        for nxt, w in data.graph[node].items():
            if nxt not in seen:
                stack.append((nxt, cost + w, seen | {nxt}))
    return best


class TestUniformCostSearch:
    def test_initial_session(self, ucs_session):
        (root,) = ucs_session.frontier
        assert (root.state, root.cost, root.path) == ("A", 0, ("A",))
        assert ucs_session.costs == {"A": 0}

    def test_finds_optimal_path(self, ucs_session):
        s = run_to_end(ucs, ucs_session)
        assert s.complete
        assert s.current_path == ("A", "B", "E", "G")
        assert s.current_cost == 7
        assert s.current_cost == _cheapest_cost(s.problem.data, "A", "G")

    def test_expansion_order(self, ucs_session):
        s = run_to_end(ucs, ucs_session)
        assert s.visited == ("A", "C", "B", "F", "E", "G")
        assert s.steps == 6

    def test_relaxation_replaces_stale_entry(self, ucs_session):
        s = ucs_session
        for _ in range(4):  # A, C, B, F: G queued at cost 9 via F
            s = ucs.step(s)
        assert [(r.state, r.cost) for r in s.frontier if r.state == "G"] == [("G", 9)]
        s = ucs.step(s)  # E: G improves to 7
        g_entries = [r for r in s.frontier if r.state == "G"]
        assert len(g_entries) == 1
        assert g_entries[0].cost == 7
        assert g_entries[0].path == ("A", "B", "E", "G")
        assert s.costs["G"] == 7

    def test_ordered_frontier(self, ucs_session):
        s = ucs.step(ucs_session)
        assert [r.state for r in ucs.ordered_frontier(s)] == ["C", "B"]

    def test_zero_cost_edges_are_real_costs(self):
        data = GraphMap(
            graph={"S": {"X": 0, "Y": 1}, "X": {"S": 0, "T": 5}, "Y": {"S": 1, "T": 1}, "T": {}},
            coords={},
        )
        s = run_to_end(ucs, ucs.new_session(GraphProblem("S", "T", data)))
        assert s.current_path == ("S", "Y", "T")
        assert s.current_cost == 2

    def test_exhaustion(self):
        data = GraphMap(graph={"A": {"B": 3}, "B": {"A": 3}, "Z": {}}, coords={})
        s = run_to_end(ucs, ucs.new_session(GraphProblem("A", "Z", data)))
        assert s.failed and not s.complete
        assert ucs.step(s) is s

    def test_reset_and_status(self, ucs_session):
        s = run_to_end(ucs, ucs_session)
        assert s.node_status("G") is NodeStatus.GOAL
        assert s.node_status("D") is NodeStatus.FRONTIER
        assert ucs.reset(s) == ucs_session

    def test_fresh_sessions_are_equal(self):
        assert ucs.new_session() == ucs.new_session()
        assert run_to_end(ucs, ucs.new_session()) == run_to_end(ucs, ucs.new_session())

    def test_visited_grows_by_one_per_step(self, ucs_session):
        s = ucs_session
        while s.can_step:
            nxt = ucs.step(s)
            assert len(nxt.visited) == len(s.visited) + 1
            assert nxt.steps == s.steps + 1
            s = nxt

    def test_reset_is_idempotent(self, ucs_session):
        s = ucs.step(ucs.step(ucs_session))
        once = ucs.reset(s)
        assert once == ucs_session
        assert ucs.reset(once) == once
        assert ucs.reset(ucs.reset(run_to_end(ucs, ucs_session))) == ucs_session

    def test_snapshot_queue_is_sorted(self, ucs_session):
        s = ucs_session
        for _ in range(3):
            s = ucs.step(s)
        snap = ucs.snapshot(s)
        assert [(e["node"], e["cost"]) for e in snap["queue"]] == [("F", 5), ("E", 5), ("D", 9)]
        assert snap["current"] == "B"
        assert snap["current_cost"] == 4
