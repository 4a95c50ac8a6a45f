# stepsearch/app/streamlit_app.py
# Browser lab for the four step engines. Run with:
#   streamlit run stepsearch/app/streamlit_app.py     (or: stepsearch-ui)
#
# Streamlit reruns this script on every interaction; the lab controllers live
# in st.session_state so sessions survive reruns. Auto-play is a sleep + rerun
# loop driven by AutoPlayer.tick().

import time

import matplotlib.pyplot as plt
import streamlit as st

from stepsearch.algorithms.puzzle_search import PuzzleAlgorithm
from stepsearch.app.labs import DepthLimitedLab, PuzzleLab, make_lab
from stepsearch.core.config import LabConfig
from stepsearch.logging_config import setup_logging
from stepsearch.problems.eight_puzzle import is_goal
from stepsearch.plots.plotting import draw_board, draw_graph

TITLES = {
    "dfs": "Depth-First Search",
    "dls": "Depth-Limited Search",
    "ucs": "Uniform Cost Search",
    "puzzle": "8-Puzzle (BFS / DFS / A*)",
}

EXPLANATIONS = {
    "dfs": "DFS pops the most recently pushed node. Unvisited neighbours are pushed in reverse "
           "so they are visited in the order they are listed.",
    "dls": "DLS is DFS with a depth bound. Nodes at the limit are not expanded; if such a node still "
           "has unexplored neighbours the search records a *cutoff*, which is different from a plain failure.",
    "ucs": "UCS always expands the queued node with the lowest path cost g(n). When a cheaper path to a "
           "queued node is found the old entry is replaced. The first time the goal is popped its cost is optimal.",
    "puzzle": "Tiles slide into the blank. BFS expands boards level by level, DFS dives along the newest board, "
              "A* orders the open list by f(n) = g(n) + h(n) with h the Manhattan distance. Boards already open "
              "or closed are never queued again, so A* here does not reopen nodes.",
}


@st.cache_resource
def _config() -> LabConfig:
    cfg = LabConfig.from_env()
    setup_logging(cfg.log_level)
    return cfg


def _lab(variant):
    key = f"lab_{variant}"
    if key not in st.session_state:
        st.session_state[key] = make_lab(variant, _config())
    return st.session_state[key]


st.set_page_config(page_title="Search Step Lab", layout="wide")
st.title("Search Step Lab")

with st.sidebar:
    st.header("Algorithm")
    variant = st.radio("Pick a search", list(TITLES), format_func=TITLES.get)
    lab = _lab(variant)
    session = lab.session
    st.markdown("---")

    if isinstance(lab, DepthLimitedLab):
        limit = st.number_input("Depth limit", min_value=0, max_value=10, value=session.depth_limit, step=1)
        if limit != session.depth_limit:
            lab.set_depth_limit(limit)

    if isinstance(lab, PuzzleLab):
        algos = [a.value for a in PuzzleAlgorithm]
        choice = st.selectbox("Puzzle algorithm", algos, index=algos.index(session.algorithm.value),
                              format_func=lambda v: PuzzleAlgorithm(v).label, disabled=session.solving)
        if choice != session.algorithm.value and not session.solving:
            lab.select_algorithm(choice)
        if st.button("Shuffle", disabled=session.solving):
            lab.shuffle()
        if st.button("Start solve", disabled=session.solving or is_goal(session.start_board)):
            lab.start()

    c1, c2, c3 = st.columns(3)
    if c1.button("Pause" if lab.playing else "Play", disabled=not lab.session.can_step):
        lab.toggle_play()
    if c2.button("Step", disabled=lab.playing or not lab.session.can_step):
        lab.step()
    if c3.button("Reset"):
        lab.reset()

session = lab.session
snap = lab.snapshot()
st.subheader(TITLES[variant])
left, right = st.columns(2)

with left:
    if isinstance(lab, PuzzleLab):
        fig = draw_board(session, title=f"Step {session.steps}")
    else:
        fig = draw_graph(session, title=f"Step {session.steps}", show_costs=(variant == "ucs"))
    st.pyplot(fig)
    plt.close(fig)
    if isinstance(lab, PuzzleLab):
        solved = lab.solved_summary()
        if solved is not None:
            st.success("Puzzle solved!")
            st.markdown(f"Solution found in `{solved['moves']}` moves  \n"
                        f"States explored: `{solved['explored']}`")
        else:
            st.caption(f"Heuristic (Manhattan distance): {snap['heuristic']}")

with right:
    st.markdown(f"**Step:** `{session.steps}`")
    if variant == "dfs":
        st.markdown(f"**Stack (top last):** {snap['stack'] or 'empty'}")
        st.markdown(f"**Visited:** {snap['visited']}")
        st.markdown(f"**Path:** {' → '.join(snap['path']) or '-'}")
    elif variant == "dls":
        st.markdown(f"**Depth limit:** `{snap['depth_limit']}`  **Current depth:** `{snap['current_depth']}`")
        st.markdown("**Stack:** " + (", ".join(f"{e['node']}(d={e['depth']})" for e in snap["stack"]) or "empty"))
        st.markdown(f"**Visited:** {snap['visited']}")
        st.markdown(f"**Current path:** {' → '.join(snap['current_path']) or '-'}")
        if snap["cutoff_reached"]:
            st.warning("Depth limit reached: some nodes were not expanded (cutoff).")
    elif variant == "ucs":
        st.markdown("**Priority queue (by cost):** "
                    + (", ".join(f"{e['node']} (cost: {e['cost']})" for e in snap["queue"]) or "empty"))
        st.markdown(f"**Visited:** {snap['visited']}")
        st.markdown(f"**Current cost:** `{snap['current_cost']}`  "
                    f"**Current path:** {' → '.join(snap['current_path']) or '-'}")
    else:
        st.markdown(f"**Algorithm:** {session.algorithm.label}")
        cur = snap["current"]
        if session.solving and cur:
            st.markdown(f"**Depth:** `{cur['depth']}`  **Cost:** `{cur['cost']}`  **Heuristic:** `{cur['heuristic']}`")
            if session.algorithm is PuzzleAlgorithm.ASTAR:
                st.markdown(f"**f(n) = g(n) + h(n):** `{cur['f']}`")
            st.markdown(f"**Open list:** `{snap['open_size']}`  **Closed list:** `{snap['closed_size']}`")
            st.markdown(f"**Moves:** {' → '.join(cur['path']) or 'Starting position'}")

    if session.complete and variant != "puzzle":
        st.success(f"Goal {session.problem.goal} found!")
    elif session.failed:
        outcome = snap.get("outcome", "failure")
        st.error("Search failed: depth limit cut the search off." if outcome == "cutoff"
                 else "Search failed: frontier exhausted.")

with st.expander("How it works"):
    st.markdown(EXPLANATIONS[variant])

if lab.playing:
    time.sleep(lab.player.seconds_until_due())
    lab.tick()
    st.rerun()
