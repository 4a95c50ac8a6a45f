import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import to_rgb

from stepsearch.algorithms import dfs, puzzle_search, ucs
from stepsearch.plots.plotting import NODE_COLORS, TILE_COLORS, board_image, draw_board, draw_graph
from stepsearch.algorithms.puzzle_search import TileStatus
from stepsearch.core.session import NodeStatus


def test_draw_graph_one_circle_per_node():
    s = dfs.step(dfs.new_session())
    fig = draw_graph(s, title="DFS")
    ax = fig.axes[0]
    assert len(ax.patches) == 7
    assert ax.get_title() == "DFS"
    current = [p for p in ax.patches if p.get_facecolor()[:3] == to_rgb(NODE_COLORS[NodeStatus.CURRENT])]
    assert len(current) == 1
    plt.close(fig)


def test_draw_graph_with_costs():
    fig = draw_graph(ucs.step(ucs.new_session()), show_costs=True)
    texts = {t.get_text() for t in fig.axes[0].texts}
    assert {"4", "2", "g=0", "g=4", "g=2"} <= texts
    plt.close(fig)


def test_board_image_colours():
    s = puzzle_search.new_session()
    img = board_image(s)
    assert img.shape == (3, 3, 3)
    assert np.allclose(img[1, 1], TILE_COLORS[TileStatus.BLANK])
    assert np.allclose(img[0, 0], TILE_COLORS[TileStatus.DEFAULT])


def test_draw_board_labels_tiles():
    fig = draw_board(puzzle_search.new_session())
    labels = sorted(t.get_text() for t in fig.axes[0].texts)
    assert labels == [str(n) for n in range(1, 9)]
    plt.close(fig)
