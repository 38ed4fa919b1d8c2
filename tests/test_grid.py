import copy

import pytest

from mudpath.core.grid import Grid
from mudpath.core.types import COLS, ROWS, DEFAULT_START, DEFAULT_END, MUD_COST, NORMAL_COST


@pytest.mark.unit
def test_default_board():
    g = Grid()
    assert (g.width, g.height) == (COLS, ROWS) == (40, 30)
    assert g.start == DEFAULT_START == (5, 15)
    assert g.end == DEFAULT_END == (35, 15)
    assert sum(1 for _ in g) == 40 * 30
    assert g.at((7, 3)).pos == (7, 3)


@pytest.mark.unit
def test_wall_and_mud_are_exclusive():
    g = Grid()
    g.set_mud(3, 3)
    assert g.at((3, 3)).is_mud and not g.at((3, 3)).is_wall
    g.set_wall(3, 3)
    assert g.at((3, 3)).is_wall and not g.at((3, 3)).is_mud
    g.set_mud(3, 3)
    assert g.at((3, 3)).is_mud and not g.at((3, 3)).is_wall


@pytest.mark.unit
@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (40, 0), (0, 30), (100, 100)])
def test_out_of_bounds_edits_are_dropped(pos):
    g = Grid()
    before = copy.deepcopy(g.cells)
    assert g.set_wall(*pos) is False
    assert g.set_mud(*pos) is False
    assert g.cells == before


@pytest.mark.unit
def test_endpoint_edits_are_dropped():
    g = Grid()
    before = copy.deepcopy(g.cells)
    for c in (g.start, g.end):
        g.set_wall(*c)
        g.set_mud(*c)
    assert g.cells == before


@pytest.mark.unit
def test_neighbors_skip_walls_and_edges():
    g = Grid()
    assert g.neighbors4((0, 0)) == [(1, 0), (0, 1)]
    g.set_wall(11, 10)
    assert g.neighbors4((10, 10)) == [(9, 10), (10, 11), (10, 9)]


@pytest.mark.unit
def test_cost_of():
    g = Grid()
    g.set_mud(1, 1)
    g.set_wall(2, 2)
    assert g.cost_of((1, 1)) == MUD_COST
    assert g.cost_of((0, 0)) == NORMAL_COST
    with pytest.raises(ValueError):
        g.cost_of((2, 2))


@pytest.mark.unit
def test_clear_transient_keeps_terrain():
    g = Grid()
    g.set_mud(4, 4)
    node = g.at((4, 4))
    node.dist, node.parent, node.visited = 3, (4, 5), True
    g.clear_transient()
    assert node.is_mud
    assert node.parent is None and not node.visited and node.dist == float("inf")
    g.clear_all()
    assert not node.is_mud
