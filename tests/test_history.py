import pytest

from mudpath.core.history import RunHistory
from mudpath.core.paths import empty_bitmap, path_cells, is_empty
from mudpath.core.types import SearchResult, DIJKSTRA, BFS, MODE_IDLE, MODE_SINGLE, MODE_BOTH


def _bitmap(*cells):
    bm = empty_bitmap()
    for x, y in cells:
        bm[y][x] = True
    return bm


def _found(path, **metrics):
    return SearchResult(found=True, visited_count=10, time_seconds=0.001,
                        path=path, metrics=metrics)


@pytest.mark.unit
def test_record_shifts_current_into_previous():
    h = RunHistory()
    h.record(DIJKSTRA, _found(_bitmap((1, 1)), weighted_cost=7))
    h.record(BFS, _found(_bitmap((2, 2)), hops=5, true_cost=9))
    assert path_cells(h.previous) == {(1, 1)}
    assert path_cells(h.current) == {(2, 2)}
    assert h.last_algorithm == BFS
    assert (h.dijkstra.weighted_cost, h.bfs.hops, h.bfs.true_cost) == (7, 5, 9)
    assert h.bfs.visited_count == 10 and h.bfs.time_seconds == 0.001


@pytest.mark.unit
def test_not_found_clears_current_and_zeroes_costs():
    h = RunHistory()
    h.record(BFS, _found(_bitmap((3, 3)), hops=4, true_cost=4))
    h.record(BFS, SearchResult(found=False, visited_count=3, time_seconds=0.0,
                               metrics={"hops": 0, "true_cost": 0}))
    assert is_empty(h.current)
    assert path_cells(h.previous) == {(3, 3)}
    assert h.bfs.ran and not h.bfs.found
    assert h.bfs.hops == 0 and h.bfs.true_cost == 0


@pytest.mark.unit
def test_record_keeps_its_own_bitmaps():
    h = RunHistory()
    path = _bitmap((4, 4))
    h.record(DIJKSTRA, _found(path, weighted_cost=2))
    path[4][4] = False
    assert path_cells(h.current) == {(4, 4)}


@pytest.mark.unit
def test_modes():
    h = RunHistory()
    assert h.mode == MODE_IDLE
    h.record(DIJKSTRA, _found(_bitmap((1, 1)), weighted_cost=3))
    assert h.mode == MODE_SINGLE
    h.record(BFS, _found(_bitmap((1, 1)), hops=3, true_cost=3))
    assert h.mode == MODE_BOTH
    h.clear()
    assert h.mode == MODE_IDLE


@pytest.mark.unit
@pytest.mark.parametrize("d_cost, b_cost, expected", [
    (10, 18, "BFS costs 8 more because it walked through mud."),
    (10, 9, "BFS happened to avoid mud this run."),
    (10, 10, "Both algorithms cost 10"),
])
def test_summary(d_cost, b_cost, expected):
    h = RunHistory()
    h.record(DIJKSTRA, _found(_bitmap((1, 1)), weighted_cost=d_cost))
    h.record(BFS, _found(_bitmap((1, 1)), hops=5, true_cost=b_cost))
    assert h.cost_difference() == b_cost - d_cost
    assert expected in h.summary()


@pytest.mark.unit
def test_summary_without_both_paths():
    h = RunHistory()
    assert h.cost_difference() is None
    assert "did not find a path" in h.summary()


@pytest.mark.unit
def test_unknown_algorithm():
    h = RunHistory()
    with pytest.raises(ValueError):
        h.record("A*", _found(_bitmap((1, 1))))
    with pytest.raises(ValueError):
        h.role_of("A*")
    assert h.mode == MODE_IDLE
