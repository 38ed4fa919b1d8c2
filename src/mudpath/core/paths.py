#!/usr/bin/env python3
"""
Path bitmaps and costing over the parent links left behind by a search.

Both walks follow `CellState.parent` from the end back towards the start, so
they must run before the grid's transient fields are reset.
"""

from typing import List, Set

from mudpath.core.grid import Grid
from mudpath.core.types import Cell, PathBitmap, COLS, ROWS


def empty_bitmap(width: int = COLS, height: int = ROWS) -> PathBitmap:
    return [[False] * width for _ in range(height)]


def copy_bitmap(src: PathBitmap) -> PathBitmap:
    return [row[:] for row in src]


def copy_into(dst: PathBitmap, src: PathBitmap) -> None:
    for d, s in zip(dst, src):
        d[:] = s


def clear_bitmap(bm: PathBitmap) -> None:
    for row in bm:
        for i in range(len(row)):
            row[i] = False


def is_empty(bm: PathBitmap) -> bool:
    return not any(any(row) for row in bm)


def path_cells(bm: PathBitmap) -> Set[Cell]:
    return {(x, y) for y, row in enumerate(bm) for x, on in enumerate(row) if on}


def snapshot_path(grid: Grid, end: Cell, start: Cell) -> PathBitmap:
    """Mark every cell strictly between start and end on the parent chain."""
    bm = empty_bitmap(grid.width, grid.height)
    cur = grid.at(end).parent
    while cur is not None and cur != start:
        x, y = cur
        bm[y][x] = True
        cur = grid.at(cur).parent
    return bm


def real_cost(grid: Grid, end: Cell, start: Cell) -> int:
    """Sum of entry costs from end (inclusive) back to start (exclusive).

    Returns 0 when end has no parent, i.e. when no path was found.
    """
    if end == start or grid.at(end).parent is None:
        return 0
    total = 0
    cur = end
    while cur is not None and cur != start:
        total += grid.cost_of(cur)
        cur = grid.at(cur).parent
    return total


def parent_chain(grid: Grid, end: Cell, start: Cell) -> List[Cell]:
    """Cells from start to end along the parent links, or [] if unreachable."""
    if end != start and grid.at(end).parent is None:
        return []
    path: List[Cell] = []
    cur = end
    while True:
        path.append(cur)
        if cur == start:
            break
        cur = grid.at(cur).parent
        if cur is None:
            return []
    path.reverse()
    return path
