#!/usr/bin/env python3
from dataclasses import dataclass
from typing import List, Optional

from mudpath.core.types import (
    Cell, CellState, COLS, ROWS, DEFAULT_START, DEFAULT_END, NORMAL_COST, MUD_COST,
)


def _make_cells(width: int, height: int) -> List[List[CellState]]:
    return [[CellState(x, y) for x in range(width)] for y in range(height)]


@dataclass
class Grid:
    width: int = COLS
    height: int = ROWS
    start: Cell = DEFAULT_START
    end: Cell = DEFAULT_END
    cells: Optional[List[List[CellState]]] = None  # [row][col]

    def __post_init__(self):
        if self.cells is None:
            self.cells = _make_cells(self.width, self.height)

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, c: Cell) -> CellState:
        x, y = c
        return self.cells[y][x]

    def __iter__(self):
        for row in self.cells:
            yield from row

    def is_block(self, c: Cell) -> bool:
        return self.at(c).is_wall

    def is_endpoint(self, c: Cell) -> bool:
        return c == self.start or c == self.end

    def cost_of(self, c: Cell) -> int:
        """Cost of stepping into c."""
        node = self.at(c)
        if node.is_wall:
            raise ValueError("Asked cost of a wall cell")
        return MUD_COST if node.is_mud else NORMAL_COST

    def neighbors4(self, c: Cell) -> List[Cell]:
        """In-bounds, non-wall 4-connected neighbours of c."""
        x, y = c
        out: List[Cell] = []
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if self.in_bounds(n) and not self.is_block(n):
                out.append(n)
        return out

    # -------------------- terrain edits --------------------

    def set_wall(self, x: int, y: int) -> bool:
        c = (x, y)
        if not self.in_bounds(c) or self.is_endpoint(c):
            return False
        node = self.at(c)
        node.is_wall = True
        node.is_mud = False
        return True

    def set_mud(self, x: int, y: int) -> bool:
        c = (x, y)
        if not self.in_bounds(c) or self.is_endpoint(c):
            return False
        node = self.at(c)
        node.is_mud = True
        node.is_wall = False
        return True

    # -------------------- resets --------------------

    def clear_transient(self) -> None:
        for node in self:
            node.clear_transient()

    def clear_all(self) -> None:
        for node in self:
            node.clear_terrain()
            node.clear_transient()
