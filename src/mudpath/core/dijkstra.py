#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import List, Tuple, Optional
import heapq
import time

from mudpath.core.grid import Grid
from mudpath.core.paths import snapshot_path
from mudpath.core.types import Cell, SearchResult


@dataclass
class DijkstraAlgo:
    """Weighted search: mud costs MUD_COST to enter, anything else NORMAL_COST.

    Stale heap entries are left in place and skipped when popped (the cell
    is already visited by then).
    """
    name: str = "Dijkstra"

    grid: Optional[Grid] = None
    open_pq: List[Tuple[float, int, Cell]] = field(default_factory=list)  # (dist, seq, cell)
    popped_count: int = 0
    found: bool = False
    seq: int = 0  # keeps the heap from ever comparing two cells

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        self.open_pq.clear()
        self.popped_count = 0
        self.found = False
        self.seq = 0

    def run(self) -> SearchResult:
        """Search from grid.start to grid.end; cells must be freshly reset."""
        grid = self.grid
        start, goal = grid.start, grid.end

        t0 = time.perf_counter()
        grid.at(start).dist = 0
        heapq.heappush(self.open_pq, (0, self._bump(), start))

        while self.open_pq:
            _, _, u = heapq.heappop(self.open_pq)
            if u == goal:
                self.found = True
                break
            cur = grid.at(u)
            if cur.visited:
                continue
            cur.visited = True
            self.popped_count += 1

            for v in grid.neighbors4(u):
                alt = cur.dist + grid.cost_of(v)
                nxt = grid.at(v)
                if alt < nxt.dist:
                    nxt.dist = alt
                    nxt.parent = u
                    heapq.heappush(self.open_pq, (alt, self._bump(), v))
        elapsed = time.perf_counter() - t0

        path = snapshot_path(grid, goal, start) if self.found else None
        return SearchResult(found=self.found, visited_count=self.popped_count,
                            time_seconds=elapsed, path=path,
                            metrics=self._metrics())

    def _metrics(self) -> dict:
        goal = self.grid.at(self.grid.end)
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_pq),
            "weighted_cost": int(goal.dist) if self.found else 0,
        }
