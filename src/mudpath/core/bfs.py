#!/usr/bin/env python3

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional
import time

from mudpath.core.grid import Grid
from mudpath.core.paths import real_cost, snapshot_path
from mudpath.core.types import Cell, SearchResult


@dataclass
class BFSAlgo:
    """Fewest hops. Every edge counts 1, so mud is walked through freely."""
    name: str = "BFS"

    grid: Optional[Grid] = None
    queue: Deque[Cell] = field(default_factory=deque)
    popped_count: int = 0
    found: bool = False
    true_cost: int = 0

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        self.queue.clear()
        self.popped_count = 0
        self.found = False
        self.true_cost = 0

    def run(self) -> SearchResult:
        """Search from grid.start to grid.end; cells must be freshly reset."""
        grid = self.grid
        start, goal = grid.start, grid.end

        t0 = time.perf_counter()
        s = grid.at(start)
        s.dist = 0
        s.visited = True
        self.queue.append(start)

        while self.queue:
            u = self.queue.popleft()
            self.popped_count += 1
            if u == goal:
                self.found = True
                break
            cur = grid.at(u)
            for v in grid.neighbors4(u):
                nxt = grid.at(v)
                if nxt.visited:
                    continue
                nxt.dist = cur.dist + 1
                nxt.parent = u
                nxt.visited = True
                self.queue.append(v)
        elapsed = time.perf_counter() - t0

        path = None
        if self.found:
            # weigh the hop-optimal path while the parent links are still live
            self.true_cost = real_cost(grid, goal, start)
            path = snapshot_path(grid, goal, start)
        return SearchResult(found=self.found, visited_count=self.popped_count,
                            time_seconds=elapsed, path=path,
                            metrics=self._metrics())

    def _metrics(self) -> dict:
        goal = self.grid.at(self.grid.end)
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.queue),
            "hops": int(goal.dist) if self.found else 0,
            "true_cost": self.true_cost,
        }
