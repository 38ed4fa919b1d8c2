#!/usr/bin/env python3
"""
Two-slot run history: the path of the latest run ("current"), the one before
it ("previous"), and the last metrics of each algorithm.

A run shifts current into previous before storing its own bitmap, so running
the other algorithm next leaves both paths on the board for comparison.
"""

from dataclasses import dataclass, field
from typing import Optional

from mudpath.core.paths import empty_bitmap, copy_into, clear_bitmap
from mudpath.core.types import (
    PathBitmap, RunMetrics, SearchResult, DIJKSTRA, BFS,
    MODE_IDLE, MODE_SINGLE, MODE_BOTH,
)


@dataclass
class RunHistory:
    current: PathBitmap = field(default_factory=empty_bitmap)
    previous: PathBitmap = field(default_factory=empty_bitmap)
    last_algorithm: str = DIJKSTRA
    dijkstra: RunMetrics = field(default_factory=lambda: RunMetrics(algo=DIJKSTRA))
    bfs: RunMetrics = field(default_factory=lambda: RunMetrics(algo=BFS))

    def metrics_for(self, algorithm: str) -> RunMetrics:
        if algorithm == DIJKSTRA:
            return self.dijkstra
        if algorithm == BFS:
            return self.bfs
        raise ValueError(f"Unknown algorithm: {algorithm!r}")

    def record(self, algorithm: str, result: SearchResult) -> None:
        m = self.metrics_for(algorithm)  # validates the tag before anything moves

        copy_into(self.previous, self.current)
        if result.found and result.path is not None:
            copy_into(self.current, result.path)
        else:
            clear_bitmap(self.current)

        self.last_algorithm = algorithm
        m.ran = True
        m.time_seconds = result.time_seconds
        m.visited_count = result.visited_count
        m.found = result.found
        if algorithm == DIJKSTRA:
            m.weighted_cost = result.metrics.get("weighted_cost", 0) if result.found else 0
        else:
            m.hops = result.metrics.get("hops", 0) if result.found else 0
            m.true_cost = result.metrics.get("true_cost", 0) if result.found else 0

    def clear(self) -> None:
        clear_bitmap(self.current)
        clear_bitmap(self.previous)
        self.last_algorithm = DIJKSTRA
        self.dijkstra = RunMetrics(algo=DIJKSTRA)
        self.bfs = RunMetrics(algo=BFS)

    # -------------------- derived views --------------------

    @property
    def mode(self) -> str:
        ran = int(self.dijkstra.ran) + int(self.bfs.ran)
        if ran == 0:
            return MODE_IDLE
        return MODE_BOTH if ran == 2 else MODE_SINGLE

    def role_of(self, algorithm: str) -> str:
        """'current' for the algorithm that ran last, otherwise 'previous'."""
        self.metrics_for(algorithm)
        return "current" if algorithm == self.last_algorithm else "previous"

    def cost_difference(self) -> Optional[int]:
        """BFS true cost minus Dijkstra cost, when both found a path."""
        if not (self.dijkstra.found and self.bfs.found):
            return None
        return self.bfs.true_cost - self.dijkstra.weighted_cost

    def summary(self) -> str:
        diff = self.cost_difference()
        if diff is None:
            return "Result:  One or both algorithms did not find a path."
        d, b = self.dijkstra.weighted_cost, self.bfs.true_cost
        if diff > 0:
            return (f"Result:  Dijkstra cost {d}  vs  BFS true cost {b}  "
                    f"- BFS costs {diff} more because it walked through mud.")
        if diff < 0:
            # only reachable when terrain changed between the two runs
            return (f"Result:  Dijkstra cost {d}  vs  BFS true cost {b}  "
                    f"- BFS happened to avoid mud this run.")
        return f"Result:  Both algorithms cost {d}  - No mud difference on these paths."
