#!/usr/bin/env python3
from dataclasses import dataclass, field, replace

from mudpath.core.bfs import BFSAlgo
from mudpath.core.dijkstra import DijkstraAlgo
from mudpath.core.grid import Grid
from mudpath.core.history import RunHistory
from mudpath.core.paths import copy_bitmap
from mudpath.core.types import PathBitmap, RunMetrics, SearchResult, DIJKSTRA, BFS


@dataclass(frozen=True)
class RenderModel:
    """What the presentation side may read between commands."""
    grid: Grid
    current: PathBitmap
    previous: PathBitmap
    dijkstra: RunMetrics
    bfs: RunMetrics
    last_algorithm: str
    mode: str
    summary: str


@dataclass
class Model:
    grid: Grid = field(default_factory=Grid)
    history: RunHistory = field(default_factory=RunHistory)

    # -------------------- resets --------------------

    def full_reset(self) -> None:
        self.grid.clear_all()
        self.history.clear()

    def partial_reset(self) -> None:
        # terrain and history are kept so the next run can be compared
        self.grid.clear_transient()

    # -------------------- terrain --------------------

    def set_wall(self, x: int, y: int) -> None:
        self.grid.set_wall(x, y)

    def set_mud(self, x: int, y: int) -> None:
        self.grid.set_mud(x, y)

    # -------------------- searches --------------------

    def run_dijkstra(self) -> SearchResult:
        algo = DijkstraAlgo()
        algo.init(self.grid)
        res = algo.run()
        self.history.record(DIJKSTRA, res)
        return res

    def run_bfs(self) -> SearchResult:
        algo = BFSAlgo()
        algo.init(self.grid)
        res = algo.run()
        self.history.record(BFS, res)
        return res

    def run(self, algorithm: str) -> SearchResult:
        if algorithm == DIJKSTRA:
            return self.run_dijkstra()
        if algorithm == BFS:
            return self.run_bfs()
        raise ValueError(f"Unknown algorithm: {algorithm!r}")

    # -------------------- render model --------------------

    def render_model(self) -> RenderModel:
        h = self.history
        return RenderModel(
            grid=self.grid,
            current=copy_bitmap(h.current),
            previous=copy_bitmap(h.previous),
            dijkstra=replace(h.dijkstra),
            bfs=replace(h.bfs),
            last_algorithm=h.last_algorithm,
            mode=h.mode,
            summary=h.summary(),
        )
