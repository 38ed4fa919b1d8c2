#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional
from math import inf

Cell = Tuple[int, int]  # (col, row)

# ---------- Board ----------
COLS = 40
ROWS = 30
DEFAULT_START: Cell = (5, 15)
DEFAULT_END: Cell = (35, 15)

NORMAL_COST = 1
MUD_COST = 5

# unreached; no finite bound on path cost needed
UNREACHED = inf

# ---------- Tags ----------
DIJKSTRA = "Dijkstra"
BFS = "BFS"
ALGORITHMS = (DIJKSTRA, BFS)

WALL = "Wall"
MUD = "Mud"

MODE_IDLE = "Idle"      # nothing has run since the last full reset
MODE_SINGLE = "Single"  # exactly one algorithm has run
MODE_BOTH = "Both"

PathBitmap = List[List[bool]]  # [row][col]


@dataclass
class CellState:
    x: int
    y: int
    is_wall: bool = False
    is_mud: bool = False
    # transient, valid until the next reset
    dist: float = UNREACHED
    parent: Optional[Cell] = None
    visited: bool = False

    @property
    def pos(self) -> Cell:
        return (self.x, self.y)

    def clear_transient(self) -> None:
        self.dist = UNREACHED
        self.parent = None
        self.visited = False

    def clear_terrain(self) -> None:
        self.is_wall = False
        self.is_mud = False


@dataclass
class RunMetrics:
    """Outcome of the last run of one algorithm.

    `weighted_cost` is filled by Dijkstra, `hops` and `true_cost` by BFS;
    the fields that do not apply stay at zero.
    """
    algo: str
    ran: bool = False
    time_seconds: float = 0.0
    visited_count: int = 0
    found: bool = False
    weighted_cost: int = 0
    hops: int = 0
    true_cost: int = 0


@dataclass
class SearchResult:
    found: bool
    visited_count: int
    time_seconds: float
    path: Optional[PathBitmap] = None
    metrics: dict = field(default_factory=dict)


# ---------- Commands ----------
@dataclass(frozen=True)
class EditTerrain:
    kind: str  # WALL | MUD
    x: int
    y: int


@dataclass(frozen=True)
class Run:
    algorithm: str  # DIJKSTRA | BFS


@dataclass(frozen=True)
class FullReset:
    pass
