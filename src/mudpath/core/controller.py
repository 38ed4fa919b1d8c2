#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Optional

from mudpath.core.model import Model
from mudpath.core.types import EditTerrain, Run, FullReset, SearchResult, WALL, MUD, ALGORITHMS


@dataclass
class Controller:
    """Applies input commands to a Model, one at a time, to completion."""
    model: Model = field(default_factory=Model)

    def dispatch(self, cmd) -> Optional[SearchResult]:
        if isinstance(cmd, EditTerrain):
            self._edit(cmd)
            return None
        if isinstance(cmd, Run):
            if cmd.algorithm not in ALGORITHMS:
                raise ValueError(f"Unknown algorithm: {cmd.algorithm!r}")
            self.model.partial_reset()
            return self.model.run(cmd.algorithm)
        if isinstance(cmd, FullReset):
            self.model.full_reset()
            return None
        raise ValueError(f"Unknown command: {cmd!r}")

    def _edit(self, cmd: EditTerrain) -> None:
        # start/end and off-board coordinates are dropped by the grid
        if cmd.kind == WALL:
            self.model.set_wall(cmd.x, cmd.y)
        elif cmd.kind == MUD:
            self.model.set_mud(cmd.x, cmd.y)
        else:
            raise ValueError(f"Unknown terrain kind: {cmd.kind!r}")
