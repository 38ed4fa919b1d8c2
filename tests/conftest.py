import random

import pytest

from mudpath.core.controller import Controller
from mudpath.core.model import Model


@pytest.fixture
def model():
    return Model()


@pytest.fixture
def controller(model):
    return Controller(model)


def random_terrain(model: Model, seed: int, wall_p: float = 0.25, mud_p: float = 0.2) -> None:
    """Scatter walls and mud with a fixed seed; endpoints are skipped by the grid."""
    rng = random.Random(seed)
    grid = model.grid
    for y in range(grid.height):
        for x in range(grid.width):
            r = rng.random()
            if r < wall_p:
                model.set_wall(x, y)
            elif r < wall_p + mud_p:
                model.set_mud(x, y)
