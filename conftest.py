import random

import pytest

from tile_merge.env.grid import GridState


@pytest.fixture
def make_grid():
    """Build a grid from ``{(x, y): value}``; size defaults to 4."""

    def _make(values, size=4):
        return GridState.from_values(size, values)

    return _make


@pytest.fixture
def rng():
    return random.Random(1234)
