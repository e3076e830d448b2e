"""Random placement of new tiles."""

from __future__ import annotations

import random
from typing import List, Optional

from .grid import GridState, Tile

SPAWN_VALUE = 2


def spawn_tile(
    grid: GridState, rng: random.Random, value: int = SPAWN_VALUE
) -> Optional[Tile]:
    """Place ``value`` on a uniformly chosen empty cell.

    Returns the new tile, or ``None`` when the board has no empty cell.
    """
    empty = grid.empty_positions()
    if not empty:
        return None
    return grid.insert(rng.choice(empty), value)


def spawn_initial(
    grid: GridState,
    rng: random.Random,
    count: int = 2,
    value: int = SPAWN_VALUE,
) -> List[Tile]:
    """Place ``count`` tiles on distinct empty cells, picked without replacement."""
    empty = grid.empty_positions()
    picks = rng.sample(empty, min(count, len(empty)))
    return [grid.insert(pos, value) for pos in picks]
