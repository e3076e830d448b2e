"""Game over detection."""

from __future__ import annotations

from typing import Iterator, Tuple

from .grid import GridState, Tile


def mergeable_pairs(grid: GridState) -> Iterator[Tuple[Tile, Tile]]:
    """Yield each pair of orthogonally adjacent tiles holding equal values."""
    for tile in grid.tiles():
        for pos in tile.position.neighbours():
            if not grid.in_bounds(pos) or pos <= tile.position:
                continue
            other = grid.tile_at(pos)
            if other is not None and other.value == tile.value:
                yield tile, other


def has_legal_move(grid: GridState) -> bool:
    """Return ``True`` while some shift could still change the board."""
    # Any gap lets at least one tile slide.
    if not grid.is_full():
        return True
    return next(mergeable_pairs(grid), None) is not None
