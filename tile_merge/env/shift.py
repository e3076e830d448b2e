"""Slide and merge logic for the tile merge game.

A shift orders the tiles so that the tile closest to the target edge of each
row comes first, then walks them once, handing out compacted slots through a
``column`` counter.  Two equal tiles that meet in that walk merge; the tile
consumed by a merge is skipped, so ``2 2 2`` slides to ``4 2`` rather than
merging twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .grid import MAX_TILE_VALUE, GridState, PlacedTile, Position, Tile


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def sort_key(self, pos: Position) -> Tuple[int, int]:
        """Scan order: row first, then closest to the target edge."""
        if self is Direction.LEFT:
            return pos.y, pos.x
        if self is Direction.RIGHT:
            return -pos.y, -pos.x
        if self is Direction.UP:
            return -pos.x, -pos.y
        return pos.x, pos.y

    def row_of(self, pos: Position) -> int:
        """Coordinate orthogonal to the motion axis."""
        if self in (Direction.LEFT, Direction.RIGHT):
            return pos.y
        return pos.x

    def place(self, size: int, pos: Position, column: int) -> Position:
        """Return ``pos`` moved to compacted slot ``column`` of its row."""
        if self is Direction.LEFT:
            return Position(column, pos.y)
        if self is Direction.RIGHT:
            return Position(size - 1 - column, pos.y)
        if self is Direction.UP:
            return Position(pos.x, size - 1 - column)
        return Position(pos.x, column)


_KEY_MAP: Dict[str, Direction] = {
    key: direction
    for direction, keys in (
        (Direction.LEFT, ("left", "arrowleft", "a", "h")),
        (Direction.RIGHT, ("right", "arrowright", "d", "l")),
        (Direction.UP, ("up", "arrowup", "w", "k")),
        (Direction.DOWN, ("down", "arrowdown", "s", "j")),
    )
    for key in keys
}


def parse_direction(key: object) -> Optional[Direction]:
    """Map a key name to a :class:`Direction`; other keys give ``None``."""
    if isinstance(key, Direction):
        return key
    if not isinstance(key, str):
        return None
    return _KEY_MAP.get(key.strip().lower())


@dataclass(frozen=True)
class TileMove:
    tile_id: int
    source: Position
    destination: Position
    value: int
    merged: bool = False

    @property
    def moved(self) -> bool:
        return self.source != self.destination


@dataclass(frozen=True)
class MergeEvent:
    tile_id: int
    consumed_id: int
    source: Position
    consumed_source: Position
    destination: Position
    value: int


@dataclass
class ShiftResult:
    direction: Direction
    moves: List[TileMove] = field(default_factory=list)
    merges: List[MergeEvent] = field(default_factory=list)
    removed: List[PlacedTile] = field(default_factory=list)
    score_delta: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.merges) or any(move.moved for move in self.moves)

    def moved_tiles(self) -> List[TileMove]:
        return [move for move in self.moves if move.moved]


def _merge_values(a: int, b: int) -> int:
    merged = a + b
    if merged > MAX_TILE_VALUE:
        raise OverflowError(f"Merging {a} and {b} exceeds {MAX_TILE_VALUE}")
    return merged


def apply_shift(direction: Direction, grid: GridState) -> ShiftResult:
    """Slide every tile of ``grid`` towards ``direction`` and merge pairs.

    The grid is only updated once the whole shift has been computed, so an
    error part way through leaves it untouched.
    """
    ordered = sorted(grid.tiles(), key=lambda t: direction.sort_key(t.position))
    result = ShiftResult(direction=direction)
    placements: List[Tuple[Tile, Position, int]] = []

    column = 0
    i = 0
    while i < len(ordered):
        tile = ordered[i]
        i += 1
        row = direction.row_of(tile.position)
        destination = direction.place(grid.size, tile.position, column)
        value = tile.value
        merged = False

        if i < len(ordered):
            nxt = ordered[i]
            if direction.row_of(nxt.position) != row:
                column = 0
            elif nxt.value != value:
                column += 1
            else:
                i += 1
                value = _merge_values(value, nxt.value)
                merged = True
                result.score_delta += value
                result.removed.append(nxt.snapshot())
                result.merges.append(
                    MergeEvent(
                        tile_id=tile.tile_id,
                        consumed_id=nxt.tile_id,
                        source=tile.position,
                        consumed_source=nxt.position,
                        destination=destination,
                        value=value,
                    )
                )
                if i < len(ordered):
                    if direction.row_of(ordered[i].position) != row:
                        column = 0
                    else:
                        column += 1

        result.moves.append(
            TileMove(
                tile_id=tile.tile_id,
                source=tile.position,
                destination=destination,
                value=value,
                merged=merged,
            )
        )
        placements.append((tile, destination, value))

    grid._commit(placements)
    return result


def print_board(grid: GridState) -> None:
    """Pretty print the grid, top row first, using a tight ASCII layout."""
    size = grid.size
    for y in range(size - 1, -1, -1):
        line = []
        for x in range(size):
            tile = grid.tile_at(Position(x, y))
            if tile is not None:
                line.append(f"{tile.value:6d}")
            else:
                line.append("     .")
        print("".join(line))
    print("-" * (size * 6))
    print()
