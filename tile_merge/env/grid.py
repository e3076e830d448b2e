"""Grid storage for the tile merge game.

Tiles are addressed by :class:`Position`. ``x`` grows to the right and ``y``
grows upward, so the row printed first is ``y == size - 1``.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

TILE_SIZE = 40.0
TILE_SPACER = 10.0

# Tile values are stored as unsigned 32-bit numbers by the game.
MAX_TILE_VALUE = 2**32 - 1


@dataclass(frozen=True)
class Board:
    """Board dimensions plus the physical layout scale used by renderers."""

    size: int = 4
    physical_size: float = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")
        physical = self.size * TILE_SIZE + (self.size + 1) * TILE_SPACER
        object.__setattr__(self, "physical_size", physical)

    def cell_position_to_physical(self, index: int) -> float:
        """Return the centre of cell ``index`` along one axis."""
        offset = -self.physical_size / 2.0 + 0.5 * TILE_SIZE
        return offset + index * TILE_SIZE + (index + 1) * TILE_SPACER


@dataclass(frozen=True, order=True)
class Position:
    x: int
    y: int

    def neighbours(self) -> Iterator["Position"]:
        for dx, dy in ((-1, 0), (0, 1), (1, 0), (0, -1)):
            yield Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class PlacedTile:
    """Detached view of a tile at the moment it was taken."""

    tile_id: int
    position: Position
    value: int


@dataclass
class Tile:
    position: Position
    value: int
    tile_id: int

    def snapshot(self) -> PlacedTile:
        return PlacedTile(self.tile_id, self.position, self.value)


class GridState:
    """Authoritative mapping from :class:`Position` to :class:`Tile`."""

    def __init__(self, board: Board | int = 4) -> None:
        self.board = board if isinstance(board, Board) else Board(board)
        self._tiles: Dict[Position, Tile] = {}
        self._ids = itertools.count()

    @classmethod
    def from_values(
        cls, size: int, values: Mapping[Tuple[int, int], int]
    ) -> "GridState":
        """Build a grid from a ``{(x, y): value}`` mapping."""
        grid = cls(size)
        for (x, y), value in sorted(values.items()):
            grid.insert(Position(x, y), value)
        return grid

    @property
    def size(self) -> int:
        return self.board.size

    # Queries --------------------------------------------------------------
    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise ValueError(f"{pos} is outside a {self.size}x{self.size} board")

    def tile_at(self, pos: Position) -> Optional[Tile]:
        self._check_bounds(pos)
        return self._tiles.get(pos)

    def occupied_positions(self) -> Set[Position]:
        return set(self._tiles)

    def empty_positions(self) -> List[Position]:
        """All free cells, enumerated with ``x`` as the outer loop."""
        return [
            Position(x, y)
            for x, y in itertools.product(range(self.size), repeat=2)
            if Position(x, y) not in self._tiles
        ]

    def tiles(self) -> List[Tile]:
        return list(self._tiles.values())

    def values(self) -> Dict[Position, int]:
        return {pos: tile.value for pos, tile in self._tiles.items()}

    def is_full(self) -> bool:
        return len(self._tiles) == self.size * self.size

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, pos: object) -> bool:
        return pos in self._tiles

    # Mutation -------------------------------------------------------------
    def insert(self, pos: Position, value: int) -> Tile:
        self._check_bounds(pos)
        if pos in self._tiles:
            raise ValueError(f"{pos} is already occupied")
        if value <= 0 or value & (value - 1) or value > MAX_TILE_VALUE:
            raise ValueError(
                f"Tile value must be a power of two up to {MAX_TILE_VALUE}, got {value}"
            )
        tile = Tile(position=pos, value=value, tile_id=next(self._ids))
        self._tiles[pos] = tile
        return tile

    def clear(self) -> None:
        self._tiles.clear()

    def _commit(self, placements: Iterable[Tuple[Tile, Position, int]]) -> None:
        """Replace the grid contents with ``(tile, position, value)`` placements.

        Everything is validated before the grid is touched, so a bad placement
        leaves the previous contents intact.
        """
        placements = list(placements)
        new_tiles: Dict[Position, Tile] = {}
        for tile, pos, value in placements:
            self._check_bounds(pos)
            if pos in new_tiles:
                raise ValueError(f"Two tiles placed on {pos}")
            new_tiles[pos] = tile
        for tile, pos, value in placements:
            tile.position = pos
            tile.value = value
        self._tiles = new_tiles
