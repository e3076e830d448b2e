"""Game session tying the grid, scoring and run state together."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from tile_merge.config.game_config import GameConfig

from .grid import GridState, PlacedTile
from .shift import Direction, ShiftResult, apply_shift, parse_direction, print_board
from .spawn import spawn_initial, spawn_tile
from .terminal import has_legal_move


class RunState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class ScoreTracker:
    """Running score for the current game and the best score of the process."""

    score: int = 0
    score_best: int = 0

    def add(self, delta: int) -> int:
        if delta < 0:
            raise ValueError(f"Score delta must not be negative, got {delta}")
        self.score += delta
        if self.score_best < self.score:
            self.score_best = self.score
        return self.score

    def reset(self) -> None:
        self.score = 0


@dataclass
class TickResult:
    """Everything a presentation layer needs to animate one input."""

    shift: Optional[ShiftResult]
    spawned: List[PlacedTile] = field(default_factory=list)
    score: int = 0
    score_best: int = 0
    run_state: RunState = RunState.PLAYING
    ignored: bool = False

    @property
    def game_over(self) -> bool:
        return self.run_state is RunState.GAME_OVER


class GameSession:
    """One player's game: a grid, its score and whether play continues."""

    def __init__(
        self, config: GameConfig | None = None, *, seed: int | None = None
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.random = random.Random(seed)
        self.grid = GridState(self.config.size)
        self.tracker = ScoreTracker()
        self.run_state = RunState.PLAYING
        self.new_game()

    @property
    def score(self) -> int:
        return self.tracker.score

    @property
    def score_best(self) -> int:
        return self.tracker.score_best

    # Session control ------------------------------------------------------
    def new_game(self) -> List[PlacedTile]:
        """Clear the board, reset the score and place the starting tiles."""
        self.grid.clear()
        self.tracker.reset()
        self.run_state = RunState.PLAYING
        tiles = spawn_initial(
            self.grid,
            self.random,
            count=self.config.initial_tiles,
            value=self.config.spawn_value,
        )
        return [tile.snapshot() for tile in tiles]

    def end_game(self) -> None:
        self.run_state = RunState.GAME_OVER

    # Input ----------------------------------------------------------------
    def step(self, direction: Direction) -> TickResult:
        """Apply one directional input and return what happened."""
        if self.run_state is RunState.GAME_OVER:
            return self._tick(None, ignored=True)

        shift = apply_shift(direction, self.grid)
        self.tracker.add(shift.score_delta)

        spawned: List[PlacedTile] = []
        if shift.changed or self.config.spawn_on_noop:
            tile = spawn_tile(self.grid, self.random, self.config.spawn_value)
            if tile is not None:
                spawned.append(tile.snapshot())

        if not has_legal_move(self.grid):
            self.run_state = RunState.GAME_OVER
        return self._tick(shift, spawned=spawned)

    def handle_key(self, key: object) -> Optional[TickResult]:
        """Step with a key name; keys that are not directions are ignored."""
        direction = parse_direction(key)
        if direction is None:
            return None
        return self.step(direction)

    def _tick(
        self,
        shift: Optional[ShiftResult],
        *,
        spawned: Optional[List[PlacedTile]] = None,
        ignored: bool = False,
    ) -> TickResult:
        return TickResult(
            shift=shift,
            spawned=spawned or [],
            score=self.score,
            score_best=self.score_best,
            run_state=self.run_state,
            ignored=ignored,
        )

    # Views ----------------------------------------------------------------
    def get_state(self) -> Dict[str, object]:
        """Return a detached snapshot of the session."""
        return {
            "size": self.grid.size,
            "tiles": {(p.x, p.y): v for p, v in self.grid.values().items()},
            "score": self.score,
            "score_best": self.score_best,
            "run_state": self.run_state,
        }

    def render(self) -> None:
        """Print the current board."""
        print_board(self.grid)
        status = "GAME OVER" if self.run_state is RunState.GAME_OVER else "playing"
        print(f"Score: {self.score}  Best: {self.score_best}  [{status}]\n")
