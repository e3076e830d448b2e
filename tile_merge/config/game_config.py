from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameConfig:
    size: int = 4
    initial_tiles: int = 2
    spawn_value: int = 2
    # Spawn after every shift, including shifts that left the board unchanged.
    spawn_on_noop: bool = False

    def validate(self) -> "GameConfig":
        """Raise ``ValueError`` for settings the engine cannot play with."""
        if self.size < 2:
            raise ValueError(f"size must be at least 2, got {self.size}")
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(
                f"initial_tiles must be between 0 and {self.size * self.size}"
            )
        if self.spawn_value <= 0 or self.spawn_value & (self.spawn_value - 1):
            raise ValueError(
                f"spawn_value must be a positive power of two, got {self.spawn_value}"
            )
        return self
