from __future__ import annotations

from typing import Any, Dict

import jax
import jax.numpy as jnp

from tile_merge.env.grid import GridState


def state_to_array(
    state: Dict[str, Any],
    *,
    device: jax.Device | None = None,
) -> jnp.ndarray:
    """Convert a session snapshot into a ``(size, size)`` board array.

    Parameters
    ----------
    state:
        Snapshot returned by ``GameSession.get_state``.
    device:
        Optional JAX device to place the array on. When ``None`` the current
        default device is used.
    """
    size = state["size"]
    # Cells are indexed ``[x, y]``; empty cells stay at zero.
    rows = [[0.0] * size for _ in range(size)]
    for (x, y), value in state["tiles"].items():
        rows[x][y] = float(value)
    board = jnp.array(rows, dtype=jnp.float32)
    return jax.device_put(board, device)


def grid_to_array(
    grid: GridState,
    *,
    device: jax.Device | None = None,
) -> jnp.ndarray:
    """Read-only array snapshot of ``grid`` for renderers or other threads."""
    tiles = {(pos.x, pos.y): value for pos, value in grid.values().items()}
    return state_to_array({"size": grid.size, "tiles": tiles}, device=device)
