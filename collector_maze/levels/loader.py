"""Level definition loader.

A level definition is a plain mapping, as produced by JSON level files::

    {
        "type": "collector",
        "ideal": 15,
        "minCollected": 5,
        "map": [[0, 0, 0, 0],
                [0, 2, 1, 0],
                [0, 0, 0, 0]],
        "collectibles": [[0, 0, 0, 0],
                         [0, 0, 3, 0],
                         [0, 0, 0, 0]],
    }

``map`` holds :class:`collector_maze.types.TileType` codes. ``collectibles``
is optional; a non-zero entry marks a collectible cell with that original
quantity. ``type`` defaults to ``"maze"``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import pmap, pset

from collector_maze.components import Collectible, Position
from collector_maze.levels.config import LevelConfig
from collector_maze.state import MazeState
from collector_maze.types import LevelType, TileType

IntArray = npt.NDArray[np.int64]


def _as_grid(name: str, value: Any) -> IntArray:
    message = f"'{name}' must be a rectangular grid of integers"
    try:
        raw = np.asarray(value)
    except ValueError as exc:
        raise ValueError(message) from exc
    if raw.dtype.kind == "f":
        # Whole-number floats (e.g. 3.0 from JSON) are accepted.
        if not (np.isfinite(raw).all() and (raw == np.floor(raw)).all()):
            raise ValueError(message)
    elif raw.dtype.kind not in "iu":
        raise ValueError(message)
    if any(isinstance(v, bool) for v in np.asarray(value, dtype=object).ravel()):
        raise ValueError(message)
    arr: IntArray = raw.astype(np.int64)
    if arr.ndim != 2 or arr.size == 0:
        raise ValueError(f"'{name}' must be a non-empty 2D grid, got shape {arr.shape}")
    return arr


def _optional_int(definition: Mapping[str, Any], key: str) -> Optional[int]:
    value = definition.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value


def load_config(definition: Mapping[str, Any]) -> LevelConfig:
    """Build the :class:`LevelConfig` part of a level definition."""
    raw_type = definition.get("type", LevelType.MAZE.value)
    try:
        level_type = LevelType(raw_type)
    except ValueError as exc:
        raise ValueError(f"Unknown level type: {raw_type!r}") from exc
    return LevelConfig(
        level_type=level_type,
        block_limit=_optional_int(definition, "ideal"),
        min_collected=_optional_int(definition, "minCollected"),
    )


def load_state(definition: Mapping[str, Any]) -> MazeState:
    """Build the initial :class:`MazeState` of a level definition."""
    if "map" not in definition:
        raise ValueError("Level definition has no 'map'")
    tiles = _as_grid("map", definition["map"])
    height, width = tiles.shape

    known = {int(t) for t in TileType}
    unknown = set(np.unique(tiles).tolist()) - known
    if unknown:
        raise ValueError(f"Unknown tile codes in 'map': {sorted(unknown)}")

    starts = np.argwhere(tiles == TileType.START)
    if len(starts) != 1:
        raise ValueError(f"'map' must contain exactly one start tile, found {len(starts)}")
    finishes = np.argwhere(tiles == TileType.FINISH)
    if len(finishes) > 1:
        raise ValueError(f"'map' must contain at most one finish tile, found {len(finishes)}")

    start = Position(int(starts[0][1]), int(starts[0][0]))
    finish = Position(int(finishes[0][1]), int(finishes[0][0])) if len(finishes) else None
    wall = pset(Position(int(x), int(y)) for y, x in np.argwhere(tiles == TileType.WALL))

    collectible = pmap()
    if definition.get("collectibles") is not None:
        values = _as_grid("collectibles", definition["collectibles"])
        if values.shape != tiles.shape:
            raise ValueError(
                f"'collectibles' shape {values.shape} does not match 'map' shape {tiles.shape}"
            )
        if (values < 0).any():
            raise ValueError("'collectibles' quantities must be non-negative")
        if ((values != 0) & (tiles == TileType.WALL)).any():
            raise ValueError("'collectibles' cannot be placed on wall tiles")
        collectible = pmap(
            {
                Position(int(x), int(y)): Collectible(
                    original=int(values[y, x]), current=int(values[y, x])
                )
                for y, x in np.argwhere(values != 0)
            }
        )

    return MazeState(
        width=int(width),
        height=int(height),
        agent=start,
        start=start,
        finish=finish,
        wall=wall,
        collectible=collectible,
    )


def load_level(definition: Mapping[str, Any]) -> Tuple[LevelConfig, MazeState]:
    """Parse a level definition.

    Raises:
        ValueError: If the definition is malformed.
    """
    return load_config(definition), load_state(definition)
