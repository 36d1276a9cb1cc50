"""Level configuration.

:class:`LevelConfig` carries the thresholds a level is judged by. It is built
once by :mod:`collector_maze.levels.loader` and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from collector_maze.types import LevelType


@dataclass(frozen=True)
class LevelConfig:
    """Per-level settings fixed when the level is constructed.

    Attributes:
        level_type: Which level variant judges runs of this level.
        block_limit: Maximum countable blocks. Collector levels enforce the
            level's "ideal" block count as this hard limit. ``None`` means
            unlimited.
        min_collected: Minimum quantity a collector run must gather to avoid
            ``COLLECTED_NOT_ENOUGH``. ``None`` (or 0) means not enforced.
    """

    level_type: LevelType = LevelType.MAZE
    block_limit: Optional[int] = None
    min_collected: Optional[int] = None
