"""collector_maze.components
=================================

Aggregate import surface for the per-cell component dataclasses::

    from collector_maze.components import Collectible, Position

All components are frozen ``@dataclass`` value objects; systems replace them
rather than mutate them.
"""

from .collectible import Collectible
from .position import Position

__all__ = [
    "Collectible",
    "Position",
]
