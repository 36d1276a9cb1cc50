"""Position component.

Immutable integer grid coordinates. Used as the key of every per-cell store on
:class:`collector_maze.state.MazeState`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
