"""Collectible component.

Marks a cell holding a countable quantity the agent can collect one unit at a
time. ``original`` is fixed when the level loads; ``current`` is what remains.
Gameplay never clamps ``current``, so over-collection shows up as a negative
(or, for malformed input, NaN) remainder which the outcome classifier reports.
"""

from dataclasses import dataclass

from collector_maze.types import CollectibleValue


@dataclass(frozen=True)
class Collectible:
    """Original and remaining quantity of a collectible cell.

    Attributes:
        original:
            Quantity present at level start (>= 0).
        current:
            Quantity still remaining. ``0 <= current <= original`` for a
            well-behaved run.
    """

    original: CollectibleValue
    current: CollectibleValue

    @property
    def collected(self) -> CollectibleValue:
        """Units taken from this cell so far."""
        return self.original - self.current
