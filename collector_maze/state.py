"""Core immutable maze `MazeState` dataclass.

This module defines the frozen :class:`MazeState` object that represents the
whole grid at a single point of program execution. Gameplay systems are pure
functions that take a previous ``MazeState`` plus an ``Action`` and return a
*new* ``MazeState``; no mutation happens in-place. Outcome evaluation only
reads it.

Design notes:

* Per-cell stores are **persistent** collections keyed by :class:`Position`
  (``pyrsistent.PSet`` for walls, ``pyrsistent.PMap`` for collectibles).
  Absence of a key means the cell does not carry that property.
* Collectible quantities are the only values gameplay changes besides the
  agent position and turn counter.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from pyrsistent import PMap, PSet, pmap, pset

from collector_maze.components import Collectible, Position


@dataclass(frozen=True)
class MazeState:
    """Immutable grid snapshot.

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        agent (Position): Current agent position.
        start (Position): Agent position at level start.
        finish (Position | None): Goal tile for plain maze levels.
        wall (PSet[Position]): Impassable cells.
        collectible (PMap[Position, Collectible]): Collectible cells and their quantities.
        turn (int): Number of actions executed (0-based).
    """

    width: int
    height: int
    agent: Position
    start: Position
    finish: Optional[Position] = None

    wall: PSet[Position] = pset()
    collectible: PMap[Position, Collectible] = pmap()

    turn: int = 0

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies on the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_wall_or_out_of_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` is a wall or off the grid."""
        return not self.in_bounds(pos) or pos in self.wall

    def for_each_collectible_cell(self) -> Iterator[Tuple[Position, Collectible]]:
        """Yield ``(position, collectible)`` for every collectible cell.

        Iteration order is unspecified; callers must only aggregate.
        """
        return iter(self.collectible.items())

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields for diagnostics."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pset()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
