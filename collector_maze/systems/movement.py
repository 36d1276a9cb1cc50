"""Movement system.

Moves the agent to a candidate position unless the target is a wall or lies
off the grid. Blocked moves return the state unchanged.
"""

from dataclasses import replace

from collector_maze.components import Position
from collector_maze.state import MazeState


def movement_system(state: MazeState, next_pos: Position) -> MazeState:
    """Apply a single movement step if the destination is open."""
    if state.is_wall_or_out_of_bounds(next_pos):
        return state
    return replace(state, agent=next_pos)
