"""Built-in movement generator functions.

Each *move function* maps (state, action) -> sequence of ``Position`` objects
the agent will attempt for a single directional action. The movement system
consumes them in order and stops at the first blocked one.

Contract (``MoveFn``):

* Must return at least one ``Position`` (usually just the neighbour).
* Should not mutate ``MazeState``.
"""

from typing import Dict, Sequence, Tuple

from collector_maze.actions import Action
from collector_maze.components import Position
from collector_maze.state import MazeState


DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


def default_move_fn(state: MazeState, action: Action) -> Sequence[Position]:
    """Single-tile cardinal step.

    Returns the adjacent tile in the direction of ``action`` without bounds
    wrapping. Caller handles blocking and validity.
    """
    dx, dy = DIRECTION_DELTAS[action]
    return [Position(state.agent.x + dx, state.agent.y + dy)]
