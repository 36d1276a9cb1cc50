"""State reducer.

:func:`step` is the only gameplay mutation entry point. It is pure: it returns
a *new* :class:`collector_maze.state.MazeState` with the action applied and
the turn counter bumped. Success is not evaluated here; whether and when to
check it is decided by the level subtype (see
:mod:`collector_maze.runner`).
"""

from dataclasses import replace

from collector_maze.actions import Action, MOVE_ACTIONS
from collector_maze.moves import default_move_fn
from collector_maze.state import MazeState
from collector_maze.systems.collect import collect_system
from collector_maze.systems.movement import movement_system
from collector_maze.types import MoveFn


def step(state: MazeState, action: Action, move_fn: MoveFn = default_move_fn) -> MazeState:
    """Advance the maze by one action.

    Args:
        state (MazeState): Previous immutable grid state.
        action (Action): Action to apply.
        move_fn (MoveFn): Candidate position generator for movement actions.

    Returns:
        MazeState: Next state snapshot.

    Raises:
        ValueError: If the action is not recognized.
    """
    if action in MOVE_ACTIONS:
        state = _step_move(state, action, move_fn)
    elif action == Action.COLLECT:
        state = collect_system(state)
    elif action == Action.WAIT:
        pass
    else:
        raise ValueError("Action is not valid")

    return replace(state, turn=state.turn + 1)


def _step_move(state: MazeState, action: Action, move_fn: MoveFn) -> MazeState:
    """Walk the candidate positions, stopping at the first blocked one."""
    for next_pos in move_fn(state, action):
        moved_state = movement_system(state, next_pos)
        if moved_state == state:
            break
        state = moved_state
    return state
