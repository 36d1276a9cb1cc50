"""Collect system.

Takes one unit from the collectible cell under the agent. The remaining
quantity is not clamped: collecting from an empty cell drives it negative,
which :func:`collector_maze.classifier.classify` later reports as
``COLLECTED_TOO_MANY``. Collecting on a cell without a collectible is a no-op.
"""

from dataclasses import replace

from collector_maze.state import MazeState


def collect_system(state: MazeState) -> MazeState:
    """Decrement the remaining quantity at the agent's position by one."""
    cell = state.collectible.get(state.agent)
    if cell is None:
        return state
    return replace(
        state,
        collectible=state.collectible.set(
            state.agent, replace(cell, current=cell.current - 1)
        ),
    )
