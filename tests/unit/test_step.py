# tests/unit/test_step.py

from dataclasses import replace

import pytest

from collector_maze.actions import Action
from collector_maze.components import Position
from collector_maze.moves import default_move_fn
from collector_maze.step import step
from tests.test_utils import make_corridor_state, make_walled_state


@pytest.mark.parametrize(
    "action, expected",
    [
        (Action.UP, (1, 0)),
        (Action.DOWN, (1, 2)),
        (Action.LEFT, (0, 1)),
        (Action.RIGHT, (2, 1)),
    ],
)
def test_default_move_fn(action: Action, expected: tuple[int, int]) -> None:
    state = replace(make_walled_state(), agent=Position(1, 1))
    assert default_move_fn(state, action) == [Position(*expected)]


def test_step_moves_and_counts_turn() -> None:
    state = make_corridor_state([1, 1])
    state = step(state, Action.RIGHT)
    assert state.agent == Position(1, 0)
    assert state.turn == 1


def test_step_blocked_still_counts_turn() -> None:
    state = make_corridor_state([1])
    new_state = step(state, Action.UP)
    assert new_state.agent == state.agent
    assert new_state.turn == 1


def test_step_collect_and_wait() -> None:
    state = step(make_corridor_state([2]), Action.RIGHT)
    state = step(state, Action.COLLECT)
    state = step(state, Action.WAIT)
    assert state.collectible[Position(1, 0)].current == 1
    assert state.turn == 3


def test_step_custom_move_fn_stops_at_first_block() -> None:
    def slide_right(state, action):  # type: ignore[no-untyped-def]
        return [Position(state.agent.x + i, state.agent.y) for i in (1, 2, 3)]

    state = step(make_corridor_state([1, 1]), Action.RIGHT, slide_right)
    assert state.agent == Position(2, 0)


def test_step_invalid_action() -> None:
    with pytest.raises(ValueError):
        step(make_corridor_state([1]), "jump")  # type: ignore[arg-type]
