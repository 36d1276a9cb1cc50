from dataclasses import replace

from collector_maze.components import Collectible, Position
from collector_maze.systems.collect import collect_system
from tests.test_utils import make_corridor_state


def test_collect_takes_one_unit() -> None:
    state = replace(make_corridor_state([3]), agent=Position(1, 0))
    new_state = collect_system(state)
    assert new_state.collectible[Position(1, 0)] == Collectible(original=3, current=2)
    # Input snapshot untouched
    assert state.collectible[Position(1, 0)].current == 3


def test_collect_from_empty_cell_goes_negative() -> None:
    state = replace(make_corridor_state([1], [0]), agent=Position(1, 0))
    new_state = collect_system(state)
    assert new_state.collectible[Position(1, 0)].current == -1


def test_collect_off_collectible_is_noop() -> None:
    state = make_corridor_state([3])
    assert collect_system(state) is state
