from typing import List

import pytest

from collector_maze.actions import Action
from collector_maze.components import Position
from collector_maze.runner import Level, Program, run_program
from collector_maze.types import OutcomeCode, TestResult
from tests.test_utils import COLLECTOR_DEFINITION, MAZE_DEFINITION

R, L, D, C = Action.RIGHT, Action.LEFT, Action.DOWN, Action.COLLECT

COLLECT_ALL: List[Action] = [R, C, C, R, C, C, C, L, D, C, C, C, C, C]
COLLECT_FIVE: List[Action] = [R, C, C, R, C, C, C]


@pytest.mark.parametrize(
    "actions, block_count, code, grade",
    [
        (COLLECT_ALL, 6, OutcomeCode.COLLECTED_EVERYTHING, TestResult.ALL_PASS),
        ([R], None, OutcomeCode.COLLECTED_NOTHING, TestResult.APP_SPECIFIC_FAIL),
        ([R, C], 20, OutcomeCode.TOO_MANY_BLOCKS, TestResult.APP_SPECIFIC_FAIL),
        ([R, C, C], None, OutcomeCode.COLLECTED_NOT_ENOUGH, TestResult.APP_SPECIFIC_FAIL),
        (COLLECT_FIVE, None, OutcomeCode.COLLECTED_SOME, TestResult.APP_SPECIFIC_ACCEPTABLE_FAIL),
        ([R, C, C, C], None, OutcomeCode.COLLECTED_TOO_MANY, TestResult.APP_SPECIFIC_FAIL),
    ],
)
def test_collector_run_outcomes(
    actions: List[Action], block_count: int | None, code: OutcomeCode, grade: TestResult
) -> None:
    level = Level.from_definition(COLLECTOR_DEFINITION)
    result = run_program(level, Program.of(actions, block_count))
    assert result.termination_value == code
    assert result.test_result == grade
    assert result.message is not None


def test_collected_everything_passes_with_count() -> None:
    level = Level.from_definition(COLLECTOR_DEFINITION)
    result = run_program(level, Program.of(COLLECT_ALL, block_count=6))
    assert result.passed
    assert result.message is not None and "10" in result.message


def test_over_collection_beats_block_limit() -> None:
    level = Level.from_definition(COLLECTOR_DEFINITION)
    result = run_program(level, Program.of([R, C, C, C], block_count=99))
    assert result.termination_value == OutcomeCode.COLLECTED_TOO_MANY


def test_collector_runs_whole_program() -> None:
    # Collector success is only judged at the end, so trailing moves still run.
    level = Level.from_definition(COLLECTOR_DEFINITION)
    actions = COLLECT_ALL + [Action.UP, Action.WAIT]
    result = run_program(level, Program.of(actions, block_count=6))
    assert result.state.turn == len(actions)
    assert result.state.agent == Position(2, 1)
    assert result.termination_value == OutcomeCode.COLLECTED_EVERYTHING


def test_maze_stops_when_finished() -> None:
    level = Level.from_definition(MAZE_DEFINITION)
    result = run_program(level, Program.of([R, R, L, L]))
    assert result.state.turn == 2
    assert result.state.agent == Position(3, 1)
    assert result.termination_value is None
    assert result.test_result == TestResult.ALL_PASS
    assert result.message is None


def test_maze_incomplete() -> None:
    level = Level.from_definition(MAZE_DEFINITION)
    result = run_program(level, Program.of([R]))
    assert result.test_result == TestResult.LEVEL_INCOMPLETE_FAIL
    assert not result.passed


def test_rerun_resets_terminal_value() -> None:
    level = Level.from_definition(COLLECTOR_DEFINITION)
    first = run_program(level, Program.of([R]))
    second = run_program(level, Program.of(COLLECT_FIVE))
    assert first.termination_value == OutcomeCode.COLLECTED_NOTHING
    assert second.termination_value == OutcomeCode.COLLECTED_SOME
    assert level.execution_info.blocks_used() == len(COLLECT_FIVE)
    # Each run starts from the untouched initial grid.
    assert level.initial_state.collectible[Position(2, 1)].current == 2


def test_program_block_count_defaults_to_length() -> None:
    program = Program.of([R, C])
    assert program.block_count == 2
    assert program.actions == (R, C)
