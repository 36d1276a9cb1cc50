"""Program execution host.

Runs a compiled player program against a level and produces its graded
result. The level subtype controls judging: variants that check success on
every move stop the run as soon as :meth:`LevelSubtype.finished` holds,
while variants that defer to the end (collector levels) are judged once via
:meth:`LevelSubtype.on_execution_finish` after the last action.

Usage::

    config, state = load_level(definition)
    level = Level.from_config(config, state)
    result = run_program(level, Program.of([Action.RIGHT, Action.COLLECT]))
    print(result.test_result, result.message)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

from collector_maze.actions import Action
from collector_maze.levels.config import LevelConfig
from collector_maze.levels.loader import load_level
from collector_maze.levels.subtypes import LevelSubtype, create_subtype
from collector_maze.moves import default_move_fn
from collector_maze.state import MazeState
from collector_maze.step import step
from collector_maze.telemetry import ExecutionInfo
from collector_maze.types import BlockCount, MoveFn, OutcomeCode, TestResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    """A compiled player program.

    Attributes:
        actions: Actions in execution order.
        block_count: Countable blocks the program was built from. Loops and
            other control blocks make this differ from ``len(actions)``.
    """

    actions: Tuple[Action, ...]
    block_count: BlockCount

    @classmethod
    def of(cls, actions: Sequence[Action], block_count: Optional[BlockCount] = None) -> "Program":
        actions = tuple(actions)
        return cls(actions, len(actions) if block_count is None else block_count)


@dataclass
class Level:
    """A loaded level: its subtype, initial grid and telemetry.

    ``initial_state`` is never modified; every run starts from it.
    """

    subtype: LevelSubtype
    initial_state: MazeState
    move_fn: MoveFn = default_move_fn
    execution_info: ExecutionInfo = field(default_factory=ExecutionInfo)

    @classmethod
    def from_config(cls, config: LevelConfig, state: MazeState) -> "Level":
        return cls(subtype=create_subtype(config), initial_state=state)

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "Level":
        config, state = load_level(definition)
        return cls.from_config(config, state)


@dataclass(frozen=True)
class RunResult:
    """Outcome of one program run.

    Attributes:
        state: Grid at the end of execution.
        termination_value: Level-specific terminal value, if one was recorded.
        test_result: Grade for the run.
        message: User-facing feedback, if the level provides one.
    """

    state: MazeState
    termination_value: Optional[OutcomeCode]
    test_result: TestResult
    message: Optional[str]

    @property
    def passed(self) -> bool:
        return self.test_result >= TestResult.ALL_PASS


def run_program(level: Level, program: Program) -> RunResult:
    """Execute ``program`` on ``level`` and grade the run.

    Args:
        level (Level): Level to run on. Its telemetry is reset for this run.
        program (Program): Compiled player program.

    Returns:
        RunResult: Final state, terminal value, grade and message.
    """
    subtype = level.subtype
    info = level.execution_info
    info.reset(program.block_count)

    state = level.initial_state
    check_on_move = not subtype.check_success_only_at_end()
    for action in program.actions:
        state = step(state, action, level.move_fn)
        if check_on_move and subtype.finished(state):
            logger.debug("Level finished after %d actions", state.turn)
            break

    subtype.on_execution_finish(state, info)

    termination_value = info.termination_value
    test_result = subtype.get_test_results(termination_value, state)
    message = (
        subtype.get_message(termination_value, state)
        if subtype.has_message(test_result)
        else None
    )
    return RunResult(
        state=state,
        termination_value=termination_value,
        test_result=test_result,
        message=message,
    )
