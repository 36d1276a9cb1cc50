"""Level subtypes.

A subtype decides *when* a run is judged and *how* its outcome is reported.
The host (:mod:`collector_maze.runner`) only talks to the
:class:`LevelSubtype` protocol; the concrete variant is picked from
``LevelConfig.level_type`` via :data:`SUBTYPE_REGISTRY`.

* :class:`MazeSubtype`: plain maze. Success is checked after every move and
  means standing on the finish tile. No level-specific outcome codes.
* :class:`CollectorSubtype`: collector. Success is only judged once the whole
  program has run; the block limit is a hard requirement and the outcome is
  one :class:`OutcomeCode` recorded on the run's telemetry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

from collector_maze.classifier import classify
from collector_maze.components import Position
from collector_maze.levels.config import LevelConfig
from collector_maze.locale import MessageFormatter, format_message
from collector_maze.renderer.corners import RenderPort, corner_placements
from collector_maze.reporter import generic_test_results, grade_for, message_for
from collector_maze.state import MazeState
from collector_maze.telemetry import ExecutionInfo
from collector_maze.types import GenericGradeFn, LevelType, OutcomeCode, TestResult

logger = logging.getLogger(__name__)


class LevelSubtype(Protocol):
    """Capabilities the host queries on a level variant."""

    @property
    def config(self) -> LevelConfig: ...

    def is_collector(self) -> bool: ...

    def check_success_only_at_end(self) -> bool: ...

    def finished(self, state: MazeState) -> bool: ...

    def on_execution_finish(
        self, state: MazeState, execution_info: ExecutionInfo
    ) -> None: ...

    def has_message(self, test_result: TestResult) -> bool: ...

    def get_message(
        self, termination_value: Optional[OutcomeCode], state: MazeState
    ) -> Optional[str]: ...

    def get_test_results(
        self, termination_value: Optional[OutcomeCode], state: MazeState
    ) -> TestResult: ...

    def draw_tile(
        self, port: RenderPort, state: MazeState, pos: Position, tile_id: int
    ) -> None: ...


@dataclass(frozen=True)
class MazeSubtype:
    """Plain maze: reach the finish tile."""

    config: LevelConfig
    generic_grade_fn: GenericGradeFn = generic_test_results

    def is_collector(self) -> bool:
        return False

    def check_success_only_at_end(self) -> bool:
        return False

    def finished(self, state: MazeState) -> bool:
        return state.finish is not None and state.agent == state.finish

    def on_execution_finish(self, state: MazeState, execution_info: ExecutionInfo) -> None:
        pass

    def has_message(self, test_result: TestResult) -> bool:
        return False

    def get_message(
        self, termination_value: Optional[OutcomeCode], state: MazeState
    ) -> Optional[str]:
        return None

    def get_test_results(
        self, termination_value: Optional[OutcomeCode], state: MazeState
    ) -> TestResult:
        if self.finished(state):
            return TestResult.ALL_PASS
        return self.generic_grade_fn(False)

    def draw_tile(
        self, port: RenderPort, state: MazeState, pos: Position, tile_id: int
    ) -> None:
        port.draw_tile(state, pos, tile_id)


@dataclass(frozen=True)
class CollectorSubtype:
    """Collector level: gather collectibles within a hard block limit.

    Runs are classified only after the program finishes; see
    :func:`collector_maze.classifier.classify` for the ordered rules.
    """

    config: LevelConfig
    generic_grade_fn: GenericGradeFn = generic_test_results
    formatter: MessageFormatter = format_message

    def is_collector(self) -> bool:
        return True

    def check_success_only_at_end(self) -> bool:
        return True

    def finished(self, state: MazeState) -> bool:
        return False

    def on_execution_finish(self, state: MazeState, execution_info: ExecutionInfo) -> None:
        """Classify the finished run and record it as the terminal value."""
        code = classify(state, execution_info.blocks_used(), self.config)
        logger.debug(
            "Collector run finished: %s (blocks=%d, limit=%s)",
            code.name,
            execution_info.blocks_used(),
            self.config.block_limit,
        )
        execution_info.terminate_with_value(code)

    def has_message(self, test_result: TestResult) -> bool:
        return True

    def get_message(
        self, termination_value: Optional[OutcomeCode], state: MazeState
    ) -> Optional[str]:
        return message_for(termination_value, state, self.config, self.formatter)

    def get_test_results(
        self, termination_value: Optional[OutcomeCode], state: MazeState
    ) -> TestResult:
        return grade_for(termination_value, self.generic_grade_fn)

    def draw_tile(
        self, port: RenderPort, state: MazeState, pos: Position, tile_id: int
    ) -> None:
        port.draw_tile(state, pos, tile_id)
        for placement in corner_placements(state, pos, tile_id):
            port.draw_corner(placement)


SUBTYPE_REGISTRY: Dict[LevelType, Callable[[LevelConfig], LevelSubtype]] = {
    LevelType.MAZE: MazeSubtype,
    LevelType.COLLECTOR: CollectorSubtype,
}
"""Level type -> subtype constructor."""


def create_subtype(config: LevelConfig) -> LevelSubtype:
    """Instantiate the subtype selected by ``config.level_type``.

    Raises:
        ValueError: If the level type has no registered subtype.
    """
    factory = SUBTYPE_REGISTRY.get(config.level_type)
    if factory is None:
        raise ValueError(f"Unknown level type: {config.level_type}")
    return factory(config)
