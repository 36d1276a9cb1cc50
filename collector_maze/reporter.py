"""Outcome reporting.

Maps a recorded :class:`OutcomeCode` to a user-facing message and a
:class:`TestResult` grade. Both lookups are pure and cover every code; a
missing or unknown code yields no message and defers grading to the generic
evaluator, which knows nothing about collectibles.
"""

import logging
from typing import Dict, Optional

from collector_maze.classifier import potential_max_collected, total_collected
from collector_maze.levels.config import LevelConfig
from collector_maze.locale import MessageFormatter, format_message
from collector_maze.state import MazeState
from collector_maze.types import GenericGradeFn, OutcomeCode, TestResult

logger = logging.getLogger(__name__)


COLLECTOR_GRADES: Dict[OutcomeCode, TestResult] = {
    OutcomeCode.TOO_MANY_BLOCKS: TestResult.APP_SPECIFIC_FAIL,
    OutcomeCode.COLLECTED_NOTHING: TestResult.APP_SPECIFIC_FAIL,
    OutcomeCode.COLLECTED_TOO_MANY: TestResult.APP_SPECIFIC_FAIL,
    OutcomeCode.COLLECTED_NOT_ENOUGH: TestResult.APP_SPECIFIC_FAIL,
    OutcomeCode.COLLECTED_SOME: TestResult.APP_SPECIFIC_ACCEPTABLE_FAIL,
    OutcomeCode.COLLECTED_EVERYTHING: TestResult.ALL_PASS,
}
"""Outcome -> grade table for collector levels."""


def generic_test_results(had_error: bool) -> TestResult:
    """Fallback grade for runs without a level-specific outcome."""
    if had_error:
        return TestResult.ERROR_FAIL
    return TestResult.LEVEL_INCOMPLETE_FAIL


def message_for(
    code: Optional[OutcomeCode],
    state: MazeState,
    config: LevelConfig,
    formatter: MessageFormatter = format_message,
) -> Optional[str]:
    """Return the message for ``code``, or None if no message applies.

    Counts are read from ``state`` at call time.
    """
    if code == OutcomeCode.TOO_MANY_BLOCKS:
        return formatter("collector_too_many_blocks", {"block_limit": config.block_limit})
    if code == OutcomeCode.COLLECTED_NOTHING:
        return formatter("collector_collected_nothing", {})
    if code == OutcomeCode.COLLECTED_SOME:
        return formatter("collector_collected_some", {"count": total_collected(state)})
    if code == OutcomeCode.COLLECTED_EVERYTHING:
        return formatter(
            "collector_collected_everything", {"count": potential_max_collected(state)}
        )
    if code == OutcomeCode.COLLECTED_TOO_MANY:
        return formatter("collector_collected_too_many", {})
    if code == OutcomeCode.COLLECTED_NOT_ENOUGH:
        if not config.min_collected:
            logger.warning("No collection goal configured for %r", code)
            return None
        return formatter("collector_collected_not_enough", {"goal": config.min_collected})
    logger.warning("No collector message for termination value %r", code)
    return None


def grade_for(
    code: Optional[OutcomeCode],
    generic_grade_fn: GenericGradeFn = generic_test_results,
) -> TestResult:
    """Return the grade for ``code``, deferring to ``generic_grade_fn`` if unknown."""
    if code is not None and code in COLLECTOR_GRADES:
        return COLLECTOR_GRADES[code]
    logger.warning("No collector grade for termination value %r; using generic", code)
    return generic_grade_fn(False)
