"""Common type aliases and enumerations.

``OutcomeCode`` is the closed set of terminal classifications a collector run
can end in; ``TestResult`` is the generic grading scale shared by every level
type. ``MoveFn`` is the pluggable movement extension point used by
:func:`collector_maze.step.step`.
"""

from enum import IntEnum, StrEnum, auto
from typing import Callable, Sequence, TYPE_CHECKING


# Forward declaration for MoveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from collector_maze.state import MazeState
    from collector_maze.actions import Action
    from collector_maze.components import Position

BlockCount = int
CollectibleValue = float

MoveFn = Callable[["MazeState", "Action"], Sequence["Position"]]


class OutcomeCode(IntEnum):
    """Terminal classification of a collector run.

    Integer values are stable; they are what telemetry records as the run's
    termination value.
    """

    TOO_MANY_BLOCKS = 0
    COLLECTED_NOTHING = 1
    COLLECTED_SOME = 2
    COLLECTED_EVERYTHING = 3
    COLLECTED_TOO_MANY = 4
    COLLECTED_NOT_ENOUGH = 5


class TestResult(IntEnum):
    """Generic grading scale.

    Ordered: anything ``>= ALL_PASS`` is a pass, and
    ``APP_SPECIFIC_ACCEPTABLE_FAIL`` ranks above the hard failures.
    """

    __test__ = False  # not a pytest test class

    NO_TESTS_RUN = -1
    ERROR_FAIL = 0
    LEVEL_INCOMPLETE_FAIL = 2
    APP_SPECIFIC_FAIL = 5
    APP_SPECIFIC_ACCEPTABLE_FAIL = 21
    ALL_PASS = 100


class LevelType(StrEnum):
    """Level variants selectable from a level definition."""

    MAZE = auto()
    COLLECTOR = auto()


class TileType(IntEnum):
    """Tile codes used by serialized level maps."""

    WALL = 0
    OPEN = 1
    START = 2
    FINISH = 3


GenericGradeFn = Callable[[bool], TestResult]
