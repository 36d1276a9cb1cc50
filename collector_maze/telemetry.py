"""Execution telemetry.

The host records two facts about every program run: how many countable blocks
the program used, and the single terminal value the level subtype assigned
when execution finished. :class:`ExecutionInfo` owns both for the duration of
one run and is reset when the next run begins.
"""

from typing import Generic, Optional, TypeVar

from collector_maze.types import BlockCount, OutcomeCode

T = TypeVar("T")


class WriteOnce(Generic[T]):
    """Single-assignment cell.

    ``set`` succeeds once; a second ``set`` before ``reset`` raises
    ``RuntimeError``.
    """

    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._is_set = False

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def value(self) -> Optional[T]:
        return self._value

    def set(self, value: T) -> None:
        if self._is_set:
            raise RuntimeError(
                f"Value already assigned ({self._value!r}); cannot assign {value!r}"
            )
        self._value = value
        self._is_set = True

    def reset(self) -> None:
        self._value = None
        self._is_set = False


class ExecutionInfo:
    """Per-run telemetry shared between the host and the level subtype.

    Attributes:
        blocks_used_count: Countable blocks in the program being run.
    """

    def __init__(self, blocks_used: BlockCount = 0) -> None:
        self.blocks_used_count = blocks_used
        self._terminal: WriteOnce[OutcomeCode] = WriteOnce()

    def blocks_used(self) -> BlockCount:
        return self.blocks_used_count

    def terminate_with_value(self, code: OutcomeCode) -> None:
        """Record the run's terminal outcome. Allowed once per run."""
        self._terminal.set(code)

    @property
    def terminated(self) -> bool:
        return self._terminal.is_set

    @property
    def termination_value(self) -> Optional[OutcomeCode]:
        return self._terminal.value

    def reset(self, blocks_used: BlockCount) -> None:
        """Start a new run, discarding the previous terminal value."""
        self.blocks_used_count = blocks_used
        self._terminal.reset()
