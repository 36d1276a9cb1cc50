"""Collector outcome classification.

Pure functions over a :class:`MazeState` snapshot that decide how a collector
run ended once the player's program has finished. Every aggregate is
recomputed from the grid on each call; nothing is cached because the grid
changes between runs.

Classification is total. Corrupt cell values (negative or NaN remainders) are
not raised as errors; they are folded into ``OutcomeCode.COLLECTED_TOO_MANY``
so the run still resolves to a graded, user-visible result.
"""

import math
from typing import Optional

from collector_maze.levels.config import LevelConfig
from collector_maze.state import MazeState
from collector_maze.types import BlockCount, CollectibleValue, OutcomeCode


def potential_max_collected(state: MazeState) -> CollectibleValue:
    """Total quantity available across all collectible cells."""
    return sum(cell.original for _, cell in state.for_each_collectible_cell())


def total_collected(state: MazeState) -> CollectibleValue:
    """Total quantity taken from all collectible cells."""
    return sum(cell.collected for _, cell in state.for_each_collectible_cell())


def collected_too_many(state: MazeState) -> bool:
    """Did the program take more from some cell than it held?"""
    return any(
        cell.current < 0 or math.isnan(cell.current)
        for _, cell in state.for_each_collectible_cell()
    )


def collected_all(state: MazeState) -> bool:
    """Has every available unit been collected?"""
    return total_collected(state) == potential_max_collected(state)


def exceeds_block_limit(blocks_used: BlockCount, block_limit: Optional[int]) -> bool:
    return block_limit is not None and blocks_used > block_limit


def classify(
    state: MazeState, blocks_used: BlockCount, config: LevelConfig
) -> OutcomeCode:
    """Classify a finished run.

    Checks are ordered and the first match wins; the categories overlap, so
    the order is part of the contract:

    1. nothing collected
    2. some cell over-collected (negative or NaN remainder)
    3. more blocks than ``config.block_limit``
    4. everything collected
    5. fewer than ``config.min_collected`` (when set)
    6. otherwise, some collected

    A run that collected nothing is reported as ``COLLECTED_NOTHING`` even if
    individual cells are corrupt but cancel out.

    Args:
        state (MazeState): Grid at end of execution.
        blocks_used (int): Countable blocks in the executed program.
        config (LevelConfig): Level thresholds.

    Returns:
        OutcomeCode: The run's terminal classification.
    """
    collected = total_collected(state)

    if collected == 0:
        return OutcomeCode.COLLECTED_NOTHING
    if collected_too_many(state):
        return OutcomeCode.COLLECTED_TOO_MANY
    if exceeds_block_limit(blocks_used, config.block_limit):
        return OutcomeCode.TOO_MANY_BLOCKS
    if collected == potential_max_collected(state):
        return OutcomeCode.COLLECTED_EVERYTHING
    if config.min_collected and collected < config.min_collected:
        return OutcomeCode.COLLECTED_NOT_ENOUGH
    return OutcomeCode.COLLECTED_SOME
