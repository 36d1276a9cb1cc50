"""Action enumerations.

:class:`Action` is the instruction set a player's program is compiled to. Each
program block maps to one action; ``MOVE_ACTIONS`` is the canonical ordered
list of movement actions and checks like ``if action in MOVE_ACTIONS`` are
preferred over enum name comparisons.
"""

from enum import StrEnum, auto


class Action(StrEnum):
    """String enum of agent actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        COLLECT: Take one unit from the collectible cell under the agent.
        WAIT: Consume a turn without doing anything.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    COLLECT = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]
