"""User-facing message catalog.

Templates use :meth:`str.format` placeholders. Hosts that localize supply
their own ``MessageFormatter`` with the same keys and parameters.
"""

from typing import Any, Callable, Dict, Mapping, Optional

MessageFormatter = Callable[[str, Mapping[str, Any]], str]

MESSAGES: Dict[str, str] = {
    "collector_too_many_blocks": (
        "You used too many blocks. Try solving this puzzle with no more than "
        "{block_limit} blocks."
    ),
    "collector_collected_nothing": (
        "You didn't collect anything. Make sure your program picks up some "
        "treasure."
    ),
    "collector_collected_some": "You collected {count} pieces of treasure. Can you get them all?",
    "collector_collected_everything": "Congratulations! You collected all {count} pieces of treasure.",
    "collector_collected_too_many": (
        "You tried to collect treasure from a square that was already empty."
    ),
    "collector_collected_not_enough": (
        "You need to collect at least {goal} pieces of treasure to pass this level."
    ),
}


def format_message(key: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Render the catalog template ``key`` with ``params``.

    Raises:
        KeyError: If ``key`` is not in the catalog or a placeholder has no
            matching parameter.
    """
    return MESSAGES[key].format(**(params or {}))
