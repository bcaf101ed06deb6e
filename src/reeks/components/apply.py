"""
This module provides `apply`, a side-effecting walk with early exit.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from ..core.log import get_logger
from ..core.sequence import as_pairs
from ..core.stage import terminal_operation

logger = get_logger("reeks.apply")


@terminal_operation
def apply(items: Iterable[Any], apply_func: Callable[[Any, Any], Any]) -> None:
    """
    Calls ``apply_func(key, value)`` for each element until it returns falsy.

    The element that produced the falsy result is the last one pulled from
    the source; nothing after it is read. Note that a function returning
    None (no explicit return) stops after the first element.

    Args:
        items: The source key/value sequence.
        apply_func: ``(key, value) -> bool``; return a falsy value to stop.
    """
    for position, (key, value) in enumerate(as_pairs(items)):
        if not apply_func(key, value):
            logger.debug("apply_stopped", position=position)
            break
