"""
This module provides the `reduce_` component, a strict left fold over a
key/value sequence.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from ..core.sequence import as_pairs
from ..core.stage import terminal_operation


@terminal_operation
def reduce_(
    items: Iterable[Any],
    reduce_func: Callable[[Any, Any, Any], Any],
    start: Any,
) -> Any:
    """
    Folds the sequence from left to right.

    ``reduce_func(accumulator, key, value)`` is called once per element,
    starting with ``accumulator = start``; its result becomes the next
    accumulator. Unlike `functools.reduce`, the starting value is required
    and an empty sequence simply returns it.

    Args:
        items: The source key/value sequence.
        reduce_func: ``(accumulator, key, value) -> accumulator``.
        start: The initial accumulator.

    Returns:
        The final accumulator.
    """
    accumulator = start
    for key, value in as_pairs(items):
        accumulator = reduce_func(accumulator, key, value)
    return accumulator
