"""
Terminal consumers that drain a sequence into a concrete list or dict.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from ..core.sequence import as_pairs
from ..core.stage import terminal_operation


@terminal_operation
def extract_field(items: Iterable[Any], column_func: Callable[[Any], Any]) -> List[Any]:
    """
    Returns ``[column_func(value), ...]`` for every element, in order.

    Keys are discarded. The whole source is consumed.

    Example:
        >>> extract_field({"a": {"id": 1}, "b": {"id": 2}}, lambda row: row["id"])
        [1, 2]
    """
    return [column_func(value) for _, value in as_pairs(items)]


@terminal_operation
def to_array(items: Iterable[Any], id_func: Callable[[Any, Any], Any]) -> Dict[Any, Any]:
    """
    Drains a sequence into a dict keyed by ``id_func(key, value)``.

    Elements for which ``id_func`` returns None are left out. When two
    elements produce the same key the later one wins, so this both re-keys
    and de-duplicates in a single pass.

    Args:
        items: The source key/value sequence.
        id_func: ``(key, value) -> new_key or None``. Use
            `pass_through_key_func` to keep the source keys.

    Returns:
        A new dict of ``new_key -> value``.
    """
    result: Dict[Any, Any] = {}
    for key, value in as_pairs(items):
        new_key = id_func(key, value)
        if new_key is None:
            continue
        result[new_key] = value
    return result
