"""
This module provides `map_` and `bi_map`, the lazy 1-to-1 transformations.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Tuple

from ..core.sequence import KeyedStream, as_pairs
from ..core.stage import lazy_operation


@lazy_operation
def map_(
    items: Iterable[Any],
    map_func: Callable[[Any, Any], Any],
    keep_key: bool = True,
) -> KeyedStream:
    """
    Lazily applies ``map_func(key, value)`` to every element.

    Args:
        items: The source key/value sequence.
        map_func: The function producing the new value.
        keep_key: If True, each result keeps its source key. Otherwise results
            are keyed 0, 1, 2, ... in emission order.

    Returns:
        A `KeyedStream` of ``(key, map_func(key, value))`` pairs.
    """
    return KeyedStream(_map(items, map_func, keep_key))


def _map(items, map_func, keep_key) -> Iterator[Tuple[Any, Any]]:
    if keep_key:
        for key, value in as_pairs(items):
            yield key, map_func(key, value)
    else:
        for index, (key, value) in enumerate(as_pairs(items)):
            yield index, map_func(key, value)


@lazy_operation
def bi_map(
    items: Iterable[Any],
    key_func: Callable[[Any, Any], Any],
    item_func: Callable[[Any, Any], Any],
) -> KeyedStream:
    """
    Lazily maps both the key and the value of every element.

    For each element ``key_func`` is called first and ``item_func`` second;
    both are always called. When ``key_func`` returns None the element is
    dropped, which makes ``bi_map`` a filter and a re-keying in one pass.

    Keys are not checked for uniqueness. Callers that materialize the result
    (e.g. with `to_array`) get last-write-wins on collisions.

    ``bi_map(items, sequential_key_func(), pass_through_func())`` is
    equivalent to ``map_(items, pass_through_func(), keep_key=False)``.

    Args:
        items: The source key/value sequence.
        key_func: ``(key, value) -> new_key or None``.
        item_func: ``(key, value) -> new_value``.

    Returns:
        A `KeyedStream` of ``(new_key, new_value)`` pairs.
    """
    return KeyedStream(_bi_map(items, key_func, item_func))


def _bi_map(items, key_func, item_func) -> Iterator[Tuple[Any, Any]]:
    for key, value in as_pairs(items):
        new_key = key_func(key, value)
        new_value = item_func(key, value)
        if new_key is not None:
            yield new_key, new_value
