"""
This module provides the `filter_` component, which lazily keeps the values
of a sequence that satisfy a predicate.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Tuple

from ..core.sequence import KeyedStream, as_pairs
from ..core.stage import lazy_operation


@lazy_operation
def filter_(items: Iterable[Any], predicate: Callable[[Any, Any], Any]) -> KeyedStream:
    """
    Lazily yields the values for which ``predicate(key, value)`` is truthy.

    Source keys are dropped: kept values are re-keyed 0, 1, 2, ... in the
    order they are emitted. The predicate runs exactly once per source
    element, at the moment the next output element is requested.

    Args:
        items: The source key/value sequence.
        predicate: ``(key, value) -> bool``.

    Returns:
        A `KeyedStream` of ``(index, value)`` pairs.
    """
    return KeyedStream(_filter(items, predicate))


def _filter(items, predicate) -> Iterator[Tuple[int, Any]]:
    index = 0
    for key, value in as_pairs(items):
        if predicate(key, value):
            yield index, value
            index += 1
