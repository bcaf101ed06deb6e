"""
Batching operations: group a sequence into fixed-size dicts, either as a
lazy stream (`wrap_batch`) or by dispatching each batch to a callback
(`batch_apply`).

Both share the same flush rule. A full buffer is flushed when the *next*
element arrives, before that element is looked at, and whatever remains
after the source is exhausted is flushed as the last batch. An empty
source therefore produces no batches at all.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple

from typeguard import typechecked

from ..core.errors import InvalidBatchSizeError
from ..core.log import get_logger
from ..core.sequence import KeyedStream, as_pairs
from ..core.stage import lazy_operation, terminal_operation

logger = get_logger("reeks.batch")


def _check_batch_size(batch_size: int) -> None:
    if batch_size < 1:
        raise InvalidBatchSizeError(batch_size)


@lazy_operation
@typechecked
def wrap_batch(items: Iterable[Any], batch_size: int) -> KeyedStream:
    """
    Lazily splits a sequence into batches of ``batch_size`` elements.

    Each batch is a dict that keeps the original keys of its members, and is
    emitted under a batch number counting from 0. All batches hold
    ``batch_size`` elements except possibly the last one.

    ``batch_size`` is validated immediately, before anything is read.

    Example:
        >>> list(wrap_batch(["a", "b", "c"], 2))
        [(0, {0: 'a', 1: 'b'}), (1, {2: 'c'})]

    Args:
        items: The source key/value sequence.
        batch_size: The number of elements per batch, at least 1.

    Returns:
        A `KeyedStream` of ``(batch_number, batch)`` pairs.

    Raises:
        InvalidBatchSizeError: If ``batch_size`` is below 1.
    """
    _check_batch_size(batch_size)
    return KeyedStream(_wrap_batch(items, batch_size))


def _wrap_batch(items, batch_size: int) -> Iterator[Tuple[int, Dict[Any, Any]]]:
    batch_number = 0
    batch: Dict[Any, Any] = {}
    count = 0
    for key, value in as_pairs(items):
        if count == batch_size:
            logger.debug("batch_emitted", batch_number=batch_number, size=count)
            yield batch_number, batch
            batch = {}
            count = 0
            batch_number += 1
        batch[key] = value
        count += 1

    if batch:
        logger.debug("batch_emitted", batch_number=batch_number, size=count)
        yield batch_number, batch


@terminal_operation
@typechecked
def batch_apply(
    items: Iterable[Any],
    batch_size: int,
    batch_func: Callable[..., Any],
    item_bimap_func: Optional[Callable[..., Any]] = None,
) -> None:
    """
    Calls ``batch_func(batch_number, batch)`` for every batch of the sequence.

    For each element the steps run in this order:

    1. If the buffer already holds ``batch_size`` elements, it is passed to
       ``batch_func`` and a new buffer is started.
    2. If ``item_bimap_func`` is given, ``key, value = item_bimap_func(key, value)``.
       A None key drops the element; it never reaches a batch and does not
       count toward the batch size.
    3. The element is added to the buffer.

    A non-empty buffer left over at the end is flushed last. Each call to
    ``batch_func`` receives a fresh dict.

    Args:
        items: The source key/value sequence.
        batch_size: The number of elements per batch, at least 1.
        batch_func: ``(batch_number, batch) -> Any``; the result is ignored.
        item_bimap_func: Optional ``(key, value) -> (new_key, new_value)``.

    Raises:
        InvalidBatchSizeError: If ``batch_size`` is below 1.
    """
    _check_batch_size(batch_size)

    batch_number = 0
    batch: Dict[Any, Any] = {}
    count = 0
    for key, value in as_pairs(items):
        if count == batch_size:
            logger.debug("batch_dispatched", batch_number=batch_number, size=count)
            batch_func(batch_number, batch)
            batch = {}
            count = 0
            batch_number += 1
        if item_bimap_func is not None:
            key, value = item_bimap_func(key, value)
            if key is None:
                continue
        batch[key] = value
        count += 1

    if batch:
        logger.debug("batch_dispatched", batch_number=batch_number, size=count)
        batch_func(batch_number, batch)
