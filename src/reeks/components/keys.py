"""
Small factories for the stage functions most pipelines need.

Each factory returns a fresh callable with the signature expected by the
operation it is meant for, e.g. ``(key, value)`` for ``map_`` and
``to_array`` or ``(accumulator, key, value)`` for ``reduce_``.
"""
from __future__ import annotations

import itertools
from typing import Any, Callable

from typeguard import typechecked


@typechecked
def sequential_key_func(start: int = 0) -> Callable[..., int]:
    """
    Returns a key function that yields ``start``, ``start + 1``, ... per call.

    Arguments passed to the returned function are ignored, so it can stand in
    for any ``(key, value)`` key function. Each call to this factory creates
    an independent counter.

    Example:
        >>> next_key = sequential_key_func(10)
        >>> next_key("a", 1), next_key("b", 2)
        (10, 11)
    """
    counter = itertools.count(start)

    def _next_key(*_: Any) -> int:
        return next(counter)

    return _next_key


def pass_through_func() -> Callable[[Any, Any], Any]:
    """Returns ``(key, value) -> value``."""
    return lambda key, value: value


def pass_through_key_func() -> Callable[[Any, Any], Any]:
    """Returns ``(key, value) -> key``, e.g. to keep original keys in `to_array`."""
    return lambda key, value: key


@typechecked
def simple_predicate_func(return_value: bool) -> Callable[..., bool]:
    """Returns a predicate that answers ``return_value`` for every element."""
    return lambda key, value: return_value


def sum_reduce_func() -> Callable[[Any, Any, Any], Any]:
    """Returns ``(accumulator, key, value) -> accumulator + value``."""
    return lambda accumulator, key, value: accumulator + value
