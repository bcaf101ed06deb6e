"""
The ordered key/value sequence shared by every reeks operation.

Sources come in three shapes: a ``KeyedStream`` produced by another
operation, a ``Mapping`` whose items are the pairs, or any other iterable
whose positions act as keys. ``as_pairs`` turns each of them into a single
forward-only iterator of ``(key, value)`` tuples without reading anything
up front.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class KeyedStream(Generic[K, V]):
    """A lazy, single-pass stream of ``(key, value)`` pairs.

    Every lazy reeks operation returns a ``KeyedStream``. It is an iterator:
    each ``next()`` pulls exactly one pair through the chain of operations
    that produced it, and an exhausted stream stays exhausted.

    Because the stream is tagged as already keyed, passing it to another
    operation keeps its keys instead of re-numbering its pairs.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[Tuple[K, V]]):
        self._pairs = iter(pairs)

    def __iter__(self) -> "KeyedStream[K, V]":
        return self

    def __next__(self) -> Tuple[K, V]:
        return next(self._pairs)

    def keys(self) -> Iterator[K]:
        """Lazily yields only the keys, consuming the stream."""
        return (key for key, _ in self)

    def values(self) -> Iterator[V]:
        """Lazily yields only the values, consuming the stream."""
        return (value for _, value in self)

    def __repr__(self) -> str:
        return f"KeyedStream({self._pairs!r})"


def pairs(iterable: Iterable[Tuple[K, V]]) -> KeyedStream[K, V]:
    """Marks an iterable of ``(key, value)`` tuples as a keyed sequence.

    Use this for generators that produce their own keys::

        def rows():
            for row in cursor:
                yield row["id"], row

        to_array(pairs(rows()), pass_through_key_func())
    """
    if isinstance(iterable, KeyedStream):
        return iterable
    return KeyedStream(iterable)


def as_pairs(source: Any) -> Iterator[Tuple[Any, Any]]:
    """Returns an iterator of ``(key, value)`` pairs over ``source``.

    - ``KeyedStream``: its own pairs.
    - ``Mapping``: ``source.items()`` in the mapping's order.
    - Any other iterable: ``enumerate(source)``.

    No element is read before the returned iterator is advanced.

    Raises:
        TypeError: If ``source`` is not iterable.
    """
    if isinstance(source, KeyedStream):
        return source
    if isinstance(source, Mapping):
        return iter(source.items())
    return enumerate(source)
