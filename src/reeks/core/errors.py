from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .stage import Stage


class ReeksError(Exception):
    """Base class for all exceptions raised by reeks itself.

    Exceptions raised by caller-supplied functions or by the source being
    iterated are never wrapped in a ``ReeksError``; they propagate as-is.
    """

    pass


class InvalidBatchSizeError(ReeksError, ValueError):
    """Raised when a batching operation is given a batch size below one."""

    def __init__(self, batch_size: int):
        self.batch_size = batch_size
        super().__init__(f"Batch size must be a positive integer, got {batch_size!r}")


class PipelineCompositionError(ReeksError, TypeError):
    """Raised when two pipeline components cannot be connected."""

    def __init__(self, upstream: Optional["Stage"], downstream: Any, message: str):
        self.upstream = upstream
        self.downstream = downstream
        self.message = message
        upstream_name = upstream.name if upstream is not None else "<source>"
        downstream_name = getattr(downstream, "name", type(downstream).__name__)
        super().__init__(
            f"Cannot connect stage '{upstream_name}' to '{downstream_name}': {message}"
        )
