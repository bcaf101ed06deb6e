"""
This module defines the `Stage` class and the `stage` factory.

A `Stage` binds one reeks operation (``map_``, ``filter_``, ``wrap_batch``,
...) to every argument except the source sequence, so the operation can be
composed with others into a `Pipeline` and applied later.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from .log import get_logger

LAZY = "lazy"
TERMINAL = "terminal"

_KIND_ATTR = "__reeks_kind__"


def lazy_operation(func: Callable[..., Any]) -> Callable[..., Any]:
    """Marks an operation as returning a lazy `KeyedStream`."""
    setattr(func, _KIND_ATTR, LAZY)
    return func


def terminal_operation(func: Callable[..., Any]) -> Callable[..., Any]:
    """Marks an operation as draining its source into a final value.

    Nothing may be composed after a stage built from a terminal operation.
    """
    setattr(func, _KIND_ATTR, TERMINAL)
    return func


def operation_kind(func: Callable[..., Any]) -> str:
    return getattr(func, _KIND_ATTR, LAZY)


class ConfigValue:
    """A stage argument that is looked up in the run's configuration.

    Example:
        .. code-block:: python

            batches = stage(wrap_batch, ConfigValue("batch.size", 100))
            batches.run(rows, config_path="pipeline.yml")

    Attributes:
        key: Dot-separated config key.
        default: Value used when the key is absent from the config.
    """

    __slots__ = ("key", "default")

    def __init__(self, key: str, default: Any = None):
        self.key = key
        self.default = default

    def resolve(self, config) -> Any:
        return config.get(self.key, self.default)

    def __repr__(self) -> str:
        return f"ConfigValue({self.key!r}, default={self.default!r})"


class Stage:
    """A single, deferred step in a pipeline.

    Attributes:
        operation: The reeks operation this stage applies.
        args: Positional arguments passed after the source sequence.
        kwargs: Keyword arguments passed to the operation.
        name: The name of the stage, used for logging and `repr`.
        stage_type: ``"lazy"`` or ``"terminal"``.
    """

    def __init__(
        self,
        operation: Callable[..., Any],
        *args: Any,
        name: Optional[str] = None,
        **kwargs: Any,
    ):
        if not callable(operation):
            raise TypeError(f"Stage operation must be callable, got {type(operation)}")

        self.operation = operation
        self.args: Tuple[Any, ...] = args
        self.kwargs: Dict[str, Any] = kwargs
        self.name = name or getattr(operation, "__name__", "Stage").rstrip("_")
        self.stage_type = operation_kind(operation)
        self.logger = get_logger(f"reeks.stage.{self.name}")

    @property
    def is_terminal(self) -> bool:
        return self.stage_type == TERMINAL

    def __repr__(self) -> str:
        return f"Stage(name='{self.name}', type='{self.stage_type}')"

    def __or__(self, other: Union["Stage", "Pipeline"]) -> "Pipeline":
        """Composes this stage with another using the `|` operator."""
        from .pipeline import Pipeline
        return Pipeline([self]) | other

    def __rshift__(self, other: Union["Stage", "Pipeline"]) -> "Pipeline":
        """Provides an alternative `>>` operator for composition."""
        return self.__or__(other)

    def apply_to(self, items: Any, config=None) -> Any:
        """Applies the bound operation to ``items``.

        ``ConfigValue`` arguments are resolved against ``config`` first. With
        no config, their defaults are used.
        """
        if config is None:
            from ..config import Config
            config = Config({})
        args = [_resolve(a, config) for a in self.args]
        kwargs = {k: _resolve(v, config) for k, v in self.kwargs.items()}
        return self.operation(items, *args, **kwargs)

    def run(self, data: Iterable[Any], *, config_path: Optional[str] = None) -> Any:
        """Executes the stage as a single-stage pipeline."""
        from .pipeline import Pipeline
        return Pipeline([self], name=self.name).run(data, config_path=config_path)

    def collect(self, data: Iterable[Any], *, config_path: Optional[str] = None) -> Any:
        """Executes the stage and materializes a lazy result into a list of pairs."""
        from .pipeline import Pipeline
        return Pipeline([self], name=self.name).collect(data, config_path=config_path)


def _resolve(value: Any, config) -> Any:
    if isinstance(value, ConfigValue):
        return value.resolve(config)
    return value


def stage(operation: Callable[..., Any], *args: Any, name: Optional[str] = None, **kwargs: Any) -> Stage:
    """Creates a `Stage` that applies ``operation`` with the given arguments.

    Example:
        .. code-block:: python

            pipeline = (
                stage(map_, lambda k, v: v * 2)
                | stage(filter_, lambda k, v: v > 10)
                | stage(wrap_batch, 100)
            )
            for batch_number, batch in pipeline.run(numbers):
                ...

    Args:
        operation: A reeks operation (or any callable taking the source first).
        *args: Arguments following the source sequence.
        name: A custom name for the stage.
        **kwargs: Keyword arguments for the operation.

    Returns:
        A new `Stage`.
    """
    return Stage(operation, *args, name=name, **kwargs)
