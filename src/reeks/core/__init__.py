# reeks.core
# This package contains the core classes of reeks: the keyed sequence
# abstraction, Stage and Pipeline.

from .errors import InvalidBatchSizeError, PipelineCompositionError, ReeksError
from .pipeline import Pipeline
from .sequence import KeyedStream, as_pairs, pairs
from .stage import ConfigValue, Stage, lazy_operation, stage, terminal_operation

__all__ = [
    "Pipeline",
    "Stage",
    "stage",
    "ConfigValue",
    "lazy_operation",
    "terminal_operation",
    "KeyedStream",
    "as_pairs",
    "pairs",
    "ReeksError",
    "InvalidBatchSizeError",
    "PipelineCompositionError",
]
