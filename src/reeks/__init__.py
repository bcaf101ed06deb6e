# reeks: lazy functional iteration over key/value sequences
# __init__.py for the main package

# Import key components to the top-level namespace for easier access
from .config import Config, load_config
from .core.errors import InvalidBatchSizeError, PipelineCompositionError, ReeksError
from .core.pipeline import Pipeline
from .core.sequence import KeyedStream, as_pairs, pairs
from .core.stage import ConfigValue, Stage, stage
from .components import (
    apply,
    batch_apply,
    bi_map,
    extract_field,
    filter_,
    map_,
    pass_through_func,
    pass_through_key_func,
    reduce_,
    sequential_key_func,
    simple_predicate_func,
    sum_reduce_func,
    to_array,
    wrap_batch,
)


__all__ = [
    # Sequences
    "KeyedStream",
    "as_pairs",
    "pairs",

    # Operations
    "map_",
    "bi_map",
    "filter_",
    "apply",
    "extract_field",
    "to_array",
    "reduce_",
    "wrap_batch",
    "batch_apply",

    # Stage function factories
    "sequential_key_func",
    "pass_through_func",
    "pass_through_key_func",
    "simple_predicate_func",
    "sum_reduce_func",

    # Composition
    "Pipeline",
    "Stage",
    "stage",
    "ConfigValue",
    "Config",
    "load_config",

    # Errors
    "ReeksError",
    "InvalidBatchSizeError",
    "PipelineCompositionError",
]

__version__ = "0.1.0"
