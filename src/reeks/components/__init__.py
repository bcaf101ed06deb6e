# reeks.components
# The operations that work on key/value sequences, plus the stage function
# factories commonly passed to them.

from .apply import apply
from .batch import batch_apply, wrap_batch
from .collect import extract_field, to_array
from .filter import filter_
from .keys import (
    pass_through_func,
    pass_through_key_func,
    sequential_key_func,
    simple_predicate_func,
    sum_reduce_func,
)
from .map import bi_map, map_
from .reduce import reduce_

__all__ = [
    "apply",
    "batch_apply",
    "wrap_batch",
    "extract_field",
    "to_array",
    "filter_",
    "pass_through_func",
    "pass_through_key_func",
    "sequential_key_func",
    "simple_predicate_func",
    "sum_reduce_func",
    "bi_map",
    "map_",
    "reduce_",
]
