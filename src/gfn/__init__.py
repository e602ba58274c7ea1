"""gfn

Generic collection helpers for sequences and mappings: membership, ranges,
shuffling and sampling, set operations, grouping and counting, statistics,
and eager map/filter/reduce.

Every helper is a plain function with no shared state. The whole public API
is re-exported here, so ``import gfn`` and ``gfn.uniq(...)`` is the intended
usage.
"""

import logging as _logging

from .array import (
    all_,
    any_,
    chunk,
    concat,
    contains,
    copy,
    count,
    count_by,
    counter,
    counter_by,
    difference,
    difference_by,
    distribution,
    equal,
    equal_by,
    fill,
    find,
    find_last,
    for_each,
    group_by,
    index_of,
    intersection,
    intersection_by,
    is_sorted,
    is_sorted_by,
    last_index_of,
    range_,
    range_by,
    remove,
    repeat,
    reverse,
    sample,
    shuffle,
    to_set,
    union,
    union_by,
    uniq,
    uniq_by,
    unzip,
    zip_,
)
from .constraints import is_nan
from .errors import (
    DivideByZeroError,
    EmptyInputError,
    GfnError,
    InvalidArgumentError,
    SampleSizeExceededError,
)
from .fp import filter_, filter_kv, map_, reduce, reduce_kv
from .maps import (
    clear,
    clone,
    delete_by,
    different_keys,
    equal_kv,
    equal_kv_by,
    for_each_kv,
    get_or_default,
    intersect_keys,
    invert,
    is_disjoint,
    items,
    keys,
    reject,
    select,
    to_kv,
    update,
    values,
)
from .numeric import (
    abs_,
    divmod_,
    max_,
    max_by,
    mean,
    mean_by,
    min_,
    min_by,
    min_max,
    min_max_by,
    mode,
    mode_by,
    sum_,
    sum_by,
)
from .pair import Pair

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "__version__",
    # errors
    "GfnError",
    "EmptyInputError",
    "InvalidArgumentError",
    "SampleSizeExceededError",
    "DivideByZeroError",
    # values
    "Pair",
    "is_nan",
    # sequences
    "all_",
    "any_",
    "chunk",
    "concat",
    "contains",
    "copy",
    "count",
    "count_by",
    "counter",
    "counter_by",
    "difference",
    "difference_by",
    "distribution",
    "equal",
    "equal_by",
    "fill",
    "find",
    "find_last",
    "for_each",
    "group_by",
    "index_of",
    "intersection",
    "intersection_by",
    "is_sorted",
    "is_sorted_by",
    "last_index_of",
    "range_",
    "range_by",
    "remove",
    "repeat",
    "reverse",
    "sample",
    "shuffle",
    "to_set",
    "union",
    "union_by",
    "uniq",
    "uniq_by",
    "unzip",
    "zip_",
    # mappings
    "clear",
    "clone",
    "delete_by",
    "different_keys",
    "equal_kv",
    "equal_kv_by",
    "for_each_kv",
    "get_or_default",
    "intersect_keys",
    "invert",
    "is_disjoint",
    "items",
    "keys",
    "reject",
    "select",
    "to_kv",
    "update",
    "values",
    # numeric
    "abs_",
    "divmod_",
    "max_",
    "max_by",
    "mean",
    "mean_by",
    "min_",
    "min_by",
    "min_max",
    "min_max_by",
    "mode",
    "mode_by",
    "sum_",
    "sum_by",
    # functional
    "filter_",
    "filter_kv",
    "map_",
    "reduce",
    "reduce_kv",
]
