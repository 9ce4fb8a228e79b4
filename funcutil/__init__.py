"""
Functional Utilities Package

A small toolkit of side-effect-light helpers for sequences and mappings:
ranges, zipping and pairing, cyclic indexing, key/value reshaping, safe lookups.
"""

import logging

from .control import (
    MISSING,
    MemoCache,
    Missing,
    PanicError,
    cached,
    default_cache,
    fake_use,
    get_property,
    has_property,
    init_array,
    is_json,
    noop,
    panic,
    pass_back,
    pipe,
    unthrow,
)
from .mappings import (
    cover,
    ensure_delete_from_set,
    index_by,
    map_entries,
    map_keys,
    map_number_entries,
    map_number_keys,
    map_values,
    nullableobj_to_partial,
    object_assign_if_truthy,
    typed_entries,
    typed_from_entries,
    typed_keys,
    typed_number_entries,
    typed_number_keys,
)
from .sequences import (
    apply,
    at,
    cycle,
    cyclic_pairs,
    final_join,
    find_from,
    find_index_from,
    fold,
    int_range,
    pairs,
    zip_longest,
    zip_shortest,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__author__ = "Nikita Shein"
__email__ = "shein.nikita@gmail.com"
__all__ = [
    # Sequence helpers
    "int_range",
    "zip_shortest",
    "zip_longest",
    "pairs",
    "cyclic_pairs",
    "at",
    "cycle",
    "find_from",
    "find_index_from",
    "fold",
    "apply",
    "final_join",
    # Mapping helpers
    "typed_keys",
    "typed_number_keys",
    "typed_entries",
    "typed_number_entries",
    "typed_from_entries",
    "map_keys",
    "map_number_keys",
    "map_values",
    "map_entries",
    "map_number_entries",
    "cover",
    "nullableobj_to_partial",
    "index_by",
    "object_assign_if_truthy",
    "ensure_delete_from_set",
    # Safety and control helpers
    "MISSING",
    "Missing",
    "get_property",
    "has_property",
    "unthrow",
    "MemoCache",
    "default_cache",
    "cached",
    "init_array",
    "pass_back",
    "pipe",
    "noop",
    "fake_use",
    "PanicError",
    "panic",
    "is_json",
]
