"""Pure functional operations over sequences."""

from .core import (
    NOT_FOUND,
    Transform,
    create_pipeline,
    every,
    filter_by_predicate,
    find_index,
    int_range,
    map_each,
    reduce_left,
)

__all__ = [
    # Sentinel
    "NOT_FOUND",
    # Core pipeline functions
    "Transform",
    "create_pipeline",
    # Selection
    "every",
    "filter_by_predicate",
    "find_index",
    # Generation
    "int_range",
    # Transformation
    "map_each",
    "reduce_left",
]
