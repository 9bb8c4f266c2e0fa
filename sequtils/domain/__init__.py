"""sequtils domain layer - stateless sequence operations."""

from . import transforms

# Re-export key operations for convenience
from .transforms import (
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
    # Modules
    "transforms",
    # Operations
    "NOT_FOUND",
    "Transform",
    "create_pipeline",
    "every",
    "filter_by_predicate",
    "find_index",
    "int_range",
    "map_each",
    "reduce_left",
]
