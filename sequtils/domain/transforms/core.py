"""
Pure functional operations over sequences.

This module contains stateless, side-effect free higher-order functions over
finite ordered sequences. They accept any iterable, never mutate it, and build
a new list (or a scalar) for their result.

Operations follow functional programming principles:
- Immutability: Inputs are read once and left untouched
- Currying: Caller functions come first and the sequence last, so partial
  application yields a Transform waiting for its sequence
- Composition: Partially applied operations chain with create_pipeline
- Short-circuiting: find_index and every stop at the deciding element
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from toolz import compose_left, curry

from sequtils.config import get_logger, resilient_operation

logger = get_logger(__name__)

# Type variables for generic operations
A = TypeVar("A")
B = TypeVar("B")

# Type alias for a partially applied operation awaiting its sequence
Transform = Callable[[Iterable[Any]], Any]

# Sentinel returned by find_index when nothing matches
NOT_FOUND = -1


# === Core Pipeline Functions ===


def create_pipeline(*operations: Transform) -> Transform:
    """
    Compose multiple operations into a single one, applied left to right.

    Args:
        *operations: Partially applied operations to compose

    Returns:
        A single function running each operation on the previous result
    """
    return compose_left(*operations)


# === Selection ===


@curry
@resilient_operation("filter_by_predicate")
def filter_by_predicate(
    predicate: Callable[[A], bool],
    items: Iterable[A],
) -> list[A]:
    """
    Keep the items for which a predicate holds.

    Args:
        predicate: Function returning True for items to keep
        items: Sequence to filter

    Returns:
        New list of the matching items in their original order
    """
    seen = 0
    kept = []
    for item in items:
        seen += 1
        if predicate(item):
            kept.append(item)

    logger.debug("Filtered {} of {} items", len(kept), seen)
    return kept


@curry
@resilient_operation("find_index")
def find_index(predicate: Callable[[A], bool], items: Iterable[A]) -> int:
    """
    Find the position of the first item matching a predicate.

    Stops evaluating the predicate at the first match.

    Args:
        predicate: Function returning True for the item sought
        items: Sequence to search

    Returns:
        Index of the first match, or NOT_FOUND (-1) if no item matches
    """
    for index, item in enumerate(items):
        if predicate(item):
            logger.debug("Predicate matched at index {}", index)
            return index

    logger.debug("No item matched predicate")
    return NOT_FOUND


@curry
@resilient_operation("every")
def every(predicate: Callable[[A], bool], items: Iterable[A]) -> bool:
    """True if the predicate holds for all items (vacuously True when empty).

    Returns False at the first failing item without looking further.
    """
    checked = 0
    for index, item in enumerate(items):
        if not predicate(item):
            logger.debug("Predicate failed at index {}", index)
            return False
        checked += 1

    logger.debug("All {} items matched", checked)
    return True


# === Transformation ===


@curry
@resilient_operation("map_each")
def map_each(func: Callable[[A], B], items: Iterable[A]) -> list[B]:
    """
    Apply a function to every item.

    Args:
        func: Function applied to each item
        items: Sequence to transform

    Returns:
        New list where result[i] == func(items[i])
    """
    mapped = [func(item) for item in items]
    logger.debug("Mapped {} items", len(mapped))
    return mapped


@curry
@resilient_operation("reduce_left")
def reduce_left(func: Callable[[B, A], B], start: B, items: Iterable[A]) -> B:
    """
    Fold a sequence into a single value, left to right.

    The accumulator starts at ``start`` and becomes ``func(acc, item)`` for
    each item in order, so non-associative combiners are safe.

    Args:
        func: Combiner taking the accumulator and the next item
        start: Initial accumulator, returned as-is for an empty sequence
        items: Sequence to fold

    Returns:
        Final accumulator value
    """
    acc = start
    folded = 0
    for item in items:
        acc = func(acc, item)
        folded += 1

    logger.debug("Reduced {} items", folded)
    return acc


# === Generation ===


def int_range(start: int, end: int) -> list[int]:
    """
    Build the integers of the half-open interval [start, end), stepping by 1.

    Args:
        start: First value (inclusive)
        end: Upper bound (exclusive)

    Returns:
        New list of integers, empty when end <= start
    """
    return list(range(start, end))
