"""Domain layer test fixtures - plain values and caller functions.

Fast creation, no external dependencies, function-scoped for isolation.
"""

import pytest


@pytest.fixture
def numbers():
    """Integers 1..6 for filter/map/fold tests."""
    return [1, 2, 3, 4, 5, 6]


@pytest.fixture
def words():
    """Short words with varying lengths."""
    return ["fig", "apple", "kiwi", "banana", "plum"]


@pytest.fixture
def is_even():
    """Predicate matching even integers."""
    return lambda n: n % 2 == 0


@pytest.fixture
def double():
    """Transform doubling its input."""
    return lambda n: n * 2


@pytest.fixture
def recording():
    """Wrap a predicate so every item it is called with gets recorded.

    Usage: ``pred = recording(is_even)`` then inspect ``pred.calls``.
    """

    def wrap(predicate):
        def recorder(item):
            recorder.calls.append(item)
            return predicate(item)

        recorder.calls = []
        return recorder

    return wrap
