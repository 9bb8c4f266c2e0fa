"""Shared test fixtures."""

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect Loguru records emitted while the test runs.

    The sequtils namespace is disabled on import, so it is enabled for the
    duration of the test and disabled again afterwards.
    """
    records = []
    logger.enable("sequtils")
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="TRACE",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)
    logger.disable("sequtils")
