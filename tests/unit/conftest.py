"""Unit test fixtures - isolate settings and Loguru global state."""

import os
import sys

import pytest
from loguru import logger


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no SEQUTILS_* variables set."""
    monkeypatch.chdir(tmp_path)
    for key in [k for k in os.environ if k.upper().startswith("SEQUTILS_")]:
        monkeypatch.delenv(key)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_loguru():
    """Restore Loguru's default sink and the disabled namespace after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("sequtils")
