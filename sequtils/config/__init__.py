"""Configuration module for sequtils.

Public API:
----------
get_settings() -> Settings
    Build a Settings instance from the current environment and .env file

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Enable and configure sequtils logging

resilient_operation(operation_name: str)
    Decorator that logs exceptions escaping an operation and re-raises them

Usage:
------
```python
from sequtils.config import get_settings
level = get_settings().logging.console_level

from sequtils.config import get_logger
logger = get_logger(__name__)
logger.debug("Starting operation")
```
"""

from .logging import (
    SERVICE_NAME,
    get_logger,
    resilient_operation,
    setup_loguru_logger,
)
from .settings import LoggingConfig, Settings, get_settings

__all__ = [
    # Logging
    "SERVICE_NAME",
    "get_logger",
    "resilient_operation",
    "setup_loguru_logger",
    # Settings
    "LoggingConfig",
    "Settings",
    "get_settings",
]
