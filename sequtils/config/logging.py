"""Logging configuration and utilities using Loguru.

The library logs through Loguru but stays silent until the host application
opts in, since ``sequtils`` disables its own namespace on import.

Public API:
----------
setup_loguru_logger(verbose: bool = False, config: Settings | None = None) -> None
    Enable sequtils logging and install console (and optional file) sinks

get_logger(name: str) -> Logger
    Get a context-aware logger for your module
    Usage: logger = get_logger(__name__)

@resilient_operation(operation_name: str)
    Decorator that logs failures raised through an operation and re-raises them

Quick Start:
-----------
1. Turn on logging in your application:
    ```python
    from sequtils.config import setup_loguru_logger
    setup_loguru_logger(verbose=True)
    ```

2. Get a logger for a module:
    ```python
    from sequtils.config import get_logger
    logger = get_logger(__name__)
    logger.debug("Filtered {} of {} items", 3, 6)
    ```
"""

from functools import wraps
import inspect
from pathlib import Path
import sys
from typing import Any

from loguru import logger

from .settings import Settings, get_settings

SERVICE_NAME = "sequtils"

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


def setup_loguru_logger(verbose: bool = False, config: Settings | None = None) -> None:
    """Configure Loguru sinks for sequtils output.

    Args:
        verbose: Log at debug level with detailed tracebacks on the console
        config: Settings to read levels and log file from (defaults to a
            fresh load from the environment)

    Note:
        - Re-enables the sequtils namespace disabled at import
        - Removes all existing sinks, including Loguru's default stderr sink
        - The file sink is only added when ``logging.log_file`` is set
    """
    config = config or get_settings()

    logger.enable(SERVICE_NAME)
    logger.remove()

    # Add contextual info to all log records
    logger.configure(extra={"service": SERVICE_NAME, "module": "root"})

    # -------------------------------------------------------------------------
    # Console Handler
    # -------------------------------------------------------------------------
    console_level = "DEBUG" if verbose else config.logging.console_level
    logger.add(
        sink=sys.stdout,
        level=console_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
            "<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )

    # -------------------------------------------------------------------------
    # File Handler
    # -------------------------------------------------------------------------
    if config.logging.log_file is None:
        return

    log_file_path = Path(config.logging.log_file)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        sink=str(log_file_path),
        level=config.logging.file_level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[service]} | {extra[module]} | {name}:{function}:{line} | {message}",
        rotation="10 MB",
        retention="1 week",
        compression="zip",
        backtrace=True,
        diagnose=True,
        catch=True,
        serialize=True,  # JSON structured records
    )


# =============================================================================
# LOGGER FACTORY
# =============================================================================


def get_logger(name: str) -> Any:  # Use Any for Loguru logger type
    """Get a logger bound to the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Loguru logger carrying ``module`` and ``service`` in its extra dict
    """
    return logger.bind(
        module=name,
        service=SERVICE_NAME,
    )


# =============================================================================
# ERROR HANDLING DECORATORS
# =============================================================================


def resilient_operation(operation_name=None):
    """Decorator that logs exceptions escaping an operation, then re-raises.

    Exceptions raised by caller-supplied functions reach the caller
    unchanged; the decorator only records which operation they passed through.

    Args:
        operation_name: Optional name for the operation (defaults to function name)

    Returns:
        Decorated function with error logging

    Example:
        >>> @resilient_operation("map_each")
        >>> def map_each(func, items):
        >>>     return [func(item) for item in items]
    """

    def decorator(func):
        op_name = operation_name or func.__name__
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            # Arity errors stay unlogged; toolz.curry binds partials on them
            signature.bind(*args, **kwargs)
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.bind(service=SERVICE_NAME, operation=op_name).exception(
                    f"Error in {op_name}: {e!s}"
                )
                raise

        return wrapper

    return decorator
