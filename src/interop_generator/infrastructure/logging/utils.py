#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import time
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator to log execution time of a function.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        logger.debug(f"Starting {func_name}")
        start_time = time()

        try:
            result = func(*args, **kwargs)
            elapsed = time() - start_time
            logger.debug(f"Completed {func_name} in {elapsed * 1000:.1f}ms")
            return result
        except Exception as e:
            elapsed = time() - start_time
            logger.error(f"Failed {func_name} after {elapsed * 1000:.1f}ms: {e}")
            raise

    return cast("F", wrapper)


def log_preview(logger: logging.Logger, title: str, content: str, max_lines: int = 30) -> None:
    """
    Log the first lines of a generated artifact at DEBUG level.

    Args:
        logger: Logger to write to
        title: Artifact name shown above the preview
        content: Generated text
        max_lines: Number of lines to show
    """
    lines = content.splitlines()
    logger.debug(f"Preview of {title} (first {min(max_lines, len(lines))} lines):")
    logger.debug("=" * 60)
    for line in lines[:max_lines]:
        logger.debug(line)
    if len(lines) > max_lines:
        logger.debug(f"... and {len(lines) - max_lines} more lines")
    logger.debug("=" * 60)
