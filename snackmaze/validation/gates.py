"""
Validation gate decorator for maze generation.

Provides the @maze_gate decorator for wrapping a generator so every maze
it returns is checked before any session can use it.
"""

import functools
import logging
from typing import Callable

from .core import ValidationError, ValidationResult
from .maze_checks import validate_maze

logger = logging.getLogger(__name__)


def enforce_maze(maze, fail_fast: bool = True, log_warnings: bool = True) -> ValidationResult:
    """Validate a maze and raise if it has FAIL issues.

    Args:
        maze: The maze to validate
        fail_fast: If True, raise ValidationError on FAIL issues
        log_warnings: If True, log WARN issues

    Returns:
        The ValidationResult

    Raises:
        ValidationError: If fail_fast=True and validation fails
    """
    result = validate_maze(maze)

    if log_warnings:
        for issue in result.warnings:
            logger.warning(str(issue))

    if fail_fast and result.failed:
        logger.error(
            "Maze validation failed for %dx%d maze: %d errors",
            maze.rows, maze.cols, len(result.errors)
        )
        raise ValidationError(result)

    return result


def maze_gate(fail_fast: bool = True, log_warnings: bool = True) -> Callable:
    """Decorator that validates the Maze returned by the wrapped function.

    Args:
        fail_fast: If True, raise ValidationError on FAIL issues
        log_warnings: If True, log WARN issues

    Returns:
        Decorated function

    Usage:
        @maze_gate()
        def build(rows, cols) -> Maze:
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            maze = func(*args, **kwargs)
            enforce_maze(maze, fail_fast=fail_fast, log_warnings=log_warnings)
            return maze

        return wrapper
    return decorator
