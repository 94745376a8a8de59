"""
Error handling utilities for the command line surface.

The decoder itself never raises for bad MIDI input. The CLI layer, however,
reads text from users and files, and those failures need a friendly message
on screen with the technical detail kept in the log.

Pattern::

    try:
        ...
    except Exception as e:
        logger.exception("Error running command")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
"""

import logging
from typing import Optional

from .base import Remote25SLError

logger = logging.getLogger(__name__)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, Remote25SLError):
        return error.user_message, error.recovery_hint

    # For standard exceptions, create a user-friendly message
    error_type = type(error).__name__
    return f"{error_type}: {error}", None


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("decode stdin", re_raise=False) as ctx:
            for line in stream:
                ...

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, Remote25SLError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        # Return True to suppress exception, False to re-raise
        return not self.re_raise
