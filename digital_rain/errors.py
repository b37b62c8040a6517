"""
Error types and top-level error handling for Digital Rain.

Every failure the program can report is a RainError carrying a category
and the exit status the CLI should return for it.

USAGE:
    from digital_rain.errors import ColumnAllocationError, handle_error

    try:
        columns = simulator.resize_columns(columns, width, height)
    except ColumnAllocationError as e:
        return handle_error(e, "resize")
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for reporting."""
    # Resource exhaustion (column allocation)
    RESOURCE = "resource"

    # Terminal or platform capability missing
    PLATFORM = "platform"

    # Unknown/uncategorized
    UNKNOWN = "unknown"


class RainError(Exception):
    """Base class for errors raised by the rain engine."""
    category = ErrorCategory.UNKNOWN
    exit_status = 1

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def to_dict(self):
        """Convert to dictionary for logging."""
        return {
            'error_type': type(self).__name__,
            'error_message': self.message,
            'category': self.category.value,
            'operation': self.operation,
            'exit_status': self.exit_status,
        }


class ColumnAllocationError(RainError):
    """The column array could not be allocated (startup or resize)."""
    category = ErrorCategory.RESOURCE

    def __init__(self, width: int, operation: str = "allocate"):
        super().__init__(f"out of memory allocating {width} columns", operation)
        self.width = width


class TerminalUnavailableError(RainError):
    """curses (or a usable terminal) is not available."""
    category = ErrorCategory.PLATFORM


def handle_error(error: RainError, operation: str = "",
                 stream: Optional[TextIO] = None) -> int:
    """
    Log an error, report it on stderr and return the process exit status.

    Must only be called after the terminal has been restored, otherwise the
    message lands inside the curses screen.
    """
    stream = stream if stream is not None else sys.stderr
    context = error.to_dict()
    if operation and not context['operation']:
        context['operation'] = operation
    logger.error(f"[{context['category'].upper()}] {context['operation'] or 'run'}: "
                 f"{context['error_message']}")
    print(f"digital-rain: {error.message}", file=stream)
    return error.exit_status
