"""
API middleware package.
"""

from .error_handler import ErrorHandlerMiddleware, add_error_handlers, error_response
from .logging import LoggingMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
    "add_error_handlers",
    "error_response",
]
