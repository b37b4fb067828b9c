from .failure import AssertionFailure
from .hooks import (
    ErrorHandler,
    default_error_handler,
    error_handler,
    on_error,
    set_default_error_handler,
    set_error_handler,
)

__version__ = "0.1.0"

__all__ = [
    "AssertionFailure",
    "ErrorHandler",
    "default_error_handler",
    "error_handler",
    "on_error",
    "set_default_error_handler",
    "set_error_handler",
]
