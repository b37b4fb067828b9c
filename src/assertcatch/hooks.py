"""Process-wide hook for reporting fatal programmer errors.

Library code reports misuse through ``on_error`` (or ``error_handler()``
directly). The default handler aborts the process; tests install a handler
that throws an ``AssertionFailure`` instead, see ``assertcatch.testing``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, NoReturn

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[str, str, int], NoReturn]


def default_error_handler(message: str, file: str, line: int) -> NoReturn:
    logger.critical("Fatal error: %s (%s:%s)", message, file, line)
    sys.stderr.flush()
    os.abort()


_error_handler: ErrorHandler = default_error_handler


def error_handler() -> ErrorHandler:
    return _error_handler


def set_error_handler(handler: ErrorHandler) -> None:
    global _error_handler
    if not callable(handler):
        raise TypeError(f"error handler must be callable, got {type(handler).__name__}")
    _error_handler = handler


def set_default_error_handler() -> None:
    global _error_handler
    _error_handler = default_error_handler


def on_error(message: str = "") -> NoReturn:
    """Report ``message`` through the installed handler, located at the caller."""
    frame = sys._getframe(1)
    _error_handler(message, frame.f_code.co_filename, frame.f_lineno)
    # A handler must not return; fall back to the default if one does.
    default_error_handler(f"error handler returned for: {message}", frame.f_code.co_filename, frame.f_lineno)
