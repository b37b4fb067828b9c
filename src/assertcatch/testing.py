"""Helpers for tests that expect code to report a fatal error."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, NoReturn

from assertcatch import hooks
from assertcatch.failure import AssertionFailure


def _throwing_handler(message: str, file: str, line: int) -> NoReturn:
    AssertionFailure(message=message, file=file, line=line).throw()


@contextmanager
def raising_error_handler() -> Iterator[None]:
    previous = hooks.error_handler()
    hooks.set_error_handler(_throwing_handler)
    try:
        yield
    finally:
        hooks.set_error_handler(previous)


def catch_error_handler(block: Callable[[], object]) -> AssertionFailure | None:
    with raising_error_handler():
        return AssertionFailure.catch_within(block)


def expect_error_handler(
    block: Callable[[], object],
    *,
    message: str | None = None,
    check: Callable[[AssertionFailure], bool] | None = None,
) -> AssertionFailure:
    """Run ``block`` and require that it invoked the error handler.

    Raises ``AssertionError`` when the handler was not invoked, when
    ``message`` differs from the reported message, or when ``check``
    rejects the failure. Returns the failure otherwise.
    """
    failure = catch_error_handler(block)
    if failure is None:
        raise AssertionError("expected the error handler to be invoked")
    if message is not None and failure.message != message:
        raise AssertionError(
            f"expected error handler message {message!r}, got {failure.message!r} ({failure.file}:{failure.line})"
        )
    if check is not None and not check(failure):
        raise AssertionError(f"error handler invoked with unexpected failure: {failure}")
    return failure
