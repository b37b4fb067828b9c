from __future__ import annotations

import sys
from pathlib import Path

import pytest

from assertcatch import AssertionFailure
from assertcatch.isolation import bootstrap
from assertcatch.protocol import UncaughtExceptionMessage, UncaughtFailureMessage, read_report


@pytest.fixture
def restore_excepthook():
    previous = sys.excepthook
    yield
    sys.excepthook = previous


def test_report_hook_writes_failure_then_delegates(tmp_path: Path, restore_excepthook) -> None:
    delegated: list[BaseException] = []
    sys.excepthook = lambda exc_type, exc, tb: delegated.append(exc)
    report_path = tmp_path / "report.json"
    failure = AssertionFailure("x must be positive", "validator.src", 42)

    bootstrap.install_report_hook(report_path)
    sys.excepthook(AssertionFailure, failure, None)

    assert read_report(report_path) == UncaughtFailureMessage(
        message="x must be positive", file="validator.src", line=42
    )
    assert delegated == [failure]


def test_report_hook_writes_other_exceptions(tmp_path: Path, restore_excepthook) -> None:
    sys.excepthook = lambda exc_type, exc, tb: None
    report_path = tmp_path / "report.json"

    bootstrap.install_report_hook(report_path)
    sys.excepthook(RuntimeError, RuntimeError("boom"), None)

    assert read_report(report_path) == UncaughtExceptionMessage(exc_type="RuntimeError", message="boom")


@pytest.mark.parametrize(("line", "reported"), [(None, "None"), ("top", "top")])
def test_report_hook_keeps_non_int_line_as_text(
    tmp_path: Path, restore_excepthook, line: object, reported: str
) -> None:
    sys.excepthook = lambda exc_type, exc, tb: None
    report_path = tmp_path / "report.json"
    failure = AssertionFailure("no line", "gen.py", line)  # type: ignore[arg-type]

    bootstrap.install_report_hook(report_path)
    sys.excepthook(AssertionFailure, failure, None)

    assert read_report(report_path) == UncaughtFailureMessage(message="no line", file="gen.py", line=reported)
