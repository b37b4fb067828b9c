from __future__ import annotations

from pathlib import Path

import pytest

from assertcatch.protocol import (
    ReportParseError,
    UncaughtExceptionMessage,
    UncaughtFailureMessage,
    parse_message,
    read_report,
    write_report,
)


def test_write_then_read_failure_report(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    report = UncaughtFailureMessage(message="x must be positive", file="validator.src", line=42)

    write_report(report_path, report)

    assert report_path.read_text(encoding="utf-8") == (
        '{"type":"uncaught_failure","message":"x must be positive","file":"validator.src","line":42}\n'
    )
    assert read_report(report_path) == report


def test_text_line_survives_round_trip(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    report = UncaughtFailureMessage(message="m", file="f.py", line="None")

    write_report(report_path, report)

    assert read_report(report_path) == report


def test_write_replaces_previous_report(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    write_report(report_path, UncaughtExceptionMessage(exc_type="KeyError", message="'k'"))
    write_report(report_path, UncaughtExceptionMessage(exc_type="ValueError", message="bad"))

    assert read_report(report_path) == UncaughtExceptionMessage(exc_type="ValueError", message="bad")


def test_missing_or_empty_report_means_nothing_escaped(tmp_path: Path) -> None:
    empty_path = tmp_path / "empty.json"
    empty_path.write_text("", encoding="utf-8")

    assert read_report(tmp_path / "missing.json") is None
    assert read_report(empty_path) is None


def test_invalid_json_rejected(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    report_path.write_text("not json\n", encoding="utf-8")

    with pytest.raises(ReportParseError, match="Invalid JSON in report"):
        read_report(report_path)


def test_incomplete_failure_rejected(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    report_path.write_text('{"type":"uncaught_failure","message":"m"}\n', encoding="utf-8")

    with pytest.raises(ReportParseError):
        read_report(report_path)


def test_unknown_type_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown message type"):
        parse_message({"type": "task_start"})
