"""Single-record report a child interpreter leaves behind when it dies.

The file holds at most one JSON object: the exception that escaped the
child's top level. A missing or empty file means nothing escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from .messages import ReportMessage, parse_message


@dataclass
class ReportParseError(Exception):
    message: str
    path: Path

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


def write_report(path: Path, report: ReportMessage) -> Path:
    path.write_text(report.model_dump_json() + "\n", encoding="utf-8")
    return path


def read_report(path: Path) -> ReportMessage | None:
    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReportParseError("Invalid JSON in report", path) from exc
    try:
        return parse_message(data)
    except ValueError as exc:
        raise ReportParseError(str(exc), path) from exc
