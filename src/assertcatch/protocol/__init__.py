from .messages import (
    ReportMessage,
    UncaughtExceptionMessage,
    UncaughtFailureMessage,
    parse_message,
)
from .report import ReportParseError, read_report, write_report

__all__ = [
    "ReportMessage",
    "ReportParseError",
    "UncaughtExceptionMessage",
    "UncaughtFailureMessage",
    "parse_message",
    "read_report",
    "write_report",
]
