"""Child entry point for isolated runs.

Usage: ``python -m assertcatch.isolation.bootstrap --report PATH SCRIPT [ARGS...]``

Runs ``SCRIPT`` as ``__main__``. An exception escaping the script is written
to ``PATH`` as a single report message before the interpreter prints the
traceback and exits with a non-zero status.
"""

from __future__ import annotations

import argparse
import runpy
import sys
from pathlib import Path

from assertcatch.failure import AssertionFailure
from assertcatch.protocol import (
    UncaughtExceptionMessage,
    UncaughtFailureMessage,
    write_report,
)


def _report_for(exc: BaseException) -> UncaughtFailureMessage | UncaughtExceptionMessage:
    if isinstance(exc, AssertionFailure):
        # Construction accepts any line value; keep non-int ones as text.
        line = exc.line if type(exc.line) is int else str(exc.line)
        return UncaughtFailureMessage(message=str(exc.message), file=str(exc.file), line=line)
    return UncaughtExceptionMessage(exc_type=type(exc).__name__, message=str(exc))


def install_report_hook(report_path: Path) -> None:
    previous = sys.excepthook

    def _hook(exc_type, exc, tb) -> None:
        write_report(report_path, _report_for(exc))
        previous(exc_type, exc, tb)

    sys.excepthook = _hook


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="assertcatch.isolation.bootstrap")
    parser.add_argument("--report", required=True, type=Path)
    parser.add_argument("script", type=Path)
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    options = _parse_args(sys.argv[1:] if argv is None else argv)
    install_report_hook(options.report)
    script = str(options.script)
    sys.argv = [script, *options.args]
    sys.path.insert(0, str(options.script.resolve().parent))
    runpy.run_path(script, run_name="__main__")


if __name__ == "__main__":
    main()
