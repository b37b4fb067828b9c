from __future__ import annotations

import logging
import os
import subprocess
import sys
import tempfile
import time
from pathlib import Path
from typing import Sequence

from assertcatch.config.models import HarnessConfig
from assertcatch.failure import AssertionFailure
from assertcatch.protocol import ReportMessage, ReportParseError, UncaughtFailureMessage, read_report

from .models import IsolatedResult, IsolationError

logger = logging.getLogger(__name__)

BOOTSTRAP_MODULE = "assertcatch.isolation.bootstrap"


def _package_root() -> str:
    # Directory holding the ``assertcatch`` package, so the child can import it.
    return str(Path(__file__).resolve().parents[2])


def _child_env(config: HarnessConfig) -> dict[str, str]:
    env = os.environ.copy()
    env.update(config.env)
    python_path = env.get("PYTHONPATH")
    root = _package_root()
    env["PYTHONPATH"] = f"{root}{os.pathsep}{python_path}" if python_path else root
    return env


def _tail(output: str | bytes | None, limit: int) -> list[str]:
    if not output or limit <= 0:
        return []
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    return output.splitlines()[-limit:]


def _read_report(report_path: Path, stderr_tail: list[str]) -> ReportMessage | None:
    try:
        return read_report(report_path)
    except ReportParseError as exc:
        raise IsolationError(f"Unreadable report from child: {exc}", stderr_tail) from exc


def run_isolated(
    script: Path,
    args: Sequence[str] = (),
    config: HarnessConfig | None = None,
) -> IsolatedResult:
    """Run ``script`` in a child interpreter and report how it ended."""
    config = config or HarnessConfig()
    script_path = Path(script).resolve()
    if not script_path.is_file():
        raise FileNotFoundError(f"Script not found: {script_path}")

    with tempfile.TemporaryDirectory(prefix="assertcatch-") as tmp_dir:
        report_path = Path(tmp_dir) / "report.json"
        command = [
            config.python or sys.executable,
            "-m",
            BOOTSTRAP_MODULE,
            "--report",
            str(report_path),
            str(script_path),
            *args,
        ]
        logger.debug("Launching isolated run: %s", command)
        started = time.monotonic()
        try:
            completed = subprocess.run(
                command,
                cwd=config.cwd,
                env=_child_env(config),
                text=True,
                capture_output=True,
                timeout=config.timeout_s,
            )
        except subprocess.TimeoutExpired as exc:
            raise IsolationError(
                f"Timed out after {config.timeout_s}s running {script_path}",
                _tail(exc.stderr, config.stderr_tail),
            ) from exc
        except OSError as exc:
            raise IsolationError(f"Failed to launch {command[0]}: {exc}", []) from exc
        wall_ms = int((time.monotonic() - started) * 1000)
        stderr_tail = _tail(completed.stderr, config.stderr_tail)
        report = _read_report(report_path, stderr_tail)

    logger.debug("Isolated run of %s exited with code %d", script_path, completed.returncode)

    if isinstance(report, UncaughtFailureMessage):
        return IsolatedResult(
            returncode=completed.returncode,
            failure=AssertionFailure(message=report.message, file=report.file, line=report.line),
            stdout=completed.stdout,
            stderr_tail=stderr_tail,
            wall_ms=wall_ms,
        )
    if report is not None:
        return IsolatedResult(
            returncode=completed.returncode,
            exc_type=report.exc_type,
            exc_message=report.message,
            stdout=completed.stdout,
            stderr_tail=stderr_tail,
            wall_ms=wall_ms,
        )
    return IsolatedResult(
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr_tail=stderr_tail,
        wall_ms=wall_ms,
    )
