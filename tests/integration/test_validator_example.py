from __future__ import annotations

from pathlib import Path

from assertcatch import AssertionFailure
from assertcatch.isolation import run_isolated


def _validator_script() -> Path:
    root = Path(__file__).resolve().parents[2]
    return root / "examples" / "validator" / "validator.py"


def test_valid_values_complete() -> None:
    result = run_isolated(_validator_script(), ["1", "2", "3"])

    assert result.returncode == 0
    assert result.stdout.strip() == "all values valid"


def test_unguarded_failure_terminates_with_location() -> None:
    result = run_isolated(_validator_script(), ["1", "-5", "3"])

    assert result.terminated_by_failure
    assert result.failure == AssertionFailure("x must be positive", "validator.src", 42)
    assert "all values valid" not in result.stdout


def test_guarded_failure_is_caught() -> None:
    result = run_isolated(_validator_script(), ["--guarded", "1", "-5"])

    assert result.returncode == 0
    assert result.stdout.strip() == "caught: validator.src:42: x must be positive"
