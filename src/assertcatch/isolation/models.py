from __future__ import annotations

from dataclasses import dataclass, field

from assertcatch.failure import AssertionFailure


@dataclass
class IsolationError(Exception):
    message: str
    stderr_tail: list[str]

    def __str__(self) -> str:
        if not self.stderr_tail:
            return self.message
        tail = "\n".join(self.stderr_tail)
        return f"{self.message}\nChild stderr (tail):\n{tail}"


@dataclass(frozen=True)
class IsolatedResult:
    returncode: int
    failure: AssertionFailure | None = None
    exc_type: str | None = None
    exc_message: str | None = None
    stdout: str = ""
    stderr_tail: list[str] = field(default_factory=list)
    wall_ms: int = 0

    @property
    def terminated(self) -> bool:
        return self.returncode != 0

    @property
    def terminated_by_failure(self) -> bool:
        return self.terminated and self.failure is not None
