from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HarnessConfig(BaseModel):
    python: str | None = None
    timeout_s: float = Field(default=30.0, gt=0)
    stderr_tail: int = Field(default=200, ge=0)
    env: dict[str, str] = Field(default_factory=dict)
    cwd: str | None = None

    model_config = ConfigDict(extra="forbid")
