from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict


class UncaughtFailureMessage(BaseModel):
    type: Literal["uncaught_failure"] = "uncaught_failure"
    message: str
    file: str
    line: int | str

    model_config = ConfigDict(extra="forbid")


class UncaughtExceptionMessage(BaseModel):
    type: Literal["uncaught_exception"] = "uncaught_exception"
    exc_type: str
    message: str

    model_config = ConfigDict(extra="forbid")


ReportMessage = Union[UncaughtFailureMessage, UncaughtExceptionMessage]

_MESSAGE_TYPES: dict[str, type[BaseModel]] = {
    "uncaught_failure": UncaughtFailureMessage,
    "uncaught_exception": UncaughtExceptionMessage,
}


def parse_message(data: Any) -> ReportMessage:
    if not isinstance(data, dict):
        raise ValueError("Report message must be a JSON object")
    msg_type = data.get("type")
    if not isinstance(msg_type, str):
        raise ValueError("Report message missing type field")
    model = _MESSAGE_TYPES.get(msg_type)
    if model is None:
        raise ValueError(f"Unknown message type: {msg_type}")
    return model.model_validate(data)
