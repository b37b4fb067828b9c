from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from typing import Callable, NoReturn

_FIELDS = frozenset({"message", "file", "line"})


@dataclass
class AssertionFailure(Exception):
    """An assertion failure that unwinds to the nearest ``catch_within`` boundary.

    Uncaught, it reaches the interpreter's top level and the process exits
    with a non-zero status.

    ``message``, ``file`` and ``line`` are read-only once set. Exception
    attributes such as ``__traceback__`` and ``__notes__`` stay writable so
    the failure can pass through ``contextlib`` frames unchanged.
    """

    message: str
    file: str
    line: int

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _FIELDS:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def __hash__(self) -> int:
        return hash((self.message, self.file, self.line))

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: {self.message}"

    def throw(self) -> NoReturn:
        raise self

    @staticmethod
    def catch_within(block: Callable[[], object]) -> AssertionFailure | None:
        # Anything that is not an AssertionFailure keeps propagating.
        try:
            block()
        except AssertionFailure as failure:
            return failure
        return None
