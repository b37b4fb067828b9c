from __future__ import annotations

import sys

from assertcatch import AssertionFailure


def require_positive(x: int) -> int:
    if x <= 0:
        AssertionFailure("x must be positive", "validator.src", 42).throw()
    return x


def validate_all(values: list[int]) -> list[int]:
    return [require_positive(value) for value in values]


def main(argv: list[str]) -> int:
    guarded = "--guarded" in argv
    values = [int(arg) for arg in argv if arg != "--guarded"]
    if not guarded:
        validate_all(values)
        print("all values valid")
        return 0

    failure = AssertionFailure.catch_within(lambda: validate_all(values))
    if failure is None:
        print("all values valid")
    else:
        print(f"caught: {failure}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
