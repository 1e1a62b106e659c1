"""Check dice expressions from the command line and show their averages."""

from __future__ import annotations

import sys
from typing import Sequence

from dicebot.dice import ExpressionMode, try_parse_expression
from dicebot.utils.formatting import format_fraction


def describe(expressions: Sequence[str], mode: ExpressionMode) -> tuple[list[str], list[str]]:
    lines: list[str] = []
    errors: list[str] = []
    for text in expressions:
        outcome = try_parse_expression(text, mode)
        if not outcome.ok:
            errors.append(f"{text!r}: {outcome.error}")
            continue
        expression = outcome.unwrap()
        lines.append(f"{text!r} -> {expression} (average {format_fraction(expression.average())})")
    return lines, errors


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    mode = ExpressionMode.DEFAULT
    if args and args[0] == "--simplify":
        mode = ExpressionMode.SIMPLIFIED
        args = args[1:]
    if not args:
        print("Usage: check_dice.py [--simplify] EXPRESSION...")  # noqa: T201
        return 2

    lines, errors = describe(args, mode)
    for line in lines:
        print(line)  # noqa: T201
    if errors:
        print("Invalid dice expressions:")  # noqa: T201
        for err in errors:
            print(f" - {err}")  # noqa: T201
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
