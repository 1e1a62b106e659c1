"""Chat command exports."""

from .chance import (
    CommandResult,
    average_of,
    bad_request,
    choose,
    does_user,
    is_user,
    ok,
    parse_roll_count,
    roll,
    ship,
)

__all__ = [
    "CommandResult",
    "ok",
    "bad_request",
    "roll",
    "average_of",
    "choose",
    "ship",
    "is_user",
    "does_user",
    "parse_roll_count",
]
