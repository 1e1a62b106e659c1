"""Exceptions shared across the dice bot."""

from __future__ import annotations


class DiceBotError(Exception):
    """Base exception for all dice bot errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidExpression(DiceBotError, ValueError):
    """A dice expression could not be parsed.

    ``reason`` is one of the ``REASON_*`` constants so callers can branch on
    the failure without matching message text.
    """

    REASON_ODD_TOKENS = "odd-token-count"
    REASON_MISSING_SIGN = "missing-sign"
    REASON_BAD_OPERAND = "bad-operand"

    def __init__(self, message: str, reason: str, token: str | None = None) -> None:
        self.reason = reason
        self.token = token
        super().__init__(message)


class CommandError(DiceBotError):
    """A chat command received arguments it cannot act on."""


__all__ = ["DiceBotError", "InvalidExpression", "CommandError"]
