"""Split raw dice notation into alternating sign/operand tokens."""

from __future__ import annotations

from typing import List

from ..errors import InvalidExpression

SIGNS = ("+", "-")
MINUS_SIGN = "\u2212"


def tokenize(expression: str) -> List[str]:
    """
    Return the normalized token list for ``expression``.

    Blank input becomes ``["+", "0"]``; a missing leading sign is filled in
    with ``+``. The display minus sign is read as ``-``. The result always
    has an even length.
    """
    spaced = expression.replace(MINUS_SIGN, "-").replace("+", " + ").replace("-", " - ")
    tokens = spaced.split()
    if not tokens:
        tokens = ["0"]
    if tokens[0] not in SIGNS:
        tokens.insert(0, "+")
    if len(tokens) % 2 != 0:
        raise InvalidExpression(
            "The dice expression is malformed: even after normalization it "
            "contained an odd number of tokens.",
            reason=InvalidExpression.REASON_ODD_TOKENS,
        )
    return tokens


__all__ = ["SIGNS", "MINUS_SIGN", "tokenize"]
