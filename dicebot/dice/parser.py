"""Turn sign/operand token pairs into signed terms."""

from __future__ import annotations

import re
from typing import List, Sequence

from ..errors import InvalidExpression
from .terms import PERCENTILE_FACES, Constant, DiceRoll, SignedTerm, Term

NUMBER_TOKEN = re.compile(r"^[0-9]+$")
DICE_ROLL_TOKEN = re.compile(r"^(?P<count>[0-9]*)d(?P<faces>[0-9]+|%)$")


def parse_tokens(tokens: Sequence[str]) -> List[SignedTerm]:
    """Build one signed term per (sign, operand) pair, in encounter order."""
    if len(tokens) % 2 != 0:
        raise InvalidExpression(
            "The dice expression is malformed: it contained an odd number of tokens.",
            reason=InvalidExpression.REASON_ODD_TOKENS,
        )

    terms: List[SignedTerm] = []
    for index in range(0, len(tokens), 2):
        sign_token, operand = tokens[index], tokens[index + 1]
        if sign_token == "+":
            sign = 1
        elif sign_token == "-":
            sign = -1
        else:
            raise InvalidExpression(
                f"The dice expression is malformed: expected + or - before {operand!r}, "
                f"got {sign_token!r}.",
                reason=InvalidExpression.REASON_MISSING_SIGN,
                token=sign_token,
            )
        terms.append(SignedTerm(sign, parse_operand(operand)))
    return terms


def parse_operand(token: str) -> Term:
    if NUMBER_TOKEN.match(token):
        return Constant(int(token))

    match = DICE_ROLL_TOKEN.match(token)
    if not match:
        raise InvalidExpression(
            f"The dice expression is malformed: {token!r} is neither a number "
            "nor a dice roll.",
            reason=InvalidExpression.REASON_BAD_OPERAND,
            token=token,
        )

    count = int(match.group("count") or 1)
    faces_text = match.group("faces")
    faces = PERCENTILE_FACES if faces_text == "%" else int(faces_text)
    if count < 1 or faces < 1:
        raise InvalidExpression(
            f"The dice roll {token!r} needs at least one die with at least one face.",
            reason=InvalidExpression.REASON_BAD_OPERAND,
            token=token,
        )
    return DiceRoll(count=count, faces=faces)


__all__ = ["NUMBER_TOKEN", "DICE_ROLL_TOKEN", "parse_tokens", "parse_operand"]
