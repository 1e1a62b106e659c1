"""Parsed dice expressions and the entry points callers use."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Sequence, Tuple

from ..errors import InvalidExpression
from .normalize import ExpressionMode, normalize_terms
from .parser import parse_tokens
from .terms import Constant, SignedTerm
from .tokenizer import MINUS_SIGN, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiceExpression:
    """An immutable, non-empty sequence of signed terms."""

    terms: Tuple[SignedTerm, ...]

    def __post_init__(self) -> None:
        if not self.terms:
            raise ValueError("A dice expression needs at least one term.")

    @classmethod
    def from_terms(cls, terms: Sequence[SignedTerm]) -> "DiceExpression":
        """Wrap ``terms``, falling back to the zero constant when nothing is left."""
        if not terms:
            return ZERO
        return cls(tuple(terms))

    @classmethod
    def parse(
        cls,
        text: str,
        mode: ExpressionMode = ExpressionMode.DEFAULT,
    ) -> "DiceExpression":
        tokens = tokenize(text)
        terms = parse_tokens(tokens)
        return cls.from_terms(normalize_terms(terms, mode))

    @property
    def dice_count(self) -> int:
        """Total number of dice one evaluation draws."""
        return sum(item.term.count for item in self.terms if item.is_dice)

    def evaluate(self, rng: Optional[random.Random] = None) -> int:
        rng = rng or random.Random()
        return sum(item.evaluate(rng) for item in self.terms)

    def average(self) -> Fraction:
        return sum((item.average() for item in self.terms), Fraction(0))

    def __str__(self) -> str:
        first, rest = self.terms[0], self.terms[1:]
        parts = [("-" if first.sign < 0 else "") + str(first.term)]
        for item in rest:
            parts.append(" + " if item.sign > 0 else f" {MINUS_SIGN} ")
            parts.append(str(item.term))
        return "".join(parts)


ZERO = DiceExpression((SignedTerm(1, Constant(0)),))


@dataclass(frozen=True)
class ParseOutcome:
    """Either a parsed expression or the reason it was rejected."""

    expression: Optional[DiceExpression] = None
    error: Optional[InvalidExpression] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DiceExpression:
        if self.error is not None:
            raise self.error
        if self.expression is None:
            raise ValueError("Parse outcome holds neither an expression nor an error.")
        return self.expression


def parse_expression(
    text: str,
    mode: ExpressionMode = ExpressionMode.DEFAULT,
) -> DiceExpression:
    return DiceExpression.parse(text, mode)


def try_parse_expression(
    text: str,
    mode: ExpressionMode = ExpressionMode.DEFAULT,
) -> ParseOutcome:
    """Parse ``text`` without raising for malformed input."""
    try:
        return ParseOutcome(expression=DiceExpression.parse(text, mode))
    except InvalidExpression as exc:
        logger.debug("Rejected dice expression %r: %s", text, exc.reason)
        return ParseOutcome(error=exc)


def evaluate(expression: DiceExpression, rng: Optional[random.Random] = None) -> int:
    return expression.evaluate(rng)


def average(expression: DiceExpression) -> Fraction:
    return expression.average()


def format_expression(expression: DiceExpression) -> str:
    return str(expression)


def evaluate_expression(
    text: str,
    mode: ExpressionMode = ExpressionMode.DEFAULT,
    rng: Optional[random.Random] = None,
) -> int:
    """Parse ``text`` and roll it once."""
    return DiceExpression.parse(text, mode).evaluate(rng)


__all__ = [
    "DiceExpression",
    "ParseOutcome",
    "ZERO",
    "MINUS_SIGN",
    "parse_expression",
    "try_parse_expression",
    "evaluate",
    "average",
    "format_expression",
    "evaluate_expression",
]
