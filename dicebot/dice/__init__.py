"""Dice expression parsing, rolling and formatting."""

from .expression import (
    MINUS_SIGN,
    ZERO,
    DiceExpression,
    ParseOutcome,
    average,
    evaluate,
    evaluate_expression,
    format_expression,
    parse_expression,
    try_parse_expression,
)
from .normalize import ExpressionMode, simplify_terms, sort_terms
from .parser import parse_tokens
from .terms import Constant, DiceRoll, SignedTerm, Term
from .tokenizer import tokenize

__all__ = [
    "DiceExpression",
    "ParseOutcome",
    "ExpressionMode",
    "Constant",
    "DiceRoll",
    "SignedTerm",
    "Term",
    "ZERO",
    "MINUS_SIGN",
    "tokenize",
    "parse_tokens",
    "sort_terms",
    "simplify_terms",
    "parse_expression",
    "try_parse_expression",
    "evaluate",
    "average",
    "format_expression",
    "evaluate_expression",
]
