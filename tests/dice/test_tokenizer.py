from __future__ import annotations

import pytest

from dicebot.dice import tokenize
from dicebot.errors import InvalidExpression


def test_tokenize_inserts_leading_sign() -> None:
    assert tokenize("d20+d18+4") == ["+", "d20", "+", "d18", "+", "4"]


def test_tokenize_keeps_explicit_leading_sign() -> None:
    assert tokenize("-3d6 +2") == ["-", "3d6", "+", "2"]


def test_tokenize_ignores_extra_whitespace() -> None:
    assert tokenize("  2d6   -\t1 ") == ["+", "2d6", "-", "1"]


def test_blank_input_becomes_zero() -> None:
    assert tokenize("") == ["+", "0"]
    assert tokenize("   ") == ["+", "0"]


@pytest.mark.parametrize("text", ["+", "d6+", "++4", "1 2"])
def test_odd_token_count_is_rejected(text: str) -> None:
    with pytest.raises(InvalidExpression) as excinfo:
        tokenize(text)
    assert excinfo.value.reason == InvalidExpression.REASON_ODD_TOKENS


def test_display_minus_sign_reads_as_minus() -> None:
    assert tokenize("d20 − 4") == ["+", "d20", "-", "4"]
    assert tokenize("−d6") == ["-", "d6"]
