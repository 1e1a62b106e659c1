from __future__ import annotations

from fractions import Fraction

from dicebot.utils import bold_to_html, close_sentence, format_fraction, format_roll_lines


def test_format_fraction() -> None:
    assert format_fraction(Fraction(7)) == "7"
    assert format_fraction(Fraction(-17, 2)) == "-17/2"


def test_format_roll_lines() -> None:
    assert format_roll_lines([3, 9]) == "- **Die 1:** 3\n- **Die 2:** 9"


def test_close_sentence() -> None:
    assert close_sentence("tall?") == "tall."
    assert close_sentence("tall") == "tall."
    assert close_sentence("tall.") == "tall."


def test_bold_to_html_escapes() -> None:
    assert bold_to_html("I choose **<tea>**.") == "I choose <b>&lt;tea&gt;</b>."
