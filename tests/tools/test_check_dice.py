from __future__ import annotations

from dicebot.dice import ExpressionMode
from tools.check_dice import describe, main


def test_describe_reports_average() -> None:
    lines, errors = describe(["2d6+3d6"], ExpressionMode.SIMPLIFIED)
    assert lines == ["'2d6+3d6' -> 5d6 (average 35/2)"]
    assert errors == []


def test_main_flags_invalid_expressions(capsys) -> None:
    assert main(["d6", "d6+"]) == 1
    output = capsys.readouterr().out
    assert "'d6' -> d6 (average 7/2)" in output
    assert "Invalid dice expressions" in output


def test_main_usage() -> None:
    assert main([]) == 2
