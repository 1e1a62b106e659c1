from __future__ import annotations

import pytest

from dicebot.bots.telegram_bot import (
    TelegramBot,
    split_question_args,
    split_roll_args,
    split_ship_args,
)
from dicebot.config import Settings
from dicebot.errors import CommandError


def test_split_roll_args_defaults() -> None:
    assert split_roll_args([], "6") == ("6", 1)


def test_split_roll_args_trailing_count() -> None:
    assert split_roll_args(["d20+4", "3"], "6") == ("d20+4", 3)
    assert split_roll_args(["6", "2"], "6") == ("6", 2)
    assert split_roll_args(["d20", "+", "4", "x2"], "6") == ("d20 + 4", 2)


def test_split_roll_args_number_after_sign_is_expression() -> None:
    assert split_roll_args(["d20", "+", "4"], "6") == ("d20 + 4", 1)
    assert split_roll_args(["d20-", "4"], "6") == ("d20- 4", 1)


def test_split_roll_args_bad_count() -> None:
    with pytest.raises(CommandError):
        split_roll_args(["d20", "xfour"], "6")


def test_split_ship_args() -> None:
    assert split_ship_args(["alice", "!bob", "bob", "!"]) == (["alice", "bob"], ["bob"])


def test_split_question_args() -> None:
    assert split_question_args(["Alice", "very", "tall?"]) == ("Alice", "very tall?")
    assert split_question_args([]) == ("", "")


def test_bot_requires_token() -> None:
    settings = Settings.model_validate({"TELEGRAM_BOT_TOKEN": ""})
    with pytest.raises(RuntimeError):
        TelegramBot(settings)


def test_bot_builds_application() -> None:
    settings = Settings.model_validate({"TELEGRAM_BOT_TOKEN": "123456:TEST-token"})
    application = TelegramBot(settings).build_application()
    assert application.handlers
