"""Configuration for the dice bot, read from the environment."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..dice import ExpressionMode

# Load environment variables from a local .env if present.
load_dotenv()


AllowedLogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

MAX_ROLLS_CEILING = 1000
MAX_DICE_CEILING = 100_000


class Settings(BaseModel):
    """Runtime configuration derived from environment variables."""

    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")
    default_dice: str = Field(default="6", alias="DICEBOT_DEFAULT_DICE")
    max_rolls: int = Field(default=100, alias="DICEBOT_MAX_ROLLS")
    max_dice: int = Field(default=1000, alias="DICEBOT_MAX_DICE")
    simplify: bool = Field(default=False, alias="DICEBOT_SIMPLIFY")
    log_level: AllowedLogLevel = Field(default="INFO", alias="DICEBOT_LOG_LEVEL")

    @field_validator("default_dice")
    @classmethod
    def _strip_default_dice(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("DICEBOT_DEFAULT_DICE must not be blank.")
        return stripped

    @field_validator("max_rolls")
    @classmethod
    def _validate_max_rolls(cls, value: int) -> int:
        if not 1 <= value <= MAX_ROLLS_CEILING:
            raise ValueError(
                f"DICEBOT_MAX_ROLLS must be between 1 and {MAX_ROLLS_CEILING} inclusive."
            )
        return value

    @field_validator("max_dice")
    @classmethod
    def _validate_max_dice(cls, value: int) -> int:
        if not 1 <= value <= MAX_DICE_CEILING:
            raise ValueError(
                f"DICEBOT_MAX_DICE must be between 1 and {MAX_DICE_CEILING} inclusive."
            )
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()

    @property
    def expression_mode(self) -> ExpressionMode:
        return ExpressionMode.SIMPLIFIED if self.simplify else ExpressionMode.DEFAULT

    def has_telegram_credentials(self) -> bool:
        """True when a Telegram bot token is configured."""
        return bool(self.telegram_bot_token.strip())


def _raw_environment() -> dict[str, Optional[str]]:
    """Snapshot environment variables that are actually set."""
    keys = [
        "TELEGRAM_BOT_TOKEN",
        "DICEBOT_DEFAULT_DICE",
        "DICEBOT_MAX_ROLLS",
        "DICEBOT_MAX_DICE",
        "DICEBOT_SIMPLIFY",
        "DICEBOT_LOG_LEVEL",
    ]
    return {key: os.environ[key] for key in keys if key in os.environ}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and memoize Settings from the environment."""
    try:
        return Settings(**_raw_environment())
    except ValidationError as exc:
        raise RuntimeError(f"Invalid dice bot configuration: {exc}") from exc


__all__ = [
    "Settings",
    "AllowedLogLevel",
    "MAX_ROLLS_CEILING",
    "MAX_DICE_CEILING",
    "get_settings",
]
