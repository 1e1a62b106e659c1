"""Config package exports."""

from .logs import configure_logging
from .settings import (
    MAX_DICE_CEILING,
    MAX_ROLLS_CEILING,
    AllowedLogLevel,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "AllowedLogLevel",
    "MAX_ROLLS_CEILING",
    "MAX_DICE_CEILING",
    "configure_logging",
    "get_settings",
]
