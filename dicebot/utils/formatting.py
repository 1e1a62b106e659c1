"""Utility helpers for formatting bot responses."""

from __future__ import annotations

import html
import re
from fractions import Fraction
from typing import Iterable

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)


def format_fraction(value: Fraction) -> str:
    """Render ``value`` as an integer when whole, otherwise as ``p/q``."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def format_roll_lines(results: Iterable[int]) -> str:
    """Return one ``- **Die n:** value`` line per result, numbered from one."""
    return "\n".join(
        f"- **Die {index}:** {value}" for index, value in enumerate(results, start=1)
    )


def close_sentence(text: str) -> str:
    """Swap question marks for full stops and make sure ``text`` ends with one."""
    text = text.strip().replace("?", ".")
    return text if text.endswith(".") else f"{text}."


def bold_to_html(text: str) -> str:
    """Escape ``text`` for Telegram HTML and turn ``**bold**`` runs into ``<b>`` tags."""
    return BOLD_PATTERN.sub(r"<b>\1</b>", html.escape(text, quote=False))


__all__ = ["format_fraction", "format_roll_lines", "close_sentence", "bold_to_html"]
