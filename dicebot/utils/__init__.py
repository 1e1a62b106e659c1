"""Utility exports."""

from .formatting import bold_to_html, close_sentence, format_fraction, format_roll_lines

__all__ = ["bold_to_html", "close_sentence", "format_fraction", "format_roll_lines"]
