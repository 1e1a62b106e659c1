"""Chat commands built on the random number generator.

Each command is a pure function: it takes already-split arguments and an
optional ``random.Random`` and returns a :class:`CommandResult` for the chat
bridge to send back. Nothing here talks to Telegram.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..dice import ExpressionMode, try_parse_expression
from ..errors import CommandError
from ..utils.formatting import close_sentence, format_fraction, format_roll_lines

DEFAULT_DICE = "6"
DEFAULT_MAX_ROLLS = 100
DEFAULT_MAX_DICE = 1000
PLAIN_DIE_TOKEN = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    text: str


def ok(text: str) -> CommandResult:
    return CommandResult(ok=True, text=text)


def bad_request(text: str) -> CommandResult:
    return CommandResult(ok=False, text=text)


def roll(
    dice: str = DEFAULT_DICE,
    number_of_dice: int = 1,
    *,
    rng: Optional[random.Random] = None,
    mode: ExpressionMode = ExpressionMode.DEFAULT,
    max_rolls: int = DEFAULT_MAX_ROLLS,
    max_dice: int = DEFAULT_MAX_DICE,
) -> CommandResult:
    """
    Roll ``dice`` ``number_of_dice`` times.

    A bare integer is the size of a single die; anything else is read as a
    dice expression such as ``d20+d18+4``.
    At most ``max_dice`` dice are drawn across all repeats.
    """
    rng = rng or random.Random()
    if number_of_dice < 1:
        return bad_request("You must ask me to roll at least one die!")
    if number_of_dice > max_rolls:
        return bad_request(f"Sorry! No more than {max_rolls} dice rolls at once, please!")

    dice = dice.strip()
    sides = _plain_die_size(dice)
    if sides is not None:
        if sides < 1:
            return bad_request("Your dice roll must be 1 or above!")
        results = [rng.randint(1, sides) for _ in range(number_of_dice)]
        if number_of_dice == 1:
            return ok(f"I rolled **{results[0]}** on a **{sides}**-sided die.")
        return ok(format_roll_lines(results))

    outcome = try_parse_expression(dice, mode)
    if not outcome.ok:
        return bad_request("Invalid dice!")
    expression = outcome.unwrap()
    if expression.dice_count * number_of_dice > max_dice:
        return bad_request(f"Sorry! I can only roll up to {max_dice} dice at once, please!")
    results = [expression.evaluate(rng) for _ in range(number_of_dice)]
    return ok(f"Rolling **{expression}**:\n{format_roll_lines(results)}")


def average_of(dice: str, *, mode: ExpressionMode = ExpressionMode.DEFAULT) -> CommandResult:
    outcome = try_parse_expression(dice, mode)
    if not outcome.ok:
        return bad_request("Invalid dice!")
    expression = outcome.unwrap()
    return ok(
        f"The average of **{expression}** is **{format_fraction(expression.average())}**."
    )


def choose(options: Sequence[str], *, rng: Optional[random.Random] = None) -> CommandResult:
    rng = rng or random.Random()
    if not options:
        return bad_request("You have to give me options to pick from!")
    return ok(f"I choose **{options[rng.randrange(len(options))]}**.")


def ship(
    members: Sequence[str],
    blocked: Sequence[str] = (),
    *,
    rng: Optional[random.Random] = None,
) -> CommandResult:
    """Pair two distinct members, skipping anyone listed in ``blocked``."""
    rng = rng or random.Random()
    excluded = set(blocked)
    eligible = list(dict.fromkeys(name for name in members if name not in excluded))
    if len(eligible) < 2:
        return bad_request("This chat is too small, or you have ignored too many people!")
    first, second = rng.sample(eligible, 2)
    return ok(f":heart: I ship **{first}** x **{second}**! :heart:")


def is_user(target: str, attribute: str, *, rng: Optional[random.Random] = None) -> CommandResult:
    return _yes_no(target, "is", attribute, rng)


def does_user(target: str, attribute: str, *, rng: Optional[random.Random] = None) -> CommandResult:
    return _yes_no(target, "does", attribute, rng)


def parse_roll_count(raw: str) -> int:
    """Read a repeat count written as ``3`` or ``x3``."""
    digits = raw[1:] if raw[:1] in ("x", "X") else raw
    try:
        return int(digits)
    except ValueError as exc:
        raise CommandError(f"{raw!r} is not a whole number of rolls.") from exc


def _yes_no(
    target: str,
    verb: str,
    attribute: str,
    rng: Optional[random.Random],
) -> CommandResult:
    rng = rng or random.Random()
    if not target.strip() or not attribute.strip():
        return bad_request(f"Usage: /{verb} <name> <something>")
    answer = rng.randint(0, 1) == 1
    attribute = close_sentence(attribute)
    if answer:
        return ok(f"Yes, {target} {verb} {attribute}")
    return ok(f"No, {target} {verb} not {attribute}")


def _plain_die_size(dice: str) -> Optional[int]:
    if not PLAIN_DIE_TOKEN.match(dice):
        return None
    return int(dice)


__all__ = [
    "CommandResult",
    "DEFAULT_DICE",
    "DEFAULT_MAX_ROLLS",
    "DEFAULT_MAX_DICE",
    "ok",
    "bad_request",
    "roll",
    "average_of",
    "choose",
    "ship",
    "is_user",
    "does_user",
    "parse_roll_count",
]
