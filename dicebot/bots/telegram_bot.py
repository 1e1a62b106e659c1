"""Telegram bot bridge for the dice commands."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, Tuple

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import Application, CommandHandler, ContextTypes

from ..commands import (
    CommandResult,
    average_of,
    bad_request,
    choose,
    does_user,
    is_user,
    parse_roll_count,
    roll,
    ship,
)
from ..config import Settings, configure_logging, get_settings
from ..dice.tokenizer import SIGNS
from ..errors import CommandError
from ..utils.formatting import bold_to_html

logger = logging.getLogger(__name__)

START_TEXT = (
    "I roll dice and make hard decisions.\n"
    "/roll d20+d18+4 [count] - roll an expression, or /roll 6 for a plain die\n"
    "/average 3d6-2 - the expected total of an expression\n"
    "/choose tea coffee - pick one option\n"
    "/ship alice bob carol !bob - pair two people, skipping anyone marked with !\n"
    "/is <name> <something>, /does <name> <something> - yes or no"
)


class TelegramBot:
    """High-level coordinator for Telegram interactions."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if not self.settings.has_telegram_credentials():
            raise RuntimeError("TELEGRAM_BOT_TOKEN is missing. Set it in your .env file.")
        # SystemRandom keeps concurrent handlers from sharing generator state.
        self.rng = rng or random.SystemRandom()

    def build_application(self) -> Application:
        application = Application.builder().token(self.settings.telegram_bot_token).build()

        application.add_handler(CommandHandler("start", self.handle_start))
        application.add_handler(CommandHandler(["roll", "dice"], self.handle_roll))
        application.add_handler(CommandHandler("average", self.handle_average))
        application.add_handler(CommandHandler(["choose", "pick"], self.handle_choose))
        application.add_handler(CommandHandler(["ship", "otp"], self.handle_ship))
        application.add_handler(CommandHandler("is", self.handle_is))
        application.add_handler(CommandHandler("does", self.handle_does))
        application.add_error_handler(self.handle_error)
        return application

    async def handle_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._reply(update, CommandResult(ok=True, text=START_TEXT))

    async def handle_roll(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        try:
            dice, count = split_roll_args(context.args or [], self.settings.default_dice)
        except CommandError as exc:
            await self._reply(update, bad_request(exc.message))
            return
        result = roll(
            dice,
            count,
            rng=self.rng,
            mode=self.settings.expression_mode,
            max_rolls=self.settings.max_rolls,
            max_dice=self.settings.max_dice,
        )
        await self._reply(update, result)

    async def handle_average(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        dice = " ".join(context.args or []) or self.settings.default_dice
        await self._reply(update, average_of(dice, mode=self.settings.expression_mode))

    async def handle_choose(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._reply(update, choose(context.args or [], rng=self.rng))

    async def handle_ship(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        members, blocked = split_ship_args(context.args or [])
        await self._reply(update, ship(members, blocked, rng=self.rng))

    async def handle_is(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        target, attribute = split_question_args(context.args or [])
        await self._reply(update, is_user(target, attribute, rng=self.rng))

    async def handle_does(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        target, attribute = split_question_args(context.args or [])
        await self._reply(update, does_user(target, attribute, rng=self.rng))

    async def handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        if context.error:
            logger.error("Telegram error: %s", context.error, exc_info=context.error)

    async def _reply(self, update: Update, result: CommandResult) -> None:
        message = update.effective_message
        if not message:
            return
        if not result.ok:
            logger.info("Rejected command: %s", result.text)
        await message.reply_text(bold_to_html(result.text), parse_mode=ParseMode.HTML)


def split_roll_args(args: Sequence[str], default_dice: str) -> Tuple[str, int]:
    """
    Split ``/roll`` arguments into the dice text and the repeat count.

    A trailing ``x3`` is always a count. A trailing bare integer is a count
    unless it follows a sign, where it belongs to the expression
    (``d20 + 4``).
    """
    if not args:
        return default_dice, 1
    *head, last = args
    if head and (last[:1] in ("x", "X") or (last.isdigit() and not head[-1].endswith(SIGNS))):
        return " ".join(head), parse_roll_count(last)
    return " ".join(args), 1


def split_ship_args(args: Sequence[str]) -> Tuple[list[str], list[str]]:
    """Names prefixed with ``!`` are skipped; the rest are candidates."""
    members = [name for name in args if not name.startswith("!")]
    blocked = [name[1:] for name in args if name.startswith("!") and len(name) > 1]
    return members, blocked


def split_question_args(args: Sequence[str]) -> Tuple[str, str]:
    if not args:
        return "", ""
    return args[0], " ".join(args[1:])


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    bot = TelegramBot(settings)
    application = bot.build_application()
    logger.info("Starting dice bot polling")
    application.run_polling()


if __name__ == "__main__":
    main()
