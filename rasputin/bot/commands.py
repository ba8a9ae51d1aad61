"""Command handlers for Telegram bot."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from rasputin.bot.messages import (
    build_settings_keyboard,
    format_help,
    format_notes,
    format_sequence,
    format_settings,
    format_welcome,
)
from rasputin.core.errors import GenerationError
from rasputin.core.generator import generate_sequence
from rasputin.core.models import Settings, parse_length, parse_types

if TYPE_CHECKING:
    from rasputin.bot.deps import Deps

logger = logging.getLogger("rasputin.commands")


def handle_command(
    command: str, args: str, user_id: str, chat_id: str, deps: Deps
) -> None:
    """Dispatch a slash command."""
    handlers = {
        "/start": _cmd_start,
        "/help": _cmd_help,
        "/generate": _cmd_generate,
        "/g": _cmd_generate,
        "/chars": _cmd_chars,
    }
    handler = handlers.get(command)
    if handler is None:
        deps.telegram.send_message(chat_id, "Unknown command. Use /help.")
        return
    handler(args, user_id, chat_id, deps)


def run_generation(settings: Settings, deps: Deps) -> str:
    """Validate settings and draw a sequence. Raises GenerationError."""
    request = settings.to_request()
    sequence = generate_sequence(request, deps.rng)
    logger.info(
        json.dumps({
            "event": "sequence_generated",
            "length": request.length,
            "classes": [c.value for c in request.classes],
        })
    )
    return sequence


def parse_generate_args(args: str) -> Settings:
    """Parse "/generate" arguments: an optional length and optional types.

    Missing parts fall back to the defaults. Raises GenerationError.
    """
    settings = Settings.default()
    type_tokens = []
    for token in args.split():
        if token.lstrip("+-").isdigit():
            settings = settings.with_length(parse_length(token))
        else:
            type_tokens.append(token)
    if type_tokens:
        classes = parse_types(" ".join(type_tokens))
        settings = Settings(enabled_classes=classes, length=settings.length)
    return settings


def _cmd_start(args: str, user_id: str, chat_id: str, deps: Deps) -> None:
    deps.telegram.send_message(chat_id, format_welcome())
    settings = Settings.default()
    deps.telegram.send_message(
        chat_id,
        format_settings(settings),
        reply_markup=build_settings_keyboard(settings),
    )


def _cmd_help(args: str, user_id: str, chat_id: str, deps: Deps) -> None:
    deps.telegram.send_message(chat_id, format_help())


def _cmd_chars(args: str, user_id: str, chat_id: str, deps: Deps) -> None:
    deps.telegram.send_message(chat_id, format_notes())


def _cmd_generate(args: str, user_id: str, chat_id: str, deps: Deps) -> None:
    try:
        settings = parse_generate_args(args)
        sequence = run_generation(settings, deps)
    except GenerationError as e:
        deps.telegram.send_message(chat_id, f"Error: {e}")
        return
    deps.telegram.send_message(
        chat_id,
        format_sequence(sequence, settings),
        reply_markup=build_settings_keyboard(settings),
    )
