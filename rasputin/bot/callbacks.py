"""Callback query handlers for Telegram bot.

Settings are never stored: every button carries the current selection in
its callback data (see Settings.compact), and each handler re-renders the
panel with the new state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rasputin.bot.commands import run_generation
from rasputin.bot.messages import (
    build_settings_keyboard,
    format_notes,
    format_sequence,
    format_settings,
)
from rasputin.core.errors import GenerationError
from rasputin.core.models import Settings

if TYPE_CHECKING:
    from rasputin.bot.deps import Deps

logger = logging.getLogger("rasputin.callbacks")


def handle_callback(
    user_id: str,
    chat_id: str,
    message_id: int,
    data: str,
    cq_id: str,
    deps: Deps,
) -> None:
    """Dispatch callback query by prefix."""
    prefix = data.split(":")[0]

    dispatch = {
        "tog": _cb_toggle,
        "len": _cb_length,
        "gen": _cb_generate,
        "rst": _cb_reset,
        "chars": _cb_chars,
    }

    handler = dispatch.get(prefix)
    if handler is None:
        deps.telegram.answer_callback_query(cq_id, text="Invalid action")
        return

    try:
        handler(user_id, chat_id, message_id, data, cq_id, deps)
    except ValueError:
        logger.warning("Malformed callback data: %r", data)
        deps.telegram.answer_callback_query(cq_id, text="Invalid action")


def _show_panel(
    chat_id: str, message_id: int, settings: Settings, deps: Deps
) -> None:
    deps.telegram.edit_message(
        chat_id,
        message_id,
        format_settings(settings),
        reply_markup=build_settings_keyboard(settings),
    )


def _cb_toggle(
    user_id: str,
    chat_id: str,
    message_id: int,
    data: str,
    cq_id: str,
    deps: Deps,
) -> None:
    _, letter, code = data.split(":", 2)
    settings = Settings.from_compact(code).toggled(letter)
    deps.telegram.answer_callback_query(cq_id)
    _show_panel(chat_id, message_id, settings, deps)


def _cb_length(
    user_id: str,
    chat_id: str,
    message_id: int,
    data: str,
    cq_id: str,
    deps: Deps,
) -> None:
    _, delta, code = data.split(":", 2)
    settings = Settings.from_compact(code).adjusted(int(delta))
    deps.telegram.answer_callback_query(cq_id, text=f"Length: {settings.length}")
    _show_panel(chat_id, message_id, settings, deps)


def _cb_generate(
    user_id: str,
    chat_id: str,
    message_id: int,
    data: str,
    cq_id: str,
    deps: Deps,
) -> None:
    _, code = data.split(":", 1)
    settings = Settings.from_compact(code)
    try:
        sequence = run_generation(settings, deps)
    except GenerationError as e:
        deps.telegram.answer_callback_query(cq_id, text=str(e), show_alert=True)
        return

    deps.telegram.answer_callback_query(cq_id)
    deps.telegram.edit_message(
        chat_id,
        message_id,
        format_sequence(sequence, settings),
        reply_markup=build_settings_keyboard(settings),
    )


def _cb_reset(
    user_id: str,
    chat_id: str,
    message_id: int,
    data: str,
    cq_id: str,
    deps: Deps,
) -> None:
    deps.telegram.answer_callback_query(cq_id, text="Settings reset")
    _show_panel(chat_id, message_id, Settings.default(), deps)


def _cb_chars(
    user_id: str,
    chat_id: str,
    message_id: int,
    data: str,
    cq_id: str,
    deps: Deps,
) -> None:
    deps.telegram.answer_callback_query(cq_id)
    deps.telegram.send_message(chat_id, format_notes())
