"""Update router — dispatches Telegram updates to handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rasputin.bot.callbacks import handle_callback
from rasputin.bot.commands import handle_command

if TYPE_CHECKING:
    from rasputin.bot.deps import Deps

logger = logging.getLogger("rasputin.router")


def route_update(update: dict, deps: Deps) -> None:
    """Route a Telegram update to the appropriate handler."""
    if "callback_query" in update:
        cq = update["callback_query"]
        user_id = str(cq["from"]["id"])
        message = cq.get("message")
        if message is None:
            # Inline-mode callbacks carry no message to edit
            deps.telegram.answer_callback_query(cq["id"])
            return
        chat_id = str(message["chat"]["id"])
        message_id = message["message_id"]
        data = cq.get("data", "")
        handle_callback(user_id, chat_id, message_id, data, cq["id"], deps)
        return

    message = update.get("message")
    if message is None:
        return

    text = message.get("text", "")
    if not text.startswith("/"):
        return

    user_id = str(message["from"]["id"])
    chat_id = str(message["chat"]["id"])

    # Strip @botname suffix
    parts = text.split(None, 1)
    command = parts[0].split("@")[0].lower()
    args = parts[1] if len(parts) > 1 else ""

    logger.debug("Command %s from %s", command, user_id)
    handle_command(command, args, user_id, chat_id, deps)
