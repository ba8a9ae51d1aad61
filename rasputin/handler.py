"""Long-polling entry point for the Rasputin Telegram bot.

This is a thin adapter that pulls updates from the Bot API and routes them
to the appropriate command or callback handler. All generation logic lives
in rasputin/core/; all chat formatting in rasputin/bot/.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable

import httpx

from rasputin.bot.deps import Deps
from rasputin.bot.router import route_update
from rasputin.utils.telegram import TelegramAPIError

logger = logging.getLogger("rasputin.handler")

RETRY_DELAY = 5.0


def handle_update(update: dict, deps: Deps) -> None:
    """Process one update. Errors are logged so polling keeps going."""
    logger.info(
        json.dumps({"event": "update_received", "update_id": update.get("update_id")})
    )
    try:
        route_update(update, deps)
    except Exception:
        logger.exception("Error processing update %s", update.get("update_id"))


def poll_once(deps: Deps, offset: int | None = None) -> int | None:
    """Fetch and handle one batch. Returns the next offset."""
    updates = deps.telegram.get_updates(offset=offset)
    for update in updates:
        handle_update(update, deps)
        offset = update["update_id"] + 1
    return offset


def run_polling(
    deps: Deps,
    should_continue: Callable[[], bool] = lambda: True,
    retry_delay: float = RETRY_DELAY,
) -> None:
    """Poll until should_continue() returns False or Ctrl-C.

    Network failures and API errors are logged and retried after
    retry_delay seconds, or the server's retry_after when it sends one.
    """
    offset: int | None = None
    logger.info(json.dumps({"event": "polling_started"}))
    try:
        while should_continue():
            try:
                offset = poll_once(deps, offset)
            except httpx.HTTPError as e:
                logger.warning("Polling failed: %s", e)
                time.sleep(retry_delay)
            except TelegramAPIError as e:
                delay = e.retry_after if e.retry_after is not None else retry_delay
                logger.warning(
                    json.dumps({
                        "event": "polling_error",
                        "error_code": e.error_code,
                        "retry_in": delay,
                    })
                )
                time.sleep(delay)
    except KeyboardInterrupt:
        logger.info(json.dumps({"event": "polling_stopped"}))
