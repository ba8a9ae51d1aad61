"""Telegram Bot API client using httpx."""

from __future__ import annotations

import logging
import os

import httpx

logger = logging.getLogger("rasputin.telegram")

BASE_URL = "https://api.telegram.org/bot{token}"
DEFAULT_POLL_TIMEOUT = 30


class TelegramAPIError(Exception):
    """The Bot API answered with ok: false."""

    def __init__(
        self,
        description: str,
        error_code: int | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(description)
        self.error_code = error_code
        self.retry_after = retry_after


class TelegramClient:
    """Synchronous Telegram Bot API wrapper."""

    def __init__(
        self,
        token: str | None = None,
        client: httpx.Client | None = None,
        poll_timeout: int | None = None,
    ) -> None:
        self._token = token or os.environ.get("TELEGRAM_BOT_TOKEN", "")
        self._base = BASE_URL.format(token=self._token)
        if poll_timeout is None:
            raw = os.environ.get("TELEGRAM_POLL_TIMEOUT", str(DEFAULT_POLL_TIMEOUT))
            try:
                poll_timeout = int(raw)
            except ValueError:
                raise ValueError(f"Invalid TELEGRAM_POLL_TIMEOUT: {raw!r}") from None
        self.poll_timeout = poll_timeout
        # Long polls hold the connection open for poll_timeout seconds
        self._client = client or httpx.Client(timeout=poll_timeout + 10.0)

    def send_message(
        self,
        chat_id: str | int,
        text: str,
        reply_markup: dict | None = None,
        parse_mode: str = "HTML",
    ) -> dict:
        payload: dict = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": parse_mode,
        }
        if reply_markup:
            payload["reply_markup"] = reply_markup
        return self._post("sendMessage", payload)

    def edit_message(
        self,
        chat_id: str | int,
        message_id: int,
        text: str,
        reply_markup: dict | None = None,
        parse_mode: str = "HTML",
    ) -> dict:
        payload: dict = {
            "chat_id": chat_id,
            "message_id": message_id,
            "text": text,
            "parse_mode": parse_mode,
        }
        if reply_markup:
            payload["reply_markup"] = reply_markup
        return self._post("editMessageText", payload)

    def answer_callback_query(
        self,
        callback_query_id: str,
        text: str | None = None,
        show_alert: bool = False,
    ) -> dict:
        payload: dict = {"callback_query_id": callback_query_id}
        if text:
            payload["text"] = text
            payload["show_alert"] = show_alert
        return self._post("answerCallbackQuery", payload)

    def get_updates(
        self, offset: int | None = None, timeout: int | None = None
    ) -> list[dict]:
        """Long-poll for new updates. Raises TelegramAPIError on API error."""
        payload: dict = {
            "timeout": self.poll_timeout if timeout is None else timeout,
            "allowed_updates": ["message", "callback_query"],
        }
        if offset is not None:
            payload["offset"] = offset
        data = self._post("getUpdates", payload)
        if not data.get("ok"):
            retry_after = (data.get("parameters") or {}).get("retry_after")
            raise TelegramAPIError(
                data.get("description", "getUpdates failed"),
                error_code=data.get("error_code"),
                retry_after=retry_after,
            )
        return list(data.get("result", []))

    def close(self) -> None:
        self._client.close()

    def _post(self, method: str, payload: dict) -> dict:
        url = f"{self._base}/{method}"
        response = self._client.post(url, json=payload)
        try:
            data: dict = response.json()
        except ValueError:
            logger.error(
                "Non-JSON reply on %s (HTTP %s)", method, response.status_code
            )
            return {
                "ok": False,
                "error_code": response.status_code,
                "description": f"HTTP {response.status_code}",
            }
        if not data.get("ok"):
            logger.error("Telegram API error on %s: %s", method, data)
        return data
