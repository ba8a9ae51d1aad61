"""Shared test fixtures for Rasputin."""

from __future__ import annotations

import html
import re

import pytest

from rasputin.bot.deps import Deps
from rasputin.utils.rng import create_rng


class MockTelegramClient:
    """Records all Telegram API calls for test assertions."""

    def __init__(self, updates: list[list[dict]] | None = None) -> None:
        self.calls: list[tuple[str, dict]] = []
        # One inner list per getUpdates call
        self.pending_updates: list[list[dict]] = list(updates or [])

    def send_message(
        self,
        chat_id: str | int,
        text: str,
        reply_markup: dict | None = None,
        parse_mode: str = "HTML",
    ) -> dict:
        self.calls.append((
            "send_message",
            {
                "chat_id": chat_id,
                "text": text,
                "reply_markup": reply_markup,
            },
        ))
        return {"ok": True, "result": {"message_id": len(self.calls)}}

    def edit_message(
        self,
        chat_id: str | int,
        message_id: int,
        text: str,
        reply_markup: dict | None = None,
        parse_mode: str = "HTML",
    ) -> dict:
        self.calls.append((
            "edit_message",
            {
                "chat_id": chat_id,
                "message_id": message_id,
                "text": text,
                "reply_markup": reply_markup,
            },
        ))
        return {"ok": True, "result": {"message_id": message_id}}

    def answer_callback_query(
        self,
        callback_query_id: str,
        text: str | None = None,
        show_alert: bool = False,
    ) -> dict:
        self.calls.append((
            "answer_callback_query",
            {
                "callback_query_id": callback_query_id,
                "text": text,
                "show_alert": show_alert,
            },
        ))
        return {"ok": True}

    def get_updates(
        self, offset: int | None = None, timeout: int | None = None
    ) -> list[dict]:
        self.calls.append(("get_updates", {"offset": offset}))
        if not self.pending_updates:
            return []
        return self.pending_updates.pop(0)

    def get_calls(self, method: str) -> list[dict]:
        """Get all calls for a specific method."""
        return [kwargs for m, kwargs in self.calls if m == method]

    def last_call(self, method: str) -> dict | None:
        """Get the last call for a specific method."""
        calls = self.get_calls(method)
        return calls[-1] if calls else None


def extract_sequence(text: str) -> str:
    """Pull the generated sequence out of a formatted message."""
    match = re.search(r"<code>(.*?)</code>", text, re.S)
    assert match is not None, text
    return html.unescape(match.group(1))


def make_deps(seed: int = 42) -> tuple[Deps, MockTelegramClient]:
    tg = MockTelegramClient()
    return Deps(telegram=tg, rng=create_rng(seed)), tg


@pytest.fixture
def mock_telegram():
    return MockTelegramClient()


@pytest.fixture
def rng():
    return create_rng(42)
