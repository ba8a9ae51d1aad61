"""Message formatting and keyboard builders for Telegram."""

from __future__ import annotations

import html

from rasputin.core.models import CharacterClass, Settings
from rasputin.utils.constants import LENGTH_STEPS, MAX_LENGTH, MIN_LENGTH

# --- Text formatters ---


def format_welcome() -> str:
    return (
        "<b>Rasputin</b>\n\n"
        "Random Alphanumeric Sequence Producer, "
        "Understandably Typical In Nature.\n\n"
        "<b>Commands:</b>\n"
        "/start - Show the settings panel\n"
        "/generate [length] [types] - Generate a sequence (alias /g)\n"
        "/chars - List the available characters\n"
        "/help - How it works"
    )


def format_help() -> str:
    return (
        "<b>How it works</b>\n\n"
        "Pick one or more character types. Every character of the "
        "sequence is drawn at random from all selected types.\n\n"
        "<b>Types:</b> l = lowercase, u = uppercase, n = numeric, "
        "s = special\n"
        f"<b>Length:</b> {MIN_LENGTH} to {MAX_LENGTH}\n\n"
        "<b>Examples:</b>\n"
        "/generate 16 lun\n"
        "/g 32 lowercase special\n\n"
        "Not meant for secrets that need cryptographic randomness."
    )


def format_settings(settings: Settings) -> str:
    if settings.classes:
        types = ", ".join(c.value for c in settings.classes)
    else:
        types = "(none)"
    return (
        "<b>Settings</b>\n"
        f"Types: {types}\n"
        f"Length: {settings.length}"
    )


def format_sequence(sequence: str, settings: Settings | None = None) -> str:
    text = f"<code>{html.escape(sequence)}</code>"
    if settings is not None:
        text = f"{format_settings(settings)}\n\n{text}"
    return text


def format_notes() -> str:
    lines = ["<b>Available characters</b>"]
    for char_class in CharacterClass:
        chars = html.escape(" ".join(char_class.chars))
        lines.append(f"\n<b>{char_class.label}</b>\n<code>{chars}</code>")
    return "\n".join(lines)


# --- Keyboards ---


def build_settings_keyboard(settings: Settings) -> dict:
    """Toggle buttons, length buttons and actions. State rides in callback data."""
    code = settings.compact()
    toggles = []
    for char_class in CharacterClass:
        mark = "✅" if settings.is_enabled(char_class) else "⬜"
        toggles.append({
            "text": f"{mark} {char_class.label} ({char_class.shortcut})",
            "callback_data": f"tog:{char_class.shortcut}:{code}",
        })
    lengths = [
        {"text": f"{step:+d}", "callback_data": f"len:{step}:{code}"}
        for step in LENGTH_STEPS
    ]
    return {
        "inline_keyboard": [
            toggles[:2],
            toggles[2:],
            lengths,
            [
                {"text": "🎲 Generate (g)", "callback_data": f"gen:{code}"},
            ],
            [
                {"text": "Reset", "callback_data": "rst"},
                {"text": "Characters", "callback_data": "chars"},
            ],
        ]
    }
