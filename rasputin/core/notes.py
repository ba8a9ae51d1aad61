"""Notes listing the available characters of each class."""

from __future__ import annotations

import html

from rasputin.core.models import CharacterClass


def note_items(char_class: CharacterClass) -> list[str]:
    return list(char_class.chars)


def render_notes_text() -> str:
    """One line per class: "lowercase: a b c ..."."""
    lines = []
    for char_class in CharacterClass:
        lines.append(f"{char_class.value}: {' '.join(note_items(char_class))}")
    return "\n".join(lines)


def render_note_html(char_class: CharacterClass) -> str:
    return "".join(
        f'<span class="char-item">{html.escape(c)}</span>'
        for c in note_items(char_class)
    )


def render_notes_html() -> str:
    """HTML fragment with one section per class, for docs or a static page."""
    sections = []
    for char_class in CharacterClass:
        sections.append(
            f'<section id="{char_class.value}-note-section">'
            f"<h3>{char_class.label}</h3>"
            f"{render_note_html(char_class)}"
            "</section>"
        )
    return "\n".join(sections)
