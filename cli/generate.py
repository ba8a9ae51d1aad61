"""Generate random sequences from the terminal.

Usage:
  python -m cli.generate --length 16 --types lun [--count 3] [--seed 42]
  python -m cli.generate --notes
  python -m cli.generate --notes-html > notes.html
  python -m cli.generate --interactive [--seed 42]
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from rasputin.core.errors import GenerationError
from rasputin.core.generator import generate_sequence
from rasputin.core.models import (
    CharacterClass,
    GenerationRequest,
    Settings,
    parse_length,
    parse_types,
)
from rasputin.core.notes import render_notes_html, render_notes_text
from rasputin.utils.constants import (
    DEFAULT_LENGTH,
    GENERATE_KEY,
    MAX_LENGTH,
    MIN_LENGTH,
    SHORTCUTS,
)
from rasputin.utils.rng import create_rng


def display_settings(settings: Settings) -> str:
    """Checkbox-style view of the current selection."""
    lines = [""]
    for char_class in CharacterClass:
        mark = "x" if settings.is_enabled(char_class) else " "
        lines.append(f"  [{mark}] {char_class.value} ({char_class.shortcut})")
    lines.append(f"  Length: {settings.length}")
    lines.append("")
    return "\n".join(lines)


def display_actions() -> str:
    lines = ["  Actions:"]
    lines.append("    l / u / n / s  - Toggle lowercase / uppercase / numeric / special")
    lines.append(f"    {GENERATE_KEY} (or Enter)     - Generate a sequence")
    lines.append(f"    len <N>        - Set the length ({MIN_LENGTH}-{MAX_LENGTH})")
    lines.append("    reset          - Restore default settings")
    lines.append("    notes          - List available characters")
    lines.append("    help           - Show this list")
    lines.append("    quit           - Exit")
    lines.append("")
    return "\n".join(lines)


def run_session(
    rng: random.Random, input_fn: Callable[[str], str] = input
) -> None:
    """Interactive loop driven by single-letter shortcuts."""
    settings = Settings.default()
    print("\n  Rasputin - random sequence generator")
    print(display_settings(settings))
    print(display_actions())

    while True:
        try:
            action_str = input_fn("  rasputin> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        parts = action_str.split()
        cmd = parts[0].lower() if parts else GENERATE_KEY

        if cmd == "quit":
            return
        elif cmd in SHORTCUTS:
            settings = settings.toggled(cmd)
            print(display_settings(settings))
        elif cmd == GENERATE_KEY:
            try:
                sequence = generate_sequence(settings.to_request(), rng)
            except GenerationError as e:
                print(f"  {e}")
                continue
            print(f"  {sequence}")
        elif cmd == "len":
            if len(parts) < 2:
                print("  Usage: len <N>")
                continue
            try:
                settings = settings.with_length(parse_length(parts[1]))
            except GenerationError as e:
                print(f"  {e}")
                continue
            print(display_settings(settings))
        elif cmd == "reset":
            settings = Settings.default()
            print(display_settings(settings))
        elif cmd == "notes":
            print(render_notes_text())
        elif cmd == "help":
            print(display_actions())
        else:
            print(f"  Unknown action: {cmd}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rasputin sequence generator")
    parser.add_argument("--length", default=str(DEFAULT_LENGTH))
    parser.add_argument(
        "--types",
        default="l",
        help="shortcut letters (lun) and/or names (lowercase,special)",
    )
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--notes", action="store_true")
    parser.add_argument("--notes-html", action="store_true")
    parser.add_argument("--interactive", action="store_true")
    args = parser.parse_args(argv)

    if args.notes:
        print(render_notes_text())
        return 0
    if args.notes_html:
        print(render_notes_html())
        return 0

    rng = create_rng(args.seed)
    if args.interactive:
        run_session(rng)
        return 0

    try:
        request = GenerationRequest.create(
            parse_types(args.types), parse_length(args.length)
        )
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for _ in range(max(args.count, 0)):
        print(generate_sequence(request, rng))
    return 0


if __name__ == "__main__":
    sys.exit(main())
