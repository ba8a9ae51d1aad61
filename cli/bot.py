"""Run the Rasputin Telegram bot with long polling.

Usage: TELEGRAM_BOT_TOKEN=... python -m cli.bot [--log-level INFO] [--seed 42]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rasputin.bot.deps import Deps
from rasputin.handler import run_polling
from rasputin.utils.rng import create_rng
from rasputin.utils.telegram import TelegramClient


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rasputin Telegram bot")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    token = os.environ.get("TELEGRAM_BOT_TOKEN", "")
    if not token:
        print("Error: TELEGRAM_BOT_TOKEN is not set", file=sys.stderr)
        return 2

    try:
        telegram = TelegramClient(token=token)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    deps = Deps(telegram=telegram, rng=create_rng(args.seed))
    try:
        run_polling(deps)
    finally:
        telegram.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
