"""Dependency container for bot handlers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rasputin.utils.rng import create_rng

if TYPE_CHECKING:
    from rasputin.utils.telegram import TelegramClient


@dataclass
class Deps:
    """Bundles all dependencies for handler functions."""

    telegram: TelegramClient
    rng: random.Random = field(default_factory=create_rng)
