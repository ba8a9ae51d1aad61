"""Random sources for Rasputin."""

import random

# Platform-seeded, shared by callers that don't pass their own source.
_default_rng = random.Random()


def create_rng(seed: int | None = None) -> random.Random:
    """Create a Random instance.

    If seed is provided, returns a deterministic Random (for tests/replay).
    If seed is None, returns a Random seeded from the platform default.
    Not suitable for cryptographic use.
    """
    if seed is not None:
        return random.Random(seed)
    return random.Random()


def default_rng() -> random.Random:
    return _default_rng
