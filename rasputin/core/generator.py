"""Sequence generation: pool assembly and uniform random draws."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence

from rasputin.core.errors import InvalidRequest
from rasputin.core.models import (
    CharacterClass,
    GenerationRequest,
    ordered,
    parse_classes,
)
from rasputin.utils.constants import MSG_NO_TYPE
from rasputin.utils.rng import default_rng

Randomizer = Callable[[Sequence[str], random.Random], str]


def build_pool(enabled_classes: Iterable[CharacterClass | str]) -> list[str]:
    """Concatenate the tables of the enabled classes in canonical order.

    Raises InvalidRequest if no class is enabled.
    """
    classes = ordered(parse_classes(enabled_classes))
    if not classes:
        raise InvalidRequest(MSG_NO_TYPE)
    pool: list[str] = []
    for char_class in classes:
        pool.extend(char_class.chars)
    return pool


def draw_one(pool: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one character, uniform over indices [0, len(pool))."""
    if not pool:
        raise InvalidRequest(MSG_NO_TYPE)
    rng = rng or default_rng()
    return pool[rng.randrange(len(pool))]


# Named per-character strategies. With several registered, one is picked
# uniformly for every character.
RANDOMIZERS: dict[str, Randomizer] = {
    "simplest": draw_one,
}


def get_random_char(pool: Sequence[str], rng: random.Random | None = None) -> str:
    rng = rng or default_rng()
    names = list(RANDOMIZERS)
    if len(names) == 1:
        randomizer = RANDOMIZERS[names[0]]
    else:
        randomizer = RANDOMIZERS[names[rng.randrange(len(names))]]
    return randomizer(pool, rng)


def generate_sequence(
    request: GenerationRequest, rng: random.Random | None = None
) -> str:
    """Produce request.length characters drawn from the request's pool."""
    rng = rng or default_rng()
    pool = build_pool(request.enabled_classes)
    return "".join(get_random_char(pool, rng) for _ in range(request.length))


def generate(
    enabled_classes: Iterable[CharacterClass | str],
    length: int,
    rng: random.Random | None = None,
) -> str:
    """Generate a random sequence.

    Raises InvalidRequest when no (or an unknown) class is given and
    InvalidLength when length is not an integer in [MIN_LENGTH, MAX_LENGTH].
    Nothing is returned on failure.
    """
    request = GenerationRequest.create(enabled_classes, length)
    return generate_sequence(request, rng)
