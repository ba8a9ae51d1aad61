"""Sample the generator and report how evenly characters are drawn.

Usage: python -m cli.uniformity --class numeric --samples 10000 [--seed 42]
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import Counter

from rasputin.core.generator import build_pool, generate_sequence
from rasputin.core.models import CharacterClass, GenerationRequest
from rasputin.utils.constants import MAX_LENGTH
from rasputin.utils.rng import create_rng


def sample_frequencies(
    classes: list[CharacterClass], samples: int, rng: random.Random
) -> Counter[str]:
    """Draw `samples` characters, in sequences of at most MAX_LENGTH."""
    counts: Counter[str] = Counter()
    remaining = samples
    while remaining > 0:
        length = min(remaining, MAX_LENGTH)
        request = GenerationRequest.create(classes, length)
        counts.update(generate_sequence(request, rng))
        remaining -= length
    return counts


def max_deviation(counts: Counter[str], pool: list[str], samples: int) -> float:
    """Largest |observed - expected| / expected over the pool."""
    expected = samples / len(pool)
    return max(abs(counts.get(c, 0) - expected) / expected for c in pool)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rasputin uniformity check")
    parser.add_argument(
        "--class",
        dest="classes",
        action="append",
        choices=[c.value for c in CharacterClass],
        help="may be repeated; default numeric",
    )
    parser.add_argument("--samples", type=int, default=10_000)
    parser.add_argument("--tolerance", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.samples < 1:
        print("Error: --samples must be positive", file=sys.stderr)
        return 2

    classes = [CharacterClass(c) for c in (args.classes or ["numeric"])]
    seed = args.seed if args.seed is not None else int(time.time())
    rng = create_rng(seed)
    pool = build_pool(classes)
    names = ", ".join(c.value for c in classes)
    print(f"Sampling {args.samples} characters from {names} (seed: {seed})")

    counts = sample_frequencies(classes, args.samples, rng)
    expected = args.samples / len(pool)

    if args.verbose or len(pool) <= 32:
        for char in pool:
            print(f"  {char!r:>5}: {counts.get(char, 0):6d} (expected {expected:.1f})")

    deviation = max_deviation(counts, pool, args.samples)
    print("\nResults:")
    print(f"  Pool size: {len(pool)}")
    print(f"  Max relative deviation: {deviation:.3f} (tolerance {args.tolerance})")
    if deviation > args.tolerance:
        print("  FAIL")
        return 1
    print("  OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
