"""Seeded randomness helpers shared by both engines."""

from __future__ import annotations

import random
from typing import Optional


def build_rng(seed: Optional[int] = None) -> random.Random:
    """Return a private generator; ``None`` seeds from the OS like the module PRNG."""
    return random.Random(seed)


def pick_index(rng: random.Random, size: int) -> int:
    """Unbiased index draw: ``floor(random() * size)``."""
    if size <= 0:
        raise ValueError("size must be positive")
    idx = int(rng.random() * size)
    # random() < 1.0, but keep the index in range for any float rounding
    return min(idx, size - 1)
