"""Seeded pseudo-random helpers"""

import math
from typing import Callable

LCG_MODULUS = 2_147_483_647
LCG_MULTIPLIER = 48_271


def seeded_rand(seed: float) -> Callable[[], float]:
    """
    Lehmer (Park-Miller) generator bound to a seed.

    Each call advances the state and yields (state % 1000) / 1000, a value in
    [0, 0.999]. A zero seed yields 0.0 forever.
    """
    state = abs(math.floor(seed)) % LCG_MODULUS

    def rand() -> float:
        nonlocal state
        state = (state * LCG_MULTIPLIER) % LCG_MODULUS
        return (state % 1000) / 1000

    return rand


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity"""
    floor = math.floor(value)
    # value + 0.5 can itself round up, so compare the fraction instead
    return floor + 1 if value - floor >= 0.5 else floor
