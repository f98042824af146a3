"""
Noise sources for occupancy estimates.

SeededNoise  - reproducible per (facility, date, hour); used for the past.
LiveNoise    - fresh draw per call; used for now / the future.

Both return a multiplicative factor in [0.8, 1.2).
"""

from __future__ import annotations

from typing import Optional

import numpy as np

NOISE_LOW = 0.8
NOISE_HIGH = 1.2

_HASH_MULTIPLIER = 31
_HASH_MASK = 0xFFFFFFFF


def hash_key(facility_id: str, iso_date: str, hour: int) -> int:
    """
    Stable unsigned 32-bit rolling hash of "facility|date|hour".

    h = (h * 31 + ord(ch)) mod 2**32 for every character, starting at 0.
    Independent of PYTHONHASHSEED and platform.
    """
    h = 0
    for ch in f"{facility_id}|{iso_date}|{hour}":
        h = (h * _HASH_MULTIPLIER + ord(ch)) & _HASH_MASK
    return h


class SeededNoise:
    """
    Deterministic factor: one PCG64 draw keyed by the seed.
    """

    def seed(self, facility_id: str, iso_date: str, hour: int) -> int:
        return hash_key(facility_id, iso_date, hour)

    def factor(self, seed: int) -> float:
        rng = np.random.Generator(np.random.PCG64(seed))
        return float(rng.uniform(NOISE_LOW, NOISE_HIGH))


class LiveNoise:
    """
    Non-reproducible factor drawn from an unseeded generator.
    A generator may be injected for tests.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    def factor(self) -> float:
        return float(self._rng.uniform(NOISE_LOW, NOISE_HIGH))
