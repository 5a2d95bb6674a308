"""
PCG-XSH-RR 64/32 (permuted congruential generator).

Reference: pcg_basic.c by Melissa O'Neill,
https://github.com/imneme/pcg-c-basic
"""

from typing import Optional, Sequence

import numpy as np

from ..number.modular import MASK32, MASK64, rot32
from ..number.random_int import get_seed_words
from .base import RandomGenerator

PCG_MULTIPLIER = 0x5851F42D4C957F2D

# Fixed state used when no seed is given.  Reproducible, not random.
PCG_INITIAL_STATE = (0x853C49E6748FEA9B, 0xDA3E39CB94B95BDB)


class PCGMinimal(RandomGenerator):
    """PCG32: 64-bit LCG state, 32-bit permuted output.

    Usage:
        rng = PCGMinimal(PCGMinimal.get_seed())
        x = rng.get_u32_rand()

    Constructing without seeds always yields the same stream; use that
    for tests only.
    """

    bits = 32

    def __init__(self, seeds: Optional[Sequence[int]] = None):
        # [state, increment]; increment is odd
        if seeds is not None and len(seeds) >= 2:
            self._state = [0, ((int(seeds[1]) << 1) | 1) & MASK64]
            self._step()
            self._state[0] = (self._state[0] + int(seeds[0])) & MASK64
            self._step()
        else:
            self._state = list(PCG_INITIAL_STATE)

    @staticmethod
    def get_seed() -> np.ndarray:
        """Two secure 64-bit seed words."""
        return get_seed_words(2)

    @property
    def state(self):
        """(state, increment) snapshot."""
        return tuple(self._state)

    def _step(self):
        self._state[0] = (self._state[0] * PCG_MULTIPLIER
                          + self._state[1]) & MASK64

    @staticmethod
    def _output(old: int) -> int:
        xorshifted = ((old ^ (old >> 18)) >> 27) & MASK32
        return rot32(xorshifted, old >> 59)

    def get_u32_rand(self) -> int:
        old = self._state[0]
        self._step()
        return self._output(old)

    def get_u64_rand(self) -> int:
        # two words, high first
        hi = self.get_u32_rand()
        return (hi << 32) | self.get_u32_rand()
