"""
Xoshiro256++.

Reference: https://prng.di.unimi.it/xoshiro256plusplus.c
by David Blackman and Sebastiano Vigna.
"""

from typing import Optional, Sequence

import numpy as np

from ..errors import InvalidArgumentError
from ..number.modular import MASK32, MASK64, rotl64
from ..number.random_int import get_seed_words
from .base import RandomGenerator

XOSHIRO_INITIAL_STATE = (
    0xBE562CB412E2260E,
    0x2E4284137D641AFF,
    0x4E19B36EE933E27E,
    0x7581CF8C4F4D4F7D,
)


class XoshiroMinimal(RandomGenerator):
    """256-bit state, 64-bit output.

    Seeding loads the first two words, mixes once, then adds the last
    two.  Without seeds the stream is fixed (tests only).
    """

    bits = 64

    def __init__(self, seeds: Optional[Sequence[int]] = None):
        if seeds is not None and len(seeds) >= 4:
            self._state = [int(seeds[0]) & MASK64, int(seeds[1]) & MASK64, 0, 0]
            self._step()
            self._state[2] = (self._state[2] + int(seeds[2])) & MASK64
            self._state[3] = (self._state[3] + int(seeds[3])) & MASK64
        else:
            self._state = list(XOSHIRO_INITIAL_STATE)

    @staticmethod
    def get_seed() -> np.ndarray:
        """Four secure 64-bit seed words."""
        return get_seed_words(4)

    @property
    def state(self):
        return tuple(self._state)

    def _step(self):
        s = self._state
        t = (s[1] << 17) & MASK64
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl64(s[3], 45)

    @property
    def value(self) -> int:
        """Output for the current state (does not advance)."""
        s = self._state
        return (rotl64((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64

    def get_u64_rand(self) -> int:
        out = self.value
        self._step()
        return out

    def get_u32_rand(self) -> int:
        return self.get_u64_rand() & MASK32

    def get_bounded_u32_rand(self, bound: int) -> int:
        # sampled from the full 64-bit word
        if bound > (1 << 32):
            raise InvalidArgumentError("`bound` exceeded limit (2^32)",
                                       cause=bound)
        return self.get_bounded_u64_rand(bound)
