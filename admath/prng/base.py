"""
Common interface for the fixed-algorithm bit generators.

Each engine has a native word size (`bits` = 32 or 64) and implements
the raw draw for that size; the base class derives the other word
size, unbiased bounded draws, and bulk output from it.

Engines hold mutable state and are not thread-safe.  Share one across
threads only behind a lock.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional

import numpy as np

from ..errors import InvalidArgumentError, SearchExhaustedError

CYCLE_LIMIT = 100000


def bounded_rand(draw: Callable[[], int], width: int, bound: int,
                 limit: int = CYCLE_LIMIT) -> int:
    """Uniform integer in [0, bound) from a `width`-bit raw source.

    Rejects raw values below 2**width mod bound, so the accepted range
    is an exact multiple of bound.
    """
    span = 1 << width
    if bound > span:
        raise InvalidArgumentError(f"`bound` exceeded limit (2^{width})",
                                   cause=bound)
    if bound <= 0:
        raise InvalidArgumentError("`bound` must be positive", cause=bound)

    threshold = span % bound
    for _ in range(limit):
        r = draw()
        if r >= threshold:
            return r % bound

    raise SearchExhaustedError("exceeded loop limit", cause=bound)


class RandomGenerator(ABC):
    """Seedable bit generator producing unsigned 32/64-bit words."""

    bits: int = 0

    @abstractmethod
    def get_u32_rand(self) -> int:
        """Next uniform integer in [0, 2^32)."""

    @abstractmethod
    def get_u64_rand(self) -> int:
        """Next uniform integer in [0, 2^64)."""

    # -- bounded ------------------------------------------------------------

    def get_bounded_u32_rand(self, bound: int) -> int:
        return bounded_rand(self.get_u32_rand, 32, bound)

    def get_bounded_u64_rand(self, bound: int) -> int:
        return bounded_rand(self.get_u64_rand, 64, bound)

    # -- bulk ---------------------------------------------------------------

    def gen_u32_rands(self, step: int,
                      bound: Optional[int] = None) -> Iterator[int]:
        """Lazily yield `step` 32-bit draws (bounded if `bound` is given).

        The iterator advances this engine's state as it is consumed; it
        cannot be rewound.  Rebuild the engine from its seed to replay.
        """
        if step <= 0:
            raise InvalidArgumentError("`step` must be positive", cause=step)
        return self._gen(step, self.get_u32_rand, self.get_bounded_u32_rand,
                         bound)

    def gen_u64_rands(self, step: int,
                      bound: Optional[int] = None) -> Iterator[int]:
        """64-bit counterpart of gen_u32_rands."""
        if step <= 0:
            raise InvalidArgumentError("`step` must be positive", cause=step)
        return self._gen(step, self.get_u64_rand, self.get_bounded_u64_rand,
                         bound)

    @staticmethod
    def _gen(step, raw, bounded, bound):
        for _ in range(step):
            yield raw() if bound is None else bounded(bound)

    def u32_array(self, size: int, bound: Optional[int] = None) -> np.ndarray:
        """`size` draws collected into a uint32 array."""
        return np.fromiter(self.gen_u32_rands(size, bound),
                           dtype=np.uint32, count=size)

    def u64_array(self, size: int, bound: Optional[int] = None) -> np.ndarray:
        """`size` draws collected into a uint64 array."""
        return np.fromiter(self.gen_u64_rands(size, bound),
                           dtype=np.uint64, count=size)

    def __repr__(self):
        return f"{type(self).__name__}(bits={self.bits})"
