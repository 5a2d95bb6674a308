"""
Uniform floats in [0, 1) built directly from IEEE-754 bit patterns.

Dividing a random integer by 2^w leaves the low end of [0, 1) with the
same absolute spacing as the top, so most representable small floats
can never be produced.  Here the exponent is drawn geometrically
(one step down per trailing zero bit of the random source) and the
mantissa filled from the remaining bits, so every float in [0, 1) is
reachable with its proper probability.

Boundary correction after:
  Allen B. Downey, "Generating Pseudo-random Floating-Point Values", 2007.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..errors import InvalidArgumentError, SearchExhaustedError
from ..number.modular import ctz
from .base import RandomGenerator

FLOAT_LIMIT = 100000


@dataclass(frozen=True)
class FloatLayout:
    """Bit layout of one IEEE-754 binary format fed by `width`-bit words."""
    width: int              # bits per raw draw
    mantissa_bits: int
    exponent_bias: int
    uint_dtype: type
    float_dtype: type

    @property
    def select_bits(self) -> int:
        """Low bits of the first draw spent on the exponent."""
        return self.width - self.mantissa_bits - 1


FLOAT32 = FloatLayout(32, 23, 127, np.uint32, np.float32)
FLOAT64 = FloatLayout(64, 52, 1023, np.uint64, np.float64)

_LAYOUTS = {32: FLOAT32, 64: FLOAT64}


def _exponent(r: int, draw: Callable[[], int], layout: FloatLayout) -> int:
    """Biased exponent: (bias - 1) minus a geometric count, clamped at 0."""
    exponent = layout.exponent_bias - 1
    low = r & ((1 << layout.select_bits) - 1)

    if low:
        return exponent - ctz(low, layout.select_bits)

    exponent -= layout.select_bits
    for _ in range(FLOAT_LIMIT):
        r2 = draw()
        if r2:
            return max(exponent - ctz(r2, layout.width), 0)
        exponent -= layout.width
        if exponent < 0:
            return 0

    raise SearchExhaustedError("loop exceeded limit")


def float_rng(draw: Callable[[], int], width: int = 64) -> Callable[[], float]:
    """Make a [0, 1) float sampler from a raw `width`-bit word source.

    Args:
        draw: Zero-argument callable returning uniform ints in [0, 2^width).
        width: 32 for float32 results, 64 for float64 results.

    Returns:
        Callable returning a Python float (float32-exact when width=32).
    """
    layout = _LAYOUTS.get(width)
    if layout is None:
        raise InvalidArgumentError("`width` must be 32 or 64", cause=width)

    word_mask = (1 << layout.width) - 1
    mantissa_mask = (1 << layout.mantissa_bits) - 1

    def get_word() -> int:
        return draw() & word_mask

    def gen() -> float:
        r1 = get_word()
        mantissa = (r1 >> layout.select_bits) & mantissa_mask

        exponent = _exponent(r1, get_word, layout)
        # top bit set on an empty mantissa rounds up to the next power of 2
        if mantissa == 0 and r1 >> (layout.width - 1):
            exponent += 1

        pattern = layout.uint_dtype((exponent << layout.mantissa_bits)
                                    | mantissa)
        return float(pattern.view(layout.float_dtype))

    def sample() -> float:
        for _ in range(FLOAT_LIMIT):
            x = gen()
            if x < 1.0:
                return x
        raise SearchExhaustedError("loop limit exceeded")

    return sample


class FloatRand:
    """float32 / float64 samplers over one integer engine.

    float32 consumes 32-bit words, float64 consumes 64-bit words (a
    32-bit engine supplies those as two draws).
    """

    def __init__(self, generator: RandomGenerator):
        self.generator = generator
        self._f32 = float_rng(generator.get_u32_rand, 32)
        self._f64 = float_rng(generator.get_u64_rand, 64)

    def float32(self) -> float:
        return self._f32()

    def float64(self) -> float:
        return self._f64()

    def float32_array(self, size: int) -> np.ndarray:
        return np.fromiter((self._f32() for _ in range(size)),
                           dtype=np.float32, count=size)

    def float64_array(self, size: int) -> np.ndarray:
        return np.fromiter((self._f64() for _ in range(size)),
                           dtype=np.float64, count=size)
