"""
admath: arbitrary-precision number theory and seedable random generation.

  number  - residue, mod_pow, ex_euclidean, jacobi_symbol, is_square,
            factorial, secure random ints, Fraction
  prime   - Baillie-PSW test and random prime search
  prng    - PCG-XSH-RR, Xoshiro256++, IEEE-754 float synthesis

All integers are Python ints; every operation is exact.
"""

__version__ = "0.3.0"

from .errors import AdMathError, InvalidArgumentError, SearchExhaustedError
from .number import (
    residue, mod_pow, ex_euclidean, EuclidResult,
    jacobi_symbol, is_square, factorial,
    rot32, rotl64,
    get_rnd_int, get_rand_bi_by_bit_length, get_rand_bi_by_range,
    Fraction,
)
from .prime import (
    baillie_psw, get_rand_prime_by_range, get_rand_prime_by_bit_length,
)
from .prng import (
    RandomGenerator, PCGMinimal, XoshiroMinimal, FloatRand, float_rng,
)
from .config import SearchConfig, load_config
from .logging import RunLogger, RunManifest

__all__ = [
    "AdMathError", "InvalidArgumentError", "SearchExhaustedError",
    "residue", "mod_pow", "ex_euclidean", "EuclidResult",
    "jacobi_symbol", "is_square", "factorial",
    "rot32", "rotl64",
    "get_rnd_int", "get_rand_bi_by_bit_length", "get_rand_bi_by_range",
    "Fraction",
    "baillie_psw", "get_rand_prime_by_range", "get_rand_prime_by_bit_length",
    "RandomGenerator", "PCGMinimal", "XoshiroMinimal",
    "FloatRand", "float_rng",
    "SearchConfig", "load_config",
    "RunLogger", "RunManifest",
]
