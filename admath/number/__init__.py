"""
Integer arithmetic layer: modular primitives, factorial, secure random
integers and reduced fractions.
"""

from .modular import (
    residue, mod_pow, ex_euclidean, EuclidResult,
    jacobi_symbol, is_square,
    rot32, rotl64, ctz, MASK32, MASK64,
)
from .factorial import factorial
from .random_int import (
    get_rnd_int, get_rand_bi_by_bit_length, get_rand_bi_by_range,
    get_seed_words, SEARCH_LIMIT,
)
from .fraction import Fraction

__all__ = [
    "residue", "mod_pow", "ex_euclidean", "EuclidResult",
    "jacobi_symbol", "is_square",
    "rot32", "rotl64", "ctz", "MASK32", "MASK64",
    "factorial",
    "get_rnd_int", "get_rand_bi_by_bit_length", "get_rand_bi_by_range",
    "get_seed_words", "SEARCH_LIMIT",
    "Fraction",
]
