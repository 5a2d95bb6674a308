"""
Baillie-PSW primality testing and random prime search.
"""

from .baillie_psw import (
    baillie_psw, miller_rabin_base2, lucas_spp, choose_d, uv_subscript,
    div2_mod, LucasParams, SMALL_PRIMES,
    get_rand_prime_by_range, get_rand_prime_by_bit_length,
)

__all__ = [
    "baillie_psw", "miller_rabin_base2", "lucas_spp", "choose_d",
    "uv_subscript", "div2_mod", "LucasParams", "SMALL_PRIMES",
    "get_rand_prime_by_range", "get_rand_prime_by_bit_length",
]
