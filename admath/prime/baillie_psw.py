"""
Baillie-PSW probable-prime test.

Pipeline for an odd candidate n:
  1. trial division by the primes up to 101
  2. strong Miller-Rabin test to base 2
  3. Selfridge parameter choice: first D in 5, -7, 9, -11, ... with
     (D/n) = -1, P = 1, Q = (1 - D) / 4
  4. strong Lucas probable-prime test with (D, P, Q)

No composite passing both 2 and 4 is known.  A True result means
"prime with overwhelming confidence", not a proof.

Adapted from the reference Python implementation at
https://github.com/armchaircaver/Baillie-PSW
"""

from typing import NamedTuple, Tuple

from ..errors import InvalidArgumentError, SearchExhaustedError
from ..number.modular import mod_pow, jacobi_symbol, is_square, residue
from ..number.random_int import (
    get_rand_bi_by_bit_length, get_rand_bi_by_range, SEARCH_LIMIT,
)


SMALL_PRIMES: Tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97, 101,
)


class LucasParams(NamedTuple):
    """Selected D and its Jacobi symbol.  (0, 0) means n is a square."""
    d: int
    jacobi: int


# ---------------------------------------------------------------------------
# Miller-Rabin
# ---------------------------------------------------------------------------

def miller_rabin_base2(n: int) -> bool:
    """Strong probable-prime test to base 2."""
    if n <= 1:
        return False
    if n % 2 == 0:
        return n == 2

    # n - 1 = d * 2^s, d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d >>= 1
        s += 1

    y = mod_pow(2, d, n)
    if y == 1:
        return True

    for _ in range(s):
        if y == n - 1:
            return True
        y = (y * y) % n
    return False


# ---------------------------------------------------------------------------
# Lucas
# ---------------------------------------------------------------------------

def choose_d(n: int) -> LucasParams:
    """First D in 5, -7, 9, -11, ... with jacobi(D, n) != 1.

    If jacobi(D, n) keeps coming out as 1 the candidate may be a perfect
    square, for which no such D exists; that is checked once at D = -15.
    """
    d = 5
    j = jacobi_symbol(d, n)

    while j > 0:
        d = -(d + 2) if d > 0 else -(d - 2)
        if d == -15 and is_square(n):
            return LucasParams(0, 0)
        j = jacobi_symbol(d, n)

    return LucasParams(d, j)


def div2_mod(x: int, n: int) -> int:
    """x / 2 mod n for odd n."""
    if x & 1:
        return residue((x + n) >> 1, n)
    return residue(x >> 1, n)


def uv_subscript(k: int, n: int, p: int, d: int) -> Tuple[int, int]:
    """(U_k, V_k) mod n of the Lucas sequence with parameters P, D.

    Binary ladder over the bits of k below the leading one:
      doubling:  U_2m = U V,           V_2m = (V^2 + D U^2) / 2
      increment: U_m+1 = (P U + V) / 2, V_m+1 = (D U + P V) / 2
    """
    u, v = 1, p

    for digit in bin(k)[3:]:
        u, v = residue(u * v, n), div2_mod(v * v + d * u * u, n)
        if digit == "1":
            u, v = div2_mod(p * u + v, n), div2_mod(d * u + p * v, n)

    return u, v


def lucas_spp(n: int, d: int, p: int, q: int) -> bool:
    """Strong Lucas probable-prime test."""
    if n % 2 != 1:
        raise InvalidArgumentError("`n` must be odd", cause=n)

    # n + 1 = k * 2^s, k odd
    k = n + 1
    s = 0
    while k % 2 == 0:
        k >>= 1
        s += 1

    u, v = uv_subscript(k, n, p, d)
    if u == 0:
        return True

    q = mod_pow(q, k, n)
    for _ in range(s):
        if v == 0:
            return True
        v = residue(v * v - 2 * q, n)
        q = mod_pow(q, 2, n)
    return False


# ---------------------------------------------------------------------------
# Baillie-PSW
# ---------------------------------------------------------------------------

def baillie_psw(n: int) -> bool:
    """True if n is a (Baillie-PSW) probable prime."""
    if n <= 1:
        return False
    if n % 2 == 0:
        return n == 2

    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p

    if not miller_rabin_base2(n):
        return False

    d, j = choose_d(n)
    if j == 0:
        return False

    q = (1 - d) // 4
    return lucas_spp(n, d, 1, q)


def get_rand_prime_by_range(min_value: int, max_value: int,
                            limit: int = SEARCH_LIMIT) -> int:
    """Random probable prime in [min_value, max_value)."""
    if max_value < 2:
        raise SearchExhaustedError("no primes below 2", err_name="noPrimesFound",
                                   cause=(min_value, max_value))

    for _ in range(limit):
        candidate = get_rand_bi_by_range(min_value, max_value)
        if baillie_psw(candidate):
            return candidate

    raise SearchExhaustedError(
        f"no prime found in [{min_value}, {max_value}) after {limit} draws",
        err_name="noPrimesFound",
        cause=(min_value, max_value),
    )


def get_rand_prime_by_bit_length(bit_length: int, fixed: bool = False,
                                 limit: int = SEARCH_LIMIT) -> int:
    """Random probable prime of at most (or, if fixed, exactly) bit_length bits."""
    if bit_length < 2:
        raise SearchExhaustedError("no primes shorter than 2 bits",
                                   err_name="noPrimesFound", cause=bit_length)

    for _ in range(limit):
        candidate = get_rand_bi_by_bit_length(bit_length, fixed)
        if baillie_psw(candidate):
            return candidate

    raise SearchExhaustedError(
        f"no {bit_length}-bit prime found after {limit} draws",
        err_name="noPrimesFound",
        cause=bit_length,
    )
