"""
Exact factorial via odd-part decomposition.

n! = (odd part) * 2^(n - popcount(n)).  The odd part is assembled from
products of consecutive odd numbers over ranges read off the binary
digits of n, and each range product is split recursively so the big
multiplications stay balanced.
"""

from ..errors import InvalidArgumentError

# Below this many bits of product a plain loop beats splitting.
_SPLIT_BITS = 63


def _odd_prod(lo: int, hi: int) -> int:
    """Product of the odd integers in [lo, hi).  lo and hi are odd."""
    if lo >= hi:
        return 1

    max_bits = (hi - 2).bit_length()
    num_odds = (hi - lo) // 2

    if num_odds < 2 or max_bits * num_odds < _SPLIT_BITS:
        result = lo
        for i in range(lo + 2, hi, 2):
            result *= i
        return result

    mid = (lo + num_odds) | 1
    return _odd_prod(lo, mid) * _odd_prod(mid, hi)


def _odd_part(n: int) -> int:
    """Odd part of n!."""
    lower = 3
    result = 1
    tmp = 1
    m = n.bit_length() - 1

    for i in range(m - 1, -1, -1):
        upper = ((n >> i) + 1) | 1
        tmp *= _odd_prod(lower, upper)
        lower = upper
        result *= tmp

    return result


def factorial(n: int) -> int:
    """n! for n >= 0."""
    if n < 0:
        raise InvalidArgumentError("`n` must be non-negative", cause=n)
    if n == 0:
        return 1

    two_exp = n - bin(n).count("1")
    return _odd_part(n) << two_exp
