"""
Exact modular arithmetic over Python ints.

These are the primitives the Baillie-PSW engine is built on.  Every
function is pure and exact; nothing here touches floating point.
"""

from typing import NamedTuple

from ..errors import InvalidArgumentError


MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


class EuclidResult(NamedTuple):
    """Bezout coefficients with a*x - b*y == gcd."""
    x: int
    y: int
    gcd: int


# ---------------------------------------------------------------------------
# Residues and powers
# ---------------------------------------------------------------------------

def residue(n: int, mod: int) -> int:
    """n mod `mod`, always in [0, mod) for positive mod."""
    if mod == 0:
        raise InvalidArgumentError("`mod` must not be zero", cause=n)
    return n % mod


def mod_pow(base: int, power: int, mod: int) -> int:
    """base^power mod `mod` by right-to-left square-and-multiply.

    Bits of `power` are consumed least-significant first: the base is
    squared every iteration and folded into the accumulator when the
    current bit is set.

    0^0 is taken as 1, so mod_pow(b, 0, m) == 1 % m for every b.
    """
    if mod < 1:
        raise InvalidArgumentError("`mod` must be positive", cause=mod)
    if power < 0:
        raise InvalidArgumentError("`power` must not be negative", cause=power)

    if mod == 1:
        return 0
    if power == 0:
        return 1

    base %= mod
    if base == 0 or base == 1:
        return base
    if base == mod - 1:
        # (-1)^k
        return mod - 1 if power & 1 else 1

    result = 1
    while power > 0:
        if power & 1:
            result = (result * base) % mod
        base = (base * base) % mod
        power >>= 1
    return result


# ---------------------------------------------------------------------------
# Extended Euclid
# ---------------------------------------------------------------------------

def _trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def ex_euclidean(a: int, b: int) -> EuclidResult:
    """Extended Euclidean algorithm.

    Returns (x, y, gcd) with a*x - b*y == gcd(a, b) and gcd >= 0.
    Note the minus sign: this is the form used for fraction reduction.
    """
    if a == 0 and b == 0:
        return EuclidResult(0, 0, 0)
    if a == 0:
        return EuclidResult(0, -1, b) if b > 0 else EuclidResult(0, 1, -b)
    if b == 0:
        return EuclidResult(1, 0, a) if a > 0 else EuclidResult(-1, 0, -a)

    # invariant: a*x_i - b*y_i == c_i
    x_1, y_1, c_1 = 1, 0, a
    x_2, y_2, c_2 = 0, -1, b

    while True:
        q = _trunc_div(c_1, c_2)
        c_nxt = c_1 - q * c_2
        if c_nxt == 0:
            break
        x_1, x_2 = x_2, x_1 - q * x_2
        y_1, y_2 = y_2, y_1 - q * y_2
        c_1, c_2 = c_2, c_nxt

    if c_2 < 0:
        x_2, y_2, c_2 = -x_2, -y_2, -c_2

    return EuclidResult(x_2, y_2, c_2)


# ---------------------------------------------------------------------------
# Jacobi symbol / squares
# ---------------------------------------------------------------------------

def jacobi_symbol(a: int, n: int) -> int:
    """Jacobi symbol (a/n) for a positive odd n.  Returns -1, 0 or 1."""
    if n < 1 or n % 2 == 0:
        raise InvalidArgumentError("`n` must be a positive odd integer",
                                   cause=n)
    a %= n

    result = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        # quadratic reciprocity
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n

    return result if n == 1 else 0


def is_square(n: int) -> bool:
    """True iff n is a perfect square (bisection on the root)."""
    if n < 0:
        return False
    if n == 0:
        return True

    x, y = 1, n
    while x + 1 < y:
        mid = (x + y) // 2
        if mid * mid < n:
            x = mid
        else:
            y = mid
    return n == x * x or n == (x + 1) * (x + 1)


# ---------------------------------------------------------------------------
# Bit helpers
# ---------------------------------------------------------------------------

def rot32(value: int, rot: int) -> int:
    """Rotate a 32-bit word right by `rot` (mod 32)."""
    value &= MASK32
    rot &= 31
    return ((value >> rot) | (value << (-rot & 31))) & MASK32


def rotl64(value: int, rot: int) -> int:
    """Rotate a 64-bit word left by `rot` (mod 64)."""
    value &= MASK64
    rot &= 63
    return ((value << rot) | (value >> (-rot & 63))) & MASK64


def ctz(value: int, width: int = 64) -> int:
    """Count trailing zero bits; `width` when value is 0."""
    if value == 0:
        return width
    return (value & -value).bit_length() - 1
