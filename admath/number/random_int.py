"""
Uniform random integers from the OS secure byte source.

get_rand_bi_by_bit_length / get_rand_bi_by_range draw from `secrets`
and are suitable for key material.  get_rnd_int is a fast
non-cryptographic helper for picking indices.
"""

import math
import secrets
from typing import Union

import numpy as np

from ..errors import InvalidArgumentError, SearchExhaustedError
from .modular import mod_pow

# Ceiling for every rejection-sampling / search loop in the package.
SEARCH_LIMIT = 100000

_native_rng = np.random.default_rng()


def get_rnd_int(min_value: int, max_value: int) -> int:
    """Non-cryptographic integer in [min_value, max_value)."""
    if min_value >= max_value:
        raise InvalidArgumentError("`min_value` must be less than `max_value`",
                                   cause=(min_value, max_value))
    return int(_native_rng.integers(min_value, max_value))


def get_rand_bi_by_bit_length(length: Union[int, float],
                              fixed: bool = False) -> int:
    """Random integer of at most `length` bits.

    Args:
        length: Number of random bits.
        fixed: If True the top bit is forced to 1, so the result has
            exactly `length` bits.  Otherwise leading zeros are allowed.

    Returns:
        Non-negative int below 2**length.
    """
    if isinstance(length, float) and not math.isfinite(length):
        raise InvalidArgumentError("`length` is not a valid number",
                                   cause=length)
    if int(length) < 1:
        raise InvalidArgumentError("`length` must be at least 1", cause=length)
    length = int(length)

    byte_len = (length + 7) // 8
    raw = int.from_bytes(secrets.token_bytes(byte_len), "big")
    # keep the leading `length` bits of the byte string
    result = raw >> (byte_len * 8 - length)

    if fixed:
        result |= 1 << (length - 1)
    return result


def get_rand_bi_by_range(min_value: int, max_value: int,
                         limit: int = SEARCH_LIMIT) -> int:
    """Uniform integer in [min_value, max_value) without modulo bias.

    Candidates below 2**bits mod diff are rejected so the accepted
    range is a whole multiple of diff.
    """
    if min_value >= max_value:
        raise InvalidArgumentError("`min_value` must be less than `max_value`",
                                   cause=(min_value, max_value))
    diff = max_value - min_value
    bit_length = diff.bit_length()
    threshold = mod_pow(2, bit_length, diff)

    for _ in range(limit):
        candidate = get_rand_bi_by_bit_length(bit_length)
        if candidate >= threshold:
            return min_value + candidate % diff

    raise SearchExhaustedError(
        f"Failed to generate a random integer in {limit} attempts",
        cause=(min_value, max_value),
    )


def get_seed_words(count: int) -> np.ndarray:
    """`count` secure random 64-bit words, for seeding the PRNG engines."""
    if count <= 0:
        raise InvalidArgumentError("`count` must be positive", cause=count)
    buf = secrets.token_bytes(8 * count)
    return np.frombuffer(buf, dtype=np.uint64).copy()
