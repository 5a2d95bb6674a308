"""
Seedable deterministic bit generators and float synthesis.
"""

from .base import RandomGenerator, bounded_rand, CYCLE_LIMIT
from .pcg import PCGMinimal
from .xoshiro import XoshiroMinimal
from .float_rand import FloatRand, float_rng, FLOAT32, FLOAT64

__all__ = [
    "RandomGenerator", "bounded_rand", "CYCLE_LIMIT",
    "PCGMinimal", "XoshiroMinimal",
    "FloatRand", "float_rng", "FLOAT32", "FLOAT64",
]
