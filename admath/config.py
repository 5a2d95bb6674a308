"""
Run configuration for prime-search jobs.

Configs are YAML files; see configs/default.yaml.  Every key is
optional and maps onto a SearchConfig field.
"""

from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import InvalidArgumentError
from .number.random_int import SEARCH_LIMIT
from .prng import PCGMinimal, XoshiroMinimal, RandomGenerator

ENGINES = {
    "pcg": PCGMinimal,
    "xoshiro": XoshiroMinimal,
}


@dataclass
class SearchConfig:
    """Configuration for a prime-generation run.

    If both min_value and max_value are set, primes are drawn from
    [min_value, max_value); otherwise by bit length.
    """
    bit_length: int = 256
    fixed: bool = True              # exact bit length
    count: int = 10                 # primes to generate
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    search_limit: int = SEARCH_LIMIT
    engine: str = "pcg"             # PRNG for float sampling
    seed: Optional[List[int]] = None  # None = secure seed
    float_samples: int = 0          # floats to draw per run
    output_dir: str = "runs/default"
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.engine not in ENGINES:
            raise InvalidArgumentError(
                f"Unknown engine: {self.engine} (expected one of "
                f"{sorted(ENGINES)})", cause=self.engine)
        if self.count < 0:
            raise InvalidArgumentError("`count` must not be negative",
                                       cause=self.count)
        if self.search_limit <= 0:
            raise InvalidArgumentError("`search_limit` must be positive",
                                       cause=self.search_limit)
        if (self.min_value is None) != (self.max_value is None):
            raise InvalidArgumentError(
                "`min_value` and `max_value` must be given together")

    @property
    def use_range(self) -> bool:
        return self.min_value is not None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def make_engine(self) -> RandomGenerator:
        """Instantiate the configured PRNG (securely seeded if seed is None)."""
        cls = ENGINES[self.engine]
        seed = self.seed if self.seed is not None else cls.get_seed()
        return cls(seed)


def config_from_dict(data: Optional[Dict[str, Any]]) -> SearchConfig:
    """Build a SearchConfig, rejecting unknown keys."""
    data = dict(data or {})
    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown config keys: {unknown}",
                                   cause=unknown)
    return SearchConfig(**data)


def load_config(config_path: Union[str, Path]) -> SearchConfig:
    with open(config_path, 'r') as f:
        return config_from_dict(yaml.safe_load(f))
