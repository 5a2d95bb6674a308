#!/usr/bin/env python3
"""
Random prime generator.

Draws Baillie-PSW probable primes as described by a YAML config and
records them as JSONL together with a run manifest and timing metrics.
Optionally samples a block of floats from the configured PRNG.

Usage:
    python scripts/gen_primes.py --config configs/default.yaml
    python scripts/gen_primes.py --config configs/default.yaml --count 3 --bits 512
    python scripts/gen_primes.py --range 1000 2000 --count 5
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from admath.config import SearchConfig, load_config
from admath.errors import AdMathError
from admath.logging import RunLogger, create_manifest
from admath.prime.baillie_psw import (
    get_rand_prime_by_bit_length, get_rand_prime_by_range,
)
from admath.prng.float_rand import FloatRand


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate random primes")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config (default: built-in defaults)")
    parser.add_argument("--count", type=int, default=None)
    parser.add_argument("--bits", type=int, default=None,
                        help="Bit length (overrides config)")
    parser.add_argument("--range", type=int, nargs=2, default=None,
                        metavar=("MIN", "MAX"),
                        help="Draw from [MIN, MAX) instead of by bit length")
    parser.add_argument("--output", type=str, default=None,
                        help="Output directory (overrides config)")
    parser.add_argument("--run-id", type=str, default=None)
    return parser


def resolve_config(args) -> SearchConfig:
    config = load_config(args.config) if args.config else SearchConfig()
    if args.count is not None:
        config.count = args.count
    if args.bits is not None:
        config.bit_length = args.bits
    if args.range is not None:
        config.min_value, config.max_value = args.range
    if args.output is not None:
        config.output_dir = args.output
    return config


def run(config: SearchConfig, run_id: str) -> dict:
    """Generate config.count primes, logging into config.output_dir."""
    out_dir = Path(config.output_dir)
    manifest = create_manifest(run_id, config.to_dict())
    manifest.save(out_dir / "manifest.json")

    with RunLogger(out_dir) as logger:
        t_start = time.time()
        for i in range(config.count):
            t0 = time.time()
            if config.use_range:
                p = get_rand_prime_by_range(config.min_value, config.max_value,
                                            limit=config.search_limit)
            else:
                p = get_rand_prime_by_bit_length(config.bit_length,
                                                 config.fixed,
                                                 limit=config.search_limit)
            logger.log_prime(p, index=i, elapsed_s=time.time() - t0)

        metrics = {
            "phase": "primes",
            "count": config.count,
            "total_s": time.time() - t_start,
        }

        if config.float_samples > 0:
            sampler = FloatRand(config.make_engine())
            t0 = time.time()
            floats = sampler.float64_array(config.float_samples)
            metrics.update(
                float_samples=config.float_samples,
                float_mean=float(np.mean(floats)),
                float_min=float(np.min(floats)),
                float_max=float(np.max(floats)),
                float_s=time.time() - t0,
            )

        logger.log_metrics(metrics)
        summary = logger.summary

    return {"output_dir": str(out_dir), **summary, **metrics}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = resolve_config(args)
    except (OSError, AdMathError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    run_id = args.run_id or time.strftime("primes_%Y%m%d_%H%M%S")
    try:
        result = run(config, run_id)
    except AdMathError as exc:
        print(f"ERROR [{exc.err_name}]: {exc}", file=sys.stderr)
        return 1

    print("\nSummary:", file=sys.stderr)
    print(f"  Primes: {result['primes_logged']}", file=sys.stderr)
    print(f"  Time: {result['total_s']:.3f}s", file=sys.stderr)
    print(f"  Output: {result['output_dir']}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
