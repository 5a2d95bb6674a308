"""
Structured logging for prime-search runs.

Produces:
  - manifest.json: One-time run metadata (git hash, config, node info)
  - primes.jsonl: One record per generated prime
  - metrics.jsonl: Timing and attempt counts
"""

import hashlib
import json
import platform
import subprocess
import sys
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict


@dataclass
class RunManifest:
    """Run-level metadata, saved once per run."""
    run_id: str
    timestamp: str
    git_commit: str
    config_hash: str
    node_name: str
    python_version: str
    package_version: str
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown'."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True, text=True, timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    return result.stdout.strip() if result.returncode == 0 else "unknown"


def _config_hash(config: Dict[str, Any]) -> str:
    """Deterministic hash of config dict."""
    s = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def create_manifest(run_id: str, config: Dict[str, Any]) -> RunManifest:
    """Create a RunManifest with auto-detected metadata."""
    from . import __version__

    return RunManifest(
        run_id=run_id,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        git_commit=_get_git_commit(),
        config_hash=_config_hash(config),
        node_name=platform.node(),
        python_version=sys.version,
        package_version=__version__,
        config=config,
    )


class RunLogger:
    """JSONL logger for one prime-search run.

    Big integers are written as decimal strings so the files stay
    readable by JSON parsers with 64-bit number limits.
    """

    def __init__(self, output_dir: Path, flush_every: int = 100):
        self.output_dir = Path(output_dir)
        self.flush_every = flush_every
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._primes_path = self.output_dir / "primes.jsonl"
        self._metrics_path = self.output_dir / "metrics.jsonl"

        # append mode so an interrupted run can be resumed
        self._primes_f = open(self._primes_path, 'a')
        try:
            self._metrics_f = open(self._metrics_path, 'a')
        except OSError:
            self._primes_f.close()
            raise

        self._primes_count = 0
        self._metrics_count = 0

    @property
    def primes_path(self) -> Path:
        return self._primes_path

    @property
    def metrics_path(self) -> Path:
        return self._metrics_path

    def log_prime(self, prime: int, **fields: Any):
        """Log one generated prime plus any extra fields."""
        record = {
            "prime": str(prime),
            "bit_length": prime.bit_length(),
            "timestamp": time.time(),
        }
        record.update(fields)
        self._primes_f.write(json.dumps(record, default=str) + "\n")
        self._primes_count += 1

        if self._primes_count % self.flush_every == 0:
            self._primes_f.flush()

    def log_metrics(self, record: Dict[str, Any]):
        """Log timing / performance metrics."""
        record = dict(record)
        record["timestamp"] = time.time()
        self._metrics_f.write(json.dumps(record, default=str) + "\n")
        self._metrics_f.flush()
        self._metrics_count += 1

    def close(self):
        """Flush and close all log files."""
        for f in [self._primes_f, self._metrics_f]:
            if not f.closed:
                f.flush()
                f.close()

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "primes_logged": self._primes_count,
            "metrics_logged": self._metrics_count,
        }

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
