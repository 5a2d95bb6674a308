"""
Error types raised by admath.

Two failure classes exist:
  - InvalidArgumentError: a precondition of the call was violated
    (e.g. mod < 1, even n for the Jacobi symbol, min >= max).
  - SearchExhaustedError: a bounded retry loop (rejection sampling,
    prime search, float synthesis) hit its ceiling.

Both subclass the matching builtin so callers can catch ValueError /
RuntimeError without importing this module.
"""

from typing import Any, Dict, Optional


class AdMathError(Exception):
    """Base error carrying a short machine-readable name and a cause."""

    err_name = "adMathError"

    def __init__(self, message: str, err_name: Optional[str] = None,
                 cause: Any = None):
        super().__init__(message)
        if err_name is not None:
            self.err_name = err_name
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (big ints become decimal strings)."""
        cause = self.cause
        if isinstance(cause, bool) or cause is None:
            pass
        elif isinstance(cause, int):
            cause = str(cause)
        elif isinstance(cause, (list, tuple)):
            cause = [str(c) if isinstance(c, int) and not isinstance(c, bool)
                     else c for c in cause]
        elif not isinstance(cause, (str, float, dict)):
            cause = repr(cause)
        return {
            "err_name": self.err_name,
            "message": str(self),
            "cause": cause,
        }


class InvalidArgumentError(AdMathError, ValueError):
    err_name = "invalidArgument"


class SearchExhaustedError(AdMathError, RuntimeError):
    err_name = "searchExhausted"
