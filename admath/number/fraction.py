"""
Rational numbers in lowest terms with explicit infinities and NaN.

Unlike fractions.Fraction a zero denominator is allowed:
  1/0 = +inf, -1/0 = -inf, 0/0 = NaN.
"""

import json
import math
from typing import Any, Dict

from ..errors import InvalidArgumentError
from .modular import ex_euclidean


class Fraction:
    """numerator / denominator with denominator >= 0, always reduced."""

    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            numerator = (numerator > 0) - (numerator < 0)
        elif denominator < 0:
            numerator, denominator = -numerator, -denominator

        g = ex_euclidean(numerator, denominator).gcd
        if g != 0:
            numerator //= g
            denominator //= g

        self.numerator = numerator
        self.denominator = denominator

    @classmethod
    def from_decimal(cls, value: float,
                     denominator_digits: int = 20) -> "Fraction":
        """Approximate a float by continued fractions.

        Expansion stops once the denominator would exceed
        `denominator_digits` decimal digits.
        """
        if math.isnan(value):
            return cls(0, 0)
        if math.isinf(value):
            return cls(1 if value > 0 else -1, 0)

        negative = value < 0
        value = abs(value)

        a_0 = math.floor(value)
        frac = value - a_0
        if frac == 0:
            return cls(-a_0 if negative else a_0, 1)
        value = 1 / frac

        # p_{n+2} = a_{n+1} p_{n+1} + p_n, likewise q
        p_n, p_n1 = 1, a_0
        q_n, q_n1 = 0, 1

        while len(str(q_n1)) < denominator_digits + 1:
            a_n1 = math.floor(value)
            frac = value - a_n1

            p_n, p_n1 = p_n1, a_n1 * p_n1 + p_n
            q_n, q_n1 = q_n1, a_n1 * q_n1 + q_n

            if frac == 0:
                return cls(-p_n1 if negative else p_n1, q_n1)
            value = 1 / frac

        return cls(-p_n if negative else p_n, q_n)

    # -- arithmetic --------------------------------------------------------

    def minus(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def inverse(self) -> "Fraction":
        return Fraction(self.denominator, self.numerator)

    def add(self, right: "Fraction") -> "Fraction":
        return Fraction(
            self.numerator * right.denominator
            + right.numerator * self.denominator,
            self.denominator * right.denominator,
        )

    def sub(self, right: "Fraction") -> "Fraction":
        return self.add(right.minus())

    def mul(self, right: "Fraction") -> "Fraction":
        return Fraction(self.numerator * right.numerator,
                        self.denominator * right.denominator)

    def div(self, right: "Fraction") -> "Fraction":
        return self.mul(right.inverse())

    def mediant(self, right: "Fraction") -> "Fraction":
        return Fraction(self.numerator + right.numerator,
                        self.denominator + right.denominator)

    def __neg__(self):
        return self.minus()

    def __add__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if isinstance(other, int):
            return Fraction(other).sub(self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if isinstance(other, int):
            return Fraction(other).div(self)
        return NotImplemented

    # -- comparison / conversion -------------------------------------------

    def __eq__(self, other):
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return False
        return (self.numerator == other.numerator
                and self.denominator == other.denominator)

    def __hash__(self):
        return hash((self.numerator, self.denominator))

    def is_nan(self) -> bool:
        return self.numerator == 0 and self.denominator == 0

    def to_decimal(self) -> float:
        if self.denominator == 0:
            if self.numerator == 0:
                return math.nan
            return math.inf if self.numerator > 0 else -math.inf
        return self.numerator / self.denominator

    def __float__(self):
        return self.to_decimal()

    def __str__(self):
        if self.is_nan():
            return "NaN"
        if self.numerator == 0:
            return "0"
        if self.denominator == 0:
            return "-Infinity" if self.numerator < 0 else "Infinity"
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self):
        return f"Fraction({self.numerator}, {self.denominator})"

    # -- JSON -----------------------------------------------------------------

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "Fraction",
            "numerator": hex(self.numerator),
            "denominator": hex(self.denominator),
        }

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """Inverse of json.dumps(fraction.to_json())."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidArgumentError("cannot parse", cause=text) from exc

        if not isinstance(data, dict) or data.get("type") != "Fraction":
            raise InvalidArgumentError("cannot parse", cause=text)
        num, den = data.get("numerator"), data.get("denominator")
        if not isinstance(num, str) or not isinstance(den, str):
            raise InvalidArgumentError("cannot parse", cause=text)
        try:
            return cls(int(num, 0), int(den, 0))
        except ValueError as exc:
            raise InvalidArgumentError("cannot parse", cause=text) from exc
