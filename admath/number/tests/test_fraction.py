"""
Tests for Fraction: reduction, signed infinities / NaN, continued
fraction conversion and JSON round trip.
"""

import json
import math
import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from admath.errors import InvalidArgumentError
from admath.number.fraction import Fraction


class TestConstruction(unittest.TestCase):

    def test_reduced(self):
        f = Fraction(6, -8)
        self.assertEqual((f.numerator, f.denominator), (-3, 4))

    def test_zero_denominator(self):
        self.assertEqual(str(Fraction(5, 0)), "Infinity")
        self.assertEqual(str(Fraction(-5, 0)), "-Infinity")
        self.assertEqual(str(Fraction(0, 0)), "NaN")
        self.assertEqual((Fraction(-7, 0).numerator, Fraction(-7, 0).denominator),
                         (-1, 0))

    def test_str(self):
        self.assertEqual(str(Fraction(0, 5)), "0")
        self.assertEqual(str(Fraction(10, 5)), "2")
        self.assertEqual(str(Fraction(1, 3)), "1/3")


class TestArithmetic(unittest.TestCase):

    def test_operations(self):
        a, b = Fraction(1, 2), Fraction(1, 3)
        self.assertEqual(a + b, Fraction(5, 6))
        self.assertEqual(a - b, Fraction(1, 6))
        self.assertEqual(a * b, Fraction(1, 6))
        self.assertEqual(a / b, Fraction(3, 2))
        self.assertEqual(a.mediant(b), Fraction(2, 5))
        self.assertEqual(-a, Fraction(-1, 2))
        self.assertEqual(a.inverse(), Fraction(2))

    def test_int_operands(self):
        self.assertEqual(Fraction(1, 2) + 1, Fraction(3, 2))
        self.assertEqual(1 - Fraction(1, 4), Fraction(3, 4))
        self.assertEqual(2 * Fraction(1, 4), Fraction(1, 2))
        self.assertEqual(1 / Fraction(1, 4), 4)

    def test_division_by_zero_gives_infinity(self):
        self.assertEqual(str(Fraction(1, 2) / Fraction(0)), "Infinity")
        self.assertTrue(math.isinf(float(Fraction(-1, 2) / Fraction(0))))

    def test_nan_not_equal(self):
        self.assertNotEqual(Fraction(0, 0), Fraction(0, 0))
        self.assertTrue(math.isnan(Fraction(0, 0).to_decimal()))


class TestFromDecimal(unittest.TestCase):

    def test_exact_values(self):
        self.assertEqual(Fraction.from_decimal(0.5), Fraction(1, 2))
        self.assertEqual(Fraction.from_decimal(-2.5), Fraction(-5, 2))
        self.assertEqual(Fraction.from_decimal(3.0), Fraction(3))

    def test_negative_sign_kept(self):
        f = Fraction.from_decimal(-0.75)
        self.assertLess(f.numerator, 0)
        self.assertAlmostEqual(float(f), -0.75)

    def test_approximation(self):
        f = Fraction.from_decimal(math.pi, 6)
        self.assertLessEqual(len(str(f.denominator)), 7)
        self.assertAlmostEqual(float(f), math.pi, places=9)
        self.assertAlmostEqual(float(Fraction.from_decimal(1 / 3)), 1 / 3)

    def test_special_values(self):
        self.assertEqual(str(Fraction.from_decimal(math.nan)), "NaN")
        self.assertEqual(str(Fraction.from_decimal(math.inf)), "Infinity")
        self.assertEqual(str(Fraction.from_decimal(-math.inf)), "-Infinity")


class TestJson(unittest.TestCase):

    def test_round_trip(self):
        for f in [Fraction(-355, 113), Fraction(1, 0), Fraction(0, 7)]:
            text = json.dumps(f.to_json())
            self.assertEqual(Fraction.parse(text), f)

    def test_hex_encoding(self):
        self.assertEqual(Fraction(-255, 16).to_json(),
                         {"type": "Fraction", "numerator": "-0xff",
                          "denominator": "0x10"})

    def test_bad_input(self):
        for text in ['{"type": "Other"}', 'not json', '[1, 2]',
                     '{"type": "Fraction", "numerator": 1, "denominator": 2}',
                     '{"type": "Fraction", "numerator": "zz", "denominator": "1"}']:
            with self.assertRaises(InvalidArgumentError):
                Fraction.parse(text)


if __name__ == "__main__":
    unittest.main()
