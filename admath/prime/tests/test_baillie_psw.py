"""
Unit tests for the Baillie-PSW engine.

Checks every stage separately (Miller-Rabin base 2, D selection, strong
Lucas) against known pseudoprimes, and the full test against sympy.
"""

import unittest
import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from sympy import isprime

from admath.errors import InvalidArgumentError, SearchExhaustedError
from admath.number.modular import mod_pow
from admath.prime.baillie_psw import (
    baillie_psw, miller_rabin_base2, choose_d, lucas_spp, uv_subscript,
    div2_mod, get_rand_prime_by_range, get_rand_prime_by_bit_length,
)

# Strong base-2 pseudoprimes (composite, pass Miller-Rabin base 2).
STRONG_PSP_BASE2 = [2047, 3277, 4033, 4681, 8321, 15841, 29341, 3215031751]

# Strong Lucas pseudoprimes for Selfridge parameters.
STRONG_LUCAS_PSP = [5459, 5777, 10877, 16109, 18971]

CUNNINGHAM_START = 79910197721667870187016101


class TestMillerRabinBase2(unittest.TestCase):

    def test_small_numbers(self):
        for n in range(-5, 2000):
            if n in STRONG_PSP_BASE2:
                continue
            self.assertEqual(miller_rabin_base2(n), isprime(n), n)

    def test_strong_pseudoprimes_pass(self):
        for n in STRONG_PSP_BASE2:
            self.assertTrue(miller_rabin_base2(n), n)
            self.assertFalse(baillie_psw(n), n)

    def test_lucas_pseudoprimes_fail(self):
        for n in STRONG_LUCAS_PSP:
            self.assertFalse(miller_rabin_base2(n), n)


class TestLucas(unittest.TestCase):

    def test_choose_d_sequence(self):
        # (5/7) = -1
        self.assertEqual(tuple(choose_d(7)), (5, -1))
        # (5/19) = 1, (-7/19) = -1
        self.assertEqual(tuple(choose_d(19)), (-7, -1))
        # (5/29) = 1, (-7/29) = 1, (9/29) = 1, (-11/29) = -1
        self.assertEqual(tuple(choose_d(29)), (-11, -1))

    def test_choose_d_shared_factor(self):
        self.assertEqual(tuple(choose_d(35)), (5, 0))
        # (5/11) = (-7/11) = (9/11) = 1, then -11 shares the factor
        self.assertEqual(tuple(choose_d(11)), (-11, 0))

    def test_choose_d_perfect_square(self):
        for root in [101, 103, 1009, 10007]:
            self.assertEqual(tuple(choose_d(root * root)), (0, 0))

    def test_choose_d_result_is_nonresidue(self):
        for n in range(3, 3000, 2):
            d, j = choose_d(n)
            if d == 0:
                continue
            self.assertIn(j, (-1, 0))
            self.assertEqual(d % 4, 1)

    def test_div2_mod(self):
        for n in [3, 7, 101, 10**9 + 7]:
            for x in range(-20, 20):
                self.assertEqual((div2_mod(x, n) * 2) % n, x % n)

    def test_uv_subscript_fibonacci(self):
        # P = 1, Q = -1 (D = 5) gives Fibonacci / Lucas numbers
        fib = [0, 1]
        luc = [2, 1]
        for _ in range(60):
            fib.append(fib[-1] + fib[-2])
            luc.append(luc[-1] + luc[-2])
        n = 1000003
        for k in range(1, 60):
            self.assertEqual(uv_subscript(k, n, 1, 5),
                             (fib[k] % n, luc[k] % n), k)

    def test_strong_lucas_pseudoprimes_pass(self):
        for n in STRONG_LUCAS_PSP:
            d, j = choose_d(n)
            self.assertEqual(j, -1)
            self.assertTrue(lucas_spp(n, d, 1, (1 - d) // 4), n)
            self.assertFalse(baillie_psw(n), n)

    def test_primes_pass(self):
        for n in [103, 1009, 65537, 2**61 - 1, 2**89 - 1]:
            d, j = choose_d(n)
            self.assertTrue(lucas_spp(n, d, 1, (1 - d) // 4), n)

    def test_even_n_raises(self):
        with self.assertRaises(InvalidArgumentError):
            lucas_spp(10, 5, 1, -1)


class TestBailliePSW(unittest.TestCase):

    def test_small_composites(self):
        self.assertFalse(baillie_psw(9))
        self.assertFalse(baillie_psw(15))
        for n in [-7, 0, 1, 4, 561, 1105, 1729, 10201, 25326001]:
            self.assertFalse(baillie_psw(n), n)

    def test_against_sympy(self):
        for n in range(0, 30000):
            self.assertEqual(baillie_psw(n), isprime(n), n)

    def test_random_large_against_sympy(self):
        rng = random.Random(2024)
        for _ in range(300):
            n = rng.getrandbits(96) | 1
            self.assertEqual(baillie_psw(n), isprime(n), n)

    def test_known_primes(self):
        for n in [2, 3, 101, 103, 2**31 - 1, 2**61 - 1, 2**127 - 1,
                  2**521 - 1, 10**9 + 7]:
            self.assertTrue(baillie_psw(n), n)

    def test_known_composites(self):
        for n in [(2**31 - 1) * (2**61 - 1), (2**61 - 1) ** 2, 2**128 + 1,
                  3215031751, 3825123056546413051]:
            self.assertFalse(baillie_psw(n), n)

    def test_cunningham_chain(self):
        p = CUNNINGHAM_START
        for i in range(18):
            self.assertTrue(baillie_psw(p), f"chain term {i}: {p}")
            p = 2 * p - 1

    def test_fermat_little_theorem(self):
        rng = random.Random(5)
        for _ in range(10):
            p = get_rand_prime_by_bit_length(64, fixed=True)
            for _ in range(20):
                a = rng.randint(1, p - 1)
                self.assertEqual(mod_pow(a, p - 1, p), 1)


class TestRandomPrimes(unittest.TestCase):

    def test_by_bit_length_fixed(self):
        for bits in [2, 3, 8, 64, 256]:
            p = get_rand_prime_by_bit_length(bits, fixed=True)
            self.assertEqual(p.bit_length(), bits)
            self.assertTrue(isprime(p))

    def test_by_bit_length_variable(self):
        for _ in range(20):
            p = get_rand_prime_by_bit_length(16)
            self.assertLess(p, 1 << 16)
            self.assertTrue(isprime(p))

    def test_by_range(self):
        for _ in range(20):
            p = get_rand_prime_by_range(1000, 2000)
            self.assertTrue(1000 <= p < 2000)
            self.assertTrue(isprime(p))
        self.assertEqual(get_rand_prime_by_range(2, 3), 2)

    def test_no_primes(self):
        with self.assertRaises(SearchExhaustedError) as ctx:
            get_rand_prime_by_range(0, 1)
        self.assertEqual(ctx.exception.err_name, "noPrimesFound")
        with self.assertRaises(SearchExhaustedError):
            get_rand_prime_by_bit_length(1)
        with self.assertRaises(SearchExhaustedError):
            get_rand_prime_by_range(24, 29, limit=50)

    def test_exhaustion_is_runtime_error(self):
        with self.assertRaises(RuntimeError):
            get_rand_prime_by_range(90, 97, limit=10)


if __name__ == "__main__":
    unittest.main()
