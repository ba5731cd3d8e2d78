"""
Security tests for cryptolab.

Tests specifically for invalid inputs and known weaknesses:
- Sentinel results for rejected operands
- Silent int64 overflow in modular exponentiation
- Fermat false positives and the even-number quirk
"""

import pytest

from cryptolab.core_crypto.euclid import (
    INVALID_RESULT, EuclidResult, InvalidEuclidInput,
    extended_gcd, solve_bezout, mod_inverse
)
from cryptolab.core_crypto.int64 import INT64_MAX, INT64_MIN
from cryptolab.core_crypto.modexp import mod_exp
from cryptolab.core_crypto.primality import (
    FermatWitness, fermat_witness, is_probably_prime
)


class TestEuclidInvalidInput:
    """Rejected operands produce the sentinel, never an exception."""

    @pytest.mark.parametrize("a,b", [(0, 5), (5, 0), (0, 0), (-3, 5), (5, -3), (-1, -1)])
    def test_sentinel(self, a, b):
        """Operands below 1 yield (0, 0, 0)."""
        result = extended_gcd(a, b)
        assert result == (0, 0, 0)
        assert result == INVALID_RESULT
        assert result.is_invalid

    @pytest.mark.parametrize("a,b", [(0, 5), (5, 0), (-7, 2)])
    def test_discriminated_variant(self, a, b):
        """solve_bezout names the rejected operands."""
        result = solve_bezout(a, b)
        assert isinstance(result, InvalidEuclidInput)
        assert (result.a, result.b) == (a, b)

    def test_valid_result_not_flagged(self):
        """A real result is never mistaken for the sentinel."""
        assert not extended_gcd(1, 1).is_invalid
        assert not EuclidResult(1, 0, 1).is_invalid

    def test_mod_inverse_invalid_operands(self):
        """Invalid operands have no inverse."""
        assert mod_inverse(0, 7) is None
        assert mod_inverse(3, 0) is None
        assert mod_inverse(-3, 7) is None


class TestFermatInvalidInput:
    """Witnesses at or above p are reported as INVALID."""

    def test_witness_equal_to_p(self):
        """a == p is invalid."""
        assert fermat_witness(11, 11) is FermatWitness.INVALID

    def test_witness_above_p(self):
        """a > p is invalid."""
        assert fermat_witness(12, 11) is FermatWitness.INVALID


class TestModExpOverflow:
    """The default mode wraps at 64 bits without reporting it."""

    def test_square_wraps_to_zero(self):
        """(2^32)^2 = 2^64 wraps to 0 before reduction."""
        # 2^64 = 4 * (2^62 + 1) - 4
        assert mod_exp(2 ** 32, 2, 2 ** 62 + 1) == 0
        assert mod_exp(2 ** 32, 2, 2 ** 62 + 1, strict=True) == 2 ** 62 - 3

    def test_accumulator_wraps(self):
        """The unreduced accumulator 2^31 * 2^62 wraps to 0."""
        # 2^63 ≡ 1 (mod 2^63 - 1), so 2^93 ≡ 2^30
        assert mod_exp(2 ** 31, 3, INT64_MAX) == 0
        assert mod_exp(2 ** 31, 3, INT64_MAX, strict=True) == 2 ** 30

    def test_accumulator_overflow_differs_from_pow(self):
        """2^30 * 2^29 * 2^27 = 2^86 wraps to 0; the true remainder is 2^24."""
        base, exponent, modulus = 2 ** 30, 7, 2 ** 31 - 1
        assert mod_exp(base, exponent, modulus) == 0
        assert mod_exp(base, exponent, modulus, strict=True) == pow(base, exponent, modulus) == 2 ** 24

    def test_results_stay_in_int64(self):
        """Whatever the inputs, the result fits the int64 domain."""
        value = mod_exp(INT64_MAX, INT64_MAX, INT64_MAX - 24)
        assert INT64_MIN <= value <= INT64_MAX

    def test_negative_exponent_terminates(self):
        """A negative exponent returns garbage instead of looping forever."""
        value = mod_exp(3, -1, 7)
        assert -7 < value < 7

    def test_zero_modulus_raises(self):
        """A zero modulus fails like the built-in remainder."""
        with pytest.raises(ZeroDivisionError):
            mod_exp(3, 2, 0)


class TestPrimalityWeaknesses:
    """Documented misclassifications."""

    def test_two_reported_composite(self, rng):
        """The even check rejects 2."""
        assert not is_probably_prime(2, rng)

    def test_carmichael_with_coprime_witnesses(self, scripted):
        """561 passes when every witness is coprime to it."""
        source = scripted([2, 4, 5, 7, 8] * 20)
        assert is_probably_prime(561, source)
        assert source.consumed == 100

    def test_carmichael_caught_by_shared_factor(self, scripted):
        """A witness sharing a factor with 561 exposes it."""
        source = scripted([3])
        assert not is_probably_prime(561, source)
