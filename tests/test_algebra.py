"""
Tests for the Element Algebra
"""

from fractions import Fraction

import numpy as np
import pytest
from interval_algebra import (
    Algebra,
    IntervalDomainError,
    IntervalZeroDivisionError,
    NumericAlgebra,
)


class TestNumericAlgebra:
    """Test the default numeric algebra."""

    def setup_method(self):
        self.alg = NumericAlgebra()

    def test_identities(self):
        assert self.alg.zero() == 0
        assert self.alg.one() == 1

    def test_reciprocal_exact_for_rationals(self):
        assert self.alg.reciprocal(4) == Fraction(1, 4)
        assert isinstance(self.alg.reciprocal(4), Fraction)
        assert self.alg.reciprocal(Fraction(2, 3)) == Fraction(3, 2)

    def test_reciprocal_float(self):
        assert self.alg.reciprocal(0.5) == 2.0
        assert self.alg.reciprocal(np.float64(4.0)) == 0.25

    def test_reciprocal_of_zero(self):
        with pytest.raises(IntervalZeroDivisionError):
            self.alg.reciprocal(0)

    def test_exact_roots(self):
        assert self.alg.nroot(9, 2) == 3
        assert isinstance(self.alg.nroot(9, 2), int)
        assert self.alg.nroot(Fraction(8, 27), 3) == Fraction(2, 3)
        assert self.alg.nroot(-8, 3) == -2

    def test_inexact_roots(self):
        assert self.alg.nroot(2, 2) == pytest.approx(1.41421356)
        assert self.alg.nroot(27.0, 3) == pytest.approx(3.0)
        assert self.alg.nroot(-32.0, 5) == pytest.approx(-2.0)

    def test_root_errors(self):
        with pytest.raises(IntervalDomainError):
            self.alg.nroot(-4, 2)
        with pytest.raises(ValueError):
            self.alg.nroot(4, 0)


class TestLargeRoots:
    """Roots of values beyond float precision stay exact or enclosed."""

    def setup_method(self):
        self.alg = NumericAlgebra()

    def test_perfect_powers_beyond_float_precision(self):
        assert self.alg.nroot(3 ** 80, 2) == 3 ** 40
        assert isinstance(self.alg.nroot(3 ** 80, 2), int)
        assert self.alg.nroot(7 ** 90, 3) == 7 ** 30
        assert self.alg.nroot(-(11 ** 75), 5) == -(11 ** 15)
        assert self.alg.nroot(Fraction(5 ** 60, 2 ** 120), 4) == Fraction(5 ** 15, 2 ** 30)

    def test_beyond_float_range(self):
        assert self.alg.nroot(10 ** 400, 2) == 10 ** 200
        lo, hi = self.alg.nroot_bounds(2 * 10 ** 700, 2)
        assert lo ** 2 <= 2 * 10 ** 700 <= hi ** 2
        assert hi - lo <= 1

    def test_below_float_range(self):
        lo, hi = self.alg.nroot_bounds(Fraction(2, 10 ** 700), 2)
        assert lo ** 2 <= Fraction(2, 10 ** 700) <= hi ** 2


class TestRootBounds:
    """Inexact roots are enclosed, exact ones are returned as is."""

    def setup_method(self):
        self.alg = NumericAlgebra()

    def test_exact(self):
        assert self.alg.nroot_bounds(9, 2) == (3, 3)
        assert self.alg.nroot_bounds(4.0, 2) == (2.0, 2.0)

    def test_inexact_rounds_outward(self):
        for x, k in [(2, 2), (3, 2), (Fraction(1, 3), 2), (10, 3), (0.1, 2), (-10, 3), (7.5, 5)]:
            lo, hi = self.alg.nroot_bounds(x, k)
            assert lo < hi
            assert Fraction(lo) ** k < Fraction(x) < Fraction(hi) ** k
            assert lo <= self.alg.nroot(x, k) <= hi

    def test_default_enclosure_is_the_root(self):
        """An algebra with only nroot gets a degenerate enclosure."""
        class ExactAlgebra(Algebra):
            def nroot(self, x, k):
                return x

        assert ExactAlgebra().nroot_bounds(5, 2) == (5, 5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
