"""
Tests for Polynomial Translation
"""

import numpy as np
import pytest
from interval_algebra import Interval, translate


class TestTranslate:
    """Test evaluating polynomials over intervals."""

    def test_linear(self):
        assert translate(Interval.closed(1, 2), [0, 1]) == Interval.closed(1, 2)
        assert translate(Interval.closed(1, 2), [3, -1]) == Interval.closed(1, 2)

    def test_quadratic(self):
        """1 + 2x + 3x^2 over [0, 1]."""
        assert translate(Interval.closed(0, 1), [1, 2, 3]) == Interval.closed(1, 6)

    def test_even_power_of_crossing(self):
        assert translate(Interval.closed(-1, 1), [0, 0, 1]) == Interval.closed(0, 1)

    def test_terms_are_independent(self):
        """x - x^2 is enclosed, not computed tightly."""
        result = translate(Interval.closed(0, 1), [0, 1, -1])
        assert result == Interval.closed(-1, 1)
        assert result.is_superset_of(Interval.closed(0, 0.25))

    def test_numpy_polynomial(self):
        p = np.polynomial.Polynomial([1, 2, 3])
        assert translate(Interval.closed(0, 1), p) == Interval.closed(1, 6)

    def test_half_bounded(self):
        assert translate(Interval.at_or_above(1), [1, 1]) == Interval.at_or_above(2)

    def test_degenerate(self):
        assert translate(Interval.closed(0, 1), []) == Interval.point(0)
        assert translate(Interval.closed(0, 1), [0, 0]) == Interval.point(0)
        assert translate(Interval.closed(0, 1), [5]) == Interval.point(5)
        assert translate(Interval.empty(), [1, 2]).is_empty


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
