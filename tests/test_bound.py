"""
Tests for Bound Descriptors
"""

from fractions import Fraction

import pytest
from interval_algebra import Closed, Open, Unbounded, Undefined


class TestBoundMap:
    """Test map keeps the bound kind."""

    def test_map(self):
        assert Closed(2).map(lambda x: x + 1) == Closed(3)
        assert Open(2).map(lambda x: x * 2) == Open(4)
        assert Unbounded().map(lambda x: x + 1) == Unbounded()
        assert Undefined().map(lambda x: x + 1) == Undefined()

    def test_negate_and_reciprocal(self):
        assert -Closed(2) == Closed(-2)
        assert Open(4).reciprocal() == Open(Fraction(1, 4))


class TestBoundCombine:
    """Test pairwise combination."""

    def test_closed_keeps_other_kind(self):
        assert Closed(1) + Closed(2) == Closed(3)
        assert Closed(1) + Open(2) == Open(3)
        assert Open(1) + Closed(2) == Open(3)
        assert Open(1) + Open(2) == Open(3)

    def test_unbounded_absorbs(self):
        assert Closed(1) + Unbounded() == Unbounded()
        assert Unbounded() * Open(2) == Unbounded()

    def test_undefined_absorbs_first(self):
        assert Undefined() + Unbounded() == Undefined()
        assert Unbounded() - Undefined() == Undefined()
        assert Closed(1) * Undefined() == Undefined()

    def test_scalar_ops(self):
        assert Closed(1) + 2 == Closed(3)
        assert Open(5) - 2 == Open(3)
        assert Closed(3) * 2 == Closed(6)
        assert Open(Fraction(3)) / 2 == Open(Fraction(3, 2))

    def test_bound_ops(self):
        assert Closed(5) - Open(2) == Open(3)
        assert Closed(3) * Closed(2) == Closed(6)
        assert Closed(Fraction(3)) / Closed(2) == Closed(Fraction(3, 2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
