"""
Tests for Superset / Subset Relations
"""

import pytest
from interval_algebra import Interval, is_proper_subset_of, is_superset_of


class TestSuperset:
    """Test is_superset_of across shapes."""

    def test_all_and_empty(self):
        """All contains everything, Empty is inside everything."""
        assert Interval.all().is_superset_of(Interval.all())
        assert Interval.all().is_superset_of(Interval.empty())
        assert not Interval.closed(0, 1).is_superset_of(Interval.all())
        assert Interval.point(1).is_superset_of(Interval.empty())
        assert Interval.empty().is_superset_of(Interval.empty())
        assert not Interval.empty().is_superset_of(Interval.point(0))

    def test_points(self):
        assert Interval.point(1).is_superset_of(Interval.point(1))
        assert not Interval.point(1).is_superset_of(Interval.point(2))
        assert not Interval.point(1).is_superset_of(Interval.closed(0, 2))
        assert Interval.closed(0, 2).is_superset_of(Interval.point(2))
        assert not Interval.open(0, 2).is_superset_of(Interval.point(2))

    def test_half_bounded(self):
        assert Interval.above(0).is_superset_of(Interval.above(1))
        assert Interval.at_or_above(0).is_superset_of(Interval.above(0))
        assert not Interval.above(0).is_superset_of(Interval.at_or_above(0))
        assert Interval.above(0).is_superset_of(Interval.above(0))
        assert Interval.below(5).is_superset_of(Interval.open_lower(1, 4))
        assert not Interval.below(5).is_superset_of(Interval.open_lower(1, 5))
        assert Interval.at_or_below(5).is_superset_of(Interval.closed(1, 5))

    def test_opposite_directions(self):
        assert not Interval.above(0).is_superset_of(Interval.below(10))
        assert not Interval.below(0).is_superset_of(Interval.above(-10))
        assert not Interval.closed(0, 10).is_superset_of(Interval.above(5))
        assert not Interval.closed(0, 10).is_superset_of(Interval.below(5))

    def test_bounded(self):
        assert Interval.closed(0, 10).is_superset_of(Interval.open(0, 10))
        assert not Interval.open(0, 10).is_superset_of(Interval.closed(0, 10))
        assert Interval.open(0, 10).is_superset_of(Interval.open(0, 10))
        assert Interval.closed(0, 10).is_superset_of(Interval.closed(2, 3))
        assert not Interval.closed(0, 10).is_superset_of(Interval.closed(2, 11))

    def test_function_form(self):
        assert is_superset_of(Interval.closed(0, 5), Interval.closed(1, 2))


class TestSubset:
    """Test subset and proper variants."""

    def test_subset(self):
        assert Interval.closed(1, 2).is_subset_of(Interval.closed(0, 5))
        assert Interval.empty().is_subset_of(Interval.point(3))
        assert not Interval.all().is_subset_of(Interval.above(0))

    def test_proper(self):
        iv = Interval.closed(0, 5)
        assert not iv.is_proper_superset_of(Interval.closed(0, 5))
        assert iv.is_proper_superset_of(Interval.open_upper(0, 5))
        assert Interval.open_upper(0, 5).is_proper_subset_of(iv)
        assert is_proper_subset_of(Interval.point(1), iv)
        assert not Interval.empty().is_proper_subset_of(Interval.empty())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
