"""
Tests for the Openness Flag Codec
"""

import pytest
from interval_algebra import flags as fl


class TestPredicates:
    """Test closed / open queries."""

    def test_closed(self):
        assert fl.is_closed(0)
        assert not fl.is_closed(1)
        assert fl.is_closed_lower(2)
        assert not fl.is_closed_lower(3)
        assert fl.is_closed_upper(1)
        assert not fl.is_closed_upper(2)

    def test_open(self):
        assert fl.is_open(3)
        assert not fl.is_open(1)
        assert fl.is_open_lower(1)
        assert fl.is_open_upper(2)
        assert not fl.is_open_upper(1)


class TestTransforms:
    """Test bit extraction and movement."""

    def test_extract(self):
        assert fl.lower_flag(3) == 1
        assert fl.upper_flag(3) == 2
        assert fl.lower_flag(2) == 0

    def test_reverse(self):
        assert fl.reverse_lower_flag(0) == 1
        assert fl.reverse_upper_flag(1) == 3
        assert fl.reverse_flags(1) == 2

    def test_move(self):
        assert fl.lower_flag_to_upper(1) == 2
        assert fl.lower_flag_to_upper(2) == 0
        assert fl.upper_flag_to_lower(2) == 1
        assert fl.upper_flag_to_lower(1) == 0

    @pytest.mark.parametrize("flags,expected", [(0, 0), (1, 2), (2, 1), (3, 3)])
    def test_swap(self, flags, expected):
        assert fl.swap_flags(flags) == expected

    @pytest.mark.parametrize("flags", [0, 1, 2, 3])
    def test_swap_is_involution(self, flags):
        assert fl.swap_flags(fl.swap_flags(flags)) == flags


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
