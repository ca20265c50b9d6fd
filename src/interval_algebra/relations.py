"""
Set Relations

Superset / subset comparison over every pair of interval shapes. When two
endpoints are equal, a closed bound is more inclusive than an open one.
"""

from typing import Any

from .flags import is_closed_lower, is_closed_upper, is_open_lower, is_open_upper
from .interval import Above, All, Below, Bounded, Empty, Interval, Point


def _lower_reaches(lo1: Any, flags1: int, lo2: Any, flags2: int) -> bool:
    """Lower side 1 starts at or before lower side 2."""
    return lo1 < lo2 or (lo1 == lo2 and (is_closed_lower(flags1) or is_open_lower(flags2)))


def _upper_reaches(hi1: Any, flags1: int, hi2: Any, flags2: int) -> bool:
    """Upper side 1 ends at or after upper side 2."""
    return hi1 > hi2 or (hi1 == hi2 and (is_closed_upper(flags1) or is_open_upper(flags2)))


def is_superset_of(lhs: Interval, rhs: Interval) -> bool:
    # All, Empty and Point on either side
    if isinstance(lhs, All):
        return True
    if isinstance(rhs, All):
        return False
    if isinstance(rhs, Empty):
        return True
    if isinstance(lhs, Empty):
        return False
    if isinstance(lhs, Point):
        # rhs cannot be Empty here, so only an equal point fits
        return isinstance(rhs, Point) and lhs.value == rhs.value
    if isinstance(rhs, Point):
        return lhs.contains(rhs.value)

    # Above, Below and Bounded remain on both sides
    if isinstance(lhs, Above):
        if isinstance(rhs, Below):
            return False
        if isinstance(rhs, (Above, Bounded)):
            return _lower_reaches(lhs.lo, lhs.flags, rhs.lo, rhs.flags)

    if isinstance(lhs, Below):
        if isinstance(rhs, Above):
            return False
        if isinstance(rhs, (Below, Bounded)):
            return _upper_reaches(lhs.hi, lhs.flags, rhs.hi, rhs.flags)

    if isinstance(lhs, Bounded):
        if isinstance(rhs, (Above, Below)):
            return False
        if isinstance(rhs, Bounded):
            return (_lower_reaches(lhs.lo, lhs.flags, rhs.lo, rhs.flags) and
                    _upper_reaches(lhs.hi, lhs.flags, rhs.hi, rhs.flags))

    raise TypeError(f"Unknown interval pair: {type(lhs)}, {type(rhs)}")


def is_proper_superset_of(lhs: Interval, rhs: Interval) -> bool:
    return lhs != rhs and is_superset_of(lhs, rhs)


def is_subset_of(lhs: Interval, rhs: Interval) -> bool:
    return is_superset_of(rhs, lhs)


def is_proper_subset_of(lhs: Interval, rhs: Interval) -> bool:
    return is_proper_superset_of(rhs, lhs)
