"""
Set Operations on Intervals

- intersect: the common part of two intervals
- union: the convex hull of two intervals (always a single interval)
- complement: 0, 1 or 2 disjoint intervals covering everything else
- difference: the pieces of one interval outside another
- split: partition around a value, excluding the value itself
- vmin / vmax: the interval of all pairwise minima / maxima

Endpoint pairs carry their flag in their own bit position. Operands are
masked per side before combining so one side's openness never leaks into
the other side of the result.
"""

from typing import Any, List, Tuple

from .bound import Bound, Closed, Open, Unbounded, Undefined
from .flags import (
    CLOSED,
    lower_flag,
    lower_flag_to_upper,
    reverse_lower_flag,
    reverse_upper_flag,
    upper_flag,
    upper_flag_to_lower,
)
from .interval import Above, All, Below, Bounded, Empty, Interval, Point


# Endpoint selection. At equal values intersection keeps the open flag,
# union keeps the closed one.

def _max_lower(lo1: Any, f1: int, lo2: Any, f2: int) -> Tuple[Any, int]:
    if lo1 < lo2:
        return lo2, f2
    if lo1 == lo2:
        return lo1, f1 | f2
    return lo1, f1


def _min_upper(hi1: Any, f1: int, hi2: Any, f2: int) -> Tuple[Any, int]:
    if hi1 < hi2:
        return hi1, f1
    if hi1 == hi2:
        return hi1, f1 | f2
    return hi2, f2


def _min_lower(lo1: Any, f1: int, lo2: Any, f2: int) -> Tuple[Any, int]:
    if lo1 < lo2:
        return lo1, f1
    if lo1 == lo2:
        return lo1, f1 & f2
    return lo2, f2


def _max_upper(hi1: Any, f1: int, hi2: Any, f2: int) -> Tuple[Any, int]:
    if hi1 < hi2:
        return hi2, f2
    if hi1 == hi2:
        return hi1, f1 & f2
    return hi1, f1


def intersect(lhs: Interval, rhs: Interval) -> Interval:
    """Intersection of two intervals."""
    if isinstance(lhs, All):
        return rhs
    if isinstance(rhs, All):
        return lhs

    if isinstance(lhs, Empty):
        return lhs
    if isinstance(rhs, Empty):
        return rhs

    if isinstance(lhs, Point):
        return lhs if rhs.contains(lhs.value) else Interval.empty()
    if isinstance(rhs, Point):
        return rhs if lhs.contains(rhs.value) else Interval.empty()

    if isinstance(lhs, Below):
        if isinstance(rhs, Below):
            return Below(*_min_upper(lhs.hi, lhs.flags, rhs.hi, rhs.flags))
        if isinstance(rhs, Above):
            return Interval.from_flags(rhs.lo, lhs.hi, rhs.flags | lhs.flags)
        if isinstance(rhs, Bounded):
            hi, uf = _min_upper(lhs.hi, lhs.flags, rhs.hi, upper_flag(rhs.flags))
            return Interval.from_flags(rhs.lo, hi, lower_flag(rhs.flags) | uf)

    if isinstance(lhs, Above):
        if isinstance(rhs, Above):
            return Above(*_max_lower(lhs.lo, lhs.flags, rhs.lo, rhs.flags))
        if isinstance(rhs, Below):
            return Interval.from_flags(lhs.lo, rhs.hi, lhs.flags | rhs.flags)
        if isinstance(rhs, Bounded):
            lo, lf = _max_lower(lhs.lo, lhs.flags, rhs.lo, lower_flag(rhs.flags))
            return Interval.from_flags(lo, rhs.hi, lf | upper_flag(rhs.flags))

    if isinstance(lhs, Bounded):
        if isinstance(rhs, Above):
            lo, lf = _max_lower(lhs.lo, lower_flag(lhs.flags), rhs.lo, rhs.flags)
            return Interval.from_flags(lo, lhs.hi, lf | upper_flag(lhs.flags))
        if isinstance(rhs, Below):
            hi, uf = _min_upper(lhs.hi, upper_flag(lhs.flags), rhs.hi, rhs.flags)
            return Interval.from_flags(lhs.lo, hi, lower_flag(lhs.flags) | uf)
        if isinstance(rhs, Bounded):
            lo, lf = _max_lower(lhs.lo, lower_flag(lhs.flags), rhs.lo, lower_flag(rhs.flags))
            hi, uf = _min_upper(lhs.hi, upper_flag(lhs.flags), rhs.hi, upper_flag(rhs.flags))
            return Interval.from_flags(lo, hi, lf | uf)

    raise TypeError(f"Unknown interval pair: {type(lhs)}, {type(rhs)}")


def union(lhs: Interval, rhs: Interval) -> Interval:
    """
    Smallest single interval containing both operands.

    Gaps between disjoint operands are filled, so this is the convex hull.
    """
    if isinstance(lhs, All):
        return lhs
    if isinstance(rhs, All):
        return rhs

    if isinstance(lhs, Empty):
        return rhs
    if isinstance(rhs, Empty):
        return lhs

    if isinstance(lhs, Point) and isinstance(rhs, Point):
        if lhs.value == rhs.value:
            return lhs
        return Interval.closed(min(lhs.value, rhs.value), max(lhs.value, rhs.value))

    # opposite directions always meet
    if isinstance(lhs, Above) and isinstance(rhs, Below):
        return Interval.all()
    if isinstance(lhs, Below) and isinstance(rhs, Above):
        return Interval.all()

    if isinstance(lhs, Below):
        if isinstance(rhs, Below):
            return Below(*_max_upper(lhs.hi, lhs.flags, rhs.hi, rhs.flags))
        if isinstance(rhs, Point):
            return Below(*_max_upper(lhs.hi, lhs.flags, rhs.value, CLOSED))
        if isinstance(rhs, Bounded):
            return Below(*_max_upper(lhs.hi, lhs.flags, rhs.hi, upper_flag(rhs.flags)))
    if isinstance(rhs, Below):
        if isinstance(lhs, Point):
            return Below(*_max_upper(lhs.value, CLOSED, rhs.hi, rhs.flags))
        if isinstance(lhs, Bounded):
            return Below(*_max_upper(lhs.hi, upper_flag(lhs.flags), rhs.hi, rhs.flags))

    if isinstance(lhs, Above):
        if isinstance(rhs, Above):
            return Above(*_min_lower(lhs.lo, lhs.flags, rhs.lo, rhs.flags))
        if isinstance(rhs, Point):
            return Above(*_min_lower(lhs.lo, lhs.flags, rhs.value, CLOSED))
        if isinstance(rhs, Bounded):
            return Above(*_min_lower(lhs.lo, lhs.flags, rhs.lo, lower_flag(rhs.flags)))
    if isinstance(rhs, Above):
        if isinstance(lhs, Point):
            return Above(*_min_lower(lhs.value, CLOSED, rhs.lo, rhs.flags))
        if isinstance(lhs, Bounded):
            return Above(*_min_lower(lhs.lo, lower_flag(lhs.flags), rhs.lo, rhs.flags))

    if isinstance(lhs, Point) and isinstance(rhs, Bounded):
        lo, lf = _min_lower(lhs.value, CLOSED, rhs.lo, lower_flag(rhs.flags))
        hi, uf = _max_upper(lhs.value, CLOSED, rhs.hi, upper_flag(rhs.flags))
        return Interval.from_flags(lo, hi, lf | uf)
    if isinstance(lhs, Bounded) and isinstance(rhs, Point):
        lo, lf = _min_lower(lhs.lo, lower_flag(lhs.flags), rhs.value, CLOSED)
        hi, uf = _max_upper(lhs.hi, upper_flag(lhs.flags), rhs.value, CLOSED)
        return Interval.from_flags(lo, hi, lf | uf)
    if isinstance(lhs, Bounded) and isinstance(rhs, Bounded):
        lo, lf = _min_lower(lhs.lo, lower_flag(lhs.flags), rhs.lo, lower_flag(rhs.flags))
        hi, uf = _max_upper(lhs.hi, upper_flag(lhs.flags), rhs.hi, upper_flag(rhs.flags))
        return Interval.from_flags(lo, hi, lf | uf)

    raise TypeError(f"Unknown interval pair: {type(lhs)}, {type(rhs)}")


def complement(interval: Interval) -> List[Interval]:
    """Everything outside the interval, as 0, 1 or 2 disjoint intervals."""
    if isinstance(interval, All):
        return []
    if isinstance(interval, Empty):
        return [Interval.all()]
    if isinstance(interval, Above):
        return [Below(interval.lo, lower_flag_to_upper(reverse_lower_flag(interval.flags)))]
    if isinstance(interval, Below):
        return [Above(interval.hi, upper_flag_to_lower(reverse_upper_flag(interval.flags)))]
    if isinstance(interval, Point):
        return [Interval.below(interval.value), Interval.above(interval.value)]
    if isinstance(interval, Bounded):
        lx = lower_flag_to_upper(reverse_lower_flag(lower_flag(interval.flags)))
        ux = upper_flag_to_lower(reverse_upper_flag(upper_flag(interval.flags)))
        return [Below(interval.lo, lx), Above(interval.hi, ux)]

    raise TypeError(f"Unknown interval type: {type(interval)}")


def difference(lhs: Interval, rhs: Interval) -> List[Interval]:
    """Non-empty pieces of lhs that lie outside rhs."""
    if lhs.intersects(rhs):
        pieces = [intersect(lhs, part) for part in complement(rhs)]
        return [p for p in pieces if p.non_empty]
    return [lhs] if lhs.non_empty else []


def split(interval: Interval, t: Any) -> Tuple[Interval, Interval]:
    """(part below t, part above t); t itself is in neither."""
    return intersect(interval, Interval.below(t)), intersect(interval, Interval.above(t))


# Bound-level min / max for vmin and vmax. Undefined (an empty operand)
# absorbs everything.

def _pick(lhs: Bound, rhs: Bound, smaller: bool, tie_closed: bool) -> Bound:
    if lhs.value == rhs.value:
        if tie_closed:
            return lhs if isinstance(lhs, Closed) else rhs
        return lhs if isinstance(lhs, Open) else rhs
    if (lhs.value < rhs.value) == smaller:
        return lhs
    return rhs


def min_lower_bound(lhs: Bound, rhs: Bound) -> Bound:
    if isinstance(lhs, Undefined) or isinstance(rhs, Undefined):
        return Undefined()
    if isinstance(lhs, Unbounded) or isinstance(rhs, Unbounded):
        return Unbounded()
    return _pick(lhs, rhs, smaller=True, tie_closed=True)


def max_lower_bound(lhs: Bound, rhs: Bound) -> Bound:
    if isinstance(lhs, Undefined) or isinstance(rhs, Undefined):
        return Undefined()
    if isinstance(lhs, Unbounded):
        return rhs
    if isinstance(rhs, Unbounded):
        return lhs
    return _pick(lhs, rhs, smaller=False, tie_closed=False)


def min_upper_bound(lhs: Bound, rhs: Bound) -> Bound:
    if isinstance(lhs, Undefined) or isinstance(rhs, Undefined):
        return Undefined()
    if isinstance(lhs, Unbounded):
        return rhs
    if isinstance(rhs, Unbounded):
        return lhs
    return _pick(lhs, rhs, smaller=True, tie_closed=False)


def max_upper_bound(lhs: Bound, rhs: Bound) -> Bound:
    if isinstance(lhs, Undefined) or isinstance(rhs, Undefined):
        return Undefined()
    if isinstance(lhs, Unbounded) or isinstance(rhs, Unbounded):
        return Unbounded()
    return _pick(lhs, rhs, smaller=False, tie_closed=True)


def vmin(lhs: Interval, rhs: Interval) -> Interval:
    """Interval containing min(a, b) for every a in lhs and b in rhs."""
    return Interval.from_bounds(
        min_lower_bound(lhs.lower_bound, rhs.lower_bound),
        min_upper_bound(lhs.upper_bound, rhs.upper_bound),
    )


def vmax(lhs: Interval, rhs: Interval) -> Interval:
    """Interval containing max(a, b) for every a in lhs and b in rhs."""
    return Interval.from_bounds(
        max_lower_bound(lhs.lower_bound, rhs.lower_bound),
        max_upper_bound(lhs.upper_bound, rhs.upper_bound),
    )
