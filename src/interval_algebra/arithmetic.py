"""
Interval Arithmetic

Arithmetic under the probabilistic interpretation: every operand is an
independent unknown value, so results are the widest sound range over
all independent choices.

Multiplication is the case-dense part:
- empty operands absorb, a point zero short-circuits to zero
- a non-zero point reduces to scalar multiplication
- two bounded operands use the four corner products, picked by which
  operands cross zero
- half-bounded pairings follow sign rules; an unresolved sign mix is All

Corner products are (value, open bit) pairs kept in the lower-bit
position until the final interval is assembled.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from .algebra import Algebra, DEFAULT_ALGEBRA
from .errors import IntervalDomainError, IntervalZeroDivisionError
from .flags import (
    OPEN_LOWER,
    OPEN_UPPER,
    lower_flag,
    lower_flag_to_upper,
    swap_flags,
    upper_flag,
    upper_flag_to_lower,
)
from .interval import (
    Above,
    All,
    Below,
    Bounded,
    Empty,
    Interval,
    NonEmptyInterval,
    Pair,
    Point,
    from_pairs,
)

logger = logging.getLogger(__name__)


# Addition and subtraction

def combine(
    lhs: NonEmptyInterval,
    rhs: NonEmptyInterval,
    f: Callable[[Any, Any], Any]
) -> Interval:
    """Combine lower with lower and upper with upper using f."""
    ll = _pair_op(lhs.lower_pair(), rhs.lower_pair(), f)
    uu = _pair_op(lhs.upper_pair(), rhs.upper_pair(), f)
    return from_pairs(ll, uu)


def _pair_op(
    p1: Optional[Pair],
    p2: Optional[Pair],
    f: Callable[[Any, Any], Any]
) -> Optional[Pair]:
    if p1 is None or p2 is None:
        return None
    return f(p1[0], p2[0]), p1[1] | p2[1]


def add(lhs: Interval, rhs: Interval) -> Interval:
    if isinstance(lhs, Empty):
        return lhs
    if isinstance(rhs, Empty):
        return rhs
    return combine(lhs, rhs, lambda a, b: a + b)


def subtract(lhs: Interval, rhs: Interval) -> Interval:
    """lhs - rhs: lower comes from lhs.lower - rhs.upper and vice versa."""
    if isinstance(lhs, Empty):
        return lhs
    if isinstance(rhs, Empty):
        return rhs

    ll = uu = None
    lhs_lo, rhs_hi = lhs.lower_pair(), rhs.upper_pair()
    if lhs_lo is not None and rhs_hi is not None:
        ll = (lhs_lo[0] - rhs_hi[0], lhs_lo[1] | upper_flag_to_lower(rhs_hi[1]))

    lhs_hi, rhs_lo = lhs.upper_pair(), rhs.lower_pair()
    if lhs_hi is not None and rhs_lo is not None:
        uu = (lhs_hi[0] - rhs_lo[0], lhs_hi[1] | lower_flag_to_upper(rhs_lo[1]))

    return from_pairs(ll, uu)


def negate(interval: Interval) -> Interval:
    """Negation reverses the order, so the sides and their flags swap."""
    if isinstance(interval, (Empty, All)):
        return interval
    if isinstance(interval, Point):
        return Point(-interval.value)
    if isinstance(interval, Bounded):
        return Interval.from_flags(-interval.hi, -interval.lo, swap_flags(interval.flags))
    if isinstance(interval, Above):
        return Below(-interval.lo, lower_flag_to_upper(interval.flags))
    if isinstance(interval, Below):
        return Above(-interval.hi, upper_flag_to_lower(interval.flags))
    raise TypeError(f"Unknown interval type: {type(interval)}")


# Scalar operations

def add_scalar(interval: Interval, c: Any) -> Interval:
    if isinstance(interval, (Empty, All)):
        return interval
    if isinstance(interval, Point):
        return Point(interval.value + c)
    if isinstance(interval, Bounded):
        return Interval.from_flags(interval.lo + c, interval.hi + c, interval.flags)
    if isinstance(interval, Above):
        return Above(interval.lo + c, interval.flags)
    if isinstance(interval, Below):
        return Below(interval.hi + c, interval.flags)
    raise TypeError(f"Unknown interval type: {type(interval)}")


def subtract_scalar(interval: Interval, c: Any) -> Interval:
    return add_scalar(interval, -c)


def multiply_scalar(interval: Interval, c: Any, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """
    Scale by a constant.

    A zero scalar collapses any non-empty interval to the point zero; a
    negative scalar swaps the sides like negation.
    """
    z = algebra.zero()
    if isinstance(interval, Empty):
        return interval
    if c == z:
        return Point(z)
    if isinstance(interval, All):
        return interval
    if isinstance(interval, Point):
        return Point(interval.value * c)

    if c < z:
        if isinstance(interval, Bounded):
            return Interval.from_flags(interval.hi * c, interval.lo * c, swap_flags(interval.flags))
        if isinstance(interval, Above):
            return Below(interval.lo * c, lower_flag_to_upper(interval.flags))
        if isinstance(interval, Below):
            return Above(interval.hi * c, upper_flag_to_lower(interval.flags))
    else:
        if isinstance(interval, Bounded):
            return Interval.from_flags(interval.lo * c, interval.hi * c, interval.flags)
        if isinstance(interval, Above):
            return Above(interval.lo * c, interval.flags)
        if isinstance(interval, Below):
            return Below(interval.hi * c, interval.flags)

    raise TypeError(f"Unknown interval type: {type(interval)}")


# Multiplication

def _corner(x1: Any, f1: int, x2: Any, f2: int, z: Any) -> Pair:
    """Product of two endpoints with open bits f1, f2 (lower position)."""
    # a closed zero factor attains the product whatever the other side is
    if (x1 == z and f1 == 0) or (x2 == z and f2 == 0):
        return x1 * x2, 0
    return x1 * x2, f1 | f2


def _min_corner(a: Pair, b: Pair) -> Pair:
    if a[0] < b[0]:
        return a
    if b[0] < a[0]:
        return b
    return a[0], a[1] & b[1]


def _max_corner(a: Pair, b: Pair) -> Pair:
    if a[0] > b[0]:
        return a
    if b[0] > a[0]:
        return b
    return a[0], a[1] & b[1]


def _from_corners(lo: Pair, hi: Pair) -> Interval:
    return Interval.from_flags(lo[0], hi[0], lo[1] | lower_flag_to_upper(hi[1]))


def _above_result(corner: Pair) -> Interval:
    return Above(corner[0], corner[1])


def _below_result(corner: Pair) -> Interval:
    return Below(corner[0], lower_flag_to_upper(corner[1]))


def _unresolved(lhs: Interval, rhs: Interval) -> Interval:
    logger.debug("Unresolved sign combination %s * %s, widening to All", lhs, rhs)
    return Interval.all()


def _below_bit(interval: Below) -> int:
    return upper_flag_to_lower(interval.flags)


def _above_times_above(lhs: Above, rhs: Above, z: Any) -> Interval:
    if lhs.lo >= z and rhs.lo >= z:
        return _above_result(_corner(lhs.lo, lhs.flags, rhs.lo, rhs.flags, z))
    return _unresolved(lhs, rhs)


def _above_times_below(lhs: Above, rhs: Below, z: Any) -> Interval:
    # non-negative times non-positive: bounded above by the inner corner
    if lhs.lo >= z and rhs.hi <= z:
        return _below_result(_corner(lhs.lo, lhs.flags, rhs.hi, _below_bit(rhs), z))
    return _unresolved(lhs, rhs)


def _below_times_below(lhs: Below, rhs: Below, z: Any) -> Interval:
    if lhs.hi <= z and rhs.hi <= z:
        return _above_result(_corner(lhs.hi, _below_bit(lhs), rhs.hi, _below_bit(rhs), z))
    return _unresolved(lhs, rhs)


def _above_times_bounded(lhs: Above, rhs: Bounded, z: Any) -> Interval:
    if rhs.crosses(z):
        return _unresolved(lhs, rhs)
    lo_bit = lower_flag(rhs.flags)
    hi_bit = upper_flag_to_lower(rhs.flags)

    if rhs.has_above(z):
        # rhs non-negative: the product grows without bound upwards
        if lhs.lo >= z:
            return _above_result(_corner(lhs.lo, lhs.flags, rhs.lo, lo_bit, z))
        return _above_result(_corner(lhs.lo, lhs.flags, rhs.hi, hi_bit, z))

    # rhs non-positive: the product grows without bound downwards
    if lhs.lo >= z:
        return _below_result(_corner(lhs.lo, lhs.flags, rhs.hi, hi_bit, z))
    return _below_result(_corner(lhs.lo, lhs.flags, rhs.lo, lo_bit, z))


def _below_times_bounded(lhs: Below, rhs: Bounded, z: Any) -> Interval:
    if rhs.crosses(z):
        return _unresolved(lhs, rhs)
    lo_bit = lower_flag(rhs.flags)
    hi_bit = upper_flag_to_lower(rhs.flags)
    bit = _below_bit(lhs)

    if rhs.has_above(z):
        if lhs.hi <= z:
            return _below_result(_corner(lhs.hi, bit, rhs.lo, lo_bit, z))
        return _below_result(_corner(lhs.hi, bit, rhs.hi, hi_bit, z))

    if lhs.hi <= z:
        return _above_result(_corner(lhs.hi, bit, rhs.hi, hi_bit, z))
    return _above_result(_corner(lhs.hi, bit, rhs.lo, lo_bit, z))


def _bounded_times_bounded(lhs: Bounded, rhs: Bounded, z: Any) -> Interval:
    l1, u1 = lower_flag(lhs.flags), upper_flag_to_lower(lhs.flags)
    l2, u2 = lower_flag(rhs.flags), upper_flag_to_lower(rhs.flags)

    ll = _corner(lhs.lo, l1, rhs.lo, l2, z)
    lu = _corner(lhs.lo, l1, rhs.hi, u2, z)
    ul = _corner(lhs.hi, u1, rhs.lo, l2, z)
    uu = _corner(lhs.hi, u1, rhs.hi, u2, z)

    lcz = lhs.crosses(z)
    rcz = rhs.crosses(z)

    if lcz and rcz:
        return _from_corners(_min_corner(lu, ul), _max_corner(ll, uu))
    if lcz:
        if rhs.has_above(z):
            return _from_corners(lu, uu)
        return _from_corners(ul, ll)
    if rcz:
        if lhs.has_above(z):
            return _from_corners(ul, uu)
        return _from_corners(lu, ll)
    if lhs.has_below(z) == rhs.has_below(z):
        # same side of zero
        return _from_corners(_min_corner(ll, uu), _max_corner(ll, uu))
    return _from_corners(_min_corner(lu, ul), _max_corner(lu, ul))


def multiply(lhs: Interval, rhs: Interval, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """Product of two independent unknowns."""
    if isinstance(lhs, Empty):
        return lhs
    if isinstance(rhs, Empty):
        return rhs

    z = algebra.zero()
    if lhs.is_at(z) or rhs.is_at(z):
        return Point(z)

    if isinstance(lhs, Point):
        return multiply_scalar(rhs, lhs.value, algebra)
    if isinstance(rhs, Point):
        return multiply_scalar(lhs, rhs.value, algebra)

    if isinstance(lhs, All) or isinstance(rhs, All):
        return Interval.all()

    if isinstance(lhs, Above):
        if isinstance(rhs, Above):
            return _above_times_above(lhs, rhs, z)
        if isinstance(rhs, Below):
            return _above_times_below(lhs, rhs, z)
        if isinstance(rhs, Bounded):
            return _above_times_bounded(lhs, rhs, z)

    if isinstance(lhs, Below):
        if isinstance(rhs, Above):
            return _above_times_below(rhs, lhs, z)
        if isinstance(rhs, Below):
            return _below_times_below(lhs, rhs, z)
        if isinstance(rhs, Bounded):
            return _below_times_bounded(lhs, rhs, z)

    if isinstance(lhs, Bounded):
        if isinstance(rhs, Above):
            return _above_times_bounded(rhs, lhs, z)
        if isinstance(rhs, Below):
            return _below_times_bounded(rhs, lhs, z)
        if isinstance(rhs, Bounded):
            return _bounded_times_bounded(lhs, rhs, z)

    raise TypeError(f"Unknown interval pair: {type(lhs)}, {type(rhs)}")


# Reciprocal and division

def reciprocal(interval: Interval, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """
    1 / x over the interval.

    Only defined when zero is not in the interval. A boundary exactly at
    zero is fine as long as it is open.
    """
    if isinstance(interval, Empty):
        return interval

    z = algebra.zero()
    if isinstance(interval, All) or interval.contains(z):
        logger.debug("Reciprocal of %s which contains zero", interval)
        raise IntervalZeroDivisionError(f"/ by zero: {interval}")

    inv = algebra.reciprocal
    if isinstance(interval, Point):
        return Point(inv(interval.value))

    if isinstance(interval, Above):
        if interval.lo == z:
            return interval
        return Interval.from_flags(z, inv(interval.lo), OPEN_LOWER | lower_flag_to_upper(interval.flags))

    if isinstance(interval, Below):
        if interval.hi == z:
            return interval
        return Interval.from_flags(inv(interval.hi), z, OPEN_UPPER | upper_flag_to_lower(interval.flags))

    if isinstance(interval, Bounded):
        if interval.lo == z:
            return Above(inv(interval.hi), upper_flag_to_lower(interval.flags))
        if interval.hi == z:
            return Below(inv(interval.lo), lower_flag_to_upper(interval.flags))
        return Interval.from_flags(inv(interval.hi), inv(interval.lo), swap_flags(interval.flags))

    raise TypeError(f"Unknown interval type: {type(interval)}")


def divide(lhs: Interval, rhs: Interval, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    return multiply(lhs, reciprocal(rhs, algebra), algebra)


def divide_scalar(interval: Interval, c: Any, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """Divide by a constant using the algebra's reciprocal; `interval / c` uses the default algebra."""
    return multiply_scalar(interval, algebra.reciprocal(c), algebra)


# Powers and roots

def absolute(interval: Interval, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """|x| over the interval; a zero-crossing range folds onto [0, ...]."""
    z = algebra.zero()
    if interval.crosses(z):
        if isinstance(interval, Bounded):
            x = -interval.lo
            flags = interval.flags
            if x > interval.hi:
                return Interval.from_flags(z, x, lower_flag_to_upper(flags))
            if interval.hi > x:
                return Interval.from_flags(z, interval.hi, upper_flag(flags))
            return Interval.from_flags(z, x, lower_flag_to_upper(flags) & upper_flag(flags))
        if isinstance(interval, (Above, Below, All)):
            return Interval.at_or_above(z)
        raise TypeError(f"Unknown interval type: {type(interval)}")
    if interval.has_below(z):
        return negate(interval)
    return interval


def power(interval: Interval, k: int, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """
    x ** k by repeated squaring.

    Even powers start from |x| so the sign ambiguity of a zero-crossing
    operand does not leak into the result.
    """
    if k < 0:
        raise ValueError(f"negative exponent: {k}")
    if isinstance(interval, Empty):
        return interval
    if k == 0:
        return Point(algebra.one())
    if k == 1:
        return interval

    base = absolute(interval, algebra) if k % 2 == 0 else interval
    b, n, extra = base, k - 1, base
    while n > 1:
        if n & 1:
            extra = multiply(b, extra, algebra)
        b = multiply(b, b, algebra)
        n >>= 1
    return multiply(b, extra, algebra)


def nroot(interval: Interval, k: int, algebra: Algebra = DEFAULT_ALGEBRA) -> Interval:
    """
    k-th root, applied endpoint-wise with flags preserved.

    Lower endpoints take the low end of the algebra's root enclosure and
    upper endpoints the high end, so inexact roots round outward.
    """
    if k < 1:
        raise ValueError(f"root degree must be positive: {k}")
    if k == 1:
        return interval
    if k % 2 == 0 and interval.has_below(algebra.zero()):
        logger.debug("Even root of %s which has negative values", interval)
        raise IntervalDomainError(f"can't take even root of negative number: {interval}")

    lower = lambda x: algebra.nroot_bounds(x, k)[0]
    upper = lambda x: algebra.nroot_bounds(x, k)[1]
    if isinstance(interval, (Empty, All)):
        return interval
    if isinstance(interval, Point):
        return Interval.closed(*algebra.nroot_bounds(interval.value, k))
    if isinstance(interval, Bounded):
        return Interval.from_flags(lower(interval.lo), upper(interval.hi), interval.flags)
    if isinstance(interval, Above):
        return Above(lower(interval.lo), interval.flags)
    if isinstance(interval, Below):
        return Below(upper(interval.hi), interval.flags)
    raise TypeError(f"Unknown interval type: {type(interval)}")


class IntervalSemiring:
    """Intervals viewed as a semiring: zero, plus, times and pow."""

    def __init__(self, algebra: Algebra = DEFAULT_ALGEBRA):
        self.algebra = algebra

    def zero(self) -> Interval:
        return Point(self.algebra.zero())

    def one(self) -> Interval:
        return Point(self.algebra.one())

    def plus(self, x: Interval, y: Interval) -> Interval:
        return add(x, y)

    def times(self, x: Interval, y: Interval) -> Interval:
        return multiply(x, y, self.algebra)

    def pow(self, x: Interval, k: int) -> Interval:
        return power(x, k, self.algebra)
