"""
Intervals over a Totally Ordered Type

An interval is a set of values bounded below and/or above. Each side is
independently closed, open or unbounded, which gives six shapes:

- Empty: no values
- Point(value): exactly {value}
- Bounded(lo, hi, flags): finite range with lo < hi
- Above(lo, flags): everything above lo
- Below(hi, flags): everything below hi
- All: the whole ordered set

Arithmetic follows the probabilistic interpretation: an interval stands
for one unknown value somewhere in the range. Two equal intervals are not
assumed to be the same value, so a == b does not imply a * a == a * b.
Consider a = b = [-1, 1]. Any number times itself is non-negative, yet
a * b = [-1, 1] since we may have a = 1 and b = -1. Results are never
wrong, only wider than a correlation-aware answer would be.

Always build intervals with the normalizing constructors
(Interval.closed, Interval.from_flags, ...). The variant classes validate
their raw invariants but do not collapse degenerate ranges.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .algebra import Algebra, DEFAULT_ALGEBRA
from .bound import Bound, Closed, Open, Unbounded, Undefined
from .errors import InvariantViolation
from .flags import (
    CLOSED,
    OPEN,
    OPEN_LOWER,
    OPEN_UPPER,
    is_closed_lower,
    is_closed_upper,
    is_open_lower,
    is_open_upper,
    lower_flag,
    upper_flag,
)


# (value, flag) for one finite side; the flag keeps its own bit position
Pair = Tuple[Any, int]


class Interval:
    """Base class of the six interval shapes."""

    # Construction

    @staticmethod
    def empty() -> 'Interval':
        return _EMPTY

    @staticmethod
    def all() -> 'Interval':
        return _ALL

    @staticmethod
    def point(value: Any) -> 'Interval':
        return Point(value)

    @staticmethod
    def zero(algebra: Algebra = DEFAULT_ALGEBRA) -> 'Interval':
        return Point(algebra.zero())

    @staticmethod
    def closed(lo: Any, hi: Any) -> 'Interval':
        """[lo, hi]; collapses to a point when lo == hi."""
        return Interval.from_flags(lo, hi, CLOSED)

    @staticmethod
    def open(lo: Any, hi: Any) -> 'Interval':
        """(lo, hi)"""
        return Interval.from_flags(lo, hi, OPEN)

    @staticmethod
    def open_lower(lo: Any, hi: Any) -> 'Interval':
        """(lo, hi]"""
        return Interval.from_flags(lo, hi, OPEN_LOWER)

    @staticmethod
    def open_upper(lo: Any, hi: Any) -> 'Interval':
        """[lo, hi)"""
        return Interval.from_flags(lo, hi, OPEN_UPPER)

    @staticmethod
    def above(lo: Any) -> 'Interval':
        """(lo, ∞)"""
        return Above(lo, OPEN_LOWER)

    @staticmethod
    def at_or_above(lo: Any) -> 'Interval':
        """[lo, ∞)"""
        return Above(lo, CLOSED)

    @staticmethod
    def below(hi: Any) -> 'Interval':
        """(-∞, hi)"""
        return Below(hi, OPEN_UPPER)

    @staticmethod
    def at_or_below(hi: Any) -> 'Interval':
        """(-∞, hi]"""
        return Below(hi, CLOSED)

    @staticmethod
    def from_flags(lo: Any, hi: Any, flags: int) -> 'Interval':
        """
        Build a finite interval from raw endpoints and flags.

        Equal endpoints give a Point when fully closed and Empty otherwise;
        lo > hi is always Empty.
        """
        if lo < hi:
            return Bounded(lo, hi, flags)
        if lo == hi and flags == CLOSED:
            return Point(lo)
        return _EMPTY

    @staticmethod
    def from_bounds(lower: Bound, upper: Bound) -> 'Interval':
        """Build an interval from a lower and an upper Bound."""
        if isinstance(lower, Undefined) and isinstance(upper, Undefined):
            return _EMPTY
        if isinstance(lower, Undefined) or isinstance(upper, Undefined):
            raise InvariantViolation(
                f"Undefined bound paired with a defined one: {lower}, {upper}"
            )

        if isinstance(lower, Unbounded):
            if isinstance(upper, Unbounded):
                return _ALL
            if isinstance(upper, Closed):
                return Interval.at_or_below(upper.value)
            return Interval.below(upper.value)

        if isinstance(upper, Unbounded):
            if isinstance(lower, Closed):
                return Interval.at_or_above(lower.value)
            return Interval.above(lower.value)

        flags = (0 if isinstance(lower, Closed) else OPEN_LOWER) | \
                (0 if isinstance(upper, Closed) else OPEN_UPPER)
        return Interval.from_flags(lower.value, upper.value, flags)

    # Shape queries

    @property
    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    @property
    def non_empty(self) -> bool:
        return not self.is_empty

    @property
    def is_point(self) -> bool:
        return isinstance(self, Point)

    def is_at(self, t: Any) -> bool:
        """True only for the point interval {t}."""
        return False

    @property
    def lower_bound(self) -> Bound:
        raise NotImplementedError

    @property
    def upper_bound(self) -> Bound:
        raise NotImplementedError

    def map_bounds(self, f: Callable[[Any], Any]) -> 'Interval':
        """Apply f to both boundary values and renormalize."""
        return Interval.from_bounds(self.lower_bound.map(f), self.upper_bound.map(f))

    def fold(self, f: Callable[[Bound, Bound], Any]) -> Any:
        return f(self.lower_bound, self.upper_bound)

    # Directional predicates

    def has_above(self, t: Any) -> bool:
        """Does the interval contain any points above t?"""
        raise NotImplementedError

    def has_below(self, t: Any) -> bool:
        """Does the interval contain any points below t?"""
        raise NotImplementedError

    def has_at_or_above(self, t: Any) -> bool:
        """Does the interval contain any points at or above t?"""
        raise NotImplementedError

    def has_at_or_below(self, t: Any) -> bool:
        """Does the interval contain any points at or below t?"""
        raise NotImplementedError

    def contains(self, t: Any) -> bool:
        return self.has_at_or_below(t) and self.has_at_or_above(t)

    def __contains__(self, t: Any) -> bool:
        return self.contains(t)

    def crosses(self, t: Any) -> bool:
        """True when the interval has points on both sides of t."""
        return self.has_below(t) and self.has_above(t)

    def crosses_zero(self, algebra: Algebra = DEFAULT_ALGEBRA) -> bool:
        return self.crosses(algebra.zero())

    # Set relations

    def is_superset_of(self, other: 'Interval') -> bool:
        from .relations import is_superset_of
        return is_superset_of(self, other)

    def is_proper_superset_of(self, other: 'Interval') -> bool:
        from .relations import is_proper_superset_of
        return is_proper_superset_of(self, other)

    def is_subset_of(self, other: 'Interval') -> bool:
        from .relations import is_superset_of
        return is_superset_of(other, self)

    def is_proper_subset_of(self, other: 'Interval') -> bool:
        from .relations import is_proper_superset_of
        return is_proper_superset_of(other, self)

    def intersects(self, other: 'Interval') -> bool:
        return self.intersect(other).non_empty

    # Set operations

    def intersect(self, other: 'Interval') -> 'Interval':
        from .setops import intersect
        return intersect(self, other)

    def union(self, other: 'Interval') -> 'Interval':
        from .setops import union
        return union(self, other)

    def complement(self) -> List['Interval']:
        from .setops import complement
        return complement(self)

    def difference(self, other: 'Interval') -> List['Interval']:
        from .setops import difference
        return difference(self, other)

    def split(self, t: Any) -> Tuple['Interval', 'Interval']:
        from .setops import split
        return split(self, t)

    def split_at_zero(self, algebra: Algebra = DEFAULT_ALGEBRA) -> Tuple['Interval', 'Interval']:
        return self.split(algebra.zero())

    def map_around_zero(
        self,
        f: Callable[['Interval'], Any],
        algebra: Algebra = DEFAULT_ALGEBRA
    ) -> Tuple[Any, Any]:
        below_zero, above_zero = self.split_at_zero(algebra)
        return f(below_zero), f(above_zero)

    def vmin(self, other: 'Interval') -> 'Interval':
        from .setops import vmin
        return vmin(self, other)

    def vmax(self, other: 'Interval') -> 'Interval':
        from .setops import vmax
        return vmax(self, other)

    def __and__(self, other: 'Interval') -> 'Interval':
        return self.intersect(other)

    def __or__(self, other: 'Interval') -> 'Interval':
        return self.union(other)

    def __invert__(self) -> List['Interval']:
        return self.complement()

    # Arithmetic

    def __neg__(self) -> 'Interval':
        from .arithmetic import negate
        return negate(self)

    def __add__(self, other: Any) -> 'Interval':
        from .arithmetic import add, add_scalar
        if isinstance(other, Interval):
            return add(self, other)
        return add_scalar(self, other)

    def __radd__(self, other: Any) -> 'Interval':
        return self.__add__(other)

    def __sub__(self, other: Any) -> 'Interval':
        from .arithmetic import subtract, subtract_scalar
        if isinstance(other, Interval):
            return subtract(self, other)
        return subtract_scalar(self, other)

    def __rsub__(self, other: Any) -> 'Interval':
        return (-self) + other

    def __mul__(self, other: Any) -> 'Interval':
        from .arithmetic import multiply, multiply_scalar
        if isinstance(other, Interval):
            return multiply(self, other)
        return multiply_scalar(self, other)

    def __rmul__(self, other: Any) -> 'Interval':
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> 'Interval':
        from .arithmetic import divide, divide_scalar
        if isinstance(other, Interval):
            return divide(self, other)
        return divide_scalar(self, other)

    def __rtruediv__(self, other: Any) -> 'Interval':
        return self.reciprocal() * other

    def __pow__(self, k: int) -> 'Interval':
        return self.pow(k)

    def __abs__(self) -> 'Interval':
        return self.abs()

    def reciprocal(self, algebra: Algebra = DEFAULT_ALGEBRA) -> 'Interval':
        from .arithmetic import reciprocal
        return reciprocal(self, algebra)

    def pow(self, k: int, algebra: Algebra = DEFAULT_ALGEBRA) -> 'Interval':
        from .arithmetic import power
        return power(self, k, algebra)

    def nroot(self, k: int, algebra: Algebra = DEFAULT_ALGEBRA) -> 'Interval':
        from .arithmetic import nroot
        return nroot(self, k, algebra)

    def sqrt(self, algebra: Algebra = DEFAULT_ALGEBRA) -> 'Interval':
        return self.nroot(2, algebra)

    def abs(self, algebra: Algebra = DEFAULT_ALGEBRA) -> 'Interval':
        from .arithmetic import absolute
        return absolute(self, algebra)

    # Output

    def to_canonical(self) -> Dict[str, Any]:
        from .notation import format_interval
        return {
            "type": type(self).__name__.lower(),
            "lower": _bound_to_canonical(self.lower_bound),
            "upper": _bound_to_canonical(self.upper_bound),
            "notation": format_interval(self),
        }

    def __str__(self) -> str:
        from .notation import format_interval
        return format_interval(self)

    def __repr__(self) -> str:
        return str(self)


class NonEmptyInterval(Interval):
    """
    Intervals that have at least one point.

    Only these expose bound pairs, so pair extraction on Empty cannot be
    expressed at all.
    """

    def lower_pair(self) -> Optional[Pair]:
        """(value, lower flag bit) of the lower side, None if unbounded."""
        raise NotImplementedError

    def upper_pair(self) -> Optional[Pair]:
        """(value, upper flag bit) of the upper side, None if unbounded."""
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Empty(Interval):
    """The empty set. Carries no data, so every Empty is equal."""

    @property
    def lower_bound(self) -> Bound:
        return Undefined()

    @property
    def upper_bound(self) -> Bound:
        return Undefined()

    def has_above(self, t: Any) -> bool:
        return False

    def has_below(self, t: Any) -> bool:
        return False

    def has_at_or_above(self, t: Any) -> bool:
        return False

    def has_at_or_below(self, t: Any) -> bool:
        return False


@dataclass(frozen=True, repr=False)
class Point(NonEmptyInterval):
    value: Any

    def is_at(self, t: Any) -> bool:
        return self.value == t

    @property
    def lower_bound(self) -> Bound:
        return Closed(self.value)

    @property
    def upper_bound(self) -> Bound:
        return Closed(self.value)

    def lower_pair(self) -> Optional[Pair]:
        return (self.value, CLOSED)

    def upper_pair(self) -> Optional[Pair]:
        return (self.value, CLOSED)

    def has_above(self, t: Any) -> bool:
        return self.value > t

    def has_below(self, t: Any) -> bool:
        return self.value < t

    def has_at_or_above(self, t: Any) -> bool:
        return self.value >= t

    def has_at_or_below(self, t: Any) -> bool:
        return self.value <= t


@dataclass(frozen=True, repr=False)
class Bounded(NonEmptyInterval):
    """A proper finite range, lo < hi."""
    lo: Any
    hi: Any
    flags: int

    def __post_init__(self):
        if not self.lo < self.hi:
            raise InvariantViolation(f"Bounded requires lo < hi: {self.lo}, {self.hi}")
        if self.flags not in (CLOSED, OPEN_LOWER, OPEN_UPPER, OPEN):
            raise InvariantViolation(f"Invalid flags: {self.flags}")

    @property
    def lower_bound(self) -> Bound:
        return Open(self.lo) if is_open_lower(self.flags) else Closed(self.lo)

    @property
    def upper_bound(self) -> Bound:
        return Open(self.hi) if is_open_upper(self.flags) else Closed(self.hi)

    def lower_pair(self) -> Optional[Pair]:
        return (self.lo, lower_flag(self.flags))

    def upper_pair(self) -> Optional[Pair]:
        return (self.hi, upper_flag(self.flags))

    def has_above(self, t: Any) -> bool:
        return self.hi > t

    def has_below(self, t: Any) -> bool:
        return self.lo < t

    def has_at_or_above(self, t: Any) -> bool:
        return self.hi > t or (is_closed_upper(self.flags) and self.hi == t)

    def has_at_or_below(self, t: Any) -> bool:
        return self.lo < t or (is_closed_lower(self.flags) and self.lo == t)


@dataclass(frozen=True, repr=False)
class Above(NonEmptyInterval):
    """Everything above lo; flags is CLOSED or OPEN_LOWER."""
    lo: Any
    flags: int

    def __post_init__(self):
        if self.flags not in (CLOSED, OPEN_LOWER):
            raise InvariantViolation(f"Invalid flags for Above: {self.flags}")

    @property
    def lower_bound(self) -> Bound:
        return Open(self.lo) if is_open_lower(self.flags) else Closed(self.lo)

    @property
    def upper_bound(self) -> Bound:
        return Unbounded()

    def lower_pair(self) -> Optional[Pair]:
        return (self.lo, self.flags)

    def upper_pair(self) -> Optional[Pair]:
        return None

    def has_above(self, t: Any) -> bool:
        return True

    def has_below(self, t: Any) -> bool:
        return self.lo < t

    def has_at_or_above(self, t: Any) -> bool:
        return True

    def has_at_or_below(self, t: Any) -> bool:
        return self.lo < t or (is_closed_lower(self.flags) and self.lo == t)


@dataclass(frozen=True, repr=False)
class Below(NonEmptyInterval):
    """Everything below hi; flags is CLOSED or OPEN_UPPER."""
    hi: Any
    flags: int

    def __post_init__(self):
        if self.flags not in (CLOSED, OPEN_UPPER):
            raise InvariantViolation(f"Invalid flags for Below: {self.flags}")

    @property
    def lower_bound(self) -> Bound:
        return Unbounded()

    @property
    def upper_bound(self) -> Bound:
        return Open(self.hi) if is_open_upper(self.flags) else Closed(self.hi)

    def lower_pair(self) -> Optional[Pair]:
        return None

    def upper_pair(self) -> Optional[Pair]:
        return (self.hi, self.flags)

    def has_above(self, t: Any) -> bool:
        return self.hi > t

    def has_below(self, t: Any) -> bool:
        return True

    def has_at_or_above(self, t: Any) -> bool:
        return self.hi > t or (is_closed_upper(self.flags) and self.hi == t)

    def has_at_or_below(self, t: Any) -> bool:
        return True


@dataclass(frozen=True, repr=False)
class All(NonEmptyInterval):
    """The entire ordered set."""

    @property
    def lower_bound(self) -> Bound:
        return Unbounded()

    @property
    def upper_bound(self) -> Bound:
        return Unbounded()

    def lower_pair(self) -> Optional[Pair]:
        return None

    def upper_pair(self) -> Optional[Pair]:
        return None

    def has_above(self, t: Any) -> bool:
        return True

    def has_below(self, t: Any) -> bool:
        return True

    def has_at_or_above(self, t: Any) -> bool:
        return True

    def has_at_or_below(self, t: Any) -> bool:
        return True


_EMPTY = Empty()
_ALL = All()


def _bound_to_canonical(bound: Bound) -> Dict[str, Any]:
    if isinstance(bound, Closed):
        return {"kind": "closed", "value": bound.value}
    if isinstance(bound, Open):
        return {"kind": "open", "value": bound.value}
    if isinstance(bound, Unbounded):
        return {"kind": "unbounded"}
    return {"kind": "undefined"}


def from_pairs(lower: Optional[Pair], upper: Optional[Pair]) -> Interval:
    """
    Build an interval from optional side pairs.

    A missing pair means that side is unbounded. The lower pair carries its
    flag in the lower bit and the upper pair in the upper bit.
    """
    if lower is None and upper is None:
        return _ALL
    if upper is None:
        return Above(lower[0], lower[1])
    if lower is None:
        return Below(upper[0], upper[1])
    return Interval.from_flags(lower[0], upper[0], lower[1] | upper[1])
