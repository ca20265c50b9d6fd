"""
Interval Errors

All failures raised by the package derive from IntervalError and also
from the matching built-in exception, so callers can catch either.
"""


class IntervalError(Exception):
    """Base class for interval failures."""


class IntervalZeroDivisionError(IntervalError, ZeroDivisionError):
    """Reciprocal or division by an interval that contains zero."""


class IntervalDomainError(IntervalError, ValueError):
    """Operation undefined on part of the interval (e.g. even root of negatives)."""


class IntervalFormatError(IntervalError, ValueError):
    """Text could not be parsed as interval notation."""


class InvariantViolation(IntervalError, AssertionError):
    """Internal invariant broken, e.g. a raw Bounded with lo >= hi."""
