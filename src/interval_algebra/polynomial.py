"""
Polynomial Translation

Evaluates a polynomial over an interval by interval arithmetic. Each
power of x is treated as its own unknown, so the result is a sound but
not always tight enclosure.
"""

from typing import Any, Sequence, Union

import numpy as np

from .algebra import Algebra, DEFAULT_ALGEBRA
from .arithmetic import add, multiply, power
from .interval import Empty, Interval, Point


def translate(
    interval: Interval,
    coefficients: Union[Sequence[Any], np.polynomial.Polynomial],
    algebra: Algebra = DEFAULT_ALGEBRA
) -> Interval:
    """
    Range of a polynomial over the interval.

    Args:
        interval: Argument interval
        coefficients: Ascending coefficients (c0, c1, ...) or a numpy Polynomial
        algebra: Element algebra

    Returns:
        Interval enclosing p(x) for all x in the interval
    """
    if isinstance(coefficients, np.polynomial.Polynomial):
        coefficients = coefficients.coef.tolist()
    if isinstance(interval, Empty):
        return interval

    result = Point(algebra.zero())
    for exponent, c in enumerate(coefficients):
        if c == 0:
            continue
        term = multiply(Point(c), power(interval, exponent, algebra), algebra)
        result = add(result, term)
    return result
