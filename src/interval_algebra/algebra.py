"""
Element Algebra

Intervals are generic over any totally ordered element type. Comparison,
addition, subtraction, negation and multiplication are taken from the
element's own operators; the remaining capabilities (additive and
multiplicative identities, reciprocal, n-th root) come from an Algebra
object passed to the operations that need them.

NumericAlgebra covers the Python number tower and numpy scalars:
- int / Fraction: exact reciprocals and exact roots of perfect powers
- float / numpy: real roots via numpy (odd roots of negatives allowed)

Inexact roots are enclosed by nroot_bounds: float roots are widened by
one ulp on each side, and rationals too large for a float get a rational
enclosure from integer roots.
"""

import math
import numbers
from fractions import Fraction
from typing import Any, Tuple

import numpy as np

from .errors import IntervalDomainError, IntervalZeroDivisionError


class Algebra:
    """
    Capabilities an interval operation may require from its elements.

    Subclass this to use intervals over a custom element type.
    """

    def zero(self) -> Any:
        raise NotImplementedError

    def one(self) -> Any:
        raise NotImplementedError

    def reciprocal(self, x: Any) -> Any:
        raise NotImplementedError

    def nroot(self, x: Any, k: int) -> Any:
        raise NotImplementedError

    def nroot_bounds(self, x: Any, k: int) -> Tuple[Any, Any]:
        """(lo, hi) enclosing the true k-th root; exact algebras return (r, r)."""
        r = self.nroot(x, k)
        return r, r


def _int_root(n: int, k: int) -> int:
    """floor(n ** (1/k)) for n >= 0, computed on ints."""
    if n < 2:
        return n
    if k == 2:
        return math.isqrt(n)
    # Newton from an overestimate decreases monotonically to the floor
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def _float_root(magnitude: float, k: int) -> float:
    if k == 2:
        return float(np.sqrt(magnitude))
    if k == 3:
        return float(np.cbrt(magnitude))
    return float(np.power(magnitude, 1.0 / k))


class NumericAlgebra(Algebra):
    """Algebra for int, Fraction, float and numpy scalars."""

    def zero(self) -> Any:
        return 0

    def one(self) -> Any:
        return 1

    def reciprocal(self, x: Any) -> Any:
        if x == 0:
            raise IntervalZeroDivisionError("reciprocal of zero")
        if isinstance(x, numbers.Rational):
            return Fraction(1) / Fraction(x)
        return 1 / x

    def nroot(self, x: Any, k: int) -> Any:
        return self._root(x, k)[0]

    def nroot_bounds(self, x: Any, k: int) -> Tuple[Any, Any]:
        _, lo, hi = self._root(x, k)
        return lo, hi

    def _root(self, x: Any, k: int) -> Tuple[Any, Any, Any]:
        """(nearest, lo, hi) for the real k-th root of x."""
        if k < 1:
            raise ValueError(f"root degree must be positive: {k}")
        if k == 1:
            return x, x, x
        negative = x < 0
        if negative and k % 2 == 0:
            raise IntervalDomainError(f"even root of negative number: {x}")

        if isinstance(x, numbers.Rational):
            near, lo, hi = self._rational_root(abs(Fraction(x)), k, isinstance(x, int))
        else:
            near, lo, hi = self._inexact_root(abs(float(x)), k)

        if negative:
            return -near, -hi, -lo
        return near, lo, hi

    def _rational_root(self, frac: Fraction, k: int, as_int: bool) -> Tuple[Any, Any, Any]:
        num, den = frac.numerator, frac.denominator
        rn, rd = _int_root(num, k), _int_root(den, k)
        exact_num, exact_den = rn ** k == num, rd ** k == den
        if exact_num and exact_den:
            result = Fraction(rn, rd)
            if as_int and result.denominator == 1:
                result = result.numerator
            return result, result, result

        try:
            magnitude = float(frac)
        except OverflowError:
            magnitude = 0.0
        if magnitude == 0.0:
            # out of float range either way
            lo = Fraction(rn, rd if exact_den else rd + 1)
            hi = Fraction(rn if exact_num else rn + 1, rd)
            return lo, lo, hi
        return self._inexact_root(magnitude, k, frac)

    def _inexact_root(self, magnitude: float, k: int, target: Any = None) -> Tuple[Any, Any, Any]:
        root = _float_root(magnitude, k)
        if not math.isfinite(root):
            return root, root, root
        if target is None:
            target = Fraction(magnitude)
        if Fraction(root) ** k == target:
            return root, root, root

        lo = hi = root
        while lo > 0.0 and Fraction(lo) ** k >= target:
            lo = float(np.nextafter(lo, -np.inf))
        while Fraction(hi) ** k <= target:
            hi = float(np.nextafter(hi, np.inf))
        return root, lo, hi


DEFAULT_ALGEBRA = NumericAlgebra()
