"""
Interval Notation

Text form of intervals:

    (Ø)          empty
    [v]          point
    [lo, hi]     bounded, any mix of ( ) [ ] brackets
    (-∞, hi]     below, ( or ] on the right
    [lo, ∞)      above, ( or [ on the left
    (-∞, ∞)      everything

Parsing accepts ASCII "inf" / "-inf" for the infinities. Values are
converted with Fraction by default so parsing is exact.
"""

import re
from fractions import Fraction
from typing import Any, Callable

from .errors import IntervalFormatError
from .flags import is_closed_lower, is_closed_upper
from .interval import Above, All, Below, Bounded, Empty, Interval, Point


_EMPTY_RE = re.compile(r"^ *\( *Ø *\) *$")
_SINGLE_RE = re.compile(r"^ *\[ *([^,\]]+?) *\] *$")
_PAIR_RE = re.compile(r"^ *(\[|\() *(.+?) *, *(.+?) *(\]|\)) *$")

_NEG_INF = {"-∞", "-inf"}
_POS_INF = {"∞", "+∞", "inf", "+inf"}


def format_interval(interval: Interval) -> str:
    if isinstance(interval, All):
        return "(-∞, ∞)"
    if isinstance(interval, Empty):
        return "(Ø)"
    if isinstance(interval, Above):
        if is_closed_lower(interval.flags):
            return f"[{interval.lo}, ∞)"
        return f"({interval.lo}, ∞)"
    if isinstance(interval, Below):
        if is_closed_upper(interval.flags):
            return f"(-∞, {interval.hi}]"
        return f"(-∞, {interval.hi})"
    if isinstance(interval, Point):
        return f"[{interval.value}]"
    if isinstance(interval, Bounded):
        left = "[" if is_closed_lower(interval.flags) else "("
        right = "]" if is_closed_upper(interval.flags) else ")"
        return f"{left}{interval.lo}, {interval.hi}{right}"
    raise TypeError(f"Unknown interval type: {type(interval)}")


def _convert(token: str, convert: Callable[[str], Any], text: str) -> Any:
    try:
        return convert(token)
    except (ValueError, ArithmeticError) as e:
        raise IntervalFormatError(f"For input string: {text!r}") from e


def parse_interval(text: str, convert: Callable[[str], Any] = Fraction) -> Interval:
    """
    Parse interval notation.

    Raises:
        IntervalFormatError: if the text is not valid notation
    """
    if _EMPTY_RE.match(text):
        return Interval.empty()

    m = _SINGLE_RE.match(text)
    if m:
        return Interval.point(_convert(m.group(1), convert, text))

    m = _PAIR_RE.match(text)
    if not m:
        raise IntervalFormatError(f"For input string: {text!r}")

    left, x, y, right = m.groups()
    lo_inf = x in _NEG_INF
    hi_inf = y in _POS_INF

    if lo_inf and left != "(" or hi_inf and right != ")":
        raise IntervalFormatError(f"Infinite side must be open: {text!r}")

    if lo_inf and hi_inf:
        return Interval.all()
    if lo_inf:
        hi = _convert(y, convert, text)
        return Interval.at_or_below(hi) if right == "]" else Interval.below(hi)
    if hi_inf:
        lo = _convert(x, convert, text)
        return Interval.at_or_above(lo) if left == "[" else Interval.above(lo)

    lo = _convert(x, convert, text)
    hi = _convert(y, convert, text)
    if left == "[" and right == "]":
        return Interval.closed(lo, hi)
    if left == "(" and right == ")":
        return Interval.open(lo, hi)
    if left == "[":
        return Interval.open_upper(lo, hi)
    return Interval.open_lower(lo, hi)
