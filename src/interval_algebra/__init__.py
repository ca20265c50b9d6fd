"""
Interval Algebra - Intervals over Totally Ordered Types

Intervals whose sides are each closed, open or unbounded, with:
- Set relations: containment, superset / subset, crossing
- Set operations: intersection, union (hull), complement, difference, split
- Arithmetic: +, -, *, /, reciprocal, integer powers, n-th roots, abs

Arithmetic uses the probabilistic interpretation: every interval is an
independent unknown value, so results widen rather than track correlation.

Example:
    >>> from interval_algebra import Interval
    >>> Interval.closed(1, 5) & Interval.closed(3, 8)
    [3, 5]
"""

import logging

from .algebra import Algebra, NumericAlgebra, DEFAULT_ALGEBRA
from .bound import Bound, Closed, Open, Unbounded, Undefined
from .errors import (
    IntervalError,
    IntervalZeroDivisionError,
    IntervalDomainError,
    IntervalFormatError,
    InvariantViolation,
)
from .interval import (
    Interval,
    NonEmptyInterval,
    Empty,
    Point,
    Bounded,
    Above,
    Below,
    All,
    from_pairs,
)
from .relations import (
    is_superset_of,
    is_proper_superset_of,
    is_subset_of,
    is_proper_subset_of,
)
from .setops import (
    intersect,
    union,
    complement,
    difference,
    split,
    vmin,
    vmax,
)
from .arithmetic import (
    add,
    subtract,
    negate,
    add_scalar,
    subtract_scalar,
    multiply_scalar,
    multiply,
    reciprocal,
    divide,
    divide_scalar,
    power,
    nroot,
    absolute,
    IntervalSemiring,
)
from .notation import format_interval, parse_interval
from .sampling import top, bottom, sampling_range, sample
from .polynomial import translate
from .config import SamplingConfig, DEFAULT_EPSILON

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Algebra
    'Algebra',
    'NumericAlgebra',
    'DEFAULT_ALGEBRA',
    # Bounds
    'Bound',
    'Closed',
    'Open',
    'Unbounded',
    'Undefined',
    # Errors
    'IntervalError',
    'IntervalZeroDivisionError',
    'IntervalDomainError',
    'IntervalFormatError',
    'InvariantViolation',
    # Intervals
    'Interval',
    'NonEmptyInterval',
    'Empty',
    'Point',
    'Bounded',
    'Above',
    'Below',
    'All',
    'from_pairs',
    # Relations
    'is_superset_of',
    'is_proper_superset_of',
    'is_subset_of',
    'is_proper_subset_of',
    # Set operations
    'intersect',
    'union',
    'complement',
    'difference',
    'split',
    'vmin',
    'vmax',
    # Arithmetic
    'add',
    'subtract',
    'negate',
    'add_scalar',
    'subtract_scalar',
    'multiply_scalar',
    'multiply',
    'reciprocal',
    'divide',
    'divide_scalar',
    'power',
    'nroot',
    'absolute',
    'IntervalSemiring',
    # Notation, sampling, polynomials
    'format_interval',
    'parse_interval',
    'top',
    'bottom',
    'sampling_range',
    'sample',
    'translate',
    'SamplingConfig',
    'DEFAULT_EPSILON',
]
