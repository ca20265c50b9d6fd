"""
Bound Descriptors

One side of an interval, seen on its own:
- Closed(value): boundary value included
- Open(value): boundary value excluded
- Unbounded(): no boundary, the side extends to infinity
- Undefined(): the "bound" of an empty set

Undefined is absorbing in every combination, then Unbounded. When a
Closed bound is combined with anything the other side's kind wins, so
Closed + Open is Open.
"""

from dataclasses import dataclass
from typing import Any, Callable

from .algebra import Algebra, DEFAULT_ALGEBRA


class Bound:
    """Base class for the four bound kinds."""

    def map(self, f: Callable[[Any], Any]) -> 'Bound':
        """Apply f to the boundary value, keeping the kind."""
        raise NotImplementedError

    def combine(self, other: 'Bound', f: Callable[[Any, Any], Any]) -> 'Bound':
        """Combine two bounds value-wise with f."""
        if isinstance(self, Undefined):
            return self
        if isinstance(other, Undefined):
            return other
        if isinstance(self, Unbounded):
            return self
        if isinstance(other, Unbounded):
            return other
        if isinstance(self, Closed):
            return other.map(lambda b: f(self.value, b))
        if isinstance(other, Closed):
            return self.map(lambda a: f(a, other.value))
        return Open(f(self.value, other.value))

    def reciprocal(self, algebra: Algebra = DEFAULT_ALGEBRA) -> 'Bound':
        return self.map(algebra.reciprocal)

    def __neg__(self) -> 'Bound':
        return self.map(lambda a: -a)

    def __add__(self, other: Any) -> 'Bound':
        if isinstance(other, Bound):
            return self.combine(other, lambda a, b: a + b)
        return self.map(lambda a: a + other)

    def __sub__(self, other: Any) -> 'Bound':
        if isinstance(other, Bound):
            return self.combine(other, lambda a, b: a - b)
        return self.map(lambda a: a - other)

    def __mul__(self, other: Any) -> 'Bound':
        if isinstance(other, Bound):
            return self.combine(other, lambda a, b: a * b)
        return self.map(lambda a: a * other)

    def __truediv__(self, other: Any) -> 'Bound':
        if isinstance(other, Bound):
            return self.combine(other, lambda a, b: a / b)
        return self.map(lambda a: a / other)


@dataclass(frozen=True)
class Closed(Bound):
    value: Any

    def map(self, f: Callable[[Any], Any]) -> Bound:
        return Closed(f(self.value))


@dataclass(frozen=True)
class Open(Bound):
    value: Any

    def map(self, f: Callable[[Any], Any]) -> Bound:
        return Open(f(self.value))


@dataclass(frozen=True)
class Unbounded(Bound):

    def map(self, f: Callable[[Any], Any]) -> Bound:
        return self


@dataclass(frozen=True)
class Undefined(Bound):

    def map(self, f: Callable[[Any], Any]) -> Bound:
        return self
