"""
Sampling from Intervals

Open endpoints cannot be drawn exactly, so they are nudged inward by a
small epsilon. Unbounded sides fall back to configured min / max values.
"""

from typing import Any, Optional, Tuple, Union

import numpy as np

from .config import SamplingConfig
from .flags import is_open_lower, is_open_upper
from .interval import Above, Below, Bounded, Empty, Interval, Point


def top(interval: Interval, epsilon: Any) -> Optional[Any]:
    """Largest sampleable value, or None when unbounded above."""
    if isinstance(interval, Point):
        return interval.value
    if isinstance(interval, (Below, Bounded)):
        if is_open_upper(interval.flags):
            return interval.hi - epsilon
        return interval.hi
    return None


def bottom(interval: Interval, epsilon: Any) -> Optional[Any]:
    """Smallest sampleable value, or None when unbounded below."""
    if isinstance(interval, Point):
        return interval.value
    if isinstance(interval, (Above, Bounded)):
        if is_open_lower(interval.flags):
            return interval.lo + epsilon
        return interval.lo
    return None


def sampling_range(
    interval: Interval,
    min_value: Any,
    max_value: Any,
    epsilon: Any
) -> Tuple[Any, Any]:
    """(low, high) to sample from."""
    if isinstance(interval, Empty):
        raise ValueError("Cannot sample from an empty interval")

    low = bottom(interval, epsilon)
    high = top(interval, epsilon)
    low = min_value if low is None else low
    high = max_value if high is None else high
    if low > high:
        raise ValueError(f"Interval {interval} is too narrow to sample with epsilon={epsilon}")
    return low, high


def sample(
    interval: Interval,
    size: Optional[int] = None,
    config: Optional[SamplingConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> Union[float, np.ndarray]:
    """
    Draw uniformly from the interval.

    Args:
        interval: Interval to sample from
        size: Number of samples (None for a single float)
        config: Sampling configuration (default: SamplingConfig())
        rng: Generator to use (default: one seeded from config.seed)

    Returns:
        A float, or an array of `size` floats
    """
    config = config or SamplingConfig()
    if rng is None:
        rng = np.random.default_rng(config.seed)

    low, high = sampling_range(interval, config.min_value, config.max_value, config.epsilon)
    low, high = float(low), float(high)
    if low == high:
        return low if size is None else np.full(size, low)
    return rng.uniform(low, high, size)
