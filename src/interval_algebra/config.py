"""
Configuration

Package-wide defaults and the sampling configuration.
"""

from dataclasses import dataclass
from typing import Optional


# Inward nudge applied to open endpoints before sampling
DEFAULT_EPSILON = 1e-9

# Stand-ins for the missing side of a half-bounded interval when sampling
DEFAULT_SAMPLE_MIN = -1e6
DEFAULT_SAMPLE_MAX = 1e6


@dataclass
class SamplingConfig:
    """Configuration for drawing values from an interval."""
    epsilon: float = DEFAULT_EPSILON
    min_value: float = DEFAULT_SAMPLE_MIN
    max_value: float = DEFAULT_SAMPLE_MAX
    seed: Optional[int] = None

    def __post_init__(self):
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative: {self.epsilon}")
        if self.min_value > self.max_value:
            raise ValueError("min_value must be <= max_value")
