"""
Openness Flag Codec

Each interval carries a 2-bit flag field:
- bit 0: lower side is open
- bit 1: upper side is open

Above only ever uses bit 0 and Below only bit 1. Negation and reciprocal
reverse which side is "lower", so flags have to move between the bits.
"""

CLOSED = 0
OPEN_LOWER = 1
OPEN_UPPER = 2
OPEN = 3


def is_closed(flags: int) -> bool:
    return flags == CLOSED


def is_closed_lower(flags: int) -> bool:
    return (flags & OPEN_LOWER) == 0


def is_closed_upper(flags: int) -> bool:
    return (flags & OPEN_UPPER) == 0


def is_open(flags: int) -> bool:
    return flags == OPEN


def is_open_lower(flags: int) -> bool:
    return (flags & OPEN_LOWER) == OPEN_LOWER


def is_open_upper(flags: int) -> bool:
    return (flags & OPEN_UPPER) == OPEN_UPPER


def lower_flag(flags: int) -> int:
    """Keep only the lower bit."""
    return flags & OPEN_LOWER


def upper_flag(flags: int) -> int:
    """Keep only the upper bit."""
    return flags & OPEN_UPPER


def reverse_lower_flag(flags: int) -> int:
    return flags ^ OPEN_LOWER


def reverse_upper_flag(flags: int) -> int:
    return flags ^ OPEN_UPPER


def reverse_flags(flags: int) -> int:
    return flags ^ OPEN


def lower_flag_to_upper(flags: int) -> int:
    """Move the lower bit into the upper position (upper bit is dropped)."""
    return (flags & OPEN_LOWER) << 1


def upper_flag_to_lower(flags: int) -> int:
    """Move the upper bit into the lower position (lower bit is dropped)."""
    return (flags & OPEN_UPPER) >> 1


def swap_flags(flags: int) -> int:
    """Exchange the lower and upper bits."""
    return lower_flag_to_upper(flags) | upper_flag_to_lower(flags)
