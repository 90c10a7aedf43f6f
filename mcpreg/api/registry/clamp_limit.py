"""Apply a default and an upper bound to a requested limit."""

from typing import Any


def clamp_limit(value: Any, default: int, maximum: int) -> int:
    """Missing or zero becomes ``default``; the result never exceeds ``maximum``."""
    return min(int(value or default), maximum)
