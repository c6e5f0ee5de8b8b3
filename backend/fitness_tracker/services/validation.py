"""Value checks shared by the lifecycle services."""

import math
from datetime import datetime
from typing import Optional


def is_non_negative(value: Optional[float]) -> bool:
    """True for finite numbers >= 0; None, NaN and infinities are rejected."""
    return value is not None and math.isfinite(value) and value >= 0


def to_naive_local(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convert an aware datetime to naive local time.

    Timestamps are stored naive in local time; naive inputs pass through
    unchanged so that aware and naive values can be compared.

    Example:
        >>> to_naive_local(datetime(2024, 1, 1, 8, 0))
        datetime.datetime(2024, 1, 1, 8, 0)
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
