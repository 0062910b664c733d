"""
Binge-watch estimation: days needed to finish a playlist on a daily budget.
"""

import math
import re
from typing import Any

from ..errors import ValidationError

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _to_int(value: Any) -> int:
    """Leniently reads a whole number; anything unparseable counts as 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else 0


def estimate_binge_days(total_seconds: int, hours: Any = 0, minutes: Any = 0) -> int:
    """
    Number of days needed to watch `total_seconds` at the given daily budget.

    Args:
        total_seconds: Total playlist duration.
        hours: Daily hours (int or string; unparseable means 0).
        minutes: Daily minutes (int or string; unparseable means 0).

    Returns:
        int: ceil(total_seconds / daily_seconds).

    Raises:
        ValidationError: If the daily budget is zero or negative.
    """
    daily_seconds = _to_int(hours) * 3600 + _to_int(minutes) * 60
    if daily_seconds <= 0:
        raise ValidationError("Please enter a valid watch time.")

    return -(-total_seconds // daily_seconds)
