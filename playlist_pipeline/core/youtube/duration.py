"""
ISO 8601 duration parsing for `contentDetails.duration` values.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?")


def parse_duration(duration: Optional[str]) -> int:
    """
    Convert a duration such as "PT1H30M" or "P1DT2H" into total seconds.

    Absent fields count as zero. This parser is deliberately permissive:
    an empty, missing or malformed value yields 0 instead of raising, so a
    single odd video never aborts an analysis run.

    Args:
        duration: Encoded duration string (may be None).

    Returns:
        int: Non-negative number of seconds.
    """
    if not duration:
        return 0

    # The T section is optional, so a stray "P" can match with every group empty.
    match = next((m for m in _DURATION_RE.finditer(duration) if any(m.groups())), None)
    if match is None:
        # Permissive fallback: unparseable durations count as zero seconds.
        logger.debug(f"Unparseable duration {duration!r}, counting as 0s")
        return 0

    days, hours, minutes, seconds = (int(g or 0) for g in match.groups())
    return days * 86400 + hours * 3600 + minutes * 60 + seconds
