"""
Timeframe label handling.

Labels arrive in either broker style (``M15``, ``H1``, ``D1``) or exchange
style (``15m``, ``1h``, ``1d``). Both are reduced to a duration in minutes,
which decides the timeframe class used for minimum-history policy.
"""

import re
from enum import Enum
from typing import Optional

_UNIT_MINUTES = {
    "M": 1,
    "H": 60,
    "D": 1440,
    "W": 10080,
}

_PREFIX_PATTERN = re.compile(r"^([MHDW])(\d+)$")
_SUFFIX_PATTERN = re.compile(r"^(\d+)([MHDW])$")

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 1440


class TimeframeClass(str, Enum):
    """History requirement classes, ordered from least to most history."""
    INTRADAY_FINE = "intraday_fine"
    INTRADAY_COARSE = "intraday_coarse"
    DAILY = "daily"


def timeframe_minutes(label: Optional[str]) -> Optional[int]:
    """
    Parse a timeframe label into its duration in minutes.

    Args:
        label: Timeframe label such as ``M15``, ``H4``, ``1h`` or ``D1``

    Returns:
        Duration in minutes, or None if the label is not recognised
    """
    if not isinstance(label, str):
        return None

    normalized = label.strip().upper()
    match = _PREFIX_PATTERN.match(normalized)
    if match:
        unit, count = match.group(1), int(match.group(2))
    else:
        match = _SUFFIX_PATTERN.match(normalized)
        if not match:
            return None
        count, unit = int(match.group(1)), match.group(2)

    if count <= 0:
        return None

    return count * _UNIT_MINUTES[unit]


def classify_timeframe(label: Optional[str]) -> TimeframeClass:
    """
    Classify a timeframe label for minimum-history policy.

    Unknown labels are treated as daily, the class with the strictest
    history requirement.
    """
    minutes = timeframe_minutes(label)

    if minutes is None or minutes >= MINUTES_PER_DAY:
        return TimeframeClass.DAILY
    if minutes >= MINUTES_PER_HOUR:
        return TimeframeClass.INTRADAY_COARSE
    return TimeframeClass.INTRADAY_FINE
