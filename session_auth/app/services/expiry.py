"""
Expiry duration parsing for token lifetimes such as "15m" or "7d".
"""

import re
from datetime import datetime, timedelta

DURATION_PATTERN = re.compile(r"^(\d+)([smhd])$")

DEFAULT_DURATION = timedelta(days=7)

_UNITS = {
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
}


def is_valid_duration(value: str) -> bool:
    return isinstance(value, str) and DURATION_PATTERN.match(value) is not None


def parse_duration(value: str) -> timedelta:
    """
    Parse "<integer><unit>" where unit is one of s, m, h, d.

    Anything that does not match falls back to 7 days instead of raising.
    """
    match = DURATION_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        return DEFAULT_DURATION

    amount, unit = match.groups()
    return int(amount) * _UNITS[unit]


def calculate_expiry(value: str, now: datetime) -> datetime:
    return now + parse_duration(value)
