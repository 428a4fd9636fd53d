"""Timezone utilities for US/Eastern market time."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is already Eastern
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def parse_datetime_eastern(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a stored timestamp string and return it in US/Eastern timezone.

    If no timezone is provided in the string, assumes US/Eastern.
    Returns None for an empty value.
    """
    if not value:
        return None
    return to_eastern(date_parser.parse(value))
