"""Lenient date parsing for frontmatter date fields."""

import re
from datetime import datetime, timezone
from typing import Optional


# Layouts tried when the value is not ISO-8601, in order. strptime accepts
# unpadded month and day fields, so '%Y-%m-%d' also covers '2024-1-5'.
DATE_FORMATS = (
    '%Y-%m-%d',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%dT%H:%M',
    '%Y-%m-%dT%H:%M:%S',
    '%Y/%m/%d',
    '%Y/%m/%d %H:%M',
    '%Y/%m/%d %H:%M:%S',
    '%Y.%m.%d',
    '%m/%d/%Y',
    '%m/%d/%Y %H:%M',
    '%m/%d/%Y %H:%M:%S',
    '%d.%m.%Y',
    '%d.%m.%Y %H:%M',
    '%B %d, %Y',
    '%b %d, %Y',
    '%B %d, %Y %H:%M',
    '%b %d, %Y %H:%M',
    '%B %d, %Y %H:%M:%S',
    '%b %d, %Y %H:%M:%S',
    '%B %d %Y',
    '%b %d %Y',
    '%B %d %Y %H:%M',
    '%b %d %Y %H:%M',
    '%d %B %Y',
    '%d %b %Y',
    '%d %B %Y %H:%M',
    '%d %b %Y %H:%M',
)

_TRAILING_Z = re.compile(r'[Zz]$')


def parse_date(value: str) -> datetime:
    """Leniently parse a date or date-time string.

    Accepts ISO-8601 (including a trailing Z) and the common locale-separated
    layouts in DATE_FORMATS. Values without an offset are taken as UTC.

    Raises:
        ValueError: If the value is not a recognizable date
    """
    text = value.strip()
    parsed: Optional[datetime] = None

    try:
        parsed = datetime.fromisoformat(_TRAILING_Z.sub('+00:00', text))
    except ValueError:
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        raise ValueError(f"Unrecognized date: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
