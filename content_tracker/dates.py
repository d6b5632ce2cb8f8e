"""Date key derivation for human-entered sheet dates."""

from __future__ import annotations

import re
from typing import Optional

_DMY_LONG = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
_DMY_SHORT = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2})")
_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")

# Two-digit years below the pivot belong to the 2000s.
_YEAR_PIVOT = 50

DateKeys = tuple[Optional[str], Optional[str]]


def _keys(day: str, month: str, year: int) -> DateKeys:
    month_key = f"{year:04d}-{month.zfill(2)}"
    return f"{month_key}-{day.zfill(2)}", month_key


def expand_year(yy: int) -> int:
    return 2000 + yy if yy < _YEAR_PIVOT else 1900 + yy


def parse_date_keys(value: Optional[str]) -> DateKeys:
    """Return ``(day_iso, month_key)`` for a raw date string.

    ``D/M/YYYY`` is tried before ``D/M/YY`` so four-digit years are never
    truncated, and both are tried before the ISO prefix. Trailing noise after
    the date is ignored. Unparsable input yields ``(None, None)``.
    """

    if not value:
        return None, None

    match = _DMY_LONG.search(value)
    if match:
        day, month, year = match.groups()
        return _keys(day, month, int(year))

    match = _DMY_SHORT.search(value)
    if match:
        day, month, yy = match.groups()
        return _keys(day, month, expand_year(int(yy)))

    match = _ISO_PREFIX.match(value)
    if match:
        day_iso = match.group(0)
        return day_iso, day_iso[:7]

    return None, None
