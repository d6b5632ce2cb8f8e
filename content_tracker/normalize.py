"""Canonicalization of free-text status and progress fields."""

from __future__ import annotations

import math
import re
from typing import Any

from content_tracker.schema import STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_PENDING

# UTF-8 "✅" decoded as cp1252 upstream.
_MOJIBAKE_CHECKMARK = "âœ…"

_PERCENT_DIGITS = re.compile(r"(\d{1,3})")

APPROVED_VALUES = frozenset({"Yes", "Approved"})


def normalize_status(raw: Any) -> str:
    """Map a human-entered status onto Pending, In Progress or Completed."""

    value = str(raw or "").lower()
    if not value:
        return STATUS_PENDING
    if "publish" in value:
        return STATUS_COMPLETED
    if "complete" in value or _MOJIBAKE_CHECKMARK in value:
        return STATUS_COMPLETED
    if "progress" in value or "working" in value:
        return STATUS_IN_PROGRESS
    return STATUS_PENDING


def normalize_percent(raw: Any) -> int:
    """Return percent-complete as an int clamped to [0, 100]."""

    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        number = raw
    else:
        match = _PERCENT_DIGITS.search("" if raw is None else str(raw))
        number = int(match.group(1)) if match else 0

    if not math.isfinite(number):
        return 0
    return int(max(0, min(100, number)))


def is_approved(value: Any) -> bool:
    return isinstance(value, str) and value in APPROVED_VALUES
