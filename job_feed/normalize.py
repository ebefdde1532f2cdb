"""Normalization of raw job payloads.

Upstream records are untrusted: any field may be missing, null, blank or of the
wrong type. ``normalize_job`` is total. It never raises and always returns a
complete :class:`JobRecord`, falling back to documented defaults field by field.

Field aliases are tried in order, e.g. ``company`` then ``companyName``.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .models import JobRecord
from .utils import as_text, first_text, text_items


MS_PER_DAY = 86_400_000

# Number.MAX_SAFE_INTEGER; larger day counts are treated as absent.
MAX_DAYS = 2**53 - 1

# (field, aliases, default)
TEXT_FIELDS: List[Tuple[str, Tuple[str, ...], str]] = [
    ("title", ("title",), "Untitled role"),
    ("company", ("company", "companyName"), "Unknown company"),
    ("salary", ("salary",), "Salary not provided"),
    ("deadline", ("deadline", "applicationDeadline"), "Rolling"),
    ("location", ("location",), "Location not specified"),
    ("employment_type", ("employmentType",), "Not specified"),
    ("level", ("level",), "Not specified"),
    ("description", ("description",), "No description available yet."),
]

DEFAULT_RESPONSIBILITIES = "Responsibilities will be shared by the employer."
DEFAULT_REQUIREMENTS = "Requirements will be shared by the employer."


def _parse_posted_at(posted_at: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string or epoch milliseconds into an aware datetime."""
    if posted_at is None or isinstance(posted_at, bool):
        return None

    if isinstance(posted_at, (int, float)):
        try:
            if not math.isfinite(posted_at) or posted_at == 0:
                return None
            return datetime.fromtimestamp(posted_at / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(posted_at, str):
        posted_at = posted_at.strip()
        if not posted_at:
            return None
        try:
            dt = datetime.fromisoformat(posted_at.replace("Z", "+00:00"))
        except ValueError:
            return None
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    return None


def posted_days_ago(posted_at: Any, now: Optional[datetime] = None) -> int:
    """Whole days elapsed since ``posted_at``, floored and clamped to >= 0.

    Missing or unparsable timestamps yield ``0``.
    """
    posted = _parse_posted_at(posted_at)
    if posted is None:
        return 0
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    try:
        diff_ms = (now - posted).total_seconds() * 1000
    except OverflowError:
        return 0
    return max(0, math.floor(diff_ms / MS_PER_DAY))


def _days_value(value: Any) -> Optional[int]:
    """Accept an explicit numeric ``postedDaysAgo``; reject bools, non-finite and out-of-range values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        if not math.isfinite(value):
            return None
    except OverflowError:
        return None
    if value > MAX_DAYS:
        return None
    return max(0, math.floor(value))


def _job_id(raw: Mapping[str, Any], index: int) -> str:
    for key in ("id", "_id"):
        value = raw.get(key)
        if isinstance(value, bool):
            return "true" if value else "false"
        text = as_text(value)
        if text is not None:
            return text
    return f"job-{index}"


def normalize_job(raw: Any, index: int, now: Optional[datetime] = None) -> JobRecord:
    """Convert one raw payload element into a canonical :class:`JobRecord`.

    Args:
        raw: Untrusted element of the jobs payload. Non-mappings are treated as
            an empty record.
        index: Position in the payload, used to synthesize ``job-<index>`` ids.
        now: Reference instant for ``posted_days_ago``; defaults to current UTC.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    fields = {name: first_text(raw, aliases) or default for name, aliases, default in TEXT_FIELDS}

    days = _days_value(raw.get("postedDaysAgo"))
    if days is None:
        days = posted_days_ago(raw.get("postedAt"), now)

    return JobRecord(
        id=_job_id(raw, index),
        posted_days_ago=days,
        responsibilities=text_items(raw.get("responsibilities")) or [DEFAULT_RESPONSIBILITIES],
        requirements=text_items(raw.get("requirements")) or [DEFAULT_REQUIREMENTS],
        **fields,
    )


def normalize_jobs(records: Iterable[Any], now: Optional[datetime] = None) -> List[JobRecord]:
    """Normalize a whole payload, index-stamped in payload order."""
    now = now or datetime.now(timezone.utc)
    return [normalize_job(raw, i, now) for i, raw in enumerate(records)]
