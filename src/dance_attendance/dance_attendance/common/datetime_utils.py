from __future__ import annotations

import re
from datetime import date, datetime, timezone

from ..core.exceptions import ValidationError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)


def to_iso_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
