from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError

TRUTHY = {"true", "1", "yes", "tak", "y", "t"}


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"Missing required field: {field_name}")
    return str(value).strip()


def parse_bool(value: Any) -> bool:
    """Spreadsheet-style boolean: true/1/yes/tak/y/t (any case)."""
    return str(value if value is not None else "").strip().lower() in TRUTHY


def parse_csv_list(value: Optional[str]) -> Optional[list[str]]:
    """Split a comma separated query parameter; None when absent or blank."""
    if not value:
        return None
    items = [v.strip() for v in value.split(",") if v.strip()]
    return items or None
