from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

import requests
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException
from gspread.utils import rowcol_to_a1

from ..core.enums import AttendanceStatus
from ..core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_HINT = "Ensure the sheet is shared with the service account as Editor"

PRESENT_VALUES = {"present", "obecny", "1", "true", "tak", "y", "yes", "t"}
EXCUSED_VALUES = {"excused", "usprawiedliwiony", "usp"}

HEADER_ALIASES = {
    "firstname": "first_name",
    "lastname": "last_name",
    "groupid": "group_id",
    "group": "group_id",
    "email": "mail",
    "notes": "note",
}


@dataclass(frozen=True)
class SheetRow:
    """One data row; row_number is the 1-based row index in the worksheet."""

    row_number: int
    values: Dict[str, str]

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)


@dataclass
class SheetTable:
    headers: List[str]
    rows: List[SheetRow] = field(default_factory=list)


@contextmanager
def sheet_call(message: str, *, hint: str = DEFAULT_HINT) -> Iterator[None]:
    """Translate gspread/auth/transport failures into UpstreamError."""
    try:
        yield
    except (GSpreadException, GoogleAuthError, requests.exceptions.RequestException) as e:
        logger.error("%s: %s", message, e)
        raise UpstreamError(message, hint=hint) from e


def normalize_header(value: Any) -> str:
    key = str(value).strip().lower()
    return HEADER_ALIASES.get(key, key)


def read_table(ws) -> SheetTable:
    """Read a worksheet into header-keyed rows, skipping blank rows."""
    values = ws.get_all_values() or []
    if not values:
        return SheetTable(headers=[])

    headers = [normalize_header(h) for h in values[0]]
    rows: List[SheetRow] = []
    for index, raw in enumerate(values[1:], start=2):
        if not any(str(cell).strip() for cell in raw):
            continue
        record = {}
        for col, header in enumerate(headers):
            if not header:
                continue
            record[header] = str(raw[col]).strip() if col < len(raw) else ""
        rows.append(SheetRow(row_number=index, values=record))
    return SheetTable(headers=headers, rows=rows)


def ensure_headers(ws, table: SheetTable, default_headers: Sequence[str]) -> List[str]:
    """Write the default header row into an empty worksheet."""
    if table.headers:
        return table.headers
    ws.append_row(list(default_headers), value_input_option="RAW")
    table.headers = list(default_headers)
    return table.headers


def to_row(headers: Sequence[str], record: Dict[str, Any]) -> List[str]:
    return ["" if record.get(h) is None else str(record.get(h)) for h in headers]


def row_range(row_number: int, width: int) -> str:
    return f"{rowcol_to_a1(row_number, 1)}:{rowcol_to_a1(row_number, max(width, 1))}"


def normalize_status(value: Any) -> AttendanceStatus:
    s = str(value if value is not None else "").strip().lower()
    if not s or s == AttendanceStatus.UNMARKED.value:
        return AttendanceStatus.UNMARKED
    if s in PRESENT_VALUES:
        return AttendanceStatus.PRESENT
    if s in EXCUSED_VALUES:
        return AttendanceStatus.EXCUSED
    return AttendanceStatus.ABSENT


def optional(value: Optional[str]) -> Optional[str]:
    return value if value else None
