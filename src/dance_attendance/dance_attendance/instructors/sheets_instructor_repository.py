from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.validators import parse_bool
from ..core.constants import INSTRUCTOR_GROUPS_SHEET, INSTRUCTORS_SHEET
from ..sheets.connection import SheetsConnection
from ..sheets.sheets_base import optional, read_table, sheet_call
from .model import Instructor, InstructorGroup
from .repository import InstructorRepository

logger = logging.getLogger(__name__)


def _parse_sheet_date(value: str) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        logger.warning("Ignoring malformed assignment date %r", value)
        return None


class SheetsInstructorRepository(InstructorRepository):
    """Instructors live in the main spreadsheet, not in per-group ones."""

    def __init__(self, conn: SheetsConnection):
        self._conn = conn

    def list_instructors(self) -> Sequence[Instructor]:
        with sheet_call(
            "Failed to fetch instructors from Google Sheets",
            hint="Ensure the Instructors sheet exists and is shared with the service account as Editor",
        ):
            ws = self._conn.worksheet(self._conn.default_spreadsheet_id, INSTRUCTORS_SHEET)
            table = read_table(ws)

        return [
            Instructor(
                instructor_id=r.get("id"),
                first_name=r.get("first_name"),
                last_name=r.get("last_name"),
                active=parse_bool(r.get("active")),
                email=optional(r.get("mail")),
                phone=optional(r.get("phone")),
                specialization=optional(r.get("specialization")),
            )
            for r in table.rows
            if r.get("id")
        ]

    def list_instructor_groups(self) -> Sequence[InstructorGroup]:
        with sheet_call(
            "Failed to fetch instructor groups from Google Sheets",
            hint="Ensure the InstructorGroups sheet exists and is shared with the service account as Editor",
        ):
            ws = self._conn.worksheet(self._conn.default_spreadsheet_id, INSTRUCTOR_GROUPS_SHEET)
            table = read_table(ws)

        return [
            InstructorGroup(
                instructor_id=r.get("instructor_id"),
                group_id=r.get("group_id"),
                role=optional(r.get("role")),
                start_date=_parse_sheet_date(r.get("start_date")),
                end_date=_parse_sheet_date(r.get("end_date")),
            )
            for r in table.rows
            if r.get("instructor_id") and r.get("group_id")
        ]
