from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import ATTENDANCE_COLUMNS, ATTENDANCE_SHEET, SESSION_COLUMNS, SESSIONS_SHEET
from ..groups.model import Group
from ..sheets.connection import SheetsConnection
from ..sheets.sheets_base import (
    SheetRow,
    ensure_headers,
    normalize_status,
    read_table,
    row_range,
    sheet_call,
    to_row,
)
from .model import AttendanceRecord, Session
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _to_record(row: SheetRow) -> AttendanceRecord:
    return AttendanceRecord(
        session_id=row.get("session_id"),
        student_id=row.get("student_id"),
        status=normalize_status(row.get("status")),
        updated_at=row.get("updated_at") or None,
        note=row.get("note"),
        student_name=row.get("student_name"),
        class_label=row.get("class"),
        phone=row.get("phone"),
        group_name=row.get("group_name"),
    )


def _latest_rows(rows: Iterable[SheetRow]) -> Dict[Tuple[str, str], SheetRow]:
    latest: Dict[Tuple[str, str], SheetRow] = {}
    for row in rows:
        key = (row.get("session_id"), row.get("student_id"))
        if not key[0] or not key[1]:
            continue
        current = latest.get(key)
        if current is None or row.get("updated_at") >= current.get("updated_at"):
            latest[key] = row
    return latest


def _record_values(record: AttendanceRecord) -> dict:
    return {
        "session_id": record.session_id,
        "student_id": record.student_id,
        "status": record.status.value,
        "note": record.note,
        "updated_at": record.updated_at,
        "student_name": record.student_name,
        "class": record.class_label,
        "phone": record.phone,
        "group_name": record.group_name,
    }


class SheetsAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: SheetsConnection):
        self._conn = conn

    def _sessions(self, group: Group) -> List[Session]:
        with sheet_call("Failed to manage session in Google Sheets"):
            table = read_table(self._conn.worksheet(group.spreadsheet_id, SESSIONS_SHEET))

        sessions = []
        for row in table.rows:
            if not row.get("id"):
                continue
            try:
                session_date = datetime.strptime(row.get("date")[:10], "%Y-%m-%d").date()
            except ValueError:
                logger.warning("Ignoring session %s with malformed date %r", row.get("id"), row.get("date"))
                continue
            sessions.append(Session(session_id=row.get("id"), group_id=row.get("group_id"), session_date=session_date))
        return sessions

    def find_session(self, group: Group, session_date: date) -> Optional[Session]:
        for s in self._sessions(group):
            if s.group_id == group.group_id and s.session_date == session_date:
                return s
        return None

    def create_session(self, group: Group, session: Session) -> None:
        with sheet_call("Failed to manage session in Google Sheets"):
            ws = self._conn.worksheet(group.spreadsheet_id, SESSIONS_SHEET)
            table = read_table(ws)
            headers = ensure_headers(ws, table, SESSION_COLUMNS)
            ws.append_row(
                to_row(headers, {"id": session.session_id, "group_id": session.group_id, "date": session.session_date.isoformat()}),
                value_input_option="RAW",
            )
        logger.info("Created session %s for group %s", session.session_id, group.group_id)

    def list_sessions(self, group: Group) -> Sequence[Session]:
        return [s for s in self._sessions(group) if s.group_id == group.group_id]

    def _read_attendance(self, group: Group):
        with sheet_call("Failed to fetch attendance from Google Sheets"):
            return read_table(self._conn.worksheet(group.spreadsheet_id, ATTENDANCE_SHEET))

    def list_for_session(self, group: Group, session_id: str) -> Sequence[AttendanceRecord]:
        table = self._read_attendance(group)
        rows = (r for r in table.rows if r.get("session_id") == session_id)
        return [_to_record(r) for r in _latest_rows(rows).values()]

    def list_all(self, group: Group) -> Sequence[AttendanceRecord]:
        table = self._read_attendance(group)
        return [_to_record(r) for r in _latest_rows(table.rows).values()]

    def upsert_records(self, group: Group, records: Sequence[AttendanceRecord]) -> None:
        if not records:
            return

        with sheet_call("Failed to save attendance to Google Sheets"):
            ws = self._conn.worksheet(group.spreadsheet_id, ATTENDANCE_SHEET)
            table = read_table(ws)
            headers = ensure_headers(ws, table, ATTENDANCE_COLUMNS)
            existing = _latest_rows(table.rows)

            updates: list[dict] = []
            appends: list[list[str]] = []
            for record in records:
                values = _record_values(record)
                current = existing.get((record.session_id, record.student_id))
                if current is not None:
                    # Keep columns this system does not manage.
                    merged = {**current.values, **values}
                    updates.append({"range": row_range(current.row_number, len(headers)), "values": [to_row(headers, merged)]})
                else:
                    appends.append(to_row(headers, values))

            if updates:
                ws.batch_update(updates, value_input_option="RAW")
            if appends:
                ws.append_rows(appends, value_input_option="RAW")

        logger.info(
            "Saved attendance for group %s: %d updated, %d appended",
            group.group_id,
            len(updates),
            len(appends),
        )
