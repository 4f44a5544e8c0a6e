from __future__ import annotations

import logging
import unicodedata
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc, parse_iso_date, to_iso_timestamp
from ..common.validators import require_non_empty
from ..core.constants import SESSION_ID_PREFIX
from ..core.enums import AttendanceStatus
from ..groups.service import GroupService
from ..students.service import StudentService
from .model import AttendanceItem, AttendanceRecord, AttendanceSheet, AttendanceUpdateResult, Session
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def norm(text: str) -> str:
    return unicodedata.normalize("NFC", str(text).strip()).upper()


def build_session_id(group_id: str, session_date: date) -> str:
    return f"{SESSION_ID_PREFIX}-{session_date.isoformat()}-{norm(group_id)}"


def _is_conflict(item: AttendanceItem, current: Optional[AttendanceRecord]) -> bool:
    """A write is stale when the caller saw a different version of a different status.

    Items sent without updated_at are treated as new changes (last write wins).
    """

    return bool(
        item.updated_at
        and current is not None
        and current.updated_at
        and item.updated_at != current.updated_at
        and item.status != current.status
    )


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentService,
        groups: GroupService,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._attendance = attendance
        self._students = students
        self._groups = groups
        self._clock = clock

    def _current_records(self, group, session: Optional[Session]) -> dict[str, AttendanceRecord]:
        if session is None:
            return {}
        return {r.student_id: r for r in self._attendance.list_for_session(group, session.session_id)}

    def get_attendance(self, group_id: str, date_s: str) -> AttendanceSheet:
        """One item per active student; students without a record are unmarked.

        Reading never creates a session row.
        """

        group = self._groups.require(group_id)
        session_date = parse_iso_date(date_s)

        session = self._attendance.find_session(group, session_date)
        session_id = session.session_id if session else build_session_id(group.group_id, session_date)
        current = self._current_records(group, session)

        items = []
        for student in self._students.active_for_group(group.group_id):
            record = current.get(student.student_id)
            if record is None:
                items.append(AttendanceItem(student_id=student.student_id, status=AttendanceStatus.UNMARKED))
            else:
                items.append(
                    AttendanceItem(
                        student_id=student.student_id,
                        status=record.status,
                        updated_at=record.updated_at,
                        notes=record.note or "",
                    )
                )
        return AttendanceSheet(session_id=session_id, items=items)

    def exists(self, group_id: str, date_s: str) -> bool:
        sheet = self.get_attendance(group_id, date_s)
        return any(i.updated_at for i in sheet.items)

    def _find_or_create_session(self, group, session_date: date) -> Session:
        session = self._attendance.find_session(group, session_date)
        if session:
            return session
        session = Session(
            session_id=build_session_id(group.group_id, session_date),
            group_id=group.group_id,
            session_date=session_date,
        )
        self._attendance.create_session(group, session)
        return session

    def save_attendance(self, group_id: str, date_s: str, items: Sequence[AttendanceItem]) -> AttendanceUpdateResult:
        group = self._groups.require(group_id)
        session_date = parse_iso_date(date_s)

        # Last occurrence wins when a student appears twice in one request.
        by_student: dict[str, AttendanceItem] = {}
        for item in items:
            by_student[require_non_empty(item.student_id, "student_id")] = item

        session = self._find_or_create_session(group, session_date)
        current = self._current_records(group, session)
        students = {s.student_id: s for s in self._students.list_students(group.group_id, show_inactive=True)}

        conflicts: list[AttendanceItem] = []
        valid: list[AttendanceItem] = []
        for item in by_student.values():
            existing = current.get(item.student_id)
            if _is_conflict(item, existing):
                conflicts.append(
                    AttendanceItem(
                        student_id=item.student_id,
                        status=existing.status,
                        updated_at=existing.updated_at,
                        notes=existing.note or "",
                    )
                )
            else:
                valid.append(item)

        updated_at = to_iso_timestamp(self._clock())
        records = []
        for item in valid:
            student = students.get(item.student_id)
            if student is None:
                logger.warning("Saving attendance for unknown student %s in group %s", item.student_id, group.group_id)
            records.append(
                AttendanceRecord(
                    session_id=session.session_id,
                    student_id=item.student_id,
                    status=item.status,
                    updated_at=updated_at,
                    note=item.notes or "",
                    student_name=student.first_name if student else "",
                    class_label=(student.class_label or "") if student else "",
                    phone=(student.phone or "") if student else "",
                    group_name=group.name,
                )
            )
        self._attendance.upsert_records(group, records)

        if conflicts:
            logger.info("Attendance save for %s had %d conflicts", session.session_id, len(conflicts))

        updated = [
            AttendanceItem(student_id=i.student_id, status=i.status, updated_at=updated_at, notes=i.notes or "")
            for i in valid
        ]
        return AttendanceUpdateResult(session_id=session.session_id, updated=updated, conflicts=conflicts)

    def save_notes(self, group_id: str, date_s: str, student_id: str, notes: str) -> AttendanceItem:
        """Store notes for one student, keeping the current status (absent when unmarked)."""
        student_id = require_non_empty(student_id, "student_id")
        sheet = self.get_attendance(group_id, date_s)
        existing = next((i for i in sheet.items if i.student_id == student_id), None)

        status = existing.status if existing and existing.status != AttendanceStatus.UNMARKED else AttendanceStatus.ABSENT
        result = self.save_attendance(
            group_id,
            date_s,
            [AttendanceItem(student_id=student_id, status=status, notes=notes or "")],
        )
        return result.updated[0]
