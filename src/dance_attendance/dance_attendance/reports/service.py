from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..attendance.repository import AttendanceRepository
from ..common.collation import polish_sort_key
from ..core.enums import AttendanceStatus
from ..groups.service import GroupService
from ..students.service import StudentService
from .model import ReportData, ReportFilters

logger = logging.getLogger(__name__)


def _percent(part: int, total: int) -> int:
    """Whole percent, halves rounded up (12.5 -> 13)."""
    if not total:
        return 0
    return int((Decimal(part * 100) / Decimal(total)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def attendance_stats(items: Iterable[dict]) -> dict:
    items = list(items)
    present = sum(1 for i in items if i["status"] == AttendanceStatus.PRESENT.value)
    absent = sum(1 for i in items if i["status"] == AttendanceStatus.ABSENT.value)
    excused = sum(1 for i in items if i["status"] == AttendanceStatus.EXCUSED.value)
    total = len(items)
    return {
        "totalSessions": total,
        "presentSessions": present,
        "absentSessions": absent,
        "excusedSessions": excused,
        "attendancePercentage": _percent(present, total),
    }


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository, students: StudentService, groups: GroupService):
        self._attendance = attendance
        self._students = students
        self._groups = groups

    def _matches(self, filters: ReportFilters, *, student_id: str, session_date, status: AttendanceStatus) -> bool:
        if status == AttendanceStatus.UNMARKED:
            return False
        if filters.student_ids and student_id not in filters.student_ids:
            return False
        if filters.date_from and session_date < filters.date_from:
            return False
        if filters.date_to and session_date > filters.date_to:
            return False
        if filters.status and status != filters.status:
            return False
        return True

    def build_attendance_report(self, filters: ReportFilters) -> ReportData:
        if filters.group_ids:
            groups = [self._groups.require(g) for g in filters.group_ids]
        else:
            groups = list(self._groups.list_groups())

        items: list[dict] = []
        for group in groups:
            sessions = {s.session_id: s for s in self._attendance.list_sessions(group)}
            students = {s.student_id: s for s in self._students.list_students(group.group_id, show_inactive=True)}

            for record in self._attendance.list_all(group):
                session = sessions.get(record.session_id)
                if session is None:
                    logger.debug("Record for unknown session %s in group %s", record.session_id, group.group_id)
                    continue
                if not self._matches(filters, student_id=record.student_id, session_date=session.session_date, status=record.status):
                    continue

                student = students.get(record.student_id)
                items.append(
                    {
                        "student_id": record.student_id,
                        "student_name": student.full_name if student else (record.student_name or record.student_id),
                        "group_id": group.group_id,
                        "group_name": group.name,
                        "date": session.session_date.isoformat(),
                        "status": record.status.value,
                        "notes": record.note or "",
                    }
                )

        items.sort(key=lambda i: (i["date"], polish_sort_key(i["student_name"])))

        by_student: dict[tuple[str, str], list[dict]] = {}
        by_group: dict[str, list[dict]] = {}
        for i in items:
            by_student.setdefault((i["student_id"], i["group_id"]), []).append(i)
            by_group.setdefault(i["group_id"], []).append(i)

        student_stats = [
            {
                "student_id": student_id,
                "student_name": rows[0]["student_name"],
                "group_id": group_id,
                **attendance_stats(rows),
            }
            for (student_id, group_id), rows in by_student.items()
        ]
        student_stats.sort(key=lambda s: polish_sort_key(s["student_name"]))

        group_stats = [
            {
                "group_id": group_id,
                "group_name": rows[0]["group_name"],
                "studentCount": len({r["student_id"] for r in rows}),
                **attendance_stats(rows),
            }
            for group_id, rows in by_group.items()
        ]

        return ReportData(
            items=items,
            student_stats=student_stats,
            group_stats=group_stats,
            total_stats=attendance_stats(items),
        )
