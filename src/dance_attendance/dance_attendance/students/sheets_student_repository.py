from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import parse_bool
from ..core.constants import STUDENTS_SHEET
from ..groups.model import Group
from ..sheets.connection import SheetsConnection
from ..sheets.sheets_base import optional, read_table, sheet_call
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class SheetsStudentRepository(StudentRepository):
    def __init__(self, conn: SheetsConnection):
        self._conn = conn

    def list_for_group(self, group: Group) -> Sequence[Student]:
        with sheet_call("Failed to fetch students from Google Sheets"):
            ws = self._conn.worksheet(group.spreadsheet_id, STUDENTS_SHEET)
            table = read_table(ws)

        students = []
        for row in table.rows:
            student = Student(
                student_id=row.get("id"),
                first_name=row.get("first_name"),
                last_name=row.get("last_name"),
                group_id=row.get("group_id"),
                active=parse_bool(row.get("active")),
                class_label=optional(row.get("class")),
                phone=optional(row.get("phone")),
                mail=optional(row.get("mail")),
            )
            if not (student.student_id and student.first_name and student.last_name and student.group_id):
                logger.debug("Skipping incomplete student row %s in group %s", row.row_number, group.group_id)
                continue
            if student.group_id != group.student_group_key:
                continue
            students.append(student)
        return students
