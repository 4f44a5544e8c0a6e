from __future__ import annotations

from typing import Optional, Sequence

from ..common.collation import polish_sort_key
from ..groups.service import GroupService
from .model import Student
from .repository import StudentRepository


def _sort_key(student: Student) -> tuple:
    return (polish_sort_key(student.last_name), polish_sort_key(student.first_name))


class StudentService:
    def __init__(self, students: StudentRepository, groups: GroupService):
        self._students = students
        self._groups = groups

    def list_students(self, group_id: Optional[str] = None, *, show_inactive: bool = False) -> Sequence[Student]:
        """Students of one group, or of every configured group when group_id is empty.

        Inactive students are excluded unless show_inactive is set.
        """

        if group_id:
            groups = [self._groups.require(group_id)]
        else:
            groups = list(self._groups.list_groups())

        out: list[Student] = []
        for group in groups:
            for s in self._students.list_for_group(group):
                if s.active or show_inactive:
                    out.append(s)

        out.sort(key=_sort_key)
        return out

    def active_for_group(self, group_id: str) -> Sequence[Student]:
        return self.list_students(group_id, show_inactive=False)
