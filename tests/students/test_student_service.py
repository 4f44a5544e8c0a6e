from __future__ import annotations

from dataclasses import dataclass

import pytest

from src.dance_attendance.dance_attendance.core.exceptions import NotFoundError
from src.dance_attendance.dance_attendance.groups.config_group_repository import ConfigGroupRepository
from src.dance_attendance.dance_attendance.groups.service import GroupService
from src.dance_attendance.dance_attendance.students.model import Student
from src.dance_attendance.dance_attendance.students.service import StudentService


@dataclass
class InMemoryStudents:
    students: list[Student]

    def list_for_group(self, group):
        return [s for s in self.students if s.group_id == group.student_group_key]


GROUPS = {
    "TTI": {"name": "TTI", "spreadsheet_id": "s1", "sheet_group_id": "G1"},
    "HipHop": {"name": "HipHop", "spreadsheet_id": "s2"},
}

STUDENTS = [
    Student(student_id="S1", first_name="Piotr", last_name="Nowak", group_id="G1", active=True),
    Student(student_id="S2", first_name="Anna", last_name="kowalska", group_id="G1", active=True),
    Student(student_id="S3", first_name="Ewa", last_name="Adamska", group_id="G1", active=False),
    Student(student_id="S4", first_name="Jan", last_name="Bąk", group_id="HipHop", active=True),
]


def _service() -> StudentService:
    return StudentService(InMemoryStudents(STUDENTS), GroupService(ConfigGroupRepository(GROUPS)))


def test_inactive_students_are_hidden_by_default():
    ids = [s.student_id for s in _service().list_students("TTI")]

    assert ids == ["S2", "S1"]


def test_show_inactive_includes_everyone_in_group_sorted_by_last_name():
    ids = [s.student_id for s in _service().list_students("TTI", show_inactive=True)]

    assert ids == ["S3", "S2", "S1"]


def test_without_group_lists_all_configured_groups():
    ids = {s.student_id for s in _service().list_students(None)}

    assert ids == {"S1", "S2", "S4"}


def test_unknown_group_is_not_found():
    with pytest.raises(NotFoundError):
        _service().list_students("Ballet")


def test_group_to_dict_exposes_public_fields():
    group = GroupService(ConfigGroupRepository(GROUPS)).require("TTI")

    assert group.to_dict() == {"id": "TTI", "name": "TTI", "spreadsheetId": "s1"}
    assert group.student_group_key == "G1"


def test_polish_surnames_sort_alphabetically():
    students = [
        Student(student_id="Z", first_name="Ola", last_name="Zając", group_id="G1", active=True),
        Student(student_id="L", first_name="Jan", last_name="Łukasz", group_id="G1", active=True),
        Student(student_id="M", first_name="Ewa", last_name="Mazur", group_id="G1", active=True),
        Student(student_id="LI", first_name="Iga", last_name="Lis", group_id="G1", active=True),
    ]
    service = StudentService(InMemoryStudents(students), GroupService(ConfigGroupRepository(GROUPS)))

    assert [s.student_id for s in service.list_students("TTI")] == ["LI", "L", "M", "Z"]
