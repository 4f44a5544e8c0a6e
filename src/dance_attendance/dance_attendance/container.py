from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.sheets_attendance_repository import SheetsAttendanceRepository
from .groups.config_group_repository import ConfigGroupRepository
from .groups.repository import GroupRepository
from .groups.service import GroupService
from .instructors.repository import InstructorRepository
from .instructors.service import InstructorService
from .instructors.sheets_instructor_repository import SheetsInstructorRepository
from .reports.service import AttendanceReportService
from .sheets.connection import SheetsConfig, SheetsConnection
from .students.repository import StudentRepository
from .students.service import StudentService
from .students.sheets_student_repository import SheetsStudentRepository


@dataclass(frozen=True)
class Container:
    groups_repo: GroupRepository
    students_repo: StudentRepository
    instructors_repo: InstructorRepository
    attendance_repo: AttendanceRepository

    group_service: GroupService
    student_service: StudentService
    instructor_service: InstructorService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def wire_container(
    *,
    groups_repo: GroupRepository,
    students_repo: StudentRepository,
    instructors_repo: InstructorRepository,
    attendance_repo: AttendanceRepository,
) -> Container:
    group_service = GroupService(groups_repo)
    student_service = StudentService(students_repo, group_service)
    instructor_service = InstructorService(instructors_repo)
    attendance_service = AttendanceService(attendance_repo, student_service, group_service)
    report_service = AttendanceReportService(attendance_repo, student_service, group_service)

    return Container(
        groups_repo=groups_repo,
        students_repo=students_repo,
        instructors_repo=instructors_repo,
        attendance_repo=attendance_repo,
        group_service=group_service,
        student_service=student_service,
        instructor_service=instructor_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )


def build_container(*, sheets_config: Mapping[str, Any], groups_config: Mapping[str, Mapping[str, str]]) -> Container:
    config = SheetsConfig(
        service_account_email=str(sheets_config.get("service_account_email") or ""),
        private_key=str(sheets_config.get("private_key") or ""),
        spreadsheet_id=str(sheets_config.get("spreadsheet_id") or ""),
    )
    conn = SheetsConnection.get_instance(config)

    return wire_container(
        groups_repo=ConfigGroupRepository(groups_config),
        students_repo=SheetsStudentRepository(conn),
        instructors_repo=SheetsInstructorRepository(conn),
        attendance_repo=SheetsAttendanceRepository(conn),
    )
