from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from .model import Instructor, InstructorGroup
from .repository import InstructorRepository


class InstructorService:
    def __init__(self, instructors: InstructorRepository):
        self._instructors = instructors

    def list_instructors(self) -> Sequence[Instructor]:
        return self._instructors.list_instructors()

    def list_instructor_groups(self) -> Sequence[InstructorGroup]:
        return self._instructors.list_instructor_groups()

    def instructors_for_group(self, group_id: str, *, today: Optional[date] = None) -> list[dict]:
        """Active instructors currently assigned to a group, with their role."""
        group_id = require_non_empty(group_id, "groupId")
        today = today or date.today()

        by_id = {i.instructor_id: i for i in self._instructors.list_instructors() if i.active}
        out: list[dict] = []
        seen: set[str] = set()
        for link in self._instructors.list_instructor_groups():
            if link.group_id != group_id or not link.is_current(today):
                continue
            instructor = by_id.get(link.instructor_id)
            if not instructor or instructor.instructor_id in seen:
                continue
            seen.add(instructor.instructor_id)
            out.append({**instructor.to_dict(), "role": link.role})
        return out
