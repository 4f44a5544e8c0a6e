from __future__ import annotations

from typing import Protocol, Sequence

from .model import Instructor, InstructorGroup


class InstructorRepository(Protocol):
    def list_instructors(self) -> Sequence[Instructor]:
        raise NotImplementedError

    def list_instructor_groups(self) -> Sequence[InstructorGroup]:
        raise NotImplementedError
