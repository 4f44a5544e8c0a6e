from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Instructor:
    instructor_id: str
    first_name: str
    last_name: str
    active: bool
    email: Optional[str] = None
    phone: Optional[str] = None
    specialization: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.instructor_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "specialization": self.specialization,
            "active": self.active,
        }


@dataclass(frozen=True)
class InstructorGroup:
    """Many-to-many link between an instructor and a group."""

    instructor_id: str
    group_id: str
    role: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def is_current(self, today: date) -> bool:
        if self.start_date and today < self.start_date:
            return False
        if self.end_date and today > self.end_date:
            return False
        return True

    def to_dict(self) -> dict:
        return {
            "instructor_id": self.instructor_id,
            "group_id": self.group_id,
            "role": self.role,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
        }
