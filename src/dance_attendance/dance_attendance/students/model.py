from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    student_id: str
    first_name: str
    last_name: str
    group_id: str
    active: bool
    class_label: Optional[str] = None
    phone: Optional[str] = None
    mail: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "group_id": self.group_id,
            "active": self.active,
            "class": self.class_label,
            "phone": self.phone,
            "mail": self.mail,
        }
