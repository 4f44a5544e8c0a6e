from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Session:
    """One dated occurrence of a group's class."""

    session_id: str
    group_id: str
    session_date: date


@dataclass(frozen=True)
class AttendanceRecord:
    """Stored status of one student for one session (unique per pair)."""

    session_id: str
    student_id: str
    status: AttendanceStatus
    updated_at: Optional[str] = None
    note: str = ""
    student_name: str = ""
    class_label: str = ""
    phone: str = ""
    group_name: str = ""


@dataclass(frozen=True)
class AttendanceItem:
    """Wire shape of one student's attendance, as sent and returned by the API."""

    student_id: str
    status: AttendanceStatus
    updated_at: Optional[str] = None
    notes: str = ""

    def to_dict(self) -> dict:
        out = {"student_id": self.student_id, "status": self.status.value, "notes": self.notes}
        if self.updated_at:
            out["updated_at"] = self.updated_at
        return out


@dataclass(frozen=True)
class AttendanceSheet:
    session_id: str
    items: list[AttendanceItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"session_id": self.session_id, "items": [i.to_dict() for i in self.items]}


@dataclass(frozen=True)
class AttendanceUpdateResult:
    session_id: str
    updated: list[AttendanceItem] = field(default_factory=list)
    conflicts: list[AttendanceItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "updated": [i.to_dict() for i in self.updated],
            "conflicts": [i.to_dict() for i in self.conflicts],
        }
