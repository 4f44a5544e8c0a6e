from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class ReportFilters:
    group_ids: Optional[list[str]] = None
    student_ids: Optional[list[str]] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[AttendanceStatus] = None


@dataclass(frozen=True)
class ReportData:
    items: list[dict] = field(default_factory=list)
    student_stats: list[dict] = field(default_factory=list)
    group_stats: list[dict] = field(default_factory=list)
    total_stats: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "items": self.items,
            "studentStats": self.student_stats,
            "groupStats": self.group_stats,
            "totalStats": self.total_stats,
        }
