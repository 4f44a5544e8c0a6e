from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Group:
    """A class/cohort of students. Each group lives in its own spreadsheet."""

    group_id: str
    name: str
    spreadsheet_id: str
    sheet_group_id: Optional[str] = None

    @property
    def student_group_key(self) -> str:
        """Value expected in the Students sheet group_id column."""
        return self.sheet_group_id or self.group_id

    def to_dict(self) -> dict:
        return {"id": self.group_id, "name": self.name, "spreadsheetId": self.spreadsheet_id}
