from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..groups.model import Group
from .model import AttendanceRecord, Session


class AttendanceRepository(Protocol):
    def find_session(self, group: Group, session_date: date) -> Optional[Session]:
        raise NotImplementedError

    def create_session(self, group: Group, session: Session) -> None:
        raise NotImplementedError

    def list_sessions(self, group: Group) -> Sequence[Session]:
        raise NotImplementedError

    def list_for_session(self, group: Group, session_id: str) -> Sequence[AttendanceRecord]:
        """One record per student; the latest wins when duplicates exist."""

        raise NotImplementedError

    def list_all(self, group: Group) -> Sequence[AttendanceRecord]:
        """Every stored record of the group, deduplicated per (session, student)."""

        raise NotImplementedError

    def upsert_records(self, group: Group, records: Sequence[AttendanceRecord]) -> None:
        """Replace the row of each (session, student) pair, appending new ones."""

        raise NotImplementedError
