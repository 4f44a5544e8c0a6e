from __future__ import annotations

from typing import Protocol, Sequence

from ..groups.model import Group
from .model import Student


class StudentRepository(Protocol):
    def list_for_group(self, group: Group) -> Sequence[Student]:
        """All students (active and inactive) listed in the group's sheet."""

        raise NotImplementedError
