from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Group
from .repository import GroupRepository


class GroupService:
    def __init__(self, groups: GroupRepository):
        self._groups = groups

    def list_groups(self) -> Sequence[Group]:
        return self._groups.list_all()

    def require(self, group_id: str) -> Group:
        group_id = require_non_empty(group_id, "groupId")
        group = self._groups.get_by_id(group_id)
        if not group:
            raise NotFoundError(f"Unknown group: {group_id}")
        return group
