from __future__ import annotations

from typing import Mapping, Optional, Sequence

from .model import Group
from .repository import GroupRepository


class ConfigGroupRepository(GroupRepository):
    """Groups are configured in settings (GROUPS), not stored in a sheet."""

    def __init__(self, groups_config: Mapping[str, Mapping[str, str]]):
        self._groups = [
            Group(
                group_id=str(group_id),
                name=str(cfg.get("name") or group_id),
                spreadsheet_id=str(cfg["spreadsheet_id"]),
                sheet_group_id=cfg.get("sheet_group_id") or None,
            )
            for group_id, cfg in groups_config.items()
        ]
        self._by_id = {g.group_id: g for g in self._groups}

    def list_all(self) -> Sequence[Group]:
        return list(self._groups)

    def get_by_id(self, group_id: str) -> Optional[Group]:
        return self._by_id.get(group_id)
