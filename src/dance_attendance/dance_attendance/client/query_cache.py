from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from ..core.constants import DEFAULT_CACHE_SECONDS

QueryKey = Tuple[Hashable, ...]


@dataclass
class _Entry:
    data: Any
    fetched_at: float
    stale: bool = False


class QueryCache:
    """Client-side cache of API reads keyed by resource identity.

    Keys are tuples such as ("/api/students", "G1", False). The cache is an
    explicit object owned by one client; it is never authoritative, writes
    mark the affected keys stale via invalidate().
    """

    def __init__(self, max_age_seconds: float = DEFAULT_CACHE_SECONDS, *, clock: Callable[[], float] = time.monotonic):
        self._max_age = float(max_age_seconds)
        self._clock = clock
        self._entries: Dict[QueryKey, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: QueryKey) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.stale or self._clock() - entry.fetched_at >= self._max_age:
            return None
        return entry.data

    def set(self, key: QueryKey, data: Any) -> None:
        self._entries[key] = _Entry(data=data, fetched_at=self._clock())

    def get_or_fetch(self, key: QueryKey, fetch: Callable[[], Any]) -> Any:
        cached = self.get(key)
        if cached is not None:
            return cached
        data = fetch()
        self.set(key, data)
        return data

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def invalidate(self, prefix: QueryKey) -> int:
        """Mark every key starting with prefix stale; returns how many were marked."""
        marked = 0
        for key, entry in self._entries.items():
            if key[: len(prefix)] == tuple(prefix):
                entry.stale = True
                marked += 1
        return marked

    def clear(self) -> None:
        self._entries.clear()


def invalidate_attendance_queries(cache: QueryCache, group_id: Optional[str] = None) -> None:
    """Called after every attendance write."""
    cache.invalidate(("/api/attendance",))
    if group_id:
        cache.invalidate(("/api/students", group_id))
