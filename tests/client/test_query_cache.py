from __future__ import annotations

from src.dance_attendance.dance_attendance.client.query_cache import QueryCache, invalidate_attendance_queries


class FakeClock:
    def __init__(self):
        self.t = 1000.0

    def __call__(self) -> float:
        return self.t


def test_entries_expire_after_max_age():
    clock = FakeClock()
    cache = QueryCache(600, clock=clock)
    cache.set(("/api/groups",), {"groups": []})

    clock.t += 599
    assert cache.get(("/api/groups",)) == {"groups": []}

    clock.t += 1
    assert cache.get(("/api/groups",)) is None


def test_get_or_fetch_only_fetches_once_while_fresh():
    cache = QueryCache(600, clock=FakeClock())
    calls = []

    def fetch():
        calls.append(1)
        return {"ok": True}

    cache.get_or_fetch(("/api/students", "G1", None), fetch)
    cache.get_or_fetch(("/api/students", "G1", None), fetch)

    assert len(calls) == 1


def test_attendance_write_invalidates_attendance_and_group_students():
    cache = QueryCache(600, clock=FakeClock())
    cache.set(("/api/attendance", "G1", "2025-03-01"), {"items": []})
    cache.set(("/api/attendance", "G2", "2025-03-01"), {"items": []})
    cache.set(("/api/students", "G1", None), {"students": []})
    cache.set(("/api/students", "G2", None), {"students": []})
    cache.set(("/api/groups",), {"groups": []})

    invalidate_attendance_queries(cache, "G1")

    assert cache.is_stale(("/api/attendance", "G1", "2025-03-01"))
    assert cache.is_stale(("/api/attendance", "G2", "2025-03-01"))
    assert cache.is_stale(("/api/students", "G1", None))
    assert not cache.is_stale(("/api/students", "G2", None))
    assert not cache.is_stale(("/api/groups",))
    assert len(cache) == 5


def test_unknown_key_counts_as_stale():
    cache = QueryCache()

    assert cache.is_stale(("/api/groups",))
    assert cache.invalidate(("/api/groups",)) == 0
