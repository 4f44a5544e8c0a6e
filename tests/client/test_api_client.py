from __future__ import annotations

import pytest

from src.dance_attendance.dance_attendance.attendance.model import AttendanceItem
from src.dance_attendance.dance_attendance.client.api_client import ApiError, AttendanceApiClient
from src.dance_attendance.dance_attendance.client.query_cache import QueryCache
from src.dance_attendance.dance_attendance.core.enums import AttendanceStatus


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK"):
        self._payload = payload if payload is not None else {}
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls: list[tuple] = []

    def _next(self):
        return self.responses.pop(0) if self.responses else FakeResponse()

    def get(self, url, params=None, timeout=None):
        self.calls.append(("GET", url, params))
        return self._next()

    def post(self, url, json=None, timeout=None):
        self.calls.append(("POST", url, json))
        return self._next()

    def close(self):
        pass


def test_fetch_students_builds_query_params():
    session = FakeSession([FakeResponse({"students": []})])
    client = AttendanceApiClient("http://api.test/", session=session)

    assert client.fetch_students("G1", show_inactive=True) == {"students": []}
    assert session.calls == [("GET", "http://api.test/api/students", {"groupId": "G1", "showInactive": "true"})]


def test_non_ok_response_raises_api_error_with_status_text():
    session = FakeSession([FakeResponse(status_code=502, reason="Bad Gateway")])
    client = AttendanceApiClient("http://api.test", session=session)

    with pytest.raises(ApiError) as exc:
        client.fetch_groups()

    assert str(exc.value) == "Failed to fetch groups: Bad Gateway"
    assert exc.value.status_code == 502


def test_cached_reads_hit_the_network_once():
    session = FakeSession([FakeResponse({"groups": [{"id": "G1"}]})])
    client = AttendanceApiClient("http://api.test", session=session, cache=QueryCache())

    client.fetch_groups()
    client.fetch_groups()

    assert len(session.calls) == 1


def test_save_attendance_serializes_items_and_invalidates_cache():
    session = FakeSession(
        [
            FakeResponse({"items": []}),
            FakeResponse({"updated": [], "conflicts": []}),
            FakeResponse({"items": [{"student_id": "S1", "status": "present"}]}),
        ]
    )
    client = AttendanceApiClient("http://api.test", session=session, cache=QueryCache())

    client.fetch_attendance("G1", "2025-03-01")
    client.save_attendance("G1", "2025-03-01", [AttendanceItem(student_id="S1", status=AttendanceStatus.PRESENT)])
    refreshed = client.fetch_attendance("G1", "2025-03-01")

    method, url, body = session.calls[1]
    assert (method, url) == ("POST", "http://api.test/api/attendance")
    assert body == {"groupId": "G1", "date": "2025-03-01", "items": [{"student_id": "S1", "status": "present", "notes": ""}]}
    assert refreshed["items"][0]["status"] == "present"
    assert len(session.calls) == 3


def test_report_filters_join_lists_and_drop_empty_values():
    session = FakeSession([FakeResponse({"items": []})])
    client = AttendanceApiClient("http://api.test", session=session)

    client.fetch_attendance_report(groupIds=["G1", "G2"], status=None, dateFrom="2025-03-01")

    assert session.calls[0][2] == {"groupIds": "G1,G2", "dateFrom": "2025-03-01"}
