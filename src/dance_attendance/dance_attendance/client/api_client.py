"""
HTTP client for the attendance API
==================================
Fetch wrappers per resource. Each call performs a single request and raises
ApiError with the HTTP status text when the response is not successful.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Union

import requests

from ..attendance.model import AttendanceItem
from .query_cache import QueryCache, invalidate_attendance_queries

logger = logging.getLogger(__name__)

API_BASE = "/api"


class ApiError(Exception):
    """Raised for any non-2xx response."""

    def __init__(self, message: str, status_code: int, reason: str):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class AttendanceApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        cache: Optional[QueryCache] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ):
        self.base_url = base_url.rstrip("/")
        self.cache = cache
        self._session = session or requests.Session()
        self._timeout = timeout

    def close(self) -> None:
        self._session.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{API_BASE}{path}"

    def _check(self, response: requests.Response, what: str) -> Dict[str, Any]:
        if not response.ok:
            logger.error("%s: %s %s", what, response.status_code, response.reason)
            raise ApiError(f"{what}: {response.reason}", response.status_code, response.reason)
        return response.json()

    def _get(self, path: str, what: str, params: Optional[dict] = None) -> Dict[str, Any]:
        response = self._session.get(self._url(path), params=params, timeout=self._timeout)
        return self._check(response, what)

    def _cached(self, key: tuple, fetch):
        if self.cache is None:
            return fetch()
        return self.cache.get_or_fetch(key, fetch)

    def fetch_groups(self) -> Dict[str, Any]:
        return self._cached(("/api/groups",), lambda: self._get("/groups", "Failed to fetch groups"))

    def fetch_students(self, group_id: Optional[str] = None, show_inactive: Optional[bool] = None) -> Dict[str, Any]:
        params: dict = {}
        if group_id:
            params["groupId"] = group_id
        if show_inactive is not None:
            params["showInactive"] = "true" if show_inactive else "false"

        return self._cached(
            ("/api/students", group_id, show_inactive),
            lambda: self._get("/students", "Failed to fetch students", params or None),
        )

    def fetch_attendance(self, group_id: str, date: str) -> Dict[str, Any]:
        return self._cached(
            ("/api/attendance", group_id, date),
            lambda: self._get("/attendance", "Failed to fetch attendance", {"groupId": group_id, "date": date}),
        )

    def save_attendance(self, group_id: str, date: str, items: Iterable[Union[AttendanceItem, dict]]) -> Dict[str, Any]:
        payload = {
            "groupId": group_id,
            "date": date,
            "items": [i.to_dict() if isinstance(i, AttendanceItem) else dict(i) for i in items],
        }
        response = self._session.post(self._url("/attendance"), json=payload, timeout=self._timeout)
        result = self._check(response, "Failed to save attendance")

        if self.cache is not None:
            invalidate_attendance_queries(self.cache, group_id)
        return result

    def fetch_instructors(self) -> Dict[str, Any]:
        return self._cached(("/api/instructors",), lambda: self._get("/instructors", "Failed to fetch instructors"))

    def fetch_instructor_groups(self) -> Dict[str, Any]:
        return self._cached(
            ("/api/instructor-groups",),
            lambda: self._get("/instructor-groups", "Failed to fetch instructor groups"),
        )

    def fetch_instructors_for_group(self, group_id: str) -> Dict[str, Any]:
        return self._cached(
            ("/api/instructors/group", group_id),
            lambda: self._get(f"/instructors/group/{group_id}", "Failed to fetch instructors for group"),
        )

    def fetch_attendance_report(self, **filters: Any) -> Dict[str, Any]:
        """Reports are always fetched fresh."""
        params = {k: (",".join(v) if isinstance(v, (list, tuple)) else v) for k, v in filters.items() if v}
        return self._get("/reports/attendance", "Failed to fetch attendance report", params or None)
