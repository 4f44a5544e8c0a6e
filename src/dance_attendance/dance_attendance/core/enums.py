from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored in the Attendance worksheet."""

    PRESENT = "present"
    ABSENT = "absent"
    EXCUSED = "excused"
    UNMARKED = "unmarked"


class ServeMode(str, Enum):
    """How the web client is served next to the API."""

    DEV = "dev"
    STATIC = "static"
    NONE = "none"
