"""Constants and defaults.

Note: Keep worksheet names and ranges here so the Sheets repositories agree.
"""

STUDENTS_SHEET = "Students"
SESSIONS_SHEET = "Sessions"
ATTENDANCE_SHEET = "Attendance"
INSTRUCTORS_SHEET = "Instructors"
INSTRUCTOR_GROUPS_SHEET = "InstructorGroups"

STUDENT_COLUMNS = ["id", "first_name", "last_name", "group_id", "active", "class", "phone"]
SESSION_COLUMNS = ["id", "group_id", "date"]
ATTENDANCE_COLUMNS = [
    "session_id",
    "student_id",
    "status",
    "note",
    "updated_at",
    "student_name",
    "class",
    "phone",
    "group_name",
]

SESSION_ID_PREFIX = "SESS"

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

DEFAULT_CACHE_SECONDS = 10 * 60
LOG_LINE_MAX = 80
