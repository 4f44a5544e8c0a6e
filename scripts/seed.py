"""Print worksheet headers and example rows to paste into Google Sheets.

Run with: python scripts/seed.py
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.dance_attendance.dance_attendance.core.constants import (
    ATTENDANCE_COLUMNS,
    ATTENDANCE_SHEET,
    INSTRUCTORS_SHEET,
    INSTRUCTOR_GROUPS_SHEET,
    SESSION_COLUMNS,
    SESSIONS_SHEET,
    STUDENT_COLUMNS,
    STUDENTS_SHEET,
)

EXAMPLE_STUDENTS = [
    "S001,Anna,Kowalska,G1,true,1A,+48123456789",
    "S002,Piotr,Nowak,G1,true,1A,+48123456790",
    "S003,Maria,Wiśniewska,G1,true,1A,+48123456791",
    "S004,Jakub,Dąbrowski,G1,true,1A,+48123456792",
    "S005,Katarzyna,Lewandowska,G1,true,1A,+48123456793",
    "S006,Tomasz,Jankowski,G2,true,1B,+48123456794",
    "S007,Agnieszka,Wójcik,G2,true,1B,+48123456795",
    "S008,Michał,Kowalczyk,G2,true,1B,+48123456796",
    "S009,Magdalena,Kamińska,G2,true,1B,+48123456797",
    "S010,Paweł,Zieliński,G2,true,1B,+48123456798",
]

INSTRUCTOR_COLUMNS = ["id", "first_name", "last_name", "email", "phone", "specialization", "active"]
INSTRUCTOR_GROUP_COLUMNS = ["instructor_id", "group_id", "role", "start_date", "end_date"]


def build_seed_text() -> str:
    lines = ["=== ATTENDANCE SYSTEM - SEED DATA ===", ""]

    lines.append(f"1. {STUDENTS_SHEET} sheet headers (paste to row 1):")
    lines.append(",".join(STUDENT_COLUMNS))
    lines.append("")
    lines.append(f"2. Example {STUDENTS_SHEET} data (paste starting from row 2):")
    lines.extend(EXAMPLE_STUDENTS)
    lines.append("")
    lines.append(f"3. {SESSIONS_SHEET} sheet headers (paste to row 1):")
    lines.append(",".join(SESSION_COLUMNS))
    lines.append(f"   No initial data needed ({SESSIONS_SHEET} rows are created on first save)")
    lines.append("")
    lines.append(f"4. {ATTENDANCE_SHEET} sheet headers (paste to row 1):")
    lines.append(",".join(ATTENDANCE_COLUMNS))
    lines.append(f"   No initial data needed ({ATTENDANCE_SHEET} rows are created on save)")
    lines.append("")
    lines.append(f"5. {INSTRUCTORS_SHEET} / {INSTRUCTOR_GROUPS_SHEET} sheet headers (main spreadsheet):")
    lines.append(",".join(INSTRUCTOR_COLUMNS))
    lines.append(",".join(INSTRUCTOR_GROUP_COLUMNS))
    lines.append("")
    lines.append("=== SETUP INSTRUCTIONS ===")
    lines.append("1. Create a new Google Sheets spreadsheet")
    lines.append(f'2. Create the sheets "{STUDENTS_SHEET}", "{SESSIONS_SHEET}", "{ATTENDANCE_SHEET}"')
    lines.append("3. Paste the headers and data above into the respective sheets")
    lines.append("4. Share the spreadsheet with your service account email as Editor")
    lines.append("5. Put the spreadsheet ID into GOOGLE_SHEETS_SPREADSHEET_ID (or GROUPS_JSON) in .env")
    lines.append("")
    lines.append("=== GOOGLE SERVICE ACCOUNT SETUP ===")
    lines.append("1. Create or select a project in Google Cloud Console and enable the Google Sheets API")
    lines.append("2. Create a Service Account and download its JSON key")
    lines.append("3. Set GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY in .env")
    return "\n".join(lines) + "\n"


def main() -> None:
    print(build_seed_text())


if __name__ == "__main__":
    main()
