from __future__ import annotations

from scripts.seed import EXAMPLE_STUDENTS, build_seed_text, main
from src.dance_attendance.dance_attendance.core.constants import ATTENDANCE_COLUMNS, STUDENT_COLUMNS


def test_seed_text_lists_headers_and_examples():
    text = build_seed_text()

    assert ",".join(STUDENT_COLUMNS) in text
    assert ",".join(ATTENDANCE_COLUMNS) in text
    assert EXAMPLE_STUDENTS[0] in text
    assert "GOOGLE_SERVICE_ACCOUNT_EMAIL" in text


def test_example_students_match_student_header_width():
    for row in EXAMPLE_STUDENTS:
        assert len(row.split(",")) == len(STUDENT_COLUMNS)


def test_main_prints_seed_text(capsys):
    main()

    assert "SETUP INSTRUCTIONS" in capsys.readouterr().out
