from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..common.datetime_utils import ISO_DATE_RE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .model import AttendanceItem

STATUS_VALUES = [s.value for s in AttendanceStatus]


def parse_attendance_request(body: Any) -> tuple[str, str, list[AttendanceItem]]:
    """Validate a POST /api/attendance body.

    Collects every problem so the client can show them all at once.
    """

    if not isinstance(body, dict):
        raise ValidationError("Invalid request body", errors=[{"path": [], "message": "Expected a JSON object"}])

    errors: list[dict] = []
    group_id = body.get("groupId")
    date_s = body.get("date")
    raw_items = body.get("items")

    if not isinstance(group_id, str) or not group_id.strip():
        errors.append({"path": ["groupId"], "message": "groupId is required"})
    if not isinstance(date_s, str) or not ISO_DATE_RE.match(date_s):
        errors.append({"path": ["date"], "message": "date must match YYYY-MM-DD"})
    if not isinstance(raw_items, list):
        errors.append({"path": ["items"], "message": "items must be a list"})
        raw_items = []

    items: list[AttendanceItem] = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            errors.append({"path": ["items", index], "message": "Expected an object"})
            continue
        student_id = raw.get("student_id")
        status = raw.get("status")
        updated_at = raw.get("updated_at")
        notes = raw.get("notes")

        if not isinstance(student_id, str) or not student_id:
            errors.append({"path": ["items", index, "student_id"], "message": "student_id is required"})
        if status not in STATUS_VALUES:
            errors.append({"path": ["items", index, "status"], "message": f"status must be one of {STATUS_VALUES}"})
        if updated_at is not None and not isinstance(updated_at, str):
            errors.append({"path": ["items", index, "updated_at"], "message": "updated_at must be a string"})
        if notes is not None and not isinstance(notes, str):
            errors.append({"path": ["items", index, "notes"], "message": "notes must be a string"})

        if not errors:
            items.append(
                AttendanceItem(
                    student_id=student_id,
                    status=AttendanceStatus(status),
                    updated_at=updated_at or None,
                    notes=notes or "",
                )
            )

    if errors:
        raise ValidationError("Invalid request body", errors=errors)
    return group_id.strip(), date_s, items


def parse_notes_request(body: Any) -> tuple[str, str, str, str]:
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body", errors=[{"path": [], "message": "Expected a JSON object"}])

    errors: list[dict] = []
    for key in ("groupId", "date", "student_id"):
        value = body.get(key)
        if not isinstance(value, str) or not value.strip():
            errors.append({"path": [key], "message": f"{key} is required"})
    date_s = body.get("date")
    if isinstance(date_s, str) and date_s.strip() and not ISO_DATE_RE.match(date_s):
        errors.append({"path": ["date"], "message": "date must match YYYY-MM-DD"})
    notes = body.get("notes")
    if notes is not None and not isinstance(notes, str):
        errors.append({"path": ["notes"], "message": "notes must be a string"})

    if errors:
        raise ValidationError("Invalid request body", errors=errors)
    return body["groupId"].strip(), date_s, body["student_id"].strip(), notes or ""


def _required_query() -> tuple[str, str]:
    group_id = request.args.get("groupId")
    date_s = request.args.get("date")
    if not group_id or not date_s:
        raise ValidationError("Missing required parameters: groupId and date")
    return group_id, date_s


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_get")
    def api_attendance_get():
        group_id, date_s = _required_query()
        sheet = container.attendance_service.get_attendance(group_id, date_s)
        return jsonify(sheet.to_dict())

    @app.route("/api/attendance/exists", methods=["GET"], endpoint="api_attendance_exists")
    def api_attendance_exists():
        group_id, date_s = _required_query()
        return jsonify({"exists": container.attendance_service.exists(group_id, date_s)})

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_save")
    def api_attendance_save():
        group_id, date_s, items = parse_attendance_request(request.get_json(silent=True))
        result = container.attendance_service.save_attendance(group_id, date_s, items)
        return jsonify(result.to_dict())

    @app.route("/api/attendance/notes", methods=["POST"], endpoint="api_attendance_notes")
    def api_attendance_notes():
        group_id, date_s, student_id, notes = parse_notes_request(request.get_json(silent=True))
        item = container.attendance_service.save_notes(group_id, date_s, student_id, notes)
        return jsonify({"success": True, "item": item.to_dict()})
