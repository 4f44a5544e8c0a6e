from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        """GET /api/students?groupId=G1&showInactive=true

        Only the literal "true" shows inactive students.
        """

        group_id = (request.args.get("groupId") or "").strip() or None
        show_inactive = request.args.get("showInactive") == "true"

        students = container.student_service.list_students(group_id, show_inactive=show_inactive)
        return jsonify({"students": [s.to_dict() for s in students]})
