from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/instructors", methods=["GET"], endpoint="api_instructors")
    def api_instructors():
        instructors = container.instructor_service.list_instructors()
        return jsonify({"instructors": [i.to_dict() for i in instructors]})

    @app.route("/api/instructor-groups", methods=["GET"], endpoint="api_instructor_groups")
    def api_instructor_groups():
        links = container.instructor_service.list_instructor_groups()
        return jsonify({"instructorGroups": [link.to_dict() for link in links]})

    @app.route("/api/instructors/group/<group_id>", methods=["GET"], endpoint="api_instructors_for_group")
    def api_instructors_for_group(group_id: str):
        return jsonify({"instructors": container.instructor_service.instructors_for_group(group_id)})
