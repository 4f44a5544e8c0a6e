from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/groups", methods=["GET"], endpoint="api_groups")
    def api_groups():
        groups = container.group_service.list_groups()
        return jsonify({"groups": [g.to_dict() for g in groups]})
