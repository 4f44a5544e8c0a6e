from __future__ import annotations

import json
import logging
import time

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.constants import LOG_LINE_MAX
from ..core.exceptions import ConfigurationError, NotFoundError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("dance_attendance.api")

API_PREFIXES = ("/api", "/health")


def is_api_path(path: str) -> bool:
    return path.startswith(API_PREFIXES)


def register(app: Flask) -> None:
    """JSON error handlers and the one-line request log for /api calls."""

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        body = {"message": str(e)}
        if e.errors:
            body["errors"] = e.errors
        return jsonify(body), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"message": str(e)}), 404

    @app.errorhandler(UpstreamError)
    def handle_upstream(e: UpstreamError):
        body = {"message": str(e)}
        if e.hint:
            body["hint"] = e.hint
        return jsonify(body), 502

    @app.errorhandler(ConfigurationError)
    def handle_configuration(e: ConfigurationError):
        logger.error("Configuration error: %s", e)
        return jsonify({"message": str(e)}), 500

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        if not is_api_path(request.path):
            return e
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Internal Server Error"}), 500

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_api_call(response):
        if request.path.startswith("/api"):
            started = g.get("request_started", time.perf_counter())
            duration_ms = int((time.perf_counter() - started) * 1000)
            line = f"{request.method} {request.path} {response.status_code} in {duration_ms}ms"
            if response.is_json:
                line += f" :: {json.dumps(response.get_json(silent=True), ensure_ascii=False)}"
            if len(line) > LOG_LINE_MAX:
                line = line[: LOG_LINE_MAX - 1] + "…"
            request_logger.info(line)
        return response
