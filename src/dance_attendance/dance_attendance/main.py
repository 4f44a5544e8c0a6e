from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_config import configure_logging
from .container import Container, build_container
from .core.enums import ServeMode
from .groups.controller import register as register_groups
from .instructors.controller import register as register_instructors
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .web.errors import register as register_errors
from .web.static import register as register_client

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _repo_path(value: Optional[str]) -> Optional[Path]:
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else REPO_ROOT / path


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    groups_config = getattr(settings, "GROUPS", {})
    logger.info("settings=%s groups=%s", settings_module, ", ".join(groups_config) or "-")

    if container is None:
        container = build_container(sheets_config=getattr(settings, "SHEETS_CONFIG"), groups_config=groups_config)

    register_errors(app)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_groups(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_instructors(app, container)
    register_reports(app, container)

    # Catch-all client routes go last so they never shadow /api.
    register_client(
        app,
        mode=ServeMode(getattr(settings, "SERVE_MODE", ServeMode.NONE.value)),
        dist_path=_repo_path(getattr(settings, "STATIC_DIST_PATH", None)),
        client_dir=_repo_path(getattr(settings, "CLIENT_DIR", None)),
    )

    return app
