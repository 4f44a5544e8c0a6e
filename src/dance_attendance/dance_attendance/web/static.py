from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Iterable, Optional

from flask import Flask, abort, send_from_directory

from ..core.enums import ServeMode
from .errors import is_api_path

logger = logging.getLogger(__name__)

ENTRY_SCRIPT = 'src="/src/main.tsx"'


def bust_entry_script(html: str, token: Optional[str] = None) -> str:
    """Append a cache-busting query to the client entry script tag."""
    token = token or secrets.token_urlsafe(15)
    return html.replace(ENTRY_SCRIPT, f'src="/src/main.tsx?v={token}"')


def resolve_dist_path(candidates: Iterable[Optional[Path]]) -> Optional[Path]:
    for candidate in candidates:
        if candidate is not None and candidate.is_dir():
            return candidate
    return None


def register(app: Flask, *, mode: ServeMode, dist_path: Optional[Path], client_dir: Optional[Path]) -> None:
    if mode == ServeMode.DEV:
        _register_dev(app, client_dir)
    elif mode == ServeMode.STATIC:
        _register_static(app, dist_path)


def _register_dev(app: Flask, client_dir: Optional[Path]) -> None:
    if client_dir is None or not client_dir.is_dir():
        logger.warning("Client directory not found: %s. Only API routes are served.", client_dir)
        return

    @app.route("/", defaults={"path": ""}, endpoint="client_dev")
    @app.route("/<path:path>", endpoint="client_dev")
    def client_dev(path: str):
        if is_api_path("/" + path):
            abort(404)

        if path and (client_dir / path).is_file():
            return send_from_directory(client_dir, path)

        # Re-read index.html on every request so edits show up without a restart.
        index = client_dir / "index.html"
        if not index.is_file():
            abort(404)
        page = bust_entry_script(index.read_text(encoding="utf-8"))
        return app.response_class(page, status=200, mimetype="text/html")


def _register_static(app: Flask, dist_path: Optional[Path]) -> None:
    root = Path(app.root_path).resolve().parents[2]
    dist = resolve_dist_path([dist_path, root / "dist" / "public", Path.cwd() / "dist" / "public"])

    if dist is None:
        logger.warning("Could not find the build directory: %s", dist_path)
        logger.warning("Static files will not be served. API routes will still work.")
        return

    logger.info("Serving static files from %s", dist)

    @app.route("/", defaults={"path": ""}, endpoint="client_static")
    @app.route("/<path:path>", endpoint="client_static")
    def client_static(path: str):
        # API and health 404s must stay visible, never the SPA page.
        if is_api_path("/" + path):
            abort(404)

        if path and (dist / path).is_file():
            return send_from_directory(dist, path)

        if not (dist / "index.html").is_file():
            logger.error("index.html not found at %s", dist / "index.html")
            return app.response_class("Application not built.", status=404, mimetype="text/plain")
        return send_from_directory(dist, "index.html")
