from __future__ import annotations

import logging

from flask import Flask

from src.dance_attendance.dance_attendance.core.enums import ServeMode
from src.dance_attendance.dance_attendance.web import errors, static


def _app(tmp_path, monkeypatch, *, mode, dist_path=None, client_dir=None) -> Flask:
    # keep the cwd fallback from finding a real build
    monkeypatch.chdir(tmp_path)
    app = Flask(__name__)
    errors.register(app)

    @app.route("/api/ping")
    def ping():
        return {"pong": True}

    static.register(app, mode=mode, dist_path=dist_path, client_dir=client_dir)
    return app


def test_bust_entry_script_appends_token():
    html = '<script type="module" src="/src/main.tsx"></script>'

    assert static.bust_entry_script(html, "abc") == '<script type="module" src="/src/main.tsx?v=abc"></script>'


def test_static_mode_serves_assets_and_falls_back_to_index(tmp_path, monkeypatch):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>spa</html>", encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log(1)", encoding="utf-8")
    client = _app(tmp_path, monkeypatch, mode=ServeMode.STATIC, dist_path=dist).test_client()

    assert client.get("/assets/app.js").data == b"console.log(1)"
    assert client.get("/attendance/G1").data == b"<html>spa</html>"
    assert client.get("/").data == b"<html>spa</html>"
    assert client.get("/api/ping").get_json() == {"pong": True}


def test_static_mode_never_serves_spa_for_api_paths(tmp_path, monkeypatch):
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text("<html>spa</html>", encoding="utf-8")
    client = _app(tmp_path, monkeypatch, mode=ServeMode.STATIC, dist_path=dist).test_client()

    api = client.get("/api/missing")
    health = client.get("/health")

    assert api.status_code == 404
    assert api.is_json
    assert health.status_code == 404


def test_missing_index_reports_application_not_built(tmp_path, monkeypatch):
    dist = tmp_path / "dist"
    dist.mkdir()
    client = _app(tmp_path, monkeypatch, mode=ServeMode.STATIC, dist_path=dist).test_client()

    resp = client.get("/groups")

    assert resp.status_code == 404
    assert resp.data == b"Application not built."


def test_missing_build_directory_only_warns(tmp_path, monkeypatch, caplog):
    with caplog.at_level(logging.WARNING):
        app = _app(tmp_path, monkeypatch, mode=ServeMode.STATIC, dist_path=tmp_path / "nope")

    assert "Could not find the build directory" in caplog.text
    client = app.test_client()
    assert client.get("/api/ping").status_code == 200
    assert client.get("/").status_code == 404


def test_dev_mode_rereads_index_with_fresh_token(tmp_path, monkeypatch):
    client_dir = tmp_path / "client"
    client_dir.mkdir()
    index = client_dir / "index.html"
    index.write_text('<script src="/src/main.tsx"></script>', encoding="utf-8")
    client = _app(tmp_path, monkeypatch, mode=ServeMode.DEV, client_dir=client_dir).test_client()

    first = client.get("/").data.decode()
    index.write_text('<p>edited</p><script src="/src/main.tsx"></script>', encoding="utf-8")
    second = client.get("/students").data.decode()

    assert 'src="/src/main.tsx?v=' in first
    assert second.startswith("<p>edited</p>")
    assert first != second
