from __future__ import annotations

import pytest

from config import get_settings_module
from config.config import load_groups


@pytest.mark.parametrize(
    "app_env, expected",
    [
        ("production", "config.production"),
        (" PROD ", "config.production"),
        ("testing", "config.testing"),
        ("dev", "config.development"),
        ("staging", "config.development"),
        ("", "config.development"),
    ],
)
def test_settings_module_for_app_env(app_env, expected):
    assert get_settings_module(app_env) == expected


def test_settings_module_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_groups_default_to_main_spreadsheet():
    groups = load_groups("", "main-sheet")

    assert set(groups) == {"G1", "G2"}
    assert groups["G1"]["spreadsheet_id"] == "main-sheet"
    assert load_groups("", "") == {}


def test_groups_json_requires_spreadsheet_id():
    groups = load_groups('{"TTI": {"name": "TTI", "spreadsheet_id": "abc", "sheet_group_id": "G1"}}', "main")

    assert groups["TTI"]["sheet_group_id"] == "G1"
    with pytest.raises(ValueError):
        load_groups('{"TTI": {"name": "TTI"}}', "main")
