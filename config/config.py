"""Settings shared by every environment module."""

import json
import os


def load_groups(raw_json, default_spreadsheet_id):
    """Groups come from GROUPS_JSON, e.g.

    {"TTI": {"name": "TTI", "spreadsheet_id": "1Q-v...", "sheet_group_id": "G1"}}

    Without it, the two seed groups G1/G2 live in the main spreadsheet.
    """

    if raw_json:
        groups = json.loads(raw_json)
        for group_id, cfg in groups.items():
            if not cfg.get("spreadsheet_id"):
                raise ValueError(f"GROUPS_JSON: group {group_id!r} has no spreadsheet_id")
        return groups

    if not default_spreadsheet_id:
        return {}
    return {
        "G1": {"name": "G1", "spreadsheet_id": default_spreadsheet_id},
        "G2": {"name": "G2", "spreadsheet_id": default_spreadsheet_id},
    }


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dance-attendance-secret"

    # Google service account
    GOOGLE_SERVICE_ACCOUNT_EMAIL = os.environ.get("GOOGLE_SERVICE_ACCOUNT_EMAIL", "")
    GOOGLE_PRIVATE_KEY = os.environ.get("GOOGLE_PRIVATE_KEY", "")
    GOOGLE_SHEETS_SPREADSHEET_ID = os.environ.get("GOOGLE_SHEETS_SPREADSHEET_ID", "")

    GROUPS_JSON = os.environ.get("GROUPS_JSON", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    STATIC_DIST_PATH = os.environ.get("STATIC_DIST_PATH", "")
    CLIENT_DIR = os.environ.get("CLIENT_DIR", "client")


SHEETS_CONFIG = {
    "service_account_email": Config.GOOGLE_SERVICE_ACCOUNT_EMAIL,
    "private_key": Config.GOOGLE_PRIVATE_KEY,
    "spreadsheet_id": Config.GOOGLE_SHEETS_SPREADSHEET_ID,
}
