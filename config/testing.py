SECRET_KEY = "test-secret"

SHEETS_CONFIG = {
    "service_account_email": "",
    "private_key": "",
    "spreadsheet_id": "test-main-sheet",
}

GROUPS = {
    "G1": {"name": "G1", "spreadsheet_id": "test-main-sheet"},
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
PORT = 5000

SERVE_MODE = "none"
CLIENT_DIR = "client"
STATIC_DIST_PATH = "dist/public"
