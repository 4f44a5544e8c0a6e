import os

from .config import SHEETS_CONFIG, Config, load_groups

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

GROUPS = load_groups(Config.GROUPS_JSON, Config.GOOGLE_SHEETS_SPREADSHEET_ID)

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
PORT = int(os.getenv("PORT", "5000"))

SERVE_MODE = os.getenv("SERVE_MODE", "static")
CLIENT_DIR = Config.CLIENT_DIR
STATIC_DIST_PATH = Config.STATIC_DIST_PATH or "dist/public"
