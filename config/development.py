import os

from .config import SHEETS_CONFIG, Config, load_groups

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

GROUPS = load_groups(Config.GROUPS_JSON, Config.GOOGLE_SHEETS_SPREADSHEET_ID)

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
PORT = int(os.getenv("PORT", "3000"))

# dev: serve client/index.html with a cache-busting entry script
SERVE_MODE = os.getenv("SERVE_MODE", "dev")
CLIENT_DIR = Config.CLIENT_DIR
STATIC_DIST_PATH = Config.STATIC_DIST_PATH or "dist/public"
