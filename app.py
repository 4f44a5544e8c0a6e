import importlib
import os

from config import get_settings_module
from src.dance_attendance.dance_attendance.main import create_app

app = create_app()

if __name__ == '__main__':
    settings = importlib.import_module(get_settings_module())
    port = int(os.getenv("PORT", getattr(settings, "PORT", 5000)))
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
