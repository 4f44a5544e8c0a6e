import os
from typing import Optional

DEFAULT_SETTINGS_MODULE = "config.development"

SETTINGS_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": DEFAULT_SETTINGS_MODULE,
    "development": DEFAULT_SETTINGS_MODULE,
}


def get_settings_module(app_env: Optional[str] = None) -> str:
    """Settings module for APP_ENV (or app_env); unknown names run as development."""
    if app_env is None:
        app_env = os.getenv("APP_ENV", "")
    return SETTINGS_MODULES.get(app_env.strip().lower(), DEFAULT_SETTINGS_MODULE)
