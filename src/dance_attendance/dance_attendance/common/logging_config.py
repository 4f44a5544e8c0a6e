from __future__ import annotations

import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging once for the app process."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "detailed": {
                    "format": "{asctime} {levelname} [{name}:{lineno}] {message}",
                    "style": "{",
                },
                "simple": {
                    "format": "{asctime} [{name}] {message}",
                    "style": "{",
                },
            },
            "handlers": {
                "console": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "detailed",
                },
                "requests": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "simple",
                },
            },
            "loggers": {
                "dance_attendance.api": {
                    "handlers": ["requests"],
                    "level": level,
                    "propagate": False,
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        }
    )
