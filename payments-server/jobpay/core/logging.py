"""Process-wide logging setup."""

from __future__ import annotations

import logging.config

from jobpay.core.config import Settings


def configure_logging(settings: Settings) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": settings.logging.format},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "jobpay": {"level": settings.log_level, "handlers": ["console"], "propagate": False},
                "sqlalchemy.engine": {"level": "INFO" if settings.database.echo else "WARNING"},
            },
            "root": {"level": "WARNING", "handlers": ["console"]},
        }
    )
