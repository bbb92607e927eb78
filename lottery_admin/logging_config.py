"""Logging configuration."""

from __future__ import annotations

import logging

from flask import Flask

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Collaborators whose INFO output is per-statement or per-request noise.
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def configure_logging(app: Flask) -> None:
    """One-line logs at ``LOG_LEVEL`` for the package loggers."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    # app.logger is "lottery_admin", the parent of every module logger
    app.logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if app.config.get("TESTING"):
        # the test client's request lines
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
