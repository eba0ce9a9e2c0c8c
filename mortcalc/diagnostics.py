# mortcalc/diagnostics.py
"""Logging setup for the CLI. Library modules only call logging.getLogger(__name__)."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "mortcalc"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_DATEFMT = "(%Y-%m-%d %H:%M:%S)"


def debug_enabled() -> bool:
    return os.getenv("MORTCALC_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger (once).

    Level is DEBUG when `verbose` or MORTCALC_DEBUG is set, WARNING otherwise.
    MORTCALC_LOG_FILE adds a rotating file handler; failure to open it is reported
    on stderr and otherwise ignored.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if (verbose or debug_enabled()) else logging.WARNING)

    # Avoid duplicate handlers if main() runs more than once (tests, REPL)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    log_path = os.getenv("MORTCALC_LOG_FILE", "").strip()
    if log_path:
        try:
            parent = os.path.dirname(log_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_path, e)
        else:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger
