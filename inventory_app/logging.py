"""Logging setup for the inventory web app.

Records go to a rotating log file and to the console. Settings are read from
the environment when :func:`configure_logging` runs:

``LOG_LEVEL``
    Root level name, default ``INFO``.
``LOG_FILE``
    Path of the active log file, default ``inventory_app.log``.
``LOG_RETENTION_DAYS``
    Rotated files older than this are deleted at startup; ``0`` keeps them.
"""

import logging
import os
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def _log_file() -> str:
    return os.getenv("LOG_FILE", "inventory_app.log")


def configure_logging() -> None:
    """Configure application-wide logging once per process."""

    global _configured
    if _configured:
        return

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(_log_file(), maxBytes=1_000_000, backupCount=3)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    _configured = True
    purge_old_logs()


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance."""
    return logging.getLogger(name)


def flush_logs() -> None:
    """Flush all log handlers."""
    for handler in logging.getLogger().handlers:
        handler.flush()


def purge_old_logs() -> int:
    """Delete rotated log files older than ``LOG_RETENTION_DAYS``.

    Returns the number of files removed.
    """

    retention = int(os.getenv("LOG_RETENTION_DAYS", "30"))
    if retention <= 0:
        return 0

    log_path = Path(_log_file()).resolve()
    cutoff = datetime.now() - timedelta(days=retention)
    removed = 0
    for file in log_path.parent.glob(f"{log_path.name}.*"):
        try:
            mtime = datetime.fromtimestamp(file.stat().st_mtime)
        except FileNotFoundError:
            continue
        if mtime < cutoff:
            file.unlink(missing_ok=True)
            removed += 1
    return removed


__all__ = ["configure_logging", "get_logger", "flush_logs", "purge_old_logs"]
