"""Opt-in diagnostic logging for story mocks, configured from the environment."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "storymock"
_CONFIGURED = False


def _int_env(name: str, default: int, *, minimum: int, maximum: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(maximum, value))


def _level_env(name: str, default: int) -> int:
    level_name = os.environ.get(name, "").strip().upper()
    if not level_name:
        return default
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else default


def configure_diagnostic_logging(*, force: bool = False) -> logging.Logger:
    """Attach console and optional rotating file handlers to the ``storymock`` logger.

    Runs once per process unless ``force`` is set. Records still propagate to
    the root logger so test frameworks keep capturing them.
    """
    global _CONFIGURED
    package_logger = logging.getLogger(LOGGER_NAME)
    if _CONFIGURED and not force:
        return package_logger

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    raw_path = os.environ.get("STORYMOCK_LOG_PATH", "").strip()
    if raw_path:
        log_path = Path(raw_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=_int_env(
                "STORYMOCK_LOG_MAX_BYTES",
                1024 * 1024,
                minimum=64 * 1024,
                maximum=100 * 1024 * 1024,
            ),
            backupCount=_int_env("STORYMOCK_LOG_BACKUP_COUNT", 3, minimum=1, maximum=50),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(_level_env("STORYMOCK_LOG_LEVEL", logging.WARNING))
    package_logger.propagate = True
    _CONFIGURED = True
    return package_logger
