"""Application log file under platformdirs ``user_log_dir``.

Modules log through ``logging.getLogger(__name__)``; everything below the
``pomotodo`` logger ends up in one rotating file. Nothing is written to the
terminal, which belongs to the CLI output and the Textual screen.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

ROOT_LOGGER = "pomotodo"
LOG_FILENAME = "pomotodo.log"
ROTATE_AT_BYTES = 5 * 1024 * 1024
KEEP_ROTATED = 3
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the application log lives on this platform."""
    return Path(user_log_dir(ROOT_LOGGER)) / LOG_FILENAME


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=ROTATE_AT_BYTES, backupCount=KEEP_ROTATED, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def _rotating_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h
        for h in logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]


def get_logger() -> logging.Logger:
    """Return the ``pomotodo`` logger, attaching the file handler on first use."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(ROOT_LOGGER)
        if not _rotating_handlers(logger):
            logger.addHandler(_file_handler(log_file_path()))
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _logger = logger
    return _logger


def set_log_level(level: str) -> None:
    """Apply a level name such as ``"debug"`` or ``"WARNING"``.

    Raises:
        ValueError: If logging does not know the level
    """
    get_logger().setLevel(level.upper())
