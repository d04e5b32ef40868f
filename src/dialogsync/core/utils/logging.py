"""Configuration du logging du package (handler unique sur le logger `dialogsync`)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "dialogsync"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_handlers: list[logging.Handler] = []


def setup_logging(level: int = logging.INFO, *, log_file: Path | None = None) -> logging.Logger:
    """
    Attache un handler stderr (et optionnellement un fichier) au logger `dialogsync`.
    Idempotent : un second appel remplace les handlers posés par le premier.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in _handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _handlers.append(stream_handler)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _handlers.append(file_handler)

    for handler in _handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
