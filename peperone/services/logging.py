"""
peperone/services/logging.py

Centralized logging for the peperone CLI.
Rotating file log under the base directory, warnings and errors on stderr.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "peperone"
LOG_FILE_NAME = "peperone.log"
FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int | str = logging.INFO,
    console_level: int | str = logging.WARNING,
) -> logging.Logger:
    """
    Configure the ``peperone`` logger.
    - File: RotatingFileHandler, 1 MB, 3 backups (skipped if not writable)
    - Console: stderr, WARNING by default
    Handlers already installed are kept, so the console can be set up first
    and the file handler added once the log directory is known.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)
    file_level = logging.getLevelName(level) if isinstance(level, str) else level
    stderr_level = logging.getLevelName(console_level) if isinstance(console_level, str) else console_level

    has_file = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    has_console = any(type(h) is logging.StreamHandler for h in logger.handlers)

    if not has_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(stderr_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None and not has_file:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_dir / LOG_FILE_NAME, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
            )
            file_handler.setLevel(file_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            log_file = log_dir / LOG_FILE_NAME
        except OSError as exc:
            logger.warning("File logging disabled: %s", exc)

    logger.setLevel(min(h.level for h in logger.handlers))
    if log_file is not None:
        logger.debug("File logging to %s", log_file)
    return logger


def reset_logging() -> None:
    """Detach and close every handler installed by :func:`setup_logging`."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
