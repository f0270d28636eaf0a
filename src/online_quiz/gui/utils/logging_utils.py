"""
Logging setup for the desktop app.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached once here, at startup, to the ``online_quiz`` logger.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "online_quiz"
LOG_FILE_NAME = "online_quiz.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Rotation: 5 files of 512 KB each
MAX_LOG_BYTES = 512 * 1024
LOG_BACKUP_COUNT = 5


def configure_logging(level: int | str = logging.INFO, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Attach a stderr handler and, if ``log_dir`` is given, a rotating file handler.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Logging level name or number.
        log_dir: Directory for ``online_quiz.log``. None = stderr only.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_online_quiz", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    stream._online_quiz = True  # type: ignore[attr-defined]
    logger.addHandler(stream)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler._online_quiz = True  # type: ignore[attr-defined]
        logger.addHandler(file_handler)

    return logger
