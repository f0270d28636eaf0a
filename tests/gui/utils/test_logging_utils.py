"""Unit tests for logging setup."""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from online_quiz.gui.utils.logging_utils import (
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    LOGGER_NAME,
    MAX_LOG_BYTES,
    configure_logging,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestConfigureLogging:

    def test_stream_only_without_log_dir(self):
        logger = configure_logging("DEBUG")
        ours = [h for h in logger.handlers if getattr(h, "_online_quiz", False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG

    def test_rotating_file_handler(self, tmp_path):
        logger = configure_logging(logging.INFO, tmp_path / "logs")

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == MAX_LOG_BYTES
        assert file_handlers[0].backupCount == LOG_BACKUP_COUNT

        logging.getLogger("online_quiz.core.session").info("Quiz complete: 1/2")
        file_handlers[0].flush()
        assert "Quiz complete: 1/2" in (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, tmp_path):
        configure_logging("INFO", tmp_path)
        logger = configure_logging("WARNING", tmp_path)
        ours = [h for h in logger.handlers if getattr(h, "_online_quiz", False)]
        assert len(ours) == 2
        assert logger.level == logging.WARNING

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="LOUD"):
            configure_logging("LOUD")
