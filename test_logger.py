"""Tests for logger setup."""

import logging

from logger import setup_logger


def test_setup_logger_does_not_duplicate_handlers():
    name = "mini_event_calendar.test"
    logger = setup_logger(name, level=logging.DEBUG)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert setup_logger(name) is logger
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_log_file_lands_in_log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr("logger.LOG_DIR", tmp_path / "logs")
    name = "mini_event_calendar.file_test"
    logger = setup_logger(name, log_file=True)
    try:
        logger.debug("hello")
        files = list((tmp_path / "logs").glob("calendar_*.log"))
        assert len(files) == 1
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in files[0].read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
