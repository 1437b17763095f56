"""Tests for logging setup."""
import logging

import pytest

from dunemesh.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("dunemesh")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:

    def test_level_and_handler(self, package_logger):
        logger = setup_logging(logging.DEBUG)
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeat_call_does_not_duplicate(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_replaced_handlers_are_closed(self, package_logger, tmp_path):
        setup_logging(logging.INFO, log_file=str(tmp_path / "first.log"))
        old_handlers = list(package_logger.handlers)
        setup_logging(logging.INFO, log_file=str(tmp_path / "second.log"))

        file_handlers = [h for h in old_handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].stream is None
        assert not any(h in package_logger.handlers for h in old_handlers)

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "dunemesh.log"
        setup_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("dunemesh.pipeline").info("hello terrain")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello terrain" in log_file.read_text()
