"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from utils.logger import LoggerMixin, get_logger, set_log_level, setup_logging


class TestLogger:
    """Tests for the Rich-backed loggers."""

    def test_setup_logging(self):
        logger = setup_logging("TestSetup", level=logging.WARNING)
        assert logger.name == "TestSetup"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_get_logger_reuses_configured_logger(self):
        first = get_logger("TestReuse")
        second = get_logger("TestReuse")
        assert first is second
        assert len(second.handlers) == 1

    def test_set_log_level(self):
        logger = setup_logging("TestLevel")
        try:
            set_log_level(logging.DEBUG)
            assert logger.level == logging.DEBUG
            assert logger.handlers[0].level == logging.DEBUG
            assert setup_logging("TestLevelLater").level == logging.DEBUG
        finally:
            set_log_level(logging.INFO)

    def test_logger_mixin(self, caplog):
        class Component(LoggerMixin):
            def __init__(self):
                super().__init__("TestComponent")

        component = Component()
        assert component.logger.name == "TestComponent"
        component.logger.propagate = True
        with caplog.at_level(logging.INFO, logger="TestComponent"):
            component.success("ready")
        assert "[SUCCESS] ready" in caplog.text
