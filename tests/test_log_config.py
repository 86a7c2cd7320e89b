"""Tests for logging setup."""

import logging
import warnings

import structlog

from colorspec.log_config import configure_logging, configure_structlog


class TestLogConfig:
    """structlog configuration."""

    def test_configure_without_warnings(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            configure_structlog()
            structlog.get_logger("colorspec.test").debug("quiet")

    def test_configure_logging_sets_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING
