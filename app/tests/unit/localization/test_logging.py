"""Tests for localization.logging module."""

import logging

import pytest
import structlog

from localization.config import LocalizationSettings
from localization.factory import create_localization
from localization.logging import (
    LOGGER_NAME,
    configure_logging,
    get_logger,
    get_module_logger,
)


@pytest.fixture
def reset_logging():
    """Restore structlog defaults and the localization logger level."""
    yield
    structlog.reset_defaults()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for module-bound loggers."""

    def test_binds_calling_module_context(self):
        """The logger carries the caller's component and module path."""
        logger = get_module_logger()

        context = logger.bind()._context

        assert context["component"] == __name__.split(".")[-1]
        assert context["module_path"] == __name__

    def test_package_modules_bind_their_own_context(self):
        from localization import builder

        context = builder.logger.bind()._context

        assert context["component"] == "builder"
        assert context["module_path"] == "localization.builder"

    def test_get_logger_extra_context(self):
        assert get_logger(component="custom").bind()._context == {"component": "custom"}


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_console_renderer_outside_production(self, reset_logging):
        settings = LocalizationSettings(_env_file=None, PREFIX="dev", LOG_LEVEL="DEBUG")

        configure_logging(settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_json_renderer_in_production(self, reset_logging):
        settings = LocalizationSettings(_env_file=None, PREFIX="", LOG_LEVEL="WARNING")

        configure_logging(settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_log_level_override(self, reset_logging):
        settings = LocalizationSettings(_env_file=None, LOG_LEVEL="WARNING")

        configure_logging(settings, log_level="error")

        assert logging.getLogger(LOGGER_NAME).level == logging.ERROR

    def test_uses_stdlib_localization_logger(self, reset_logging):
        logger = configure_logging(LocalizationSettings(_env_file=None))

        assert logger.bind()._logger.name == LOGGER_NAME

    def test_factory_can_configure_logging(self, reset_logging, good_location):
        settings = LocalizationSettings(
            _env_file=None, PREFIX="", localizations_location=good_location
        )

        create_localization(settings, setup_logging=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
