"""
Unit tests for UnitGraphLogger and logger resolution.
"""

import logging

import pytest

from unitgraph.core.container import get_container
from unitgraph.core.di import get_logger
from unitgraph.core.interfaces.logger import ILogger
from unitgraph.core.models import LoggingConfig
from unitgraph.services.logging import NullLogger, UnitGraphLogger


class TestUnitGraphLogger:
    """Tests for handler setup."""

    def test_file_handler_writes_messages(self, tmp_path):
        log_file = tmp_path / "logs" / "unitgraph.log"
        logger = UnitGraphLogger(
            name="unitgraph.test.file", level="debug", file_enabled=True, log_file=log_file
        )

        logger.debug("Registered unit %s", "main")
        for handler in logger.handlers:
            handler.flush()

        assert "Registered unit main" in log_file.read_text()

    def test_no_handlers_when_disabled(self):
        logger = UnitGraphLogger(name="unitgraph.test.none", file_enabled=False)

        assert logger.handlers == []

    def test_set_level_applies_to_handlers(self, tmp_path):
        logger = UnitGraphLogger(
            name="unitgraph.test.level",
            level="warning",
            console_enabled=True,
            file_enabled=True,
            log_file=tmp_path / "unitgraph.log",
        )

        logger.set_level("DEBUG")

        assert [h.level for h in logger.handlers] == [logging.DEBUG, logging.DEBUG]

    def test_from_config_console_override(self):
        config = LoggingConfig(level="info", console=False, file=False)

        logger = UnitGraphLogger.from_config(config, console=True)

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.INFO


class TestLoggerResolution:
    """Tests for resolving the logger through the container."""

    def test_null_logger_before_bootstrap(self):
        assert isinstance(get_logger(), NullLogger)

    def test_registered_logger_is_used(self):
        registered = NullLogger()
        get_container().register_singleton(ILogger, implementation=registered)

        assert get_logger() is registered

    def test_logger_factory_runs_once(self):
        created = []

        def factory():
            created.append(NullLogger())
            return created[-1]

        get_container().register_singleton(ILogger, factory=factory)

        assert created == []
        assert get_logger() is get_logger()
        assert len(created) == 1

    def test_registration_needs_instance_or_factory(self):
        with pytest.raises(ValueError):
            get_container().register_singleton(ILogger)
