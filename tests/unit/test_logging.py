"""Unit tests for structured logging configuration."""

import warnings

import pytest
import structlog

from agent_hub.config.settings import Settings
from agent_hub.infrastructure.observability.logging import configure_logging, get_logger


@pytest.mark.unit
class TestConfigureLogging:
    @pytest.mark.parametrize("log_format", ["console", "json"])
    def test_configures_without_warnings(self, log_format):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            configure_logging(Settings(log_format=log_format, log_level=40))
            get_logger(__name__).error("configured", log_format=log_format)

    def test_level_filtering(self, capsys):
        configure_logging(Settings(log_format="json", log_level=40))

        logger = get_logger(__name__)
        logger.info("hidden")
        logger.error("shown", agent_id="agent_1")

        output = capsys.readouterr().out
        assert "hidden" not in output
        assert '"agent_id": "agent_1"' in output

    def test_request_id_added_when_bound(self, capsys):
        from agent_hub.api.middleware.request_id import request_id_var

        configure_logging(Settings(log_format="json", log_level=20))
        token = request_id_var.set("2b4e8c1a-5f3d-4a7b-9c6e-1d2f3a4b5c6d")
        try:
            structlog.get_logger("tests").info("with id")
        finally:
            request_id_var.reset(token)

        assert '"request_id": "2b4e8c1a-5f3d-4a7b-9c6e-1d2f3a4b5c6d"' in capsys.readouterr().out
