"""Tests for structured logging configuration."""

import structlog
from structlog.testing import capture_logs

from bikram_sambat.utils.logging import get_logger, render_processor, setup_logging


class TestLogging:
    """Test structlog setup."""

    def teardown_method(self):
        """Restore structlog defaults."""
        structlog.reset_defaults()

    def test_console_renderer_by_default(self):
        """Test the console renderer is the default."""
        assert isinstance(render_processor(), structlog.dev.ConsoleRenderer)

    def test_json_renderer(self, monkeypatch):
        """Test the JSON renderer is chosen from settings."""
        monkeypatch.setenv("BIKRAM_SAMBAT_LOG_FORMAT", "json")

        assert isinstance(render_processor(), structlog.processors.JSONRenderer)

    def test_setup_logging_configures_structlog(self, monkeypatch):
        """Test setup wires stdlib loggers to the configured renderer."""
        monkeypatch.setenv("BIKRAM_SAMBAT_LOG_FORMAT", "json")
        setup_logging()

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)

        get_logger("tests").info("calendar_event", year=2081)

    def test_get_logger(self):
        """Test get_logger returns a usable logger."""
        logger = get_logger(__name__)

        assert hasattr(logger, "debug")
        assert hasattr(logger, "info")

    def test_events_carry_component(self):
        """Test engine log events are tagged with the component name."""
        with capture_logs() as events:
            get_logger(__name__).debug("year_start_index_built", years=130)

        assert events == [
            {
                "component": "bikram_sambat",
                "event": "year_start_index_built",
                "log_level": "debug",
                "years": 130,
            }
        ]
