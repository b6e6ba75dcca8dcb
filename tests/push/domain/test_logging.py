"""Tests for structlog configuration."""

import structlog
from push.utils.logging import configure_logging
from structlog.testing import capture_logs


class TestConfigureLogging:
    def test_level_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("PUSH_LOG_LEVEL", "warning")
        try:
            configure_logging()
            logger = structlog.get_logger("push.test")
            with capture_logs() as logs:
                logger.info("Push notification created")
                logger.warning("Push notification dropped")
        finally:
            configure_logging("INFO")

        assert [entry["event"] for entry in logs] == ["Push notification dropped"]

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("PUSH_LOG_LEVEL", "ERROR")
        try:
            configure_logging("DEBUG")
            logger = structlog.get_logger("push.test")
            with capture_logs() as logs:
                logger.debug("Push delivery timed out, dropped")
        finally:
            configure_logging("INFO")

        assert len(logs) == 1
