"""Tests for settings and logging setup."""

from loguru import logger

import settings
from settings.logging import setup_logging


class TestSettings:
    def test_defaults_are_positive(self):
        assert settings.CACHE_TTL_SECONDS > 0
        assert settings.MAX_CACHE_SIZE > 0
        assert settings.CACHE_MONITOR_INTERVAL > 0


class TestLogging:
    def test_file_sink(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(level="DEBUG", log_dir=log_dir)
        try:
            logger.info("hello from tests")
        finally:
            logger.remove()

        files = list(log_dir.glob("hr_reporting_*.log"))
        assert len(files) == 1
        assert "hello from tests" in files[0].read_text()

    def test_console_only(self, tmp_path):
        setup_logging(to_file=False, log_dir=tmp_path / "unused")
        logger.remove()
        assert not (tmp_path / "unused").exists()
