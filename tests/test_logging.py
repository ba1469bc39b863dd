"""Tests for log sink setup."""

import pytest
from loguru import logger

from privateroom.config.schema import LoggingConfig
from privateroom.utils.logging import configure_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()


class TestConfigureLogging:
    """Test sinks built from LoggingConfig."""

    def test_file_sink_gets_debug(self, tmp_path, restore_logger):
        config = LoggingConfig(level="warning", file=str(tmp_path / "logs" / "bot.log"))

        configure_logging(config)
        logger.debug("room 0 swept")
        logger.remove()

        text = config.file_path.read_text()
        assert "room 0 swept" in text
        assert "DEBUG" in text

    def test_console_uses_configured_level(self, tmp_path, capsys, restore_logger):
        configure_logging(LoggingConfig(level="warning", file=str(tmp_path / "bot.log")))
        logger.info("quiet")
        logger.warning("loud")

        err = capsys.readouterr().err
        assert "loud" in err
        assert "quiet" not in err
