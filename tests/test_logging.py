"""Tests for loguru sink configuration."""

import sys

import pytest
from loguru import logger

from tracker.config.constants import TrackerConfig
from tracker.config.logging import setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_receives_messages_at_level(tmp_path, restore_logger):
    log_file = tmp_path / "logs" / "tracker.log"
    setup_logger(TrackerConfig(log_level="INFO", log_file=str(log_file)))

    logger.debug("hidden detail")
    logger.info("stored workout w1")

    content = log_file.read_text()
    assert "stored workout w1" in content
    assert "hidden detail" not in content


def test_console_only_without_log_file(tmp_path, restore_logger):
    setup_logger(TrackerConfig(log_level="DEBUG"))
    logger.info("console only")
    assert list(tmp_path.iterdir()) == []
