"""Tests for logger setup."""

from loguru import logger

from sellaporter.core.logger import setup_logger
from sellaporter.core.settings import settings


def test_file_sink_honours_level(tmp_path):
    """Test warnings reach the file sink and records below the level do not."""
    path = setup_logger(level="warning", log_file=str(tmp_path / "logs" / "sellaporter.log"))
    try:
        logger.info("page rendered")
        logger.warning("Invalid launch end configuration")
    finally:
        logger.remove()

    assert path == tmp_path / "logs" / "sellaporter.log"
    text = path.read_text(encoding="utf-8")
    assert "WARNING" in text
    assert "Invalid launch end configuration" in text
    assert "page rendered" not in text


def test_console_only_when_no_log_file(monkeypatch):
    monkeypatch.setattr(settings, "log_file", "")
    try:
        assert setup_logger() is None
    finally:
        logger.remove()
