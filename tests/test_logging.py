"""
Tests for package logging.

Library calls must leave host-configured loguru sinks alone; only
configure_logging() adds a package sink.
"""

import pytest
from loguru import logger

from design_tokens import generate_palette
from design_tokens.utils import logging as package_logging
from design_tokens.utils.logging import StructuredLogger, configure_logging, get_logger


@pytest.fixture
def captured():
    """Host-style list sink at DEBUG that records (level, message) pairs."""
    records = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
    )
    try:
        yield records
    finally:
        logger.remove(handler_id)


@pytest.fixture
def package_sink(monkeypatch):
    """Reset configure_logging state and remove whatever it added."""
    monkeypatch.setattr(package_logging, "_handler_id", None)
    yield
    if package_logging._handler_id is not None:
        logger.remove(package_logging._handler_id)


class TestHostSinks:
    """Test that palette generation does not reconfigure loguru."""

    def test_host_sink_survives_generate_palette(self, captured):
        generate_palette("#3B82F6")
        logger.info("host message")
        assert ("INFO", "host message") in captured

    def test_palette_event_logged_at_debug(self, captured):
        generate_palette("#3B82F6", include_semantic=False)
        levels = [level for level, message in captured if message == "Palette generated"]
        assert levels == ["DEBUG"]

    def test_malformed_brand_warns_once(self, captured):
        generate_palette("not-a-color")
        warnings = [m for level, m in captured if level == "WARNING" and "Malformed hex color" in m]
        assert len(warnings) == 1


class TestConfigureLogging:
    """Test the opt-in package sink."""

    def test_adds_filtered_sink(self, package_sink):
        lines = []
        configure_logging(level="DEBUG", sink=lines.append)

        generate_palette("#3B82F6", include_neutral=False, include_semantic=False)
        logger.info("host message")

        assert any("Palette generated" in line for line in lines)
        assert not any("host message" in line for line in lines)

    def test_second_call_replaces_previous_sink(self, package_sink):
        first, second = [], []
        first_id = configure_logging(level="DEBUG", sink=first.append)
        second_id = configure_logging(level="DEBUG", sink=second.append)
        assert first_id != second_id

        generate_palette("#3B82F6", include_neutral=False, include_semantic=False)

        assert first == []
        assert any("Palette generated" in line for line in second)


class TestStructuredLogger:
    """Test the structured logger wrapper."""

    def test_singleton(self):
        assert get_logger() is get_logger()
        assert isinstance(get_logger(), StructuredLogger)

    def test_debug_binds_extra(self):
        extras = []
        handler_id = logger.add(lambda message: extras.append(message.record["extra"]), level="DEBUG")
        try:
            get_logger().debug("with extra", extra={"brand_hex": "#3b82f6"})
        finally:
            logger.remove(handler_id)
        assert extras == [{"brand_hex": "#3b82f6"}]
