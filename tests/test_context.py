"""Tests for PanelContext."""

import logging

import pytest

from tweakui.binding import ValueSource
from tweakui.color_formats import ArrayColorFormat, default_registry
from tweakui.context import PanelContext
from tweakui.exceptions import ColorParseError
from tweakui.models import RGBA, PanelConfig


@pytest.mark.integration
class TestPanelContext:
    """Test the per-panel format cache and settings."""

    def test_defaults(self):
        """Test that a bare context gets default settings and its own registry."""
        context = PanelContext()
        assert context.config.default_color_format == "rgb"
        assert context.registry is not default_registry()

    def test_default_format_from_config(self, registry):
        """Test that the configured default format is used without a descriptor."""
        context = PanelContext(PanelConfig(default_color_format="[n]rgba"), registry)
        assert isinstance(context.color_format(), ArrayColorFormat)
        assert context.parse_color([1.0, 0.5, 0.0, 1.0]) == RGBA(r=1.0, g=0.5, b=0.0, a=1.0)

    def test_explicit_descriptor_wins(self, context):
        """Test that an explicit descriptor overrides the default."""
        rgba = context.parse_color("rgb(255, 128, 0)", "rgb()")
        assert context.format_color(rgba, "#rgb") == "#ff8000"

    def test_lenient_parse_logs_warning(self, context, caplog):
        """Test that lenient parsing logs a warning on bad input."""
        with caplog.at_level(logging.WARNING):
            assert context.parse_color(42) == RGBA.black()
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_quiet_fallback(self, registry, caplog):
        """Test that parse failures can fall back without logging."""
        context = PanelContext(PanelConfig(log_parse_failures=False), registry)
        with caplog.at_level(logging.WARNING):
            assert context.parse_color(42) == RGBA.black()
        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []

    def test_strict_parsing_raises(self, registry):
        """Test that strict parsing raises ColorParseError."""
        context = PanelContext(PanelConfig(lenient_parsing=False), registry)
        with pytest.raises(ColorParseError):
            context.parse_color("#zz")

    def test_strict_parsing_accepts_valid_input(self, registry):
        """Test that strict parsing still reads valid input."""
        context = PanelContext(PanelConfig(lenient_parsing=False), registry)
        assert context.parse_color("#ff0000").to_bytes() == (255, 0, 0)

    def test_read_and_write(self, context, speed_source, settings):
        """Test reading and writing a source through the context."""
        assert context.read(speed_source) == 0.5
        assert context.write(speed_source, 0.8) == 0.8
        assert settings["speed"] == 0.8

    def test_write_color_through_context(self, context):
        """Test storing a formatted color on a source."""
        source = ValueSource(value="#000000")
        context.write(source, context.format_color(RGBA(r=1.0), "#rgb"))
        assert source.value == "#ff0000"

    def test_reset(self, context):
        """Test that reset() drops cached codecs."""
        codec = context.color_format("#rgb")
        context.reset()
        assert len(context.registry) == 0
        assert context.color_format("#rgb") is not codec
