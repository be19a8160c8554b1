"""Tests for the color format registry."""

import pytest

from tweakui.color_formats import (
    FORMATS,
    ArrayColorFormat,
    ColorFormatRegistry,
    CssStringFormat,
    FormatKind,
    HexStringFormat,
    NumberColorFormat,
    ObjectColorFormat,
    default_registry,
    format_color,
    get_color_format,
    parse_color,
    register_format,
)
from tweakui.models import RGBA


class TestColorFormatRegistry:
    """Test descriptor resolution and caching."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "descriptor, codec_type",
        [
            ("#rgb", HexStringFormat),
            ("rgba()", CssStringFormat),
            ("0xrgb", NumberColorFormat),
            ("[]rgba", ArrayColorFormat),
            ("{}rgb", ObjectColorFormat),
        ],
    )
    def test_kind_resolution(self, registry, descriptor, codec_type):
        """Test that each descriptor kind builds the matching codec."""
        assert isinstance(registry.get(descriptor), codec_type)

    @pytest.mark.unit
    def test_same_string_same_instance(self, registry):
        """Test that a descriptor is resolved once and cached."""
        assert registry.get("[n]rgba") is registry.get("[n]rgba")

    @pytest.mark.unit
    def test_cache_keyed_by_exact_string(self, registry):
        """Test that equivalent descriptors are not merged."""
        hashed = registry.get("#rgb")
        plain = registry.get("rgb")
        assert hashed is not plain
        assert hashed.components == plain.components
        assert len(registry) == 2

    @pytest.mark.unit
    def test_none_means_rgb(self, registry):
        """Test that no descriptor means 'rgb'."""
        assert registry.get(None) is registry.get("rgb")

    @pytest.mark.unit
    def test_normalized_flag_reaches_codec(self, registry):
        """Test that the 'n' marker sets the codec's normalized flag."""
        assert registry.get("[n]rgb").normalized is True
        assert registry.get("{}rgb").normalized is False

    @pytest.mark.unit
    def test_clear(self, registry):
        """Test that clear() empties the cache."""
        first = registry.get("#rgb")
        registry.clear()
        assert len(registry) == 0
        assert "#rgb" not in registry
        assert registry.get("#rgb") is not first

    @pytest.mark.unit
    def test_contains(self, registry):
        """Test membership checks against cached descriptors."""
        assert "0xrgb" not in registry
        registry.get("0xrgb")
        assert "0xrgb" in registry

    @pytest.mark.unit
    def test_registries_are_independent(self, registry):
        """Test that two registries do not share codecs."""
        other = ColorFormatRegistry()
        assert registry.get("#rgb") is not other.get("#rgb")

    @pytest.mark.unit
    def test_register_format_replaces_factory(self, registry, monkeypatch):
        """Test that register_format swaps the codec built for a kind."""
        class UpperHex(HexStringFormat):
            def format(self, rgba):
                return super().format(rgba).upper()

        monkeypatch.setitem(FORMATS, FormatKind.HEX_STRING, FORMATS[FormatKind.HEX_STRING])
        register_format(FormatKind.HEX_STRING, lambda d: UpperHex(d.components))

        assert registry.get("#rgb").format(RGBA(r=1.0, g=0.5, b=0.0)) == "#FF8000"


class TestModuleHelpers:
    """Test helpers bound to the shared registry."""

    @pytest.mark.unit
    def test_get_color_format_uses_default_registry(self):
        """Test that the module helper caches in the shared registry."""
        assert get_color_format("[]rgb") is default_registry().get("[]rgb")

    @pytest.mark.unit
    def test_explicit_registry(self, registry):
        """Test that an explicit registry is used instead of the shared one."""
        codec = get_color_format("{}rgb", registry)
        assert "{}rgb" in registry
        assert codec is not default_registry().get("{}rgb")

    @pytest.mark.unit
    def test_parse_and_format(self):
        """Test parsing in one format and writing in others."""
        rgba = parse_color("rgb(255, 128, 0)", "rgb()")
        assert format_color(rgba, "#rgb") == "#ff8000"
        assert format_color(rgba, "0xrgb") == 0x0080FF

    @pytest.mark.unit
    def test_parse_color_is_lenient(self):
        """Test that parse_color falls back to black."""
        assert parse_color({"not": "a color"}, "#rgb") == RGBA.black()
