"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from tweakui.exceptions import ConfigValidationError
from tweakui.models import HSVA, RGB, RGBA, PanelConfig, validate_format_text


class TestColorModels:
    """Test RGB, RGBA and HSVA."""

    @pytest.mark.unit
    def test_channel_access(self):
        """Test reading channels by letter."""
        color = RGBA(r=1.0, g=0.5, b=0.0, a=0.25)
        assert color["r"] == 1.0
        assert color["a"] == 0.25
        with pytest.raises(KeyError):
            color["x"]

    @pytest.mark.unit
    def test_rgb_has_no_alpha_key(self):
        """Test that RGB has no 'a' channel."""
        with pytest.raises(KeyError):
            RGB()["a"]

    @pytest.mark.unit
    def test_defaults(self):
        """Test that colors default to opaque black."""
        assert RGBA() == RGBA.black()
        assert RGBA().a == 1.0
        assert HSVA().a == 1.0

    @pytest.mark.unit
    def test_to_bytes(self):
        """Test converting channels to bytes."""
        assert RGB(r=1.0, g=0.5, b=0.0).to_bytes() == (255, 128, 0)

    @pytest.mark.unit
    def test_from_bytes(self):
        """Test building a color from bytes."""
        assert RGBA.from_bytes(255, 0, 51, a=0.5) == RGBA(r=1.0, g=0.0, b=0.2, a=0.5)

    @pytest.mark.unit
    def test_with_channel(self):
        """Test copying a color with one channel replaced."""
        color = RGBA.black().with_channel("g", 1)
        assert color == RGBA(r=0.0, g=1.0, b=0.0, a=1.0)
        with pytest.raises(KeyError):
            color.with_channel("h", 0.5)

    @pytest.mark.unit
    def test_frozen(self):
        """Test that colors are immutable."""
        with pytest.raises(ValidationError):
            RGBA().r = 1.0

    @pytest.mark.unit
    def test_out_of_range_allowed(self):
        """Test that channels are not validated, so math overshoot survives."""
        assert RGBA(r=1.0000001, g=-0.0000001).r == 1.0000001

    @pytest.mark.unit
    def test_strip_alpha(self):
        """Test dropping alpha from RGBA and HSVA."""
        assert RGBA(r=1.0, a=0.5).rgb() == RGB(r=1.0)
        assert HSVA(h=10, s=0.5, v=0.5, a=0.1).hsv().h == 10


class TestFormatText:
    """Test validate_format_text."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["rgb", "#rgba", "rgba()", "0xrgb", "[n]rgba", "{}rgb"])
    def test_accepted(self, text):
        """Test that valid descriptors pass unchanged."""
        assert validate_format_text(text) == text

    @pytest.mark.unit
    def test_blank_means_rgb(self):
        """Test that a blank descriptor means 'rgb'."""
        assert validate_format_text("   ") == "rgb"

    @pytest.mark.unit
    def test_stripped(self):
        """Test that surrounding whitespace is removed."""
        assert validate_format_text(" #rgb ") == "#rgb"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["hsl", "rgb(255, 0, 0)", "cmyk"])
    def test_rejected(self, text):
        """Test that text without a valid descriptor shape is rejected."""
        with pytest.raises(ValueError):
            validate_format_text(text)


class TestPanelConfig:
    """Test PanelConfig."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test the default panel settings."""
        config = PanelConfig()
        assert config.default_color_format == "rgb"
        assert config.lenient_parsing is True
        assert config.log_parse_failures is True

    @pytest.mark.unit
    def test_from_mapping(self):
        """Test building a config from a plain mapping."""
        config = PanelConfig.from_mapping({"default_color_format": "[n]rgba", "lenient_parsing": False})
        assert config.default_color_format == "[n]rgba"
        assert config.lenient_parsing is False

    @pytest.mark.unit
    def test_from_mapping_invalid_format(self):
        """Test that a bad format raises ConfigValidationError with hints."""
        with pytest.raises(ConfigValidationError) as exc_info:
            PanelConfig.from_mapping({"default_color_format": "hsl"}, source="panel.json")
        error = exc_info.value
        assert error.field == "default_color_format"
        assert "panel.json" in error.recovery_hint
        assert "Color formats combine" in error.recovery_hint

    @pytest.mark.unit
    def test_from_mapping_multiple_errors(self):
        """Test that several bad fields are reported together."""
        with pytest.raises(ConfigValidationError) as exc_info:
            PanelConfig.from_mapping({"default_color_format": "hsl", "lenient_parsing": "maybe"})
        assert exc_info.value.field == "multiple fields"
        assert "2 validation errors" in exc_info.value.error_msg
