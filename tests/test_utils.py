"""Unit tests for utility functions."""

import pytest

from tweakui.utils import clamp, to_byte


class TestClamp:
    """Test clamp helper function."""

    @pytest.mark.unit
    def test_inside_range(self):
        """Test that values inside the range are returned unchanged."""
        assert clamp(0.5, 0.0, 1.0) == 0.5

    @pytest.mark.unit
    def test_outside_range(self):
        """Test that values are pulled back to the nearest bound."""
        assert clamp(-1, 0, 255) == 0
        assert clamp(300, 0, 255) == 255

    @pytest.mark.unit
    def test_open_bounds(self):
        """Test that None leaves a side unbounded."""
        assert clamp(-3, None, 10) == -3
        assert clamp(42, 0, None) == 42
        assert clamp(42, None, None) == 42


class TestToByte:
    """Test to_byte helper function."""

    @pytest.mark.unit
    def test_extremes(self):
        """Test that 0 and 1 map to the ends of the byte range."""
        assert to_byte(0.0) == 0
        assert to_byte(1.0) == 255

    @pytest.mark.unit
    def test_halves_round_up(self):
        """Test that 127.5 rounds up to 128."""
        assert to_byte(0.5) == 128

    @pytest.mark.unit
    def test_every_byte_survives(self):
        """Test that byte / 255 maps back to the same byte."""
        assert all(to_byte(byte / 255) == byte for byte in range(256))

    @pytest.mark.unit
    def test_out_of_range_not_clamped(self):
        """Test that channels outside [0, 1] scale without clamping."""
        assert to_byte(1.2) == 306
        assert to_byte(-1.0) == -255

    @pytest.mark.unit
    @pytest.mark.parametrize("channel", [float("nan"), float("inf"), float("-inf"), 1e308])
    def test_non_finite_is_zero(self, channel):
        """Test that NaN, infinities and values overflowing once scaled map to 0."""
        assert to_byte(channel) == 0
