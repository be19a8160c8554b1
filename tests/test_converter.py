"""Tests for HSV <-> RGB conversion."""

import pytest

from tweakui.color_formats import hsv_to_rgb, hsva_to_rgba, rgb_to_hsv, rgba_to_hsva
from tweakui.models import HSV, HSVA, RGB, RGBA
from tweakui.utils import to_byte


def _faces():
    """Every 8-bit color on the six faces of the RGB cube."""
    for fixed_channel in range(3):
        for fixed_value in (0, 255):
            for a in range(256):
                for b in range(256):
                    channels = [a, b]
                    channels.insert(fixed_channel, fixed_value)
                    yield tuple(channels)


class TestRoundTrip:
    """Test that RGB survives a trip through HSV."""

    @pytest.mark.unit
    def test_cube_faces_round_trip(self):
        """Test all 6 x 65536 boundary colors come back as the same bytes."""
        failures = []
        for r, g, b in _faces():
            rgb = hsv_to_rgb(rgb_to_hsv(RGB(r=r / 255, g=g / 255, b=b / 255)))
            back = (to_byte(rgb.r), to_byte(rgb.g), to_byte(rgb.b))
            if back != (r, g, b):
                failures.append(((r, g, b), back))

        assert failures == []

    @pytest.mark.unit
    def test_interior_samples_round_trip(self):
        """Test a grid of interior colors comes back as the same bytes."""
        for r in range(0, 256, 17):
            for g in range(0, 256, 15):
                for b in range(0, 256, 51):
                    rgb = hsv_to_rgb(rgb_to_hsv(RGB(r=r / 255, g=g / 255, b=b / 255)))
                    assert rgb.to_bytes() == (r, g, b)


class TestRgbToHsv:
    """Test RGB -> HSV conversion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "rgb, expected",
        [
            ((1.0, 0.0, 0.0), (0.0, 1.0, 1.0)),
            ((1.0, 1.0, 0.0), (60.0, 1.0, 1.0)),
            ((0.0, 1.0, 0.0), (120.0, 1.0, 1.0)),
            ((0.0, 1.0, 1.0), (180.0, 1.0, 1.0)),
            ((0.0, 0.0, 1.0), (240.0, 1.0, 1.0)),
            ((1.0, 0.0, 1.0), (300.0, 1.0, 1.0)),
        ],
    )
    def test_primaries_and_secondaries(self, rgb, expected):
        """Test the hue of the six fully saturated colors."""
        r, g, b = rgb
        hsv = rgb_to_hsv(RGB(r=r, g=g, b=b))
        assert (hsv.h, hsv.s, hsv.v) == pytest.approx(expected)

    @pytest.mark.unit
    @pytest.mark.parametrize("level", [0.0, 0.25, 0.5, 1.0])
    def test_grays_have_no_hue(self, level):
        """Test that grays get zero hue and saturation."""
        hsv = rgb_to_hsv(RGB(r=level, g=level, b=level))
        assert hsv.h == 0
        assert hsv.s == 0
        assert hsv.v == level

    @pytest.mark.unit
    def test_hue_stays_below_360(self):
        """Test that a red with a hint of blue wraps to just under 360."""
        hsv = rgb_to_hsv(RGB(r=1.0, g=0.0, b=1 / 255))
        assert 300 < hsv.h < 360


class TestHsvToRgb:
    """Test HSV -> RGB conversion."""

    @pytest.mark.unit
    def test_orange(self):
        """Test converting a 30 degree hue."""
        rgb = hsv_to_rgb(HSV(h=30, s=1.0, v=1.0))
        assert rgb.to_bytes() == (255, 128, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("hue", [-90.0, 270.0, 630.0])
    def test_hue_wraps(self, hue):
        """Test that any real hue is taken modulo 360."""
        rgb = hsv_to_rgb(HSV(h=hue, s=1.0, v=1.0))
        assert rgb.to_bytes() == (128, 0, 255)

    @pytest.mark.unit
    def test_saturation_and_value_clamped(self):
        """Test that saturation and value are clamped to [0, 1]."""
        assert hsv_to_rgb(HSV(h=0, s=2.0, v=1.5)).to_bytes() == (255, 0, 0)
        assert hsv_to_rgb(HSV(h=0, s=-1.0, v=0.5)).to_bytes() == (128, 128, 128)

    @pytest.mark.unit
    def test_zero_value_is_black(self):
        """Test that zero value gives black whatever the hue."""
        assert hsv_to_rgb(HSV(h=123, s=0.7, v=0.0)).to_bytes() == (0, 0, 0)


class TestAlphaPassThrough:
    """Test the alpha-carrying variants."""

    @pytest.mark.unit
    def test_rgba_to_hsva_keeps_alpha(self):
        """Test that alpha is copied from RGBA to HSVA."""
        hsva = rgba_to_hsva(RGBA(r=1.0, g=0.0, b=0.0, a=0.25))
        assert hsva.a == 0.25
        assert hsva.h == 0.0

    @pytest.mark.unit
    def test_hsva_to_rgba_keeps_alpha(self):
        """Test that alpha is copied from HSVA to RGBA."""
        rgba = hsva_to_rgba(HSVA(h=240, s=1.0, v=1.0, a=0.75))
        assert rgba.a == 0.75
        assert rgba.to_bytes() == (0, 0, 255)
