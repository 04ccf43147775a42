"""Tests for color utilities"""

import re

import pytest

from orgkit.domain.colors import (
    darken,
    get_contrast_ratio,
    hex_to_rgb,
    is_valid_hex,
    is_valid_rgb,
    lighten,
    random_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from orgkit.domain.models.color import HslColor, RgbColor


class TestHexToRgb:
    """Tests for hex_to_rgb"""

    @pytest.mark.parametrize(
        "hex_color,expected",
        [
            ("#FF0000", RgbColor(255, 0, 0)),
            ("#00FF00", RgbColor(0, 255, 0)),
            ("#0000FF", RgbColor(0, 0, 255)),
            ("#FFFFFF", RgbColor(255, 255, 255)),
            ("#000000", RgbColor(0, 0, 0)),
            ("#F00", RgbColor(255, 0, 0)),
            ("#FFF", RgbColor(255, 255, 255)),
            ("FF0000", RgbColor(255, 0, 0)),
            ("F00", RgbColor(255, 0, 0)),
            ("#aabbcc", RgbColor(170, 187, 204)),
        ],
    )
    def test_valid_hex(self, hex_color, expected):
        """Test conversion of 3- and 6-digit hex, with or without '#'"""
        assert hex_to_rgb(hex_color) == expected

    @pytest.mark.parametrize("hex_color", ["invalid", "#GGGGGG", "#FF", "#FFFFFFF", "", "#FFF\n"])
    def test_invalid_hex(self, hex_color):
        """Test that invalid hex colors are rejected"""
        with pytest.raises(ValueError, match="Invalid hex color"):
            hex_to_rgb(hex_color)


class TestRgbToHex:
    """Tests for rgb_to_hex"""

    def test_separate_channels(self):
        """Test conversion from separate parameters"""
        assert rgb_to_hex(255, 0, 0) == "#ff0000"
        assert rgb_to_hex(0, 0, 255) == "#0000ff"
        assert rgb_to_hex(1, 2, 3) == "#010203"
        assert rgb_to_hex(15, 15, 15) == "#0f0f0f"

    def test_record_inputs(self):
        """Test conversion from RgbColor and mappings"""
        assert rgb_to_hex(RgbColor(0, 255, 0)) == "#00ff00"
        assert rgb_to_hex({"r": 0, "g": 0, "b": 255}) == "#0000ff"

    @pytest.mark.parametrize(
        "args",
        [(256, 0, 0), (-1, 0, 0), (0, 0, 256), (1.5, 0, 0), ({"r": 256, "g": 0, "b": 0},)],
    )
    def test_invalid_channels(self, args):
        """Test that out-of-range or fractional channels are rejected"""
        with pytest.raises(ValueError, match="Invalid RGB values"):
            rgb_to_hex(*args)


class TestDarkenLighten:
    """Tests for darken and lighten"""

    @pytest.mark.parametrize(
        "color,percent,expected",
        [
            ("#FF0000", 50, "#800000"),
            ("#FFFFFF", 20, "#cccccc"),
            ("#808080", 50, "#404040"),
            ("#FF0000", 0, "#ff0000"),
            ("#FFFFFF", 100, "#000000"),
            ("#F00", 50, "#800000"),
        ],
    )
    def test_darken(self, color, percent, expected):
        """Test darkening by percentage"""
        assert darken(color, percent) == expected

    @pytest.mark.parametrize(
        "color,percent,expected",
        [
            ("#000000", 50, "#808080"),
            ("#800000", 50, "#c08080"),
            ("#404040", 50, "#a0a0a0"),
            ("#000000", 0, "#000000"),
            ("#FF0000", 100, "#ffffff"),
            ("#800", 50, "#c48080"),
        ],
    )
    def test_lighten(self, color, percent, expected):
        """Test lightening by percentage"""
        assert lighten(color, percent) == expected

    @pytest.mark.parametrize("adjust", [darken, lighten])
    @pytest.mark.parametrize("percent", [-1, 101])
    def test_invalid_percent(self, adjust, percent):
        """Test that percent must be within 0-100"""
        with pytest.raises(ValueError, match="Percent must be between 0 and 100"):
            adjust("#FF0000", percent)

    @pytest.mark.parametrize("adjust", [darken, lighten])
    def test_invalid_hex(self, adjust):
        """Test that the color must be valid hex"""
        with pytest.raises(ValueError, match="Invalid hex color"):
            adjust("invalid", 50)

    def test_opposite_effects(self):
        """Test that darken lowers and lighten raises every channel"""
        original = hex_to_rgb("#808080")
        darker = hex_to_rgb(darken("#808080", 25))
        lighter = hex_to_rgb(lighten("#808080", 25))

        for channel in ("r", "g", "b"):
            assert getattr(darker, channel) < getattr(original, channel)
            assert getattr(lighter, channel) > getattr(original, channel)


class TestValidation:
    """Tests for is_valid_hex and is_valid_rgb"""

    @pytest.mark.parametrize("value", ["#FF0000", "#000", "FF0000", "F00", "#aabbcc", "deadbe"])
    def test_valid_hex(self, value):
        assert is_valid_hex(value) is True

    @pytest.mark.parametrize("value", ["#GGGGGG", "#FF", "#FFFFFFF", "invalid", "", "#12345", None, 123, {}, []])
    def test_invalid_hex(self, value):
        assert is_valid_hex(value) is False

    def test_valid_rgb(self):
        """Test valid channels as parameters, records and mappings"""
        assert is_valid_rgb(0, 0, 0)
        assert is_valid_rgb(255, 255, 255)
        assert is_valid_rgb(0, 128, 255)
        assert is_valid_rgb(RgbColor(128, 128, 128))
        assert is_valid_rgb({"r": 0, "g": 0, "b": 0})

    @pytest.mark.parametrize(
        "args",
        [
            (-1, 0, 0),
            (0, 256, 0),
            (0, 0, -1),
            (1.5, 0, 0),
            (0, 0, 1.5),
            (None, 0, 0),
            (0, None, 0),
            (True, 0, 0),
            ({"r": 0},),
            ({"r": 0, "g": 0},),
            ({},),
        ],
    )
    def test_invalid_rgb(self, args):
        """Test out-of-range, fractional, missing and boolean channels"""
        assert is_valid_rgb(*args) is False


class TestContrastRatio:
    """Tests for get_contrast_ratio"""

    def test_extremes(self):
        """Test black/white maximum and same-color minimum"""
        assert get_contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21, abs=0.05)
        assert get_contrast_ratio("#FF0000", "#FF0000") == pytest.approx(1)

    def test_symmetric(self):
        """Test that argument order does not matter"""
        assert get_contrast_ratio("#FF0000", "#00FF00") == pytest.approx(get_contrast_ratio("#00FF00", "#FF0000"))

    def test_wcag_thresholds(self):
        """Test typical AA pass and fail combinations"""
        assert get_contrast_ratio("#333333", "#FFFFFF") > 4.5
        assert get_contrast_ratio("#CCCCCC", "#FFFFFF") < 4.5

    def test_short_hex(self):
        ratio = get_contrast_ratio("#F00", "#0F0")
        assert 1 < ratio < 21


class TestRandomHex:
    """Tests for random_hex"""

    def test_generates_valid_colors(self):
        for _ in range(10):
            assert re.fullmatch(r"#[0-9a-f]{6}", random_hex())

    def test_generates_different_colors(self):
        assert len({random_hex() for _ in range(100)}) > 50


class TestRgbToHsl:
    """Tests for rgb_to_hsl"""

    @pytest.mark.parametrize(
        "rgb,expected",
        [
            ((255, 0, 0), HslColor(0, 100, 50)),
            ((0, 255, 0), HslColor(120, 100, 50)),
            ((0, 0, 255), HslColor(240, 100, 50)),
            ((0, 0, 0), HslColor(0, 0, 0)),
            ((255, 255, 255), HslColor(0, 0, 100)),
            ((128, 128, 128), HslColor(0, 0, 50)),
            ((255, 165, 0), HslColor(39, 100, 50)),
            ((128, 0, 128), HslColor(300, 100, 25)),
            ((0, 255, 255), HslColor(180, 100, 50)),
        ],
    )
    def test_conversion(self, rgb, expected):
        """Test primary, grayscale and mixed colors"""
        assert rgb_to_hsl(*rgb) == expected

    def test_record_input(self):
        """Test conversion from an RgbColor"""
        assert rgb_to_hsl(RgbColor(255, 0, 0)) == HslColor(0, 100, 50)

    def test_near_extremes(self):
        assert rgb_to_hsl(1, 1, 1).l == 0
        assert rgb_to_hsl(254, 254, 254).l == 100
