"""Unit tests for color conversions and tag detection."""

import pytest

from tonal_scheme.color.conversion import (
    HSL,
    RGB,
    get_color_type,
    hex_to_hsl,
    hex_to_rgb,
    hsl_string_to_hsl,
    hsl_to_hex,
    hsl_to_rgb,
    hsl_to_string,
    parse_color,
    rgb_string_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_string,
    to_hsl,
    to_rgb,
    to_tag,
)
from tonal_scheme.errors import ConfigError, FormatError


class TestHex:
    """Test hex parsing and formatting."""

    @pytest.mark.unit
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#3463EB") == RGB(52, 99, 235)
        assert hex_to_rgb("3463eb") == RGB(52, 99, 235)

    @pytest.mark.unit
    def test_shorthand_is_expanded(self):
        assert hex_to_rgb("#abc") == RGB(170, 187, 204)
        assert hex_to_rgb("#000") == RGB(0, 0, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["#12345", "#GGGGGG", "#1234567", "", "#", "#12 456"])
    def test_invalid_hex_raises(self, value):
        with pytest.raises(FormatError):
            hex_to_rgb(value)

    @pytest.mark.unit
    def test_rgb_to_hex_is_uppercase(self):
        assert rgb_to_hex(52, 99, 235) == "#3463EB"
        assert rgb_to_hex(255, 136, 0) == "#FF8800"

    @pytest.mark.unit
    def test_rgb_to_hex_clamps_channels(self):
        assert rgb_to_hex(300, -5, 0) == "#FF0000"


class TestHsl:
    """Test RGB <-> HSL conversion."""

    @pytest.mark.unit
    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == HSL(0, 1, 0.5)
        assert rgb_to_hsl(0, 0, 0) == HSL(0, 0, 0)
        assert rgb_to_hsl(255, 255, 255) == HSL(0, 0, 1)

    @pytest.mark.unit
    def test_rounds_to_two_decimals(self):
        assert rgb_to_hsl(52, 99, 235) == HSL(224.59, 0.82, 0.56)
        assert hex_to_hsl("#3463EB") == HSL(224.59, 0.82, 0.56)

    @pytest.mark.unit
    def test_hsl_to_rgb(self):
        assert hsl_to_rgb(0, 1, 0.5) == RGB(255, 0, 0)
        assert hsl_to_rgb(120, 1, 0.5) == RGB(0, 255, 0)
        assert hsl_to_rgb(0, 0, 1) == RGB(255, 255, 255)

    @pytest.mark.unit
    def test_negative_hue_wraps(self):
        assert hsl_to_rgb(-120, 1, 0.5) == RGB(0, 0, 255)
        assert hsl_to_rgb(480, 1, 0.5) == RGB(0, 255, 0)

    @pytest.mark.unit
    def test_saturation_and_lightness_are_clamped(self):
        assert hsl_to_rgb(120, 1.5, 0.5) == RGB(0, 255, 0)
        assert hsl_to_rgb(120, 1, -0.2) == RGB(0, 0, 0)

    @pytest.mark.unit
    def test_hsl_to_hex(self):
        assert hsl_to_hex(0, 1, 0.4) == "#CC0000"


class TestRoundTrip:
    """Test conversions survive a round trip."""

    COLORS = [
        RGB(0, 0, 0),
        RGB(255, 255, 255),
        RGB(255, 0, 0),
        RGB(0, 255, 0),
        RGB(0, 0, 255),
        RGB(128, 128, 128),
        RGB(52, 99, 235),
    ]

    @pytest.mark.unit
    @pytest.mark.parametrize("rgb", COLORS)
    def test_hex_round_trip_is_exact(self, rgb):
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    @pytest.mark.unit
    @pytest.mark.parametrize("rgb", COLORS)
    def test_hsl_round_trip_within_one(self, rgb):
        result = hsl_to_rgb(*rgb_to_hsl(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(result, rgb))


class TestStrings:
    """Test rgb() and hsl() string forms."""

    @pytest.mark.unit
    def test_parse_rgb_string(self):
        assert rgb_string_to_rgb("rgb(255, 128, 64)") == RGB(255, 128, 64)
        assert rgb_string_to_rgb("rgb(100,200,50)") == RGB(100, 200, 50)

    @pytest.mark.unit
    def test_parse_rgba_string_drops_alpha(self):
        assert rgb_string_to_rgb("rgba(255, 128, 64, 0.5)") == RGB(255, 128, 64)
        assert rgb_string_to_rgb("rgba(100,200,50, 0.8)") == RGB(100, 200, 50)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", ["invalid-color", "rgb(255, 128)", "rgba(255, 128, 64)", "rgb(a, b, c)"]
    )
    def test_invalid_rgb_string_raises(self, value):
        with pytest.raises(FormatError):
            rgb_string_to_rgb(value)

    @pytest.mark.unit
    def test_rgb_to_string(self):
        assert rgb_to_string(52, 99, 235) == "rgb(52, 99, 235)"

    @pytest.mark.unit
    def test_hsl_string(self):
        assert hsl_to_string(224.59, 0.82, 0.56) == "hsl(224.59, 82%, 56%)"
        assert hsl_string_to_hsl("hsl(224.59, 82%, 56%)") == HSL(224.59, 0.82, 0.56)

    @pytest.mark.unit
    def test_invalid_hsl_string_raises(self):
        with pytest.raises(FormatError):
            hsl_string_to_hsl("hsl(10, 20, 30)")


class TestColorType:
    """Test tag detection at the boundary."""

    @pytest.mark.unit
    def test_strings(self):
        assert get_color_type("#fff") == "hex"
        assert get_color_type("rgb(1, 2, 3)") == "rgb"
        assert get_color_type("hsl(1, 2%, 3%)") == "hsl"

    @pytest.mark.unit
    def test_objects(self):
        assert get_color_type(RGB(1, 2, 3)) == "RGB"
        assert get_color_type(HSL(1, 0.2, 0.3)) == "HSL"
        assert get_color_type({"r": 1, "g": 2, "b": 3}) == "RGB"
        assert get_color_type({"h": 1, "s": 0.2, "l": 0.3}) == "HSL"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["red", 42, None, {"x": 1}, (1, 2, 3)])
    def test_unknown_shapes_raise(self, value):
        with pytest.raises(FormatError):
            get_color_type(value)

    @pytest.mark.unit
    def test_parse_color(self):
        assert parse_color("#FF0000") == ("hex", HSL(0, 1, 0.5))

    @pytest.mark.unit
    def test_non_numeric_components_raise(self):
        with pytest.raises(FormatError):
            to_rgb({"r": "1", "g": 2, "b": 3})


class TestToTag:
    """Test conversion to a requested output form."""

    @pytest.mark.unit
    def test_conversions(self):
        assert to_tag("#FF0000", "rgb") == "rgb(255, 0, 0)"
        assert to_tag("rgb(255, 0, 0)", "HSL") == HSL(0, 1, 0.5)
        assert to_tag({"h": 0, "s": 1, "l": 0.5}, "hex") == "#FF0000"
        assert to_tag("#ff0000", "hsl") == "hsl(0, 100%, 50%)"
        assert to_tag("#ff0000", "RGB") == RGB(255, 0, 0)

    @pytest.mark.unit
    def test_hsl_objects_are_normalized(self):
        assert to_hsl(HSL(-30, 1.2, 0.5)) == HSL(330, 1.0, 0.5)

    @pytest.mark.unit
    def test_unknown_tag_raises(self):
        with pytest.raises(ConfigError):
            to_tag("#FF0000", "cmyk")
