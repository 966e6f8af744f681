"""Unit tests for WCAG contrast and contrast repair."""

import pytest

from tonal_scheme.color.contrast import (
    adjust_for_contrast,
    contrast_ratio,
    meets_contrast,
    relative_luminance,
)
from tonal_scheme.color.conversion import HSL, RGB
from tonal_scheme.errors import ConfigError

PAIRS = [
    (HSL(0, 0, 0.47), HSL(0, 0, 0.53)),
    (HSL(220, 0.9, 0.5), HSL(220, 0.9, 0.55)),
    (HSL(60, 1.0, 0.5), HSL(60, 1.0, 0.9)),
    (HSL(270, 0.6, 0.2), HSL(270, 0.6, 0.3)),
    (HSL(120, 0.8, 0.95), HSL(120, 0.8, 0.7)),
    (HSL(10, 0.5, 0.5), HSL(200, 0.5, 0.5)),
    (HSL(0, 0.2, 0.2), HSL(40, 0.2, 0.2)),
]


class TestContrastRatio:
    """Test luminance and ratio calculation."""

    @pytest.mark.unit
    def test_relative_luminance_extremes(self):
        assert relative_luminance(0, 0, 0) == 0
        assert relative_luminance(255, 255, 255) == pytest.approx(1.0)

    @pytest.mark.unit
    def test_black_on_white_is_21(self):
        assert contrast_ratio("#000000", "#FFFFFF") == 21.0

    @pytest.mark.unit
    def test_same_color_is_1(self):
        assert contrast_ratio("#3463EB", "#3463EB") == 1.0
        assert contrast_ratio(HSL(120, 0.5, 0.5), "hsl(120, 50%, 50%)") == 1.0

    @pytest.mark.unit
    def test_symmetric(self):
        assert contrast_ratio("#3463EB", "#F0F0F0") == contrast_ratio("#F0F0F0", "#3463EB")

    @pytest.mark.unit
    def test_mixed_forms(self):
        assert contrast_ratio(RGB(255, 0, 0), "#FFFFFF") == 4.0

    @pytest.mark.unit
    def test_meets_contrast(self):
        assert meets_contrast("#000", "#fff", "AAA")
        assert not meets_contrast("#777777", "#888888")

    @pytest.mark.unit
    def test_unknown_level_raises(self):
        with pytest.raises(ConfigError):
            meets_contrast("#000", "#fff", "A")


class TestAdjustForContrast:
    """Test iterative contrast repair and its fallback."""

    @pytest.mark.unit
    def test_passing_pair_is_returned_unchanged(self):
        result = adjust_for_contrast("#FFFFFF", "#000000")
        assert result.foreground == "#FFFFFF"
        assert result.background == "#000000"
        assert result.ratio == 21.0
        assert not result.fallback

    @pytest.mark.unit
    def test_output_keeps_input_forms(self):
        result = adjust_for_contrast("#777777", RGB(136, 136, 136))
        assert result.foreground.startswith("#")
        assert isinstance(result.background, RGB)

    @pytest.mark.unit
    def test_deterministic(self):
        assert adjust_for_contrast("#777777", "#888888") == adjust_for_contrast(
            "#777777", "#888888"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize("level,target", [("AA", 4.5), ("AAA", 7.0)])
    @pytest.mark.parametrize("fg,bg", PAIRS)
    def test_reaches_target_or_falls_back(self, fg, bg, level, target):
        result = adjust_for_contrast(fg, bg, level)
        if result.fallback:
            assert result.foreground.s == 0.2
            assert result.foreground.l in (0.1, 0.9)
            if result.foreground.l == 0.9:
                assert result.background.l >= 0.15
        else:
            assert contrast_ratio(result.foreground, result.background) >= target
            assert result.ratio >= target

    @pytest.mark.unit
    @pytest.mark.parametrize("fg,bg", PAIRS)
    def test_repaired_pairs_are_softened(self, fg, bg):
        result = adjust_for_contrast(fg, bg)
        assert result.foreground.s <= 0.85
        assert result.background.s <= 0.75
        for color in result:
            if isinstance(color, HSL):
                assert 0.08 <= color.l <= 0.92

    @pytest.mark.unit
    def test_close_greys_are_pushed_apart(self):
        result = adjust_for_contrast(HSL(0, 0, 0.47), HSL(0, 0, 0.53))
        assert result.foreground.l < 0.47
        assert result.background.l > 0.53

    @pytest.mark.unit
    def test_dark_fallback_keeps_background_floor(self):
        result = adjust_for_contrast(HSL(0, 0.2, 0.2), HSL(40, 0.2, 0.2), "AAA")
        assert result.fallback
        assert result.foreground == HSL(0, 0.2, 0.9)
        assert result.background.l >= 0.15

    @pytest.mark.unit
    def test_unknown_level_raises(self):
        with pytest.raises(ConfigError):
            adjust_for_contrast("#777777", "#888888", "B")
