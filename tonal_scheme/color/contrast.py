"""WCAG contrast ratio and iterative contrast repair for color pairs."""

import logging
from collections import namedtuple

from ..errors import ConfigError
from .conversion import HSL, clamp, get_color_type, round_half_up, to_hsl, to_rgb, to_tag

logger = logging.getLogger(__name__)

# Contrast requirements
CONTRAST_LEVELS = {
    "AA": 4.5,  # normal text
    "AAA": 7.0,  # enhanced
}

# Lightness phase
LIGHTNESS_ATTEMPTS = 20
LIGHTNESS_PUSH = 0.08  # used while the two lightness values are close
LIGHTNESS_NUDGE = 0.03
CLOSE_LIGHTNESS_GAP = 0.3
LIGHTNESS_RANGE = (0.05, 0.95)

# Saturation phase
SATURATION_ATTEMPTS = 10
SATURATION_STEP = 0.05
SATURATION_RANGE = (0.1, 0.8)

# Fallback policy
FALLBACK_DARK_TEXT = 0.1
FALLBACK_LIGHT_TEXT = 0.9
FALLBACK_TEXT_SATURATION = 0.2
FALLBACK_DARK_BG_MIN_LIGHTNESS = 0.15

# Soften pass, always applied after a repair
MAX_FG_SATURATION = 0.85
MAX_BG_SATURATION = 0.75
SOFT_LIGHTNESS_RANGE = (0.08, 0.92)

ContrastResult = namedtuple("ContrastResult", ["foreground", "background", "ratio", "fallback"])


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def luminance_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color1, color2):
    """Contrast ratio between two colors of any supported form, to 2 decimals."""
    lum1 = relative_luminance(*to_rgb(color1))
    lum2 = relative_luminance(*to_rgb(color2))
    return round_half_up(luminance_ratio(lum1, lum2), 2)


def target_ratio(level):
    if level not in CONTRAST_LEVELS:
        raise ConfigError(
            f"Unknown contrast level {level!r}",
            key="level",
            value=level,
            recovery_hint="Use 'AA' or 'AAA'",
        )
    return CONTRAST_LEVELS[level]


def meets_contrast(color1, color2, level="AA"):
    return contrast_ratio(color1, color2) >= target_ratio(level)


def _ratio(fg, bg):
    return contrast_ratio(HSL(*fg), HSL(*bg))


def _push_apart(fg, bg, step):
    """Move the lighter color up and the darker one down by ``step``."""
    low, high = LIGHTNESS_RANGE
    fg_h, fg_s, fg_l = fg
    bg_h, bg_s, bg_l = bg
    if fg_l > bg_l or (fg_l == bg_l and bg_l < 0.5):
        fg_l, bg_l = fg_l + step, bg_l - step
    else:
        fg_l, bg_l = fg_l - step, bg_l + step
    return HSL(fg_h, fg_s, clamp(fg_l, low, high)), HSL(bg_h, bg_s, clamp(bg_l, low, high))


def _spread_saturation(fg, bg):
    """Desaturate the darker color and saturate the lighter one."""
    low, high = SATURATION_RANGE
    if fg.l > bg.l:
        lighter, darker = fg, bg
    else:
        lighter, darker = bg, fg
    lighter = lighter._replace(s=clamp(lighter.s + SATURATION_STEP, low, high))
    darker = darker._replace(s=clamp(darker.s - SATURATION_STEP, low, high))
    return (lighter, darker) if fg.l > bg.l else (darker, lighter)


def _background_is_dark(bg):
    return _ratio(HSL(0, 0, 1), bg) >= _ratio(HSL(0, 0, 0), bg)


def _fallback(fg, bg):
    """Fixed high-contrast policy used when the search fails."""
    if _background_is_dark(bg):
        fg = HSL(fg.h, FALLBACK_TEXT_SATURATION, FALLBACK_LIGHT_TEXT)
        bg = bg._replace(l=max(bg.l, FALLBACK_DARK_BG_MIN_LIGHTNESS))
    else:
        fg = HSL(fg.h, FALLBACK_TEXT_SATURATION, FALLBACK_DARK_TEXT)
    return fg, bg


def _soften(fg, bg):
    low, high = SOFT_LIGHTNESS_RANGE
    fg = HSL(fg.h, min(fg.s, MAX_FG_SATURATION), clamp(fg.l, low, high))
    bg = HSL(bg.h, min(bg.s, MAX_BG_SATURATION), clamp(bg.l, low, high))
    return fg, bg


def adjust_for_contrast(foreground, background, level="AA"):
    """Repair a text/background pair until it reaches a WCAG contrast target.

    Pairs that already pass are returned untouched. Otherwise the lightness
    of both colors is pushed apart for up to 20 steps, then their saturation
    is spread for up to 10 more. If the target is still out of reach the pair
    falls back to near-fixed text lightness (0.1 on light backgrounds, 0.9
    on dark ones, where the background is lifted to at least 0.15). Every
    repaired pair is finally softened: saturation is capped and lightness
    kept within [0.08, 0.92].

    Args:
        foreground: Text color, any supported form
        background: Surface color, any supported form
        level: "AA" (4.5:1) or "AAA" (7:1)

    Returns:
        ContrastResult: foreground and background in their input forms,
        the achieved ratio and whether the fallback policy was used
    """
    target = target_ratio(level)
    fg_tag = get_color_type(foreground)
    bg_tag = get_color_type(background)

    ratio = contrast_ratio(foreground, background)
    if ratio >= target:
        return ContrastResult(foreground, background, ratio, False)

    fg = to_hsl(foreground, fg_tag)
    bg = to_hsl(background, bg_tag)

    reached = False
    for _ in range(LIGHTNESS_ATTEMPTS):
        step = LIGHTNESS_PUSH if abs(fg.l - bg.l) < CLOSE_LIGHTNESS_GAP else LIGHTNESS_NUDGE
        fg, bg = _push_apart(fg, bg, step)
        if _ratio(fg, bg) >= target:
            reached = True
            break

    if not reached:
        for _ in range(SATURATION_ATTEMPTS):
            fg, bg = _spread_saturation(fg, bg)
            if _ratio(fg, bg) >= target:
                reached = True
                break

    fallback = False
    if reached:
        fg, bg = _soften(fg, bg)
        if _ratio(fg, bg) < target:
            reached = False

    if not reached:
        logger.debug(
            "Contrast %s not reachable for %s on %s, using fallback",
            target,
            foreground,
            background,
        )
        fallback = True
        fg, bg = _soften(*_fallback(fg, bg))

    return ContrastResult(
        to_tag(fg, fg_tag),
        to_tag(bg, bg_tag),
        _ratio(fg, bg),
        fallback,
    )
