"""Hue arithmetic and HSL adjustments used to derive a scheme from one seed."""

import logging

from ..errors import ConfigError
from .conversion import HSL, clamp, get_color_type, round_half_up, to_hsl, to_tag

logger = logging.getLogger(__name__)

# Default offset angle per hue formula
FORMULA_ANGLES = {
    "triadic": 60,
    "adjacent": 45,
    "complementary": 30,
}
FORMULA_ALIASES = {"split_complementary": "complementary", "splitComplementary": "complementary"}

# Functional colors: default hue and the band it may move within
FUNCTIONAL_HUES = {
    "success": {"hue": 120, "band": (90, 150)},
    "warning": {"hue": 40, "band": (30, 60)},
    "error": {"hue": 0, "band": (355, 5)},
}

# Minimum hue distance (degrees) before two hues are considered to collide
HUE_CONFLICT_DISTANCE = 30
HUE_SEARCH_STEP = 30
HUE_SEARCH_ATTEMPTS = 3

# Saturation multipliers per hue bucket: (upper bound exclusive, multiplier)
SATURATION_BUCKETS = (
    (30, 0.95),  # red
    (60, 0.9),  # orange
    (90, 0.8),  # yellow
    (150, 0.9),  # green
    (210, 1.0),  # cyan
    (270, 1.15),  # blue
    (360, 1.05),  # purple / magenta
)


def adjacent_hue(hue, offset):
    """Rotate ``hue`` by ``offset`` degrees, always returning [0, 360)."""
    return (hue + offset) % 360


def complementary_hue(hue):
    return adjacent_hue(hue, 180)


def hue_distance(h1, h2):
    """Shortest distance between two hues on the color wheel."""
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def normalize_formula(formula):
    formula = FORMULA_ALIASES.get(formula, formula)
    if formula not in FORMULA_ANGLES:
        raise ConfigError(
            f"Unknown hue formula {formula!r}",
            key="formula",
            value=formula,
            recovery_hint=f"Use one of: {', '.join(FORMULA_ANGLES)}",
        )
    return formula


def compute_hues(formula, hue, angle=None):
    """Compute three related hues for a formula.

    Args:
        formula: "triadic", "adjacent" or "complementary"
        hue: Anchor hue in degrees
        angle: Offset angle; defaults to 60/45/30 depending on formula

    Returns:
        tuple: Three hues, the first being the anchor (or its complement
        for "complementary")
    """
    formula = normalize_formula(formula)
    if angle is None:
        angle = FORMULA_ANGLES[formula]

    if formula == "triadic":
        return (adjacent_hue(hue, 0), adjacent_hue(hue, angle), adjacent_hue(hue, 2 * angle))
    if formula == "adjacent":
        return (adjacent_hue(hue, 0), adjacent_hue(hue, -angle), adjacent_hue(hue, angle))
    complement = complementary_hue(hue)
    return (complement, adjacent_hue(complement, -angle), adjacent_hue(complement, angle))


def ratio_adjust(value, ratio):
    """Scale a saturation or lightness value, clamped to [0, 1] and rounded."""
    return round_half_up(clamp(value * ratio, 0.0, 1.0), 2)


def adjust_hsl(color, saturation_delta, lightness_delta):
    """Shift saturation/lightness by a delta, keeping both within [0, 1]."""
    h, s, l = color
    return HSL(
        h,
        clamp(s + saturation_delta, 0.0, 1.0),
        clamp(l + lightness_delta, 0.0, 1.0),
    )


def _check_amount(name, value, limit):
    if not -limit <= value <= limit:
        raise ConfigError(
            f"{name} must be between {-limit} and {limit}, got {value!r}",
            key=name,
            value=value,
        )


def adjust_brightness(color, percent):
    """Lighten (positive) or darken (negative) a color by ``percent`` in [-1, 1].

    The result has the same form as ``color``.
    """
    _check_amount("percent", percent, 1)
    tag = get_color_type(color)
    h, s, l = to_hsl(color, tag)
    return to_tag(HSL(h, s, clamp(l + percent, 0.0, 1.0)), tag)


def adjust_saturation(color, percent):
    """Shift saturation by ``percent`` in [-1, 1], keeping the color's form."""
    _check_amount("percent", percent, 1)
    tag = get_color_type(color)
    h, s, l = to_hsl(color, tag)
    return to_tag(HSL(h, clamp(s + percent, 0.0, 1.0), l), tag)


def adjust_hue(color, degrees):
    """Rotate the hue by ``degrees`` in [-360, 360], keeping the color's form."""
    _check_amount("degrees", degrees, 360)
    tag = get_color_type(color)
    h, s, l = to_hsl(color, tag)
    return to_tag(HSL(adjacent_hue(h, degrees), s, l), tag)


def smart_functional_hue(kind, primary_hue):
    """Place a functional hue (success/warning/error) away from the primary.

    The default hue is kept unless it sits within 30 degrees of the primary
    hue; then it moves to whichever edge of its band is farther from the
    primary. Error moves to 355 for primaries below 180 and to 5 otherwise.
    """
    if kind not in FUNCTIONAL_HUES:
        raise ConfigError(
            f"Unknown functional color {kind!r}",
            key="kind",
            value=kind,
            recovery_hint=f"Use one of: {', '.join(FUNCTIONAL_HUES)}",
        )
    default = FUNCTIONAL_HUES[kind]["hue"]
    if hue_distance(primary_hue, default) >= HUE_CONFLICT_DISTANCE:
        return default

    if kind == "error":
        return 355 if primary_hue < 180 else 5

    low, high = FUNCTIONAL_HUES[kind]["band"]
    if hue_distance(primary_hue, low) >= hue_distance(primary_hue, high):
        return low
    return high


def perceptually_uniform(color):
    """Even out perceived vividness and keep lightness off the extremes.

    Saturation is scaled by a hue-dependent multiplier (yellows are damped,
    blues boosted). Lightness below 0.4 and above 0.6 is compressed so no
    derived color lands on pure black or pure white.
    """
    h, s, l = color
    for upper, multiplier in SATURATION_BUCKETS:
        if h < upper:
            break
    s = round_half_up(clamp(s * multiplier, 0.0, 1.0), 2)

    if l <= 0.4:
        l = 0.1 + l * 0.75
    elif l >= 0.6:
        l = 0.6 + (l - 0.6) * 0.75
    return HSL(h, s, round_half_up(clamp(l, 0.0, 1.0), 2))


def has_hue_conflict(hues, functional_hues):
    for hue in hues:
        for functional in functional_hues:
            if hue_distance(hue, functional) < HUE_CONFLICT_DISTANCE:
                return True
    return False


def compute_aux_and_extra(hue, formula="triadic", angle=None, functional_hues=()):
    """Search for secondary/tertiary hues clear of the functional hues.

    Starts from the formula's angle and widens it by 30 degrees on every
    conflict, for at most three attempts. The last computed set is returned
    even if it still collides.

    Returns:
        tuple: (anchor, secondary, tertiary) hues
    """
    formula = normalize_formula(formula)
    if angle is None:
        angle = FORMULA_ANGLES[formula]

    hues = compute_hues(formula, hue, angle)
    for attempt in range(1, HUE_SEARCH_ATTEMPTS):
        if not has_hue_conflict(hues, functional_hues):
            break
        angle += HUE_SEARCH_STEP
        logger.debug(
            "Hue set %s collides with functional hues %s, retry %d with angle %s",
            hues,
            tuple(functional_hues),
            attempt,
            angle,
        )
        hues = compute_hues(formula, hue, angle)
    return hues
