"""Derive the base color set (primary, secondary, ..., neutral) from one seed."""

import logging

from ..color.conversion import HSL, check_tag, parse_color, to_tag
from ..color.formula import (
    compute_aux_and_extra,
    normalize_formula,
    perceptually_uniform,
    ratio_adjust,
    smart_functional_hue,
)
from ..errors import ConfigError, FormatError
from .rules import SURFACE_ROLE_NAMES, role_names

logger = logging.getLogger(__name__)

BASE_KEYS = ("primary", "secondary", "tertiary", "success", "warning", "error", "neutral")
FUNCTIONAL_KEYS = ("success", "warning", "error")

KEY_ALIASES = {
    "main": "primary",
    "aux": "secondary",
    "extra": "tertiary",
    "minor": "tertiary",
    "danger": "error",
}

# Derived colors stay a little calmer than the seed
DERIVED_SATURATION_RATIO = 0.9
NEUTRAL_SATURATION = 0.15


def _builtin_role_names():
    names = set(SURFACE_ROLE_NAMES.values())
    for key in BASE_KEYS:
        if key != "neutral":
            names.update(role_names(key))
    return names


def _normalize_custom_colors(custom_colors):
    """Parse custom colors to HSL, folding alias keys onto canonical ones."""
    if not custom_colors:
        return {}
    parsed = {}
    taken = _builtin_role_names()
    for key, color in dict(custom_colors).items():
        if not isinstance(key, str) or not key:
            raise ConfigError("Custom color keys must be non-empty strings", key=key, value=color)
        canonical = KEY_ALIASES.get(key, key)
        if canonical in parsed:
            raise ConfigError(
                f"Custom color {key!r} duplicates {canonical!r}",
                key=key,
                value=color,
                recovery_hint=f"Give only one of {key!r} and {canonical!r}",
            )
        if canonical not in BASE_KEYS:
            roles = role_names(canonical)
            clashes = taken.intersection(roles)
            if clashes:
                raise ConfigError(
                    f"Custom color {key!r} would overwrite role {min(clashes)!r}",
                    key=key,
                    value=color,
                    recovery_hint="Pick a key whose roles do not match an existing role name",
                )
            taken.update(roles)
        try:
            _, hsl = parse_color(color)
        except FormatError as e:
            raise ConfigError(
                f"Custom color {key!r} is not a valid color: {color!r}",
                key=key,
                value=color,
                recovery_hint=e.recovery_hint,
            ) from e
        parsed[canonical] = hsl
    return parsed


def _derived(hue, saturation, lightness):
    return perceptually_uniform(
        HSL(hue, ratio_adjust(saturation, DERIVED_SATURATION_RATIO), lightness)
    )


def create_base_color_scheme(
    seed, formula="triadic", angle=None, custom_colors=None, out_type="hex"
):
    """Create the base color set for a seed color.

    Functional hues (success, warning, error) are placed away from the
    primary hue, then secondary and tertiary hues are searched so they stay
    clear of the functional ones. Custom colors replace computed colors of
    the same key (aliases main/aux/extra/minor/danger are accepted) and any
    other custom key is appended after the built-in ones.

    Args:
        seed: Primary color, any supported form
        formula: "triadic", "adjacent" or "complementary"
        angle: Hue offset for the formula (default depends on formula)
        custom_colors: Mapping of key -> color
        out_type: Color tag of the output values

    Returns:
        dict: key -> color in ``out_type`` form

    Raises:
        FormatError: If the seed is not a valid color
        ConfigError: On a missing seed, bad options, invalid custom colors or
            a custom key whose roles would overwrite existing role names
    """
    if seed is None:
        raise ConfigError("A seed color is required", key="seed", value=seed)
    check_tag(out_type)
    formula = normalize_formula(formula)
    custom = _normalize_custom_colors(custom_colors)

    primary = custom.get("primary") or parse_color(seed)[1]
    h, s, l = primary

    functional_hues = {
        key: custom[key].h if key in custom else smart_functional_hue(key, h)
        for key in FUNCTIONAL_KEYS
    }

    if "secondary" in custom and "tertiary" in custom:
        secondary_hue, tertiary_hue = custom["secondary"].h, custom["tertiary"].h
    else:
        _, secondary_hue, tertiary_hue = compute_aux_and_extra(
            h, formula, angle, functional_hues.values()
        )

    colors = {
        "primary": primary,
        "secondary": custom.get("secondary") or _derived(secondary_hue, s, l),
        "tertiary": custom.get("tertiary") or _derived(tertiary_hue, s, l),
    }
    for key in FUNCTIONAL_KEYS:
        colors[key] = custom.get(key) or _derived(functional_hues[key], s, l)
    colors["neutral"] = custom.get("neutral") or HSL(h, NEUTRAL_SATURATION, l)

    for key, hsl in custom.items():
        if key not in colors:
            colors[key] = hsl

    logger.debug("Base scheme for %s: %s", seed, colors)
    return {key: to_tag(hsl, out_type) for key, hsl in colors.items()}
