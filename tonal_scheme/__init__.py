"""Seed-color palettes and light/dark UI role schemes."""

from .color import (
    HSL,
    RGB,
    adjust_brightness,
    adjust_for_contrast,
    adjust_hue,
    adjust_saturation,
    contrast_ratio,
    get_color_type,
    to_hex,
    to_hsl,
    to_rgb,
    to_tag,
)
from .errors import ConfigError, FormatError, PaletteRangeError, TonalSchemeError
from .palette import Palette, get_palette_color, make_palette
from .scheme import (
    DARK_ROLE_RULES,
    LIGHT_ROLE_RULES,
    Scheme,
    create_base_color_scheme,
    create_scheme,
    merge_rules,
    role_contrast_ratios,
)

__version__ = "0.1.0"

__all__ = [
    "DARK_ROLE_RULES",
    "HSL",
    "LIGHT_ROLE_RULES",
    "RGB",
    "ConfigError",
    "FormatError",
    "Palette",
    "PaletteRangeError",
    "Scheme",
    "TonalSchemeError",
    "adjust_brightness",
    "adjust_for_contrast",
    "adjust_hue",
    "adjust_saturation",
    "contrast_ratio",
    "create_base_color_scheme",
    "create_scheme",
    "get_color_type",
    "get_palette_color",
    "make_palette",
    "merge_rules",
    "role_contrast_ratios",
    "to_hex",
    "to_hsl",
    "to_rgb",
    "to_tag",
]
