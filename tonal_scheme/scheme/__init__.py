from .base import BASE_KEYS, KEY_ALIASES, create_base_color_scheme
from .rules import (
    DARK_ROLE_RULES,
    LIGHT_ROLE_RULES,
    ExtractionRules,
    SurfaceRules,
    merge_rules,
)
from .scheme import (
    MODES,
    BrightnessScheme,
    Scheme,
    color_scheme_to_palettes,
    color_scheme_to_tonal_palettes,
    create_color_scheme_roles,
    create_color_scheme_tonal,
    create_scheme,
    role_contrast_ratios,
)

__all__ = [
    "BASE_KEYS",
    "DARK_ROLE_RULES",
    "KEY_ALIASES",
    "LIGHT_ROLE_RULES",
    "MODES",
    "BrightnessScheme",
    "ExtractionRules",
    "Scheme",
    "SurfaceRules",
    "color_scheme_to_palettes",
    "color_scheme_to_tonal_palettes",
    "create_base_color_scheme",
    "create_color_scheme_roles",
    "create_color_scheme_tonal",
    "create_scheme",
    "merge_rules",
    "role_contrast_ratios",
]
