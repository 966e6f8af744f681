from .contrast import (
    CONTRAST_LEVELS,
    ContrastResult,
    adjust_for_contrast,
    contrast_ratio,
    meets_contrast,
    relative_luminance,
)
from .conversion import (
    COLOR_TAGS,
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
    to_hex,
    to_hsl,
    to_rgb,
    to_tag,
)
from .formula import (
    adjacent_hue,
    adjust_brightness,
    adjust_hsl,
    adjust_hue,
    adjust_saturation,
    complementary_hue,
    compute_aux_and_extra,
    compute_hues,
    hue_distance,
    perceptually_uniform,
    ratio_adjust,
    smart_functional_hue,
)

__all__ = [
    "COLOR_TAGS",
    "CONTRAST_LEVELS",
    "HSL",
    "RGB",
    "ContrastResult",
    "adjacent_hue",
    "adjust_brightness",
    "adjust_for_contrast",
    "adjust_hsl",
    "adjust_hue",
    "adjust_saturation",
    "complementary_hue",
    "compute_aux_and_extra",
    "compute_hues",
    "contrast_ratio",
    "get_color_type",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_string_to_hsl",
    "hsl_to_hex",
    "hsl_to_rgb",
    "hsl_to_string",
    "hue_distance",
    "meets_contrast",
    "parse_color",
    "perceptually_uniform",
    "ratio_adjust",
    "relative_luminance",
    "rgb_string_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_string",
    "smart_functional_hue",
    "to_hex",
    "to_hsl",
    "to_rgb",
    "to_tag",
]
