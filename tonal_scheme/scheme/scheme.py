import logging
from collections import namedtuple
from types import MappingProxyType

from ..color.contrast import adjust_for_contrast, contrast_ratio, target_ratio
from ..color.conversion import capitalize
from ..errors import ConfigError, PaletteRangeError
from ..palette import Palette
from .base import create_base_color_scheme
from .rules import (
    DARK_ROLE_RULES,
    LIGHT_ROLE_RULES,
    ROLE_STATES,
    SURFACE_ROLE_NAMES,
    merge_rules,
)

logger = logging.getLogger(__name__)

MODES = ("light", "dark")
NEUTRAL_KEY = "neutral"

ROLE_PALETTE_SIZE = 101
TONAL_PALETTE_SIZE = 10
TONAL_MIN_LIGHTNESS = 0.1
TONAL_MAX_LIGHTNESS = 0.9
TONES = range(1, TONAL_PALETTE_SIZE + 1)

# Text rules sampled from the neutral palette instead of the role's own
NEUTRAL_TEXT_RULES = ("on_source_disabled",)

BrightnessScheme = namedtuple("BrightnessScheme", ["roles", "tonal"])


def check_mode(mode):
    if mode not in MODES:
        raise ConfigError(
            f"Unknown brightness mode {mode!r}",
            key="mode",
            value=mode,
            recovery_hint="Use 'light' or 'dark'",
        )
    return mode


def color_scheme_to_palettes(colors):
    """One 101-step palette (full lightness range) per base color."""
    return {key: Palette.create(color, ROLE_PALETTE_SIZE) for key, color in colors.items()}


def color_scheme_to_tonal_palettes(colors):
    """One 10-step palette, lightness bounded to [0.1, 0.9], per base color."""
    return {
        key: Palette.create(
            color, TONAL_PALETTE_SIZE, min=TONAL_MIN_LIGHTNESS, max=TONAL_MAX_LIGHTNESS
        )
        for key, color in colors.items()
    }


def create_color_scheme_roles(palettes, rules, level="AA"):
    """Sample role colors out of the 101-step palettes.

    Every non-neutral key yields ten roles: ``{key}``, ``on{Key}`` and their
    Hover/Active/Disabled/Container variants. Each background/text pair is
    run through adjust_for_contrast. The neutral palette feeds the surface
    roles (background, surface, outline, ...) as-is.

    Args:
        palettes: key -> 101-step Palette, must include "neutral"
        rules: ExtractionRules for the brightness mode
        level: Contrast level for text on role colors, "AA" or "AAA"

    Returns:
        dict: role name -> color
    """
    if NEUTRAL_KEY not in palettes:
        raise ConfigError("Palettes must include a 'neutral' palette", key=NEUTRAL_KEY)
    neutral = palettes[NEUTRAL_KEY]
    roles = {}
    fallbacks = 0

    for key, palette in palettes.items():
        if key == NEUTRAL_KEY:
            continue
        on_key = f"on{capitalize(key)}"
        for suffix, bg_rule, text_rule in ROLE_STATES:
            text_palette = neutral if text_rule in NEUTRAL_TEXT_RULES else palette
            result = adjust_for_contrast(
                text_palette.get(getattr(rules, text_rule)),
                palette.get(getattr(rules, bg_rule)),
                level,
            )
            fallbacks += result.fallback
            roles[f"{key}{suffix}"] = result.background
            roles[f"{on_key}{suffix}"] = result.foreground

    for field, index in rules.base._asdict().items():
        roles[SURFACE_ROLE_NAMES[field]] = neutral.get(index)

    if fallbacks:
        logger.debug("%d role pairs used the contrast fallback", fallbacks)
    return roles


def create_color_scheme_tonal(palettes, mode):
    """Expose each 10-step palette as ``{key}-1`` .. ``{key}-10``.

    Light mode counts from the lightest step, dark mode from the darkest.
    """
    check_mode(mode)
    tonal = {}
    for key, palette in palettes.items():
        colors = palette.all()
        if mode == "light":
            colors.reverse()
        for tone, color in zip(TONES, colors):
            tonal[f"{key}-{tone}"] = color
    return tonal


def role_contrast_ratios(roles):
    """Contrast ratio of every ``{role}``/``on{Role}`` pair in a role map."""
    ratios = {}
    for key, color in roles.items():
        on_key = f"on{capitalize(key)}"
        if on_key in roles:
            ratios[key] = contrast_ratio(roles[on_key], color)
    if "inverseSurface" in roles and "inverseOnSurface" in roles:
        ratios["inverseSurface"] = contrast_ratio(roles["inverseOnSurface"], roles["inverseSurface"])
    return ratios


class Scheme:
    """A complete color scheme built from one seed color.

    Construction derives the base colors, builds a role palette and a tonal
    palette per color and extracts the light and dark role/tonal maps. A
    Scheme never changes after construction; build a new one to change the
    seed or the rules.

    Args:
        seed: Primary color, any supported form
        custom_colors: Mapping of key -> color, overriding or extending the
            base colors
        out_type: Color tag of every output color (default "hex")
        formula: Hue formula for secondary/tertiary colors
        angle: Hue offset for the formula
        dark_role_rule: Sparse overrides merged onto DARK_ROLE_RULES
        light_role_rule: Sparse overrides merged onto LIGHT_ROLE_RULES
        contrast_level: "AA" or "AAA" for text on role colors
    """

    dark_role_rules = DARK_ROLE_RULES
    light_role_rules = LIGHT_ROLE_RULES

    def __init__(
        self,
        seed,
        custom_colors=None,
        out_type="hex",
        formula="triadic",
        angle=None,
        dark_role_rule=None,
        light_role_rule=None,
        contrast_level="AA",
    ):
        target_ratio(contrast_level)
        self._seed = seed
        self._out_type = out_type
        self._contrast_level = contrast_level

        colors = create_base_color_scheme(
            seed, formula=formula, angle=angle, custom_colors=custom_colors, out_type=out_type
        )
        self._colors = MappingProxyType(colors)
        self._palettes = MappingProxyType(color_scheme_to_palettes(colors))
        self._tonal_palettes = MappingProxyType(color_scheme_to_tonal_palettes(colors))
        self._rules = MappingProxyType(
            {
                "light": merge_rules(self.light_role_rules, light_role_rule),
                "dark": merge_rules(self.dark_role_rules, dark_role_rule),
            }
        )

        self._modes = {}
        for mode in MODES:
            roles = create_color_scheme_roles(self._palettes, self._rules[mode], contrast_level)
            tonal = create_color_scheme_tonal(self._tonal_palettes, mode)
            self._modes[mode] = BrightnessScheme(MappingProxyType(roles), MappingProxyType(tonal))

    @property
    def seed(self):
        return self._seed

    @property
    def out_type(self):
        return self._out_type

    @property
    def contrast_level(self):
        return self._contrast_level

    @property
    def colors(self):
        """Base colors, key -> color."""
        return self._colors

    @property
    def palettes(self):
        """101-step role palettes, key -> Palette."""
        return self._palettes

    @property
    def tonal_palettes(self):
        """10-step tonal palettes, key -> Palette."""
        return self._tonal_palettes

    @property
    def rules(self):
        """Merged extraction rules per brightness mode."""
        return self._rules

    @property
    def light(self):
        return self._modes["light"]

    @property
    def dark(self):
        return self._modes["dark"]

    @property
    def light_roles(self):
        return self.light.roles

    @property
    def dark_roles(self):
        return self.dark.roles

    @property
    def light_tonal(self):
        return self.light.tonal

    @property
    def dark_tonal(self):
        return self.dark.tonal

    def mode(self, name):
        return self._modes[check_mode(name)]

    def tone(self, mode, key, tone):
        """Look up a single tonal color, e.g. ``tone("light", "primary", 3)``.

        Raises:
            PaletteRangeError: If tone is outside 1-10
            KeyError: If key is not a color of this scheme
        """
        if isinstance(tone, bool) or not isinstance(tone, int) or tone not in TONES:
            raise PaletteRangeError(f"Tone must be an integer from 1 to 10, got {tone!r}")
        if key not in self._colors:
            raise KeyError(key)
        return self.mode(mode).tonal[f"{key}-{tone}"]

    def __repr__(self):
        return f"Scheme(seed={self._seed!r}, out_type={self._out_type!r}, keys={list(self._colors)})"


def create_scheme(seed, **options):
    return Scheme(seed, **options)
