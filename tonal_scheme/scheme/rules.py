"""Palette extraction rules: which step of a 101-step palette feeds each role."""

from collections import namedtuple
from collections.abc import Mapping

from ..color.conversion import capitalize
from ..errors import ConfigError

SurfaceRules = namedtuple(
    "SurfaceRules",
    [
        "background",
        "on_background",
        "surface",
        "surface_variant",
        "on_surface",
        "on_surface_variant",
        "inverse_surface",
        "inverse_on_surface",
        "surface_dim",
        "surface_bright",
        "surface_container_lowest",
        "surface_container_low",
        "surface_container",
        "surface_container_high",
        "surface_container_highest",
        "outline",
        "outline_variant",
        "shadow",
        "scrim",
    ],
)

ExtractionRules = namedtuple(
    "ExtractionRules",
    [
        "source",
        "on_source",
        "source_hover",
        "on_source_hover",
        "source_active",
        "on_source_active",
        "source_disabled",
        "on_source_disabled",
        "container",
        "on_container",
        "base",
    ],
)

# Role names are camelCase in the output; rule fields are snake_case here.
SURFACE_ROLE_NAMES = {
    "background": "background",
    "on_background": "onBackground",
    "surface": "surface",
    "surface_variant": "surfaceVariant",
    "on_surface": "onSurface",
    "on_surface_variant": "onSurfaceVariant",
    "inverse_surface": "inverseSurface",
    "inverse_on_surface": "inverseOnSurface",
    "surface_dim": "surfaceDim",
    "surface_bright": "surfaceBright",
    "surface_container_lowest": "surfaceContainerLowest",
    "surface_container_low": "surfaceContainerLow",
    "surface_container": "surfaceContainer",
    "surface_container_high": "surfaceContainerHigh",
    "surface_container_highest": "surfaceContainerHighest",
    "outline": "outline",
    "outline_variant": "outlineVariant",
    "shadow": "shadow",
    "scrim": "scrim",
}

RULE_NAMES = {
    "source": "source",
    "on_source": "onSource",
    "source_hover": "sourceHover",
    "on_source_hover": "onSourceHover",
    "source_active": "sourceActive",
    "on_source_active": "onSourceActive",
    "source_disabled": "sourceDisabled",
    "on_source_disabled": "onSourceDisabled",
    "container": "container",
    "on_container": "onContainer",
    "base": "base",
}

# (role suffix, background rule, text rule)
ROLE_STATES = (
    ("", "source", "on_source"),
    ("Hover", "source_hover", "on_source_hover"),
    ("Active", "source_active", "on_source_active"),
    ("Disabled", "source_disabled", "on_source_disabled"),
    ("Container", "container", "on_container"),
)

DARK_ROLE_RULES = ExtractionRules(
    source=80,
    on_source=20,
    source_hover=90,
    on_source_hover=30,
    source_active=74,
    on_source_active=16,
    source_disabled=26,
    on_source_disabled=70,
    container=30,
    on_container=90,
    base=SurfaceRules(
        background=6,
        on_background=90,
        surface=6,
        surface_variant=30,
        on_surface=90,
        on_surface_variant=90,
        inverse_surface=90,
        inverse_on_surface=20,
        surface_dim=6,
        surface_bright=24,
        surface_container_lowest=4,
        surface_container_low=10,
        surface_container=12,
        surface_container_high=17,
        surface_container_highest=24,
        outline=40,
        outline_variant=20,
        shadow=94,
        scrim=0,
    ),
)

LIGHT_ROLE_RULES = ExtractionRules(
    source=40,
    on_source=100,
    source_hover=60,
    on_source_hover=100,
    source_active=30,
    on_source_active=90,
    source_disabled=36,
    on_source_disabled=80,
    container=90,
    on_container=30,
    base=SurfaceRules(
        background=98,
        on_background=10,
        surface=98,
        surface_variant=90,
        on_surface=10,
        on_surface_variant=30,
        inverse_surface=20,
        inverse_on_surface=95,
        surface_dim=87,
        surface_bright=98,
        surface_container_lowest=100,
        surface_container_low=94,
        surface_container=96,
        surface_container_high=92,
        surface_container_highest=90,
        outline=50,
        outline_variant=90,
        shadow=10,
        scrim=0,
    ),
)

DEFAULT_RULES = {"light": LIGHT_ROLE_RULES, "dark": DARK_ROLE_RULES}


def _field_lookup(names):
    """Accept both snake_case field names and camelCase role names."""
    lookup = {}
    for field, camel in names.items():
        lookup[field] = field
        lookup[camel] = field
    return lookup


_RULE_FIELDS = _field_lookup(RULE_NAMES)
_SURFACE_FIELDS = _field_lookup(SURFACE_ROLE_NAMES)


def _check_index(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        raise ConfigError(
            f"Extraction rule {name!r} must be an integer in [0, 100], got {value!r}",
            key=name,
            value=value,
        )
    return value


def _override(base, overrides, fields, label):
    changes = {}
    for key, value in overrides.items():
        if key not in fields:
            raise ConfigError(
                f"Unknown {label} {key!r}",
                key=key,
                value=value,
                recovery_hint=f"Valid names: {', '.join(sorted(set(fields.values())))}",
            )
        if value is None:
            continue
        changes[fields[key]] = value
    return base._replace(**changes)


def merge_rules(base, overrides=None):
    """Apply a sparse override mapping onto an extraction rule set.

    Top-level fields are replaced one by one; a nested ``base`` mapping is
    merged into the surface rules key by key. Keys may be given in
    snake_case (``on_source``) or camelCase (``onSource``); ``None`` values
    keep the default.

    Raises:
        ConfigError: On an unknown key or an index outside [0, 100]
    """
    if not overrides:
        return base
    if isinstance(overrides, ExtractionRules):
        overrides = overrides._asdict()
    if not isinstance(overrides, Mapping):
        raise ConfigError(
            "Role rule overrides must be a mapping",
            key="rules",
            value=overrides,
        )

    overrides = dict(overrides)
    surface = overrides.pop("base", None)
    merged = _override(base, overrides, _RULE_FIELDS, "extraction rule")
    for field in ExtractionRules._fields[:-1]:
        _check_index(RULE_NAMES[field], getattr(merged, field))

    if surface:
        if isinstance(surface, SurfaceRules):
            surface = surface._asdict()
        if not isinstance(surface, Mapping):
            raise ConfigError("Surface rule overrides must be a mapping", key="base", value=surface)
        surface_rules = _override(merged.base, surface, _SURFACE_FIELDS, "surface rule")
        for field in SurfaceRules._fields:
            _check_index(SURFACE_ROLE_NAMES[field], getattr(surface_rules, field))
        merged = merged._replace(base=surface_rules)
    return merged


def role_names(key):
    """Names of the ten state roles a color key expands to."""
    on_key = f"on{capitalize(key)}"
    return [f"{key}{suffix}" for suffix, _, _ in ROLE_STATES] + [
        f"{on_key}{suffix}" for suffix, _, _ in ROLE_STATES
    ]
