import json

from ..color.conversion import to_hex, to_rgb
from ..scheme.scheme import MODES, check_mode, role_contrast_ratios


def rgb_channels(colors):
    """Build ``{key}Rgb -> "r, g, b"`` companions for a role or tonal map.

    CSS consumers use these with ``rgba(var(--primary-rgb), 0.5)``.
    """
    return {f"{key}Rgb": ", ".join(str(c) for c in to_rgb(color)) for key, color in colors.items()}


def scheme_to_dict(scheme, modes=MODES, include_rgb=False):
    """Convert a scheme to a JSON-ready dict with every color as hex.

    Args:
        scheme: The Scheme to export
        modes: Brightness modes to include
        include_rgb: Also add ``{role}Rgb`` channel strings to each role map

    Returns:
        dict: seed, base colors and a roles/tonal block per mode, plus
        ``_contrast`` metadata listing the lowest role pair ratio
    """
    data = {
        "seed": to_hex(scheme.seed),
        "colors": {key: to_hex(color) for key, color in scheme.colors.items()},
    }

    for mode in modes:
        brightness = scheme.mode(check_mode(mode))
        roles = {key: to_hex(color) for key, color in brightness.roles.items()}
        if include_rgb:
            roles.update(rgb_channels(brightness.roles))
        ratios = role_contrast_ratios(brightness.roles)
        lowest = min(ratios, key=ratios.get)
        data[mode] = {
            "roles": roles,
            "tonal": {key: to_hex(color) for key, color in brightness.tonal.items()},
            "_contrast": {
                "level": scheme.contrast_level,
                "lowest_role": lowest,
                "lowest_ratio": ratios[lowest],
            },
        }

    return data


def export_json(scheme, modes=MODES, include_rgb=False):
    """Export a scheme as JSON text.

    Returns:
        JSON string of the scheme data
    """
    return json.dumps(scheme_to_dict(scheme, modes, include_rgb), indent=2)
