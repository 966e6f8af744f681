import sys

from ..color.contrast import target_ratio
from ..color.conversion import capitalize, round_half_up, to_hex, to_rgb
from ..scheme.rules import ROLE_STATES
from ..scheme.scheme import role_contrast_ratios


def ansi_code(color):
    """Nearest xterm-256 color index for a color."""
    r, g, b = to_rgb(color)
    r, g, b = (int(round_half_up(c / 255 * 5)) for c in (r, g, b))
    return 16 + r * 36 + g * 6 + b


def print_colors(colors, file=None):
    """Print each color of a role or tonal map as a colored terminal line."""
    file = file or sys.stdout
    for key, color in colors.items():
        hex_color = to_hex(color)
        print(f"\x1b[38;5;{ansi_code(color)}m{key:28} {hex_color}\x1b[0m", file=file)


def generate_contrast_report(roles, level="AA"):
    """Generate a readability report for every text/background role pair.

    Args:
        roles: Role map of one brightness mode
        level: "AA" or "AAA"

    Returns:
        tuple: (report text, list of (role, ratio, required) failures)
    """
    required = target_ratio(level)
    ratios = role_contrast_ratios(roles)

    report = []
    report.append("=" * 70)
    report.append("CONTRAST REPORT")
    report.append("=" * 70)
    report.append(f"Level: {level} (min: {required}:1)")

    surface_keys = [key for key in ratios if key not in _state_role_keys(roles)]
    groups = [(key.upper(), _group_keys(key, ratios)) for key in _base_keys(roles)]
    groups.append(("SURFACES", surface_keys))

    issues = []
    for group_name, keys in groups:
        if not keys:
            continue
        report.append(f"\n{group_name}")
        report.append("-" * 50)
        for key in keys:
            ratio = ratios[key]
            status = "✓" if ratio >= required else "✗ FAIL"
            if ratio < required:
                issues.append((key, ratio, required))
            report.append(f"  {key:24} {to_hex(roles[key])}  {ratio:5.2f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, achieved, needed in issues:
            report.append(f"  - {key}: {achieved:.2f}:1, needs {needed}:1")
    else:
        report.append("ALL ROLE PAIRS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def _base_keys(roles):
    """Color keys that carry the full set of state roles, in role order."""
    keys = []
    for role in roles:
        if not role.endswith("Container"):
            continue
        key = role[: -len("Container")]
        if f"{key}Hover" in roles and f"on{capitalize(key)}Container" in roles:
            keys.append(key)
    return keys


def _group_keys(key, ratios):
    return [f"{key}{suffix}" for suffix, _, _ in ROLE_STATES if f"{key}{suffix}" in ratios]


def _state_role_keys(roles):
    return {f"{key}{suffix}" for key in _base_keys(roles) for suffix, _, _ in ROLE_STATES}
