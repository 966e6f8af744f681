"""Conversions between HEX, RGB and HSL color representations.

Colors travel through the library as one of five tagged forms:

    "hex"  "#3463EB"
    "rgb"  "rgb(52, 99, 235)"
    "hsl"  "hsl(224.59, 82%, 56%)"
    "RGB"  RGB(r=52, g=99, b=235)
    "HSL"  HSL(h=224.59, s=0.82, l=0.56)

The tag of an incoming value is decided once by get_color_type/parse_color;
everything downstream works on HSL/RGB namedtuples and converts back with
to_tag.
"""

import math
import re
from collections import namedtuple
from collections.abc import Mapping

from ..errors import ConfigError, FormatError

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])

COLOR_TAGS = ("hex", "rgb", "hsl", "RGB", "HSL")

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")
_RGB_RE = re.compile(r"^(rgba?)\(([^()]*)\)$")
_HSL_RE = re.compile(
    r"^hsla?\(\s*(-?\d+(?:\.\d+)?)(?:deg)?\s*,\s*(\d+(?:\.\d+)?)%\s*,"
    r"\s*(\d+(?:\.\d+)?)%\s*(?:,\s*\d*(?:\.\d+)?\s*)?\)$"
)


def round_half_up(value, digits=0):
    """Round like a calculator does (0.5 always goes up)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value, low, high):
    return max(low, min(high, value))


def hex_to_rgb(hex_color):
    """Parse ``#RRGGBB`` or ``#RGB`` (``#`` optional) into an RGB tuple.

    Raises:
        FormatError: If the body is not exactly six hex digits after
            shorthand expansion.
    """
    if not isinstance(hex_color, str):
        raise FormatError(hex_color, "hex string")
    body = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(body) == 3:
        body = "".join(ch * 2 for ch in body)
    if not _HEX_RE.match(body):
        raise FormatError(hex_color, "#RRGGBB or #RGB")
    return RGB(int(body[0:2], 16), int(body[2:4], 16), int(body[4:6], 16))


def rgb_to_hex(r, g, b):
    r, g, b = (int(clamp(round_half_up(c), 0, 255)) for c in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(r, g, b):
    """Convert 0-255 channels to HSL with h in degrees and s/l in [0, 1].

    All three components are rounded to two decimals.
    """
    r, g, b = r / 255, g / 255, b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low

    h = 0.0
    s = 0.0
    l = (high + low) / 2

    if diff != 0:
        s = diff / (2 - high - low) if l > 0.5 else diff / (high + low)
        if high == r:
            h = (g - b) / diff + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / diff + 2
        else:
            h = (r - g) / diff + 4
        h *= 60

    h = round_half_up(h, 2)
    if h >= 360:
        h -= 360
    return HSL(h, round_half_up(s, 2), round_half_up(l, 2))


def _hue_to_channel(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l):
    """Convert HSL (h in degrees, s/l in [0, 1]) to integer RGB channels.

    Hue wraps into [0, 360) and saturation/lightness are clamped first.
    """
    h = h % 360 / 360
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(*(int(round_half_up(c * 255)) for c in (r, g, b)))


def hex_to_hsl(hex_color):
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def rgb_to_string(r, g, b):
    return f"rgb({int(r)}, {int(g)}, {int(b)})"


def _format_number(value):
    return f"{round_half_up(value, 2):g}"


def hsl_to_string(h, s, l):
    return f"hsl({_format_number(h)}, {_format_number(s * 100)}%, {_format_number(l * 100)}%)"


def rgb_string_to_rgb(rgb_string):
    """Parse ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``; alpha is dropped."""
    match = _RGB_RE.match(rgb_string.strip()) if isinstance(rgb_string, str) else None
    if not match:
        raise FormatError(rgb_string, "rgb(r, g, b) or rgba(r, g, b, a)")
    name, body = match.groups()
    parts = [part.strip() for part in body.split(",")]
    if len(parts) != (4 if name == "rgba" else 3):
        raise FormatError(rgb_string, "rgb(r, g, b) or rgba(r, g, b, a)")
    if not all(part.isdigit() for part in parts[:3]):
        raise FormatError(rgb_string, "integer channels")
    return RGB(*(int(part) for part in parts[:3]))


def hsl_string_to_hsl(hsl_string):
    """Parse ``hsl(h, s%, l%)`` into an HSL tuple with s/l in [0, 1]."""
    match = _HSL_RE.match(hsl_string.strip()) if isinstance(hsl_string, str) else None
    if not match:
        raise FormatError(hsl_string, "hsl(h, s%, l%)")
    h, s, l = (float(part) for part in match.groups())
    return normalize_hsl(h, s / 100, l / 100)


def normalize_hsl(h, s, l):
    """Wrap hue into [0, 360) and clamp saturation/lightness into [0, 1]."""
    return HSL(h % 360, clamp(s, 0.0, 1.0), clamp(l, 0.0, 1.0))


def capitalize(key):
    return key[:1].upper() + key[1:]


def get_color_type(color):
    """Detect the tag of an arbitrary color value.

    Strings are recognized by prefix (``#``, ``rgb``, ``hsl``); objects by
    their type or their ``h/s/l`` or ``r/g/b`` keys.

    Raises:
        FormatError: If the value matches none of the known shapes.
    """
    if isinstance(color, str):
        text = color.strip()
        if text.startswith("#"):
            return "hex"
        if text.startswith("rgb"):
            return "rgb"
        if text.startswith("hsl"):
            return "hsl"
        raise FormatError(color, "a color string starting with #, rgb or hsl")
    if isinstance(color, HSL):
        return "HSL"
    if isinstance(color, RGB):
        return "RGB"
    if isinstance(color, Mapping):
        if {"h", "s", "l"} <= color.keys():
            return "HSL"
        if {"r", "g", "b"} <= color.keys():
            return "RGB"
    raise FormatError(color, "a color string or an r/g/b or h/s/l mapping")


def _components(color, names):
    values = [color[name] for name in names] if isinstance(color, Mapping) else list(color)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FormatError(color, "numeric components")
    return values


def to_rgb(color, tag=None):
    """Convert any supported color value to an RGB tuple."""
    tag = tag or get_color_type(color)
    if tag == "hex":
        return hex_to_rgb(color.strip())
    if tag == "rgb":
        return rgb_string_to_rgb(color)
    if tag == "RGB":
        r, g, b = _components(color, "rgb")
        return RGB(*(int(clamp(round_half_up(c), 0, 255)) for c in (r, g, b)))
    return hsl_to_rgb(*to_hsl(color, tag))


def to_hsl(color, tag=None):
    """Convert any supported color value to a normalized HSL tuple."""
    tag = tag or get_color_type(color)
    if tag == "HSL":
        return normalize_hsl(*_components(color, "hsl"))
    if tag == "hsl":
        return hsl_string_to_hsl(color)
    return rgb_to_hsl(*to_rgb(color, tag))


def parse_color(color):
    """Decide the tag of ``color`` once and return ``(tag, HSL)``."""
    tag = get_color_type(color)
    return tag, to_hsl(color, tag)


def check_tag(tag):
    if tag not in COLOR_TAGS:
        raise ConfigError(
            f"Unknown color type {tag!r}",
            key="out_type",
            value=tag,
            recovery_hint=f"Use one of: {', '.join(COLOR_TAGS)}",
        )
    return tag


def to_tag(color, tag):
    """Convert any supported color value to the representation named by ``tag``."""
    check_tag(tag)
    if tag == "HSL":
        return to_hsl(color)
    if tag == "hsl":
        return hsl_to_string(*to_hsl(color))
    rgb = to_rgb(color)
    if tag == "hex":
        return rgb_to_hex(*rgb)
    if tag == "rgb":
        return rgb_to_string(*rgb)
    return rgb


def to_hex(color):
    return to_tag(color, "hex")
