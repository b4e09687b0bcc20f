"""Color space conversion between hex, RGB and HSL.

Hex colors are always '#RRGGBB' (case-insensitive on input, lowercase on
output). HSL triples use degrees for hue in [0, 360) and percentages for
saturation and lightness in [0, 100].
"""

import re
from typing import Any, Tuple

from .errors import InvalidColorFormat, OutOfRangeComponent

HEX_PATTERN = re.compile(r'#[0-9A-Fa-f]{6}')

# Default saturation/lightness for the hue slider mapping
HUE_SATURATION = 70
HUE_LIGHTNESS = 50


def is_valid_hex(value: Any) -> bool:
    """Return True if value is a '#RRGGBB' hex color string."""
    return isinstance(value, str) and HEX_PATTERN.fullmatch(value) is not None


def validate_hex(value: Any) -> str:
    """Validate a hex color string and return it unchanged.

    Raises:
        InvalidColorFormat: If value is not '#' followed by 6 hex digits
    """
    if not is_valid_hex(value):
        raise InvalidColorFormat(value)
    return value


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        InvalidColorFormat: If hex_color is not a valid hex color
    """
    validate_hex(hex_color)
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to a lowercase hex color string.

    Raises:
        OutOfRangeComponent: If a channel is not an integer in 0-255
    """
    for name, value in (('red', r), ('green', g), ('blue', b)):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise OutOfRangeComponent(name, value, "integers [0, 255]")
    return f"#{r:02x}{g:02x}{b:02x}"


def check_hsl_range(h: float, s: float, l: float) -> None:
    """Raise OutOfRangeComponent unless h in [0, 360) and s, l in [0, 100]."""
    if not 0 <= h < 360:
        raise OutOfRangeComponent('hue', h, "[0, 360)")
    if not 0 <= s <= 100:
        raise OutOfRangeComponent('saturation', s, "[0, 100]")
    if not 0 <= l <= 100:
        raise OutOfRangeComponent('lightness', l, "[0, 100]")


def hex_to_hsl(hex_color: str) -> Tuple[float, float, float]:
    """Convert a hex color to an HSL triple.

    Args:
        hex_color: Hex color string

    Returns:
        (hue, saturation, lightness) with hue in [0, 360) and
        saturation/lightness in [0, 100]

    Raises:
        InvalidColorFormat: If hex_color is not a valid hex color
    """
    r, g, b = (channel / 255.0 for channel in hex_to_rgb(hex_color))

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2
    hue = 0.0
    saturation = 0.0

    if max_c != min_c:
        delta = max_c - min_c
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)

        if max_c == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return ((hue * 360) % 360, saturation * 100, lightness * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
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


def _to_byte(channel: float) -> int:
    # Half-up rounding, channel is in [0, 1]
    return int(channel * 255 + 0.5)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert an HSL triple to a lowercase hex color string.

    Raises:
        OutOfRangeComponent: If a component is outside its range
    """
    check_hsl_range(h, s, l)

    h /= 360
    s /= 100
    l /= 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return rgb_to_hex(_to_byte(r), _to_byte(g), _to_byte(b))


def rotate_hue(hue: float, degrees: float) -> float:
    """Rotate a hue around the color wheel, keeping the result in [0, 360)."""
    return (hue + degrees + 360) % 360


def hue_to_hex(hue: float, saturation: float = HUE_SATURATION,
               lightness: float = HUE_LIGHTNESS) -> str:
    """Map a hue slider position to a color.

    A full-turn position (360) wraps to 0.
    """
    if not 0 <= hue <= 360:
        raise OutOfRangeComponent('hue', hue, "[0, 360]")
    return hsl_to_hex(hue % 360, saturation, lightness)
