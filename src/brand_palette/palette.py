"""Brand palette derivation from a single seed color."""

import logging
from typing import Dict

from .converter import hex_to_hsl, hsl_to_hex, rotate_hue
from .schema import BrandPalette

logger = logging.getLogger(__name__)

# Neutral stop -> lightness, independent of the seed
NEUTRAL_LIGHTNESS: Dict[int, int] = {
    50: 98,
    100: 95,
    200: 90,
    300: 80,
    400: 60,
    500: 40,
    600: 30,
    700: 20,
    800: 15,
    900: 10,
}

# Semantic colors stay the same for every palette
SEMANTIC_COLORS: Dict[str, str] = {
    'success': '#10b981',
    'warning': '#f59e0b',
    'error': '#ef4444',
    'info': '#3b82f6',
}

NEUTRAL_MAX_SATURATION = 20


def generate_neutral_scale(hue: float, saturation: float) -> Dict[int, str]:
    """Build the ten-stop neutral scale for a hue.

    Saturation is capped so the scale stays close to gray.
    """
    neutral_saturation = min(saturation, NEUTRAL_MAX_SATURATION)
    return {
        stop: hsl_to_hex(hue, neutral_saturation, lightness)
        for stop, lightness in NEUTRAL_LIGHTNESS.items()
    }


def generate_palette(seed_hex: str) -> BrandPalette:
    """Generate a complete brand palette from a seed color.

    Args:
        seed_hex: Seed color as '#RRGGBB'; it becomes the primary color

    Returns:
        BrandPalette with analogous secondary, complementary accent,
        neutral scale and fixed semantic colors

    Raises:
        InvalidColorFormat: If seed_hex is not a valid hex color
    """
    h, s, l = hex_to_hsl(seed_hex)

    # Analogous, slightly muted and darker
    secondary = hsl_to_hex(rotate_hue(h, 30), max(s - 10, 20), max(l - 10, 20))

    # Complementary, more saturated and lighter
    accent = hsl_to_hex(rotate_hue(h, 180), min(s + 20, 80), min(l + 20, 80))

    palette = BrandPalette(
        primary=seed_hex,
        secondary=secondary,
        accent=accent,
        neutral=generate_neutral_scale(h, s),
        **SEMANTIC_COLORS,
    )

    logger.debug(f"Generated palette for seed {seed_hex}: secondary={secondary}, accent={accent}")
    return palette
