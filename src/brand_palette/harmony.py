"""Color-theory harmonies around a seed color."""

import logging
from typing import Dict, List

from .converter import hex_to_hsl, hsl_to_hex, rotate_hue
from .schema import ColorHarmony, HarmonyType

logger = logging.getLogger(__name__)

HARMONY_DESCRIPTIONS: Dict[HarmonyType, str] = {
    HarmonyType.MONOCHROMATIC: "Different shades of the same color",
    HarmonyType.ANALOGOUS: "Colors adjacent on the color wheel",
    HarmonyType.COMPLEMENTARY: "Colors opposite on the color wheel",
    HarmonyType.TRIADIC: "Three colors evenly spaced on the color wheel",
    HarmonyType.TETRADIC: "Four colors forming a rectangle on the color wheel",
}

# Lightness step and bounds for monochromatic shades
MONOCHROMATIC_STEP = 30
MONOCHROMATIC_MAX_LIGHTNESS = 90
MONOCHROMATIC_MIN_LIGHTNESS = 10


def _harmony(harmony_type: HarmonyType, colors: List[str]) -> ColorHarmony:
    return ColorHarmony(
        type=harmony_type,
        colors=colors,
        description=HARMONY_DESCRIPTIONS[harmony_type],
    )


def generate_harmonies(seed_hex: str) -> List[ColorHarmony]:
    """Generate the five standard harmonies for a seed color.

    The order is fixed: monochromatic, analogous, complementary, triadic,
    tetradic. The seed itself appears unmodified in every harmony.

    Raises:
        InvalidColorFormat: If seed_hex is not a valid hex color
    """
    h, s, l = hex_to_hsl(seed_hex)

    def shift(degrees: float) -> str:
        return hsl_to_hex(rotate_hue(h, degrees), s, l)

    harmonies = [
        _harmony(HarmonyType.MONOCHROMATIC, [
            hsl_to_hex(h, s, min(l + MONOCHROMATIC_STEP, MONOCHROMATIC_MAX_LIGHTNESS)),
            seed_hex,
            hsl_to_hex(h, s, max(l - MONOCHROMATIC_STEP, MONOCHROMATIC_MIN_LIGHTNESS)),
        ]),
        _harmony(HarmonyType.ANALOGOUS, [shift(-30), seed_hex, shift(30)]),
        _harmony(HarmonyType.COMPLEMENTARY, [seed_hex, shift(180)]),
        _harmony(HarmonyType.TRIADIC, [seed_hex, shift(120), shift(240)]),
        _harmony(HarmonyType.TETRADIC, [seed_hex, shift(90), shift(180), shift(270)]),
    ]

    logger.debug(f"Generated {len(harmonies)} harmonies for seed {seed_hex}")
    return harmonies


def get_harmony(seed_hex: str, harmony_type: HarmonyType) -> ColorHarmony:
    """Return a single harmony of the given type for a seed color."""
    harmony_type = HarmonyType(harmony_type)
    for harmony in generate_harmonies(seed_hex):
        if harmony.type == harmony_type:
            return harmony
    raise ValueError(f"Unknown harmony type: {harmony_type}")
