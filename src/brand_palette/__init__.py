"""Brand Palette Engine Package.

This package derives a complete brand palette, color-theory harmonies and
WCAG-style contrast reports from a single seed color. All operations are
pure functions; applying results to a rendering surface is left to the
caller.
"""

from .errors import ColorError, InvalidColorFormat, OutOfRangeComponent, InvalidConfigValue
from .schema import (
    # Core models
    BrandPalette,
    ColorHarmony,
    ContrastResult,
    AccessibilityReport,
    HSLColor,

    # Theme models
    StoreTheme,
    ThemeColors,
    ThemeFonts,

    # Enums
    HarmonyType,
    ContrastLevel,
)
from .converter import (
    hex_to_hsl,
    hsl_to_hex,
    hex_to_rgb,
    rgb_to_hex,
    hue_to_hex,
    rotate_hue,
    validate_hex,
    is_valid_hex,
)
from .palette import generate_palette, NEUTRAL_LIGHTNESS, SEMANTIC_COLORS
from .harmony import generate_harmonies, get_harmony
from .contrast import (
    check_contrast,
    validate_accessibility,
    relative_luminance,
    meets_wcag_contrast,
    ContrastCheck,
    DEFAULT_CONTRAST_CHECKS,
)
from .theme import (
    apply_palette_to_theme,
    export_palette_as_style_properties,
    apply_style_properties,
    render_css_block,
    load_theme_file,
    StyleSurface,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ColorError",
    "InvalidColorFormat",
    "OutOfRangeComponent",
    "InvalidConfigValue",

    # Schema models
    "BrandPalette",
    "ColorHarmony",
    "ContrastResult",
    "AccessibilityReport",
    "HSLColor",
    "StoreTheme",
    "ThemeColors",
    "ThemeFonts",
    "HarmonyType",
    "ContrastLevel",

    # Conversion
    "hex_to_hsl",
    "hsl_to_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hue_to_hex",
    "rotate_hue",
    "validate_hex",
    "is_valid_hex",

    # Generation
    "generate_palette",
    "generate_harmonies",
    "get_harmony",
    "NEUTRAL_LIGHTNESS",
    "SEMANTIC_COLORS",

    # Contrast
    "check_contrast",
    "validate_accessibility",
    "relative_luminance",
    "meets_wcag_contrast",
    "ContrastCheck",
    "DEFAULT_CONTRAST_CHECKS",

    # Theme integration
    "apply_palette_to_theme",
    "export_palette_as_style_properties",
    "apply_style_properties",
    "render_css_block",
    "load_theme_file",
    "StyleSurface",
]
