"""Contrast ratio calculation and palette accessibility checks.

Ratios follow the WCAG relative luminance formula. The accessibility report
is driven by a sequence of ContrastCheck entries so new color pairs can be
checked without changing validate_accessibility's signature.
"""

import logging
from typing import Callable, List, NamedTuple, Sequence

from .converter import hex_to_rgb, validate_hex
from .schema import AccessibilityReport, BrandPalette, ContrastLevel, ContrastResult

logger = logging.getLogger(__name__)

WHITE = '#ffffff'

AAA_RATIO = 7.0
AA_RATIO = 4.5
A_RATIO = 3.0


def calculate_luminance(r: int, g: int, b: int) -> float:
    """Calculate relative luminance of an RGB color.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        Relative luminance 0.0-1.0
    """
    def gamma_correct(value: int) -> float:
        normalized = value / 255.0
        if normalized <= 0.03928:
            return normalized / 12.92
        return ((normalized + 0.055) / 1.055) ** 2.4

    return 0.2126 * gamma_correct(r) + 0.7152 * gamma_correct(g) + 0.0722 * gamma_correct(b)


def relative_luminance(hex_color: str) -> float:
    """Relative luminance of a hex color."""
    return calculate_luminance(*hex_to_rgb(hex_color))


def contrast_level(ratio: float) -> ContrastLevel:
    """Grade a contrast ratio."""
    if ratio >= AAA_RATIO:
        return ContrastLevel.AAA
    if ratio >= AA_RATIO:
        return ContrastLevel.AA
    if ratio >= A_RATIO:
        return ContrastLevel.A
    return ContrastLevel.FAIL


def check_contrast(color1: str, color2: str) -> ContrastResult:
    """Calculate the contrast ratio between two colors.

    The result does not depend on argument order.

    Raises:
        InvalidColorFormat: If either color is not a valid hex color
    """
    validate_hex(color1)
    validate_hex(color2)

    lum1 = relative_luminance(color1)
    lum2 = relative_luminance(color2)
    ratio = (max(lum1, lum2) + 0.05) / (min(lum1, lum2) + 0.05)

    return ContrastResult(ratio=ratio, level=contrast_level(ratio))


def meets_wcag_contrast(fg_color: str, bg_color: str, level: str = 'AA') -> bool:
    """Check if color combination meets WCAG contrast requirements.

    Args:
        fg_color: Foreground hex color
        bg_color: Background hex color
        level: 'AA' (4.5:1) or 'AAA' (7:1)
    """
    ratio = check_contrast(fg_color, bg_color).ratio

    if level == 'AAA':
        return ratio >= AAA_RATIO
    return ratio >= AA_RATIO


class ContrastCheck(NamedTuple):
    """A palette color pair that must not fail contrast."""
    name: str
    foreground: Callable[[BrandPalette], str]
    background: Callable[[BrandPalette], str]
    issue: str
    suggestion: str


DEFAULT_CONTRAST_CHECKS: Sequence[ContrastCheck] = (
    ContrastCheck(
        name='primary_on_white',
        foreground=lambda palette: palette.primary,
        background=lambda palette: WHITE,
        issue="Primary color has poor contrast with white text",
        suggestion="Consider using a darker shade of your primary color",
    ),
    ContrastCheck(
        name='text_on_background',
        foreground=lambda palette: palette.neutral[900],
        background=lambda palette: palette.neutral[50],
        issue="Text color has poor contrast with background",
        suggestion="Increase the contrast between text and background colors",
    ),
)


def validate_accessibility(palette: BrandPalette,
                           checks: Sequence[ContrastCheck] = DEFAULT_CONTRAST_CHECKS
                           ) -> AccessibilityReport:
    """Run contrast checks over a palette.

    A check fails when its pair grades FAIL (below 3:1).

    Args:
        palette: Palette to validate
        checks: Contrast checks to run, in report order

    Returns:
        AccessibilityReport listing one issue and one suggestion per failure
    """
    issues: List[str] = []
    suggestions: List[str] = []

    for check in checks:
        result = check_contrast(check.foreground(palette), check.background(palette))
        if result.level == ContrastLevel.FAIL:
            logger.debug(f"Contrast check '{check.name}' failed at {result.ratio:.2f}:1")
            issues.append(check.issue)
            suggestions.append(check.suggestion)

    return AccessibilityReport(
        is_valid=not issues,
        issues=issues,
        suggestions=suggestions,
    )
