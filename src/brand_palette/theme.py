"""Theme integration for generated palettes.

Palettes can be merged into a store theme record or exported as a mapping of
style custom properties. Nothing here touches a live rendering surface on its
own: apply_style_properties only writes to the surface the caller hands in.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Protocol, Union

import yaml

from .schema import BrandPalette, StoreTheme, ThemeColors, StyleProperties

logger = logging.getLogger(__name__)

SURFACE_COLOR = '#ffffff'
DEFAULT_PREFIX = '--color'


class StyleSurface(Protocol):
    """Anything that accepts custom style properties (e.g. a document root)."""

    def set_property(self, name: str, value: str) -> None:
        ...


def apply_palette_to_theme(theme: StoreTheme, palette: BrandPalette) -> StoreTheme:
    """Return a copy of theme with its colors taken from palette.

    Background and text colors come from the neutral scale; the surface
    stays white. The original theme is not modified.
    """
    colors = ThemeColors(
        primary=palette.primary,
        secondary=palette.secondary,
        accent=palette.accent,
        background=palette.neutral[50],
        surface=SURFACE_COLOR,
        text=palette.neutral[900],
        text_secondary=palette.neutral[600],
    )
    return theme.model_copy(update={'colors': colors})


def export_palette_as_style_properties(palette: BrandPalette,
                                       prefix: str = DEFAULT_PREFIX) -> StyleProperties:
    """Export a palette as an ordered property-name -> color mapping.

    Args:
        palette: Palette to export
        prefix: Property name prefix, '--color' gives '--color-primary'

    Returns:
        Dictionary of custom property names to hex colors
    """
    properties: Dict[str, str] = {
        f"{prefix}-primary": palette.primary,
        f"{prefix}-secondary": palette.secondary,
        f"{prefix}-accent": palette.accent,
    }

    for stop, color in palette.neutral.items():
        properties[f"{prefix}-neutral-{stop}"] = color

    properties.update({
        f"{prefix}-success": palette.success,
        f"{prefix}-warning": palette.warning,
        f"{prefix}-error": palette.error,
        f"{prefix}-info": palette.info,
        f"{prefix}-background": palette.neutral[50],
        f"{prefix}-surface": SURFACE_COLOR,
        f"{prefix}-text": palette.neutral[900],
        f"{prefix}-text-secondary": palette.neutral[600],
    })
    return properties


def apply_style_properties(surface: StyleSurface, properties: Mapping[str, str]) -> None:
    """Write exported properties onto a caller-owned surface, in order."""
    for name, value in properties.items():
        surface.set_property(name, value)
    logger.debug(f"Applied {len(properties)} style properties")


def render_css_block(properties: Mapping[str, str], selector: str = ':root') -> str:
    """Render style properties as a CSS rule."""
    lines = [f"{selector} {{"]
    lines.extend(f"  {name}: {value};" for name, value in properties.items())
    lines.append("}")
    return "\n".join(lines)


def load_theme_file(path: Union[str, Path]) -> StoreTheme:
    """Load a single store theme from a YAML or JSON file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a valid theme
    """
    path = Path(path)
    content = path.read_text(encoding='utf-8')

    if path.suffix.lower() == '.json':
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)

    if not isinstance(data, dict):
        raise ValueError(f"Theme file {path} does not contain a mapping")

    logger.debug(f"Loaded theme '{data.get('id')}' from {path}")
    return StoreTheme(**data)
