"""Value models for the brand palette engine.

This module defines the Pydantic models returned by the engine: HSL colors,
brand palettes, color harmonies, contrast results, accessibility reports and
the store theme record that palettes can be merged into. All models are
frozen; operations always build new instances.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple
from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
)
from enum import Enum

from .converter import validate_hex, check_hsl_range, hsl_to_hex, hex_to_hsl

NEUTRAL_STOPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


class HarmonyType(str, Enum):
    """Color-theory harmony kinds"""
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"


class ContrastLevel(str, Enum):
    """WCAG-style contrast grades"""
    AAA = "AAA"
    AA = "AA"
    A = "A"
    FAIL = "FAIL"


class HSLColor(BaseModel):
    """A color as hue/saturation/lightness"""

    model_config = ConfigDict(frozen=True)

    hue: float = Field(..., description="Hue in degrees [0, 360)")
    saturation: float = Field(..., description="Saturation percentage [0, 100]")
    lightness: float = Field(..., description="Lightness percentage [0, 100]")

    @model_validator(mode='after')
    def validate_ranges(self):
        """Reject components outside their ranges instead of clamping them"""
        check_hsl_range(self.hue, self.saturation, self.lightness)
        return self

    @classmethod
    def from_hex(cls, hex_color: str) -> 'HSLColor':
        h, s, l = hex_to_hsl(hex_color)
        return cls(hue=h, saturation=s, lightness=l)

    def to_hex(self) -> str:
        return hsl_to_hex(self.hue, self.saturation, self.lightness)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.hue, self.saturation, self.lightness)


class BrandPalette(BaseModel):
    """Complete brand palette derived from one seed color"""

    model_config = ConfigDict(frozen=True)

    # Brand colors
    primary: str = Field(..., description="Seed color, unmodified")
    secondary: str = Field(..., description="Analogous brand color")
    accent: str = Field(..., description="Complementary accent color")

    # Desaturated tints and shades keyed by stop (50 lightest, 900 darkest)
    neutral: Mapping[int, str] = Field(..., description="Neutral scale")

    # Semantic status colors
    success: str = Field(..., description="Success color")
    warning: str = Field(..., description="Warning color")
    error: str = Field(..., description="Error color")
    info: str = Field(..., description="Informational color")

    @field_validator('primary', 'secondary', 'accent', 'success', 'warning', 'error', 'info',
                     mode='before')
    @classmethod
    def validate_color_format(cls, v):
        return validate_hex(v)

    @field_validator('neutral', mode='before')
    @classmethod
    def validate_neutral_scale(cls, v):
        """Require exactly the ten neutral stops, ordered light to dark"""
        if not isinstance(v, Mapping):
            raise ValueError("neutral scale must be a mapping of stop to color")
        stops = {int(stop): validate_hex(color) for stop, color in v.items()}
        if set(stops) != set(NEUTRAL_STOPS):
            raise ValueError(f"neutral scale must have stops {list(NEUTRAL_STOPS)}")
        return {stop: stops[stop] for stop in NEUTRAL_STOPS}

    @field_validator('neutral')
    @classmethod
    def freeze_neutral_scale(cls, v):
        # Read-only view so the scale cannot change after validation
        return MappingProxyType(dict(v))

    @field_serializer('neutral')
    def serialize_neutral_scale(self, neutral: Mapping[int, str]) -> Dict[int, str]:
        return dict(neutral)


class ColorHarmony(BaseModel):
    """A set of colors related by a fixed angle on the hue wheel"""

    model_config = ConfigDict(frozen=True)

    type: HarmonyType
    colors: Tuple[str, ...] = Field(..., min_length=2, max_length=4)
    description: str

    @field_validator('colors', mode='before')
    @classmethod
    def validate_colors(cls, v):
        return tuple(validate_hex(color) for color in v)


class ContrastResult(BaseModel):
    """Contrast ratio between two colors and its grade"""

    model_config = ConfigDict(frozen=True)

    ratio: float = Field(..., ge=1.0)
    level: ContrastLevel


class AccessibilityReport(BaseModel):
    """Outcome of running contrast checks over a palette"""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    issues: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


class ThemeColors(BaseModel):
    """Color slots of a store theme"""

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    text_secondary: str = Field(..., validation_alias=AliasChoices("text_secondary", "textSecondary"))

    @field_validator('*', mode='before')
    @classmethod
    def validate_color_format(cls, v):
        return validate_hex(v)


class ThemeFonts(BaseModel):
    """Font families of a store theme"""

    model_config = ConfigDict(frozen=True)

    heading: str = "Inter"
    body: str = "Inter"


class StoreTheme(BaseModel):
    """Store theme record that a brand palette can be merged into.

    Keys beyond the ones declared here (layout, features, ...) are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra='allow')

    id: str = Field(..., description="Theme identifier")
    name: str = Field(..., description="Human-readable theme name")
    description: str = ""
    colors: ThemeColors
    fonts: ThemeFonts = Field(default_factory=ThemeFonts)


# Type aliases for convenience
StyleProperties = Dict[str, str]
