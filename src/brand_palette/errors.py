"""Exceptions raised by the brand palette engine."""

from typing import Any


class ColorError(Exception):
    """Base class for color and palette settings errors."""


class InvalidColorFormat(ColorError):
    """Raised when a color string is not '#' followed by exactly 6 hex digits."""

    def __init__(self, value: Any, message: str = None):
        self.value = value
        super().__init__(message or f"Invalid hex color: {value!r} (expected #RRGGBB)")


class OutOfRangeComponent(ColorError):
    """Raised when a color component falls outside its allowed range."""

    def __init__(self, component: str, value: Any, valid_range: str):
        self.component = component
        self.value = value
        self.valid_range = valid_range
        super().__init__(f"{component} {value!r} is outside {valid_range}")


class InvalidConfigValue(ColorError):
    """Raised when a configuration setting has the wrong type or an unknown value."""

    def __init__(self, key: str, value: Any, expected: str):
        self.key = key
        self.value = value
        super().__init__(f"Config setting {key} = {value!r} must be {expected}")
