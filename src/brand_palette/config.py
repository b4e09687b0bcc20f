"""Configuration management for the brand palette tools."""

import os
import logging
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .converter import validate_hex, check_hsl_range
from .errors import InvalidConfigValue

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('css', 'json')
OUTPUT_FORMATS = ('table', 'json', 'yaml')


@dataclass
class PaletteConfig:
    """Configuration model for brand palette tools."""

    # Seed used when a command is run without one
    default_seed: str = "#10b981"

    # Export settings
    style_prefix: str = "--color"
    export_format: str = "css"  # css, json

    # Display preferences
    output_format: str = "table"  # table, json, yaml

    # Hue slider mapping
    hue_saturation: float = 70
    hue_lightness: float = 50

    log_level: str = "WARNING"
    config_dir: str = "~/.brand_palette"

    def __post_init__(self):
        """Post-initialization setup.

        Raises:
            InvalidColorFormat: If default_seed is not a hex color
            InvalidConfigValue: If a setting has the wrong type or an unknown value
            OutOfRangeComponent: If hue_saturation or hue_lightness is outside [0, 100]
        """
        for key in ('style_prefix', 'log_level', 'config_dir'):
            value = getattr(self, key)
            if not isinstance(value, str) or not value:
                raise InvalidConfigValue(key, value, "a non-empty string")
        for key, choices in (('export_format', EXPORT_FORMATS), ('output_format', OUTPUT_FORMATS)):
            if getattr(self, key) not in choices:
                raise InvalidConfigValue(key, getattr(self, key), f"one of {', '.join(choices)}")
        for key in ('hue_saturation', 'hue_lightness'):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigValue(key, value, "a number")
        check_hsl_range(0, self.hue_saturation, self.hue_lightness)

        self.config_dir = os.path.expanduser(self.config_dir)
        validate_hex(self.default_seed)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        return yaml.dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "PaletteConfig":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise TypeError("Config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.config_dir) / "config.yaml"


class Config:
    """Configuration manager for brand palette tools."""

    _instance: Optional[PaletteConfig] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> PaletteConfig:
        """Load configuration from file, falling back to defaults.

        A missing file is not created. Invalid settings raise a ColorError
        rather than being replaced.
        """
        if cls._instance is not None and config_path is None:
            return cls._instance

        config = PaletteConfig()

        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path)

        if config_path.exists():
            try:
                config = PaletteConfig.from_yaml(config_path.read_text(encoding='utf-8'))
                logger.info(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        else:
            logger.debug(f"No config file at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: PaletteConfig, config_path: Optional[Path] = None) -> Path:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding='utf-8')
        logger.info(f"Configuration saved to {config_path}")
        return config_path

    @classmethod
    def get(cls) -> PaletteConfig:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> PaletteConfig:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> PaletteConfig:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> PaletteConfig:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: PaletteConfig, config_path: Optional[Path] = None) -> Path:
    """Save configuration to file."""
    return Config.save(config, config_path)
