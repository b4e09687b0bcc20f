"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from brand_palette.config import Config  # noqa: E402
from brand_palette.schema import StoreTheme  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config():
    """Drop any cached configuration between tests."""
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def config_path(tmp_path):
    """Path to a config file that does not exist yet."""
    return tmp_path / "config.yaml"


@pytest.fixture
def store_theme():
    """A store theme with extra layout keys."""
    return StoreTheme(
        id="modern-minimal",
        name="Modern Minimal",
        description="Clean, minimalist design",
        colors={
            "primary": "#000000",
            "secondary": "#ffffff",
            "accent": "#f5f5f5",
            "background": "#ffffff",
            "surface": "#fafafa",
            "text": "#000000",
            "textSecondary": "#666666",
        },
        fonts={"heading": "Inter", "body": "Inter"},
        layout={"headerStyle": "minimal", "spacing": "relaxed"},
    )
