"""Tests for the brand-palette command line."""

import json

import pytest
import yaml
from click.testing import CliRunner

from brand_palette.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, config_path):
    """Invoke the CLI against an isolated config file."""
    def _invoke(*args):
        return runner.invoke(main, ["--config", str(config_path), *args])
    return _invoke


class TestGenerateCommand:
    """Test palette generation output."""

    def test_table_output(self, invoke):
        result = invoke("generate", "#10b981")

        assert result.exit_code == 0
        assert "#10b981" in result.output
        assert "neutral-900" in result.output

    def test_json_output(self, invoke):
        result = invoke("generate", "#10b981", "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["primary"] == "#10b981"
        assert list(data["neutral"]) == ["50", "100", "200", "300", "400",
                                         "500", "600", "700", "800", "900"]
        assert data["info"] == "#3b82f6"

    def test_yaml_output(self, invoke):
        result = invoke("generate", "#10b981", "--format", "yaml")

        assert result.exit_code == 0
        assert yaml.safe_load(result.output)["primary"] == "#10b981"

    def test_default_seed_from_config(self, invoke, config_path):
        config_path.write_text("default_seed: '#3366cc'\n")

        result = invoke("generate", "--format", "json")

        assert result.exit_code == 0
        assert json.loads(result.output)["primary"] == "#3366cc"

    def test_invalid_seed(self, invoke):
        result = invoke("generate", "not-a-color")

        assert result.exit_code == 1
        assert "Error" in result.output


class TestHarmoniesCommand:
    """Test harmony output."""

    def test_json_output(self, invoke):
        result = invoke("harmonies", "#ff0000", "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["type"] for item in data] == [
            "monochromatic", "analogous", "complementary", "triadic", "tetradic"
        ]
        assert data[2]["colors"] == ["#ff0000", "#00ffff"]

    def test_table_output(self, invoke):
        result = invoke("harmonies", "#ff0000")

        assert result.exit_code == 0
        assert "complementary" in result.output
        assert "#00ffff" in result.output


class TestContrastCommand:
    """Test the contrast command."""

    def test_black_on_white(self, invoke):
        result = invoke("contrast", "#000000", "#ffffff")

        assert result.exit_code == 0
        assert "21.00:1" in result.output
        assert "AAA" in result.output

    def test_invalid_color(self, invoke):
        result = invoke("contrast", "#000000", "white")
        assert result.exit_code == 1


class TestValidateCommand:
    """Test accessibility validation exit codes."""

    def test_failing_palette(self, invoke):
        result = invoke("validate", "#ffff00")

        assert result.exit_code == 1
        assert "Primary color has poor contrast with white text" in result.output

    def test_passing_palette(self, invoke):
        result = invoke("validate", "#1e3a8a")

        assert result.exit_code == 0
        assert "passes accessibility checks" in result.output


class TestExportCommand:
    """Test style property export."""

    def test_css(self, invoke):
        result = invoke("export", "#10b981")

        assert result.exit_code == 0
        assert result.output.startswith(":root {")
        assert "  --color-primary: #10b981;" in result.output

    def test_json_with_prefix(self, invoke):
        result = invoke("export", "#10b981", "--format", "json", "--prefix", "--brand")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["--brand-primary"] == "#10b981"
        assert data["--brand-surface"] == "#ffffff"


class TestHueCommand:
    """Test the hue slider mapping."""

    def test_hue_zero(self, invoke):
        result = invoke("hue", "0")

        assert result.exit_code == 0
        assert result.output.strip() == "#d92626"

    def test_hue_is_stable(self, invoke):
        assert invoke("hue", "200").output == invoke("hue", "200").output

    def test_hue_out_of_range(self, invoke):
        result = invoke("hue", "400")
        assert result.exit_code == 2

    def test_hue_with_mistyped_config(self, invoke, config_path):
        """A string saturation in the config file is reported, not a crash."""
        config_path.write_text("hue_saturation: '70'\n")

        result = invoke("hue", "0")

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "hue_saturation" in result.output


class TestApplyCommand:
    """Test merging a palette into a theme file."""

    def test_apply_json(self, invoke, tmp_path):
        theme_file = tmp_path / "theme.yaml"
        theme_file.write_text(yaml.safe_dump({
            "id": "classic",
            "name": "Classic",
            "colors": {
                "primary": "#000000",
                "secondary": "#111111",
                "accent": "#222222",
                "background": "#ffffff",
                "surface": "#fafafa",
                "text": "#000000",
                "text_secondary": "#666666",
            },
            "layout": {"spacing": "tight"},
        }))

        result = invoke("apply", str(theme_file), "#10b981", "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["colors"]["primary"] == "#10b981"
        assert data["colors"]["surface"] == "#ffffff"
        assert data["layout"] == {"spacing": "tight"}

    def test_apply_invalid_theme(self, invoke, tmp_path):
        theme_file = tmp_path / "theme.yaml"
        theme_file.write_text("id: broken\n")

        result = invoke("apply", str(theme_file), "#10b981")

        assert result.exit_code == 1
        assert "Invalid theme file" in result.output

    def test_apply_unreadable_theme(self, invoke, tmp_path, monkeypatch):
        theme_file = tmp_path / "theme.yaml"
        theme_file.write_text("id: locked\n")

        def deny(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("brand_palette.cli.load_theme_file", deny)
        result = invoke("apply", str(theme_file), "#10b981")

        assert result.exit_code == 1
        assert "Invalid theme file" in result.output


class TestConfigCommands:
    """Test config show and init."""

    def test_show(self, invoke):
        result = invoke("config", "show")

        assert result.exit_code == 0
        assert "default_seed" in result.output

    def test_init(self, invoke, config_path):
        result = invoke("config", "init")

        assert result.exit_code == 0
        assert config_path.exists()

        again = invoke("config", "init")
        assert again.exit_code == 1

        forced = invoke("config", "init", "--force")
        assert forced.exit_code == 0

    def test_invalid_config_seed(self, invoke, config_path):
        config_path.write_text("default_seed: teal\n")

        result = invoke("generate")

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
