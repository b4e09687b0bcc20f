"""Command-line interface for brand palette generation.

This module provides commands to generate palettes and harmonies from a seed
color, check contrast, validate accessibility, export style properties and
merge a palette into a store theme file.
"""

import sys
import json
import logging
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import get_config, load_config, save_config, PaletteConfig
from .contrast import check_contrast, validate_accessibility
from .converter import hue_to_hex
from .errors import ColorError
from .harmony import generate_harmonies
from .palette import generate_palette
from .schema import ContrastLevel
from .theme import (
    apply_palette_to_theme,
    export_palette_as_style_properties,
    load_theme_file,
    render_css_block,
)


console = Console()

LEVEL_STYLES = {
    ContrastLevel.AAA: "green bold",
    ContrastLevel.AA: "green",
    ContrastLevel.A: "yellow",
    ContrastLevel.FAIL: "red bold",
}


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


def swatch(color: str) -> Text:
    """Solid block rendered in the given color."""
    return Text("      ", style=f"on {color}")


def dump(data, output_format: str) -> None:
    """Print machine-readable output without Rich markup."""
    if output_format == 'yaml':
        click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(data, indent=2))


def resolve_seed(ctx: click.Context, seed: Optional[str]) -> str:
    config: PaletteConfig = ctx.obj['config']
    return seed or config.default_seed


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, verbose):
    """Brand palette - derive palettes, harmonies and contrast reports from one color."""
    ctx.ensure_object(dict)

    try:
        config = load_config(config_path) if config_path else get_config()
    except ColorError as e:
        fail(f"Invalid configuration: {e}")

    level = logging.DEBUG if verbose else getattr(logging, str(config.log_level).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    ctx.obj['config'] = config
    ctx.obj['config_path'] = config_path
    ctx.obj['verbose'] = verbose


@main.command()
@click.argument("seed", required=False)
@click.option("--format", "output_format", type=click.Choice(['table', 'json', 'yaml']),
              help="Output format")
@click.pass_context
def generate(ctx, seed, output_format):
    """Generate a brand palette from SEED (e.g. '#10b981')."""
    seed = resolve_seed(ctx, seed)
    output_format = output_format or ctx.obj['config'].output_format

    try:
        palette = generate_palette(seed)
    except ColorError as e:
        fail(str(e))

    if output_format != 'table':
        dump(palette.model_dump(mode='json'), output_format)
        return

    table = Table(title=f"Brand Palette for {seed}", show_header=True, header_style="bold")
    table.add_column("Role", style="cyan", min_width=12)
    table.add_column("Color", style="default")
    table.add_column("Swatch")

    for role in ('primary', 'secondary', 'accent'):
        color = getattr(palette, role)
        table.add_row(role, color, swatch(color))

    for stop, color in palette.neutral.items():
        table.add_row(f"neutral-{stop}", color, swatch(color))

    for role in ('success', 'warning', 'error', 'info'):
        color = getattr(palette, role)
        table.add_row(role, color, swatch(color))

    console.print(table)


@main.command()
@click.argument("seed", required=False)
@click.option("--format", "output_format", type=click.Choice(['table', 'json', 'yaml']),
              help="Output format")
@click.pass_context
def harmonies(ctx, seed, output_format):
    """Show color-theory harmonies for SEED."""
    seed = resolve_seed(ctx, seed)
    output_format = output_format or ctx.obj['config'].output_format

    try:
        results = generate_harmonies(seed)
    except ColorError as e:
        fail(str(e))

    if output_format != 'table':
        dump([harmony.model_dump(mode='json') for harmony in results], output_format)
        return

    table = Table(title=f"Color Harmonies for {seed}", show_header=True, header_style="bold")
    table.add_column("Type", style="cyan", min_width=14)
    table.add_column("Colors")
    table.add_column("Description", style="dim")

    for harmony in results:
        swatches = Text()
        for color in harmony.colors:
            swatches.append("  ", style=f"on {color}")
            swatches.append(f" {color}  ")
        table.add_row(harmony.type.value, swatches, harmony.description)

    console.print(table)


@main.command()
@click.argument("foreground")
@click.argument("background")
def contrast(foreground, background):
    """Check the contrast ratio between FOREGROUND and BACKGROUND."""
    try:
        result = check_contrast(foreground, background)
    except ColorError as e:
        fail(str(e))

    style = LEVEL_STYLES[result.level]
    console.print(
        f"Contrast {foreground} / {background}: "
        f"[bold]{result.ratio:.2f}:1[/bold] [{style}]{result.level.value}[/{style}]"
    )


@main.command()
@click.argument("seed", required=False)
@click.pass_context
def validate(ctx, seed):
    """Validate accessibility of the palette generated from SEED.

    Exits with status 1 when any contrast check fails.
    """
    seed = resolve_seed(ctx, seed)

    try:
        report = validate_accessibility(generate_palette(seed))
    except ColorError as e:
        fail(str(e))

    if report.is_valid:
        console.print(f"[green]✅ Palette for {seed} passes accessibility checks[/green]")
        return

    body = Text()
    for issue in report.issues:
        body.append(f"⚠ {issue}\n", style="yellow")
    if report.suggestions:
        body.append("\nSuggestions:\n", style="bold")
        for suggestion in report.suggestions:
            body.append(f"• {suggestion}\n", style="cyan")

    console.print(Panel(body, title=f"Accessibility issues for {seed}", border_style="yellow"))
    sys.exit(1)


@main.command()
@click.argument("seed", required=False)
@click.option("--format", "output_format", type=click.Choice(['css', 'json']),
              help="Export format")
@click.option("--prefix", help="Custom property prefix (default from config)")
@click.option("--selector", default=":root", show_default=True, help="CSS selector")
@click.pass_context
def export(ctx, seed, output_format, prefix, selector):
    """Export the palette for SEED as style custom properties."""
    config: PaletteConfig = ctx.obj['config']
    seed = resolve_seed(ctx, seed)
    output_format = output_format or config.export_format
    prefix = prefix or config.style_prefix

    try:
        properties = export_palette_as_style_properties(generate_palette(seed), prefix)
    except ColorError as e:
        fail(str(e))

    if output_format == 'css':
        click.echo(render_css_block(properties, selector))
    else:
        dump(properties, 'json')


@main.command()
@click.argument("degrees", type=click.FloatRange(0, 360))
@click.pass_context
def hue(ctx, degrees):
    """Convert a hue slider position (0-360) to a hex color."""
    config: PaletteConfig = ctx.obj['config']

    try:
        color = hue_to_hex(degrees, config.hue_saturation, config.hue_lightness)
    except ColorError as e:
        fail(str(e))

    click.echo(color)


@main.command()
@click.argument("theme_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("seed", required=False)
@click.option("--format", "output_format", type=click.Choice(['yaml', 'json']), default='yaml',
              show_default=True, help="Output format")
@click.pass_context
def apply(ctx, theme_file, seed, output_format):
    """Merge the palette for SEED into THEME_FILE and print the new theme."""
    seed = resolve_seed(ctx, seed)

    try:
        theme = load_theme_file(theme_file)
        themed = apply_palette_to_theme(theme, generate_palette(seed))
    except ColorError as e:
        fail(str(e))
    except (OSError, ValueError, yaml.YAMLError) as e:
        fail(f"Invalid theme file {theme_file}: {e}")

    dump(themed.model_dump(mode='json'), output_format)


@main.group()
def config():
    """Show or create the configuration file."""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Print the active configuration."""
    click.echo(ctx.obj['config'].to_yaml(), nl=False)


@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(ctx, force):
    """Write a default configuration file."""
    config_obj = PaletteConfig()
    config_path = ctx.obj['config_path'] or config_obj.get_config_path()

    if Path(config_path).exists() and not force:
        fail(f"Config file already exists at {config_path} (use --force to overwrite)")

    path = save_config(config_obj, config_path)
    console.print(f"[green]Created configuration at {escape(str(path))}[/green]")


if __name__ == "__main__":
    main()
