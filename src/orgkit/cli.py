"""CLI interface for orgkit"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from orgkit.domain.colors import (
    darken,
    get_contrast_ratio,
    hex_to_rgb,
    lighten,
    random_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from orgkit.domain.text import capitalize as capitalize_text
from orgkit.domain.text import slugify as slugify_text
from orgkit.infrastructure.config.config_manager import ConfigManager, ConfigurationError

logger = logging.getLogger(__name__)

# Number of upcoming delays shown by retry-config
SCHEDULE_PREVIEW = 10


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .orgkit.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """orgkit - retry, color and text utilities"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("text")
def slugify(text: str):
    """Convert TEXT to a URL-friendly slug."""
    click.echo(slugify_text(text))


@cli.command()
@click.argument("text")
@click.option("--first-only", is_flag=True, help="Only capitalize the first letter, lower-casing the rest")
def capitalize(text: str, first_only: bool):
    """Capitalize the words in TEXT."""
    click.echo(capitalize_text(text, all_words=not first_only))


@cli.group()
def color():
    """Color conversion and contrast tools."""


@color.command()
@click.argument("hex_color")
@click.pass_context
def info(ctx, hex_color: str):
    """Show the RGB and HSL values of HEX_COLOR."""
    try:
        rgb = hex_to_rgb(hex_color)
    except ValueError as e:
        _die(f"{e}: {hex_color}", verbose=ctx.obj.get("verbose", False), exc=e)
    hsl = rgb_to_hsl(rgb)
    click.echo(f"hex: {rgb_to_hex(rgb)}")
    click.echo(f"rgb: {rgb.r}, {rgb.g}, {rgb.b}")
    click.echo(f"hsl: {hsl.h}, {hsl.s}%, {hsl.l}%")


@color.command(name="hex")
@click.argument("red", type=int)
@click.argument("green", type=int)
@click.argument("blue", type=int)
@click.pass_context
def to_hex(ctx, red: int, green: int, blue: int):
    """Convert RED GREEN BLUE channels (0-255) to a hex color."""
    try:
        click.echo(rgb_to_hex(red, green, blue))
    except ValueError as e:
        _die(str(e), verbose=ctx.obj.get("verbose", False), exc=e)


def _adjust(ctx, adjust, hex_color: str, percent: float) -> None:
    try:
        click.echo(adjust(hex_color, percent))
    except ValueError as e:
        _die(str(e), verbose=ctx.obj.get("verbose", False), exc=e)


@color.command(name="darken")
@click.argument("hex_color")
@click.argument("percent", type=float)
@click.pass_context
def darken_command(ctx, hex_color: str, percent: float):
    """Darken HEX_COLOR by PERCENT (0-100)."""
    _adjust(ctx, darken, hex_color, percent)


@color.command(name="lighten")
@click.argument("hex_color")
@click.argument("percent", type=float)
@click.pass_context
def lighten_command(ctx, hex_color: str, percent: float):
    """Lighten HEX_COLOR by PERCENT (0-100)."""
    _adjust(ctx, lighten, hex_color, percent)


@color.command()
@click.argument("foreground")
@click.argument("background")
@click.option(
    "--min-ratio",
    type=float,
    default=None,
    help="Exit with status 1 if the ratio is below this value (WCAG AA is 4.5)",
)
@click.pass_context
def contrast(ctx, foreground: str, background: str, min_ratio: Optional[float]):
    """Show the WCAG contrast ratio between FOREGROUND and BACKGROUND."""
    try:
        ratio = get_contrast_ratio(foreground, background)
    except ValueError as e:
        _die(str(e), verbose=ctx.obj.get("verbose", False), exc=e)

    click.echo(f"{ratio:.2f}:1")
    if min_ratio is not None and ratio < min_ratio:
        click.echo(f"Contrast below required {min_ratio:.2f}:1", err=True)
        sys.exit(1)


@color.command(name="random")
def random_color():
    """Print a random hex color."""
    click.echo(random_hex())


@cli.command(name="retry-config")
@click.option("--preset", type=str, help="Named preset from the config file")
@click.pass_context
def retry_config(ctx, preset: Optional[str]):
    """Show the resolved retry options and their delay schedule."""
    verbose = ctx.obj.get("verbose", False)
    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
        options = config_manager.get_retry_options(preset)
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)

    click.echo(f"Retry options{f' (preset: {preset})' if preset else ''}:")
    click.echo(f"  max_retries: {options.max_retries}")
    click.echo(f"  initial_delay: {options.initial_delay}s")
    click.echo(f"  max_delay: {options.max_delay}s")
    click.echo(f"  backoff_factor: {options.backoff_factor}")
    click.echo(f"  timeout: {f'{options.timeout}s' if options.timeout else 'none'}")

    delays = [options.delay_for(attempt) for attempt in range(min(options.max_retries, SCHEDULE_PREVIEW))]
    if delays:
        schedule = ", ".join(f"{delay:g}s" for delay in delays)
        more = " ..." if options.max_retries > SCHEDULE_PREVIEW else ""
        click.echo(f"  delays: {schedule}{more}")
    else:
        click.echo("  delays: none (no retries)")

    presets = config_manager.get_presets()
    if presets and not preset:
        click.echo(f"Available presets: {', '.join(sorted(presets))}")


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
