"""Convert colors for smart lights from the command line.

This uses click for the cli interface. To see the help message(s), run:
    huecolor --help
    huecolor to-xy --help

The light model can be given with --model or through the HUECOLOR_MODEL
environment variable. Unknown models use the default (full) gamut.
"""
from __future__ import annotations

import logging

import click
import colorlog

from . import __version__
from .color import hsl_to_xyy, rgb_to_xyy, xyy_to_hsl, xyy_to_rgb
from .exceptions import HueColorException
from .gamut import get_gamut

LOG = colorlog.getLogger("huecolor")
LOG.addHandler(logging.NullHandler())

# context for -h/--help usage with click
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

BYTE = click.IntRange(0, 255)

model_option = click.option(
    "-m",
    "--model",
    envvar="HUECOLOR_MODEL",
    default="",
    show_envvar=True,
    help="Model identifier of the light, e.g. LCT001.",
)


def setup_logger(verbose: int) -> None:
    """Logger setup."""
    if not any(isinstance(h, colorlog.StreamHandler) for h in LOG.handlers):
        handler = colorlog.StreamHandler()
        handler.setFormatter(
            colorlog.ColoredFormatter(
                "%(log_color)s[%(levelname)-8s] %(name)s: %(message)s"
            )
        )
        LOG.addHandler(handler)
    if verbose == 0:
        LOG.setLevel(logging.WARNING)
    elif verbose == 1:
        LOG.setLevel(logging.INFO)
    else:
        LOG.setLevel(logging.DEBUG)


def _format(values) -> str:
    return " ".join(
        f"{value:.6g}" if isinstance(value, float) else str(value)
        for value in values
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Print log messages. Use -v for info and -vv for debug messages.",
)
def cli(verbose: int) -> None:
    """Convert between RGB, HSL and the xy + brightness used by lights."""
    setup_logger(verbose)


@cli.command(name="gamut", context_settings=CONTEXT_SETTINGS)
@click.argument("model")
def show_gamut(model: str) -> None:
    """Print the gamut used by a light model."""
    gamut = get_gamut(model)
    click.echo(f"Gamut {gamut.name}")
    for name, vertex in zip(("red", "green", "blue"), gamut.vertices):
        click.echo(f"  {name:<5} {_format(vertex)}")


@cli.command(name="to-xy", context_settings=CONTEXT_SETTINGS)
@model_option
@click.argument("red", type=BYTE)
@click.argument("green", type=BYTE)
@click.argument("blue", type=BYTE)
def to_xy(model: str, red: int, green: int, blue: int) -> None:
    """Print the x, y and brightness for an RGB color."""
    gamut = get_gamut(model)
    LOG.info("Using gamut %s for model %r", gamut.name, model)
    click.echo(_format(rgb_to_xyy(gamut, red, green, blue)))


@cli.command(name="to-rgb", context_settings=CONTEXT_SETTINGS)
@model_option
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.argument("brightness", type=BYTE)
def to_rgb(model: str, x: float, y: float, brightness: int) -> None:
    """Print the RGB color for an x, y and brightness."""
    gamut = get_gamut(model)
    LOG.info("Using gamut %s for model %r", gamut.name, model)
    try:
        click.echo(_format(xyy_to_rgb(gamut, x, y, brightness)))
    except (HueColorException, ValueError) as exc:
        raise click.BadParameter(str(exc)) from exc


@cli.command(name="to-hsl", context_settings=CONTEXT_SETTINGS)
@model_option
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.argument("brightness", type=BYTE)
def to_hsl(model: str, x: float, y: float, brightness: int) -> None:
    """Print the HSL color for an x, y and brightness."""
    gamut = get_gamut(model)
    LOG.info("Using gamut %s for model %r", gamut.name, model)
    try:
        click.echo(_format(xyy_to_hsl(gamut, x, y, brightness)))
    except (HueColorException, ValueError) as exc:
        raise click.BadParameter(str(exc)) from exc


@cli.command(name="from-hsl", context_settings=CONTEXT_SETTINGS)
@model_option
@click.argument("hue", type=float)
@click.argument("saturation", type=click.FloatRange(0.0, 1.0))
@click.argument("lightness", type=click.FloatRange(0.0, 1.0))
def from_hsl(
    model: str, hue: float, saturation: float, lightness: float
) -> None:
    """Print the x, y and brightness for an HSL color."""
    gamut = get_gamut(model)
    LOG.info("Using gamut %s for model %r", gamut.name, model)
    click.echo(_format(hsl_to_xyy(gamut, hue, saturation, lightness)))


# Run the script
if __name__ == "__main__":
    # pylint: disable= no-value-for-parameter
    cli()
