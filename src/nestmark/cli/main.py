"""Nestmark CLI entry point: Click group with subcommands."""

import logging

import click

from nestmark import __version__
from nestmark.config import NestmarkConfig

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="nestmark")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=NestmarkConfig.log_level,
    help="Level for nestmark's own loggers",
)
@click.option("--verbose", "-v", is_flag=True, help="Shortcut for --log-level DEBUG")
def cli(log_level: str, verbose: bool) -> None:
    """Nestmark - compile nested selector markup into HTML with inline CSS."""
    config = NestmarkConfig(log_level="DEBUG" if verbose else log_level.upper())
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("nestmark").setLevel(config.log_level)


# Import and register subcommands
from nestmark.cli.build import build  # noqa: E402
from nestmark.cli.tokens import tokens  # noqa: E402
from nestmark.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(tokens)
cli.add_command(inspect)
