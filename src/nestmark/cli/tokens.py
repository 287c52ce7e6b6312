"""CLI command: nestmark tokens -- dump the token stream of a source file."""

from __future__ import annotations

from pathlib import Path

import click

from nestmark.config import NestmarkConfig
from nestmark.parser import tokenize


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default=NestmarkConfig.encoding, help="Encoding of the source file")
def tokens(source: str, encoding: str) -> None:
    """Print every token in SOURCE, one per line."""
    for token in tokenize(Path(source).read_text(encoding=encoding)):
        click.echo(str(token))
