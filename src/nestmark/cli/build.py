"""CLI command: nestmark build -- compile a source file to HTML."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestmark import compile_source
from nestmark.config import NestmarkConfig
from nestmark.generator import GenerationError
from nestmark.parser import ParsingError


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write HTML here instead of stdout")
@click.option("--default-tag", default=NestmarkConfig.default_tag, help="Tag for selectors written without one")
@click.option("--encoding", default=NestmarkConfig.encoding, help="Encoding of source and output files")
def build(source: str, output: str | None, default_tag: str, encoding: str) -> None:
    """Compile a nestmark SOURCE file into HTML with inline <style> blocks."""
    config = NestmarkConfig(default_tag=default_tag, encoding=encoding)
    src_path = Path(source)

    try:
        html = compile_source(src_path.read_text(encoding=config.encoding), config)
    except ParsingError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except GenerationError as exc:
        click.echo(f"Generation error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(html, encoding=config.encoding)
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(html)
