"""CLI command: nestmark inspect -- display the parsed tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestmark.config import NestmarkConfig
from nestmark.model.ast import ASTNode, Document, Selector
from nestmark.parser import ParsingError, parse


def _describe(node: ASTNode) -> str:
    if isinstance(node, Document):
        return "Document"
    if isinstance(node, Selector):
        parts = [f"Selector {node.css_segment or '(empty)'}"]
        if node.element is not None:
            parts.append(f'element="{node.element}"')
        return "  ".join(parts)
    decls = " ".join(f"{prop}: {value};" for prop, value in node.declarations)
    return f"StyleRuleset {{{decls}}}"


def _walk(tree: Document) -> dict[str, int]:
    """Echo one line per node, indented by depth; return counts per node type."""
    counts: dict[str, int] = {}
    stack: list[tuple[ASTNode, int]] = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        counts[type(node).__name__] = counts.get(type(node).__name__, 0) + 1
        click.echo("  " * depth + _describe(node))
        if isinstance(node, (Document, Selector)):
            stack.extend((child, depth + 1) for child in reversed(node.children))
    return counts


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default=NestmarkConfig.encoding, help="Encoding of the source file")
def inspect(source: str, encoding: str) -> None:
    """Parse SOURCE and display its tree.

    Shows one line per node, indented by depth, followed by node counts.
    """
    try:
        tree = parse(Path(source).read_text(encoding=encoding))
    except ParsingError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    counts = _walk(tree)
    click.echo()
    click.echo(
        f"Selectors: {counts.get('Selector', 0)}  "
        f"Rulesets: {counts.get('StyleRuleset', 0)}"
    )
