"""Nestmark - compile nested selector markup into HTML with inline CSS."""

from __future__ import annotations

from nestmark.config import NestmarkConfig
from nestmark.errors import NestmarkError
from nestmark.generator import GenerationError, InvalidSelectorChain, to_html
from nestmark.model import Document, Selector, StyleRuleset, Token, TokenKind
from nestmark.parser import (
    MissingIdentifier,
    ParsingError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    parse,
)

__version__ = "0.1.0"


def compile_source(source: str, config: NestmarkConfig | None = None) -> str:
    """Parse *source* and return the generated HTML."""
    config = config or NestmarkConfig()
    return to_html(parse(source), default_tag=config.default_tag)


__all__ = [
    "__version__",
    "compile_source",
    "parse",
    "to_html",
    "NestmarkConfig",
    "Document",
    "Selector",
    "StyleRuleset",
    "Token",
    "TokenKind",
    "NestmarkError",
    "ParsingError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "MissingIdentifier",
    "GenerationError",
    "InvalidSelectorChain",
]
