from nestmark.parser.errors import (
    MissingIdentifier,
    ParsingError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from nestmark.parser.lexer import Lexer, tokenize
from nestmark.parser.parser import Parser, parse

__all__ = [
    "parse",
    "Parser",
    "Lexer",
    "tokenize",
    "ParsingError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "MissingIdentifier",
]
