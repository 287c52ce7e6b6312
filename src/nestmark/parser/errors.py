"""Parser error types."""

from __future__ import annotations

from nestmark.errors import NestmarkError
from nestmark.model.token import Token


class ParsingError(NestmarkError):
    """Raised when nestmark source cannot be parsed."""


class UnexpectedToken(ParsingError):
    """A token appeared where the grammar does not allow it."""

    def __init__(self, token: Token, expected: str | None = None):
        self.token = token
        self.expected = expected
        message = f"Unexpected token {token}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


class UnexpectedEndOfInput(ParsingError):
    """The source ended while a construct was still open."""

    def __init__(self, expected: str | None = None):
        self.expected = expected
        message = "Unexpected end of input"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


class MissingIdentifier(ParsingError):
    """A ``.`` or ``#`` marker was not followed by an identifier."""

    def __init__(self, marker: str, found: Token):
        self.marker = marker
        self.found = found
        super().__init__(f"Expected identifier after '{marker}', found {found}")
