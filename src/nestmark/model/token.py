"""Lexical tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kind of a lexical token.

    Punctuation kinds use their source character as value so that a
    character can be mapped straight to its kind.
    """

    IDENTIFIER = "identifier"
    TEXT = "text"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COLON = ":"
    SEMICOLON = ";"
    DOT = "."
    HASH = "#"


PUNCTUATION: dict[str, TokenKind] = {
    kind.value: kind
    for kind in TokenKind
    if kind not in (TokenKind.IDENTIFIER, TokenKind.TEXT)
}


@dataclass(frozen=True)
class Token:
    """A single token. Only IDENTIFIER and TEXT tokens carry text."""

    kind: TokenKind
    text: str = ""

    @classmethod
    def punctuation(cls, char: str) -> Token | None:
        """Return the fixed token for a punctuation character, if it is one."""
        kind = PUNCTUATION.get(char)
        if kind is None:
            return None
        return cls(kind)

    @property
    def carries_text(self) -> bool:
        return self.kind in (TokenKind.IDENTIFIER, TokenKind.TEXT)

    def __str__(self) -> str:
        if self.carries_text:
            return f"{self.kind.name}({self.text})"
        return self.kind.name
