"""Pull-based lexer for nestmark source.

The lexer never fails: anything that is not whitespace, punctuation, or an
identifier is returned as a TEXT token and left for the parser to reject.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from nestmark.model.token import PUNCTUATION, Token, TokenKind

__all__ = ["Lexer", "tokenize"]


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char in "-_"


def _is_text_char(char: str) -> bool:
    return not char.isspace() and char not in PUNCTUATION


class Lexer:
    """Produce tokens on demand from a source string.

    ``clone()`` gives an independent cursor at the same position, which the
    parser uses to look ahead without consuming from its own stream.
    """

    def __init__(self, source: str, pos: int = 0) -> None:
        self._source = source
        self._pos = pos

    def clone(self) -> Lexer:
        return Lexer(self._source, self._pos)

    def next_token(self) -> Token | None:
        """Return the next token, or None once the input is exhausted."""
        self._skip_whitespace()
        if self._pos >= len(self._source):
            return None

        char = self._source[self._pos]
        self._pos += 1

        token = Token.punctuation(char)
        if token is not None:
            return token
        if char.isalpha():
            return Token(TokenKind.IDENTIFIER, self._read_while(_is_identifier_char))
        text = self._read_while(_is_text_char)
        return Token(TokenKind.TEXT, text.strip())

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._pos - 1
        end = self._pos
        while end < len(self._source) and predicate(self._source[end]):
            end += 1
        self._pos = end
        return self._source[start:end]

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._source[self._pos].isspace():
            self._pos += 1

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def tokenize(source: str) -> list[Token]:
    """Return every token in *source*."""
    return list(Lexer(source))
