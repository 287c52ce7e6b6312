"""Parser turning nestmark source into a Document tree.

Grammar:
    document    := node*
    node        := selector | ruleset
    selector    := (identifier | ('.' identifier | '#' identifier)+) selpart* body
    selpart     := '.' identifier | '#' identifier | '(' content ')'
    content     := (identifier | text)*
    body        := '{' node* '}'
    ruleset     := declaration*
    declaration := identifier ':' (identifier | text) ';'

An identifier at the start of a node opens a selector unless the token after
it is a colon, in which case it starts a declaration of the current ruleset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from nestmark.model.ast import ASTNode, Document, Selector, StyleRuleset
from nestmark.model.token import Token, TokenKind
from nestmark.parser.errors import (
    MissingIdentifier,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from nestmark.parser.lexer import Lexer

__all__ = ["Parser", "parse"]

logger = logging.getLogger(__name__)

_VALUE_KINDS = (TokenKind.IDENTIFIER, TokenKind.TEXT)


@dataclass
class _OpenSelector:
    """A selector whose body is still being parsed."""

    tag: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    element: str | None = None
    children: list[ASTNode] = field(default_factory=list)

    def build(self) -> Selector:
        return Selector(
            tag=self.tag,
            id=self.id,
            classes=self.classes,
            element=self.element,
            children=self.children,
        )


class Parser:
    """Parse one source string. Instances are single use."""

    def __init__(self, source: str) -> None:
        self._lexer = Lexer(source)

    # ---- token stream ----

    def _next(self) -> Token | None:
        return self._lexer.next_token()

    def _peek(self, offset: int = 1) -> Token | None:
        """Return the token *offset* positions ahead without consuming it."""
        lookahead = self._lexer.clone()
        token = None
        for _ in range(offset):
            token = lookahead.next_token()
            if token is None:
                return None
        return token

    def _expect(self, kind: TokenKind, expected: str) -> Token:
        token = self._next()
        if token is None:
            raise UnexpectedEndOfInput(expected)
        if token.kind is not kind:
            raise UnexpectedToken(token, expected)
        return token

    def _starts_declaration(self) -> bool:
        first = self._peek()
        if first is None or first.kind is not TokenKind.IDENTIFIER:
            return False
        second = self._peek(2)
        return second is not None and second.kind is TokenKind.COLON

    # ---- structural ----

    def parse(self) -> Document:
        """Parse the whole source.

        Open selectors are kept on an explicit stack rather than the Python
        call stack, so nesting depth is bounded only by memory.
        """
        root: list[ASTNode] = []
        open_selectors: list[_OpenSelector] = []

        while True:
            children = open_selectors[-1].children if open_selectors else root
            token = self._peek()
            logger.debug("parse_node at %s depth=%d", token, len(open_selectors))
            if token is None:
                if open_selectors:
                    raise UnexpectedEndOfInput("'}'")
                return Document(root)
            if token.kind is TokenKind.RIGHT_BRACE and open_selectors:
                self._next()
                closed = open_selectors.pop().build()
                (open_selectors[-1].children if open_selectors else root).append(closed)
            elif token.kind in (TokenKind.DOT, TokenKind.HASH):
                open_selectors.append(self._parse_selector_head())
            elif token.kind is TokenKind.IDENTIFIER:
                if self._starts_declaration():
                    children.append(self._parse_ruleset())
                else:
                    open_selectors.append(self._parse_selector_head())
            else:
                raise UnexpectedToken(token, "selector or declaration")

    def _parse_selector_head(self) -> _OpenSelector:
        """Consume a selector up to and including its opening '{'."""
        selector = _OpenSelector()
        while True:
            token = self._next()
            if token is None:
                raise UnexpectedEndOfInput("'{'")
            if token.kind is TokenKind.IDENTIFIER:
                if selector.tag is not None:
                    raise UnexpectedToken(token, "'.', '#', '(' or '{'")
                selector.tag = token.text
            elif token.kind is TokenKind.DOT:
                selector.classes.append(self._parse_marked_identifier("."))
            elif token.kind is TokenKind.HASH:
                selector.id = self._parse_marked_identifier("#")
            elif token.kind is TokenKind.LEFT_PAREN:
                selector.element = self._parse_element_content()
            elif token.kind is TokenKind.LEFT_BRACE:
                return selector
            else:
                raise UnexpectedToken(token, "'.', '#', '(' or '{'")

    def _parse_marked_identifier(self, marker: str) -> str:
        token = self._next()
        if token is None:
            raise UnexpectedEndOfInput(f"identifier after '{marker}'")
        if token.kind is not TokenKind.IDENTIFIER:
            raise MissingIdentifier(marker, token)
        return token.text

    def _parse_element_content(self) -> str:
        words: list[str] = []
        while True:
            token = self._next()
            if token is None:
                raise UnexpectedEndOfInput("')'")
            if token.kind is TokenKind.RIGHT_PAREN:
                return " ".join(words)
            if token.kind not in _VALUE_KINDS:
                raise UnexpectedToken(token, "element content or ')'")
            words.append(token.text)

    def _parse_ruleset(self) -> StyleRuleset:
        # Stops before a new selector or the enclosing '}', which the parse loop consumes.
        declarations: list[tuple[str, str]] = []
        while self._starts_declaration():
            declarations.append(self._parse_declaration())
        return StyleRuleset(declarations)

    def _parse_declaration(self) -> tuple[str, str]:
        prop = self._expect(TokenKind.IDENTIFIER, "property name")
        self._expect(TokenKind.COLON, "':'")
        value = self._next()
        if value is None:
            raise UnexpectedEndOfInput("property value")
        if value.kind not in _VALUE_KINDS:
            raise UnexpectedToken(value, "property value")
        self._expect(TokenKind.SEMICOLON, "';'")
        return prop.text, value.text


def parse(source: str) -> Document:
    """Parse nestmark *source* into a Document.

    Raises a :class:`~nestmark.parser.errors.ParsingError` subclass on the
    first syntax error; no partial tree is returned.
    """
    return Parser(source).parse()
