"""Nestmark model layer -- public type re-exports."""

from nestmark.model.ast import ASTNode, Document, Selector, StyleRuleset
from nestmark.model.token import Token, TokenKind

__all__ = [
    # token
    "TokenKind",
    "Token",
    # ast
    "ASTNode",
    "Document",
    "Selector",
    "StyleRuleset",
]
