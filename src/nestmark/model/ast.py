"""Syntax tree model: Document, Selector, and StyleRuleset dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Document:
    """Root of a parsed source; children are kept in source order."""

    children: list[ASTNode] = field(default_factory=list)


@dataclass(frozen=True)
class Selector:
    """One nested markup node addressed by tag, id, and classes.

    Attributes:
        tag: Element name, if one was written.
        id: Last ``#id`` written on the selector.
        classes: ``.class`` names in source order; duplicates are kept.
        element: Text declared in parentheses, if any.
        children: Nested selectors and rulesets in source order.
    """

    tag: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    element: str | None = None
    children: list[ASTNode] = field(default_factory=list)

    @property
    def is_renderable(self) -> bool:
        """True if the selector has an element identity (tag, id, or class)."""
        return self.tag is not None or self.id is not None or bool(self.classes)

    @property
    def css_segment(self) -> str:
        """Render this selector as one compound CSS selector (``tag#id.a.b``)."""
        segment = self.tag or ""
        if self.id is not None:
            segment += f"#{self.id}"
        for cls in self.classes:
            segment += f".{cls}"
        return segment


@dataclass(frozen=True)
class StyleRuleset:
    """CSS declarations scoped to the selector chain enclosing them."""

    declarations: list[tuple[str, str]] = field(default_factory=list)


ASTNode = Union[Document, Selector, StyleRuleset]
