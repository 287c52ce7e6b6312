"""HTML generation: walk a parsed tree and emit HTML with inline <style> blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nestmark.generator.errors import InvalidSelectorChain
from nestmark.model.ast import ASTNode, Document, Selector, StyleRuleset

__all__ = ["HtmlGenerator", "to_html"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Close:
    """Marks the end of a selector's children on the work stack."""

    closing_tag: str


class HtmlGenerator:
    """Depth-first tree walker.

    Pending nodes are kept on an explicit work stack, and the chain of open
    selectors is threaded through the walk: a selector is pushed before its
    children are visited and popped after. When a node raises, the chain is
    restored to the length it had on entry.
    """

    def __init__(self, default_tag: str = "div") -> None:
        self.default_tag = default_tag

    def generate(self, node: ASTNode, chain: list[ASTNode] | None = None) -> str:
        """Return the HTML for *node* nested inside the selectors in *chain*."""
        if chain is None:
            chain = []
        depth = len(chain)
        parts: list[str] = []
        pending: list[ASTNode | _Close] = [node]
        try:
            while pending:
                item = pending.pop()
                if isinstance(item, _Close):
                    chain.pop()
                    parts.append(item.closing_tag)
                elif isinstance(item, Document):
                    pending.extend(reversed(item.children))
                elif isinstance(item, Selector):
                    opening, closing = self._tags(item, len(chain))
                    parts.append(opening)
                    chain.append(item)
                    pending.append(_Close(closing))
                    pending.extend(reversed(item.children))
                elif isinstance(item, StyleRuleset):
                    parts.append(self._generate_ruleset(item, chain))
                else:
                    raise TypeError(f"Cannot generate HTML for {type(item).__name__}")
        finally:
            del chain[depth:]
        return "".join(parts)

    def _tags(self, node: Selector, depth: int) -> tuple[str, str]:
        """Return the opening and closing tag text; both empty if nothing is emitted."""
        emits_element = node.is_renderable and node.element is not None
        logger.debug(
            "selector %r depth=%d emits_element=%s",
            node.css_segment,
            depth,
            emits_element,
        )
        if not emits_element:
            return "", ""
        tag = node.tag or self.default_tag
        return f"<{tag}{self._attributes(node)}>{node.element or ''}", f"</{tag}>"

    @staticmethod
    def _attributes(node: Selector) -> str:
        attrs = ""
        if node.id is not None:
            attrs += f' id="{node.id}"'
        if node.classes:
            attrs += f' class="{" ".join(node.classes)}"'
        return attrs

    def _generate_ruleset(self, node: StyleRuleset, chain: list[ASTNode]) -> str:
        selector = self._css_selector(chain)
        rules = "".join(f"{prop}: {value};" for prop, value in node.declarations)
        return f"<style>{selector}{{{rules}}}</style>"

    @staticmethod
    def _css_selector(chain: list[ASTNode]) -> str:
        """Join the chain outermost first; every segment is followed by a space."""
        selector = ""
        for ancestor in chain:
            if not isinstance(ancestor, Selector):
                raise InvalidSelectorChain(ancestor)
            selector += f"{ancestor.css_segment} "
        return selector


def to_html(tree: ASTNode, *, default_tag: str = "div") -> str:
    """Generate HTML for a parsed tree.

    Raises a :class:`~nestmark.generator.errors.GenerationError` subclass if
    the tree is inconsistent.
    """
    return HtmlGenerator(default_tag=default_tag).generate(tree)
