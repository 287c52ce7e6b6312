"""Tests for the nestmark parser."""

import logging

import pytest

from nestmark.model.ast import Document, Selector, StyleRuleset
from nestmark.model.token import Token, TokenKind
from nestmark.parser import (
    MissingIdentifier,
    ParsingError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    parse,
)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestDocument:
    def test_empty_source(self):
        assert parse("") == Document([])

    def test_whitespace_source(self):
        assert parse("  \n ") == Document([])

    def test_top_level_order_preserved(self):
        doc = parse("a {} b {} c {}")
        assert [child.tag for child in doc.children] == ["a", "b", "c"]

    def test_top_level_ruleset(self):
        doc = parse("color: red;")
        assert doc == Document([StyleRuleset([("color", "red")])])


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelector:
    def test_tag_only(self):
        assert parse("p {}").children == [Selector(tag="p")]

    def test_tag_id_classes_element(self):
        node = parse("div#a.b.c (hello world) {}").children[0]
        assert node == Selector(tag="div", id="a", classes=["b", "c"], element="hello world")

    def test_implicit_tag_with_class(self):
        node = parse(".note {}").children[0]
        assert node.tag is None
        assert node.classes == ["note"]

    def test_implicit_tag_with_id(self):
        node = parse("#main {}").children[0]
        assert node.tag is None
        assert node.id == "main"

    def test_tag_after_class(self):
        node = parse(".wide div {}").children[0]
        assert node.tag == "div"
        assert node.classes == ["wide"]

    def test_id_reassignment_keeps_last(self):
        node = parse("div#a#b {}").children[0]
        assert node.id == "b"

    def test_duplicate_classes_kept_in_order(self):
        node = parse("p.x.y.x {}").children[0]
        assert node.classes == ["x", "y", "x"]

    def test_dot_inside_content_is_rejected(self):
        with pytest.raises(UnexpectedToken):
            parse("p (Version 2.0) {}")

    def test_element_content_text_tokens(self):
        node = parse("p (costs 10$ today) {}").children[0]
        assert node.element == "costs 10$ today"

    def test_empty_parentheses_declare_empty_content(self):
        node = parse("p () {}").children[0]
        assert node.element == ""

    def test_no_parentheses_means_no_content(self):
        assert parse("p {}").children[0].element is None

    def test_nested_selectors(self):
        doc = parse("ul { li (one) {} li (two) {} }")
        ul = doc.children[0]
        assert [li.element for li in ul.children] == ["one", "two"]

    def test_deep_nesting(self):
        doc = parse("a { b { c { } } }")
        assert doc == Document(
            [Selector(tag="a", children=[Selector(tag="b", children=[Selector(tag="c")])])]
        )

    def test_thousand_levels_of_nesting(self):
        depth = 1000
        doc = parse("a { " * depth + "x: 1;" + " }" * depth)
        node = doc.children[0]
        levels = 1
        while isinstance(node.children[0], Selector):
            node = node.children[0]
            levels += 1
        assert levels == depth
        assert node.children[0].declarations == [("x", "1")]

    def test_thousand_levels_unterminated(self):
        with pytest.raises(UnexpectedEndOfInput):
            parse("a { " * 1000)


# ---------------------------------------------------------------------------
# Rulesets and disambiguation
# ---------------------------------------------------------------------------


class TestRuleset:
    def test_single_declaration(self):
        node = parse("p { color: red; }").children[0]
        assert node.children == [StyleRuleset([("color", "red")])]

    def test_declarations_in_order(self):
        node = parse("p { b: 2; a: 1; c: 3; }").children[0]
        assert node.children[0].declarations == [("b", "2"), ("a", "1"), ("c", "3")]

    def test_text_value(self):
        node = parse("h1 { font-size: 16px; }").children[0]
        assert node.children[0].declarations == [("font-size", "16px")]

    def test_ruleset_ends_at_selector(self):
        node = parse("p { color: red; span {} }").children[0]
        assert node.children == [StyleRuleset([("color", "red")]), Selector(tag="span")]

    def test_ruleset_ends_at_class_selector(self):
        node = parse("p { color: red; .x { color: blue; } }").children[0]
        assert isinstance(node.children[0], StyleRuleset)
        assert node.children[1] == Selector(
            classes=["x"], children=[StyleRuleset([("color", "blue")])]
        )

    def test_identifier_followed_by_brace_is_selector(self):
        node = parse("p { color {} }").children[0]
        assert node.children == [Selector(tag="color")]

    def test_selector_then_ruleset_makes_two_rulesets(self):
        node = parse("p { a: 1; span {} b: 2; }").children[0]
        assert node.children == [
            StyleRuleset([("a", "1")]),
            Selector(tag="span"),
            StyleRuleset([("b", "2")]),
        ]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_missing_identifier_after_dot(self):
        with pytest.raises(MissingIdentifier) as exc_info:
            parse(".{}")
        assert exc_info.value.marker == "."
        assert exc_info.value.found == Token(TokenKind.LEFT_BRACE)

    def test_missing_identifier_after_hash(self):
        with pytest.raises(MissingIdentifier):
            parse("div# {}")

    def test_unterminated_body(self):
        with pytest.raises(UnexpectedEndOfInput):
            parse("div {")

    def test_unterminated_content(self):
        with pytest.raises(UnexpectedEndOfInput):
            parse("div (hello")

    def test_selector_without_body(self):
        with pytest.raises(UnexpectedEndOfInput):
            parse("div.a")

    def test_dot_at_end_of_input(self):
        with pytest.raises(UnexpectedEndOfInput):
            parse("div.")

    def test_second_tag_rejected(self):
        with pytest.raises(UnexpectedToken) as exc_info:
            parse("div span {}")
        assert exc_info.value.token == Token(TokenKind.IDENTIFIER, "span")

    def test_stray_closing_brace(self):
        with pytest.raises(UnexpectedToken):
            parse("}")

    def test_leading_text(self):
        with pytest.raises(UnexpectedToken):
            parse("42 {}")

    def test_missing_semicolon(self):
        with pytest.raises(UnexpectedToken):
            parse("p { color: red }")

    def test_multi_token_value_rejected(self):
        with pytest.raises(UnexpectedToken):
            parse("p { border: 1px solid; }")

    def test_declaration_truncated(self):
        with pytest.raises(UnexpectedEndOfInput):
            parse("p { color:")

    def test_punctuation_in_content(self):
        with pytest.raises(UnexpectedToken):
            parse("p (a: b) {}")

    def test_all_errors_are_parsing_errors(self):
        for source in (".{}", "div {", "}"):
            with pytest.raises(ParsingError):
                parse(source)

    def test_same_input_same_error(self):
        messages = []
        for _ in range(2):
            with pytest.raises(ParsingError) as exc_info:
                parse("div span {}")
            messages.append(str(exc_info.value))
        assert messages[0] == messages[1]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_node_dispatch_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="nestmark"):
            parse("p { color: red; }")
        assert "parse_node" in caplog.text

    def test_nothing_logged_by_default(self, caplog):
        with caplog.at_level(logging.INFO, logger="nestmark"):
            parse("p { color: red; }")
        assert caplog.records == []
