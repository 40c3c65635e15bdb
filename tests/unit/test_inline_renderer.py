#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_inline_renderer.py
"""Unit tests for the inline text renderer.

Tests cover:
- Minimal nesting of overlapping formats
- Open order driven by upcoming runs
- Line breaks and links inside formatted runs
- Escaping of text content

"""

import pytest

from cardkit.constants import IS_BOLD, IS_CODE, IS_ITALIC, IS_UNDERLINE
from cardkit.nodes.elements import LineBreakNode, LinkNode, TextNode
from cardkit.renderers.text import render_inline_html


@pytest.mark.unit
class TestFormatNesting:
    """Test nesting of format tags across text runs."""

    def test_unformatted_text(self) -> None:
        assert render_inline_html([TextNode("Hello "), TextNode("world")]) == "Hello world"

    def test_single_format(self) -> None:
        assert render_inline_html([TextNode("Hello "), TextNode("world", IS_BOLD)]) == "Hello <strong>world</strong>"

    def test_overlapping_formats(self) -> None:
        nodes = [TextNode("a", IS_BOLD), TextNode("b", IS_BOLD | IS_ITALIC), TextNode("c", IS_ITALIC)]
        assert render_inline_html(nodes) == "<strong>a<em>b</em></strong><em>c</em>"

    def test_longer_lived_format_opens_first(self) -> None:
        nodes = [TextNode("a", IS_BOLD | IS_ITALIC), TextNode("b", IS_ITALIC)]
        assert render_inline_html(nodes) == "<em><strong>a</strong>b</em>"

    def test_formats_opened_together_use_map_order(self) -> None:
        assert render_inline_html([TextNode("x", IS_BOLD | IS_ITALIC | IS_UNDERLINE)]) == (
            "<strong><em><u>x</u></em></strong>"
        )

    def test_format_closes_before_plain_text(self) -> None:
        nodes = [TextNode("a", IS_CODE), TextNode(" b")]
        assert render_inline_html(nodes) == "<code>a</code> b"

    def test_shared_format_stays_open(self) -> None:
        nodes = [TextNode("a", IS_BOLD), TextNode("b", IS_BOLD)]
        assert render_inline_html(nodes) == "<strong>ab</strong>"

    def test_closing_outer_format_closes_inner_formats(self) -> None:
        nodes = [TextNode("a", IS_BOLD), TextNode("b", IS_BOLD | IS_ITALIC), TextNode("c", IS_ITALIC | IS_UNDERLINE)]
        assert render_inline_html(nodes) == "<strong>a<em>b</em></strong><em><u>c</u></em>"


@pytest.mark.unit
class TestInlineElements:
    """Test line breaks, links and escaping."""

    def test_line_break_inside_format(self) -> None:
        nodes = [TextNode("a", IS_BOLD), LineBreakNode(), TextNode("b", IS_BOLD)]
        assert render_inline_html(nodes) == "<strong>a<br>b</strong>"

    def test_link_with_formatted_children(self) -> None:
        link = LinkNode(url="https://example.com", children=[TextNode("here", IS_BOLD)])
        assert render_inline_html([TextNode("Go "), link]) == (
            'Go <a href="https://example.com"><strong>here</strong></a>'
        )

    def test_link_closes_open_formats(self) -> None:
        link = LinkNode(url="/x", children=[TextNode("link")])
        nodes = [TextNode("bold", IS_BOLD), link]
        assert render_inline_html(nodes) == '<strong>bold</strong><a href="/x">link</a>'

    def test_link_attributes(self) -> None:
        link = LinkNode(url="/x", rel="noopener", target="_blank", children=[TextNode("x")])
        assert render_inline_html([link]) == '<a href="/x" rel="noopener" target="_blank">x</a>'

    def test_link_without_url_has_no_href(self) -> None:
        link = LinkNode(url="", children=[TextNode("x")])
        assert render_inline_html([link]) == "<a>x</a>"

    def test_text_is_escaped(self) -> None:
        assert render_inline_html([TextNode("a < b & c")]) == "a &lt; b &amp; c"


@pytest.mark.unit
class TestTextNode:
    """Test the text node's format helpers and record."""

    def test_has_and_toggle_format(self) -> None:
        node = TextNode("x")
        assert node.has_format("bold") is False
        node.toggle_format("bold")
        assert node.has_format("bold") is True
        assert node.format == IS_BOLD

    def test_export_json(self) -> None:
        assert TextNode("x", IS_ITALIC).export_json() == {
            "detail": 0,
            "format": IS_ITALIC,
            "mode": "normal",
            "style": "",
            "text": "x",
            "type": "extended-text",
            "version": 1,
        }
