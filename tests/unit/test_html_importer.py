#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_importer.py
"""Unit tests for HtmlImporter.

Tests cover:
- Generic blocks, inline formats and links
- Cards claimed from HTML and blocks lifted out of paragraphs
- Word/Google Docs span styles and ARIA headings
- Blockquote and pull quote handling
- Strict mode errors

"""

import pytest

from cardkit.constants import IS_BOLD, IS_ITALIC, IS_STRIKETHROUGH
from cardkit.exceptions import ParsingError
from cardkit.nodes.elements import (
    AsideNode,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ParagraphNode,
    QuoteNode,
    TextNode,
)
from cardkit.options import ImportOptions
from cardkit.parsers.html import HtmlImporter, html_to_root


def _types(root) -> list[str]:
    return [child.node_type for child in root.children]


@pytest.mark.unit
class TestGenericBlocks:
    """Test import of paragraphs, headings and inline content."""

    def test_paragraph_with_bold_text(self) -> None:
        root = html_to_root("<p>Hello <strong>world</strong></p><hr>")
        assert _types(root) == ["paragraph", "horizontalrule"]
        paragraph = root.children[0]
        assert [(child.text, child.format) for child in paragraph.children] == [("Hello ", 0), ("world", IS_BOLD)]

    def test_nested_formats_combine(self) -> None:
        root = html_to_root("<p><em><b>both</b></em></p>")
        assert root.children[0].children[0].format == IS_BOLD | IS_ITALIC

    def test_top_level_text_is_wrapped_in_paragraph(self) -> None:
        root = html_to_root("Just text")
        assert _types(root) == ["paragraph"]
        assert root.children[0].get_text_content() == "Just text"

    def test_unknown_containers_are_unwrapped(self) -> None:
        root = html_to_root("<div><section><p>One</p></section><p>Two</p></div>")
        assert _types(root) == ["paragraph", "paragraph"]
        assert [child.get_text_content() for child in root.children] == ["One", "Two"]

    def test_whitespace_between_blocks_is_dropped(self) -> None:
        root = html_to_root("<p>One</p>\n  \n<p>Two</p>")
        assert _types(root) == ["paragraph", "paragraph"]

    def test_whitespace_is_collapsed(self) -> None:
        root = html_to_root("<p>  Hello\n   world  </p>")
        assert root.children[0].get_text_content() == "Hello world"

    def test_headings(self) -> None:
        root = html_to_root("<h2>Title</h2><h4>Sub</h4>")
        assert [child.tag for child in root.children] == ["h2", "h4"]
        assert all(isinstance(child, HeadingNode) for child in root.children)

    def test_aria_heading_paragraph(self) -> None:
        root = html_to_root('<p role="heading" aria-level="3">Title</p>')
        assert isinstance(root.children[0], HeadingNode)
        assert root.children[0].tag == "h3"

    def test_aria_heading_with_invalid_level_is_a_paragraph(self) -> None:
        root = html_to_root('<p role="heading" aria-level="9">Title</p>')
        assert isinstance(root.children[0], ParagraphNode)

    def test_link(self) -> None:
        root = html_to_root('<p>See <a href="https://example.com" rel="noopener">this</a></p>')
        link = root.children[0].children[1]
        assert isinstance(link, LinkNode)
        assert link.url == "https://example.com"
        assert link.rel == "noopener"
        assert link.get_text_content() == "this"

    def test_empty_anchor_is_dropped(self) -> None:
        root = html_to_root('<p>Text<a href="/x"></a></p>')
        assert [type(child) for child in root.children[0].children] == [TextNode]

    def test_line_break(self) -> None:
        root = html_to_root("<p>a<br>b</p>")
        assert [type(child) for child in root.children[0].children] == [TextNode, LineBreakNode, TextNode]

    def test_scripts_are_skipped(self) -> None:
        root = html_to_root("<script>alert(1)</script><p>Safe</p>")
        assert _types(root) == ["paragraph"]


@pytest.mark.unit
class TestSpanFormats:
    """Test formats expressed by span styles and classes."""

    def test_bold_style(self) -> None:
        root = html_to_root('<p><span style="font-weight: 700">bold</span></p>')
        assert root.children[0].children[0].format == IS_BOLD

    def test_italic_style(self) -> None:
        root = html_to_root('<p><span style="font-style:italic">it</span></p>')
        assert root.children[0].children[0].format == IS_ITALIC

    def test_line_through_style(self) -> None:
        root = html_to_root('<p><span style="text-decoration: line-through">gone</span></p>')
        assert root.children[0].children[0].format == IS_STRIKETHROUGH

    def test_google_docs_normal_weight_wrapper(self) -> None:
        root = html_to_root('<b style="font-weight:normal;"><p>plain</p></b>')
        assert root.children[0].children[0].format == 0


@pytest.mark.unit
class TestQuotes:
    """Test blockquote and pull quote import."""

    def test_blockquote_paragraphs_are_merged(self) -> None:
        root = html_to_root("<blockquote><p>First</p><p>Second</p></blockquote>")
        quote = root.children[0]
        assert isinstance(quote, QuoteNode)
        assert [type(child) for child in quote.children] == [TextNode, LineBreakNode, LineBreakNode, TextNode]

    def test_pull_quote_becomes_aside(self) -> None:
        root = html_to_root('<blockquote class="kg-blockquote-alt">Pulled</blockquote>')
        assert isinstance(root.children[0], AsideNode)
        assert root.children[0].get_text_content() == "Pulled"


@pytest.mark.unit
class TestCardsInDocuments:
    """Test cards claimed from HTML while walking a document."""

    def test_image_inside_paragraph_is_lifted_out(self) -> None:
        root = html_to_root('<p>Before <img src="/content/images/a.jpg"> after</p>')
        assert _types(root) == ["paragraph", "image", "paragraph"]
        assert root.children[0].get_text_content() == "Before"
        assert root.children[2].get_text_content() == "after"

    def test_code_block(self) -> None:
        root = html_to_root('<pre><code class="language-python">print(1)</code></pre>')
        assert _types(root) == ["codeblock"]
        assert root.children[0].code == "print(1)"
        assert root.children[0].language == "python"

    def test_html_card_comment_block(self) -> None:
        root = html_to_root("<!--kg-card-begin: html--><div>Raw</div><!--kg-card-end: html--><p>After</p>")
        assert _types(root) == ["html", "paragraph"]
        assert root.children[0].html == "<div>Raw</div>"

    def test_callout_card(self) -> None:
        html = (
            '<div class="kg-card kg-callout-card kg-callout-card-grey">'
            '<div class="kg-callout-emoji">💡</div><div class="kg-callout-text">Note <b>this</b></div></div>'
        )
        root = html_to_root(html)
        callout = root.children[0]
        assert callout.node_type == "callout"
        assert callout.calloutEmoji == "💡"
        assert callout.calloutText == "Note <b>this</b>"
        assert callout.backgroundColor == "grey"


@pytest.mark.unit
class TestImportOptions:
    """Test importer options and strict mode."""

    def test_empty_paragraphs_are_dropped_by_default(self) -> None:
        assert _types(html_to_root("<p></p><p>x</p>")) == ["paragraph"]

    def test_keep_empty_paragraphs(self) -> None:
        root = html_to_root("<p></p><p>x</p>", ImportOptions(keep_empty_paragraphs=True))
        assert _types(root) == ["paragraph", "paragraph"]

    def test_non_string_input_is_empty_when_not_strict(self) -> None:
        assert HtmlImporter().parse(None).children == []

    def test_non_string_input_raises_in_strict_mode(self) -> None:
        with pytest.raises(ParsingError):
            HtmlImporter(ImportOptions(strict=True)).parse(None)

    def test_no_nodes_raises_in_strict_mode(self) -> None:
        with pytest.raises(ParsingError):
            HtmlImporter(ImportOptions(strict=True)).parse("<div></div>")

    def test_missing_tree_builder_raises(self) -> None:
        with pytest.raises(ParsingError):
            HtmlImporter(ImportOptions(parser="no-such-parser")).parse("<p>x</p>")


@pytest.mark.unit
class TestCardImportRules:
    """Test priorities and the legacy markup shapes cards are imported from."""

    def test_captioned_code_figure_wins_over_bare_pre(self) -> None:
        root = html_to_root("<figure><pre><code>x</code></pre><figcaption>c</figcaption></figure>")
        assert _types(root) == ["codeblock"]
        assert root.children[0].code == "x"
        assert root.children[0].caption == "c"

    def test_schemaless_iframe_is_upgraded_to_https(self) -> None:
        root = html_to_root('<iframe src="//www.youtube.com/embed/abc"></iframe>')
        assert _types(root) == ["embed"]
        embed = root.children[0]
        assert embed.url == "https://www.youtube.com/embed/abc"
        assert 'src="https://www.youtube.com/embed/abc"' in embed.html

    def test_relative_iframe_is_not_embedded(self) -> None:
        root = html_to_root('<figure><iframe src="/embed/local"></iframe></figure><p>After</p>')
        assert "embed" not in _types(root)

    def test_medium_graf_galleries_are_merged(self) -> None:
        html = (
            '<div data-paragraph-count="2"><figure><img src="https://cdn.example.com/1.jpg" width="800" height="600">'
            "<figcaption>First</figcaption></figure></div>"
            '<div data-paragraph-count="2"><figure><img src="https://cdn.example.com/2.jpg" width="800" height="600">'
            "<figcaption>Second</figcaption></figure></div>"
        )
        root = html_to_root(html)
        assert _types(root) == ["gallery"]
        gallery = root.children[0]
        assert [image["fileName"] for image in gallery.images] == ["1.jpg", "2.jpg"]
        assert [image["row"] for image in gallery.images] == [0, 0]
        assert gallery.caption == "First / Second"

    def test_squarespace_gallery_recovers_lazy_sources(self) -> None:
        html = (
            '<div class="sqs-gallery-container sqs-gallery-block-grid"><div class="slide">'
            '<noscript><img src="https://sq.example.com/a.jpg"></noscript>'
            '<img class="thumb-image" data-src="https://sq.example.com/a.jpg" data-image-dimensions="1200x800">'
            '</div><p class="meta-title">Trip</p></div>'
        )
        root = html_to_root(html)
        assert _types(root) == ["gallery"]
        image = root.children[0].images[0]
        assert image["src"] == "https://sq.example.com/a.jpg"
        assert (image["width"], image["height"]) == (1200, 800)
        assert root.children[0].caption == "Trip"

    def test_medium_mixtape_becomes_bookmark(self) -> None:
        html = (
            '<div class="graf graf--mixtapeEmbed">'
            '<a class="markup--anchor markup--mixtapeEmbed-anchor" href="https://medium.com/p/abc">'
            '<strong class="markup--strong markup--mixtapeEmbed-strong">Great post</strong><br>'
            '<em class="markup--em markup--mixtapeEmbed-em">All about it</em>medium.com</a>'
            '<a class="mixtapeImage" href="https://medium.com/p/abc" '
            'style="background-image: url(https://cdn.example.com/thumb.jpg);"></a></div>'
        )
        root = html_to_root(html)
        assert _types(root) == ["bookmark"]
        bookmark = root.children[0]
        assert bookmark.url == "https://medium.com/p/abc"
        assert (bookmark.title, bookmark.description, bookmark.publisher) == ("Great post", "All about it", "medium.com")
        assert bookmark.thumbnail == "https://cdn.example.com/thumb.jpg"
