#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cards.py
"""Unit tests for individual card renderers.

Tests cover:
- Callout colour validation and inline text sanitizing
- Code blocks with and without captions
- Button, toggle and file cards for both targets
- Gallery row layout
- Markdown, paywall and email-only content
- Signup label validation

"""

import pytest

from cardkit.exceptions import ValidationError
from cardkit.nodes.button import ButtonNode
from cardkit.nodes.callout import CalloutNode
from cardkit.nodes.codeblock import CodeBlockNode
from cardkit.nodes.email import EmailNode
from cardkit.nodes.file import FileNode
from cardkit.nodes.gallery import GalleryNode
from cardkit.nodes.markdown import MarkdownNode
from cardkit.nodes.paywall import PaywallNode
from cardkit.nodes.signup import SignupNode
from cardkit.nodes.toggle import ToggleNode
from cardkit.renderers.base import get_render_content
from cardkit.renderers.gallery import build_structure
from cardkit.utils.dom import class_list


def _html(node, options) -> str:
    return get_render_content(node.export_dom(options))


def _gallery_image(name: str, row: int, width: int = 800) -> dict:
    return {
        "fileName": name,
        "src": f"https://example.com/content/images/{name}",
        "width": width,
        "height": 600,
        "row": row,
    }


@pytest.mark.unit
class TestCalloutCard:
    """Test the callout card."""

    def test_render(self, web_options) -> None:
        node = CalloutNode({"calloutText": "Hello <b>there</b>", "backgroundColor": "grey"})
        assert _html(node, web_options) == (
            '<div class="kg-card kg-callout-card kg-callout-card-grey">'
            '<div class="kg-callout-emoji">💡</div>'
            '<div class="kg-callout-text">Hello <b>there</b></div></div>'
        )

    def test_invalid_color_is_reset(self, web_options) -> None:
        node = CalloutNode({"calloutText": "x", "backgroundColor": "rgba(0, 0, 0, 0)"})
        element = node.export_dom(web_options).element
        assert "kg-callout-card-white" in class_list(element)
        assert node.backgroundColor == "white"

    def test_disallowed_tags_are_unwrapped(self, web_options) -> None:
        node = CalloutNode({"calloutText": "Hi <span>there</span> <div><b>b</b></div>"})
        text = node.export_dom(web_options).element.find("div", class_="kg-callout-text")
        assert text.decode_contents() == "Hi there <b>b</b>"

    def test_empty_emoji_is_omitted(self, web_options) -> None:
        node = CalloutNode({"calloutText": "x", "calloutEmoji": ""})
        assert node.export_dom(web_options).element.find("div", class_="kg-callout-emoji") is None


@pytest.mark.unit
class TestCodeBlockCard:
    """Test the code block card."""

    def test_code_is_escaped(self, web_options) -> None:
        node = CodeBlockNode({"code": "a < b", "language": "js"})
        assert _html(node, web_options) == '<pre><code class="language-js">a &lt; b</code></pre>'

    def test_without_language(self, web_options) -> None:
        assert _html(CodeBlockNode({"code": "x"}), web_options) == "<pre><code>x</code></pre>"

    def test_caption_wraps_in_figure(self, web_options) -> None:
        node = CodeBlockNode({"code": "x", "caption": "A <em>caption</em>"})
        assert _html(node, web_options) == (
            '<figure class="kg-card kg-code-card"><pre><code>x</code></pre>'
            "<figcaption>A <em>caption</em></figcaption></figure>"
        )

    def test_blank_code_renders_nothing(self, web_options) -> None:
        assert _html(CodeBlockNode({"code": "   "}), web_options) == ""


@pytest.mark.unit
class TestButtonCard:
    """Test the button card."""

    def test_web(self, web_options) -> None:
        node = ButtonNode({"buttonText": "Go", "buttonUrl": "/go"})
        assert _html(node, web_options) == (
            '<div class="kg-card kg-button-card kg-align-center">'
            '<a href="/go" class="kg-btn kg-btn-accent">Go</a></div>'
        )

    def test_email(self, email_options) -> None:
        node = ButtonNode({"buttonText": "Go", "buttonUrl": "/go", "alignment": "left"})
        element = node.export_dom(email_options).element
        assert element.name == "p"
        assert element.find("table")["align"] == "left"
        assert element.find("a")["href"] == "/go"

    def test_missing_url_renders_nothing(self, web_options) -> None:
        assert _html(ButtonNode({"buttonText": "Go"}), web_options) == ""


@pytest.mark.unit
class TestToggleCard:
    """Test the toggle card."""

    def test_web_starts_closed(self, web_options) -> None:
        node = ToggleNode({"heading": "Question", "content": "<p>Answer</p>"})
        element = node.export_dom(web_options).element
        assert element["data-kg-toggle-state"] == "close"
        assert element.find("h4").get_text() == "Question"
        assert element.find("div", class_="kg-toggle-content").decode_contents() == "<p>Answer</p>"

    def test_email_is_expanded(self, email_options) -> None:
        node = ToggleNode({"heading": "Question", "content": "<p>Answer</p>"})
        element = node.export_dom(email_options).element
        assert element.find("button") is None
        assert "Answer" in element.get_text()


@pytest.mark.unit
class TestFileCard:
    """Test the file card."""

    def test_web_shows_name_and_size(self, web_options) -> None:
        node = FileNode({"src": "/content/files/report.pdf", "fileName": "report.pdf", "fileSize": 2048})
        html = _html(node, web_options)
        assert "kg-file-card" in html
        assert "report.pdf" in html
        assert "2 KB" in html

    def test_email_links_to_post(self, email_options) -> None:
        node = FileNode({"src": "/content/files/report.pdf", "fileName": "report.pdf", "fileTitle": "Report"})
        element = node.export_dom(email_options).element
        title = element.find("a", class_="kg-file-title")
        assert title.get_text() == "Report"
        assert title["href"] == "https://example.com/hello-world/"

    def test_missing_src_renders_nothing(self, web_options) -> None:
        assert _html(FileNode({"fileName": "report.pdf"}), web_options) == ""


@pytest.mark.unit
class TestGalleryCard:
    """Test gallery layout and rendering."""

    def test_single_image_last_row_is_avoided(self) -> None:
        images = [_gallery_image(name, row) for name, row in (("a", 0), ("b", 0), ("c", 0), ("d", 1))]
        rows = build_structure(images)
        assert [[image["fileName"] for image in row] for row in rows] == [["a", "b"], ["c", "d"]]

    def test_full_rows_are_kept(self) -> None:
        images = [_gallery_image(name, row) for name, row in (("a", 0), ("b", 0), ("c", 0), ("d", 1), ("e", 1))]
        assert [len(row) for row in build_structure(images)] == [3, 2]

    def test_render(self, web_options) -> None:
        node = GalleryNode({"images": [_gallery_image("a.jpg", 0), _gallery_image("b.jpg", 0)], "caption": "Two"})
        figure = node.export_dom(web_options).element
        assert class_list(figure) == ["kg-card", "kg-gallery-card", "kg-width-wide", "kg-card-hascaption"]
        assert len(figure.find_all("div", class_="kg-gallery-row")) == 1
        assert [img["src"] for img in figure.find_all("img")] == [
            "https://example.com/content/images/a.jpg",
            "https://example.com/content/images/b.jpg",
        ]
        assert figure.find("img")["sizes"] == "(min-width: 720px) 720px"

    def test_invalid_images_are_skipped(self, web_options) -> None:
        node = GalleryNode({"images": [{"src": "/a.jpg"}]})
        assert _html(node, web_options) == ""

    def test_email_caps_width(self, email_options) -> None:
        node = GalleryNode({"images": [_gallery_image("a.jpg", 0, width=1600)]})
        img = node.export_dom(email_options).element.find("img")
        assert (img["width"], img["height"]) == ("600", "225")


@pytest.mark.unit
class TestInnerAndTargetCards:
    """Test cards spliced by inner markup and target-specific cards."""

    def test_markdown(self, web_options) -> None:
        html = _html(MarkdownNode({"markdown": "# Hello world\n\nSome *text*"}), web_options)
        assert '<h1 id="hello-world">Hello world</h1>' in html
        assert "<p>Some <em>text</em></p>" in html

    def test_paywall_marker(self, web_options) -> None:
        assert _html(PaywallNode(), web_options) == "<!--members-only-->"

    def test_email_content_is_email_only(self, web_options, email_options) -> None:
        node = EmailNode({"html": "<p>Hey {first_name, \"there\"}</p>"})
        assert _html(node, web_options) == ""
        assert _html(node, email_options) == '<p>Hey %%{first_name, "there"}%%</p>'


@pytest.mark.unit
class TestSignupNode:
    """Test signup label handling."""

    def test_set_labels(self) -> None:
        node = SignupNode()
        node.set_labels(["a", "b"])
        node.add_label("c")
        node.remove_label("a")
        assert node.labels == ["b", "c"]

    def test_set_labels_rejects_non_strings(self) -> None:
        with pytest.raises(ValidationError):
            SignupNode().set_labels(["a", 1])
        with pytest.raises(ValidationError):
            SignupNode().set_labels("a")

    def test_transparent_background_clears_text_color(self) -> None:
        assert SignupNode({"backgroundColor": "transparent"}).textColor == ""
        assert SignupNode().textColor == "#000000"
