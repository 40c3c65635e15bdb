#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_document_renderer.py
"""Unit tests for HtmlDocumentRenderer and the high-level API.

Tests cover:
- Splicing element, inner and value render outputs
- Render error handling
- The two-phase dynamic data pipeline for collection cards
- Option resolution in the API functions

"""

import asyncio

import pytest

from cardkit import (
    document_to_html,
    document_to_html_async,
    dump_document,
    html_to_document,
    load_document,
)
from cardkit.exceptions import RenderingError
from cardkit.nodes.base import CardNode
from cardkit.nodes.collection import CollectionNode
from cardkit.nodes.elements import HeadingNode, ParagraphNode, RootNode, TextNode
from cardkit.nodes.horizontalrule import HorizontalRuleNode
from cardkit.nodes.html_card import HtmlNode
from cardkit.options import RenderOptions
from cardkit.renderers.html import HtmlDocumentRenderer, iter_nodes

POSTS = [
    {
        "title": "Hello",
        "url": "/hello/",
        "excerpt": "First post",
        "published_at": "2024-01-05T10:00:00.000Z",
        "reading_time": 3,
    }
]


class BrokenNode(CardNode, node_type="broken", properties=()):
    def export_dom(self, options):
        raise ValueError("boom")


@pytest.mark.unit
class TestRender:
    """Test synchronous document rendering."""

    def test_blocks_and_cards(self) -> None:
        root = RootNode(
            children=[
                HeadingNode(tag="h2", children=[TextNode("My Title")]),
                ParagraphNode(children=[TextNode("Body")]),
                HorizontalRuleNode(),
            ]
        )
        assert HtmlDocumentRenderer().render(root) == '<h2 id="my-title">My Title</h2><p>Body</p><hr>'

    def test_value_output_is_spliced_verbatim(self) -> None:
        root = RootNode(children=[HtmlNode({"html": "<div>raw & <b>bold</b></div>"})])
        assert HtmlDocumentRenderer().render(root) == (
            "\n<!--kg-card-begin: html-->\n<div>raw & <b>bold</b></div>\n<!--kg-card-end: html-->\n"
        )

    def test_empty_cards_render_nothing(self) -> None:
        root = RootNode(children=[HtmlNode(), ParagraphNode(children=[TextNode("x")])])
        assert HtmlDocumentRenderer().render(root) == "<p>x</p>"

    def test_top_level_inline_nodes(self) -> None:
        root = RootNode(children=[TextNode("loose", 1)])
        assert HtmlDocumentRenderer().render(root) == "<strong>loose</strong>"

    def test_render_errors_are_logged_by_default(self, caplog) -> None:
        root = RootNode(children=[BrokenNode(), HorizontalRuleNode()])
        assert HtmlDocumentRenderer().render(root) == "<hr>"
        assert "broken" in caplog.text

    def test_render_errors_raise_when_configured(self) -> None:
        root = RootNode(children=[BrokenNode()])
        renderer = HtmlDocumentRenderer(RenderOptions(fail_on_render_errors=True))
        with pytest.raises(RenderingError) as exc_info:
            renderer.render(root)
        assert exc_info.value.node_type == "broken"
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_iter_nodes_walks_descendants(self) -> None:
        root = RootNode(children=[ParagraphNode(children=[TextNode("a")]), HorizontalRuleNode()])
        assert [node.get_type() for node in iter_nodes(root)] == ["root", "paragraph", "extended-text", "horizontalrule"]


@pytest.mark.unit
class TestDynamicData:
    """Test the fetch-then-render pipeline for collection cards."""

    def test_collection_is_empty_without_render_data(self) -> None:
        root = RootNode(children=[CollectionNode()])
        assert HtmlDocumentRenderer().render(root) == ""

    def test_collection_renders_pre_fetched_posts(self) -> None:
        collection = CollectionNode({"header": "Latest"})
        options = RenderOptions(render_data={collection.key: POSTS})
        html = HtmlDocumentRenderer(options).render(RootNode(children=[collection]))
        assert 'data-kg-collection-slug="latest"' in html
        assert '<h4 class="kg-collection-card-title">Latest</h4>' in html
        assert '<h2 class="kg-collection-card-post-title">Hello</h2>' in html
        assert "5 Jan 2024" in html

    def test_render_async_fetches_posts(self) -> None:
        calls = []

        async def get_posts(collection, count):
            calls.append((collection, count))
            return POSTS

        collection = CollectionNode({"collection": "featured", "postCount": 2})
        renderer = HtmlDocumentRenderer(RenderOptions(get_collection_posts=get_posts))
        html = asyncio.run(renderer.render_async(RootNode(children=[collection])))
        assert calls == [("featured", 2)]
        assert 'href="/hello/"' in html

    def test_collect_dynamic_data_keys_by_node(self) -> None:
        async def get_posts(collection, count):
            return POSTS[:count]

        first, second = CollectionNode(), CollectionNode()
        renderer = HtmlDocumentRenderer(RenderOptions(get_collection_posts=get_posts))
        data = asyncio.run(renderer.collect_dynamic_data(RootNode(children=[first, second])))
        assert data == {first.key: POSTS, second.key: POSTS}

    def test_without_fetcher_nothing_is_collected(self) -> None:
        renderer = HtmlDocumentRenderer()
        assert asyncio.run(renderer.collect_dynamic_data(RootNode(children=[CollectionNode()]))) == {}

    def test_failed_fetch_renders_empty(self, caplog) -> None:
        async def get_posts(collection, count):
            raise ConnectionError("offline")

        renderer = HtmlDocumentRenderer(RenderOptions(get_collection_posts=get_posts))
        html = asyncio.run(renderer.render_async(RootNode(children=[CollectionNode()])))
        assert html == ""
        assert "offline" in caplog.text

    def test_failed_fetch_raises_when_configured(self) -> None:
        async def get_posts(collection, count):
            raise ConnectionError("offline")

        options = RenderOptions(get_collection_posts=get_posts, fail_on_render_errors=True)
        with pytest.raises(RenderingError):
            asyncio.run(HtmlDocumentRenderer(options).render_async(RootNode(children=[CollectionNode()])))

    def test_cancelled_fetch_propagates(self) -> None:
        async def get_posts(collection, count):
            raise asyncio.CancelledError()

        renderer = HtmlDocumentRenderer(RenderOptions(get_collection_posts=get_posts))
        with pytest.raises(asyncio.CancelledError):
            asyncio.run(renderer.render_async(RootNode(children=[CollectionNode()])))


@pytest.mark.unit
class TestApi:
    """Test the high-level API functions."""

    def test_import_render_round_trip(self) -> None:
        html = "<p>Hello <strong>world</strong></p><hr>"
        assert document_to_html(html_to_document(html)) == html

    def test_render_is_idempotent_through_json(self) -> None:
        root = html_to_document("<h3>Head</h3><p>Some <em>text</em></p><hr>")
        reloaded = load_document(dump_document(root))
        assert document_to_html(reloaded) == document_to_html(root)

    def test_import_kwargs(self) -> None:
        root = html_to_document("<p></p>", keep_empty_paragraphs=True)
        assert len(root.children) == 1

    def test_unknown_kwargs_are_ignored(self) -> None:
        root = html_to_document("<p>x</p>", not_an_option=True)
        assert document_to_html(root, also_not_an_option=1) == "<p>x</p>"

    def test_kwargs_override_render_options(self) -> None:
        root = RootNode(children=[CollectionNode()])
        options = RenderOptions(render_data={})
        collection = root.children[0]
        html = document_to_html(root, render_options=options, render_data={collection.key: POSTS})
        assert "kg-collection-card" in html

    def test_async_api(self) -> None:
        async def get_posts(collection, count):
            return POSTS

        root = RootNode(children=[CollectionNode()])
        html = asyncio.run(document_to_html_async(root, get_collection_posts=get_posts))
        assert "Hello" in html
