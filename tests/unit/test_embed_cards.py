#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the embed and bookmark cards."""
import pytest

from cardkit.nodes.bookmark import BookmarkNode
from cardkit.nodes.embed import EmbedNode
from cardkit.renderers.base import get_render_content
from cardkit.renderers.embed import format_tweet_content
from cardkit.utils.dom import class_list

YOUTUBE = {
    "url": "https://www.youtube.com/watch?v=abc",
    "embedType": "video",
    "html": '<iframe src="https://www.youtube.com/embed/abc" width="200" height="113"></iframe>',
    "metadata": {"thumbnail_url": "https://i.ytimg.com/vi/abc/hq.jpg", "thumbnail_width": 480, "thumbnail_height": 360},
}


@pytest.mark.unit
class TestEmbedCard:
    """Test generic, video and tweet embeds."""

    def test_web_keeps_stored_markup(self, web_options) -> None:
        figure = EmbedNode(dict(YOUTUBE, caption="Watch")).export_dom(web_options).element
        assert class_list(figure) == ["kg-card", "kg-embed-card", "kg-card-hascaption"]
        assert figure.find("iframe")["src"] == "https://www.youtube.com/embed/abc"
        assert figure.find("figcaption").get_text() == "Watch"

    def test_caption_class_serializes_as_plain_string(self, web_options) -> None:
        html = get_render_content(EmbedNode(dict(YOUTUBE, caption="Watch")).export_dom(web_options))
        assert html.startswith('<figure class="kg-card kg-embed-card kg-card-hascaption">')

    def test_email_video_becomes_preview(self, email_options) -> None:
        figure = EmbedNode(YOUTUBE).export_dom(email_options).element
        assert figure.find("iframe") is None
        preview = figure.find("a", class_="kg-video-preview")
        assert preview["href"] == YOUTUBE["url"]
        assert figure.find("img")["src"] == "https://img.spacergif.org/v1/150x450/0a/spacer.png"

    def test_empty_embed_renders_nothing(self, web_options) -> None:
        assert get_render_content(EmbedNode().export_dom(web_options)) == ""

    def test_tweet_content_highlights_entities(self) -> None:
        tweet = {
            "text": "Hi @bob #tag",
            "entities": {
                "mentions": [{"start": 3, "end": 6, "username": "bob"}],
                "hashtags": [{"start": 8, "end": 11, "tag": "tag"}],
            },
        }
        assert format_tweet_content(tweet) == (
            'Hi <span style="color: #1DA1F2;">@bob</span> <span style="color: #1DA1F2;">#tag</span>'
        )

    def test_tweet_media_links_are_dropped(self) -> None:
        tweet = {
            "text": "Look https://t.co/x",
            "entities": {"urls": [{"start": 5, "end": 18, "url": "https://t.co/x", "display_url": "pic.twitter.com/x"}]},
        }
        assert format_tweet_content(tweet) == "Look "

    def test_tweet_without_data_uses_stored_markup(self, email_options) -> None:
        node = EmbedNode({"embedType": "twitter", "html": '<blockquote class="twitter-tweet">Hi</blockquote>'})
        figure = node.export_dom(email_options).element
        assert figure.find("blockquote").get_text() == "Hi"


@pytest.mark.unit
class TestBookmarkCard:
    """Test web and email bookmarks."""

    def test_web(self, web_options) -> None:
        node = BookmarkNode(
            {
                "url": "https://example.org/",
                "metadata": {
                    "title": "Example",
                    "description": "An example site",
                    "publisher": "Example Org",
                    "icon": "https://example.org/icon.png",
                },
            }
        )
        figure = node.export_dom(web_options).element
        assert figure.find("a", class_="kg-bookmark-container")["href"] == "https://example.org/"
        assert figure.find("div", class_="kg-bookmark-title").get_text() == "Example"
        assert figure.find("span", class_="kg-bookmark-author").get_text() == "Example Org"
        assert figure.find("img", class_="kg-bookmark-icon")["src"] == "https://example.org/icon.png"

    def test_email_escapes_title_once(self, email_options) -> None:
        node = BookmarkNode({"url": "https://example.org/", "metadata": {"title": "Tom & Jerry"}})
        html = get_render_content(node.export_dom(email_options))
        assert "Tom &amp; Jerry" in html
        assert "&amp;amp;" not in html

    def test_missing_url_renders_nothing(self, web_options) -> None:
        assert get_render_content(BookmarkNode({"metadata": {"title": "x"}}).export_dom(web_options)) == ""
