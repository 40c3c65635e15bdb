#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_card_templates.py
"""Unit tests for the template-based card renderers.

Tests cover:
- Header cards in both design versions
- Audio player and email summary
- Product cards, including the email image cap
- Call-to-action visibility and email-only call-to-action blocks
- Signup forms

"""

import pytest

from cardkit.constants import NO_MEMBERS_SEGMENT
from cardkit.nodes.audio import AudioNode
from cardkit.nodes.call_to_action import CallToActionNode
from cardkit.nodes.email_cta import EmailCtaNode
from cardkit.nodes.header import HeaderNode
from cardkit.nodes.product import ProductNode
from cardkit.nodes.signup import SignupNode
from cardkit.renderers.base import get_render_content
from cardkit.utils.dom import class_list


def _html(node, options) -> str:
    return get_render_content(node.export_dom(options))


@pytest.mark.unit
class TestHeaderCard:
    """Test version 1 and version 2 header cards."""

    def test_v1_layout(self, web_options) -> None:
        node = HeaderNode(
            {
                "header": "Hello",
                "subheader": "Sub",
                "size": "large",
                "style": "image",
                "backgroundImageSrc": "/bg.jpg",
                "buttonEnabled": True,
                "buttonUrl": "/go",
                "buttonText": "Go",
            }
        )
        div = node.export_dom(web_options).element
        assert class_list(div) == [
            "kg-card",
            "kg-header-card",
            "kg-width-full",
            "kg-size-large",
            "kg-style-image",
        ]
        assert div["style"] == "background-image: url(/bg.jpg)"
        assert div.find("h2")["id"] == "hello"
        assert div.find("h3", class_="kg-header-card-subheader").get_text() == "Sub"
        assert div.find("a", class_="kg-header-card-button")["href"] == "/go"

    def test_v1_subheader_of_only_breaks_is_dropped(self, web_options) -> None:
        div = HeaderNode({"header": "Hello", "subheader": "<br>"}).export_dom(web_options).element
        assert div.find("h3") is None

    def test_v1_without_content_renders_nothing(self, web_options) -> None:
        assert _html(HeaderNode({"buttonEnabled": True, "buttonUrl": "/go"}), web_options) == ""

    def test_v2_split_layout(self, web_options) -> None:
        node = HeaderNode(
            {
                "version": 2,
                "header": "Hello",
                "layout": "split",
                "swapped": True,
                "backgroundColor": "accent",
                "buttonEnabled": True,
                "buttonUrl": "/go",
                "buttonText": "Go",
                "buttonColor": "accent",
            }
        )
        div = node.export_dom(web_options).element
        classes = class_list(div)
        for name in ("kg-v2", "kg-layout-split", "kg-swapped", "kg-style-accent"):
            assert name in classes
        assert div.find("h2")["id"] == "hello"
        button = div.find("a", class_="kg-header-card-button")
        assert button["href"] == "/go"
        assert "kg-style-accent" in class_list(button)

    def test_v2_email_uses_accent_hex(self, email_options) -> None:
        node = HeaderNode({"version": 2, "header": "Hello", "backgroundColor": "accent", "accentColor": "#123456"})
        div = node.export_dom(email_options).element
        assert "background-color: #123456;" in div["style"]
        assert div.find("h2").get_text() == "Hello"


@pytest.mark.unit
class TestAudioCard:
    """Test the audio card."""

    def test_web_player(self, web_options) -> None:
        node = AudioNode({"src": "/content/media/a.mp3", "title": "Episode 1", "duration": 125})
        card = node.export_dom(web_options).element
        assert card.find("audio")["src"] == "/content/media/a.mp3"
        assert card.find("div", class_="kg-audio-title").get_text() == "Episode 1"
        assert card.find("span", class_="kg-audio-duration").get_text() == "125"
        assert "kg-audio-hide" in class_list(card.find("img"))

    def test_email_summary(self, email_options) -> None:
        node = AudioNode({"src": "/content/media/a.mp3", "title": "Tom & Jerry", "duration": 125})
        table = node.export_dom(email_options).element
        assert table.name == "table"
        assert table.find("a", class_="kg-audio-title").get_text() == "Tom & Jerry"
        assert table.find("a", class_="kg-audio-duration").get_text().startswith("2:05")
        assert table.find("a")["href"] == "https://example.com/hello-world/"

    def test_missing_src_renders_nothing(self, web_options) -> None:
        assert _html(AudioNode({"title": "x"}), web_options) == ""


@pytest.mark.unit
class TestProductCard:
    """Test the product card."""

    def test_web_rating(self, web_options) -> None:
        node = ProductNode({"productTitle": "Widget", "productRatingEnabled": True, "productStarRating": 3})
        card = node.export_dom(web_options).element
        stars = card.find_all("span", class_="kg-product-card-rating-star")
        assert ["kg-product-card-rating-active" in class_list(star) for star in stars] == [
            True,
            True,
            True,
            False,
            False,
        ]
        assert card.find("h4").get_text() == "Widget"

    def test_email_caps_image_width(self, email_options) -> None:
        node = ProductNode(
            {
                "productTitle": "Widget",
                "productImageSrc": "https://example.com/w.jpg",
                "productImageWidth": 1200,
                "productImageHeight": 800,
            }
        )
        img = node.export_dom(email_options).element.find("img")
        assert (img["width"], img["height"]) == ("560", "373")

    def test_email_keeps_small_images(self, email_options) -> None:
        node = ProductNode(
            {
                "productTitle": "Widget",
                "productImageSrc": "https://example.com/w.jpg",
                "productImageWidth": 400,
                "productImageHeight": 300,
            }
        )
        img = node.export_dom(email_options).element.find("img")
        assert (img["width"], img["height"]) == ("400", "300")

    def test_empty_product_renders_nothing(self, web_options) -> None:
        assert _html(ProductNode(), web_options) == ""


@pytest.mark.unit
class TestCallToActionCard:
    """Test the call-to-action card and its visibility."""

    def _node(self, **extra) -> CallToActionNode:
        data = {
            "textValue": "<p>Join us</p>",
            "showButton": True,
            "buttonText": "Go",
            "buttonUrl": "/go",
            "buttonColor": "accent",
            "backgroundColor": "accent",
        }
        data.update(extra)
        return CallToActionNode(data)

    def test_web(self, web_options) -> None:
        card = self._node().export_dom(web_options).element
        assert class_list(card) == ["cta-card", "kg-style-accent"]
        assert card["data-layout"] == "minimal"
        button = card.find("a", class_="kg-cta-button")
        assert button["href"] == "/go"
        assert "kg-style-accent" in class_list(button)
        assert card.find("div", class_="kg-sponsor-label").get_text().strip() == "Sponsored"

    def test_email(self, email_options) -> None:
        card = self._node(hasSponsorLabel=False).export_dom(email_options).element
        assert "cta-card-email" in class_list(card)
        assert card.find("a", class_="cta-button")["href"] == "/go"
        assert card.find("div", class_="sponsor-label") is None

    def test_restricted_visibility(self, web_options, email_options) -> None:
        visibility = {
            "web": {"nonMember": False, "memberSegment": "status:-free"},
            "email": {"memberSegment": NO_MEMBERS_SEGMENT},
        }
        node = self._node(visibility=visibility)
        assert "<!--kg-gated-block:begin nonMember:false" in _html(node, web_options)
        assert _html(node, email_options) == ""


@pytest.mark.unit
class TestEmailCtaCard:
    """Test the email-only call-to-action card."""

    def test_email(self, email_options) -> None:
        node = EmailCtaNode(
            {
                "html": "<p>Hi {first_name}</p>",
                "segment": "status:-free",
                "alignment": "center",
                "showButton": True,
                "buttonText": "Go",
                "buttonUrl": "/go",
            }
        )
        div = node.export_dom(email_options).element
        assert div["data-gh-segment"] == "status:-free"
        assert class_list(div) == ["align-center"]
        assert len(div.find_all("hr")) == 2
        assert div.find("p").get_text() == "Hi %%{first_name}%%"
        assert div.find("table")["align"] == "center"
        assert div.find("a")["href"] == "/go"

    def test_not_rendered_for_web(self, web_options) -> None:
        assert _html(EmailCtaNode({"html": "<p>Hi</p>"}), web_options) == ""

    def test_without_content_renders_nothing(self, email_options) -> None:
        assert _html(EmailCtaNode({"showButton": True, "buttonText": "Go"}), email_options) == ""


@pytest.mark.unit
class TestSignupCard:
    """Test the signup form card."""

    def test_web_form(self, web_options) -> None:
        node = SignupNode({"header": "Join", "labels": ["vip"], "layout": "split", "swapped": True})
        card = node.export_dom(web_options).element
        classes = class_list(card)
        for name in ("kg-signup-card", "kg-layout-split", "kg-swapped"):
            assert name in classes
        assert card.has_attr("data-lexical-signup-form")
        assert "display: none;" in card["style"]
        assert card.find("h2", class_="kg-signup-card-heading").get_text() == "Join"
        assert card.find("p", class_="kg-signup-card-subheading") is None
        assert card.find("input", attrs={"data-members-label": True})["value"] == "vip"

    def test_email_is_an_empty_div(self, email_options) -> None:
        assert _html(SignupNode({"header": "Join"}), email_options) == "<div></div>"
