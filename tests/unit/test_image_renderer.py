#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_image_renderer.py
"""Unit tests for responsive image helpers and the image card renderer.

Tests cover:
- Usable responsive widths and srcset candidates
- ``sizes`` for regular and wide cards
- Email dimension capping and high-density sources
- Figure classes, links and captions

"""

import pytest

from cardkit.constants import DEFAULT_CONTENT_IMAGE_SIZES
from cardkit.nodes.image import ImageNode
from cardkit.options import ImageOptimization, RenderOptions
from cardkit.renderers.base import get_render_content
from cardkit.utils.dom import class_list
from cardkit.utils.images import (
    get_available_image_widths,
    get_srcset_attribute,
    is_local_content_image,
    is_unsplash_image,
    local_image_size_url,
    resize_image,
)

PHOTO = "https://example.com/content/images/photo.jpg"


@pytest.mark.unit
class TestImageHelpers:
    """Test the responsive image helpers."""

    def test_available_widths(self) -> None:
        assert get_available_image_widths(1200, DEFAULT_CONTENT_IMAGE_SIZES) == [600, 1000, 1200]
        assert get_available_image_widths(3000, DEFAULT_CONTENT_IMAGE_SIZES) == [600, 1000, 1600, 2400]
        assert get_available_image_widths(400, DEFAULT_CONTENT_IMAGE_SIZES) == []
        assert get_available_image_widths(None, DEFAULT_CONTENT_IMAGE_SIZES) == []

    def test_local_and_unsplash_detection(self) -> None:
        assert is_local_content_image(PHOTO, "https://example.com/")
        assert is_local_content_image("/content/images/photo.jpg")
        assert not is_local_content_image("https://other.com/photo.jpg", "https://example.com")
        assert is_unsplash_image("https://images.unsplash.com/photo-1?w=2000")

    def test_local_size_url(self) -> None:
        assert local_image_size_url(PHOTO, 600) == "https://example.com/content/images/size/w600/photo.jpg"
        assert local_image_size_url("https://other.com/photo.jpg", 600) is None

    def test_resize_image(self) -> None:
        assert resize_image(3000, 2000, desired_width=600) == (600, 400)
        assert resize_image(3000, 2000, desired_height=100) == (150, 100)
        assert resize_image(0, 2000, desired_width=600) is None

    def test_local_srcset(self, web_options) -> None:
        assert get_srcset_attribute(PHOTO, 1200, web_options) == (
            "https://example.com/content/images/size/w600/photo.jpg 600w, "
            "https://example.com/content/images/size/w1000/photo.jpg 1000w, "
            "https://example.com/content/images/photo.jpg 1200w"
        )

    def test_unsplash_srcset(self, web_options) -> None:
        srcset = get_srcset_attribute("https://images.unsplash.com/photo-1?w=2000&q=80", 1000, web_options)
        assert srcset == (
            "https://images.unsplash.com/photo-1?w=600&q=80 600w, "
            "https://images.unsplash.com/photo-1?w=1000&q=80 1000w"
        )

    def test_no_srcset_without_transform(self, web_options) -> None:
        options = web_options.create_updated(can_transform_image=lambda src: False)
        assert get_srcset_attribute(PHOTO, 1200, options) is None

    def test_no_srcset_without_optimization(self) -> None:
        assert get_srcset_attribute(PHOTO, 1200, RenderOptions(site_url="https://example.com")) is None

    def test_srcsets_disabled(self, web_options) -> None:
        options = web_options.create_updated(image_optimization=ImageOptimization(srcsets=False))
        assert get_srcset_attribute(PHOTO, 1200, options) is None


@pytest.mark.unit
class TestImageCard:
    """Test the image card renderer."""

    def test_empty_src_renders_nothing(self, web_options) -> None:
        assert get_render_content(ImageNode().export_dom(web_options)) == ""

    def test_web_image(self, web_options) -> None:
        node = ImageNode({"src": PHOTO, "width": 1200, "height": 800, "alt": "A photo"})
        figure = node.export_dom(web_options).element
        assert figure.name == "figure"
        assert class_list(figure) == ["kg-card", "kg-image-card"]
        img = figure.find("img")
        assert img["alt"] == "A photo"
        assert img["loading"] == "lazy"
        assert (img["width"], img["height"]) == ("1200", "800")
        assert img["srcset"].endswith("https://example.com/content/images/photo.jpg 1200w")
        assert img["sizes"] == "(min-width: 720px) 720px"

    def test_wide_image_sizes(self, web_options) -> None:
        node = ImageNode({"src": PHOTO, "width": 2000, "height": 1000, "cardWidth": "wide"})
        figure = node.export_dom(web_options).element
        assert "kg-width-wide" in class_list(figure)
        assert figure.find("img")["sizes"] == "(min-width: 1200px) 1200px"

    def test_small_image_has_no_sizes(self, web_options) -> None:
        node = ImageNode({"src": PHOTO, "width": 650, "height": 400})
        img = node.export_dom(web_options).element.find("img")
        assert img["srcset"] == "https://example.com/content/images/size/w600/photo.jpg 600w, " + PHOTO + " 650w"
        assert img.get("sizes") is None

    def test_caption_link_and_float(self, web_options) -> None:
        node = ImageNode(
            {"src": PHOTO, "caption": "A <b>bold</b> caption", "href": "https://example.com/x", "floatDirection": "left"}
        )
        figure = node.export_dom(web_options).element
        assert class_list(figure) == [
            "kg-card",
            "kg-image-card",
            "kg-float-image",
            "kg-float-left",
            "kg-card-hascaption",
        ]
        assert figure.find("a")["href"] == "https://example.com/x"
        assert figure.find("a").find("img") is not None
        assert figure.find("figcaption").decode_contents() == "A <b>bold</b> caption"

    def test_default_max_width(self, web_options) -> None:
        options = web_options.create_updated(image_optimization=ImageOptimization(default_max_width=2000))
        node = ImageNode({"src": PHOTO, "width": 4000, "height": 2000})
        img = node.export_dom(options).element.find("img")
        assert (img["width"], img["height"]) == ("2000", "1000")

    def test_email_caps_width_and_uses_retina_source(self, email_options) -> None:
        node = ImageNode({"src": PHOTO, "width": 3000, "height": 2000})
        img = node.export_dom(email_options).element.find("img")
        assert (img["width"], img["height"]) == ("600", "400")
        assert img["src"] == "https://example.com/content/images/size/w1600/photo.jpg"
        assert img.get("srcset") is None

    def test_email_keeps_original_when_it_is_the_retina_size(self, email_options) -> None:
        node = ImageNode({"src": PHOTO, "width": 1200, "height": 600})
        img = node.export_dom(email_options).element.find("img")
        assert (img["width"], img["height"]) == ("600", "300")
        assert img["src"] == PHOTO

    def test_email_small_image_is_unchanged(self, email_options) -> None:
        node = ImageNode({"src": "https://other.com/a.png", "width": 300, "height": 200})
        img = node.export_dom(email_options).element.find("img")
        assert (img["width"], img["height"]) == ("300", "200")
        assert img["src"] == "https://other.com/a.png"
