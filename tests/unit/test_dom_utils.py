#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the BeautifulSoup document helpers."""
import pytest

from cardkit.utils.dom import (
    CARD_FORMATTER,
    add_class,
    class_list,
    create_document,
    element_from_html,
    new_element,
    outer_html,
)


@pytest.mark.unit
class TestNewElement:
    """Test element construction and serialization order."""

    def test_attributes_keep_given_order(self) -> None:
        anchor = new_element(create_document(), "a", {"href": "/go", "class": "kg-btn kg-btn-accent"}, text="Go")
        assert outer_html(anchor) == '<a href="/go" class="kg-btn kg-btn-accent">Go</a>'

    def test_class_string_is_stored_as_a_list(self) -> None:
        document = create_document()
        figure = new_element(document, "figure", {"class": "kg-card kg-embed-card"})
        assert figure["class"] == ["kg-card", "kg-embed-card"]
        wrapper = new_element(document, "div")
        wrapper.append(figure)
        assert wrapper.find("figure", class_="kg-embed-card") is figure

    def test_parsed_attributes_keep_source_order(self) -> None:
        html = '<iframe src="https://example.com/v" width="200" height="113"></iframe>'
        assert outer_html(element_from_html(html)) == html

    def test_void_element_has_no_closing_slash(self) -> None:
        img = new_element(create_document(), "img", {"src": "/a.jpg", "alt": ""})
        assert img.decode(formatter=CARD_FORMATTER) == '<img src="/a.jpg" alt="">'


@pytest.mark.unit
class TestClassHelpers:
    """Test class list helpers on built and parsed elements."""

    def test_add_class_to_built_element(self) -> None:
        figure = new_element(create_document(), "figure", {"class": "kg-card"})
        add_class(figure, "kg-card-hascaption", "kg-card")
        assert outer_html(figure) == '<figure class="kg-card kg-card-hascaption"></figure>'

    def test_add_class_to_parsed_element(self) -> None:
        div = element_from_html('<div class="a b"></div>')
        add_class(div, "c")
        assert class_list(div) == ["a", "b", "c"]
