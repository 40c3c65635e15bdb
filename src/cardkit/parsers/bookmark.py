#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/bookmark.py
"""Import rules for bookmark cards.

Besides native bookmark figures, Medium's "mixtape" link embeds are
recognized and converted to bookmarks.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import class_name, has_class, inner_html, text_content

_MIXTAPE_RE = re.compile(r"graf--mixtapeEmbed")
_BACKGROUND_IMAGE_RE = re.compile(r"background-image\s*:\s*url\(([^)]*?)\)", re.IGNORECASE)


def _select_text(element: Tag, selector: str) -> Optional[str]:
    found = element.select_one(selector)
    return text_content(found) if found is not None else None


def _select_attr(element: Tag, selector: str, attr: str) -> Optional[str]:
    found = element.select_one(selector)
    return found.get(attr) if found is not None else None


def read_background_image(element: Tag) -> Optional[str]:
    """Return the URL of an inline ``background-image`` style, unquoted."""
    match = _BACKGROUND_IMAGE_RE.search(element.get("style") or "")
    if not match:
        return None
    return match.group(1).strip().strip("'\"")


def parse_bookmark_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for ``figure.kg-bookmark-card`` and Medium mixtape divs."""

    def figure(element: Tag) -> Optional[DomConversion]:
        if element.name != "figure" or not has_class(element, "kg-bookmark-card"):
            return None

        def conversion(dom_node: Tag) -> ConversionResult:
            # author and publisher classes are swapped for theme compatibility
            payload = {
                "url": _select_attr(dom_node, ".kg-bookmark-container", "href"),
                "metadata": {
                    "icon": _select_attr(dom_node, ".kg-bookmark-icon", "src"),
                    "title": _select_text(dom_node, ".kg-bookmark-title"),
                    "description": _select_text(dom_node, ".kg-bookmark-description"),
                    "author": _select_text(dom_node, ".kg-bookmark-publisher"),
                    "publisher": _select_text(dom_node, ".kg-bookmark-author"),
                    "thumbnail": _select_attr(dom_node, ".kg-bookmark-thumbnail img", "src"),
                },
                "caption": _select_text(dom_node, "figcaption"),
            }
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    def div(element: Tag) -> Optional[DomConversion]:
        if element.name != "div" or not _MIXTAPE_RE.search(class_name(element)):
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            anchor = dom_node.select_one(".markup--mixtapeEmbed-anchor")
            if anchor is None:
                return None
            title_element = anchor.select_one(".markup--mixtapeEmbed-strong")
            description_element = anchor.select_one(".markup--mixtapeEmbed-em")
            image_element = dom_node.select_one(".mixtapeImage")
            line_break = dom_node.find("br")
            if line_break is not None:
                line_break.decompose()

            title = description = thumbnail = ""
            if title_element is not None and inner_html(title_element):
                title = inner_html(title_element).strip()
                title_element.decompose()
            if description_element is not None and inner_html(description_element):
                description = inner_html(description_element).strip()
                description_element.decompose()
            # whatever is left in the anchor is the publisher
            publisher = inner_html(anchor).strip()
            if image_element is not None:
                thumbnail = read_background_image(image_element) or ""

            payload = {
                "url": anchor.get("href"),
                "metadata": {
                    "title": title,
                    "description": description,
                    "publisher": publisher,
                    "thumbnail": thumbnail,
                },
            }
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"figure": figure, "div": div}
