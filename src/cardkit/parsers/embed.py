#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/embed.py
"""Import rules for embed cards.

Only absolute URLs can be embedded. Elements whose iframe or link URL is
relative are declined so other rules, or generic handling, can claim them.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import read_caption_from_element
from cardkit.utils.dom import inner_html, outer_html

_ABSOLUTE_OR_SCHEMALESS_RE = re.compile(r"^(https?:)?//", re.IGNORECASE)
_SCHEMALESS_RE = re.compile(r"^//")
_ABSOLUTE_RE = re.compile(r"^https?://", re.IGNORECASE)


def create_payload_for_iframe(iframe: Tag) -> Optional[dict[str, Any]]:
    """Return ``{url, html}`` for an iframe with an absolute ``src``, else None.

    Scheme-relative URLs are upgraded to https on the iframe itself, so the
    stored markup carries the normalized URL.
    """
    src = iframe.get("src")
    if not src or not _ABSOLUTE_OR_SCHEMALESS_RE.match(src):
        return None
    if _SCHEMALESS_RE.match(src):
        iframe["src"] = f"https:{src}"
    return {"url": iframe["src"], "html": outer_html(iframe)}


def parse_embed_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for iframe figures, blockquote figures and bare iframes."""

    def figure(element: Tag) -> Optional[DomConversion]:
        if element.name != "figure":
            return None

        iframe = element.find("iframe")
        if iframe is not None:

            def iframe_conversion(dom_node: Tag) -> Optional[ConversionResult]:
                payload = create_payload_for_iframe(iframe)
                if payload is None:
                    return None
                payload["caption"] = read_caption_from_element(dom_node)
                return ConversionResult(node_class(payload))

            return DomConversion(iframe_conversion, priority=1)

        if element.find("blockquote") is not None:

            def blockquote_conversion(dom_node: Tag) -> Optional[ConversionResult]:
                link = dom_node.find("a")
                if link is None:
                    return None
                url = link.get("href")
                if not url or not _ABSOLUTE_RE.match(url):
                    return None
                payload: dict[str, Any] = {"url": url, "caption": read_caption_from_element(dom_node)}
                figcaption = dom_node.find("figcaption")
                if figcaption is not None:
                    figcaption.decompose()
                payload["html"] = inner_html(dom_node)
                return ConversionResult(node_class(payload))

            return DomConversion(blockquote_conversion, priority=1)
        return None

    def iframe(element: Tag) -> Optional[DomConversion]:
        if element.name != "iframe":
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            payload = create_payload_for_iframe(dom_node)
            if payload is None:
                return None
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"figure": figure, "iframe": iframe}
