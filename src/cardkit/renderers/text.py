#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/text.py
"""Inline text renderer.

Renders a flat run of inline nodes (text runs with a format bitset, line
breaks and links) into minimally nested markup.

Algorithm
---------
A stack of open format tags is kept alongside a cursor element.

- Unformatted text is appended at the cursor; open formats stay open.
- Line breaks append ``<br>`` at the cursor; open formats stay open.
- Links render as ``<a>`` at the cursor, their children rendered by a
  separate pass so the anchor never inherits formats from outside it.
- Formatted text opens the formats it needs that are not open yet. Formats
  that recur soonest in the following text runs (up to the next link) are
  opened first so the short-lived ones end up innermost. Formats not found
  again are opened last, in ``FORMAT_TAG_MAP`` order.
- After formatted text, the outermost open format that the next text or
  link run does not share is closed together with everything opened inside
  it. A following link, or no following run, closes every format.

For ``[a(bold), b(bold+italic), c(italic)]`` this yields
``<strong>a<em>b</em></strong><em>c</em>``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from bs4 import BeautifulSoup, NavigableString, Tag

from cardkit.constants import FORMAT_TAG_MAP
from cardkit.utils.dom import create_document, inner_html, new_element

logger = logging.getLogger(__name__)


def _is_text(node: Any) -> bool:
    return getattr(node, "node_type", None) in ("extended-text", "text")


def _is_link(node: Any) -> bool:
    return getattr(node, "node_type", None) == "link"


def _is_line_break(node: Any) -> bool:
    return getattr(node, "node_type", None) == "linebreak"


def _node_formats(node: Any) -> list[str]:
    return [name for name in FORMAT_TAG_MAP if node.has_format(name)]


def _order_formats_to_open(formats: list[str], remaining: Sequence[Any]) -> list[str]:
    link_index = next((index for index, node in enumerate(remaining) if _is_link(node)), len(remaining))
    upcoming = [node for node in remaining[:link_index] if _is_text(node)]

    def first_use(name: str) -> float:
        for index, node in enumerate(upcoming):
            if node.has_format(name):
                return index
        return float("inf")

    # sorted() is stable, so unused formats keep FORMAT_TAG_MAP order
    return sorted(formats, key=first_use)


def _build_anchor(document: BeautifulSoup, link: Any) -> Tag:
    anchor = new_element(document, "a")
    if link.url:
        anchor["href"] = link.url
    if link.rel:
        anchor["rel"] = link.rel
    if link.target:
        anchor["target"] = link.target
    if link.title:
        anchor["title"] = link.title
    render_inline(link.children, anchor, document)
    return anchor


def render_inline(nodes: Sequence[Any], parent: Tag, document: Optional[BeautifulSoup] = None) -> Tag:
    """Append the markup for a run of inline nodes to ``parent``.

    Parameters
    ----------
    nodes : sequence
        Text, line break and link nodes in document order
    parent : Tag
        Element receiving the rendered markup
    document : BeautifulSoup, optional
        Document used to create elements; a new one is created when omitted

    Returns
    -------
    Tag
        ``parent``, for chaining

    """
    document = document or create_document()
    cursor = parent
    open_formats: list[str] = []

    for index, node in enumerate(nodes):
        if _is_line_break(node):
            cursor.append(new_element(document, "br"))
            continue

        if _is_link(node):
            cursor.append(_build_anchor(document, node))
            continue

        if not _is_text(node):
            logger.debug("Skipping non-inline node %r in inline content", node)
            continue

        if not node.format:
            cursor.append(NavigableString(node.text))
            continue

        remaining = nodes[index + 1 :]
        formats_to_open = [name for name in _node_formats(node) if name not in open_formats]
        for name in _order_formats_to_open(formats_to_open, remaining):
            tag = new_element(document, FORMAT_TAG_MAP[name])
            cursor.append(tag)
            cursor = tag
            open_formats.append(name)

        cursor.append(NavigableString(node.text))

        next_node = next((candidate for candidate in remaining if _is_text(candidate) or _is_link(candidate)), None)
        for depth, name in enumerate(open_formats):
            if next_node is None or _is_link(next_node) or not next_node.has_format(name):
                for _ in range(len(open_formats) - depth):
                    cursor = cursor.parent
                del open_formats[depth:]
                break

    return parent


def render_inline_html(nodes: Sequence[Any], options: Optional[Any] = None) -> str:
    """Render a run of inline nodes and return the markup as a string."""
    document = create_document(options)
    container = new_element(document, "div")
    render_inline(nodes, container, document)
    return inner_html(container)
