#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/callout.py
"""Callout card renderer."""

from __future__ import annotations

import re
from typing import Any

from cardkit.constants import CALLOUT_ALLOWED_TAGS
from cardkit.renderers.base import RenderOutput
from cardkit.utils.dom import create_document, inner_html, new_element, set_inner_html
from cardkit.utils.html import clean_dom

_COLOR_CLASS_RE = re.compile(r"^[a-zA-Z\d-]+$")


def render_callout_node(node: Any, options: Any) -> RenderOutput:
    """Render a callout as ``div.kg-callout-card`` with sanitized inline text.

    A background color that cannot be used in a class name (such as
    ``rgba(0, 0, 0, 0)`` pasted from old documents) is reset to ``white`` on
    the node itself.
    """
    document = create_document(options)
    if not node.backgroundColor or not _COLOR_CLASS_RE.match(str(node.backgroundColor)):
        node.backgroundColor = "white"

    element = new_element(
        document, "div", {"class": f"kg-card kg-callout-card kg-callout-card-{node.backgroundColor}"}
    )
    if node.calloutEmoji:
        element.append(new_element(document, "div", {"class": "kg-callout-emoji"}, text=node.calloutEmoji))

    text_element = new_element(document, "div", {"class": "kg-callout-text"})
    scratch = new_element(document, "div")
    set_inner_html(scratch, node.calloutText or "")
    clean_dom(scratch, CALLOUT_ALLOWED_TAGS)
    set_inner_html(text_element, inner_html(scratch))
    element.append(text_element)
    return RenderOutput(element)
