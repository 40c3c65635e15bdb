#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/markdown.py
"""Markdown card renderer.

Markdown is converted with markdown-it-py using CommonMark plus tables and
strikethrough, raw HTML passthrough and hard line breaks. Headings receive
an ``id`` derived from their text so they can be linked to.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from markdown_it import MarkdownIt

from cardkit.renderers.base import RenderOutput
from cardkit.utils.dom import create_document, new_element, set_inner_html

_ID_STRIP_RE = re.compile(r"[^\w\s-]")
_ID_SPACE_RE = re.compile(r"\s+")


def heading_id(text: str) -> str:
    """Return the anchor id used for a heading's text."""
    value = _ID_STRIP_RE.sub("", text.strip().lower())
    return _ID_SPACE_RE.sub("-", value)


def _heading_ids(state: Any) -> None:
    tokens = state.tokens
    for index, token in enumerate(tokens):
        if token.type == "heading_open" and index + 1 < len(tokens) and not token.attrGet("id"):
            token.attrSet("id", heading_id(tokens[index + 1].content))


@lru_cache(maxsize=1)
def get_markdown_renderer() -> MarkdownIt:
    """Return the shared markdown-it instance."""
    md = MarkdownIt("commonmark", {"html": True, "breaks": True}).enable(["table", "strikethrough"])
    md.core.ruler.push("heading_ids", _heading_ids)
    return md


def render_markdown(markdown: str) -> str:
    """Render markdown source to HTML."""
    return get_markdown_renderer().render(markdown or "")


def render_markdown_node(node: Any, options: Any) -> RenderOutput:
    """Render the card's markdown inside a container spliced in by its inner markup."""
    document = create_document(options)
    element = new_element(document, "div")
    set_inner_html(element, render_markdown(node.markdown or ""))
    return RenderOutput(element, "inner")
