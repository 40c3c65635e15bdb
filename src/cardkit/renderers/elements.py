#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/elements.py
"""Renderers for the generic block element nodes."""

from __future__ import annotations

from typing import Any, Optional

from cardkit.renderers.base import RenderOutput
from cardkit.renderers.text import render_inline
from cardkit.utils.dom import create_document, new_element
from cardkit.utils.html import slugify


def _render_block(node: Any, options: Any, name: str, attrs: Optional[dict] = None) -> RenderOutput:
    document = create_document(options)
    element = new_element(document, name, attrs)
    render_inline(node.children, element, document)
    return RenderOutput(element)


def render_paragraph_node(node: Any, options: Any) -> RenderOutput:
    return _render_block(node, options, "p")


def render_heading_node(node: Any, options: Any) -> RenderOutput:
    """Render a heading with an ``id`` slugged from its text, for anchor links."""
    slug = slugify(node.get_text_content())
    return _render_block(node, options, node.tag, {"id": slug} if slug else None)


def render_quote_node(node: Any, options: Any) -> RenderOutput:
    return _render_block(node, options, "blockquote")


def render_aside_node(node: Any, options: Any) -> RenderOutput:
    return _render_block(node, options, "blockquote", {"class": "kg-blockquote-alt"})
