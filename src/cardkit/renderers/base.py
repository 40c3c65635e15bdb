#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/base.py
"""Render output contract shared by every card renderer.

A card renderer returns a :class:`RenderOutput`: an element plus the mode in
which the host splices it into the document.

- ``"element"``: the whole element replaces the card
- ``"inner"``: only the element's children are spliced in, which lets a card
  emit sibling-level markup such as comments without a wrapper
- ``"value"``: the element is a ``<textarea>`` whose text is raw markup that
  is spliced in verbatim, never re-escaped
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from bs4 import Tag

from cardkit.constants import RenderType
from cardkit.utils.dom import create_document, element_from_html, inner_html, outer_html


@dataclass
class RenderOutput:
    """A rendered card and its splice mode.

    Parameters
    ----------
    element : Tag
        The rendered element
    type : {"element", "inner", "value"}, default="element"
        How the host splices ``element`` into the output

    """

    element: Tag
    type: RenderType = "element"

    def to_html(self) -> str:
        """Return the markup the host splices in for this output."""
        return get_render_content(self)


def get_render_content(output: RenderOutput) -> str:
    """Extract the markup of ``output`` according to its mode.

    ``"inner"`` yields the inner markup, ``"value"`` the held value (empty
    when the element holds none) and anything else the outer markup.
    """
    element = output.element
    if output.type == "inner":
        return inner_html(element)
    if output.type == "value":
        if element.name == "textarea":
            return element.get_text()
        value = element.get("value")
        return str(value) if value is not None else ""
    return outer_html(element)


def empty_container(options: Optional[Any] = None) -> RenderOutput:
    """Return the neutral output used for cards with nothing to render."""
    document = create_document(options)
    return RenderOutput(document.new_tag("span"), "inner")


def template_output(html: str, options: Optional[Any] = None) -> RenderOutput:
    """Parse a rendered template and return its first element.

    Falls back to an empty container when the template produced no element.
    """
    element = element_from_html(html.strip())
    if element is None:
        return empty_container(options)
    return RenderOutput(element)


def text_value(value: Any) -> str:
    """Return a property value as template text; missing values render as nothing."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
