#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/renderers/button.py
"""Button card renderer."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from cardkit.renderers.base import RenderOutput, empty_container, text_value
from cardkit.utils.dom import create_document, new_element


def get_card_classes(node: Any) -> str:
    classes = ["kg-card kg-button-card"]
    if node.alignment:
        classes.append(f"kg-align-{node.alignment}")
    return " ".join(classes)


def render_button_node(node: Any, options: Any) -> RenderOutput:
    """Render a button card; cards without a URL render empty."""
    if not node.buttonUrl or not str(node.buttonUrl).strip():
        return empty_container(options)

    document = create_document(options)
    if options.target == "email":
        return email_template(node, document)
    return frontend_template(node, document)


def frontend_template(node: Any, document: BeautifulSoup) -> RenderOutput:
    card = new_element(document, "div", {"class": get_card_classes(node)})
    card.append(
        new_element(
            document,
            "a",
            {"href": node.buttonUrl, "class": "kg-btn kg-btn-accent"},
            text=node.buttonText or "Button Title",
        )
    )
    return RenderOutput(card)


def email_template(node: Any, document: BeautifulSoup) -> RenderOutput:
    """Build the table-based email button wrapped in a paragraph."""
    parent = new_element(document, "p")
    button_div = new_element(document, "div", {"class": "btn btn-accent"})
    parent.append(button_div)
    table = new_element(
        document, "table", {"border": "0", "cellspacing": "0", "cellpadding": "0", "align": text_value(node.alignment)}
    )
    button_div.append(table)
    row = new_element(document, "tr")
    table.append(row)
    cell = new_element(document, "td", {"align": "center"})
    row.append(cell)
    cell.append(new_element(document, "a", {"href": node.buttonUrl}, text=text_value(node.buttonText)))
    return RenderOutput(parent)
