#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/nodes/header.py
"""Header card node."""

from __future__ import annotations

from typing import Optional

from cardkit.nodes.base import CardNode, PropertyDescriptor
from cardkit.parsers.header import parse_header_node
from cardkit.renderers.header import render_header_node


class HeaderNode(
    CardNode,
    node_type="header",
    properties=(
        PropertyDescriptor("size", "small"),
        PropertyDescriptor("style", "dark"),
        PropertyDescriptor("buttonEnabled", False),
        PropertyDescriptor("buttonUrl", "", url_type="url"),
        PropertyDescriptor("buttonText", ""),
        PropertyDescriptor("header", "", url_type="html", word_count=True),
        PropertyDescriptor("subheader", "", url_type="html", word_count=True),
        PropertyDescriptor("backgroundImageSrc", "", url_type="url"),
        # instance-level version selects the v1 or v2 design; old properties are never removed
        PropertyDescriptor("version", 1),
        PropertyDescriptor("accentColor", "#FF1A75"),
        PropertyDescriptor("alignment", "center"),
        PropertyDescriptor("backgroundColor", "#000000"),
        PropertyDescriptor("backgroundImageWidth", None),
        PropertyDescriptor("backgroundImageHeight", None),
        PropertyDescriptor("backgroundSize", "cover"),
        PropertyDescriptor("textColor", "#FFFFFF"),
        PropertyDescriptor("buttonColor", "#ffffff"),
        PropertyDescriptor("buttonTextColor", "#000000"),
        PropertyDescriptor("layout", "full"),
        PropertyDescriptor("swapped", False),
    ),
):
    """A full-width header with heading, subheading, button and background.

    ``version`` is a regular property here, so the persisted record carries
    the card's own design version rather than a fixed schema version.
    """

    size: str
    style: str
    buttonEnabled: bool
    buttonUrl: str
    buttonText: str
    header: str
    subheader: str
    backgroundImageSrc: str
    version: int
    accentColor: str
    alignment: str
    backgroundColor: str
    backgroundImageWidth: Optional[int]
    backgroundImageHeight: Optional[int]
    backgroundSize: str
    textColor: str
    buttonColor: str
    buttonTextColor: str
    layout: str
    swapped: bool

    @classmethod
    def import_dom(cls):
        return parse_header_node(cls)

    def export_dom(self, options):
        return render_header_node(self, options)
