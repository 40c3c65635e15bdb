#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/html_card.py
"""Import rules for HTML cards."""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Comment, Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap, DomElement
from cardkit.utils.dom import outer_html

_BEGIN_RE = re.compile(r"^kg-card-begin:\s?html$")
_END_RE = re.compile(r"^kg-card-end:\s?html$")


def is_html_end_comment(node: Optional[DomElement]) -> bool:
    return isinstance(node, Comment) and bool(_END_RE.match(str(node).strip()))


def parse_html_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for ``kg-card-begin: html`` comment blocks and top-level tables.

    The comment rule consumes every following sibling up to the matching end
    comment, removing them from the tree so they are not imported again.
    Only elements contribute markup; text and comments between them leave
    empty lines.
    """

    def comment(element: DomElement) -> Optional[DomConversion]:
        if not isinstance(element, Comment) or not _BEGIN_RE.match(str(element).strip()):
            return None

        def conversion(dom_node: Comment) -> ConversionResult:
            html: list[str] = []
            next_node = dom_node.next_sibling
            while next_node is not None and not is_html_end_comment(next_node):
                current = next_node
                html.append(outer_html(current) if isinstance(current, Tag) else "")
                next_node = current.next_sibling
                current.extract()
            return ConversionResult(node_class({"html": "\n".join(html).strip()}))

        return DomConversion(conversion, priority=0)

    def table(element: DomElement) -> Optional[DomConversion]:
        if not isinstance(element, Tag) or element.name != "table":
            return None
        parent = element.parent
        if isinstance(parent, Tag) and parent.name == "table":
            return None
        return DomConversion(lambda dom_node: ConversionResult(node_class({"html": outer_html(dom_node)})), priority=0)

    return {"#comment": comment, "table": table}
