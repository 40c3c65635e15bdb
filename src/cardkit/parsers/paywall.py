#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/paywall.py
"""Import rule for the ``members-only`` comment marker."""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Comment

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap, DomElement


def parse_paywall_node(node_class: Any) -> DomConversionMap:
    def comment(element: DomElement) -> Optional[DomConversion]:
        if not isinstance(element, Comment) or str(element).strip() != "members-only":
            return None
        return DomConversion(lambda dom_node: ConversionResult(node_class()), priority=0)

    return {"#comment": comment}
