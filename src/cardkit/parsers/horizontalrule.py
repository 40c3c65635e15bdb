#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/horizontalrule.py
"""Import rule for ``<hr>``."""

from __future__ import annotations

from typing import Any

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap


def parse_horizontal_rule_node(node_class: Any) -> DomConversionMap:
    def hr(element: Tag) -> DomConversion:
        return DomConversion(lambda dom_node: ConversionResult(node_class()), priority=0)

    return {"hr": hr}
