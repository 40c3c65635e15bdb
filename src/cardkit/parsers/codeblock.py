#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/codeblock.py
"""Import rules for code block cards."""

from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.parsers.common import read_caption_from_element
from cardkit.utils.dom import first_element_child

_LANGUAGE_RE = re.compile(r"lang(?:uage)?-(.*?)(?:\s|$)", re.IGNORECASE)


def read_code_language(pre: Tag, code: Tag) -> Optional[str]:
    """Return the lowercased language from a ``lang-*``/``language-*`` class on ``pre`` or ``code``."""
    for element in (pre, code):
        classes = element.get("class") or ""
        if not isinstance(classes, str):
            classes = " ".join(classes)
        match = _LANGUAGE_RE.search(classes)
        if match:
            return match.group(1).lower()
    return None


def parse_code_block_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for captioned code figures (priority 2) and ``<pre><code>`` (priority 1).

    A figure without a caption declines so the bare ``<pre>`` rule picks up
    the code when the figure's children are imported.
    """

    def figure(element: Tag) -> Optional[DomConversion]:
        pre = element.find("pre")
        if element.name != "figure" or pre is None:
            return None

        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            code = pre.find("code")
            figcaption = dom_node.find("figcaption")
            if code is None or figcaption is None:
                return None
            payload = {"code": code.get_text(), "caption": read_caption_from_element(dom_node)}
            language = read_code_language(pre, code)
            if language:
                payload["language"] = language
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=2)

    def pre(element: Tag) -> DomConversion:
        def conversion(dom_node: Tag) -> Optional[ConversionResult]:
            if dom_node.name != "pre":
                return None
            code = first_element_child(dom_node)
            if code is None or code.name != "code":
                return None
            payload = {"code": code.get_text()}
            language = read_code_language(dom_node, code)
            if language:
                payload["language"] = language
            return ConversionResult(node_class(payload))

        return DomConversion(conversion, priority=1)

    return {"figure": figure, "pre": pre}
