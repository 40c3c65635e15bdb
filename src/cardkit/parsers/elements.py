#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/parsers/elements.py
"""Import rules for the generic element nodes.

Inline formatting tags (``strong``, ``em``, ``span`` ...) do not create nodes
of their own. Their conversions return a ``for_child`` hook that sets format
bits on every text node produced beneath them. Word and Google Docs markup
express formatting with ``span`` styles and classes, which are mapped to the
same bits.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from bs4 import Tag

from cardkit.parsers.base import ConversionResult, DomConversion, DomConversionMap
from cardkit.utils.dom import get_style_property, has_class, text_content

logger = logging.getLogger(__name__)

FORMAT_TAGS: dict[str, str] = {
    "strong": "bold",
    "b": "bold",
    "em": "italic",
    "i": "italic",
    "u": "underline",
    "s": "strikethrough",
    "code": "code",
    "sub": "subscript",
    "sup": "superscript",
    "mark": "highlight",
}

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")


def _is_text_node(node: Any) -> bool:
    return callable(getattr(node, "has_format", None))


def _apply_format(node: Any, name: str) -> Any:
    if _is_text_node(node) and not node.has_format(name):
        node.toggle_format(name)
    return node


def span_formats(element: Tag) -> list[str]:
    """Return the formats expressed by a span's (or its parent's) styles and classes."""
    parent = element.parent if isinstance(element.parent, Tag) else None

    def style_is(name: str, *values: str) -> bool:
        return any(get_style_property(tag, name).lower() in values for tag in (element, parent) if tag is not None)

    def class_is(name: str) -> bool:
        return any(has_class(tag, name) for tag in (element, parent) if tag is not None)

    formats = []
    if style_is("font-weight", "bold", "700"):
        formats.append("bold")
    if style_is("font-style", "italic"):
        formats.append("italic")
    if style_is("text-decoration", "underline"):
        formats.append("underline")
    if style_is("text-decoration", "line-through") or class_is("Strikethrough"):
        formats.append("strikethrough")
    if class_is("Highlight"):
        formats.append("highlight")
    if get_style_property(element, "vertical-align") == "sub":
        formats.append("subscript")
    if get_style_property(element, "vertical-align") == "super":
        formats.append("superscript")
    return formats


def _format_conversion(formats: list[str]) -> Callable[[Any], ConversionResult]:
    def conversion(dom_node: Any) -> ConversionResult:
        def for_child(child: Any, parent: Any) -> Any:
            for name in formats:
                child = _apply_format(child, name)
            return child

        return ConversionResult(None, for_child=for_child)

    return conversion


def parse_text_node(node_class: Any) -> DomConversionMap:
    """Return the matchers for inline formatting tags."""

    def format_tag(element: Tag) -> Optional[DomConversion]:
        # Google Docs wraps whole documents in <b style="font-weight:normal">
        if element.name == "b" and get_style_property(element, "font-weight") == "normal":
            return DomConversion(_format_conversion([]), priority=0)
        return DomConversion(_format_conversion([FORMAT_TAGS[element.name]]), priority=0)

    def span(element: Tag) -> Optional[DomConversion]:
        return DomConversion(_format_conversion(span_formats(element)), priority=1)

    conversions: DomConversionMap = {tag: format_tag for tag in FORMAT_TAGS}
    conversions["span"] = span
    return conversions


def parse_linebreak_node(node_class: Any) -> DomConversionMap:
    def br(element: Tag) -> Optional[DomConversion]:
        return DomConversion(lambda dom_node: ConversionResult(node_class()), priority=0)

    return {"br": br}


def parse_link_node(node_class: Any) -> DomConversionMap:
    """Return the matcher for anchors; anchors without content create no link."""

    def conversion(dom_node: Tag) -> ConversionResult:
        if not text_content(dom_node) and not dom_node.find(True):
            logger.debug("Skipping anchor without content: %s", dom_node.get("href"))
            return ConversionResult(None)
        rel = dom_node.get("rel")
        node = node_class(
            url=dom_node.get("href") or "",
            rel=" ".join(rel) if isinstance(rel, list) else rel,
            target=dom_node.get("target"),
            title=dom_node.get("title"),
        )
        return ConversionResult(node)

    def a(element: Tag) -> Optional[DomConversion]:
        return DomConversion(conversion, priority=1)

    return {"a": a}


def parse_paragraph_node(node_class: Any) -> DomConversionMap:
    def p(element: Tag) -> Optional[DomConversion]:
        return DomConversion(lambda dom_node: ConversionResult(node_class()), priority=0)

    return {"p": p}


def parse_heading_node(node_class: Any) -> DomConversionMap:
    """Return matchers for ``h1``-``h6`` and Word's ``p[role=heading][aria-level]``."""

    def heading(element: Tag) -> Optional[DomConversion]:
        return DomConversion(lambda dom_node: ConversionResult(node_class(tag=dom_node.name)), priority=0)

    def aria_heading(element: Tag) -> Optional[DomConversion]:
        level = element.get("aria-level")
        if element.get("role") != "heading" or not level:
            return None
        try:
            level_number = int(str(level).strip(), 10)
        except ValueError:
            return None
        if not 0 < level_number < 7:
            return None
        return DomConversion(lambda dom_node: ConversionResult(node_class(tag=f"h{level_number}")), priority=1)

    conversions: DomConversionMap = {tag: heading for tag in HEADING_TAGS}
    conversions["p"] = aria_heading
    return conversions


def merge_quote_paragraphs(line_break_class: Any) -> Callable[[list[Any]], list[Any]]:
    """Return the hook flattening a blockquote's paragraphs into one run.

    Paragraph contents are separated by two line breaks; other children are
    kept as they are.
    """

    def after(children: list[Any]) -> list[Any]:
        merged: list[Any] = []
        for child in children:
            if getattr(child, "node_type", None) == "paragraph":
                if merged:
                    merged.extend([line_break_class(), line_break_class()])
                merged.extend(child.children)
            else:
                merged.append(child)
        return merged

    return after


def parse_quote_node(node_class: Any, line_break_class: Any) -> DomConversionMap:
    """Return the matcher for blockquotes that are not pull quotes."""

    def blockquote(element: Tag) -> Optional[DomConversion]:
        if has_class(element, "kg-blockquote-alt"):
            return None

        def conversion(dom_node: Tag) -> ConversionResult:
            return ConversionResult(node_class(), after=merge_quote_paragraphs(line_break_class))

        return DomConversion(conversion, priority=1)

    return {"blockquote": blockquote}


def parse_aside_node(node_class: Any, line_break_class: Any) -> DomConversionMap:
    """Return the matcher for pull quotes (``blockquote.kg-blockquote-alt``)."""

    def blockquote(element: Tag) -> Optional[DomConversion]:
        if not has_class(element, "kg-blockquote-alt"):
            return None

        def conversion(dom_node: Tag) -> ConversionResult:
            return ConversionResult(node_class(), after=merge_quote_paragraphs(line_break_class))

        return DomConversion(conversion, priority=0)

    return {"blockquote": blockquote}
