#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/utils/html.py
"""HTML string and tree helpers used by card parsers and renderers."""

from __future__ import annotations

import re
from typing import Iterable

from bs4 import Comment, NavigableString, Tag

from cardkit.constants import VOID_ELEMENTS
from cardkit.utils.dom import inner_html, parse_fragment

_TAG_RE = re.compile(r"<[^>]*>?")
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_REPLACEMENT_STRING_RE = re.compile(r'\{(\w*?)(?:,? *"(.*?)")?\}')
_HELPER_PATTERN_RE = re.compile(r"((.*?){.*?}(.*?))", re.IGNORECASE | re.DOTALL)


def escape_html(unsafe: str | None) -> str:
    """Escape ``& < > " '`` for use in text and attribute values."""
    if not unsafe:
        return ""
    return (
        str(unsafe)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def truncate_html(text: str | None, max_length: int, max_length_mobile: int) -> str:
    """Escape ``text`` and truncate it separately for desktop and mobile widths.

    Text longer than ``max_length_mobile`` gets its desktop-only tail wrapped
    in ``<span class="desktop-only">`` followed by an ellipsis appropriate to
    which limit was exceeded.
    """
    text = text or ""
    if len(text) <= max_length_mobile:
        return escape_html(text)

    ellipsis = ""
    if len(text) <= max_length:
        ellipsis = '<span class="hide-desktop">…</span>'
    else:
        ellipsis = "…"
    return (
        escape_html(text[: max_length_mobile - 1])
        + '<span class="desktop-only">'
        + escape_html(text[max_length_mobile - 1 : max_length - 1])
        + "</span>"
        + ellipsis
    )


def slugify(text: str | None) -> str:
    """Return a lowercase, dash-separated slug with tags and punctuation removed."""
    value = _TAG_RE.sub("", text or "")
    value = _NON_WORD_RE.sub("", value)
    value = _WHITESPACE_RE.sub("-", value)
    return value.lower()


def clean_dom(node: Tag, allowed_tags: Iterable[str]) -> Tag:
    """Unwrap every descendant element whose tag is not allowed, in place.

    Text and the children of unwrapped elements are kept.
    """
    allowed = {tag.lower() for tag in allowed_tags}
    for child in list(node.children):
        if not isinstance(child, Tag):
            continue
        if child.name not in allowed:
            clean_dom(child, allowed)
            child.unwrap()
        else:
            clean_dom(child, allowed)
    return node


def clean_basic_html(html: str | None) -> str | None:
    """Normalize a short HTML snippet such as a caption.

    Elements with no text are removed (void elements are kept), elements with
    only whitespace collapse to a single space, non-breaking spaces become
    plain spaces, whitespace runs collapse and the result is trimmed.
    """
    if not html:
        return html
    fragment = parse_fragment(html.strip())
    for comment in fragment.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    for element in reversed(fragment.find_all(True)):
        if element.name in VOID_ELEMENTS or element.find(lambda tag: tag.name in VOID_ELEMENTS):
            continue
        text = element.get_text()
        if not text.strip():
            if text:
                element.replace_with(NavigableString(" "))
            else:
                element.decompose()
    cleaned = inner_html(fragment)
    cleaned = cleaned.replace("&nbsp;", " ").replace("\xa0", " ")
    cleaned = _WHITESPACE_RE.sub(" ", cleaned)
    cleaned = re.sub(r"^(?:\s|<br>)+|(?:\s|<br>)+$", "", cleaned)
    return cleaned


def remove_spaces(html: str) -> str:
    """Collapse newlines and whitespace runs into single spaces."""
    return _WHITESPACE_RE.sub(" ", html.replace("\n", " ")).strip()


def wrap_replacement_strings(html: str) -> str:
    """Wrap ``{name}`` and ``{name, "fallback"}`` replacement strings in ``%%``."""
    return _REPLACEMENT_STRING_RE.sub(lambda match: f"%%{match.group(0)}%%", html)


def remove_code_wrappers_from_helpers(html: str) -> str:
    """Unwrap ``<code>`` elements whose text contains a ``{helper}`` replacement string."""
    fragment = parse_fragment(html)
    for code in fragment.find_all("code"):
        if _HELPER_PATTERN_RE.search(code.get_text()):
            code.unwrap()
    return inner_html(fragment)
