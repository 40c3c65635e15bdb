#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/gating.py
"""Member access checks for gated content.

Web renders of cards with restricted visibility are wrapped in marker
comments:

    <!--kg-gated-block:begin nonMember:false memberSegment:"status:-free" -->
    ...card markup...
    <!--kg-gated-block:end-->

This module decides whether a member may see such a block and strips the
blocks they may not.

Members are plain mappings:

    {"status": "free" | "paid" | "comped", "products": [{"slug": "gold"}, ...]}

``None`` stands for an anonymous visitor. Product entries may also be bare
slug strings.

Segments are a comma separated list of ``key:value`` clauses. A member
matches the segment when any clause matches. Supported keys are ``status``
and ``product``/``products``; values may be quoted and a leading ``-``
negates the clause. Clauses with other keys are ignored, and a segment with
no supported clause matches nobody.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

PERMIT_ACCESS = True
BLOCK_ACCESS = False

SEGMENT_KEYS = frozenset({"status", "product", "products"})

_GATED_BLOCK_RE = re.compile(
    r"\s*<!--kg-gated-block:begin (?P<params>.*?)\s*-->(?P<content>.*?)<!--kg-gated-block:end-->\s*",
    re.DOTALL,
)
_PARAM_RE = re.compile(r'(?P<key>\w+):(?:"(?P<quoted>[^"]*)"|(?P<bare>\S+))')
_CLAUSE_RE = re.compile(r"^\s*(?P<key>\w+)\s*:\s*(?P<negate>-)?\s*(?P<value>'[^']*'|\"[^\"]*\"|[^,]*?)\s*$")


def parse_gated_block_params(params: str) -> dict[str, Any]:
    """Parse the parameters of a gated block begin marker.

    Examples
    --------
        >>> parse_gated_block_params('nonMember:true memberSegment:"status:free"')
        {'nonMember': True, 'memberSegment': 'status:free'}

    """
    parsed: dict[str, Any] = {}
    for match in _PARAM_RE.finditer(params):
        key = match.group("key")
        if match.group("quoted") is not None:
            parsed[key] = match.group("quoted")
            continue
        value = match.group("bare")
        if value in ("true", "false"):
            parsed[key] = value == "true"
        elif value == "undefined":
            parsed[key] = None
        else:
            parsed[key] = value
    return parsed


def _member_products(member: Mapping[str, Any]) -> set[str]:
    slugs = set()
    for product in member.get("products") or []:
        slug = product.get("slug") if isinstance(product, Mapping) else product
        if slug:
            slugs.add(str(slug))
    return slugs


def _parse_clauses(segment: str) -> list[tuple[str, bool, str]]:
    clauses = []
    for raw in segment.split(","):
        match = _CLAUSE_RE.match(raw)
        if not match:
            logger.debug("Ignoring malformed segment clause %r", raw)
            continue
        key = match.group("key").lower()
        if key not in SEGMENT_KEYS:
            logger.debug("Ignoring unsupported segment key %r", key)
            continue
        value = match.group("value").strip("'\"")
        clauses.append((key, bool(match.group("negate")), value))
    return clauses


def member_matches_segment(segment: str, member: Mapping[str, Any]) -> Optional[bool]:
    """Evaluate a member segment against a member.

    Returns
    -------
    bool or None
        Whether any clause matches, or None when the segment has no
        supported clause

    """
    clauses = _parse_clauses(segment)
    if not clauses:
        return None

    status = member.get("status")
    products = _member_products(member)
    for key, negate, value in clauses:
        matched = status == value if key == "status" else value in products
        if matched != negate:
            return True
    return False


def check_gated_block_access(params: Mapping[str, Any], member: Optional[Mapping[str, Any]]) -> bool:
    """Return whether ``member`` may see a gated block.

    Parameters
    ----------
    params : Mapping
        ``{"nonMember": bool, "memberSegment": str}`` from the block marker
    member : Mapping, optional
        The member, or None for an anonymous visitor

    Returns
    -------
    bool
        ``PERMIT_ACCESS`` or ``BLOCK_ACCESS``

    """
    non_member = params.get("nonMember")
    member_segment = params.get("memberSegment")
    is_logged_in = bool(member)

    if non_member and not is_logged_in:
        return PERMIT_ACCESS

    if not member_segment and is_logged_in:
        return BLOCK_ACCESS

    if member_segment and member:
        matched = member_matches_segment(member_segment, member)
        if matched is not None:
            return PERMIT_ACCESS if matched else BLOCK_ACCESS

    return BLOCK_ACCESS


def strip_gated_blocks(html: str, member: Optional[Mapping[str, Any]]) -> str:
    """Remove the gated blocks ``member`` may not see and unwrap the rest.

    Examples
    --------
        >>> html = '<p>a</p>\\n<!--kg-gated-block:begin nonMember:false memberSegment:"status:-free" --><p>b</p><!--kg-gated-block:end-->\\n'
        >>> strip_gated_blocks(html, None)
        '<p>a</p>'
        >>> strip_gated_blocks(html, {"status": "paid"})
        '<p>a</p><p>b</p>'

    """

    def replace(match: re.Match) -> str:
        params = parse_gated_block_params(match.group("params"))
        if check_gated_block_access(params, member):
            return match.group("content")
        return ""

    return _GATED_BLOCK_RE.sub(replace, html)
