#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/visibility.py
"""Visibility descriptors and the gate applied to rendered cards.

Two descriptor shapes coexist in stored documents:

- legacy: ``{"showOnWeb": bool, "showOnEmail": bool, "segment": str}``
- current: ``{"web": {"nonMember": bool, "memberSegment": str},
  "email": {"memberSegment": str}}``

Legacy descriptors are migrated in place the first time they are read by
the gate or imported from a record. Migration only fills missing current
fields, so it is idempotent; the email segment is the one exception and is
forced to the no-members sentinel whenever ``showOnEmail`` is falsy.

The gate wraps a card's render output for the web target in
``kg-gated-block`` comment markers, which downstream content gating uses to
strip blocks a visitor cannot access, and segments email output with a
``data-gh-segment`` container.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, MutableMapping

from cardkit.constants import ALL_MEMBERS_SEGMENT, NO_MEMBERS_SEGMENT
from cardkit.renderers.base import RenderOutput, empty_container, get_render_content
from cardkit.utils.dom import create_document, new_element, set_inner_html

logger = logging.getLogger(__name__)

DEFAULT_VISIBILITY: dict[str, dict[str, Any]] = {
    "web": {"nonMember": True, "memberSegment": ALL_MEMBERS_SEGMENT},
    "email": {"memberSegment": ALL_MEMBERS_SEGMENT},
}


def build_default_visibility() -> dict[str, dict[str, Any]]:
    """Return a fresh deep copy of the fully-open visibility descriptor."""
    return copy.deepcopy(DEFAULT_VISIBILITY)


def uses_old_visibility_format(visibility: MutableMapping[str, Any]) -> bool:
    """Return whether ``visibility`` lacks any of the current-format keys."""
    web = visibility.get("web")
    return "web" not in visibility or "email" not in visibility or not isinstance(web, dict) or "nonMember" not in web


def migrate_old_visibility_format(visibility: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Fill current-format fields from legacy fields, in place.

    Parameters
    ----------
    visibility : MutableMapping
        Descriptor to migrate. Legacy keys are left in place; the current
        keys are authoritative afterwards.

    Returns
    -------
    MutableMapping
        The same descriptor, for chaining

    """
    show_on_web = visibility.get("showOnWeb")
    if not isinstance(visibility.get("web"), dict):
        visibility["web"] = {}
    web = visibility["web"]
    if web.get("nonMember") is None:
        web["nonMember"] = show_on_web
    if web.get("memberSegment") is None:
        web["memberSegment"] = ALL_MEMBERS_SEGMENT if show_on_web else NO_MEMBERS_SEGMENT

    if not isinstance(visibility.get("email"), dict):
        visibility["email"] = {}
    email = visibility["email"]
    if visibility.get("showOnEmail"):
        if email.get("memberSegment") is None:
            email["memberSegment"] = visibility.get("segment") or ALL_MEMBERS_SEGMENT
    else:
        email["memberSegment"] = NO_MEMBERS_SEGMENT

    return visibility


def is_visibility_active(visibility: MutableMapping[str, Any]) -> bool:
    """Return whether ``visibility`` restricts the card in any way.

    Legacy descriptors are judged on their legacy fields without migrating.
    """
    if uses_old_visibility_format(visibility):
        return (
            visibility.get("showOnEmail") is False
            or visibility.get("showOnWeb") is False
            or visibility.get("segment") != ""
        )
    return (
        visibility["web"].get("nonMember") is False
        or visibility["web"].get("memberSegment") != ALL_MEMBERS_SEGMENT
        or visibility["email"].get("memberSegment") != ALL_MEMBERS_SEGMENT
    )


def format_gate_value(value: Any) -> str:
    """Format a descriptor value for the gated-block marker (``true``/``false`` for booleans)."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "undefined"
    return str(value)


def render_with_visibility(output: RenderOutput, visibility: MutableMapping[str, Any], options: Any) -> RenderOutput:
    """Apply a visibility descriptor to a card's render output.

    Parameters
    ----------
    output : RenderOutput
        The card's own render output
    visibility : MutableMapping
        Visibility descriptor; migrated in place when legacy-shaped
    options : RenderOptions
        Render options; only ``target`` is read

    Returns
    -------
    RenderOutput
        ``output`` unchanged when the card is visible to everybody on the
        target, an empty container when it is visible to nobody, otherwise
        the content wrapped for segmenting or gating.

    Examples
    --------
        >>> gated = render_with_visibility(output, {"web": {"nonMember": False, "memberSegment": "status:-free"},
        ...                                          "email": {"memberSegment": ""}}, RenderOptions())
        >>> gated.type
        'value'

    """
    content = get_render_content(output)

    if uses_old_visibility_format(visibility):
        migrate_old_visibility_format(visibility)

    if getattr(options, "target", "web") == "email":
        segment = visibility["email"].get("memberSegment")
        if segment == NO_MEMBERS_SEGMENT:
            return empty_container(options)
        if segment == ALL_MEMBERS_SEGMENT:
            return output
        return _render_with_email_visibility(content, visibility["email"], options)

    web = visibility["web"]
    if web.get("nonMember") is False and web.get("memberSegment") == NO_MEMBERS_SEGMENT:
        return empty_container(options)

    if web.get("nonMember") is not True or web.get("memberSegment") != ALL_MEMBERS_SEGMENT:
        return _render_with_web_visibility(content, web, options)

    return output


def _render_with_email_visibility(
    content: str, email_visibility: MutableMapping[str, Any], options: Any
) -> RenderOutput:
    document = create_document(options)
    container = new_element(document, "div")
    set_inner_html(container, content)
    container["data-gh-segment"] = format_gate_value(email_visibility.get("memberSegment"))
    return RenderOutput(container, "element")


def _render_with_web_visibility(content: str, web_visibility: MutableMapping[str, Any], options: Any) -> RenderOutput:
    non_member = format_gate_value(web_visibility.get("nonMember"))
    member_segment = format_gate_value(web_visibility.get("memberSegment"))
    wrapped = (
        f'\n<!--kg-gated-block:begin nonMember:{non_member} memberSegment:"{member_segment}" -->'
        f"{content}<!--kg-gated-block:end-->\n"
    )
    textarea = new_element(create_document(options), "textarea", text=wrapped)
    logger.debug("Gated card for web: nonMember=%s memberSegment=%r", non_member, member_segment)
    return RenderOutput(textarea, "value")
