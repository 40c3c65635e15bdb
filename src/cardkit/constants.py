#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/constants.py
"""Constants shared across cardkit nodes, parsers and renderers."""

from __future__ import annotations

from typing import Literal

# Render targets
RenderTarget = Literal["web", "email"]
RENDER_TARGETS: tuple[str, ...] = ("web", "email")

# Render output splice modes
RenderType = Literal["element", "inner", "value"]

# Property descriptor URL kinds consumed by external URL rewriting
UrlType = Literal["url", "html", "markdown"]
URL_TYPES: frozenset[str] = frozenset({"url", "html", "markdown"})

# Visibility segment sentinels
ALL_MEMBERS_SEGMENT = "status:free,status:-free"
NO_MEMBERS_SEGMENT = ""

# Replacement for data: URLs in exported records
BASE64_SENTINEL = "<base64String>"

# Image layout
DEFAULT_CONTENT_IMAGE_SIZES: dict[str, dict[str, int]] = {
    "w600": {"width": 600},
    "w1000": {"width": 1000},
    "w1600": {"width": 1600},
    "w2400": {"width": 2400},
}
EMAIL_MAX_IMAGE_WIDTH = 600
EMAIL_PRODUCT_IMAGE_WIDTH = 560
EMAIL_RETINA_MIN_WIDTH = 1200
SIZES_REGULAR_BREAKPOINT = 720
SIZES_WIDE_BREAKPOINT = 1200

LOCAL_CONTENT_IMAGE_PATTERN = r"^(/.*|__GHOST_URL__)/?content/images/"
UNSPLASH_PATTERN = r"images\.unsplash\.com"

# Inline text formats (bit flags, persisted in text records)
IS_BOLD = 1
IS_ITALIC = 1 << 1
IS_STRIKETHROUGH = 1 << 2
IS_UNDERLINE = 1 << 3
IS_CODE = 1 << 4
IS_SUBSCRIPT = 1 << 5
IS_SUPERSCRIPT = 1 << 6
IS_HIGHLIGHT = 1 << 7

TEXT_FORMATS: dict[str, int] = {
    "bold": IS_BOLD,
    "italic": IS_ITALIC,
    "strikethrough": IS_STRIKETHROUGH,
    "underline": IS_UNDERLINE,
    "code": IS_CODE,
    "subscript": IS_SUBSCRIPT,
    "superscript": IS_SUPERSCRIPT,
    "highlight": IS_HIGHLIGHT,
}

# Order matters: it fixes the nesting order for formats opened together
FORMAT_TAG_MAP: dict[str, str] = {
    "bold": "strong",
    "italic": "em",
    "strikethrough": "s",
    "underline": "u",
    "code": "code",
    "subscript": "sub",
    "superscript": "sup",
    "highlight": "mark",
}

# Callout text allow-list
CALLOUT_ALLOWED_TAGS: frozenset[str] = frozenset(
    {"a", "strong", "em", "b", "i", "br", "code", "mark", "s", "del", "u", "sup", "sub"}
)

DEFAULT_CALLOUT_EMOJI = "💡"
DEFAULT_SIGNUP_SUCCESS_MESSAGE = "Email sent! Check your inbox to complete your signup."

# Void elements serialized without a closing tag
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)
