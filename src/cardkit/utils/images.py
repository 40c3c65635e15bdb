#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/utils/images.py
"""Responsive image helpers.

Local content images (``/content/images/<file>`` under the site URL) can be
served at the configured widths through ``/content/images/size/w<W>/<file>``;
Unsplash images take the width as a ``w`` query parameter. These helpers
compute the usable widths, the ``srcset`` candidates and the resized
dimensions used by the image-bearing card renderers.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING, Any, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from bs4 import Tag

from cardkit.constants import LOCAL_CONTENT_IMAGE_PATTERN, UNSPLASH_PATTERN

if TYPE_CHECKING:
    from cardkit.options.render import RenderOptions

logger = logging.getLogger(__name__)

_LOCAL_IMAGE_RE = re.compile(LOCAL_CONTENT_IMAGE_PATTERN)
_UNSPLASH_RE = re.compile(UNSPLASH_PATTERN)
_IMAGES_PATH_RE = re.compile(r"(.*/content/images)/(.*)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's ``round`` uses banker's rounding; layout sizes must not.
    """
    return int(math.floor(value + 0.5))


def get_available_image_widths(width: Optional[int], image_sizes: Mapping[str, Mapping[str, int]]) -> list[int]:
    """Return the responsive widths usable for an image of intrinsic ``width``.

    Every configured width not larger than ``width`` is usable. The intrinsic
    width itself is appended when it is larger than the largest usable width
    but smaller than the largest configured width.

    Parameters
    ----------
    width : int or None
        Intrinsic image width
    image_sizes : Mapping
        Named size table, e.g. ``{"w600": {"width": 600}}``

    Returns
    -------
    list of int
        Sorted usable widths

    Examples
    --------
        >>> sizes = {"s": {"width": 600}, "m": {"width": 1000}, "l": {"width": 1600}, "xl": {"width": 2400}}
        >>> get_available_image_widths(1200, sizes)
        [600, 1000, 1200]

    """
    image_widths = sorted(size["width"] for size in image_sizes.values())
    if not width:
        return []
    available = [candidate for candidate in image_widths if candidate <= width]
    if available and image_widths and available[-1] < width < image_widths[-1]:
        available.append(width)
    return available


def is_local_content_image(url: Optional[str], site_url: Optional[str] = "") -> bool:
    """Return whether ``url`` points at the site's local content images."""
    if not url:
        return False
    normalized_site_url = re.sub(r"/$", "", site_url or "")
    image_path = url.replace(normalized_site_url, "", 1) if normalized_site_url else url
    return bool(_LOCAL_IMAGE_RE.search(image_path))


def is_unsplash_image(url: Optional[str]) -> bool:
    """Return whether ``url`` is served by Unsplash."""
    return bool(url) and bool(_UNSPLASH_RE.search(url))


def split_local_image_path(src: str) -> Optional[tuple[str, str]]:
    """Split a local content image URL into ``(images_path, filename)``."""
    match = _IMAGES_PATH_RE.match(src)
    if not match:
        return None
    return match.group(1), match.group(2)


def local_image_size_url(src: str, width: int) -> Optional[str]:
    """Return the URL of a local content image resized to ``width``."""
    parts = split_local_image_path(src)
    if parts is None:
        return None
    images_path, filename = parts
    return f"{images_path}/size/w{width}/{filename}"


def set_url_query_param(url: str, name: str, value: Any) -> str:
    """Return ``url`` with query parameter ``name`` set to ``value``."""
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    replaced = False
    updated: list[tuple[str, str]] = []
    for key, existing in query:
        if key == name:
            if not replaced:
                updated.append((key, str(value)))
                replaced = True
            continue
        updated.append((key, existing))
    if not replaced:
        updated.append((name, str(value)))
    path = parts.path or "/"
    return urlunsplit((parts.scheme, parts.netloc, path, urlencode(updated), parts.fragment))


def get_srcset_attribute(src: str, width: Optional[int], options: "RenderOptions") -> Optional[str]:
    """Build the ``srcset`` value for an image, or ``None`` when none applies.

    No srcset is produced without image optimization settings, when srcsets
    are disabled, without a width, or for local images the host cannot
    transform.
    """
    optimization = getattr(options, "image_optimization", None)
    if optimization is None or optimization.srcsets is False or not width or not optimization.content_image_sizes:
        return None

    site_url = getattr(options, "site_url", "")
    can_transform = getattr(options, "can_transform_image", None)
    is_local = is_local_content_image(src, site_url)
    if is_local and can_transform is not None and not can_transform(src):
        return None

    srcset_widths = get_available_image_widths(width, optimization.content_image_sizes)

    if is_local:
        srcs = []
        for srcset_width in srcset_widths:
            if srcset_width == width:
                srcs.append(f"{src} {srcset_width}w")
            elif srcset_width <= width:
                resized = local_image_size_url(src, srcset_width)
                if resized:
                    srcs.append(f"{resized} {srcset_width}w")
        if srcs:
            return ", ".join(srcs)

    if is_unsplash_image(src):
        return ", ".join(f"{set_url_query_param(src, 'w', w)} {w}w" for w in srcset_widths)

    return None


def set_srcset_attribute(element: Optional[Tag], src: str, width: Optional[int], options: "RenderOptions") -> None:
    """Set ``srcset`` on an ``img`` or ``source`` element with a ``src``."""
    if element is None or element.name not in ("img", "source") or not element.get("src"):
        return
    srcset = get_srcset_attribute(src, width, options)
    if srcset:
        element["srcset"] = srcset


def resize_image(
    width: int | float,
    height: int | float,
    *,
    desired_width: Optional[int] = None,
    desired_height: Optional[int] = None,
) -> Optional[tuple[int, int]]:
    """Scale ``(width, height)`` to a desired width or height keeping the aspect ratio.

    Returns
    -------
    tuple of (int, int) or None
        The resized ``(width, height)``, or None when neither dimension is
        requested or the source dimensions are unusable

    """
    if not width or not height:
        return None
    ratio = width / height
    if desired_width:
        return desired_width, round_half_up(desired_width / ratio)
    if desired_height:
        return round_half_up(desired_height * ratio), desired_height
    return None


def can_transform(src: str, options: "RenderOptions") -> bool:
    """Return whether ``src`` is a local image the host can resize."""
    transform = getattr(options, "can_transform_image", None)
    return is_local_content_image(src, getattr(options, "site_url", "")) and transform is not None and bool(transform(src))


def get_retina_src(src: str, width: Optional[int], options: "RenderOptions", min_width: int = 1200) -> Optional[str]:
    """Return a higher-resolution local image URL for email rendering.

    The first available width of at least ``min_width`` is used, unless it is
    the intrinsic width (the original file already serves it).
    """
    if not can_transform(src, options):
        return None
    optimization = getattr(options, "image_optimization", None)
    sizes = optimization.content_image_sizes if optimization is not None else {}
    candidates = get_available_image_widths(width, sizes)
    src_width = next((candidate for candidate in candidates if candidate >= min_width), None)
    if not src_width or src_width == width:
        return None
    return local_image_size_url(src, src_width)
