#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/options/render.py
"""Configuration options for rendering cards to HTML.

This module defines the options passed to every card renderer: the render
target, the site configuration used for image handling, and the hooks the
host application supplies for image transforms and collection posts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional

from cardkit.constants import DEFAULT_CONTENT_IMAGE_SIZES, RENDER_TARGETS
from cardkit.exceptions import ValidationError
from cardkit.options.base import BaseRendererOptions, CloneFrozenMixin


@dataclass(frozen=True)
class ImageOptimization(CloneFrozenMixin):
    """Responsive image configuration.

    Parameters
    ----------
    content_image_sizes : dict
        Named size table, e.g. ``{"w600": {"width": 600}}``. Widths are used
        to build ``srcset`` candidates for local and Unsplash images.
    default_max_width : int, optional
        Images wider than this are rendered at this width when they are local
        content images that can be transformed.
    srcsets : bool, default=True
        Emit ``srcset``/``sizes`` attributes on images.

    """

    content_image_sizes: Mapping[str, Mapping[str, int]] = field(
        default_factory=lambda: dict(DEFAULT_CONTENT_IMAGE_SIZES),
        metadata={"help": "Named table of responsive image widths", "importance": "core"},
    )
    default_max_width: Optional[int] = field(
        default=None,
        metadata={"help": "Cap applied to local content images wider than this", "importance": "advanced"},
    )
    srcsets: bool = field(
        default=True,
        metadata={"help": "Emit srcset and sizes attributes", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the size table and width cap.

        Raises
        ------
        ValidationError
            If a size entry has no positive width or the cap is not positive.

        """
        for name, size in self.content_image_sizes.items():
            width = size.get("width") if isinstance(size, Mapping) else None
            if not isinstance(width, int) or width <= 0:
                raise ValidationError(
                    f"content_image_sizes['{name}'] must define a positive integer width",
                    parameter_name="content_image_sizes",
                    parameter_value=size,
                )
        if self.default_max_width is not None and self.default_max_width <= 0:
            raise ValidationError(
                f"default_max_width must be positive, got {self.default_max_width}",
                parameter_name="default_max_width",
                parameter_value=self.default_max_width,
            )


@dataclass(frozen=True)
class RenderOptions(BaseRendererOptions):
    """Configuration options for card rendering.

    Parameters
    ----------
    target : {"web", "email"}, default="web"
        Output target selecting the template branch of each renderer.
    site_url : str, optional
        Absolute site URL; used to recognise local content images.
    post_url : str, optional
        URL of the post being rendered, linked from email-only templates.
    image_optimization : ImageOptimization, optional
        Responsive image settings. Without it no srcset is emitted.
    can_transform_image : callable, optional
        ``(url) -> bool`` reporting whether the host can resize an image.
    get_collection_posts : callable, optional
        Async ``(collection, count) -> list[dict]`` used in the dynamic data
        phase of collection cards.
    render_data : mapping, optional
        Node key to pre-fetched data consumed by dynamic-data cards.
    feature : mapping, optional
        Feature flags, e.g. ``{"contentVisibility": True}``.

    Examples
    --------
        >>> options = RenderOptions(target="email", site_url="https://example.com")
        >>> options.create_updated(target="web").target
        'web'

    """

    target: str = field(
        default="web",
        metadata={"help": "Render target", "choices": list(RENDER_TARGETS), "importance": "core"},
    )
    site_url: str = field(
        default="",
        metadata={"help": "Absolute site URL used to detect local content images", "importance": "core"},
    )
    post_url: Optional[str] = field(
        default=None,
        metadata={"help": "URL of the post being rendered (email templates)", "importance": "core"},
    )
    image_optimization: Optional[ImageOptimization] = field(
        default=None,
        metadata={"help": "Responsive image settings", "importance": "advanced"},
    )
    can_transform_image: Optional[Callable[[str], bool]] = field(
        default=None,
        compare=False,
        metadata={"help": "Callable reporting whether an image URL can be resized", "importance": "advanced"},
    )
    get_collection_posts: Optional[Callable[[str, int], Awaitable[list[dict[str, Any]]]]] = field(
        default=None,
        compare=False,
        metadata={"help": "Async callable fetching posts for collection cards", "importance": "advanced"},
    )
    render_data: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Pre-fetched dynamic data keyed by node key", "importance": "advanced"},
    )
    feature: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Feature flags", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the render target.

        Raises
        ------
        ValidationError
            If the target is not one of the supported render targets.

        """
        if self.target not in RENDER_TARGETS:
            raise ValidationError(
                f"target must be one of {', '.join(RENDER_TARGETS)}, got {self.target!r}",
                parameter_name="target",
                parameter_value=self.target,
            )
