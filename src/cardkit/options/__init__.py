#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for cardkit import and render pipelines.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy rather than mutating an instance.
"""

from __future__ import annotations

from cardkit.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from cardkit.options.parse import ImportOptions
from cardkit.options.render import ImageOptimization, RenderOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ImageOptimization",
    "ImportOptions",
    "RenderOptions",
]
