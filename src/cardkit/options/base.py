#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the options used by the
cardkit import and render pipelines.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any, Callable, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from cardkit.exceptions import ValidationError

if TYPE_CHECKING:
    from bs4 import BeautifulSoup


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin giving frozen option dataclasses a ``create_updated`` copy method."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy of these options with ``kwargs`` applied.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values. ``__post_init__`` validation
            runs again on the copy.

        Returns
        -------
        Self
            The updated copy; ``self`` is left unchanged.

        Raises
        ------
        ValidationError
            If a keyword does not name a field of this options class.

        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValidationError(
                f"{type(self).__name__} has no option(s) {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    create_document : callable, optional
        Factory returning a fresh ``BeautifulSoup`` document used to build
        output elements. When omitted an empty ``html.parser`` document is
        created for every render call.
    fail_on_render_errors : bool, default=False
        Whether the document renderer raises ``RenderingError`` when a card
        renderer fails unexpectedly. If False, the failure is logged and the
        card is emitted as an empty container.

    """

    create_document: Optional[Callable[[], "BeautifulSoup"]] = field(
        default=None,
        compare=False,
        metadata={"help": "Factory for the bs4 document used to build output elements", "importance": "advanced"},
    )
    fail_on_render_errors: bool = field(
        default=False,
        metadata={
            "help": "Raise RenderingError when a card renderer fails instead of logging and emitting an empty card",
            "importance": "advanced",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    strict : bool, default=False
        Raise ``ParsingError`` for unusable input instead of returning an
        empty document.

    """

    strict: bool = field(
        default=False,
        metadata={"help": "Raise ParsingError on unusable input", "importance": "core"},
    )
