#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/options/parse.py
"""Configuration options for importing HTML into card documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardkit.options.base import BaseParserOptions


@dataclass(frozen=True)
class ImportOptions(BaseParserOptions):
    """Configuration options for the HTML importer.

    Parameters
    ----------
    parser : str, default="html.parser"
        Tree builder passed to BeautifulSoup.
    keep_empty_paragraphs : bool, default=False
        Keep paragraphs that contain no text or inline children.

    """

    parser: str = field(
        default="html.parser",
        metadata={"help": "BeautifulSoup tree builder", "importance": "advanced"},
    )
    keep_empty_paragraphs: bool = field(
        default=False,
        metadata={"help": "Keep paragraphs with no content", "importance": "advanced"},
    )
