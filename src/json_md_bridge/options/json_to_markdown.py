#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/options/json_to_markdown.py
"""Options for rendering structured values as Markdown.

This module provides configuration for the encoder direction, converting
JSON-like values (dicts, lists, scalars, timestamps) into the bullet, numbered
list and pipe-table Markdown dialect understood by the decoder.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from json_md_bridge.constants import (
    DEFAULT_ARRAYS_AS_TABLES,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_INDENT_SIZE,
    DEFAULT_MAX_DEPTH,
    DEFAULT_USE_NUMBERED_LISTS,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)
from json_md_bridge.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonToMarkdownOptions(BaseRendererOptions):
    """Configuration options for JSON to Markdown conversion.

    Parameters
    ----------
    heading_level : int, default 1
        Starting heading level (1-6). Accepted for compatibility; the bullet
        based output does not emit headings, so this currently has no effect.
    indent_size : int, default 2
        Number of spaces per nesting level.
    use_numbered_lists : bool, default False
        Render sequences as ``1.``, ``2.``, ... instead of ``-`` bullets.
    arrays_as_tables : bool, default False
        Render sequences made only of mappings as pipe tables.
    max_depth : int, default 10
        Nesting depth after which values are replaced by a truncation marker.

    Examples
    --------
    Numbered lists with wider indentation:
        >>> options = JsonToMarkdownOptions(use_numbered_lists=True, indent_size=4)

    Tables for record arrays:
        >>> options = JsonToMarkdownOptions(arrays_as_tables=True)

    """

    heading_level: int = field(
        default=DEFAULT_HEADING_LEVEL,
        metadata={
            "help": "Starting heading level (1-6); reserved, does not change bullet output",
            "type": int,
            "importance": "advanced",
        },
    )
    indent_size: int = field(
        default=DEFAULT_INDENT_SIZE,
        metadata={"help": "Spaces per nesting level", "type": int, "importance": "core"},
    )
    use_numbered_lists: bool = field(
        default=DEFAULT_USE_NUMBERED_LISTS,
        metadata={"help": "Render arrays as numbered lists instead of bullets", "importance": "core"},
    )
    arrays_as_tables: bool = field(
        default=DEFAULT_ARRAYS_AS_TABLES,
        metadata={"help": "Render arrays of objects as pipe tables", "importance": "core"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum nesting depth before truncation", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if not MIN_HEADING_LEVEL <= self.heading_level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"heading_level must be between {MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL}, "
                f"got {self.heading_level}"
            )
        if self.indent_size < 0:
            raise ValueError(f"indent_size must be non-negative, got {self.indent_size}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
