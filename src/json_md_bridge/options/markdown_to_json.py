#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/options/markdown_to_json.py
"""Options for parsing Markdown back into structured values."""

from __future__ import annotations

from dataclasses import dataclass, field

from json_md_bridge.constants import (
    DEFAULT_CAMEL_CASE_KEYS,
    DEFAULT_PARSE_NUMBERED_LISTS,
    DEFAULT_PARSE_TABLES,
)
from json_md_bridge.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownToJsonOptions(BaseParserOptions):
    """Configuration options for Markdown to JSON conversion.

    Parameters
    ----------
    parse_numbered_lists : bool, default True
        Parse ``1.``, ``2.``, ... lines as sequences.
    parse_tables : bool, default True
        Parse pipe tables into lists of dicts.
    camel_case_keys : bool, default False
        Rewrite every decoded key to camelCase (``first_name`` -> ``firstName``).

    """

    parse_numbered_lists: bool = field(
        default=DEFAULT_PARSE_NUMBERED_LISTS,
        metadata={"help": "Parse numbered lists as arrays", "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse pipe tables into arrays of objects", "importance": "core"},
    )
    camel_case_keys: bool = field(
        default=DEFAULT_CAMEL_CASE_KEYS,
        metadata={"help": "Convert decoded keys to camelCase", "importance": "core"},
    )
