#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the json_md_bridge encoder and decoder."""

from json_md_bridge.utils.escape import escape_markdown, split_table_row, unescape_markdown
from json_md_bridge.utils.text import to_camel_case
from json_md_bridge.utils.values import format_scalar, infer_scalar, is_primitive

__all__ = [
    "escape_markdown",
    "format_scalar",
    "infer_scalar",
    "is_primitive",
    "split_table_row",
    "to_camel_case",
    "unescape_markdown",
]
