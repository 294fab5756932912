#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for json_md_bridge conversions."""

from json_md_bridge.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from json_md_bridge.options.json_to_markdown import JsonToMarkdownOptions
from json_md_bridge.options.markdown_to_json import MarkdownToJsonOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "JsonToMarkdownOptions",
    "MarkdownToJsonOptions",
]
