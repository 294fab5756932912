#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning Markdown back into structured values."""

from json_md_bridge.parsers.base import BaseParser, MarkdownToJsonResult
from json_md_bridge.parsers.markdown import MarkdownParser

__all__ = ["BaseParser", "MarkdownParser", "MarkdownToJsonResult"]
