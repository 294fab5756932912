#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning structured values into Markdown."""

from json_md_bridge.renderers.base import BaseRenderer
from json_md_bridge.renderers.markdown import MarkdownRenderer

__all__ = ["BaseRenderer", "MarkdownRenderer"]
