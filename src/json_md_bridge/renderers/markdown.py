#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/renderers/markdown.py
"""Markdown rendering from structured values.

This module provides the MarkdownRenderer class which walks a JSON-like value
and lays it out as nested bullet lists, bold-key/value pairs, numbered lists
and, optionally, pipe tables.

Examples
--------
Input value:

.. code-block:: json

    {"name": "John", "tags": ["a", "b"], "address": {"city": "Paris"}}

Output Markdown:

.. code-block:: markdown

    - **name**: John
    - **tags**:
      - a
      - b
    - **address**:
      - **city**: Paris

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from json_md_bridge.constants import EMPTY_ARRAY_SENTINEL, EMPTY_OBJECT_SENTINEL, MAX_DEPTH_MARKER
from json_md_bridge.options.json_to_markdown import JsonToMarkdownOptions
from json_md_bridge.renderers._table import is_record_sequence, render_table
from json_md_bridge.renderers.base import BaseRenderer
from json_md_bridge.utils.escape import escape_markdown
from json_md_bridge.utils.values import format_scalar, is_primitive, is_sequence

logger = logging.getLogger(__name__)


class MarkdownRenderer(BaseRenderer):
    """Render structured values to the bullet/table Markdown dialect.

    Rendering never fails: every value has a textual form. Nesting deeper than
    ``max_depth`` is replaced by a truncation marker, which also bounds
    self-referential structures.

    Parameters
    ----------
    options : JsonToMarkdownOptions or None, default = None
        Markdown rendering options

    Examples
    --------
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_to_string({"name": "John", "age": 30})
        '- **name**: John\\n- **age**: 30'

        >>> renderer = MarkdownRenderer(JsonToMarkdownOptions(use_numbered_lists=True))
        >>> renderer.render_to_string(["apple", "banana"])
        '1. apple\\n2. banana'

    """

    def __init__(self, options: JsonToMarkdownOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, JsonToMarkdownOptions, "markdown")
        options = options or JsonToMarkdownOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonToMarkdownOptions = options

    def render_to_string(self, data: Any) -> str:
        """Render a structured value to Markdown text.

        Parameters
        ----------
        data : Any
            None, bool, number, string, date/datetime, list/tuple or dict

        Returns
        -------
        str
            Markdown fragment, possibly spanning several lines

        """
        if is_primitive(data):
            return self._render_inline(data, 0)
        return self._render_block(data, 0)

    def _indent(self, depth: int) -> str:
        return " " * (depth * self.options.indent_size)

    def _render_inline(self, value: Any, depth: int) -> str:
        """Render a primitive value for placement after a list marker."""
        if depth > self.options.max_depth:
            return MAX_DEPTH_MARKER
        return format_scalar(value)

    def _render_block(self, value: Any, depth: int) -> str:
        """Render a mapping or sequence as indented lines at ``depth``."""
        if depth > self.options.max_depth:
            logger.debug("Truncating value at depth %d (max_depth=%d)", depth, self.options.max_depth)
            return self._indent(depth) + MAX_DEPTH_MARKER

        if is_sequence(value):
            return self._render_sequence(value, depth)
        return self._render_mapping(value, depth)

    def _render_sequence(self, items: Sequence[Any], depth: int) -> str:
        indent = self._indent(depth)

        if not items:
            return f"{indent}- {EMPTY_ARRAY_SENTINEL}"

        if self.options.arrays_as_tables and is_record_sequence(items):
            table = render_table(items, indent)
            if table is not None:
                return table
            logger.debug("Records have no keys; rendering %d items as a list", len(items))

        lines = []
        for index, item in enumerate(items, start=1):
            prefix = f"{index}." if self.options.use_numbered_lists else "-"
            if is_primitive(item):
                lines.append(f"{indent}{prefix} {self._render_inline(item, depth + 1)}")
            else:
                lines.append(f"{indent}{prefix}\n{self._render_block(item, depth + 1)}")
        return "\n".join(lines)

    def _render_mapping(self, mapping: Mapping[Any, Any], depth: int) -> str:
        indent = self._indent(depth)

        if not mapping:
            return f"{indent}{EMPTY_OBJECT_SENTINEL}"

        lines = []
        for key, value in mapping.items():
            key_str = f"**{escape_markdown(str(key))}**:"
            if is_primitive(value):
                lines.append(f"{indent}- {key_str} {self._render_inline(value, depth + 1)}")
            else:
                lines.append(f"{indent}- {key_str}\n{self._render_block(value, depth + 1)}")
        return "\n".join(lines)
