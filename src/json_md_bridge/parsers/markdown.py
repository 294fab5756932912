#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/parsers/markdown.py
"""Markdown to structured value parser.

This module provides the MarkdownParser class which reads the line-oriented
dialect produced by :class:`~json_md_bridge.renderers.markdown.MarkdownRenderer`
and reconstructs a JSON-like value. It is a small recursive-descent parser
over a line cursor; rules are tried in a fixed order at each line:

1. ``- **key**: value`` bullets build a dict. A deeper-indented block below
   an entry replaces its inline value, and following key-value bullets at the
   same indentation are merged into the same dict.
2. Other ``-`` bullets build a list (a single item is returned unwrapped).
3. ``N.`` lines build a list, always, even for a single item.
4. A line holding only a sentinel such as ``_empty object_`` yields its
   placeholder value.
5. Anything else yields None and is skipped without a diagnostic.

A document whose first pipe-delimited line is followed by a separator row is
parsed as a table instead and always yields a list of dicts.

"""

from __future__ import annotations

import logging
import re
from typing import Any, NamedTuple, Sequence

from json_md_bridge.constants import (
    BULLET_PATTERN,
    FATAL_ERROR_PREFIX,
    KEY_VALUE_PATTERN,
    NUMBERED_PATTERN,
)
from json_md_bridge.options.markdown_to_json import MarkdownToJsonOptions
from json_md_bridge.parsers._table import is_table, parse_table
from json_md_bridge.parsers.base import BaseParser, MarkdownToJsonResult
from json_md_bridge.utils.escape import unescape_markdown
from json_md_bridge.utils.text import to_camel_case
from json_md_bridge.utils.values import infer_scalar, is_sentinel_text

logger = logging.getLogger(__name__)


class _Line(NamedTuple):
    """A source line split into indentation width and trimmed content."""

    indent: int
    text: str


def _split_lines(markdown: str) -> list[_Line]:
    lines = []
    for raw in markdown.split("\n"):
        expanded = raw.expandtabs(4)
        text = expanded.strip()
        lines.append(_Line(len(expanded) - len(expanded.lstrip()) if text else 0, text))
    return lines


class _StructuredContentParser:
    """Line-cursor parser for list and key-value content.

    One instance is created per conversion; it holds only the lines of that
    document and the resolved options.
    """

    def __init__(self, lines: Sequence[_Line], options: MarkdownToJsonOptions):
        self.lines = lines
        self.options = options

    def parse(self, start: int) -> tuple[Any, int]:
        """Parse one syntactic unit starting at ``start``.

        Returns
        -------
        tuple
            The decoded value and the index of the first unconsumed line

        """
        if start >= len(self.lines):
            return None, start

        text = self.lines[start].text

        if BULLET_PATTERN.match(text):
            if self._key_value_match(start) is not None:
                return self._parse_mapping(start)
            return self._parse_list(start, BULLET_PATTERN, unwrap_single=True)

        if self.options.parse_numbered_lists and NUMBERED_PATTERN.match(text):
            return self._parse_list(start, NUMBERED_PATTERN, unwrap_single=False)

        if is_sentinel_text(text):
            return infer_scalar(text), start + 1

        if text:
            logger.debug("Skipping unrecognized line %d: %r", start + 1, text)
        return None, start + 1

    def _content(self, index: int, marker: re.Pattern[str]) -> str:
        text = self.lines[index].text
        match = marker.match(text)
        return text[match.end() :].strip() if match else text

    def _key_value_match(self, index: int) -> re.Match[str] | None:
        return KEY_VALUE_PATTERN.search(self._content(index, BULLET_PATTERN))

    def _is_sibling(self, index: int, indent: int, marker: re.Pattern[str]) -> bool:
        if index >= len(self.lines):
            return False
        line = self.lines[index]
        return line.indent == indent and bool(marker.match(line.text))

    def _has_nested_block(self, index: int, indent: int) -> bool:
        if index >= len(self.lines):
            return False
        line = self.lines[index]
        return bool(line.text) and line.indent > indent

    def _skip_nested_block(self, index: int, indent: int) -> int:
        while self._has_nested_block(index, indent):
            index += 1
        return index

    def _resolve_value(self, index: int, inline_value: Any) -> tuple[Any, int]:
        """Let a deeper-indented block after line ``index`` replace its inline value."""
        indent = self.lines[index].indent
        next_index = index + 1
        if not self._has_nested_block(next_index, indent):
            return inline_value, next_index

        nested, after = self.parse(next_index)
        if nested is not None:
            inline_value = nested
        return inline_value, self._skip_nested_block(after, indent)

    def _decode_key(self, raw_key: str) -> str:
        key = unescape_markdown(raw_key)
        return to_camel_case(key) if self.options.camel_case_keys else key

    def _parse_mapping(self, start: int) -> tuple[dict[str, Any], int]:
        indent = self.lines[start].indent
        mapping: dict[str, Any] = {}
        index = start

        while True:
            match = self._key_value_match(index)
            assert match is not None
            key = self._decode_key(match.group(1))
            mapping[key], index = self._resolve_value(index, infer_scalar(unescape_markdown(match.group(2))))

            if not self._is_sibling(index, indent, BULLET_PATTERN):
                break
            if self._key_value_match(index) is not None:
                continue

            # A plain bullet only extends the mapping when it decodes to a dict
            more, after = self.parse(index)
            if isinstance(more, dict):
                mapping.update(more)
                index = after
            break

        return mapping, index

    def _parse_list(self, start: int, marker: re.Pattern[str], unwrap_single: bool) -> tuple[Any, int]:
        indent = self.lines[start].indent
        items: list[Any] = []
        index = start

        while self._is_sibling(index, indent, marker):
            inline_value = infer_scalar(unescape_markdown(self._content(index, marker)))
            item, index = self._resolve_value(index, inline_value)
            items.append(item)

        if unwrap_single and len(items) == 1:
            return items[0], index
        return items, index


class MarkdownParser(BaseParser):
    """Convert Markdown lists, key-value bullets and tables to structured values.

    Parsing never raises: recoverable problems (such as table rows with the
    wrong number of cells) are reported in the result's ``errors`` list, and an
    unexpected failure produces a single ``Fatal error: ...`` entry with
    ``data`` set to None.

    Parameters
    ----------
    options : MarkdownToJsonOptions or None, default = None
        Parser options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> parser.parse("- **count**: 42\\n- **active**: true").data
        {'count': 42, 'active': True}

        >>> parser.parse("| a | b |\\n| --- | --- |\\n| 1 | x |").data
        [{'a': 1, 'b': 'x'}]

    """

    def __init__(self, options: MarkdownToJsonOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownToJsonOptions, "markdown")
        options = options or MarkdownToJsonOptions()
        BaseParser.__init__(self, options)
        self.options: MarkdownToJsonOptions = options

    def parse(self, text: str) -> MarkdownToJsonResult:
        """Parse Markdown text.

        Parameters
        ----------
        text : str
            Markdown produced by the renderer, or written by hand in the same
            dialect

        Returns
        -------
        MarkdownToJsonResult
            Decoded value and diagnostics

        """
        errors: list[str] = []
        data: Any

        try:
            lines = _split_lines(text)
            trimmed = [line.text for line in lines]

            if self.options.parse_tables and is_table(trimmed):
                key_transform = to_camel_case if self.options.camel_case_keys else None
                data = parse_table(trimmed, errors, key_transform)
            else:
                data, _ = _StructuredContentParser(lines, self.options).parse(0)
        except Exception as e:
            logger.warning("Markdown decoding failed: %s", e)
            errors.append(f"{FATAL_ERROR_PREFIX}{e}")
            data = None

        return MarkdownToJsonResult(data=data, errors=errors)
