#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/utils/escape.py
"""Markdown escaping for the list/table dialect.

Only the pipe character is significant to the dialect (it delimits table
cells), so it is the only character escaped. Everything else, including
asterisks, underscores and colons, passes through unchanged.

"""

from __future__ import annotations

import re

_UNESCAPED_PIPE = re.compile(r"(?<!\\)\|")


def escape_markdown(text: str) -> str:
    r"""Escape pipe characters in text.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with every ``|`` replaced by ``\|``

    Examples
    --------
        >>> escape_markdown("Hello | world")
        'Hello \\| world'

    """
    if not text:
        return text
    return text.replace("|", r"\|")


def unescape_markdown(text: str) -> str:
    r"""Reverse :func:`escape_markdown`, turning ``\|`` back into ``|``."""
    if not text:
        return text
    return text.replace(r"\|", "|")


def split_table_row(line: str) -> list[str]:
    r"""Split a pipe-delimited table row into trimmed, unescaped cells.

    The row must start and end with ``|``. Escaped pipes (``\|``) are cell
    content, not delimiters.

    Parameters
    ----------
    line : str
        Trimmed table row, e.g. ``| a | b \| c |``

    Returns
    -------
    list[str]
        Cell texts, e.g. ``["a", "b | c"]``

    """
    parts = _UNESCAPED_PIPE.split(line.strip())
    # The leading and trailing delimiters produce empty outer parts
    return [unescape_markdown(part.strip()) for part in parts[1:-1]]
