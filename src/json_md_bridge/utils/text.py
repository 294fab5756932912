#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/utils/text.py
"""Identifier case conversion for decoded keys."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[\s_\-]+")


def to_camel_case(text: str) -> str:
    """Convert an identifier to camelCase.

    The first word keeps its spelling but starts lower-case, every following
    word starts upper-case. Whitespace, underscores and hyphens are removed.

    Parameters
    ----------
    text : str
        Identifier such as ``first_name``, ``First Name`` or ``first-name``

    Returns
    -------
    str
        camelCase identifier, e.g. ``firstName``

    Examples
    --------
        >>> to_camel_case("first_name")
        'firstName'
        >>> to_camel_case("User ID")
        'userID'

    """
    words = [word for word in _WORD_SEPARATORS.split(text) if word]
    if not words:
        return ""

    first, rest = words[0], words[1:]
    return first[:1].lower() + first[1:] + "".join(word[:1].upper() + word[1:] for word in rest)
