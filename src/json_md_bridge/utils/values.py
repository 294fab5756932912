#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/utils/values.py
"""Value classification, scalar formatting and scalar inference.

These helpers are the only logic shared by the encoder and the decoder. The
encoder uses the classification and formatting functions to decide how a
value is laid out; the decoder uses :func:`infer_scalar` to turn cell and list
text back into typed values.
"""

from __future__ import annotations

import datetime
import decimal
import math
import re
from typing import Any, Mapping

from json_md_bridge.constants import (
    ARRAY_SENTINEL_INNER_PATTERN,
    DECIMAL_PATTERN,
    EMPTY_ARRAY_SENTINEL,
    EMPTY_OBJECT_SENTINEL,
    FALSE_LITERAL,
    INTEGER_PATTERN,
    NULL_CELL_SENTINEL,
    NULL_LITERAL,
    OBJECT_CELL_SENTINEL,
    TRUE_LITERAL,
)
from json_md_bridge.utils.escape import escape_markdown

_EMPHASIS_EDGES = re.compile(r"^_|_$")

# Sentinel inner text (between the underscores) -> factory for the placeholder
_CONTAINER_SENTINELS = {
    OBJECT_CELL_SENTINEL[1:-1]: dict,
    EMPTY_ARRAY_SENTINEL[1:-1]: list,
    EMPTY_OBJECT_SENTINEL[1:-1]: dict,
}


def is_timestamp(value: Any) -> bool:
    """Return True for ``datetime.date`` and ``datetime.datetime`` values."""
    return isinstance(value, datetime.date)


def is_mapping(value: Any) -> bool:
    """Return True for dict-like values."""
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Return True for lists and tuples (strings are scalars)."""
    return isinstance(value, (list, tuple))


def is_primitive(value: Any) -> bool:
    """Return True when the value renders inline on a single line.

    None, booleans, numbers, strings and timestamps are primitive; mappings
    and sequences are collections. Other objects are treated as primitive and
    rendered through ``str()``.
    """
    return not (is_mapping(value) or is_sequence(value))


def format_timestamp(value: datetime.date) -> str:
    """Render a timestamp as normalized ISO-8601 text.

    Datetimes are expressed in UTC with millisecond precision and a ``Z``
    suffix; naive datetimes are taken to already be UTC. Plain dates render as
    ``YYYY-MM-DD``.

    Examples
    --------
        >>> format_timestamp(datetime.datetime(2023, 1, 1, tzinfo=datetime.timezone.utc))
        '2023-01-01T00:00:00.000Z'
        >>> format_timestamp(datetime.date(2023, 1, 1))
        '2023-01-01'

    """
    if not isinstance(value, datetime.datetime):
        return value.isoformat()

    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_float(value: float) -> str:
    """Render a float in positional notation with its shortest round-trip digits.

    Finite values never use exponent notation and always keep a decimal
    point. Infinities and NaN use their ``repr``.

    Examples
    --------
        >>> format_float(1e-05)
        '0.00001'
        >>> format_float(1.5e16)
        '15000000000000000.0'

    """
    text = repr(value)
    if not math.isfinite(value) or "e" not in text:
        return text
    text = format(decimal.Decimal(text), "f")
    return text if "." in text else text + ".0"


def format_scalar(value: Any) -> str:
    """Render a primitive value as Markdown text.

    Parameters
    ----------
    value : Any
        None, bool, int, float, str, date/datetime, or any other object

    Returns
    -------
    str
        ``null``, ``true``/``false``, the number's canonical text, the
        ISO timestamp, or the pipe-escaped string

    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, int):
        return str(value)
    if is_timestamp(value):
        return format_timestamp(value)
    if isinstance(value, str):
        return escape_markdown(value)
    return escape_markdown(str(value))


def infer_scalar(text: str) -> Any:
    """Infer a typed value from cell or list-item text.

    Checks run in order and the first match wins:

    1. ``_null_``, ``null`` or empty text -> None
    2. ``true`` / ``false`` -> bool
    3. optional ``-`` and digits -> int
    4. optional ``-``, digits, ``.``, digits -> float
    5. ``_object_`` / ``_empty object_`` -> ``{}``, ``_empty array_`` and
       ``_array[N]_`` -> ``[]``
    6. anything else -> the text with one leading and one trailing ``_``
       removed

    Numeric-looking strings always become numbers, so ``"10001"`` and
    ``10001`` are indistinguishable once rendered.

    Parameters
    ----------
    text : str
        Raw text; surrounding whitespace is ignored

    Returns
    -------
    Any
        None, bool, int, float, empty dict/list, or str

    """
    trimmed = text.strip()

    if trimmed in (NULL_CELL_SENTINEL, NULL_LITERAL, ""):
        return None

    if trimmed == TRUE_LITERAL:
        return True
    if trimmed == FALSE_LITERAL:
        return False

    if INTEGER_PATTERN.match(trimmed):
        return int(trimmed)
    if DECIMAL_PATTERN.match(trimmed):
        return float(trimmed)

    if len(trimmed) >= 2 and trimmed.startswith("_") and trimmed.endswith("_"):
        inner = trimmed[1:-1]
        factory = _CONTAINER_SENTINELS.get(inner)
        if factory is not None:
            return factory()
        if ARRAY_SENTINEL_INNER_PATTERN.match(inner):
            return []

    return _EMPHASIS_EDGES.sub("", trimmed)


def is_sentinel_text(text: str) -> bool:
    """Return True when trimmed text is exactly one of the reserved sentinels."""
    trimmed = text.strip()
    if trimmed == NULL_CELL_SENTINEL:
        return True
    if len(trimmed) < 2 or not (trimmed.startswith("_") and trimmed.endswith("_")):
        return False
    inner = trimmed[1:-1]
    return inner in _CONTAINER_SENTINELS or bool(ARRAY_SENTINEL_INNER_PATTERN.match(inner))
