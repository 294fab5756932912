#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/renderers/_table.py
"""Pipe-table rendering for sequences of mappings.

Tables cannot hold nested structure, so nested values collapse to sentinels
(``_object_``, ``_array[N]_``) and missing or null values to ``_null_``. The
decoder turns those sentinels back into empty placeholders, not the original
content.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from json_md_bridge.constants import (
    ARRAY_CELL_SENTINEL_TEMPLATE,
    NULL_CELL_SENTINEL,
    OBJECT_CELL_SENTINEL,
    TABLE_SEPARATOR_CELL,
)
from json_md_bridge.utils.escape import escape_markdown
from json_md_bridge.utils.values import format_scalar, is_mapping, is_sequence


def is_record_sequence(value: Sequence[Any]) -> bool:
    """Return True for a non-empty sequence made only of mappings."""
    return len(value) > 0 and all(is_mapping(item) for item in value)


def collect_columns(rows: Sequence[Mapping[Any, Any]]) -> list[Any]:
    """Return the union of row keys in order of first appearance."""
    columns: dict[Any, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)


def format_cell(value: Any) -> str:
    """Render one table cell following the sentinel policy."""
    if value is None:
        return NULL_CELL_SENTINEL
    if is_mapping(value):
        return OBJECT_CELL_SENTINEL
    if is_sequence(value):
        return ARRAY_CELL_SENTINEL_TEMPLATE.format(length=len(value))
    return format_scalar(value)


def render_table(rows: Sequence[Mapping[Any, Any]], indent: str = "") -> str | None:
    """Render mappings as a pipe table.

    Parameters
    ----------
    rows : sequence of mappings
        Records to render, one table row each
    indent : str, default ""
        Prefix added to every table line

    Returns
    -------
    str or None
        Header, separator and data rows joined by newlines, or None when the
        rows have no keys at all

    """
    columns = collect_columns(rows)
    if not columns:
        return None

    lines = [
        "| " + " | ".join(escape_markdown(str(column)) for column in columns) + " |",
        "| " + " | ".join(TABLE_SEPARATOR_CELL for _ in columns) + " |",
    ]
    for row in rows:
        cells = [format_cell(row.get(column)) for column in columns]
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(indent + line for line in lines)
