#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/parsers/_table.py
"""Pipe-table detection and parsing.

Detection is a single-point check: the first line that starts and ends with
``|`` must be followed by a separator row. Only that first table is parsed;
the contiguous run of pipe lines starting at its header forms the table.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from json_md_bridge.constants import TABLE_SEPARATOR_PATTERN
from json_md_bridge.utils.escape import split_table_row
from json_md_bridge.utils.values import infer_scalar

logger = logging.getLogger(__name__)


def is_table_row(line: str) -> bool:
    """Return True for a trimmed line that starts and ends with a pipe."""
    return line.startswith("|") and line.endswith("|")


def find_table_start(lines: Sequence[str]) -> int | None:
    """Return the index of the first pipe-delimited line, or None."""
    for index, line in enumerate(lines):
        if is_table_row(line):
            return index
    return None


def is_table(lines: Sequence[str]) -> bool:
    """Return True when the first pipe-delimited line is followed by a separator row.

    Parameters
    ----------
    lines : sequence of str
        Trimmed document lines

    """
    start = find_table_start(lines)
    if start is None or start + 1 >= len(lines):
        return False
    return bool(TABLE_SEPARATOR_PATTERN.match(lines[start + 1]))


def parse_table(
    lines: Sequence[str],
    errors: list[str],
    key_transform: Callable[[str], str] | None = None,
) -> list[dict[str, Any]]:
    """Parse the first pipe table in ``lines`` into a list of dicts.

    The row after the header is always skipped as the separator. Rows whose
    cell count differs from the header are reported in ``errors`` and left out
    of the result; numbering counts data rows from 1.

    Parameters
    ----------
    lines : sequence of str
        Trimmed document lines
    errors : list of str
        Diagnostics accumulator, appended to in discovery order
    key_transform : callable, optional
        Applied to each header name (e.g. camelCase conversion)

    Returns
    -------
    list of dict
        One dict per well-formed data row, in document order

    """
    records: list[dict[str, Any]] = []

    start = find_table_start(lines)
    if start is None:
        errors.append("Table header not found")
        return records

    end = start
    while end < len(lines) and is_table_row(lines[end]):
        end += 1

    headers = split_table_row(lines[start])
    if key_transform is not None:
        headers = [key_transform(header) for header in headers]

    for index in range(start + 2, end):
        row_number = index - start - 1
        cells = split_table_row(lines[index])

        if len(cells) != len(headers):
            message = f"Row {row_number}: column count mismatch (expected {len(headers)}, got {len(cells)})"
            logger.debug(message)
            errors.append(message)
            continue

        records.append({header: infer_scalar(cell) for header, cell in zip(headers, cells)})

    return records
