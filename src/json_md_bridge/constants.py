#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for json_md_bridge.

This module centralizes the textual conventions shared by the encoder and the
decoder, together with the default values of every conversion option. Both
directions only round-trip because they agree on the markers defined here.

Constants are organized by category:
1. Encoder Defaults - JSON to Markdown options
2. Decoder Defaults - Markdown to JSON options
3. Sentinels - Reserved markers for empty, absent and truncated values
4. Line Syntax - Patterns recognized by the decoder
5. CLI - Exit codes and configuration discovery
"""

from __future__ import annotations

import re

# =============================================================================
# Encoder Defaults
# =============================================================================

DEFAULT_HEADING_LEVEL = 1
DEFAULT_INDENT_SIZE = 2
DEFAULT_USE_NUMBERED_LISTS = False
DEFAULT_ARRAYS_AS_TABLES = False
DEFAULT_MAX_DEPTH = 10

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# =============================================================================
# Decoder Defaults
# =============================================================================

DEFAULT_PARSE_NUMBERED_LISTS = True
DEFAULT_PARSE_TABLES = True
DEFAULT_CAMEL_CASE_KEYS = False

# =============================================================================
# Sentinels
# =============================================================================

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

EMPTY_ARRAY_SENTINEL = "_empty array_"
EMPTY_OBJECT_SENTINEL = "_empty object_"
NULL_CELL_SENTINEL = "_null_"
OBJECT_CELL_SENTINEL = "_object_"
ARRAY_CELL_SENTINEL_TEMPLATE = "_array[{length}]_"
MAX_DEPTH_MARKER = "_... (max depth reached)_"

TABLE_SEPARATOR_CELL = "---"
FATAL_ERROR_PREFIX = "Fatal error: "

# =============================================================================
# Line Syntax
# =============================================================================

# "- item" or a bare "-" introducing a nested block
BULLET_PATTERN = re.compile(r"^-(?:\s+|$)")

# "3. item" or a bare "3." introducing a nested block
NUMBERED_PATTERN = re.compile(r"^\d+\.(?:\s+|$)", re.ASCII)

# First bold span followed by a colon; the value may be empty
KEY_VALUE_PATTERN = re.compile(r"\*\*(.+?)\*\*:\s*(.*)$")

INTEGER_PATTERN = re.compile(r"^-?\d+$", re.ASCII)
DECIMAL_PATTERN = re.compile(r"^-?\d*\.\d+$", re.ASCII)
ARRAY_SENTINEL_INNER_PATTERN = re.compile(r"^array\[\d+\]$")

TABLE_SEPARATOR_PATTERN = re.compile(r"^\|(?:\s*:?-+:?\s*\|)+$")

# =============================================================================
# CLI
# =============================================================================

CONFIG_ENV_VAR = "JSON_MD_BRIDGE_CONFIG"
CONFIG_FILENAMES = [
    ".json-md-bridge.toml",
    ".json-md-bridge.yaml",
    ".json-md-bridge.yml",
    ".json-md-bridge.json",
]
PYPROJECT_TOOL_SECTION = "json-md-bridge"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
