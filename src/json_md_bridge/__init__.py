"""json_md_bridge - lossy, best-effort conversion between JSON values and Markdown.

json_md_bridge renders JSON-like Python values as a small Markdown dialect made
of bullet lists, numbered lists, bold-key/value pairs and pipe tables, and
parses that dialect back into values. The two directions share only a set of
textual conventions (bold key markers, list prefixes, table syntax and empty
value sentinels), which makes them approximately inverse.

Fidelity Notes
--------------
- Numeric-looking strings come back as numbers (``"10001"`` -> ``10001``).
- Timestamps render as ISO-8601 text and come back as strings.
- Single-item bullet lists come back unwrapped.
- Nested structures inside table cells collapse to empty placeholders.

Examples
--------
Render a value:

    >>> from json_md_bridge import json_to_markdown
    >>> print(json_to_markdown({"name": "John", "tags": ["a", "b"]}))
    - **name**: John
    - **tags**:
      - a
      - b

Parse it back:

    >>> from json_md_bridge import markdown_to_json
    >>> markdown_to_json("- **name**: John\\n- **age**: 30").data
    {'name': 'John', 'age': 30}

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from json_md_bridge.api import json_to_markdown, markdown_to_json
from json_md_bridge.exceptions import (
    FileError,
    InputFileNotFoundError,
    InvalidOptionsError,
    JsonMdBridgeError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from json_md_bridge.options import JsonToMarkdownOptions, MarkdownToJsonOptions
from json_md_bridge.parsers import MarkdownParser, MarkdownToJsonResult
from json_md_bridge.renderers import MarkdownRenderer

__version__ = "0.1.0"

__all__ = [
    "json_to_markdown",
    "markdown_to_json",
    "JsonToMarkdownOptions",
    "MarkdownToJsonOptions",
    "MarkdownToJsonResult",
    "MarkdownParser",
    "MarkdownRenderer",
    "JsonMdBridgeError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "InputFileNotFoundError",
    "ParsingError",
    "RenderingError",
]
