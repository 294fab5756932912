#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/api.py
"""Top-level conversion functions.

Both functions resolve their options once, from an options object, keyword
arguments, or both, and hand them to a freshly created renderer or parser.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from json_md_bridge.options.base import CloneFrozenMixin
from json_md_bridge.options.json_to_markdown import JsonToMarkdownOptions
from json_md_bridge.options.markdown_to_json import MarkdownToJsonOptions
from json_md_bridge.parsers.base import MarkdownToJsonResult
from json_md_bridge.parsers.markdown import MarkdownParser
from json_md_bridge.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _resolve_options(options_class: type[OptionsT], options: Optional[OptionsT], **kwargs: Any) -> OptionsT:
    """Merge keyword overrides into an options object.

    Parameters
    ----------
    options_class : type
        The options dataclass to build when ``options`` is None
    options : options instance or None
        Pre-configured options; returned unchanged when there are no kwargs
    **kwargs
        Option overrides by field name; unknown names are skipped

    Returns
    -------
    options instance
        Resolved options

    """
    option_names = options_class.field_names()
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown {options_class.__name__} options: {missing}")

    if options is None:
        return options_class(**valid_kwargs)
    if valid_kwargs and isinstance(options, options_class):
        return options.create_updated(**valid_kwargs)
    return options


def json_to_markdown(data: Any, options: Optional[JsonToMarkdownOptions] = None, **kwargs: Any) -> str:
    """Convert a structured value to Markdown.

    Parameters
    ----------
    data : Any
        Value to convert: None, bool, int, float, str, date/datetime,
        list/tuple or dict, nested arbitrarily
    options : JsonToMarkdownOptions, optional
        Pre-configured rendering options
    **kwargs
        Individual options (``indent_size``, ``use_numbered_lists``,
        ``arrays_as_tables``, ``max_depth``, ``heading_level``) overriding
        fields in ``options``

    Returns
    -------
    str
        Markdown text. Rendering always succeeds.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a JsonToMarkdownOptions instance
    ValueError
        If an option value is out of range

    Examples
    --------
        >>> json_to_markdown({"name": "John", "age": 30})
        '- **name**: John\\n- **age**: 30'

        >>> print(json_to_markdown([{"name": "John", "age": 30}], arrays_as_tables=True))
        | name | age |
        | --- | --- |
        | John | 30 |

    """
    resolved = _resolve_options(JsonToMarkdownOptions, options, **kwargs)
    return MarkdownRenderer(resolved).render_to_string(data)


def markdown_to_json(
    markdown: str, options: Optional[MarkdownToJsonOptions] = None, **kwargs: Any
) -> MarkdownToJsonResult:
    """Convert Markdown back into a structured value.

    Parameters
    ----------
    markdown : str
        Markdown in the list / key-value / table dialect
    options : MarkdownToJsonOptions, optional
        Pre-configured parsing options
    **kwargs
        Individual options (``parse_numbered_lists``, ``parse_tables``,
        ``camel_case_keys``) overriding fields in ``options``

    Returns
    -------
    MarkdownToJsonResult
        ``data`` holds the decoded value, ``errors`` the diagnostics. Decoding
        problems never raise.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a MarkdownToJsonOptions instance

    Examples
    --------
        >>> result = markdown_to_json("- **first_name**: John", camel_case_keys=True)
        >>> result.data
        {'firstName': 'John'}
        >>> result.errors
        []

    """
    resolved = _resolve_options(MarkdownToJsonOptions, options, **kwargs)
    return MarkdownParser(resolved).parse(markdown)
