#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/parsers/base.py
"""Base class and result type for parsers producing structured values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from json_md_bridge.exceptions import InvalidOptionsError
from json_md_bridge.options.base import BaseParserOptions


@dataclass
class MarkdownToJsonResult:
    """Result of a Markdown to JSON conversion.

    Parameters
    ----------
    data : Any
        The decoded value; None for empty input or after a fatal error
    errors : list of str
        Non-fatal diagnostics in the order they were found, or a single
        ``Fatal error: ...`` entry when decoding failed

    """

    data: Any = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when no diagnostics were produced."""
        return not self.errors


class BaseParser(ABC):
    """Abstract base class for text-to-structure parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions = options or BaseParserOptions()

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, text: str) -> MarkdownToJsonResult:
        """Parse text into a structured value plus diagnostics."""
