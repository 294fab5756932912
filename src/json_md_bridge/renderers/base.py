#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/renderers/base.py
"""Base class for renderers producing text from structured values."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from json_md_bridge.exceptions import InvalidOptionsError, RenderingError
from json_md_bridge.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for structured-value renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options: BaseRendererOptions = options or BaseRendererOptions()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def render_to_string(self, data: Any) -> str:
        """Render a structured value to text."""

    def render(self, data: Any, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a structured value and write it to a path or stream.

        Parameters
        ----------
        data : Any
            Structured value to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If the output cannot be written

        """
        self.write_text_output(self.render_to_string(data), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text to a file path or to a text/binary stream as UTF-8.

        Raises
        ------
        RenderingError
            If the destination is unsupported or cannot be written

        """
        try:
            if isinstance(output, (str, Path)):
                Path(output).write_text(text, encoding="utf-8")
            elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)) or "b" in str(getattr(output, "mode", "")):
                output.write(text.encode("utf-8"))  # type: ignore[arg-type]
            elif hasattr(output, "write"):
                output.write(text)  # type: ignore[arg-type]
            else:
                raise RenderingError(f"Unsupported output type: {type(output)}", rendering_stage="output")
        except OSError as e:
            raise RenderingError(f"Failed to write output: {e}", rendering_stage="output", original_error=e) from e
