#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the json_md_bridge library.

The two conversion functions themselves never raise for well-typed input: the
encoder is total over structured values and the decoder reports problems
through its ``errors`` list. The exceptions below cover the surrounding
surface, i.e. option validation, file handling in the CLI, and strict-mode
decoding.

Exception Hierarchy
-------------------
- JsonMdBridgeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a converter)

  - FileError (file access and I/O)
    - InputFileNotFoundError (file doesn't exist)

  - ParsingError (input parsing failures)

  - RenderingError (output generation failures)

"""

from typing import Any


class JsonMdBridgeError(Exception):
    """Base exception class for all json_md_bridge-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(JsonMdBridgeError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is given to a converter.

    For example, passing ``MarkdownToJsonOptions`` to the Markdown renderer.

    Parameters
    ----------
    converter_name : str
        Name of the converter that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the converter."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(JsonMdBridgeError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputFileNotFoundError(FileError):
    """Exception raised when an input or configuration file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(JsonMdBridgeError):
    """Exception raised when input cannot be parsed.

    Raised by the CLI when a JSON or YAML input document is malformed, and when
    strict decoding is requested and the decoder reported diagnostics.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    diagnostics : list[str], optional
        Decoder diagnostics that triggered the failure
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(
        self,
        message: str,
        parsing_stage: str | None = None,
        diagnostics: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
        self.diagnostics = list(diagnostics or [])


class RenderingError(JsonMdBridgeError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
