"""Command-line interface for json_md_bridge.

Two subcommands convert in each direction; options not given on the command
line come from a configuration file (see :mod:`json_md_bridge.cli.config`).

Examples
--------
Render a JSON file as Markdown::

    $ json-md-bridge to-markdown data.json

Render record arrays as tables, reading YAML::

    $ json-md-bridge to-markdown records.yaml --arrays-as-tables -o records.md

Parse Markdown back to JSON, failing on any diagnostic::

    $ json-md-bridge to-json records.md --strict

Use an explicit configuration file::

    $ json-md-bridge --config ./.json-md-bridge.toml to-json notes.md

"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from json_md_bridge.api import json_to_markdown, markdown_to_json
from json_md_bridge.cli.config import load_config_with_priority, merge_configs
from json_md_bridge.constants import (
    CONFIG_ENV_VAR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from json_md_bridge.exceptions import (
    FileError,
    InputFileNotFoundError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from json_md_bridge.options import JsonToMarkdownOptions, MarkdownToJsonOptions
from json_md_bridge.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def _configure_logging(log_level: int | str, log_file: Optional[str] = None, trace_mode: bool = False) -> None:
    """Configure root logging for a CLI run.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO")
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Use a detailed format with timestamps and logger names

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    formatter = logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            print(f"Warning: could not create log file {log_file}: {exc}", file=sys.stderr)

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def _get_version() -> str:
    """Get the installed version of json-md-bridge."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("json-md-bridge")
    except PackageNotFoundError:
        from json_md_bridge import __version__

        return __version__


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with ``to-markdown`` and ``to-json`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="json-md-bridge",
        description="Convert JSON values to a Markdown list/table dialect and back.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")
    parser.add_argument("--config", help=f"Configuration file (TOML, YAML or JSON); defaults to ${CONFIG_ENV_VAR}")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("to-markdown", help="Render a JSON or YAML document as Markdown")
    encode.add_argument("input", help="Input .json/.yaml/.yml file, or '-' for stdin")
    encode.add_argument("-o", "--out", help="Output file (default: stdout)")
    encode.add_argument(
        "--input-format",
        choices=["auto", "json", "yaml"],
        default="auto",
        help="Input format; 'auto' uses the file extension (stdin defaults to JSON)",
    )
    encode.add_argument("--indent-size", type=int, default=None, help="Spaces per nesting level")
    encode.add_argument("--max-depth", type=int, default=None, help="Nesting depth before truncation")
    encode.add_argument("--heading-level", type=int, default=None, help="Starting heading level (reserved)")
    encode.add_argument(
        "--numbered-lists", dest="use_numbered_lists", action="store_true", default=None, help="Use numbered lists"
    )
    encode.add_argument(
        "--arrays-as-tables",
        dest="arrays_as_tables",
        action="store_true",
        default=None,
        help="Render arrays of objects as tables",
    )

    decode = subparsers.add_parser("to-json", help="Parse Markdown back into JSON")
    decode.add_argument("input", help="Input Markdown file, or '-' for stdin")
    decode.add_argument("-o", "--out", help="Output file (default: stdout)")
    decode.add_argument(
        "--no-numbered-lists",
        dest="parse_numbered_lists",
        action="store_false",
        default=None,
        help="Do not parse numbered lists",
    )
    decode.add_argument(
        "--no-tables", dest="parse_tables", action="store_false", default=None, help="Do not parse pipe tables"
    )
    decode.add_argument(
        "--camel-case-keys", dest="camel_case_keys", action="store_true", default=None, help="camelCase all keys"
    )
    decode.add_argument("--json-indent", type=int, default=2, help="JSON output indentation (default: 2)")
    decode.add_argument("--strict", action="store_true", help="Exit with an error when any diagnostic is reported")

    return parser


def _read_text(source: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise InputFileNotFoundError(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot read file: {source}", file_path=source, original_error=e) from e


def load_structured_input(source: str, input_format: str = "auto") -> Any:
    """Load a JSON or YAML document from a path or stdin.

    Raises
    ------
    InputFileNotFoundError
        If the path does not exist
    ParsingError
        If the document is not valid JSON/YAML

    """
    if input_format == "auto":
        suffix = Path(source).suffix.lower() if source != STDIN_MARKER else ""
        input_format = "yaml" if suffix in (".yaml", ".yml") else "json"

    text = _read_text(source)
    try:
        if input_format == "yaml":
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ParsingError(
            f"Invalid {input_format.upper()} in {source}: {e}", parsing_stage="input", original_error=e
        ) from e


def _build_options(options_class: type, section: dict[str, Any]) -> Any:
    """Create an options object from a config table, skipping unknown keys."""
    known = options_class.field_names()
    unknown = sorted(k for k in section if k not in known)
    if unknown:
        logger.warning(f"Ignoring unknown {options_class.__name__} settings: {unknown}")
    try:
        return options_class(**{k: v for k, v in section.items() if k in known})
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {options_class.__name__}: {e}", original_error=e) from e


def _overrides(parsed_args: argparse.Namespace, options_class: type) -> dict[str, Any]:
    return {
        name: getattr(parsed_args, name)
        for name in options_class.field_names()
        if getattr(parsed_args, name, None) is not None
    }


def _write_output(text: str, out: Optional[str]) -> None:
    if out:
        BaseRenderer.write_text_output(text + "\n", out)
    else:
        print(text)


def run_to_markdown(parsed_args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute the ``to-markdown`` subcommand."""
    section = merge_configs(config.get("to_markdown", {}), _overrides(parsed_args, JsonToMarkdownOptions))
    options = _build_options(JsonToMarkdownOptions, section)

    data = load_structured_input(parsed_args.input, parsed_args.input_format)
    _write_output(json_to_markdown(data, options), parsed_args.out)
    return EXIT_SUCCESS


def run_to_json(parsed_args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute the ``to-json`` subcommand."""
    section = merge_configs(config.get("to_json", {}), _overrides(parsed_args, MarkdownToJsonOptions))
    options = _build_options(MarkdownToJsonOptions, section)

    result = markdown_to_json(_read_text(parsed_args.input), options)
    for message in result.errors:
        logger.warning(message)

    if parsed_args.strict and not result.ok:
        raise ParsingError(
            f"{len(result.errors)} diagnostic(s) while parsing {parsed_args.input}",
            parsing_stage="markdown",
            diagnostics=result.errors,
        )

    _write_output(json.dumps(result.data, indent=parsed_args.json_indent, ensure_ascii=False), parsed_args.out)
    return EXIT_SUCCESS


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Run the json-md-bridge command line."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.trace:
        _configure_logging(logging.DEBUG, parsed_args.log_file, trace_mode=True)
    else:
        _configure_logging(parsed_args.log_level, parsed_args.log_file)

    try:
        config: dict[str, Any] = {}
        if not parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))

        if parsed_args.command == "to-markdown":
            return run_to_markdown(parsed_args, config)
        return run_to_json(parsed_args, config)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.debug("Command failed", exc_info=True)
        return get_exit_code_for_exception(e)
