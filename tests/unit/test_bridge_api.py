"""Unit tests for the top-level conversion functions."""

import logging

import pytest

import json_md_bridge
from json_md_bridge import (
    InvalidOptionsError,
    JsonToMarkdownOptions,
    MarkdownToJsonOptions,
    MarkdownToJsonResult,
    json_to_markdown,
    markdown_to_json,
)


@pytest.mark.unit
class TestJsonToMarkdownFunction:
    """Test json_to_markdown option resolution."""

    def test_defaults(self):
        """Test conversion with default options."""
        assert json_to_markdown({"name": "John", "age": 30}) == "- **name**: John\n- **age**: 30"

    def test_keyword_options(self):
        """Test options given as keyword arguments."""
        assert json_to_markdown(["a", "b"], use_numbered_lists=True) == "1. a\n2. b"

    def test_options_object(self):
        """Test a pre-built options object."""
        options = JsonToMarkdownOptions(use_numbered_lists=True)
        assert json_to_markdown(["a"], options) == "1. a"

    def test_keywords_override_options_object(self):
        """Test that keyword arguments override fields of the options object."""
        options = JsonToMarkdownOptions(use_numbered_lists=True)
        assert json_to_markdown(["a"], options, use_numbered_lists=False) == "- a"
        assert options.use_numbered_lists is True

    def test_unknown_keyword_ignored(self, caplog):
        """Test that unknown keyword arguments are skipped and logged."""
        with caplog.at_level(logging.DEBUG, logger="json_md_bridge.api"):
            assert json_to_markdown([1], not_an_option=True) == "- 1"
        assert "not_an_option" in caplog.text

    def test_wrong_options_type(self):
        """Test that decoder options are rejected by the encoder."""
        with pytest.raises(InvalidOptionsError):
            json_to_markdown({}, MarkdownToJsonOptions())  # type: ignore[arg-type]

    def test_invalid_option_value(self):
        """Test that out-of-range keyword values raise ValueError."""
        with pytest.raises(ValueError):
            json_to_markdown({}, heading_level=9)


@pytest.mark.unit
class TestMarkdownToJsonFunction:
    """Test markdown_to_json option resolution and result shape."""

    def test_result_type(self):
        """Test that a result object with data and errors is returned."""
        result = markdown_to_json("- **a**: 1")
        assert isinstance(result, MarkdownToJsonResult)
        assert result.data == {"a": 1}
        assert result.errors == []
        assert result.ok

    def test_keyword_options(self):
        """Test options given as keyword arguments."""
        result = markdown_to_json("- **first_name**: John", camel_case_keys=True)
        assert result.data == {"firstName": "John"}

    def test_options_object(self):
        """Test a pre-built options object."""
        result = markdown_to_json("1. a\n2. b", MarkdownToJsonOptions(parse_numbered_lists=False))
        assert result.data is None

    def test_wrong_options_type(self):
        """Test that encoder options are rejected by the decoder."""
        with pytest.raises(InvalidOptionsError):
            markdown_to_json("", JsonToMarkdownOptions())  # type: ignore[arg-type]

    def test_calls_are_independent(self):
        """Test that diagnostics never leak between calls."""
        bad = "| a |\n| --- |\n| 1 | 2 |"
        assert len(markdown_to_json(bad).errors) == 1
        assert markdown_to_json("- **a**: 1").errors == []
        assert len(markdown_to_json(bad).errors) == 1


@pytest.mark.unit
def test_package_exports():
    """Test the public names and version exposed by the package."""
    assert json_md_bridge.__version__ == "0.1.0"
    for name in json_md_bridge.__all__:
        assert hasattr(json_md_bridge, name)
