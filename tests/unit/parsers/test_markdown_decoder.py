#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown parser."""

import pytest

from json_md_bridge.exceptions import InvalidOptionsError
from json_md_bridge.options import JsonToMarkdownOptions, MarkdownToJsonOptions
from json_md_bridge.parsers.markdown import MarkdownParser


def parse(text, **kwargs):
    return MarkdownParser(MarkdownToJsonOptions(**kwargs)).parse(text)


@pytest.mark.unit
class TestKeyValueMappings:
    """Test bold-key bullets."""

    def test_flat_mapping(self):
        result = parse("- **name**: John\n- **age**: 30")
        assert result.data == {"name": "John", "age": 30}
        assert result.errors == []

    def test_scalar_inference_in_values(self):
        text = "- **a**: null\n- **b**: true\n- **c**: 1.5\n- **d**: _null_\n- **e**: _empty array_"
        assert parse(text).data == {"a": None, "b": True, "c": 1.5, "d": None, "e": []}

    def test_empty_value_is_null(self):
        assert parse("- **a**:\n- **b**: 1").data == {"a": None, "b": 1}

    def test_nested_block_replaces_inline_value(self):
        text = "- **user**:\n  - **name**: John\n  - **age**: 30\n- **active**: true"
        assert parse(text).data == {"user": {"name": "John", "age": 30}, "active": True}

    def test_nested_list_value(self):
        text = "- **tags**:\n  - a\n  - b\n- **count**: 2"
        assert parse(text).data == {"tags": ["a", "b"], "count": 2}

    def test_nested_empty_object_sentinel(self):
        assert parse("- **meta**:\n  _empty object_").data == {"meta": {}}

    def test_deeply_nested(self):
        text = "- **a**:\n  - **b**:\n    - **c**: 1\n  - **d**: 2\n- **e**: 3"
        assert parse(text).data == {"a": {"b": {"c": 1}, "d": 2}, "e": 3}

    def test_escaped_pipes_in_keys_and_values(self):
        assert parse(r"- **a\|b**: x \| y").data == {"a|b": "x | y"}

    def test_key_with_colon_text_in_value(self):
        assert parse("- **url**: http://example.com").data == {"url": "http://example.com"}

    def test_duplicate_keys_last_wins(self):
        assert parse("- **a**: 1\n- **a**: 2").data == {"a": 2}

    def test_sample_markdown(self, sample_markdown, sample_record):
        assert parse(sample_markdown).data == sample_record

    def test_large_flat_mapping(self):
        text = "\n".join(f"- **key{i}**: {i}" for i in range(5000))
        data = parse(text).data
        assert len(data) == 5000
        assert data["key4999"] == 4999

    def test_crlf_line_endings(self):
        assert parse("- **a**: 1\r\n- **b**: x\r\n").data == {"a": 1, "b": "x"}

    def test_tab_indentation(self):
        assert parse("- **a**:\n\t- **b**: 1").data == {"a": {"b": 1}}

    def test_blank_line_ends_mapping(self):
        assert parse("- **a**: 1\n\n- **b**: 2").data == {"a": 1}

    def test_camel_case_keys(self):
        result = parse("- **first_name**: John\n- **last-name**: Doe", camel_case_keys=True)
        assert result.data == {"firstName": "John", "lastName": "Doe"}

    def test_camel_case_nested_keys(self):
        result = parse("- **user_info**:\n  - **zip_code**: 10001", camel_case_keys=True)
        assert result.data == {"userInfo": {"zipCode": 10001}}

    def test_keys_unchanged_by_default(self):
        assert parse("- **first_name**: John").data == {"first_name": "John"}


@pytest.mark.unit
class TestLists:
    """Test bullet and numbered lists."""

    def test_bullet_list(self):
        assert parse("- apple\n- banana").data == ["apple", "banana"]

    def test_single_bullet_unwrapped(self):
        assert parse("- apple").data == "apple"

    def test_numbered_list(self):
        assert parse("1. first\n2. second").data == ["first", "second"]

    def test_single_numbered_item_stays_list(self):
        assert parse("1. only").data == ["only"]

    def test_numbered_lists_disabled(self):
        result = parse("1. first\n2. second", parse_numbered_lists=False)
        assert result.data != ["first", "second"]
        assert result.data is None
        assert result.errors == []

    def test_list_of_mappings(self):
        text = "-\n  - **a**: 1\n-\n  - **a**: 2"
        assert parse(text).data == [{"a": 1}, {"a": 2}]

    def test_nested_lists(self):
        assert parse("-\n  - 1\n  - 2\n- 3").data == [[1, 2], 3]

    def test_numbered_nested_items(self):
        assert parse("1.\n  1. x\n  2. y\n2. z").data == [["x", "y"], "z"]

    def test_empty_array_sentinel_item(self):
        assert parse("- _empty array_").data == []

    def test_bare_bullet_without_block(self):
        assert parse("-\n- 1").data == [None, 1]

    def test_nested_block_does_not_swallow_outer_items(self):
        assert parse("- a\n  - b\n  - c\n- d").data == [["b", "c"], "d"]

    def test_leftover_deeper_lines_skipped(self):
        text = "- **a**:\n  - x\n  plain text\n- **b**: 2"
        assert parse(text).data == {"a": "x", "b": 2}

    def test_plain_bullet_holding_mapping_merges(self):
        text = "- **a**: 1\n-\n  - **b**: 2"
        assert parse(text).data == {"a": 1, "b": 2}

    def test_plain_bullet_list_ends_mapping(self):
        text = "- **a**: 1\n- _empty object_\n- **c**: 3"
        assert parse(text).data == {"a": 1}


@pytest.mark.unit
class TestTopLevel:
    """Test document-level behavior."""

    def test_empty_input(self):
        result = parse("")
        assert result.data is None
        assert result.errors == []
        assert result.ok

    def test_whitespace_only(self):
        assert parse("   \n  \n").data is None

    def test_sentinel_only(self):
        assert parse("_empty object_").data == {}
        assert parse("_null_").data is None

    def test_leading_prose_yields_none(self):
        result = parse("Some heading\n- **a**: 1")
        assert result.data is None
        assert result.errors == []

    def test_indented_first_line(self):
        assert parse("  - **a**: 1\n  - **b**: 2").data == {"a": 1, "b": 2}

    def test_fatal_error_is_reported(self, monkeypatch):
        def boom(_text):
            raise RuntimeError("boom")

        monkeypatch.setattr("json_md_bridge.parsers.markdown._split_lines", boom)
        result = parse("- a")
        assert result.data is None
        assert result.errors == ["Fatal error: boom"]
        assert not result.ok


@pytest.mark.unit
class TestTables:
    """Test pipe-table decoding."""

    def test_simple_table(self):
        text = "| name | age |\n| --- | --- |\n| John | 30 |\n| Jane | 25 |"
        result = parse(text)
        assert result.data == [{"name": "John", "age": 30}, {"name": "Jane", "age": 25}]
        assert result.errors == []

    def test_single_row_table_is_list(self):
        assert parse("| a |\n| --- |\n| 1 |").data == [{"a": 1}]

    def test_header_only_table(self):
        assert parse("| a | b |\n| --- | --- |").data == []

    def test_aligned_separator(self):
        assert parse("| a | b |\n| :--- | ---: |\n| 1 | 2 |").data == [{"a": 1, "b": 2}]

    def test_column_count_mismatch(self):
        text = "| col1 | col2 |\n| --- | --- |\n| a | b |\n| x | y | z |\n| c | d |"
        result = parse(text)
        assert result.data == [{"col1": "a", "col2": "b"}, {"col1": "c", "col2": "d"}]
        assert result.errors == ["Row 2: column count mismatch (expected 2, got 3)"]

    def test_short_row_reported(self):
        result = parse("| a | b |\n| --- | --- |\n| 1 |")
        assert result.data == []
        assert result.errors == ["Row 1: column count mismatch (expected 2, got 1)"]

    def test_empty_cells_are_counted(self):
        assert parse("| a | b |\n| --- | --- |\n| 1 |  |").data == [{"a": 1, "b": None}]

    def test_cell_sentinels(self):
        text = "| a | b | c |\n| --- | --- | --- |\n| _null_ | _object_ | _array[3]_ |"
        assert parse(text).data == [{"a": None, "b": {}, "c": []}]

    def test_escaped_pipe_in_cell(self):
        assert parse("| text |\n| --- |\n| a \\| b |").data == [{"text": "a | b"}]

    def test_table_after_prose(self):
        text = "Users:\n\n| name |\n| --- |\n| Ann |"
        assert parse(text).data == [{"name": "Ann"}]

    def test_indented_table(self):
        assert parse("  | name |\n  | --- |\n  | Ann |").data == [{"name": "Ann"}]

    def test_table_ends_at_first_non_pipe_line(self):
        text = "| a |\n| --- |\n| 1 |\nafter\n| 2 |"
        assert parse(text).data == [{"a": 1}]

    def test_separator_must_be_dashes_in_every_cell(self):
        assert parse("| a | b |\n| --- | x |\n| 1 | 2 |").data is None

    def test_pipe_line_without_separator_is_not_table(self):
        assert parse("| a |\n| b |").data is None

    def test_tables_disabled(self):
        text = "| a |\n| --- |\n| 1 |"
        assert parse(text, parse_tables=False).data is None

    def test_camel_case_headers(self):
        text = "| first_name | Last Name |\n| --- | --- |\n| John | Doe |"
        assert parse(text, camel_case_keys=True).data == [{"firstName": "John", "lastName": "Doe"}]


@pytest.mark.unit
class TestParserSurface:
    """Test option handling."""

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(JsonToMarkdownOptions())

    def test_default_options(self):
        assert MarkdownParser().options == MarkdownToJsonOptions()

    def test_parser_is_reusable(self):
        parser = MarkdownParser()
        assert parser.parse("- **a**: 1").data == {"a": 1}
        assert parser.parse("- b\n- c").data == ["b", "c"]
