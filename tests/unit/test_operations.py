"""Tests for operation parsing and validation."""

import pytest

from trie_visualizer.operations import (
    OperationParseError,
    format_operations,
    is_valid_word,
    parse_operations,
    validate_operations,
)
from trie_visualizer.step_types import Operation, OperationType


def _pairs(operations):
    return [(op.type, op.word) for op in operations]


class TestParseSimpleForm:
    def test_comma_separated(self):
        result = parse_operations("insert apple, search apple, startsWith app")

        assert _pairs(result) == [
            (OperationType.INSERT, "apple"),
            (OperationType.SEARCH, "apple"),
            (OperationType.STARTS_WITH, "app"),
        ]

    def test_newlines_and_case_insensitive_methods(self):
        result = parse_operations("INSERT cat\nstartswith ca\n\nSearch cat")

        assert [op.type for op in result] == [
            OperationType.INSERT,
            OperationType.STARTS_WITH,
            OperationType.SEARCH,
        ]

    def test_invalid_entries_are_skipped(self):
        result = parse_operations("insert Apple, delete cat, insert, search dog")

        assert _pairs(result) == [(OperationType.SEARCH, "dog")]

    def test_nothing_recognised_raises(self):
        with pytest.raises(OperationParseError, match="Could not parse"):
            parse_operations("hello world")

    def test_blank_input_raises(self):
        with pytest.raises(OperationParseError, match="No operations"):
            parse_operations("   ")


class TestParseJsonForm:
    def test_constructor_entry_is_skipped(self):
        result = parse_operations('[["Trie"], ["insert", "apple"], ["search", "app"]]')

        assert _pairs(result) == [
            (OperationType.INSERT, "apple"),
            (OperationType.SEARCH, "app"),
        ]

    def test_unknown_calls_ignored(self):
        result = parse_operations('[["Trie"], ["remove", "x"], ["startsWith", "ap"], ["insert", 5]]')

        assert _pairs(result) == [(OperationType.STARTS_WITH, "ap")]

    def test_method_names_match_exactly(self):
        result = parse_operations('[["Trie"], ["StartsWith", "ap"], ["INSERT", "x"], ["insert", "ab"]]')

        assert _pairs(result) == [(OperationType.INSERT, "ab")]

    def test_non_list_json_raises(self):
        with pytest.raises(OperationParseError, match="JSON list"):
            parse_operations('{"insert": "apple"}')

    def test_constructor_only_raises(self):
        with pytest.raises(OperationParseError):
            parse_operations('[["Trie"]]')


class TestValidation:
    @pytest.mark.parametrize("word", ["a", "apple", "z" * 2000])
    def test_valid_words(self, word):
        assert is_valid_word(word)

    @pytest.mark.parametrize("word", ["", "Apple", "ap ple", "a1", "z" * 2001, "é"])
    def test_invalid_words(self, word):
        assert not is_valid_word(word)

    def test_validate_operations_names_bad_word(self):
        ops = [
            Operation(type=OperationType.INSERT, word="ok"),
            Operation(type=OperationType.SEARCH, word="Bad"),
        ]

        with pytest.raises(OperationParseError, match='"Bad"'):
            validate_operations(ops)


class TestFormat:
    def test_format_operations(self):
        ops = parse_operations("insert apple, startsWith app")

        assert format_operations(ops) == 'insert("apple") → startsWith("app")'
