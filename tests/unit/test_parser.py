"""
Unit tests for the parse orchestrator (ragged_csv.parser).

Includes the end-to-end scenarios for blank lines, synthetic headers,
mixed types and ragged rows.
"""

from __future__ import annotations

import pytest

from ragged_csv.exceptions import InvalidSeparatorError, RaggedCsvError
from ragged_csv.parser import parse_csv, split_lines, validate_separator
from ragged_csv.values import Float, Integer, Text
from ragged_csv.writer import format_csv


class TestScenarios:

    def test_blank_middle_cell(self):
        assert parse_csv("a,b,c\n1,,x\n", ",") == [{"a": Integer(1), "c": Text("x")}]

    def test_blank_header(self):
        assert parse_csv(",,\n1,2,3\n", ",") == [
            {"__1": Integer(1), "__2": Integer(2), "__3": Integer(3)}
        ]

    def test_leading_blank_lines(self):
        assert parse_csv("\n\nkey1;key2\nval1;2.5\n", ";") == [
            {"key1": Text("val1"), "key2": Float(2.5)}
        ]

    def test_empty_input(self):
        assert parse_csv("", ",") == []

    def test_header_only(self):
        assert parse_csv("a,b\n\n  \n", ",") == []

    def test_blank_only_input(self):
        assert parse_csv("\n   \n\n", ",") == []


class TestParseCsv:

    def test_mixed_types(self, separator):
        """Text, integer and float columns plus an always-missing column."""
        fields = ["text", "integer", "float", "missing"]
        text_values = ["   mads", "was    ", "    here   "]
        integer_values = [-1, 0, 2]
        float_values = [-1.1, 1.1, 2.2]

        lines = [separator.join(fields)]
        for t, i, f in zip(text_values, integer_values, float_values):
            lines.append(f"{t}{separator}{i}{separator}{f}{separator}")
        result = parse_csv("\n".join(lines), separator)

        assert len(result) == len(text_values)
        for row, t, i, f in zip(result, text_values, integer_values, float_values):
            assert row["text"] == Text(t.strip())
            assert row["integer"] == Integer(i)
            assert row["float"].value == pytest.approx(f)
            assert "missing" not in row

    def test_row_count_matches_non_blank_lines(self):
        text = "h\n1\n\n2\n   \n3\n"
        assert len(parse_csv(text)) == 3

    def test_preserves_line_order(self):
        result = parse_csv("n\n3\n1\n2\n")
        assert [row["n"].value for row in result] == [3, 1, 2]

    def test_crlf_line_endings(self):
        assert parse_csv("a,b\r\n1,x\r\n") == [{"a": Integer(1), "b": Text("x")}]

    def test_ragged_rows(self):
        result = parse_csv("a,b,c\n1\n1,2,3,4\n")
        assert result == [
            {"a": Integer(1)},
            {"a": Integer(1), "b": Integer(2), "c": Integer(3), "__4": Integer(4)},
        ]

    def test_record_separator_character(self):
        """Characters str.splitlines() breaks on are valid separators."""
        assert parse_csv("a\x1eb\n1\x1e2\n", "\x1e") == [
            {"a": Integer(1), "b": Integer(2)}
        ]

    @pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separator_keeps_edge_cells(self, sep):
        """Blank cells at either edge of a line keep their positions."""
        text = f"a{sep}b{sep}c\n{sep}2{sep}\n{sep}{sep}3\n"
        assert parse_csv(text, sep) == [{"b": Integer(2)}, {"c": Integer(3)}]

    def test_information_separator_blank_header_cells(self):
        assert parse_csv("\x1e\n1\x1e2\n", "\x1e") == [
            {"__1": Integer(1), "__2": Integer(2)}
        ]

    def test_duplicate_header_names(self):
        assert parse_csv("a,a\n1,2\n") == [{"a": Integer(2)}]

    def test_reparse_of_rendered_rows(self):
        """Rendering rows and parsing them again gives the same values."""
        rows = parse_csv("a,b,c\n1,,x\n2.5,3,\n-7,1e16,hello world\n")
        assert parse_csv(format_csv(rows)) == rows


class TestSeparatorValidation:

    @pytest.mark.parametrize("bad", ["", ",,", "::"])
    def test_rejects_non_single_char(self, bad):
        with pytest.raises(InvalidSeparatorError, match="single character"):
            parse_csv("a\n1\n", bad)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_separator("")
        with pytest.raises(RaggedCsvError):
            validate_separator(None)  # type: ignore[arg-type]

    def test_accepts_any_single_char(self):
        assert validate_separator("\x00") == "\x00"


class TestSplitLines:

    def test_trailing_newline_not_a_line(self):
        assert list(split_lines("a\nb\n")) == ["a", "b"]

    def test_keeps_inner_blank_lines(self):
        assert list(split_lines("a\n\nb")) == ["a", "", "b"]

    def test_empty(self):
        assert list(split_lines("")) == []

    def test_strips_carriage_return(self):
        assert list(split_lines("a\r\nb\r")) == ["a", "b"]
