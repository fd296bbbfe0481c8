# tests/ingest/test_dsv.py
"""Tests for delimited-text parsing and automatic value typing."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from datachat.ingest.dsv import auto_type, parse_dsv


class TestAutoType:
    """Tests for auto_type."""

    def test_empty_and_whitespace_become_none(self):
        assert auto_type("") is None
        assert auto_type("   ") is None

    def test_booleans_are_case_sensitive(self):
        assert auto_type("true") is True
        assert auto_type("false") is False
        assert auto_type("True") == "True"

    def test_nan(self):
        assert math.isnan(auto_type("NaN"))

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            (" 42 ", 42),
            ("-7", -7),
            ("+3", 3),
            ("1.0", 1),
            ("1e3", 1000),
            ("0x1F", 31),
            ("0b101", 5),
            ("0o17", 15),
        ],
    )
    def test_integral_numbers_become_int(self, text, expected):
        value = auto_type(text)
        assert value == expected
        assert isinstance(value, int)

    def test_fractional_numbers_become_float(self):
        assert auto_type("2.5") == 2.5
        assert auto_type(".5") == 0.5
        assert auto_type("1.5e-3") == 0.0015

    def test_infinity(self):
        assert auto_type("Infinity") == float("inf")
        assert auto_type("-Infinity") == float("-inf")

    def test_large_integers_keep_exact_digits(self):
        assert auto_type("9007199254740993") == 9007199254740993
        assert auto_type("-9223372036854775808") == -(2**63)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12345678901234567890", 1.2345678901234567e19),
            ("9223372036854775808", 2.0**63),
            ("-9223372036854775809", -(2.0**63)),
            ("1e20", 1e20),
            ("0x10000000000000000", 2.0**64),
        ],
    )
    def test_integers_outside_int64_become_float(self, text, expected):
        value = auto_type(text)
        assert isinstance(value, float)
        assert value == expected

    def test_non_ascii_digits_stay_strings(self):
        assert auto_type("١٢") == "١٢"
        assert auto_type("٢٠٢٤-01-15") == "٢٠٢٤-01-15"

    def test_bare_year_is_a_number(self):
        assert auto_type("2024") == 2024

    def test_date_only_is_utc_midnight(self):
        assert auto_type("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_year_month(self):
        assert auto_type("2024-03") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_datetime_with_offset(self):
        value = auto_type("2024-01-15T10:30:00+05:30")
        assert value.utcoffset() == timedelta(hours=5, minutes=30)
        assert value.astimezone(timezone.utc) == datetime(2024, 1, 15, 5, 0, tzinfo=timezone.utc)

    def test_datetime_with_millis_and_z(self):
        value = auto_type("2024-01-15T10:30:05.250Z")
        assert value == datetime(2024, 1, 15, 10, 30, 5, 250000, tzinfo=timezone.utc)

    def test_invalid_date_stays_string(self):
        assert auto_type("2024-13-40") == "2024-13-40"

    def test_other_text_is_returned_untrimmed(self):
        assert auto_type("  hello ") == "  hello "
        assert auto_type("12abc") == "12abc"
        assert auto_type("01/02/2024") == "01/02/2024"


class TestParseDSV:
    """Tests for parse_dsv."""

    def test_csv_rows_are_typed(self):
        rows = parse_dsv("name,age,active\nAlice,30,true\nBob,,false\n", ",")

        assert rows == [
            {"name": "Alice", "age": 30, "active": True},
            {"name": "Bob", "age": None, "active": False},
        ]

    def test_tsv(self):
        rows = parse_dsv("a\tb\n1\tx y\n", "\t")
        assert rows == [{"a": 1, "b": "x y"}]

    def test_quoted_fields(self):
        text = 'name,note\n"Doe, John","said ""hi"""\n'
        assert parse_dsv(text, ",") == [{"name": "Doe, John", "note": 'said "hi"'}]

    def test_short_rows_are_padded_and_long_rows_truncated(self):
        rows = parse_dsv("a,b,c\n1\n1,2,3,4\n", ",")
        assert rows == [{"a": 1, "b": None, "c": None}, {"a": 1, "b": 2, "c": 3}]

    def test_duplicate_header_later_value_wins(self):
        rows = parse_dsv("x,y,x\n1,2,3\n", ",")
        assert rows == [{"x": 3, "y": 2}]
        assert list(rows[0]) == ["x", "y"]

    def test_bom_is_stripped(self):
        rows = parse_dsv("\ufeffid,name\n1,a\n", ",")
        assert list(rows[0]) == ["id", "name"]

    def test_interior_blank_line_becomes_empty_row(self):
        rows = parse_dsv("id,name\r\n1,a\r\n\r\n2,b\r\n", ",")
        assert rows[1] == {"id": None, "name": None}
        assert [r["id"] for r in rows] == [1, None, 2]

    def test_trailing_blank_lines_are_dropped(self):
        assert parse_dsv("id\n1\n\n\n", ",") == [{"id": 1}]
        assert parse_dsv("id\n\n", ",") == []

    def test_header_only_gives_no_rows(self):
        assert parse_dsv("a,b\n", ",") == []
        assert parse_dsv("", ",") == []
