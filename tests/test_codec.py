"""Tests for the delimited row codec."""

from datetime import date
from uuid import UUID

import pytest

from library_flatstore import codec
from library_flatstore.errors import MalformedRecordError


class TestEscape:
    def test_plain_values_pass_through(self):
        assert codec.escape("Pride and Prejudice") == "Pride and Prejudice"

    def test_absent_values_are_empty(self):
        assert codec.escape(None) == ""
        assert codec.escape("") == ""

    def test_separator_forces_quotes(self):
        assert codec.escape("Austen, Jane") == '"Austen, Jane"'

    def test_quotes_are_doubled(self):
        assert codec.escape('say "hi"') == '"say ""hi"""'

    def test_newline_forces_quotes(self):
        assert codec.escape("line one\nline two") == '"line one\nline two"'


class TestEncode:
    def test_joins_with_separator(self):
        assert codec.encode(["a", None, "c,d"]) == 'a,,"c,d"'


class TestDecode:
    def test_simple_fields(self):
        assert codec.decode("a,b,c") == ["a", "b", "c"]

    def test_empty_fields(self):
        assert codec.decode("a,,") == ["a", "", ""]
        assert codec.decode("") == [""]

    def test_quoted_separator(self):
        assert codec.decode('"Austen, Jane",1775') == ["Austen, Jane", "1775"]

    def test_doubled_quotes_unescape(self):
        assert codec.decode('"say ""hi""",x') == ['say "hi"', "x"]

    def test_quoted_newline(self):
        assert codec.decode('"one\ntwo",3') == ["one\ntwo", "3"]

    def test_last_field_without_trailing_separator(self):
        assert codec.decode('x,"y"') == ["x", "y"]

    def test_inverse_of_encode(self):
        fields = ["plain", "with, comma", 'with "quotes"', "multi\nline", "", '"', ","]
        assert codec.decode(codec.encode(fields)) == fields


class TestSplitRecords:
    def test_splits_on_newlines(self):
        assert list(codec.split_records("h\na\nb\n")) == ["h", "a", "b"]

    def test_keeps_quoted_newlines(self):
        text = 'h\n"one\ntwo",3\nlast\n'
        assert list(codec.split_records(text)) == ["h", '"one\ntwo",3', "last"]

    def test_tolerates_crlf(self):
        assert list(codec.split_records("h\r\na\r\n")) == ["h", "a"]

    def test_last_record_without_newline(self):
        assert list(codec.split_records("h\na")) == ["h", "a"]

    def test_empty_text(self):
        assert list(codec.split_records("")) == []

    def test_unclosed_quote_ends_at_its_line(self):
        text = "h\n\"broken,,,\na,b\nc,d\n"
        assert list(codec.split_records(text)) == ["h", "\"broken,,,", "a,b", "c,d"]

    def test_unclosed_quote_keeps_later_multiline_fields(self):
        text = "h\n\"broken\n\"one\ntwo\",3\n"
        records = codec.split_records(
            text, is_complete=lambda record: len(codec.decode(record)) == 2
        )
        assert list(records) == ["h", "\"broken", "\"one\ntwo\",3"]

    def test_unclosed_quote_on_last_line(self):
        assert list(codec.split_records("h\na\n\"tail")) == ["h", "a", "\"tail"]


class TestTypedHelpers:
    def test_expect_arity(self):
        codec.expect_arity(["a", "b"], 2, "Thing")
        with pytest.raises(MalformedRecordError, match="exactly 3 fields"):
            codec.expect_arity(["a", "b"], 3, "Thing")

    def test_dates(self):
        assert codec.format_date(date(1775, 12, 16)) == "1775-12-16"
        assert codec.format_date(None) == ""
        assert codec.parse_date("1775-12-16", "BirthDate") == date(1775, 12, 16)
        assert codec.parse_date("", "BirthDate") is None
        with pytest.raises(MalformedRecordError, match="BirthDate"):
            codec.parse_date("16/12/1775", "BirthDate")

    def test_ints(self):
        assert codec.parse_int("432", "Pages") == 432
        assert codec.parse_int("", "Pages") is None
        with pytest.raises(MalformedRecordError, match="Pages"):
            codec.parse_int("many", "Pages")

    def test_uuids(self):
        value = "12345678-1234-5678-1234-567812345678"
        assert codec.parse_uuid(value, "Id") == UUID(value)
        with pytest.raises(MalformedRecordError, match="Id"):
            codec.parse_uuid("not-a-uuid", "Id")

    def test_optional_text(self):
        assert codec.optional_text("") is None
        assert codec.optional_text("x") == "x"
