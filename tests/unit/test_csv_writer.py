"""Unit tests for the CSV encoder (no files required)."""

import io

import pytest

from json_csv.core.schema import Schema, resolve_schema
from json_csv.models import ConvertConfig
from json_csv.writers import csv_armor, encode_header, encode_record, render_value, write_csv


def test_armor_plain_text_unchanged():
    assert csv_armor("hello") == "hello"


def test_armor_quotes_and_delimiter():
    assert csv_armor('he said "hi",there', ",") == '"he said ""hi"",there"'


def test_armor_newline():
    assert csv_armor("two\nlines") == '"two\nlines"'


def test_armor_uses_active_delimiter():
    assert csv_armor("a,b", "\t") == "a,b"
    assert csv_armor("a\tb", "\t") == '"a\tb"'
    assert csv_armor("a;b", ";") == '"a;b"'


@pytest.mark.parametrize(
    "value,text",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (42, "42"),
        (1.5, "1.5"),
        (1.0, "1.0"),
        ("", ""),
        ("x", "x"),
    ],
)
def test_render_value(value, text):
    assert render_value(value) == text


def test_encode_header():
    schema = Schema(("x", "y.z", "a,b"))
    assert encode_header(schema) == 'x,y.z,"a,b"\r\n'


def test_encode_header_empty_schema():
    assert encode_header(Schema()) == "\r\n"


def test_encode_record_pads_missing_columns():
    schema = Schema(("x", "y.z"))
    assert encode_record(schema, {"x": 3}) == "3,\r\n"


def test_encode_record_drops_unknown_keys():
    schema = Schema(("b",))
    assert encode_record(schema, {"a": 1, "b": 2, "c": 3}) == "2\r\n"


def test_encode_record_null_renders_empty():
    schema = Schema(("a", "b"))
    assert encode_record(schema, {"a": None, "b": "x"}) == ",x\r\n"


def test_encode_record_places_by_index():
    schema = Schema(("a", "b", "c"))
    assert encode_record(schema, {"c": 3, "a": 1}, "|", "\n") == "1||3\n"


def test_write_csv_round_trip_scenario():
    records = [{"x": 1, "y": {"z": 2}}, {"x": 3}]
    schema = resolve_schema([{"x", "y.z"}])
    out = io.BytesIO()

    count = write_csv(schema, records, out)

    assert count == 2
    assert out.getvalue() == b"x,y.z\r\n1,2\r\n3,\r\n"


def test_write_csv_config_delimiter_and_line_ending():
    out = io.BytesIO()
    config = ConvertConfig(csv_delimiter="\\t", line_ending="\n")
    write_csv(Schema(("a", "b")), [{"a": "p\tq", "b": 1}], out, config)
    assert out.getvalue() == b'a\tb\n"p\tq"\t1\n'


def test_write_csv_flattens_beyond_scan_depth():
    out = io.BytesIO()
    write_csv(Schema(("a.b.c",)), [{"a": {"b": {"c": "deep"}}}], out)
    assert out.getvalue() == b"a.b.c\r\ndeep\r\n"


def test_write_csv_utf8():
    out = io.BytesIO()
    write_csv(Schema(("name",)), [{"name": "Zoë"}], out)
    assert out.getvalue().decode("utf-8") == "name\r\nZoë\r\n"
