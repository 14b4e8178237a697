"""CSV writer for flattened NDJSON records."""

import json
from typing import Any, BinaryIO, Iterable, List, Optional

from ..core.flatten import FlatRecord, JsonValue, flatten_record
from ..core.schema import Schema
from ..models.config import ConvertConfig

_MISSING = object()


def render_value(value: Any) -> str:
    """Natural text form of a scalar; null and missing render empty."""
    if value is None or value is _MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return str(value)


def csv_armor(value: Any, delimiter: str = ",") -> str:
    """Return a CSV-armored version of ``value``.

    Double quotes are doubled, and the field is wrapped in double quotes if
    it contains a quote, a newline or the delimiter.

    Example:
        >>> csv_armor('he said "hi",there')
        '"he said ""hi"",there"'
    """
    text = render_value(value).replace('"', '""')
    if '"' in text or "\n" in text or delimiter in text:
        return f'"{text}"'
    return text


def encode_header(schema: Schema, delimiter: str = ",", line_ending: str = "\r\n") -> str:
    return delimiter.join(csv_armor(c, delimiter) for c in schema) + line_ending


def encode_record(
    schema: Schema,
    record: FlatRecord,
    delimiter: str = ",",
    line_ending: str = "\r\n",
) -> str:
    """Encode one flattened record as a CSV line.

    Keys that are not schema columns are dropped; columns the record lacks
    are left empty.
    """
    slots: List[Any] = [_MISSING] * len(schema)
    for key, value in record.items():
        i = schema.index(key)
        if i is not None:
            slots[i] = value
    return delimiter.join(csv_armor(v, delimiter) for v in slots) + line_ending


def write_csv(
    schema: Schema,
    records: Iterable[JsonValue],
    output: BinaryIO,
    config: Optional[ConvertConfig] = None,
) -> int:
    """Write the header and one CSV line per parsed record.

    Args:
        schema: Resolved output columns
        records: Parsed JSON values, in input order
        output: Binary sink; text is written as UTF-8
        config: Delimiter and line ending (defaults if None)

    Returns:
        Number of records written

    Notes:
        - Records are flattened without a depth limit here. Keys deeper
          than the scan depth are never schema columns, so they drop out.
    """
    config = config or ConvertConfig()
    delimiter = config.csv_delimiter
    line_ending = config.line_ending

    output.write(encode_header(schema, delimiter, line_ending).encode("utf-8"))

    count = 0
    for record in records:
        line = encode_record(schema, flatten_record(record), delimiter, line_ending)
        output.write(line.encode("utf-8"))
        count += 1
    return count
