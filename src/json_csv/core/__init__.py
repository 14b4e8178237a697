"""json-csv core logic.

Kept separate from CLI presentation:
- flatten: nested JSON → dotted-path records
- schema: column discovery and ordering
- streaming: NDJSON parsing and stdin spooling
"""

from .flatten import FlatRecord, JsonScalar, JsonValue, flatten_json, flatten_record
from .schema import Schema, resolve_schema, scan_schema, schema_from_columns
from .streaming import iter_json_lines, spooled_input

__all__ = [
    "FlatRecord",
    "JsonScalar",
    "JsonValue",
    "Schema",
    "flatten_json",
    "flatten_record",
    "iter_json_lines",
    "resolve_schema",
    "scan_schema",
    "schema_from_columns",
    "spooled_input",
]
