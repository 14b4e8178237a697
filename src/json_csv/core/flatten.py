"""Flatten nested JSON values into dotted-path records."""

from __future__ import annotations

from typing import Dict, List, TypeAlias, Union

JsonScalar: TypeAlias = Union[str, int, float, bool, None]
JsonValue: TypeAlias = Union[
    JsonScalar, List["JsonValue"], Dict[str, "JsonValue"]
]
FlatRecord: TypeAlias = Dict[str, JsonScalar]


def flatten_json(value: JsonValue, depth: int = -1) -> Union[FlatRecord, JsonScalar]:
    """Return a flattened representation of a parsed JSON value.

    Dot-separated string keys encode nested object and array structure:

        >>> flatten_json({"a": {"b": {"c": 1, "d": "x"}, "c": None}})
        {'a.b.c': 1, 'a.b.d': 'x', 'a.c': None}

    Arrays use the element index as the key:

        >>> flatten_json([0, 1, 2, {"a": "x"}])
        {'0': 0, '1': 1, '2': 2, '3.a': 'x'}

    Scalars pass through unchanged. A depth of 0 yields an empty record
    whatever the value; a negative depth never runs out.
    """
    if depth == 0:
        return {}

    if isinstance(value, dict):
        flat: FlatRecord = {}
        for key, child in value.items():
            _assign(flat, key, child, depth)
        return flat

    if isinstance(value, list):
        flat = {}
        for i, child in enumerate(value):
            _assign(flat, str(i), child, depth)
        return flat

    # str, int, float, bool, None
    return value


def _assign(dest: FlatRecord, key: str, child: JsonValue, depth: int) -> None:
    flat_child = flatten_json(child, depth - 1)
    if isinstance(flat_child, dict):
        for child_key, v in flat_child.items():
            dest[f"{key}.{child_key}"] = v
    else:
        dest[key] = flat_child


def flatten_record(value: JsonValue, depth: int = -1) -> FlatRecord:
    """Flatten a record, wrapping a bare scalar line as an empty record.

    A top-level scalar has no path to put it under, so it contributes no
    columns.
    """
    flat = flatten_json(value, depth)
    if isinstance(flat, dict):
        return flat
    return {}


__all__ = ["FlatRecord", "JsonScalar", "JsonValue", "flatten_json", "flatten_record"]
