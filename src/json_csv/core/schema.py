"""Column schema resolution for CSV output.

Columns are discovered by flattening every input record and taking the
union of their keys. The final order does not depend on the order records
were seen in: first-columns rank, then path depth (dot count), then the key
string itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Sequence, Set, Tuple

from .flatten import JsonValue, flatten_record

UNRANKED = 2**32


@dataclass(frozen=True)
class Schema:
    """Ordered, duplicate-free CSV columns bound to output positions."""

    columns: Tuple[str, ...] = ()
    _positions: Dict[str, int] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        positions: Dict[str, int] = {}
        for i, column in enumerate(self.columns):
            positions.setdefault(column, i)
        object.__setattr__(self, "_positions", positions)

    def index(self, column: str) -> Optional[int]:
        """Output position of ``column``, or None if it is not a column."""
        return self._positions.get(column)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def __contains__(self, column: object) -> bool:
        return column in self._positions


def count_dots(key: str) -> int:
    return key.count(".")


def column_sort_key(key: str, ranks: Dict[str, int]) -> Tuple[int, int, str]:
    return (ranks.get(key, UNRANKED), count_dots(key), key)


def resolve_schema(
    key_sets: Iterable[Iterable[str]],
    first_columns: Sequence[str] = (),
    exclude_columns: Iterable[str] = (),
) -> Schema:
    """Union the flattened key sets of all records into a Schema.

    Args:
        key_sets: Keys of each flattened record
        first_columns: Columns forced leftmost, in this order
        exclude_columns: Columns dropped from the output

    Returns:
        Schema sorted by first-columns rank, dot count, then key
    """
    keys: Set[str] = set()
    for key_set in key_sets:
        keys.update(key_set)
    keys.difference_update(exclude_columns)

    ranks: Dict[str, int] = {}
    for i, column in enumerate(first_columns):
        ranks.setdefault(column, i)

    ordered = sorted(keys, key=lambda k: column_sort_key(k, ranks))
    return Schema(tuple(ordered))


def schema_from_columns(columns: Sequence[str]) -> Schema:
    """Schema taken literally from an explicit column list (no scan)."""
    seen: Set[str] = set()
    unique = []
    for column in columns:
        if column not in seen:
            seen.add(column)
            unique.append(column)
    return Schema(tuple(unique))


def scan_schema(
    records: Iterable[JsonValue],
    depth: int = -1,
    first_columns: Sequence[str] = (),
    exclude_columns: Iterable[str] = (),
) -> Schema:
    """Flatten each parsed record to ``depth`` and resolve the union."""
    key_sets = (flatten_record(record, depth).keys() for record in records)
    return resolve_schema(key_sets, first_columns, exclude_columns)


__all__ = [
    "Schema",
    "column_sort_key",
    "count_dots",
    "resolve_schema",
    "scan_schema",
    "schema_from_columns",
]
