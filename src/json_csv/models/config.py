"""Run configuration for a single conversion."""

from __future__ import annotations

import os
from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfiguration

LINE_ENDINGS = {"crlf": "\r\n", "cr": "\r", "lf": "\n"}
SOURCE_ENCODINGS = ("json", "csv")


def default_tmpdir() -> str:
    """Scratch directory for spooled stdin ($TMPDIR or /tmp)."""
    return os.environ.get("TMPDIR") or "/tmp"


def parse_line_ending(token: str) -> str:
    """Map a line-ending name (crlf, cr, lf) to its terminator."""
    ending = LINE_ENDINGS.get(token.lower())
    if ending is None:
        raise InvalidConfiguration(
            f"Invalid line ending '{token}'.  Valid choices: "
            + " ".join(LINE_ENDINGS)
        )
    return ending


def split_columns(values: Iterable[str]) -> Tuple[str, ...]:
    """Flatten repeated comma-separated option values into one list.

    Example:
        >>> split_columns(["a,b", "c"])
        ('a', 'b', 'c')
    """
    columns = []
    for value in values:
        columns.extend(c for c in value.split(",") if c)
    return tuple(columns)


class ConvertConfig(BaseModel):
    """Immutable options for one json-csv invocation."""

    model_config = ConfigDict(frozen=True)

    input_file: str = "-"
    output_file: str = "-"
    source_encoding: str = "json"
    tmpdir: str = Field(default_factory=default_tmpdir)
    debug: bool = False
    depth: int = -1
    line_ending: str = "\r\n"
    csv_delimiter: str = ","
    columns: Tuple[str, ...] = ()
    first_columns: Tuple[str, ...] = ()
    exclude_columns: Tuple[str, ...] = ()

    @field_validator("source_encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        v = v.lower()
        if v not in SOURCE_ENCODINGS:
            raise ValueError(f"no such source encoding '{v}'")
        return v

    @field_validator("line_ending")
    @classmethod
    def known_line_ending(cls, v: str) -> str:
        if v not in LINE_ENDINGS.values():
            # Accept the names as well as the terminators themselves
            if v.lower() in LINE_ENDINGS:
                return LINE_ENDINGS[v.lower()]
            raise ValueError(
                f"Invalid line ending {v!r}.  Valid choices: "
                + " ".join(LINE_ENDINGS)
            )
        return v

    @field_validator("csv_delimiter")
    @classmethod
    def usable_delimiter(cls, v: str) -> str:
        v = v.replace("\\t", "\t")
        if not v:
            raise ValueError("CSV delimiter must not be empty")
        if '"' in v or "\n" in v or "\r" in v:
            raise ValueError(f"Unusable CSV delimiter {v!r}")
        return v

    @property
    def flatten_depth(self) -> int:
        """Depth handed to the flattener.

        A positive depth counts levels of nesting, so it is bumped by one to
        leave room for the scalar at the bottom; -1 stays unlimited.
        """
        return self.depth + 1 if self.depth > 0 else self.depth

    @property
    def explicit_columns(self) -> bool:
        return len(self.columns) > 0

    @classmethod
    def build(cls, **options) -> "ConvertConfig":
        """Validate options, raising InvalidConfiguration on failure."""
        try:
            return cls(**options)
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise InvalidConfiguration(messages) from e


__all__ = [
    "ConvertConfig",
    "LINE_ENDINGS",
    "SOURCE_ENCODINGS",
    "default_tmpdir",
    "parse_line_ending",
    "split_columns",
]
