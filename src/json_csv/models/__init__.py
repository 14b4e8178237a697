"""Configuration and error models for json-csv."""

from .config import (
    LINE_ENDINGS,
    SOURCE_ENCODINGS,
    ConvertConfig,
    default_tmpdir,
    parse_line_ending,
    split_columns,
)
from .errors import (
    InvalidConfiguration,
    InvalidJsonLine,
    IOFailure,
    JsonCsvError,
    UnsupportedConversionDirection,
)

__all__ = [
    "ConvertConfig",
    "IOFailure",
    "InvalidConfiguration",
    "InvalidJsonLine",
    "JsonCsvError",
    "LINE_ENDINGS",
    "SOURCE_ENCODINGS",
    "UnsupportedConversionDirection",
    "default_tmpdir",
    "parse_line_ending",
    "split_columns",
]
