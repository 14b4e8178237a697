"""JSON-to-CSV conversion driver.

Two passes over the input: the first flattens every record to discover the
column schema, the second encodes each record against it. Standard input
cannot be read twice, so the first pass copies it to a spool file in the
configured tmpdir and the second pass replays the spool. With explicit
columns there is no first pass.
"""

from __future__ import annotations

import sys
from contextlib import ExitStack
from typing import BinaryIO, Iterator, Optional

from .context import debug
from .core.flatten import JsonValue
from .core.schema import Schema, scan_schema, schema_from_columns
from .core.streaming import iter_json_lines, spooled_input
from .models.config import ConvertConfig
from .models.errors import IOFailure, UnsupportedConversionDirection
from .writers.csv_writer import write_csv


def open_input(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as e:
        raise IOFailure(path, e.strerror or str(e)) from e


def open_output(path: str) -> BinaryIO:
    try:
        return open(path, "wb")
    except OSError as e:
        raise IOFailure(path, e.strerror or str(e)) from e


def _values(stream: BinaryIO, spool: Optional[BinaryIO] = None) -> Iterator[JsonValue]:
    for _, value in iter_json_lines(stream, spool):
        yield value


def _scan(config: ConvertConfig, stream: BinaryIO, spool: Optional[BinaryIO] = None) -> Schema:
    debug(config, "Getting headers from JSON data.")
    try:
        return scan_schema(
            _values(stream, spool),
            config.flatten_depth,
            config.first_columns,
            config.exclude_columns,
        )
    except OSError as e:
        raise IOFailure(config.input_file, e.strerror or str(e)) from e


def convert_json_to_csv(
    config: ConvertConfig,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """Convert NDJSON input to CSV output as described by ``config``.

    Args:
        config: Validated run configuration
        stdin: Binary stream used when input_file is "-" (default: sys.stdin)
        stdout: Binary stream used when output_file is "-" (default: sys.stdout)

    Returns:
        Number of CSV data lines written

    Raises:
        InvalidJsonLine: Malformed input line (nothing is written if the
            scan pass hits it)
        IOFailure: A file or the scratch directory could not be used
    """
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    spool_name = None
    try:
        with ExitStack() as stack:
            # First pass -- build the schema
            if config.explicit_columns:
                schema = schema_from_columns(config.columns)
                if config.input_file == "-":
                    data = stdin
                else:
                    data = stack.enter_context(open_input(config.input_file))
            elif config.input_file == "-":
                spool = stack.enter_context(spooled_input(config.tmpdir))
                spool_name = spool.name
                debug(config, f"STDIN will be written to {spool_name}.")
                schema = _scan(config, stdin, spool)
                spool.flush()
                spool.seek(0)
                data = spool
            else:
                with open_input(config.input_file) as scan_fh:
                    schema = _scan(config, scan_fh)
                data = stack.enter_context(open_input(config.input_file))

            # Second pass -- write CSV
            if config.output_file == "-":
                output = stdout
            else:
                output = stack.enter_context(open_output(config.output_file))

            debug(config, "Writing CSV output.")
            try:
                count = write_csv(schema, _values(data), output, config)
                output.flush()
            except OSError as e:
                raise IOFailure(config.output_file, e.strerror or str(e)) from e
    finally:
        if spool_name:
            debug(config, f"Removed {spool_name}.")
    return count


def convert_csv_to_json(
    config: ConvertConfig,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    raise UnsupportedConversionDirection(config.source_encoding)


def run(
    config: ConvertConfig,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """Run the conversion selected by ``config.source_encoding``."""
    if config.source_encoding == "csv":
        return convert_csv_to_json(config, stdin, stdout)
    return convert_json_to_csv(config, stdin, stdout)


__all__ = ["convert_csv_to_json", "convert_json_to_csv", "open_input", "open_output", "run"]
