"""NDJSON stream utilities.

- iter_json_lines: parse an NDJSON byte stream line by line
- spooled_input: scratch file for replaying a non-seekable stream
"""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Tuple

from ..models.errors import InvalidJsonLine, IOFailure
from .flatten import JsonValue

SPOOL_PREFIX = "json-csv-"
SPOOL_SUFFIX = ".tmp"


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


def iter_json_lines(
    stream: BinaryIO, spool: Optional[BinaryIO] = None
) -> Iterator[Tuple[int, JsonValue]]:
    """Yield (line_number, value) for every line of ``stream``.

    Args:
        stream: Binary NDJSON input
        spool: If given, each raw line is copied to it before parsing

    Raises:
        InvalidJsonLine: On the first line that is not valid JSON,
            including blank lines and NaN/Infinity
    """
    for line_number, line in enumerate(stream, start=1):
        if spool is not None:
            spool.write(line)
        try:
            value = json.loads(line, parse_constant=_reject_constant)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise InvalidJsonLine(line_number, str(e)) from e
        yield line_number, value


@contextmanager
def spooled_input(tmpdir: str) -> Iterator[BinaryIO]:
    """Scratch file in ``tmpdir`` that is removed on every exit path.

    Yields a named file opened for binary read/write; ``spool.name`` is its
    path. Callers write the first pass into it, then ``seek(0)`` and read
    it back.
    """
    try:
        spool = tempfile.NamedTemporaryFile(
            mode="w+b",
            prefix=SPOOL_PREFIX,
            suffix=SPOOL_SUFFIX,
            dir=tmpdir,
            delete=False,
        )
    except OSError as e:
        raise IOFailure(tmpdir, e.strerror or str(e)) from e

    try:
        with spool:
            yield spool
    finally:
        try:
            os.unlink(spool.name)
        except FileNotFoundError:
            pass


__all__ = ["SPOOL_PREFIX", "SPOOL_SUFFIX", "iter_json_lines", "spooled_input"]
