"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from json_csv.cli import cli
from json_csv.models import ConvertConfig


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["in.ndjson", "out.csv"])
        result = invoke(["-e", "lf"], input_data=b'{"a":1}\\n')

    Output keeps its CRLF line endings in ``result.stdout_bytes``;
    ``result.output`` normalises them to ``\\n``.
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def scratch_config(tmp_path):
    """Factory for configs whose spool directory is an empty tmp dir."""
    spool_dir = tmp_path / "spool"
    spool_dir.mkdir()

    def _config(**options):
        options.setdefault("tmpdir", str(spool_dir))
        return ConvertConfig(**options)

    _config.spool_dir = spool_dir
    return _config


@pytest.fixture
def sample_ndjson():
    """Provide sample NDJSON data as bytes."""
    return b'{"x":1,"y":{"z":2}}\n{"x":3}\n'


@pytest.fixture
def people_ndjson(tmp_path):
    """NDJSON file with heterogeneous, nested records."""
    path = tmp_path / "people.ndjson"
    path.write_text(
        '{"id":1,"name":"Alice","address":{"city":"Paris","zip":"75001"},"tags":["a","b"]}\n'
        '{"id":2,"name":"Bob","email":"bob@example.com"}\n'
        '{"id":3,"name":"Carol, Jr.","address":{"city":"Lyon"},"active":true}\n'
    )
    return path
