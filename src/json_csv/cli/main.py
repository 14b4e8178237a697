"""json-csv CLI entry point."""

import sys

import click

from .. import __version__
from ..convert import run
from ..models import ConvertConfig, JsonCsvError, parse_line_ending, split_columns

PROJECT_URL = "https://github.com/appcues/json-csv"


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("input_arg", metavar="INPUT_FILE", required=False)
@click.argument("output_arg", metavar="OUTPUT_FILE", required=False)
@click.option(
    "-i", "--input", "input_file", default="-", help="Input file (default '-', STDIN)"
)
@click.option(
    "-o",
    "--output",
    "output_file",
    default="-",
    help="Output file (default '-', STDOUT)",
)
@click.option(
    "-s",
    "--source-encoding",
    metavar="json|csv",
    default="json",
    help="Encoding of input file (default 'json')",
)
@click.option(
    "-d",
    "--depth",
    type=int,
    default=-1,
    help="Maximum depth of JSON-to-CSV conversion (default -1, unlimited)",
)
@click.option(
    "-c",
    "--columns",
    metavar="column1,column2,...",
    multiple=True,
    help="Don't scan JSON input for CSV columns; use these instead. "
    "Repeating this option adds to the list of columns",
)
@click.option(
    "-f",
    "--first-columns",
    metavar="column1,column2,...",
    multiple=True,
    help="Columns to appear first (leftmost) in CSV output",
)
@click.option(
    "-X",
    "--exclude-columns",
    metavar="column1,column2,...",
    multiple=True,
    help="Columns to exclude from CSV output",
)
@click.option(
    "-T", "--tmpdir", default=None, help="Temporary directory (default $TMPDIR or '/tmp')"
)
@click.option(
    "-D",
    "--csv-delimiter",
    metavar="delimiter",
    default=",",
    help="Delimiter for CSV fields (default ','; '\\t' for tab)",
)
@click.option(
    "-e",
    "--line-ending",
    metavar="crlf|cr|lf",
    default="crlf",
    help="Line endings for output file (default 'crlf')",
)
@click.option("--debug", is_flag=True, help="Turn debugging messages on")
@click.version_option(
    __version__,
    "--version",
    message=f"json-csv version %(version)s\n{PROJECT_URL}",
)
def cli(
    input_arg,
    output_arg,
    input_file,
    output_file,
    source_encoding,
    depth,
    columns,
    first_columns,
    exclude_columns,
    tmpdir,
    csv_delimiter,
    line_ending,
    debug,
):
    """Converts JSON to CSV, and vice versa.

    Reads one JSON value per line and writes a CSV document whose columns
    are the dotted paths found across all records.

    Examples:
        json-csv data.ndjson data.csv
        cat data.ndjson | json-csv -f id,name -X secret > data.csv
        json-csv -d 1 -e lf -D '\\t' data.ndjson

    Note:
        Use '--' before file names that start with '-'.
    """
    try:
        options = dict(
            input_file=input_arg or input_file,
            output_file=output_arg or output_file,
            source_encoding=source_encoding,
            debug=debug,
            depth=depth,
            line_ending=parse_line_ending(line_ending),
            csv_delimiter=csv_delimiter,
            columns=split_columns(columns),
            first_columns=split_columns(first_columns),
            exclude_columns=split_columns(exclude_columns),
        )
        if tmpdir:
            options["tmpdir"] = tmpdir
        config = ConvertConfig.build(**options)

        run(
            config,
            stdin=click.get_binary_stream("stdin"),
            stdout=click.get_binary_stream("stdout"),
        )
    except JsonCsvError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
