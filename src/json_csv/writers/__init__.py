"""Writers for converting NDJSON to delimited output."""

from .csv_writer import csv_armor, encode_header, encode_record, render_value, write_csv

__all__ = ["csv_armor", "encode_header", "encode_record", "render_value", "write_csv"]
