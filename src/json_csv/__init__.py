"""json-csv: convert NDJSON records to a single CSV document."""

__version__ = "0.6.0"

from .convert import convert_csv_to_json, convert_json_to_csv, run
from .models import ConvertConfig

__all__ = [
    "ConvertConfig",
    "__version__",
    "convert_csv_to_json",
    "convert_json_to_csv",
    "run",
]
