"""Dataset acquisition: synthetic generators and CSV upload parsing."""

from .generator import (
    DATASET_HINTS,
    describe_dataset,
    generate_dataset,
    make_blobs,
    make_circles,
    make_moons,
)
from .csv_ingest import CSVParseError, decode_csv_bytes, parse_csv, read_csv_text

__all__ = [
    "DATASET_HINTS",
    "describe_dataset",
    "generate_dataset",
    "make_blobs",
    "make_circles",
    "make_moons",
    "CSVParseError",
    "parse_csv",
    "decode_csv_bytes",
    "read_csv_text",
]
