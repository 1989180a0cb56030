"""CSV ingestion for user-uploaded point datasets."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Union

from ..models.point import Point

logger = logging.getLogger(__name__)


class CSVParseError(ValueError):
    """Raised when an uploaded CSV cannot be turned into 2-D points."""


def _parse_field(field: str) -> Optional[float]:
    field = field.strip()
    # float() also accepts digit separators such as "1_000"
    if "_" in field:
        return None
    try:
        value = float(field)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def _parse_row(row: str, drop_last_column: bool) -> Optional[List[float]]:
    values = [_parse_field(v) for v in row.split(",")]
    if drop_last_column:
        values = values[:-1]
    # Keep only rows where all remaining values are numbers
    if any(v is None for v in values):
        return None
    return values  # type: ignore[return-value]


def parse_csv(contents: str, drop_last_column: bool = False) -> List[Point]:
    """Parse CSV text into points.

    The first non-blank line is a header and is discarded without checking
    column names. Rows with any non-numeric field are skipped silently. With
    ``drop_last_column`` the trailing field (typically a class label) is
    removed from every row before validation, whether or not it is numeric.

    Only the first two features become x and y; wider data is not reduced.

    Raises:
        CSVParseError: no data rows, no numeric rows, or fewer than two
            features per row.
    """
    rows = [row for row in contents.split("\n") if row.strip() != ""]
    if len(rows) < 2:
        raise CSVParseError("CSV file must contain a header and at least one data row.")
    rows = rows[1:]

    numeric_rows = []
    for row in rows:
        values = _parse_row(row, drop_last_column)
        if values is not None:
            numeric_rows.append(values)

    if not numeric_rows:
        raise CSVParseError("No valid numeric data rows found in the CSV file.")

    n_features = len(numeric_rows[0])
    if n_features < 2:
        raise CSVParseError(
            f"The processed data has only {n_features} feature(s). "
            "At least two are required for 2D visualization."
        )

    if n_features > 2:
        logger.warning(
            "Dataset has %d features. Simulating dimensionality reduction "
            "(like PCA or t-SNE) by using the first two features for visualization.",
            n_features,
        )

    # Ragged rows narrower than two fields cannot be plotted
    return [Point(x=row[0], y=row[1]) for row in numeric_rows if len(row) >= 2]


def decode_csv_bytes(data: bytes) -> str:
    """Decode uploaded CSV bytes (UTF-8, optional BOM) to text."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CSVParseError(f"CSV file is not valid UTF-8 text: {e}") from e


def read_csv_text(path: Union[str, Path]) -> str:
    """Read a CSV file from disk as text."""
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")
    return decode_csv_bytes(csv_path.read_bytes())
