"""
CSV batch import of plant / warehouse / city triples.

Each data row is validated and analyzed independently:

* all six coordinate columns must parse as finite floats inside the
  latitude / longitude ranges, otherwise the row is rejected with a
  message and processing continues with the next row;
* valid rows are passed to ``analyze_movement``.

Structural problems (undecodable bytes, missing header columns, input the
csv module refuses to read) raise ``CsvFormatError`` because no row can
be trusted.

Complexity: O(n) in the number of rows.
"""

from __future__ import annotations

import csv
import io
import math
from dataclasses import dataclass, field

from .entities import CsvFormatError, GeoPoint, MovementRow
from .enums import CSV_COLUMNS
from .movement import analyze_movement


@dataclass
class ImportResult:
    rows: list[MovementRow] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _parse_coordinate(raw: str | None, column: str, limit: float) -> float:
    if raw is None or not raw.strip():
        raise ValueError(f"{column} is missing")
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{column} must be a number") from None
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise ValueError(f"{column} must be between {-limit:g} and {limit:g}")
    return value


def parse_point(row: dict[str, str | None], prefix: str) -> GeoPoint:
    """Build a GeoPoint from the ``<prefix>_lat`` / ``<prefix>_lon`` columns."""
    lat = _parse_coordinate(row.get(f"{prefix}_lat"), f"{prefix}_lat", 90.0)
    lon = _parse_coordinate(row.get(f"{prefix}_lon"), f"{prefix}_lon", 180.0)
    return GeoPoint(lat=lat, lon=lon)


def decode_upload(content: bytes) -> str:
    try:
        # utf-8-sig drops the BOM spreadsheet exports like to prepend
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise CsvFormatError("CSV file must be UTF-8 encoded") from exc


def import_movements(text: str) -> ImportResult:
    """Analyze every row of *text*; rows are numbered from 1 after the header."""
    reader = csv.DictReader(io.StringIO(text), skipinitialspace=True)
    result = ImportResult()
    try:
        header = [name.strip() for name in (reader.fieldnames or [])]
        missing = [col for col in CSV_COLUMNS if col not in header]
        if missing:
            raise CsvFormatError(f"CSV is missing columns: {', '.join(missing)}")
        reader.fieldnames = header

        for row_number, row in enumerate(reader, start=1):
            try:
                plant = parse_point(row, "plant")
                warehouse = parse_point(row, "warehouse")
                city = parse_point(row, "city")
            except ValueError as exc:
                result.errors.append(f"Invalid data in row {row_number}: {exc}.")
                continue

            result.rows.append(
                MovementRow(
                    row_number=row_number,
                    plant=plant,
                    warehouse=warehouse,
                    city=city,
                    analysis=analyze_movement(plant, warehouse, city),
                )
            )
    except csv.Error as exc:
        # e.g. a field longer than csv.field_size_limit()
        raise CsvFormatError(f"Malformed CSV: {exc}") from exc
    return result
