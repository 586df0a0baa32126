from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import RowSourceError
from ..models.row import KEY_COLUMN, REQUIRED_COLUMNS, SheetRow

"""Raw record -> SheetRow conversion shared by every row source."""

__all__ = [
    "MAX_ROWS",
    "MissingColumnsError",
    "check_header",
    "rows_from_records",
]

# Only the first 100 data rows (after the header) are read from a sheet
MAX_ROWS = 100


class MissingColumnsError(RowSourceError):
    """Raised when Key/Value/Group columns are missing in the sheet header."""


def check_header(columns: Iterable[Any]) -> None:
    """Ensure the header row carries every required column.

    Raises:
        MissingColumnsError: Key, Value or Group is absent
    """
    present = {str(c).strip() for c in columns}
    missing = [c for c in REQUIRED_COLUMNS if c not in present]
    if missing:
        raise MissingColumnsError(f"sheet missing columns: {missing}")


def rows_from_records(records: Iterable[Mapping[str, Any]], limit: int = MAX_ROWS) -> list[SheetRow]:
    """Convert raw column -> cell records into SheetRows.

    The first ``limit`` records are considered, in order. Records without a
    Key cell are skipped (empty lines in the sheet).
    """
    rows: list[SheetRow] = []
    for index, record in enumerate(records):
        if index >= limit:
            break
        key = record.get(KEY_COLUMN)
        if key is None or str(key).strip() == "":
            continue
        rows.append(SheetRow.from_mapping(record))
    return rows
