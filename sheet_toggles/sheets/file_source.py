from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import InvalidArgumentError, RowSourceError
from ..models.row import REQUIRED_COLUMNS, SheetRow
from .records import MAX_ROWS, MissingColumnsError, check_header, rows_from_records

"""Local file row source (.xlsx / .csv) read with pandas.

The first row is the header, data rows follow. Only the first worksheet of a
workbook is read, like the Google source does. Useful for running the service
against an exported sheet, and in tests.
"""

__all__ = [
    "SUPPORTED_SUFFIXES",
    "MissingColumnsError",
    "FileSheetSource",
    "read_sheet_frame",
]

SUPPORTED_SUFFIXES = (".xlsx", ".csv")


def read_sheet_frame(path: Path) -> pd.DataFrame:
    """Read the first worksheet (or the CSV) as text cells with a header row."""
    # dtype=str keeps "007" and "1.50" as written; keep_default_na=False keeps "NA" / "null" as text
    if path.suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    return pd.read_excel(path, sheet_name=0, dtype=str, keep_default_na=False)


def _frame_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    df = df.rename(columns=lambda c: str(c).strip())
    check_header(df.columns)
    records: list[dict[str, Any]] = []
    for _, raw in df.iterrows():
        record: dict[str, Any] = {}
        for col in REQUIRED_COLUMNS:
            val = raw[col]
            record[col] = None if pd.isna(val) else val
        records.append(record)
    return records


class FileSheetSource:
    """Row source backed by a local spreadsheet file."""

    def __init__(self, path: Path | str, limit: int = MAX_ROWS) -> None:
        self.path = Path(path)
        self.limit = limit

    def load_rows(self, sheet_id: str | None = None) -> list[SheetRow]:
        """Load up to ``limit`` rows. ``sheet_id`` is ignored, the file is the sheet.

        Raises:
            InvalidArgumentError: unsupported file type
            RowSourceError: file missing, unreadable, or header incomplete
        """
        if self.path.suffix not in SUPPORTED_SUFFIXES:
            raise InvalidArgumentError(f"unsupported sheet file: {self.path.name}")
        if not self.path.exists():
            raise RowSourceError(f"sheet file not found: {self.path}")
        try:
            df = read_sheet_frame(self.path)
        except (OSError, ValueError) as e:
            raise RowSourceError(f"failed to read sheet file {self.path.name}: {e}") from e
        return rows_from_records(_frame_records(df), limit=self.limit)
