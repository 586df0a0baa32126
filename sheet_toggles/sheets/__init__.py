"""Row sources: collaborators that load toggle rows from a sheet."""

from .file_source import FileSheetSource, MissingColumnsError
from .google import GoogleSheetSource
from .records import MAX_ROWS, check_header, rows_from_records

__all__ = [
    "MAX_ROWS",
    "FileSheetSource",
    "GoogleSheetSource",
    "MissingColumnsError",
    "check_header",
    "rows_from_records",
]
