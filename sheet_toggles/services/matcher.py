from __future__ import annotations

from collections.abc import Sequence

from ..errors import InvalidArgumentError
from ..models.row import SheetRow

"""Row matching: find the row that defines a requested toggle."""

__all__ = [
    "match_row",
]


def match_row(name: str, rows: Sequence[SheetRow]) -> SheetRow | None:
    """Return the first row whose key equals ``name``.

    Comparison is exact and case sensitive. ``None`` means no row defines the
    toggle, which is a normal outcome and not an error.

    Raises:
        InvalidArgumentError: ``name`` is empty or ``rows`` is None
    """
    if not name or rows is None:
        raise InvalidArgumentError("No name and/or rows passed to match_row()!")

    for row in rows:
        if row.key == name:
            return row
    return None
