from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

"""SheetRow model.

One data row of the toggle sheet, reduced to the three columns the resolver
reads. Any other columns in the sheet are ignored.
"""

__all__ = [
    "KEY_COLUMN",
    "VALUE_COLUMN",
    "GROUP_COLUMN",
    "REQUIRED_COLUMNS",
    "SheetRow",
]

KEY_COLUMN = "Key"
VALUE_COLUMN = "Value"
GROUP_COLUMN = "Group"
REQUIRED_COLUMNS = (KEY_COLUMN, VALUE_COLUMN, GROUP_COLUMN)


def _cell_to_str(value: Any) -> str:
    if value is None:
        return ""
    # Spreadsheets hand back whole numbers as floats (1.0); keep "1" like the sheet shows it
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@dataclass(frozen=True)
class SheetRow:
    """A single sheet row (insertion order = sheet order).

    ``key`` is the toggle name. Uniqueness is not enforced by the sheet, the
    first row with a given key wins.
    """
    key: str  # Key column
    value: str  # Value column, coerced to str on read
    group: str  # Group column, comma separated "name=percentage" segments

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> SheetRow:
        """Build a row from a column name -> cell mapping.

        Missing or empty ``Value``/``Group`` cells become ``""``. The key is
        kept exactly as written (no trimming) since matching is exact.
        """
        return cls(
            key=_cell_to_str(raw.get(KEY_COLUMN)),
            value=_cell_to_str(raw.get(VALUE_COLUMN)),
            group=_cell_to_str(raw.get(GROUP_COLUMN)),
        )
