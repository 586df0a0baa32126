from __future__ import annotations

from ..errors import MalformedRowError
from ..models.row import SheetRow
from ..models.toggle import Toggle
from .groups import parse_groups

"""Toggle building: turn a matched row into a Toggle record."""

__all__ = [
    "GROUP_SEPARATOR",
    "build_toggle",
]

GROUP_SEPARATOR = ","


def build_toggle(row: SheetRow) -> Toggle:
    """Create the Toggle for a matched row.

    ``Key`` becomes the name, ``Value`` the value and the ``Group`` cell is
    split on commas and handed to the group parser. Segments whose name is
    empty after whitespace removal (e.g. a trailing comma) are left out.

    Raises:
        MalformedRowError: the row is missing, has no key, or its Group cell
            yields no named group
    """
    if row is None:
        raise MalformedRowError("No row passed to build_toggle()!")
    if not row.key.strip():
        raise MalformedRowError("Row has an empty Key")
    if not row.group.strip():
        raise MalformedRowError(f"Row '{row.key}' has an empty Group")

    groups = tuple(g for g in parse_groups(row.group.split(GROUP_SEPARATOR)) if g.name)
    if not groups:
        raise MalformedRowError(f"Row '{row.key}' has no named group in {row.group!r}")

    return Toggle(name=str(row.key), value=str(row.value), groups=groups)
