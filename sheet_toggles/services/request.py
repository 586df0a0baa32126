from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import InvalidArgumentError

"""Request parsing for the ``sheet`` / ``toggles`` query parameters."""

__all__ = [
    "USAGE_HINT",
    "ToggleRequest",
    "parse_request",
]

USAGE_HINT = (
    'Must provide "sheet" and "toggles" as query parameters! Example: '
    "{URL}?sheet={GOOGLE_SHEETS_DOCUMENT_ID}&toggles={COMMA_SEPARATED_LIST_OF_KEYS}"
)


@dataclass(frozen=True)
class ToggleRequest:
    """Which sheet to read and which toggles to return from it."""
    sheet_id: str
    names: tuple[str, ...]


def parse_request(params: Mapping[str, str] | None) -> ToggleRequest:
    """Build a ToggleRequest from query parameters.

    ``toggles`` is split on commas exactly as sent; names are not trimmed
    because matching against the sheet is exact.

    Raises:
        InvalidArgumentError: params missing, or ``sheet``/``toggles`` empty
    """
    if params is None:
        raise InvalidArgumentError("Missing query parameters!")

    sheet = params.get("sheet")
    toggles = params.get("toggles")
    if not sheet or not toggles:
        raise InvalidArgumentError(USAGE_HINT)

    return ToggleRequest(sheet_id=sheet, names=tuple(toggles.split(",")))
