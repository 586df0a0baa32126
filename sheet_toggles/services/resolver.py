from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from ..errors import InvalidArgumentError, MalformedRowError
from ..models.row import SheetRow
from ..models.toggle import Toggle, ToggleResult
from .builder import build_toggle
from .matcher import match_row

"""Toggle resolution orchestration.

For each requested name, in request order: match a row, build the toggle.
Unmatched names are skipped silently. A malformed row only drops its own
toggle, sibling toggles still resolve. Missing inputs fail the whole call.
"""

__all__ = [
    "resolve",
    "resolve_result",
]

logger = logging.getLogger(__name__)


def _now_millis() -> int:
    return int(time.time() * 1000)


def resolve(requested_names: Sequence[str], rows: Sequence[SheetRow]) -> list[Toggle]:
    """Resolve requested toggle names against a row set.

    Args:
        requested_names: Toggle names in the order the caller wants them back
        rows: Sheet rows in sheet order (may be empty)

    Returns:
        One Toggle per requested name that has a well formed matching row,
        ordered like ``requested_names``

    Raises:
        InvalidArgumentError: names list empty, rows missing, or a blank name
    """
    if not requested_names or rows is None:
        raise InvalidArgumentError("Missing toggle names or rows in resolve()!")
    if any(not name for name in requested_names):
        raise InvalidArgumentError("Empty toggle name passed to resolve()!")

    toggles: list[Toggle] = []
    for name in requested_names:
        row = match_row(name, rows)
        if row is None:
            logger.debug(f"toggle not found: {name}")
            continue
        try:
            toggles.append(build_toggle(row))
        except MalformedRowError as e:
            logger.warning(f"toggle skipped: {name}: {e}")
    return toggles


def resolve_result(
    requested_names: Sequence[str],
    rows: Sequence[SheetRow],
    clock: Callable[[], int] = _now_millis,
) -> ToggleResult:
    """Resolve and stamp the result with ``fetched_at`` (epoch milliseconds)."""
    toggles = resolve(requested_names, rows)
    return ToggleResult(toggles=tuple(toggles), fetched_at=clock())
