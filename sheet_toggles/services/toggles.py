from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from ..errors import InvalidArgumentError, ToggleError
from ..models.row import SheetRow
from .request import ToggleRequest
from .resolver import resolve_result

"""Service facade: load rows for a request, resolve, map to a response.

This is the single place where errors become a status code. The HTTP shell
and the CLI both go through ``get_toggles``.
"""

__all__ = [
    "STATUS_OK",
    "STATUS_ERROR",
    "RowSource",
    "ToggleResponse",
    "error_response",
    "get_toggles",
]

STATUS_OK = 200
STATUS_ERROR = 500

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    def load_rows(self, sheet_id: str | None) -> list[SheetRow]: ...


@dataclass(frozen=True)
class ToggleResponse:
    status_code: int
    body: dict[str, Any] | str

    @property
    def ok(self) -> bool:
        return self.status_code == STATUS_OK


def error_response(error: ToggleError) -> ToggleResponse:
    logger.error(error.describe())
    return ToggleResponse(status_code=STATUS_ERROR, body=error.describe())


def get_toggles(request: ToggleRequest, source: RowSource) -> ToggleResponse:
    """Load the sheet named by ``request`` and resolve its toggles.

    Returns:
        200 with the result dict on success, 500 with the error description
        for any ToggleError (bad input, unreadable sheet, bad config)
    """
    try:
        if not request.sheet_id or not request.names:
            raise InvalidArgumentError("Missing required input in get_toggles()!")
        rows = source.load_rows(request.sheet_id)
        logger.debug(f"loaded {len(rows)} rows from sheet {request.sheet_id}")
        result = resolve_result(request.names, rows)
    except ToggleError as e:
        return error_response(e)

    logger.info(f"resolved {len(result.toggles)}/{len(request.names)} toggles from sheet {request.sheet_id}")
    return ToggleResponse(status_code=STATUS_OK, body=result.to_dict())
