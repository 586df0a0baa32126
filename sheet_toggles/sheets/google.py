from __future__ import annotations

from typing import TYPE_CHECKING

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials

from ..errors import InvalidArgumentError, RowSourceError
from ..models.row import SheetRow
from .records import MAX_ROWS, check_header, rows_from_records

if TYPE_CHECKING:
    from ..config.loader import ServiceAccountConfig

"""Google Sheets row source.

Authenticates with a service account, opens the document by key and reads the
first worksheet. The first row is the header (Key / Value / Group).
"""

__all__ = [
    "SCOPES",
    "TOKEN_URI",
    "GoogleSheetSource",
]

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


class GoogleSheetSource:
    """Row source backed by a Google Sheets document."""

    def __init__(self, account: ServiceAccountConfig, limit: int = MAX_ROWS) -> None:
        self.account = account
        self.limit = limit

    def _client(self) -> gspread.Client:
        info = {
            "type": "service_account",
            "client_email": self.account.client_email,
            "private_key": self.account.private_key,
            "token_uri": TOKEN_URI,
        }
        creds = Credentials.from_service_account_info(info, scopes=SCOPES)
        return gspread.authorize(creds)

    def load_rows(self, sheet_id: str | None) -> list[SheetRow]:
        """Load up to ``limit`` rows from the first worksheet of ``sheet_id``.

        Raises:
            InvalidArgumentError: no sheet id
            MissingColumnsError: header lacks Key, Value or Group
            RowSourceError: authentication, network or Sheets API failure
        """
        if not sheet_id:
            raise InvalidArgumentError("No sheet_id passed to load_rows()!")
        try:
            client = self._client()
            worksheet = client.open_by_key(sheet_id).get_worksheet(0)
            header = worksheet.row_values(1)
            # cells stay text: "007" or "1.0" must not be numericised
            records = worksheet.get_all_records(numericise_ignore=["all"])
        except (
            gspread.exceptions.GSpreadException,
            GoogleAuthError,
            requests.exceptions.RequestException,
            ValueError,
        ) as e:
            raise RowSourceError(f"failed to load sheet {sheet_id}: {e}") from e
        check_header(header)
        return rows_from_records(records, limit=self.limit)
