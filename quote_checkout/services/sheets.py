"""Google Sheets back-office log: appends one row per quote submission.

Two variants, picked once at start-up by :func:`build_sheet_writer`:

* :class:`DisabledSheetWriter` when the sheet id or service-account key pair is
  not configured; every append is a no-op.
* :class:`GoogleSheetWriter` holding service-account credentials and a Sheets
  v4 service object built once.

``googleapiclient`` transports (httplib2) are not thread-safe, so each append
runs on a worker thread with its own authorized ``httplib2.Http``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Sequence

import google_auth_httplib2
import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from quote_checkout.core.config import Settings
from quote_checkout.core.exceptions import SideRecordError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
ROW_WIDTH = 8


class DisabledSheetWriter:
    """Sheet logging is not configured; appends succeed without doing anything."""

    enabled = False

    async def append_row(self, row: Sequence[str]) -> None:
        logger.debug("Sheet logging disabled; skipping row append")


class GoogleSheetWriter:
    """Appends rows to a spreadsheet with a service account."""

    enabled = True

    def __init__(
        self,
        credentials: Any,
        spreadsheet_id: str,
        *,
        sheet_range: str = "Sheet1!A:H",
        timeout: float = 15.0,
        service: Any = None,
    ) -> None:
        self._credentials = credentials
        self.spreadsheet_id = spreadsheet_id
        self.sheet_range = sheet_range
        self.timeout = timeout
        self._service = service or build(
            "sheets", "v4", credentials=credentials, cache_discovery=False,
        )

    def _authorized_http(self) -> google_auth_httplib2.AuthorizedHttp:
        return google_auth_httplib2.AuthorizedHttp(
            self._credentials, http=httplib2.Http(timeout=self.timeout),
        )

    def _append_blocking(self, values: list[str]) -> dict:
        request = self._service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=self.sheet_range,
            valueInputOption="USER_ENTERED",
            insertDataOption="INSERT_ROWS",
            body={"values": [values]},
        )
        return request.execute(http=self._authorized_http())

    async def append_row(self, row: Sequence[str]) -> None:
        """Append one 8-column row. Raises ``SideRecordError`` on any failure; never retries."""
        values = [str(v) for v in row]
        if len(values) != ROW_WIDTH:
            raise SideRecordError(f"Expected {ROW_WIDTH} columns, got {len(values)}")

        try:
            result = await asyncio.to_thread(self._append_blocking, values)
        except HttpError as exc:
            raise SideRecordError(f"Sheets API error {exc.status_code}: {exc.reason}") from exc
        except (GoogleAuthError, httplib2.HttpLib2Error, OSError) as exc:
            raise SideRecordError(f"Sheets request failed: {exc}") from exc

        updated = (result or {}).get("updates", {}).get("updatedRange")
        logger.debug("Sheet row appended range=%s", updated)


SheetWriter = DisabledSheetWriter | GoogleSheetWriter


def build_sheet_writer(settings: Settings, *, service: Optional[Any] = None) -> SheetWriter:
    """Select the sheet writer variant from settings. Never raises on bad credentials."""
    if not settings.sheets_enabled:
        logger.info("Google Sheets logging disabled (GOOGLE_SHEET_ID / service account not set)")
        return DisabledSheetWriter()

    try:
        credentials = service_account.Credentials.from_service_account_info(
            settings.service_account_info, scopes=SCOPES,
        )
    except (ValueError, KeyError) as exc:
        logger.error("Invalid Google service account credentials, sheet logging disabled: %s", exc)
        return DisabledSheetWriter()

    logger.info("Google Sheets logging enabled sheet=%s", settings.google_sheet_id)
    return GoogleSheetWriter(
        credentials,
        settings.google_sheet_id,
        sheet_range=settings.google_sheet_range,
        timeout=settings.google_sheets_timeout,
        service=service,
    )
