from __future__ import annotations

import logging
from typing import Any

from googleapiclient.discovery import build

from config import DEFAULT_SHEET_TITLE, SHEET_COLUMNS
from chatdroid.errors import execute
from chatdroid.transport import authorized_http, request_builder

logger = logging.getLogger(__name__)


def _quote_title(title: str) -> str:
    # A1 notation: sheet titles are single-quoted, embedded quotes doubled
    return "'" + title.replace("'", "''") + "'"


class SheetsService:
    """Google Sheets API wrapper for reading values."""

    def __init__(self, creds) -> None:
        self.service = build(
            "sheets",
            "v4",
            http=authorized_http(creds),
            requestBuilder=request_builder(creds),
            cache_discovery=False,
        )

    def first_sheet_title(self, spreadsheet_id: str) -> str:
        meta: dict[str, Any] = execute(
            self.service.spreadsheets().get(
                spreadsheetId=spreadsheet_id, fields="sheets.properties.title"
            ),
            "Spreadsheet metadata",
        )
        sheets = meta.get("sheets", []) or []
        if sheets:
            title = sheets[0].get("properties", {}).get("title")
            if title:
                return title
        return DEFAULT_SHEET_TITLE

    def read_grid(self, spreadsheet_id: str, columns: str = SHEET_COLUMNS) -> list[list[str]]:
        """Read the first sheet's values as rows of strings. Rows may be ragged."""
        title = self.first_sheet_title(spreadsheet_id)
        range_name = f"{_quote_title(title)}!{columns}"

        result: dict[str, Any] = execute(
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=spreadsheet_id, range=range_name),
            "Sheet values read",
        )

        values = result.get("values", []) or []
        grid = [["" if cell is None else str(cell) for cell in row] for row in values]
        logger.info("Read %d row(s) from %s", len(grid), range_name)
        return grid
