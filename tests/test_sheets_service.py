"""
Unit tests for reading grids through the Sheets wrapper (mocked client).
"""

from unittest.mock import MagicMock, patch

import pytest

from chatdroid.sheets_service import SheetsService


@pytest.fixture
def api():
    with patch("chatdroid.sheets_service.build") as mock_build:
        service = MagicMock()
        mock_build.return_value = service
        yield service


def _set_title(api, meta):
    api.spreadsheets.return_value.get.return_value.execute.return_value = meta


def _set_values(api, result):
    api.spreadsheets.return_value.values.return_value.get.return_value.execute.return_value = result


class TestFirstSheetTitle:

    def test_uses_first_tab(self, api):
        _set_title(api, {"sheets": [{"properties": {"title": "Chat log"}}, {"properties": {"title": "Other"}}]})
        assert SheetsService(creds=object()).first_sheet_title("ss-1") == "Chat log"
        api.spreadsheets.return_value.get.assert_called_once_with(
            spreadsheetId="ss-1", fields="sheets.properties.title"
        )

    def test_falls_back_to_sheet1(self, api):
        _set_title(api, {})
        assert SheetsService(creds=object()).first_sheet_title("ss-1") == "Sheet1"


class TestReadGrid:

    def test_reads_first_tab_columns(self, api):
        _set_title(api, {"sheets": [{"properties": {"title": "Chat"}}]})
        _set_values(api, {"values": [["TIMESTAMP", "CONTENT"], ["10:00:01", "hello"], ["x"]]})

        grid = SheetsService(creds=object()).read_grid("ss-1")

        assert grid == [["TIMESTAMP", "CONTENT"], ["10:00:01", "hello"], ["x"]]
        api.spreadsheets.return_value.values.return_value.get.assert_called_once_with(
            spreadsheetId="ss-1", range="'Chat'!A:Z"
        )

    def test_title_with_quote_is_escaped(self, api):
        _set_title(api, {"sheets": [{"properties": {"title": "Bob's chat"}}]})
        _set_values(api, {"values": []})

        SheetsService(creds=object()).read_grid("ss-1")

        kwargs = api.spreadsheets.return_value.values.return_value.get.call_args.kwargs
        assert kwargs["range"] == "'Bob''s chat'!A:Z"

    def test_no_values_is_empty_grid(self, api):
        _set_title(api, {})
        _set_values(api, {"range": "'Sheet1'!A1:Z1000"})
        assert SheetsService(creds=object()).read_grid("ss-1") == []

    def test_non_string_cells_stringified(self, api):
        _set_title(api, {})
        _set_values(api, {"values": [["CONTENT", "N"], ["a", 3], [None, True]]})
        assert SheetsService(creds=object()).read_grid("ss-1") == [
            ["CONTENT", "N"], ["a", "3"], ["", "True"]
        ]
