import asyncio
from unittest.mock import MagicMock

import pytest

from chatdroid.chat_loader import load_chat, load_chat_async
from chatdroid.errors import NotFoundError
from chatdroid.models import FOLDER_MIME_TYPE, ContentRecord, RemoteFile


def _drive(folders_found=True):
    drive = MagicMock()

    def query(name, parent, mime_type=None):
        if mime_type == FOLDER_MIME_TYPE:
            return [RemoteFile(id=f"f-{name}", name=name, mime_type=mime_type)] if folders_found else []
        return [RemoteFile(id="ss-chat", name=name)]

    drive.query.side_effect = query
    return drive


def _sheets():
    sheets = MagicMock()
    sheets.read_grid.return_value = [
        ["CONTENT", "TIMESTAMP"],
        ["hi", "13/09/2025 10:20:10"],
        ["", "13/09/2025 10:20:11"],
        ["bye"],
    ]
    return sheets


class TestLoadChat:

    def test_resolves_reads_and_extracts(self):
        sheets = _sheets()

        records = load_chat(_drive(), sheets, "dev/CHATDROID", "Chat")

        sheets.read_grid.assert_called_once_with("ss-chat")
        assert records == [
            ContentRecord(content="hi", timestamp="13/09/2025 10:20:10"),
            ContentRecord(content="bye", timestamp=None),
        ]

    def test_missing_folder_skips_sheet_read(self):
        sheets = _sheets()
        with pytest.raises(NotFoundError):
            load_chat(_drive(folders_found=False), sheets, "dev/CHATDROID", "Chat")
        sheets.read_grid.assert_not_called()

    def test_async_variant_returns_same_records(self):
        records = asyncio.run(load_chat_async(_drive(), _sheets(), "dev/CHATDROID", "Chat"))
        assert [r.content for r in records] == ["hi", "bye"]

    def test_concurrent_async_loads_are_independent(self):
        drive, sheets = _drive(), _sheets()

        async def load_twice():
            return await asyncio.gather(
                load_chat_async(drive, sheets, "dev/CHATDROID", "Chat"),
                load_chat_async(drive, sheets, "/dev/CHATDROID/", "Chat"),
            )

        first, second = asyncio.run(load_twice())

        assert first == second
        assert [r.content for r in first] == ["hi", "bye"]
        assert sheets.read_grid.call_count == 2
