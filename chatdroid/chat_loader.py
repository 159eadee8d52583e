from __future__ import annotations

import asyncio
import logging

from chatdroid.content_extractor import extract_records
from chatdroid.drive_service import DriveService
from chatdroid.models import ContentRecord
from chatdroid.path_resolver import resolve_file_id
from chatdroid.sheets_service import SheetsService

logger = logging.getLogger(__name__)


def load_chat(
    drive: DriveService, sheets: SheetsService, path: str, file_name: str
) -> list[ContentRecord]:
    """Resolve the chat spreadsheet and return its records. Blocking."""
    file_id = resolve_file_id(drive, path, file_name)
    grid = sheets.read_grid(file_id)
    return extract_records(grid)


async def load_chat_async(
    drive: DriveService, sheets: SheetsService, path: str, file_name: str
) -> list[ContentRecord]:
    """load_chat on a worker thread so the event loop stays responsive."""
    logger.debug("Loading chat '%s' from '%s' in background", file_name, path)
    return await asyncio.to_thread(load_chat, drive, sheets, path, file_name)
