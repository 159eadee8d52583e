from __future__ import annotations

import logging

from config import CHAT_FILE_NAME, CHAT_FOLDER_PATH, LOG_LEVEL
from chatdroid.auth import load_credentials
from chatdroid.chat_loader import load_chat
from chatdroid.drive_service import DriveService
from chatdroid.errors import AuthRequiredError, NotFoundError, TransportError
from chatdroid.models import ChatMessage, ContentRecord
from chatdroid.sheets_service import SheetsService
from chatdroid.timestamp_format import display_form

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_TRANSPORT = 2
EXIT_AUTH = 3


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def format_message(message: ChatMessage, expanded: bool = False) -> str:
    time_text = display_form(message.timestamp, expanded)
    prefix = "> " if message.is_from_user else ""
    if time_text is None:
        return f"{prefix}{message.text}"
    return f"{prefix}[{time_text}] {message.text}"


def _fetch(force_consent: bool) -> list[ContentRecord]:
    logger = logging.getLogger("chatdroid")

    creds = load_credentials(force_consent=force_consent)
    drive = DriveService(creds)
    sheets = SheetsService(creds)

    if logger.isEnabledFor(logging.DEBUG):
        for item in drive.list_folder():
            logger.debug("Root item: %s (%s) ID: %s", item.name, item.mime_type, item.id)

    logger.info("Searching for file '%s' in path: /%s/", CHAT_FILE_NAME, CHAT_FOLDER_PATH)
    return load_chat(drive, sheets, CHAT_FOLDER_PATH, CHAT_FILE_NAME)


def run() -> int:
    _setup_logging()
    logger = logging.getLogger("chatdroid")

    try:
        try:
            records = _fetch(force_consent=False)
        except AuthRequiredError:
            logger.info("Additional permissions needed, requesting consent again")
            records = _fetch(force_consent=True)
    except NotFoundError as e:
        logger.error("%s", e)
        print(f"Chat file not found in /{CHAT_FOLDER_PATH}/ folder")
        return EXIT_NOT_FOUND
    except AuthRequiredError as e:
        logger.error("Permissions denied: %s", e)
        print("Permissions denied. Cannot access Google Drive.")
        return EXIT_AUTH
    except TransportError as e:
        logger.error("%s", e)
        print(f"Connection problem while loading chat data: {e}")
        return EXIT_TRANSPORT

    if not records:
        print("No content found in CONTENT column")
        return EXIT_OK

    for record in records:
        print(format_message(ChatMessage.from_record(record)))
    logger.info("Loaded %d message(s) from Google Sheets", len(records))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(run())
