from __future__ import annotations

import logging
from typing import Any

from googleapiclient.discovery import build

from config import DRIVE_PAGE_SIZE
from chatdroid.errors import execute
from chatdroid.models import RemoteFile
from chatdroid.transport import authorized_http, request_builder

logger = logging.getLogger(__name__)

ROOT_FOLDER_ID = "root"
_FILE_FIELDS = "files(id, name, mimeType, parents)"


def _quote(value: str) -> str:
    """Quote a literal for a Drive ``q`` expression."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def build_query(name: str, parent: str, mime_type: str | None = None) -> str:
    """Drive search expression matching ``name`` exactly inside ``parent``."""
    clauses = [
        f"name = {_quote(name)}",
        f"{_quote(parent)} in parents",
        "trashed = false",
    ]
    if mime_type:
        clauses.append(f"mimeType = {_quote(mime_type)}")
    return " and ".join(clauses)


class DriveService:
    """Google Drive API wrapper: read-only name/parent lookups."""

    def __init__(self, creds) -> None:
        # cache_discovery=False avoids writing discovery docs to disk
        self.service = build(
            "drive",
            "v3",
            http=authorized_http(creds),
            requestBuilder=request_builder(creds),
            cache_discovery=False,
        )

    def _list(self, q: str, operation: str) -> list[RemoteFile]:
        resp: dict[str, Any] = execute(
            self.service.files().list(q=q, pageSize=DRIVE_PAGE_SIZE, fields=_FILE_FIELDS),
            operation,
        )
        return [RemoteFile.from_api(item) for item in resp.get("files", []) if "id" in item]

    def query(self, name: str, parent: str, mime_type: str | None = None) -> list[RemoteFile]:
        """Return items named ``name`` directly under ``parent``, in Drive's order.

        Never returns None; an empty list means nothing matched.
        """
        q = build_query(name, parent, mime_type)
        logger.debug("Drive query: %s", q)
        files = self._list(q, f"Drive query for '{name}'")
        logger.debug("Found %d item(s) named '%s' in %s", len(files), name, parent)
        return files

    def list_folder(self, parent: str = ROOT_FOLDER_ID) -> list[RemoteFile]:
        """Items directly inside ``parent`` (first page only)."""
        q = f"{_quote(parent)} in parents and trashed = false"
        return self._list(q, f"Drive listing of {parent}")
