from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"


@dataclass(frozen=True)
class RemoteFile:
    """A Drive item as returned by files.list (folders included)."""

    id: str
    name: str
    mime_type: str = ""
    parents: list[str] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "RemoteFile":
        return cls(
            id=item.get("id", ""),
            name=item.get("name", ""),
            mime_type=item.get("mimeType", ""),
            parents=list(item.get("parents", []) or []),
        )


@dataclass(frozen=True)
class ContentRecord:
    content: str
    # Verbatim TIMESTAMP cell, None when the column or cell is missing
    timestamp: str | None = None


@dataclass(frozen=True)
class ChatMessage:
    text: str
    is_from_user: bool
    timestamp: str | None = None

    @classmethod
    def from_record(cls, record: ContentRecord) -> "ChatMessage":
        return cls(text=record.content, is_from_user=False, timestamp=record.timestamp)
