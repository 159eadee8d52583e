"""Project configuration.

Place the OAuth client secret at CREDENTIALS_FILE before running.
"""

from __future__ import annotations

from pathlib import Path

# --- Google API OAuth ---
# credentials/credentials.json: OAuth client secret downloaded from Google Cloud Console
CREDENTIALS_FILE: Path = Path("credentials") / "credentials.json"

# credentials/token.json: Cached OAuth tokens generated after first login
TOKEN_FILE: Path = Path("credentials") / "token.json"

# --- Chat location ---
# Logical folder path in Drive, relative to My Drive root.
CHAT_FOLDER_PATH: str = "dev/CHATDROID"

# Name of the spreadsheet holding the chat inside CHAT_FOLDER_PATH.
CHAT_FILE_NAME: str = "Chat"

# --- Drive / Sheets settings ---
# Columns read from the first sheet tab.
SHEET_COLUMNS: str = "A:Z"

# Used when the spreadsheet metadata has no sheet titles.
DEFAULT_SHEET_TITLE: str = "Sheet1"

# Only the first match of each lookup is used
DRIVE_PAGE_SIZE: int = 10

# --- OAuth scopes ---
# Read-only: locate the file and read its values.
SCOPES: list[str] = [
    "https://www.googleapis.com/auth/drive.readonly",
    "https://www.googleapis.com/auth/spreadsheets.readonly",
]

# --- Logging ---
LOG_LEVEL: str = "INFO"
