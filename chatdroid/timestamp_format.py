from __future__ import annotations

import re

_TIME_RE = re.compile(r"\d{1,2}:\d{2}:\d{2}", re.ASCII)
_SHORT_LEN = 8


def short_form(timestamp: str | None) -> str | None:
    """Best-effort "HH:MM:SS" from a timestamp string; None means hide it.

    Handles e.g. "2024-01-01T14:30:25.123" and "13/09/2025 10:20:10".
    Unknown formats fall back to the first 8 characters.
    """
    if not timestamp:
        return None

    match = _TIME_RE.search(timestamp)
    if match:
        return match.group(0)

    if "T" in timestamp:
        # ISO-like without seconds, e.g. "2024-01-01T14:30Z"
        time_part = timestamp.split("T", 1)[1].split(".", 1)[0]
        return time_part[:_SHORT_LEN]

    if " " in timestamp:
        parts = timestamp.split()
        if len(parts) >= 2:
            return parts[1]

    return timestamp[:_SHORT_LEN]


def full_form(timestamp: str) -> str:
    return timestamp


def display_form(timestamp: str | None, expanded: bool = False) -> str | None:
    """Text for a timestamp label in its collapsed or expanded state."""
    if not timestamp:
        return None
    return full_form(timestamp) if expanded else short_form(timestamp)
