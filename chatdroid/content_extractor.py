from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from chatdroid.models import ContentRecord

logger = logging.getLogger(__name__)

CONTENT_COLUMN = "CONTENT"
TIMESTAMP_COLUMN = "TIMESTAMP"


@dataclass(frozen=True)
class ColumnIndex:
    content: int | None
    timestamp: int | None


def _find_column(header_row: Sequence[str | None], name: str) -> int | None:
    for i, cell in enumerate(header_row):
        if cell is not None and str(cell).upper() == name:
            return i
    return None


def _cell(row: Sequence[str | None], index: int | None) -> str | None:
    if index is None or index >= len(row):
        return None
    value = row[index]
    return None if value is None else str(value)


def build_column_index(header_row: Sequence[str | None]) -> ColumnIndex:
    """Locate CONTENT and TIMESTAMP by case-insensitive header text."""
    return ColumnIndex(
        content=_find_column(header_row, CONTENT_COLUMN),
        timestamp=_find_column(header_row, TIMESTAMP_COLUMN),
    )


def extract_records(grid: Sequence[Sequence[str | None]]) -> list[ContentRecord]:
    """Project a header-driven grid onto (content, timestamp) records.

    Row 0 is the header and never data. Rows without content are dropped,
    the rest keep their order. Malformed grids give fewer records, never an
    error.
    """
    if len(grid) < 2:
        return []

    columns = build_column_index(grid[0])
    logger.debug(
        "Column indices - CONTENT: %s, TIMESTAMP: %s", columns.content, columns.timestamp
    )
    if columns.content is None:
        logger.warning("No %s column in header row", CONTENT_COLUMN)
        return []

    records: list[ContentRecord] = []
    for row in grid[1:]:
        content = _cell(row, columns.content)
        if not content:
            continue
        records.append(ContentRecord(content=content, timestamp=_cell(row, columns.timestamp)))

    logger.info("Extracted %d record(s) from %d data row(s)", len(records), len(grid) - 1)
    return records
