from __future__ import annotations

import logging

from chatdroid.drive_service import ROOT_FOLDER_ID, DriveService
from chatdroid.errors import NotFoundError
from chatdroid.models import FOLDER_MIME_TYPE

logger = logging.getLogger(__name__)


def split_path(path: str) -> list[str]:
    """'/dev//CHATDROID/' -> ['dev', 'CHATDROID']"""
    return [part for part in path.split("/") if part]


def resolve_file_id(drive: DriveService, path: str, file_name: str) -> str:
    """Walk ``path`` folder by folder from the Drive root and return the id of ``file_name``.

    Each level takes the first folder with an exact (case-sensitive) name
    match in the store's return order; there is no backtracking into
    same-named siblings. Folders are looked up one after another since each
    query needs the previous folder's id.

    The final lookup has no type filter, so a folder named ``file_name`` in
    the last folder can be returned instead of a file.

    Raises NotFoundError when a folder or the file is missing. Transport and
    authorization failures propagate unchanged as TransportError and
    AuthRequiredError.
    """
    folders = split_path(path)
    current = ROOT_FOLDER_ID
    logger.debug("Resolving '%s' in path %s", file_name, " -> ".join(folders) or "/")

    for folder_name in folders:
        matches = drive.query(folder_name, current, FOLDER_MIME_TYPE)
        if not matches:
            logger.error("Folder '%s' not found in %s", folder_name, current)
            raise NotFoundError(f"Folder '{folder_name}' not found in path '{path}'")
        current = matches[0].id
        logger.debug("Moving to folder %s (ID: %s)", folder_name, current)

    matches = drive.query(file_name, current)
    if not matches:
        logger.error("File '%s' not found in folder %s", file_name, current)
        raise NotFoundError(f"File '{file_name}' not found in path '{path}'")

    logger.info("Resolved '%s' to file ID %s", file_name, matches[0].id)
    return matches[0].id
