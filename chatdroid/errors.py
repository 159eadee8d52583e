from __future__ import annotations

import logging
from typing import Any

import httplib2
from google.auth import exceptions as auth_exceptions
from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)

_AUTH_REASON_MARKERS = ("insufficient", "permission", "scope")


class ChatDroidError(Exception):
    """Base class for errors surfaced to callers."""


class NotFoundError(ChatDroidError):
    """A folder segment or the target file does not exist."""


class TransportError(ChatDroidError):
    """Network or Google API service failure."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class AuthRequiredError(ChatDroidError):
    """The session lacks valid credentials or consent for the requested scopes."""


def _http_status(exc: HttpError) -> int:
    resp = getattr(exc, "resp", None)
    try:
        return int(getattr(resp, "status", 0))
    except (TypeError, ValueError):
        return 0


def _is_auth_failure(exc: HttpError, status: int) -> bool:
    if status == 401:
        return True
    if status != 403:
        return False
    text = f"{getattr(exc, 'reason', '')} {getattr(exc, 'error_details', '')}".lower()
    # 403 is also used for quota errors, which are transport-level
    if "ratelimit" in text.replace(" ", "") or "quota" in text:
        return False
    return any(marker in text for marker in _AUTH_REASON_MARKERS)


def translate_http_error(exc: HttpError, operation: str) -> ChatDroidError:
    """Map a googleapiclient HttpError onto the error taxonomy."""
    status = _http_status(exc)
    reason = getattr(exc, "reason", "") or str(exc)

    if _is_auth_failure(exc, status):
        return AuthRequiredError(f"{operation}: authorization required ({reason})")
    if status == 404:
        return NotFoundError(f"{operation}: not found ({reason})")
    return TransportError(f"{operation}: HTTP {status} {reason}", status=status or None)


def execute(request: Any, operation: str) -> dict[str, Any]:
    """Execute a googleapiclient request, raising ChatDroidError subclasses on failure."""
    try:
        return request.execute()
    except HttpError as e:
        error = translate_http_error(e, operation)
        logger.error("%s failed: %s", operation, error)
        raise error from e
    except auth_exceptions.RefreshError as e:
        logger.error("%s failed: token refresh rejected: %s", operation, e)
        raise AuthRequiredError(f"{operation}: token refresh rejected") from e
    except auth_exceptions.TransportError as e:
        # Network failure while refreshing the access token
        logger.error("%s failed: token refresh unreachable: %s", operation, e)
        raise TransportError(f"{operation}: token refresh failed: {e}") from e
    except (httplib2.HttpLib2Error, OSError) as e:
        logger.error("%s failed: %s", operation, e)
        raise TransportError(f"{operation}: {e}") from e
