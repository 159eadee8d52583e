from __future__ import annotations

import logging

from google.auth import exceptions as auth_exceptions
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from config import CREDENTIALS_FILE, SCOPES, TOKEN_FILE
from chatdroid.errors import TransportError

logger = logging.getLogger(__name__)


def _run_consent_flow() -> Credentials:
    if not CREDENTIALS_FILE.exists():
        raise FileNotFoundError(
            f"Missing OAuth client file: {CREDENTIALS_FILE}. "
            "Download it from Google Cloud Console and place it there."
        )

    logger.info("Starting OAuth desktop flow (browser login)...")
    flow = InstalledAppFlow.from_client_secrets_file(str(CREDENTIALS_FILE), SCOPES)
    return flow.run_local_server(port=0)


def load_credentials(force_consent: bool = False) -> Credentials:
    """Return OAuth user credentials for the read-only Drive/Sheets scopes.

    The cached token is reused and refreshed when possible. With
    ``force_consent`` the cache is ignored and the browser flow runs again,
    which is how callers recover from AuthRequiredError.
    """
    creds: Credentials | None = None

    if TOKEN_FILE.exists() and not force_consent:
        creds = Credentials.from_authorized_user_file(str(TOKEN_FILE), SCOPES)

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        logger.info("Refreshing OAuth token...")
        try:
            creds.refresh(Request())
        except auth_exceptions.RefreshError as e:
            # Revoked or expired refresh token: ask for consent again
            logger.warning("Token refresh rejected (%s), re-running consent", e)
            creds = _run_consent_flow()
        except auth_exceptions.TransportError as e:
            logger.error("Token refresh failed, token endpoint unreachable: %s", e)
            raise TransportError(f"Token refresh failed: {e}") from e
    else:
        creds = _run_consent_flow()

    TOKEN_FILE.parent.mkdir(parents=True, exist_ok=True)
    TOKEN_FILE.write_text(creds.to_json(), encoding="utf-8")
    logger.info("Saved OAuth token to %s", TOKEN_FILE)
    return creds
