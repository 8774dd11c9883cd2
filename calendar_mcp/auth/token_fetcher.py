"""
Token Fetcher Module

Turns a (user_id, provider) pair from a tool call into Google OAuth credentials.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from google.oauth2.credentials import Credentials
from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request as GoogleRequest

from calendar_mcp.exceptions import AuthenticationError
from calendar_mcp.utils.logger import get_logger
from calendar_mcp.utils.config import get_config
from calendar_mcp.auth.token_store import get_token_store, SUPPORTED_PROVIDERS

logger = get_logger(__name__)


def _expiry_from_epoch(expires_at: Any) -> datetime:
    # google-auth compares expiry against a naive UTC datetime
    return datetime.fromtimestamp(float(expires_at), tz=timezone.utc).replace(tzinfo=None)


def _epoch_from_expiry(expiry: datetime) -> int:
    return int(expiry.replace(tzinfo=timezone.utc).timestamp())


def build_credentials(tokens: Dict[str, Any]) -> Credentials:
    """
    Build Google credentials from a stored token entry.

    Args:
        tokens (Dict[str, Any]): access_token, refresh_token, token_type and expires_at (epoch seconds).

    Returns:
        Credentials: Credentials usable with googleapiclient.
    """
    config = get_config()

    credentials = Credentials(
        token=tokens["access_token"],
        refresh_token=tokens.get("refresh_token"),
        token_uri=config.get("google_token_uri", "https://oauth2.googleapis.com/token"),
        client_id=config.get("google_client_id") or None,
        client_secret=config.get("google_client_secret") or None,
    )

    if tokens.get("expires_at"):
        credentials.expiry = _expiry_from_epoch(tokens["expires_at"])

    return credentials


def _refresh_if_needed(credentials: Credentials, user_id: str, provider: str) -> None:
    if not credentials.expired:
        return

    if not (credentials.refresh_token and credentials.client_id and credentials.client_secret):
        logger.warning(f"Access token for user {user_id} is expired and cannot be refreshed locally")
        return

    logger.info(f"Token for user {user_id} is expired, refreshing")
    try:
        credentials.refresh(GoogleRequest())
    except RefreshError as e:
        logger.error(f"Failed to refresh token for user {user_id}: {e}")
        raise AuthenticationError(
            f"Authentication required: Please reconnect your {provider} account.",
            requires_auth=True,
        ) from e
    except TransportError as e:
        logger.error(f"Could not reach the token endpoint for user {user_id}: {e}")
        raise AuthenticationError("[AUTH_ERROR] Could not refresh credentials: token endpoint unreachable") from e

    get_token_store().store_tokens(user_id, provider, {
        "access_token": credentials.token,
        "refresh_token": credentials.refresh_token,
        "token_type": "Bearer",
        "expires_at": _epoch_from_expiry(credentials.expiry) if credentials.expiry else None,
    })
    logger.info("Token refreshed successfully")


def get_authenticated_credentials(user_id: str, provider: str) -> Credentials:
    """
    Fetch the stored tokens for a user and provider and build credentials from them.

    Args:
        user_id (str): User ID to fetch tokens for.
        provider (str): OAuth provider ("google" or "microsoft").

    Returns:
        Credentials: Authenticated credentials.

    Raises:
        AuthenticationError: If the inputs are missing, the user has not connected the provider,
            the stored entry has no access token,
            the token store cannot be opened, or a refresh cannot reach Google.
    """
    if not user_id or not provider:
        raise AuthenticationError("[AUTH_ERROR] user_id and provider are required parameters")

    if provider not in SUPPORTED_PROVIDERS:
        raise AuthenticationError(f"[AUTH_ERROR] Unsupported provider '{provider}'")

    try:
        store = get_token_store()
    except (ValueError, OSError) as e:
        logger.error(f"Token store is unavailable: {e}")
        raise AuthenticationError("[AUTH_ERROR] Token store is not configured") from e

    result = store.get_oauth_tokens(user_id, provider)

    if not result.get("success"):
        if result.get("requires_auth"):
            raise AuthenticationError(
                result.get("message") or result.get("error") or "Authentication required",
                requires_auth=True,
            )
        raise AuthenticationError(result.get("error") or "Failed to retrieve OAuth tokens")

    tokens = (result.get("tokens") or {}).get(provider)
    if not tokens or not tokens.get("access_token"):
        raise AuthenticationError(f"[AUTH_ERROR] No access token found for provider {provider}")

    credentials = build_credentials(tokens)
    _refresh_if_needed(credentials, user_id, provider)
    return credentials
