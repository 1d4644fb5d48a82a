"""Caller identity from the Authorization header."""

from __future__ import annotations

import logging
import re
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from prioritizer_mcp.config import Settings, get_settings
from prioritizer_mcp.errors import AuthError

logger = logging.getLogger(__name__)

_BEARER_RE = re.compile(r"^Bearer\s+(.+)$")

DEMO_TOKEN_PREFIX = "dummy-token-"

_google_request: google_requests.Request | None = None


def _get_google_request() -> google_requests.Request:
    """Transport used to fetch Google's signing certificates; created once and reused."""
    global _google_request
    if _google_request is None:
        _google_request = google_requests.Request()
    return _google_request


def _bearer_token(authorization_header: str | None) -> str | None:
    if not authorization_header:
        return None
    match = _BEARER_RE.match(authorization_header)
    return match.group(1) if match else None


def _verify_google_token(token: str, client_id: str) -> dict[str, Any]:
    try:
        return id_token.verify_oauth2_token(token, _get_google_request(), audience=client_id)
    except (ValueError, GoogleAuthError) as e:
        raise AuthError(f"Token verification failed: {e}") from e


def validate_token(authorization_header: str | None, settings: Settings | None = None) -> str:
    """
    Validate an Authorization header and return the caller's user ID.

    Supports two modes:
    1. Google ID tokens, verified against Google's public keys with the
       configured GOOGLE_CLIENT_ID as audience. The user ID is the 'sub' claim.
    2. Demo tokens of the form "dummy-token-{userId}", accepted only when
       DEMO_MODE is on.

    Args:
        authorization_header: Header value, e.g. "Bearer <token>"
        settings: Settings to use (defaults to the process settings)

    Returns:
        The caller's user ID

    Raises:
        AuthError: If the header is missing or malformed, or the token is rejected
    """
    if not authorization_header:
        raise AuthError("Missing Authorization header")

    token = _bearer_token(authorization_header)
    if token is None:
        raise AuthError("Invalid Authorization header format")

    settings = settings or get_settings()

    if settings.demo_mode:
        user_id = extract_user_id_from_token(authorization_header)
        if user_id is None:
            raise AuthError("Invalid demo token format")
        return user_id

    if not settings.google_client_id:
        raise AuthError("GOOGLE_CLIENT_ID not configured")

    payload = _verify_google_token(token, settings.google_client_id)

    user_id = payload.get("sub")
    if not user_id:
        raise AuthError("Token verification failed: Token missing user ID (sub claim)")

    if not payload.get("email_verified"):
        logger.warning("Google account email not verified for user %s", user_id)

    return str(user_id)


def extract_user_id_from_token(authorization_header: str | None) -> str | None:
    """
    Extract the user ID from a demo token without any verification.

    Returns None for a missing or malformed header and for real (non-demo)
    tokens, which cannot be read without verification.
    """
    token = _bearer_token(authorization_header)
    if token is None or not token.startswith(DEMO_TOKEN_PREFIX):
        return None
    return token[len(DEMO_TOKEN_PREFIX) :] or None
