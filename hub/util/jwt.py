"""JWT token utilities.

Sessions and every cookie the service writes are HS256 JWTs signed with
the session secret, so a browser can hold state it cannot forge.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from pydantic import BaseModel

from hub.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload."""

    sub: str  # "<provider>:<provider_id>"
    provider: str
    provider_id: str
    name: str | None = None
    image: str | None = None
    email: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(claims: dict[str, Any], settings: AuthSettings) -> str:
    """Create a session token.

    Args:
        claims: Identity claims (see TokenPayload)
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        "iat": now,
        "exp": now + timedelta(days=settings.session_expiry_days),
    }

    return jwt.encode(payload, settings.session_secret, algorithm=settings.session_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        raise JWTError("Malformed token payload")


def sign_payload(
    data: Any, settings: AuthSettings, max_age_seconds: int | None = None
) -> str:
    """Sign arbitrary JSON data for storage in a cookie.

    Args:
        data: JSON-serializable value
        settings: Authentication settings
        max_age_seconds: Optional lifetime enforced on read

    Returns:
        Compact JWT carrying the data under the ``data`` claim
    """
    payload: dict[str, Any] = {"data": data}
    if max_age_seconds is not None:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(seconds=max_age_seconds)

    return jwt.encode(payload, settings.session_secret, algorithm=settings.session_algorithm)


def read_payload(token: str, settings: AuthSettings) -> Any:
    """Verify a cookie signed with sign_payload and return its data.

    Raises:
        JWTError: If the signature, expiry or shape is invalid
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Payload has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid payload signature")

    if "data" not in payload:
        raise JWTError("Payload has no data claim")
    return payload["data"]
