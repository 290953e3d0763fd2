"""Session token domain service."""

import logfire

from hub.config import AuthSettings
from hub.domain.error import UnauthorizedError
from hub.domain.model import NormalizedIdentity, Session
from hub.util.jwt import JWTError, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Mints and reads self-contained session tokens.

    A session is bound to exactly one active identity. There is no
    revocation list: signing out discards the token client-side.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, identity: NormalizedIdentity) -> str:
        """Mint a session token for an identity.

        Args:
            identity: The identity that just completed a login flow

        Returns:
            Signed session token
        """
        with logfire.span(
            "session_service.issue",
            provider=identity.provider.value,
            provider_id=identity.provider_id,
        ):
            token = create_token(
                {
                    "sub": f"{identity.provider.value}:{identity.provider_id}",
                    "provider": identity.provider.value,
                    "provider_id": identity.provider_id,
                    "name": identity.display_name,
                    "image": identity.avatar_url,
                    "email": identity.email,
                    "access_token": identity.access_token,
                    "refresh_token": identity.refresh_token,
                },
                self.auth_settings,
            )
            logfire.info("Session issued", provider=identity.provider.value)
            return token

    def decode(self, token: str | None) -> Session | None:
        """Validate a session token without raising.

        Args:
            token: Session token from the cookie (optional)

        Returns:
            The session, or None if the token is absent, expired or invalid
        """
        if not token:
            return None

        try:
            payload = verify_token(token, self.auth_settings)
            identity = NormalizedIdentity(
                provider=payload.provider,
                provider_id=payload.provider_id,
                display_name=payload.name,
                avatar_url=payload.image,
                email=payload.email,
                access_token=payload.access_token,
                refresh_token=payload.refresh_token,
            )
        except (JWTError, ValueError) as e:
            logfire.debug("Session token rejected, treating as signed out", error=str(e))
            return None

        return Session(
            identity=identity, issued_at=payload.iat, expires_at=payload.exp
        )

    def require(self, token: str | None) -> Session:
        """Decode a session token for a protected operation.

        Raises:
            UnauthorizedError: If there is no valid session
        """
        session = self.decode(token)
        if session is None:
            raise UnauthorizedError()
        return session
