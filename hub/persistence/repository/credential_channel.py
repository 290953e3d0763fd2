"""Cookie-backed transient credential channel."""

import logfire
from pydantic import ValidationError

from hub.config import AuthSettings
from hub.domain.model import NormalizedIdentity
from hub.domain.repository import CredentialChannel
from hub.domain.value import GameProvider
from hub.persistence.cookie import CookieJar, credential_cookie
from hub.util.jwt import JWTError, read_payload, sign_payload


def identity_to_cookie(identity: NormalizedIdentity) -> dict:
    """Cookie payload for a verified identity.

    Token fields are only written for providers that issue tokens.
    """
    payload = {
        "id": identity.provider_id,
        "name": identity.display_name,
        "image": identity.avatar_url,
        "email": identity.email,
        "provider": identity.provider.value,
    }
    if identity.access_token:
        payload["accessToken"] = identity.access_token
    if identity.refresh_token:
        payload["refreshToken"] = identity.refresh_token
    return payload


def identity_from_cookie(payload: dict) -> NormalizedIdentity:
    """Rebuild an identity from its cookie payload.

    Raises:
        ValidationError: If the payload is incomplete
    """
    return NormalizedIdentity(
        provider=payload.get("provider"),
        provider_id=payload.get("id"),
        display_name=payload.get("name"),
        avatar_url=payload.get("image"),
        email=payload.get("email"),
        access_token=payload.get("accessToken"),
        refresh_token=payload.get("refreshToken"),
    )


class CookieCredentialChannel(CredentialChannel):
    """One ``<provider>-user`` cookie per provider, readable once."""

    def __init__(self, jar: CookieJar, auth_settings: AuthSettings) -> None:
        self.jar = jar
        self.auth_settings = auth_settings

    async def put(self, identity: NormalizedIdentity) -> None:
        max_age = self.auth_settings.transient_max_age_seconds
        self.jar.set(
            credential_cookie(identity.provider.value),
            sign_payload(
                identity_to_cookie(identity),
                self.auth_settings,
                max_age_seconds=max_age,
            ),
            max_age=max_age,
        )

    async def take(self, provider: GameProvider) -> NormalizedIdentity | None:
        """Read and erase the provider's credential cookie.

        The cookie is erased before parsing so a bad or replayed value
        cannot be presented twice.
        """
        name = credential_cookie(provider.value)
        raw = self.jar.get(name)
        if not raw:
            return None
        self.jar.delete(name)

        try:
            payload = read_payload(raw, self.auth_settings)
            if not isinstance(payload, dict):
                raise ValueError("credential payload is not an object")
            identity = identity_from_cookie(payload)
        except (JWTError, ValidationError, ValueError) as e:
            logfire.warn(
                "Transient credential rejected", provider=provider.value, error=str(e)
            )
            return None

        if identity.provider != provider:
            logfire.warn(
                "Transient credential provider mismatch",
                expected=provider.value,
                actual=identity.provider.value,
            )
            return None
        return identity
