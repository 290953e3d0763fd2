"""Cookie-backed state token store."""

import logfire

from hub.config import AuthSettings
from hub.domain.repository import StateStore
from hub.domain.value import GameProvider
from hub.persistence.cookie import CookieJar, state_cookie
from hub.util.jwt import JWTError, read_payload, sign_payload


class CookieStateStore(StateStore):
    """Keeps each provider's pending state token in its own short-lived cookie."""

    def __init__(self, jar: CookieJar, auth_settings: AuthSettings) -> None:
        self.jar = jar
        self.auth_settings = auth_settings

    async def put(self, provider: GameProvider, token: str) -> None:
        max_age = self.auth_settings.state_max_age_seconds
        self.jar.set(
            state_cookie(provider.value),
            sign_payload(token, self.auth_settings, max_age_seconds=max_age),
            max_age=max_age,
        )

    async def take(self, provider: GameProvider) -> str | None:
        """Consume the token; the cookie is deleted whatever it held."""
        name = state_cookie(provider.value)
        raw = self.jar.get(name)
        self.jar.delete(name)
        if not raw:
            return None

        try:
            token = read_payload(raw, self.auth_settings)
        except JWTError as e:
            logfire.warn("State cookie rejected", provider=provider.value, error=str(e))
            return None
        return token if isinstance(token, str) else None
