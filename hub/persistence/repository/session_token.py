"""Cookie-backed session token store."""

from hub.config import AuthSettings
from hub.domain.repository import SessionTokenStore
from hub.persistence.cookie import SESSION_COOKIE, CookieJar


class CookieSessionTokenStore(SessionTokenStore):
    """Session token in the httpOnly ``session_token`` cookie."""

    def __init__(self, jar: CookieJar, auth_settings: AuthSettings) -> None:
        self.jar = jar
        self.auth_settings = auth_settings

    async def get(self) -> str | None:
        return self.jar.get(SESSION_COOKIE)

    async def put(self, token: str) -> None:
        self.jar.set(
            SESSION_COOKIE,
            token,
            max_age=self.auth_settings.session_expiry_days * 24 * 60 * 60,
        )

    async def clear(self) -> None:
        self.jar.delete(SESSION_COOKIE)
