"""Cookie-backed store providers."""

from dishka import Scope, provide
from fastapi import Request

from hub.config import AuthSettings, Settings
from hub.domain.repository import (
    CredentialChannel,
    LinkedAccountStore,
    SessionTokenStore,
    StateStore,
)
from hub.persistence.cookie import CookieJar
from hub.persistence.repository import (
    CookieCredentialChannel,
    CookieLinkedAccountStore,
    CookieSessionTokenStore,
    CookieStateStore,
)
from hub.util.di.base import ProviderBase


class CookieProvider(ProviderBase):
    """Cookie storage component base."""

    __mock_component__ = "cookies"


class ProdCookieProvider(CookieProvider):
    """Production stores, all backed by the request's cookies.

    Routes resolve the same CookieJar and apply its queued writes to the
    response they return.
    """

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide
    def get_cookie_jar(self, request: Request, settings: Settings) -> CookieJar:
        """Provide the request's cookie jar."""
        return CookieJar(
            request.cookies,
            secure=settings.is_production,
            domain=settings.auth.cookie_domain,
        )

    @provide
    def get_linked_account_store(
        self, jar: CookieJar, auth_settings: AuthSettings
    ) -> LinkedAccountStore:
        """Provide linked-account ledger."""
        return CookieLinkedAccountStore(jar, auth_settings)

    @provide
    def get_state_store(self, jar: CookieJar, auth_settings: AuthSettings) -> StateStore:
        """Provide state token store."""
        return CookieStateStore(jar, auth_settings)

    @provide
    def get_credential_channel(
        self, jar: CookieJar, auth_settings: AuthSettings
    ) -> CredentialChannel:
        """Provide transient credential channel."""
        return CookieCredentialChannel(jar, auth_settings)

    @provide
    def get_session_token_store(
        self, jar: CookieJar, auth_settings: AuthSettings
    ) -> SessionTokenStore:
        """Provide session token store."""
        return CookieSessionTokenStore(jar, auth_settings)
