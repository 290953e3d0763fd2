"""Mock cookie storage providers for testing."""

from dishka import Scope, provide

from hub.domain.repository import (
    CredentialChannel,
    LinkedAccountStore,
    SessionTokenStore,
    StateStore,
)
from hub.persistence.repository.inmemory import (
    InMemoryCredentialChannel,
    InMemoryLinkedAccountStore,
    InMemorySessionTokenStore,
    InMemoryStateStore,
)
from hub.util.di.infrastructure.cookies import CookieProvider


class MockCookieProvider(CookieProvider):
    """In-memory stores instead of cookies.

    Uses REQUEST scope to ensure test isolation - each test gets fresh stores.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_linked_account_store(self) -> LinkedAccountStore:
        """Provide in-memory ledger."""
        return InMemoryLinkedAccountStore()

    @provide(scope=Scope.REQUEST)
    def get_state_store(self) -> StateStore:
        """Provide in-memory state store."""
        return InMemoryStateStore()

    @provide(scope=Scope.REQUEST)
    def get_credential_channel(self) -> CredentialChannel:
        """Provide in-memory credential channel."""
        return InMemoryCredentialChannel()

    @provide(scope=Scope.REQUEST)
    def get_session_token_store(self) -> SessionTokenStore:
        """Provide in-memory session token store."""
        return InMemorySessionTokenStore()
