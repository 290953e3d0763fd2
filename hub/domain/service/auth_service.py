"""Authentication domain service."""

from collections.abc import Mapping
from typing import Protocol

from hub.domain.error import ProviderNotSupportedError
from hub.domain.model import Game, LinkedAccount, NormalizedIdentity
from hub.domain.value import GameProvider

from .base import Service


class ProviderAdapter(Protocol):
    """Capability every platform integration offers.

    Login is two-phase: ``begin_login`` builds the outbound redirect and
    ``handle_callback`` turns the provider's assertion into a verified
    identity. ``fetch_catalog`` lists the games owned by a linked account.
    """

    provider: GameProvider
    # Whether begin_login expects a state token and handle_callback checks it
    uses_state: bool

    async def begin_login(self, state: str | None = None) -> str:
        """Build the provider login URL.

        Args:
            state: Anti-forgery token, for providers that support one

        Returns:
            URL to redirect the browser to
        """
        ...

    async def handle_callback(
        self, params: Mapping[str, str], stored_state: str | None = None
    ) -> NormalizedIdentity:
        """Verify the provider callback.

        Args:
            params: Callback query parameters
            stored_state: State token remembered when the flow began

        Returns:
            Verified identity

        Raises:
            DomainError: If the callback is rejected
        """
        ...

    async def fetch_catalog(self, account: LinkedAccount) -> list[Game]:
        """Fetch games owned by an account.

        Raises:
            DomainError: If the account cannot be queried
        """
        ...


class AuthService(Service):
    """Domain service for multi-provider authentication operations.

    Dispatches to the adapter registered for each provider tag.
    """

    def __init__(self, adapters: dict[GameProvider, ProviderAdapter]) -> None:
        """Initialize auth service.

        Args:
            adapters: Map of provider to adapter implementation
        """
        self.adapters = adapters

    def get_adapter(self, provider: GameProvider) -> ProviderAdapter:
        """Look up the adapter for a provider.

        Raises:
            ProviderNotSupportedError: If no adapter is registered
        """
        adapter = self.adapters.get(provider)
        if adapter is None:
            raise ProviderNotSupportedError(provider.value)
        return adapter

    def uses_state(self, provider: GameProvider) -> bool:
        """Whether the provider's flow is protected by a state token."""
        return self.get_adapter(provider).uses_state

    async def initiate_login(
        self, provider: GameProvider, state: str | None = None
    ) -> str:
        """Build the login redirect URL for any provider."""
        return await self.get_adapter(provider).begin_login(state)

    async def complete_login(
        self,
        provider: GameProvider,
        params: Mapping[str, str],
        stored_state: str | None = None,
    ) -> NormalizedIdentity:
        """Verify a provider callback and return the identity it asserts."""
        return await self.get_adapter(provider).handle_callback(params, stored_state)

    async def fetch_catalog(self, account: LinkedAccount) -> list[Game]:
        """Fetch the games owned by a linked account."""
        return await self.get_adapter(account.provider).fetch_catalog(account)
